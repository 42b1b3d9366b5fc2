"""Entry point for ``python -m calorie_calculator``."""

from calorie_calculator.cli import main

if __name__ == "__main__":
    main()
