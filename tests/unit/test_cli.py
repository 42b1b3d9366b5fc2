"""Unit tests for the interactive command-line calculator."""

import json

import structlog

from calorie_calculator.cli import build_parser, run
from calorie_calculator.infrastructure.config import GAIN_SURPLUS_ENV

SCENARIO_A_INPUT = [
    "30", "male", "175", "70", "maintain", "moderate",
    "skip", "80", "desk", "8", "medium",
]


def _inputs(*answers):
    """Input function replaying answers, then raising EOFError like a closed stdin."""
    replies = iter(answers)
    prompts = []

    def input_fn(prompt):
        prompts.append(prompt)
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    return input_fn, prompts


class TestRun:
    """Test the questionnaire loop and result output."""

    def setup_method(self):
        """Set up test fixtures."""
        self.output = []

    def teardown_method(self):
        """Restore structlog defaults."""
        structlog.reset_defaults()

    def _run(self, argv, *answers):
        input_fn, prompts = _inputs(*answers)
        code = run(argv, input_fn=input_fn, output=self.output.append)
        return code, prompts

    def test_scenario_a(self):
        """Test a full metric run prints the report."""
        code, _ = self._run([], *SCENARIO_A_INPUT)

        text = "\n".join(self.output)
        assert code == 0
        assert "[1/11] How old are you?" in self.output
        assert "BMR (Base Metabolic Rate): 1649 calories (Mifflin-St Jeor)" in text
        assert "Goal Calories: 2556 calories (To maintain weight)" in text
        assert "⚠️" not in text

    def test_rejected_answer_is_asked_again(self):
        """Test an invalid age prints the error and repeats the question."""
        code, _ = self._run([], "10", *SCENARIO_A_INPUT)

        assert code == 0
        assert "❌ Please enter a valid age (13-120 years)" in self.output
        assert self.output.count("[1/11] How old are you?") == 2

    def test_confirmation_accepted(self):
        """Test an unusual age is kept after answering yes."""
        code, prompts = self._run([], "14", "y", *SCENARIO_A_INPUT[1:])

        assert code == 0
        assert prompts[1].endswith("Use it anyway? [y/N] ")
        assert "Age: 14 years" in "\n".join(self.output)

    def test_confirmation_declined(self):
        """Test declining asks the question again."""
        code, _ = self._run([], "14", "n", *SCENARIO_A_INPUT)

        assert code == 0
        assert "Age: 30 years" in "\n".join(self.output)

    def test_back_command(self):
        """Test going back re-asks the previous question."""
        code, _ = self._run([], "30", "back", "31", *SCENARIO_A_INPUT[1:])

        assert code == 0
        assert "Age: 31 years" in "\n".join(self.output)

    def test_imperial_units(self):
        """Test imperial answers are converted to metric."""
        answers = [
            "30", "male", "5", "10", "154", "maintain", "moderate",
            "", "32", "desk", "8", "medium",
        ]

        code, prompts = self._run(["--imperial"], *answers)

        text = "\n".join(self.output)
        assert code == 0
        assert "inches> " in prompts
        assert "Height: 178cm" in text
        assert "Waist: 81cm" in text

    def test_quit(self):
        """Test quit aborts with exit code 1."""
        code, _ = self._run([], "30", "quit")

        assert code == 1
        assert self.output[-1] == "Aborted."

    def test_end_of_input(self):
        """Test closed input aborts."""
        code, _ = self._run([], "30", "male")

        assert code == 1
        assert self.output[-1] == "Aborted."

    def test_implausible_result(self):
        """Test an engine error is printed and fails the run."""
        answers = list(SCENARIO_A_INPUT)
        answers[3:4] = ["400", "y"]

        code, _ = self._run([], *answers)

        assert code == 1
        assert self.output[-1].startswith("❌ Calculated BMR 4949 kcal")

    def test_configuration_error(self, monkeypatch):
        """Test invalid environment exits with code 2."""
        monkeypatch.setenv(GAIN_SURPLUS_ENV, "900")

        code, prompts = self._run([])

        assert code == 2
        assert self.output[0].startswith("❌ Configuration error")
        assert prompts == []

    def test_exports(self, tmp_path):
        """Test JSON and report files are written."""
        json_path = tmp_path / "results.json"
        report_path = tmp_path / "report.txt"

        code, _ = self._run(
            ["--json", str(json_path), "--report", str(report_path)], *SCENARIO_A_INPUT
        )

        assert code == 0
        data = json.loads(json_path.read_text(encoding="utf-8"))
        assert data["results"]["bmr"]["value"] == 1648.75
        assert report_path.read_text(encoding="utf-8").startswith("Calorie Calculator Results")
        assert f"✅ JSON export written to {json_path}" in self.output

    def test_json_export_to_missing_directory(self, tmp_path):
        """Test an unwritable JSON path is reported instead of raising."""
        json_path = tmp_path / "missing" / "results.json"

        code, _ = self._run(["--json", str(json_path)], *SCENARIO_A_INPUT)

        assert code == 1
        assert self.output[-1].startswith("❌ Export failed")
        assert not json_path.exists()

    def test_report_to_missing_directory(self, tmp_path):
        """Test an unwritable report path is reported instead of raising."""
        report_path = tmp_path / "missing" / "report.txt"

        code, _ = self._run(["--report", str(report_path)], *SCENARIO_A_INPUT)

        assert code == 1
        assert self.output[-1].startswith("❌ Export failed")


class TestBuildParser:
    """Test argument parsing."""

    def test_log_level_is_case_insensitive(self):
        """Test lower-case level names are accepted."""
        args = build_parser().parse_args(["--log-level", "debug"])

        assert args.log_level == "DEBUG"

    def test_defaults(self):
        """Test defaults."""
        args = build_parser().parse_args([])

        assert args.imperial is False
        assert args.json is None
        assert args.report is None
        assert args.log_level is None
