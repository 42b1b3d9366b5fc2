"""Half-up rounding used at every presentation boundary."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero (0.5 -> 1, 2.5 -> 3, 1.005 -> 1.01).

    Python's built-in ``round`` uses banker's rounding, which would make
    values such as 62.5 g of fat round down. The value is rounded on its
    shortest decimal representation, so binary float noise such as
    ``1.005 == 1.00499999...`` does not push a written half downwards.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        float: Rounded value

    Example:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(177.8001, 2)
        177.8
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_half_up_int(value: float) -> int:
    """Round half-up to the nearest integer.

    Args:
        value: Number to round

    Returns:
        int: Rounded integer
    """
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
