"""Size comparison helpers."""

DEFAULT_DROP_PERCENT = 5


def is_percent_drop(actual: int, expected: int, percent: int) -> bool:
    """Check whether actual fell by at least `percent` percent of expected.

    Integer arithmetic keeps the boundary exact: a drop of exactly
    `percent` percent counts. A zero expected value never counts as a drop.
    """
    if expected <= 0:
        return False
    return (expected - actual) * 100 >= percent * expected


def greater_than_or_equal_to_5_percent_drop(actual: int, expected: int) -> bool:
    """True if actual is 5% or more below expected."""
    return is_percent_drop(actual, expected, DEFAULT_DROP_PERCENT)
