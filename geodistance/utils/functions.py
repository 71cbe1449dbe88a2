"""Module for miscellaneous multi-use functions"""

__all__ = ['is_finite', 'round_half_up']


def is_finite(value: float) -> bool:
    """
    Test whether a float is neither NaN nor +/- infinity.

    Relies on IEEE-754 semantics: inf - inf and nan - nan are both nan, and
    nan never compares equal to anything.
    """
    return value - value == 0


def round_half_up(value: float, precision: int) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The number of decimal places to round to

    """
    return round(value + 10 ** -(precision + 12), precision)
