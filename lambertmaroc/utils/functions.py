"""Module for miscellaneous multi-use functions"""

__all__ = ['dms_to_dd', 'dd_to_dms', 'round_half_up']

from typing import Tuple


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def dms_to_dd(degrees: float, minutes: float = 0., seconds: float = 0.) -> float:
    """
    Converts a signed degrees/minutes/seconds angle to decimal degrees. The sign is taken
    from the degrees component, so (-5, 24, 0) is -5.4.

    Args:
        degrees:
            Whole degrees, carrying the sign of the angle

        minutes:
            Arc minutes (unsigned)

        seconds:
            Arc seconds (unsigned)

    Returns:
        float
    """
    sign = -1 if degrees < 0 else 1
    return sign * (abs(degrees) + minutes / 60 + seconds / 3600)


def dd_to_dms(dd: float, precision: int = 5) -> Tuple[int, int, float]:
    """Converts an unsigned decimal degree to (degrees, minutes, seconds)"""
    minutes, seconds = divmod(abs(dd) * 3600, 60)
    degrees, minutes = divmod(minutes, 60)
    return int(degrees), int(minutes), round_half_up(seconds, precision)
