"""Module for miscellaneous multi-use functions"""

__all__ = ['clamp', 'clamp_latitude']

from mapprojection._const import MAX_LATITUDE
from mapprojection.utils.logging import LOGGER


def clamp(value: float, lower: float, upper: float) -> float:
    """
    Restricts a value to the closed interval [lower, upper].

    Args:
        value:
            The value to be restricted

        lower:
            The minimum permitted value

        upper:
            The maximum permitted value

    Returns:
        float
    """
    return max(min(value, upper), lower)


def clamp_latitude(latitude: float) -> float:
    """Restricts a latitude to the range Mercator can represent"""
    clamped = clamp(latitude, -MAX_LATITUDE, MAX_LATITUDE)
    if clamped != latitude:
        LOGGER.debug('Latitude %s clamped to %s', latitude, clamped)

    return clamped
