"""
Module for unit conversions
"""
__all__ = ['DistanceUnit', 'convert_from_meters', 'convert_to_meters']

from typing import Literal

from pydantic import validate_call

from geodistance._const import METERS_PER_KILOMETER, METERS_PER_MILE

DistanceUnit = Literal['m', 'km', 'mi']

_METERS_PER_UNIT = {
    'm': 1.0,
    'km': METERS_PER_KILOMETER,
    'mi': METERS_PER_MILE,
}


@validate_call
def convert_to_meters(distance: float, unit: DistanceUnit) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (meter = 'm', kilometer = 'km', US survey mile = 'mi').

    Raises:
        ValueError: if the unit is not recognized

    Returns:
        float: The distance in meters.
    """
    return distance * _METERS_PER_UNIT[unit]


@validate_call
def convert_from_meters(distance: float, unit: DistanceUnit) -> float:
    """
    Converts a distance in meters to another unit.

    Args:
        distance (float): The distance in meters.
        unit (str): The target unit (meter = 'm', kilometer = 'km', US survey mile = 'mi').

    Raises:
        ValueError: if the unit is not recognized

    Returns:
        float: The distance in the target unit.
    """
    return distance / _METERS_PER_UNIT[unit]
