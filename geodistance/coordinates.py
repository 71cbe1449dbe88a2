"""
Representation of a specific point on earth
"""

__all__ = ['GeoPoint']

from typing import Dict, Tuple, Union

from geodistance._const import COORDINATE_PRECISION
from geodistance.exceptions import InvalidCoordinate
from geodistance.geodesic import distance_meters
from geodistance.utils.functions import round_half_up


def _parse_degrees(value: Union[float, int, str], name: str, bound: float) -> float:
    try:
        degrees = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinate(f'{name} {value!r} is not a number') from exc

    # NaN fails the comparison
    if not abs(degrees) <= bound:
        raise InvalidCoordinate(f'{name} {degrees} must be within [-{bound:g}, {bound:g}]')

    return degrees


class GeoPoint:
    """
    An immutable latitude/longitude pair, in decimal degrees.

    Unlike positions that wrap across the poles or the antimeridian, a GeoPoint
    rejects out-of-range values outright.

    Args:
        latitude:
            The latitude, within [-90, 90]

        longitude:
            The longitude, within [-180, 180]

    Raises:
        InvalidCoordinate: if either value is unparseable or out of range
    """

    __slots__ = ('latitude', 'longitude')

    latitude: float
    longitude: float

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        object.__setattr__(self, 'latitude', _parse_degrees(latitude, 'latitude', 90))
        object.__setattr__(self, 'longitude', _parse_degrees(longitude, 'longitude', 180))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, key):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    def distance_to(self, other: 'GeoPoint') -> float:
        """The Andoyer-Lambert distance in meters from this point to another"""
        return distance_meters(self, other)

    def rounded(self, precision: int = COORDINATE_PRECISION) -> 'GeoPoint':
        """
        Returns a copy of this point with both values rounded half-up.

        Args:
            precision: (int) (Default 8)
                The number of decimal places to keep

        Returns:
            GeoPoint
        """
        return GeoPoint(
            round_half_up(self.latitude, precision),
            round_half_up(self.longitude, precision),
        )

    def to_dict(self) -> Dict[str, float]:
        """Converts the point to a {'lat': ..., 'lon': ...} mapping"""
        return {'lat': self.latitude, 'lon': self.longitude}

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude)

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple of (latitude, longitude)
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude
