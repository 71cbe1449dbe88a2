"""
Distance reports: the source/target/distance document served to callers, and the
parsing of the query parameters it is requested with.
"""

__all__ = ['DistanceReport', 'QUERY_PARAMS', 'parse_query', 'report_from_query']

import json
from typing import Any, Dict, Mapping, Sequence, Tuple, Union

from geodistance._const import COORDINATE_PRECISION, DISTANCE_PRECISION
from geodistance.conversion import convert_from_meters
from geodistance.coordinates import GeoPoint
from geodistance.exceptions import InvalidCoordinate
from geodistance.geodesic import distance_meters
from geodistance.utils.functions import round_half_up

QUERY_PARAMS = ('lat1', 'lon1', 'lat2', 'lon2')


class DistanceReport:
    """
    The distance between two points, with the unit conversions and display
    rounding callers are promised.

    Args:
        source:
            The first point

        target:
            The second point

        meters:
            The distance between them, in meters
    """

    __slots__ = ('source', 'target', 'meters')

    def __init__(self, source: GeoPoint, target: GeoPoint, meters: float):
        self.source = source
        self.target = target
        self.meters = meters

    def __eq__(self, other):
        if not isinstance(other, DistanceReport):
            return False

        return (
            self.source == other.source and
            self.target == other.target and
            self.meters == other.meters
        )

    def __repr__(self):
        return f'<DistanceReport({self.source!r} -> {self.target!r}, {self.meters} m)>'

    @classmethod
    def from_points(cls, source: GeoPoint, target: GeoPoint) -> 'DistanceReport':
        """Computes the distance between two points and wraps it in a report"""
        return cls(source, target, distance_meters(source, target))

    @property
    def dist_km(self) -> float:
        """The distance in kilometers, rounded for display"""
        return round_half_up(convert_from_meters(self.meters, 'km'), DISTANCE_PRECISION)

    @property
    def dist_mi(self) -> float:
        """The distance in US survey miles, rounded for display"""
        return round_half_up(convert_from_meters(self.meters, 'mi'), DISTANCE_PRECISION)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source': self.source.rounded(COORDINATE_PRECISION).to_dict(),
            'target': self.target.rounded(COORDINATE_PRECISION).to_dict(),
            'dist_km': self.dist_km,
            'dist_mi': self.dist_mi,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), allow_nan=False)


def _single_value(query: Mapping[str, Union[str, Sequence[str]]], param: str) -> str:
    values = query.get(param)
    if isinstance(values, str):
        values = [values]

    if not values or len(values) != 1:
        raise InvalidCoordinate(f'expected exactly one value for {param!r}')

    return values[0]


def parse_query(query: Mapping[str, Union[str, Sequence[str]]]) -> Tuple[GeoPoint, GeoPoint]:
    """
    Parses a pair of points from query parameters, as produced by
    urllib.parse.parse_qs (parameter name -> list of values).

    Each of lat1, lon1, lat2 and lon2 must be present exactly once.

    Args:
        query:
            A mapping of parameter names to their values

    Raises:
        InvalidCoordinate: if a parameter is missing, repeated, unparseable, or
            out of range

    Returns:
        Tuple of (source, target) GeoPoints
    """
    lat1, lon1, lat2, lon2 = (_single_value(query, param) for param in QUERY_PARAMS)
    return GeoPoint(lat1, lon1), GeoPoint(lat2, lon2)


def report_from_query(query: Mapping[str, Union[str, Sequence[str]]]) -> DistanceReport:
    """Parses a pair of points from query parameters and reports the distance between them"""
    return DistanceReport.from_points(*parse_query(query))
