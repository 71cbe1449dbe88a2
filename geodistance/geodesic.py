"""
Ellipsoidal distance calculations.

Distances are computed with the Andoyer-Lambert approximation, a closed-form
first-order flattening correction to the spherical great-circle distance. It is
accurate to within a few meters over continental distances and needs no
iteration, so unlike Vincenty's method it cannot fail to converge.
"""

from __future__ import annotations

__all__ = ['Ellipsoid', 'WGS84', 'andoyer_distance', 'distance_meters']

import math
from typing import TYPE_CHECKING, NamedTuple

from geodistance._const import WGS84_A, WGS84_F
from geodistance.exceptions import InvalidCoordinate
from geodistance.utils.functions import is_finite
from geodistance.utils.logging import LOGGER

if TYPE_CHECKING:
    from geodistance.coordinates import GeoPoint

_DEG_TO_RAD = math.pi / 180


class Ellipsoid(NamedTuple):
    """An oblate reference ellipsoid"""
    a: float  # Equatorial radius (meters)
    f: float  # Flattening

    @property
    def b(self) -> float:
        """Polar radius (meters)"""
        return self.a * (1 - self.f)

    @property
    def meridian_half_perimeter(self) -> float:
        """
        Half the circumference of a meridian ellipse, which is the length of the
        geodesic between two antipodal points.

        Uses Ramanujan's second approximation for the perimeter of an ellipse,
        pi * (a + b) * (1 + 3h / (10 + sqrt(4 - 3h))), where h = ((a - b) / (a + b))**2.
        """
        # Includes the factor pi, unlike the bare (a + b) / 2 series term the
        # original service returned, so the value is a length along the meridian
        t = 3 * (self.f / (2 - self.f)) ** 2
        return math.pi * self.a * (1 - self.f / 2) * (1 + t / (10 + math.sqrt(4 - t)))


WGS84 = Ellipsoid(WGS84_A, WGS84_F)


def _validate(lat1: float, lon1: float, lat2: float, lon2: float) -> None:
    """Raises InvalidCoordinate if any value is out of range (or NaN)"""
    for lat in (lat1, lat2):
        if not abs(lat) <= 90:
            raise InvalidCoordinate(f'latitude {lat} must be within [-90, 90]')

    for lon in (lon1, lon2):
        if not abs(lon) <= 180:
            raise InvalidCoordinate(f'longitude {lon} must be within [-180, 180]')


def _resolve_degenerate(
    distance: float,
    ratio: float,
    omega: float,
    ellipsoid: Ellipsoid,
) -> float:
    """
    Picks the returned distance once the Andoyer-Lambert terms have been evaluated.

    A non-finite distance with a finite S*C/omega ratio means either the points
    are antipodal, or they are so close that S**2 underflowed. The half central
    angle omega tells the two apart; for the latter the spherical distance
    2 * a * omega is returned. A non-finite ratio (0/0) means they coincide.
    """
    if is_finite(distance):
        return distance

    if is_finite(ratio):
        if omega <= math.pi / 4:
            LOGGER.debug('Nearly coincident points; using spherical distance')
            return 2 * ellipsoid.a * omega

        LOGGER.debug('Antipodal points; using meridian half-perimeter')
        return ellipsoid.meridian_half_perimeter

    LOGGER.debug('Coincident points; distance is zero')
    return 0.0


def _ieee_div(numerator: float, denominator: float) -> float:
    """Float division that yields inf/nan on a zero denominator instead of raising"""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)

    return numerator / denominator


def andoyer_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    ellipsoid: Ellipsoid = WGS84,
) -> float:
    """
    Calculate the distance in meters between two points on an ellipsoid using the
    Andoyer-Lambert formula.

    Args:
        lat1:
            Latitude of the first point, in degrees

        lon1:
            Longitude of the first point, in degrees

        lat2:
            Latitude of the second point, in degrees

        lon2:
            Longitude of the second point, in degrees

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Raises:
        InvalidCoordinate: if |latitude| > 90 or |longitude| > 180 for either point

    Returns:
        (float) the distance in meters; always finite and non-negative
    """
    _validate(lat1, lon1, lat2, lon2)
    a, f = ellipsoid

    phi1, lambda1 = lat1 * _DEG_TO_RAD, lon1 * _DEG_TO_RAD
    phi2, lambda2 = lat2 * _DEG_TO_RAD, lon2 * _DEG_TO_RAD

    F = (phi1 + phi2) / 2
    G = (phi1 - phi2) / 2
    L = (lambda1 - lambda2) / 2

    sinF, cosF = math.sin(F), math.cos(F)
    sinG, cosG = math.sin(G), math.cos(G)
    sinL, cosL = math.sin(L), math.cos(L)

    S = math.hypot(sinG * cosL, cosF * sinL)
    C = math.hypot(cosG * cosL, sinF * sinL)
    omega = math.atan2(S, C)
    D = 2 * a * omega

    R = _ieee_div(S * C, omega)
    H1 = _ieee_div(3 * R - 1, 2 * C * C)
    H2 = _ieee_div(3 * R + 1, 2 * S * S)
    d = D * (1 + f * (H1 * (sinF * cosG) ** 2 - H2 * (cosF * sinG) ** 2))

    return _resolve_degenerate(d, R, omega, ellipsoid)


def distance_meters(point1: GeoPoint, point2: GeoPoint, ellipsoid: Ellipsoid = WGS84) -> float:
    """Calculate the Andoyer-Lambert distance in meters between two GeoPoints"""
    return andoyer_distance(
        point1.latitude, point1.longitude,
        point2.latitude, point2.longitude,
        ellipsoid,
    )
