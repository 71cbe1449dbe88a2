import math

import numpy as np
import pytest
from pytest import approx

from geodistance import GeoPoint, InvalidCoordinate
from geodistance._const import WGS84_A
from geodistance.geodesic import *
from geodistance.geodesic import _resolve_degenerate

# Half the WGS84 meridian circumference, i.e. the pole-to-pole geodesic
HALF_MERIDIAN = 20_003_931.46


def test_ellipsoid():
    assert WGS84.a == 6378137.0
    assert WGS84.f == approx(1 / 298.257223563)
    assert WGS84.b == approx(6_356_752.314245, abs=1e-6)
    assert WGS84.meridian_half_perimeter == approx(HALF_MERIDIAN, abs=0.05)

    # A sphere's meridian is a circle
    sphere = Ellipsoid(6_371_000.0, 0.0)
    assert sphere.meridian_half_perimeter == approx(math.pi * 6_371_000.0, rel=1e-12)

    with pytest.raises(AttributeError):
        WGS84.a = 1.


def test_andoyer_distance_reference():
    # Lizard Point to John o' Groats; Vincenty gives 969,954.166 m
    actual = andoyer_distance(50.06639, -5.71472, 58.64389, -3.07)
    assert actual == approx(969_954, rel=1e-4)
    assert actual == approx(968_853, rel=2e-3)


def test_andoyer_distance_sphere():
    # With no flattening the formula reduces to the great-circle distance
    sphere = Ellipsoid(6_371_000.0, 0.0)
    assert andoyer_distance(0., 0., 0., 90., sphere) == approx(6_371_000.0 * math.pi / 2, rel=1e-12)
    assert andoyer_distance(0., 0., 45., 0., sphere) == approx(6_371_000.0 * math.pi / 4, rel=1e-12)


def test_andoyer_distance_coincident():
    assert andoyer_distance(0., 0., 0., 0.) == 0.
    assert andoyer_distance(51.5, -0.12, 51.5, -0.12) == 0.
    assert andoyer_distance(90., 0., 90., 0.) == 0.
    assert andoyer_distance(-33.9, 151.2, -33.9, 151.2) == 0.


def test_andoyer_distance_antipodal():
    # Pole to pole follows a meridian
    actual = andoyer_distance(90., 0., -90., 0.)
    assert math.isfinite(actual)
    assert actual == approx(HALF_MERIDIAN, rel=1e-5)

    # Across the equator the formula collapses to half the equator
    actual = andoyer_distance(0., 0., 0., 180.)
    assert actual == approx(math.pi * WGS84_A, rel=1e-12)
    assert actual == approx(HALF_MERIDIAN, rel=2e-3)


def test_resolve_degenerate():
    half_pi = math.pi / 2
    assert _resolve_degenerate(1234.5, 0.6, 0.1, WGS84) == 1234.5
    assert _resolve_degenerate(0., 0.6, 0., WGS84) == 0.

    # Non-finite distance with a finite ratio and a wide angle -> antipodal points
    assert _resolve_degenerate(math.inf, 0.6, half_pi, WGS84) == WGS84.meridian_half_perimeter
    assert _resolve_degenerate(-math.inf, 0.6, half_pi, WGS84) == WGS84.meridian_half_perimeter
    assert _resolve_degenerate(math.nan, 0.6, half_pi, WGS84) == WGS84.meridian_half_perimeter

    # ...and a tiny angle -> nearly coincident points, spherical distance
    assert _resolve_degenerate(math.nan, 1., 1e-200, WGS84) == 2 * WGS84.a * 1e-200

    # Non-finite distance and ratio -> coincident points
    assert _resolve_degenerate(math.nan, math.nan, 0., WGS84) == 0.
    assert _resolve_degenerate(math.nan, math.inf, 0., WGS84) == 0.


def test_andoyer_distance_nearly_coincident():
    # S**2 underflows to zero here, leaving the correction term nan
    tiny = andoyer_distance(0., 0., 1e-200, 0.)
    assert 0. <= tiny < 1e-150
    assert tiny <= andoyer_distance(0., 0., 1e-10, 0.)

    assert 0. < andoyer_distance(0., 30., -1e-200, 30.) < 1e-150


def test_andoyer_distance_fallback_logging(caplog):
    caplog.set_level('DEBUG', logger='geodistance')
    andoyer_distance(10., 10., 10., 10.)
    assert 'Coincident points' in caplog.text


@pytest.mark.parametrize('lat1,lon1,lat2,lon2', [
    (90.0000001, 0., 0., 0.),
    (-90.0000001, 0., 0., 0.),
    (0., 0., 90.0000001, 0.),
    (0., 180.0000001, 0., 0.),
    (0., 0., 0., 180.0000001),
    (0., 0., 0., -180.0000001),
    (math.nan, 0., 0., 0.),
    (0., 0., 0., math.nan),
    (0., math.inf, 0., 0.),
])
def test_andoyer_distance_invalid(lat1, lon1, lat2, lon2):
    with pytest.raises(InvalidCoordinate):
        andoyer_distance(lat1, lon1, lat2, lon2)


def test_andoyer_distance_bounds():
    assert andoyer_distance(90., 180., -90., -180.) > 0
    assert andoyer_distance(0., 180., 0., -180.) == approx(0., abs=1e-6)


def test_andoyer_distance_properties():
    rng = np.random.default_rng(84)
    lats = rng.uniform(-90, 90, size=(500, 2))
    lons = rng.uniform(-180, 180, size=(500, 2))

    for (lat1, lat2), (lon1, lon2) in zip(lats.tolist(), lons.tolist()):
        forward = andoyer_distance(lat1, lon1, lat2, lon2)
        assert math.isfinite(forward)
        assert 0 <= forward <= math.pi * WGS84_A
        assert andoyer_distance(lat2, lon2, lat1, lon1) == forward
        assert andoyer_distance(lat1, lon1, lat1, lon1) == 0.


def test_andoyer_distance_monotonic():
    # Walk north along a meridian from the south pole to the north pole
    distances = [andoyer_distance(-90., 0., lat, 0.) for lat in np.linspace(-89.5, 90., 360)]
    assert all(b > a for a, b in zip(distances, distances[1:]))
    assert distances[-1] == approx(HALF_MERIDIAN, rel=1e-5)

    distances = [andoyer_distance(0., 30., lat, 30.) for lat in np.linspace(0.25, 89.75, 359)]
    assert all(b > a for a, b in zip(distances, distances[1:]))


def test_distance_meters():
    p1, p2 = GeoPoint(50.06639, -5.71472), GeoPoint(58.64389, -3.07)
    assert distance_meters(p1, p2) == andoyer_distance(50.06639, -5.71472, 58.64389, -3.07)
    assert distance_meters(p1, p1) == 0.
