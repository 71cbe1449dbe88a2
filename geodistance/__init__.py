
import sys

from geodistance._version import __version__  # noqa: F401
from geodistance.utils.logging import LOGGER
from geodistance.coordinates import GeoPoint
from geodistance.exceptions import GeodistanceError, InvalidCoordinate
from geodistance.geodesic import WGS84, Ellipsoid, andoyer_distance, distance_meters
from geodistance.report import DistanceReport
from geodistance.utils.conditional_imports import ConditionalPackageInterceptor


ConditionalPackageInterceptor.permit_packages(
    {
        'fastapi': 'geodistance[api]',
    }
)
sys.meta_path.append(ConditionalPackageInterceptor)  # type: ignore

__all__ = [
    'DistanceReport',
    'Ellipsoid',
    'GeoPoint',
    'GeodistanceError',
    'InvalidCoordinate',
    'WGS84',
    'andoyer_distance',
    'distance_meters',
    'LOGGER',
]
