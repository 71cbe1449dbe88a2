"""
Constants declarations for geodistance
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Unit lengths, in meters
METERS_PER_KILOMETER = 1000.0
METERS_PER_MILE = (1200.0 / 3937.0) * 5280.0  # US survey mile

# Display precision (decimal places)
COORDINATE_PRECISION = 8
DISTANCE_PRECISION = 2
