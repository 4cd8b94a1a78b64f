"""
Constants declarations for mapprojection
"""
import math

from mapprojection.geometry import Point, Rect, Size

# Spherical Mercator radius; the WGS84 major axis (meters)
EARTH_RADIUS_METERS = 6378137.0

# Mercator diverges at the poles
MAX_LATITUDE = 85.0

# Keeps log((1 + s) / (1 - s)) finite
MAX_SINE = 1 - 1e-15

TILE_SIZE = 256

# Zoom level of the pixel space used by map points
REFERENCE_ZOOM = 20

_HALF_EXTENT = EARTH_RADIUS_METERS * math.pi

WORLD_BOUNDS_METERS = Rect(
    Point(-_HALF_EXTENT, -_HALF_EXTENT),
    Size(_HALF_EXTENT * 2, _HALF_EXTENT * 2)
)
WORLD_SIZE_METERS = WORLD_BOUNDS_METERS.size
