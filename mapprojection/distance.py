"""
Great-circle distance calculations.

Supports switching between the spherical law of cosines, the haversine formula (both on a
sphere of the Mercator radius) and Karney's geodesic on the WGS84 ellipsoid.
"""

__all__ = [
    'DistanceMethod', 'haversine_distance', 'meters_between_coordinates',
    'meters_between_map_points', 'precise_great_circle_distance',
    'spherical_law_of_cosines_distance',
]

from enum import Enum
import math
from typing import Union

from geographiclib.geodesic import Geodesic

from mapprojection._const import EARTH_RADIUS_METERS
from mapprojection.coordinates import GeoCoordinate
from mapprojection.geometry import Point
from mapprojection.projection import coordinate_for_map_point
from mapprojection.utils.functions import clamp


class DistanceMethod(Enum):
    """The algorithm used to measure the distance between two points"""
    SPHERICAL_LAW_OF_COSINES = 'spherical_law_of_cosines'
    HAVERSINE = 'haversine'
    PRECISE_GREAT_CIRCLE = 'precise_great_circle'


def spherical_law_of_cosines_distance(coord1: GeoCoordinate, coord2: GeoCoordinate) -> float:
    """
    Calculate distance using the spherical law of cosines. Cheap, but loses precision
    for points closer than a few meters.
    """
    if coord1 == coord2:
        return 0.0

    lat1, lat2 = math.radians(coord1.latitude), math.radians(coord2.latitude)
    dlon = math.radians(coord2.longitude - coord1.longitude)

    cos_angle = (
        math.sin(lat1) * math.sin(lat2) +
        math.cos(lat1) * math.cos(lat2) * math.cos(dlon)
    )

    # Rounding can push identical or antipodal points slightly past +/-1
    return EARTH_RADIUS_METERS * math.acos(clamp(cos_angle, -1., 1.))


def haversine_distance(coord1: GeoCoordinate, coord2: GeoCoordinate) -> float:
    """Calculate distance using the Haversine formula (spherical earth)."""
    lat1, lat2 = math.radians(coord1.latitude), math.radians(coord2.latitude)
    dlat = math.radians(coord2.latitude - coord1.latitude)
    dlon = math.radians(coord2.longitude - coord1.longitude)

    a = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2)
    # Antipodal points can round past 1
    a = min(a, 1.)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_METERS * c


def precise_great_circle_distance(coord1: GeoCoordinate, coord2: GeoCoordinate) -> float:
    """
    Calculate distance using Karney's algorithm (via geographiclib) on the WGS84 ellipsoid.
    Robust against antipodal points and convergence failures.
    """
    # Inverse returns a dict with 's12' (distance in meters), 'azi1', etc.
    res = Geodesic.WGS84.Inverse(
        coord1.latitude, coord1.longitude,
        coord2.latitude, coord2.longitude
    )
    return res['s12']


_ALGORITHMS = {
    DistanceMethod.SPHERICAL_LAW_OF_COSINES: spherical_law_of_cosines_distance,
    DistanceMethod.HAVERSINE: haversine_distance,
    DistanceMethod.PRECISE_GREAT_CIRCLE: precise_great_circle_distance,
}


def meters_between_coordinates(
    coord1: GeoCoordinate,
    coord2: GeoCoordinate,
    method: Union[DistanceMethod, str] = DistanceMethod.PRECISE_GREAT_CIRCLE,
) -> float:
    """
    Calculate the distance between two coordinates.

    Args:
        coord1:
            The start point GeoCoordinate

        coord2:
            The finish point GeoCoordinate

        method:
            (Default PRECISE_GREAT_CIRCLE) The DistanceMethod, or its string value

    Returns:
        The distance, in meters
    """
    return _ALGORITHMS[DistanceMethod(method)](coord1, coord2)


def meters_between_map_points(
    point1: Point,
    point2: Point,
    method: Union[DistanceMethod, str] = DistanceMethod.PRECISE_GREAT_CIRCLE,
) -> float:
    """
    Calculate the distance between two points of the zoom-20 pixel space.

    Args:
        point1:
            The start point, in zoom-20 pixels

        point2:
            The finish point, in zoom-20 pixels

        method:
            (Default PRECISE_GREAT_CIRCLE) The DistanceMethod, or its string value

    Returns:
        The distance, in meters
    """
    return meters_between_coordinates(
        coordinate_for_map_point(point1),
        coordinate_for_map_point(point2),
        method
    )
