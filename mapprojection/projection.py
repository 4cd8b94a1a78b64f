"""
Spherical (Web) Mercator projection between geographic coordinates, projected meters
and the zoom-20 world pixel space
"""

__all__ = [
    'coordinate_for_map_point', 'coordinate_from_projected_meters',
    'map_point_for_coordinate', 'map_points_for_coordinates',
    'meters_per_pixel_at_latitude', 'projected_meters_from_coordinate',
    'projected_meters_from_coordinates', 'projected_rect_for_viewport',
    'viewport_bounds',
]

import math
from typing import Sequence, Tuple

import numpy as np

from mapprojection._const import (
    EARTH_RADIUS_METERS, MAX_LATITUDE, MAX_SINE, REFERENCE_ZOOM, TILE_SIZE,
    WORLD_BOUNDS_METERS, WORLD_SIZE_METERS
)
from mapprojection.coordinates import GeoCoordinate
from mapprojection.geometry import Point, Rect, Size
from mapprojection.utils.functions import clamp, clamp_latitude
from mapprojection.zoom import pixel_width_at_zoom, scale_for_zoom

_REFERENCE_PIXEL_WIDTH = pixel_width_at_zoom(REFERENCE_ZOOM)
_X_PIXELS_PER_METER = _REFERENCE_PIXEL_WIDTH / WORLD_SIZE_METERS.width
_Y_PIXELS_PER_METER = _REFERENCE_PIXEL_WIDTH / WORLD_SIZE_METERS.height


def projected_meters_from_coordinate(coordinate: GeoCoordinate) -> Point:
    """
    Project a coordinate onto the Mercator plane.

    Args:
        coordinate:
            The coordinate to project. Latitudes beyond +/-85 degrees are clamped.

    Returns:
        Point, in meters from the intersection of the equator and the prime meridian
    """
    latitude = clamp_latitude(coordinate.latitude)
    sine = clamp(math.sin(math.radians(latitude)), -MAX_SINE, MAX_SINE)

    return Point(
        EARTH_RADIUS_METERS * math.radians(coordinate.longitude),
        EARTH_RADIUS_METERS * math.log((1 + sine) / (1 - sine)) / 2,
    )


def coordinate_from_projected_meters(point: Point) -> GeoCoordinate:
    """Inverse of projected_meters_from_coordinate()"""
    # Beyond the world bounds the latitude clamps to +/-85 regardless; keeps exp() finite
    y = clamp(point.y, WORLD_BOUNDS_METERS.min_y, WORLD_BOUNDS_METERS.max_y)
    latitude = math.degrees(2 * math.atan(math.exp(y / EARTH_RADIUS_METERS)) - math.pi / 2)

    return GeoCoordinate(
        clamp(latitude, -MAX_LATITUDE, MAX_LATITUDE),
        math.degrees(point.x / EARTH_RADIUS_METERS),
    )


def meters_per_pixel_at_latitude(latitude: float, zoom: float) -> float:
    """
    The ground distance covered by a single pixel at a given latitude and zoom level.

    Args:
        latitude:
            The latitude, in degrees. Clamped to [-85, 85].

        zoom:
            The zoom level

    Returns:
        float
    """
    return (
        math.cos(math.radians(clamp_latitude(latitude))) *
        2 * math.pi * EARTH_RADIUS_METERS / TILE_SIZE * scale_for_zoom(zoom)
    )


def map_point_for_coordinate(coordinate: GeoCoordinate, signed: bool = False) -> Point:
    """
    Convert a coordinate to the zoom-20 pixel space, whose origin is the north-west
    corner of the world.

    By default the absolute value of both pixel axes is taken. This has no effect for
    longitudes within [-180, 180], but longitudes west of -180 are reflected back east of
    it, and coordinate_for_map_point() cannot recover them. Pass signed=True to keep
    the sign instead.

    Args:
        coordinate:
            The coordinate to convert

        signed:
            (Default False) If True, points west of the antimeridian keep their negative
            x value.

    Returns:
        Point, in zoom-20 pixels
    """
    projected = projected_meters_from_coordinate(coordinate)
    x = (projected.x + WORLD_SIZE_METERS.width / 2) * _X_PIXELS_PER_METER
    y = (projected.y - WORLD_SIZE_METERS.height / 2) * _Y_PIXELS_PER_METER

    if signed:
        return Point(x, -y)

    return Point(abs(x), abs(y))


def coordinate_for_map_point(point: Point) -> GeoCoordinate:
    """Convert a zoom-20 pixel point back to a coordinate"""
    shifted_x = point.x / _X_PIXELS_PER_METER
    shifted_y = point.y / _Y_PIXELS_PER_METER

    return coordinate_from_projected_meters(
        Point(
            shifted_x - WORLD_SIZE_METERS.width / 2,
            WORLD_SIZE_METERS.height / 2 - shifted_y,
        )
    )


def projected_rect_for_viewport(
    center: GeoCoordinate,
    width: float,
    height: float,
    zoom: float,
) -> Rect:
    """
    The area of the Mercator plane displayed by a viewport.

    Args:
        center:
            The coordinate at the center of the viewport

        width:
            The viewport width, in pixels

        height:
            The viewport height, in pixels

        zoom:
            The zoom level the viewport is displayed at

    Returns:
        Rect, in projected meters
    """
    # Projected meters per pixel, independent of latitude
    meters_per_pixel = WORLD_SIZE_METERS.width / TILE_SIZE * scale_for_zoom(zoom)

    return Rect.from_center(
        projected_meters_from_coordinate(center),
        Size(width * meters_per_pixel, height * meters_per_pixel),
    )


def viewport_bounds(
    center: GeoCoordinate,
    width: float,
    height: float,
    zoom: float,
) -> Tuple[GeoCoordinate, GeoCoordinate]:
    """
    The north-west and south-east corners of a viewport.

    Args:
        center:
            The coordinate at the center of the viewport

        width:
            The viewport width, in pixels

        height:
            The viewport height, in pixels

        zoom:
            The zoom level the viewport is displayed at

    Returns:
        (north-west GeoCoordinate, south-east GeoCoordinate)
    """
    rect = projected_rect_for_viewport(center, width, height, zoom)

    return (
        coordinate_from_projected_meters(Point(rect.min_x, rect.max_y)),
        coordinate_from_projected_meters(Point(rect.max_x, rect.min_y)),
    )


def projected_meters_from_coordinates(coordinates: Sequence[GeoCoordinate]) -> np.ndarray:
    """
    Vectorized form of projected_meters_from_coordinate().

    Args:
        coordinates:
            The coordinates to project

    Returns:
        An (n, 2) array of projected (x, y) meters, in input order
    """
    lat_lon = np.array([x.to_float() for x in coordinates], dtype=float).reshape(-1, 2)

    latitudes = np.clip(lat_lon[:, 0], -MAX_LATITUDE, MAX_LATITUDE)
    sines = np.clip(np.sin(np.radians(latitudes)), -MAX_SINE, MAX_SINE)

    return np.column_stack((
        EARTH_RADIUS_METERS * np.radians(lat_lon[:, 1]),
        EARTH_RADIUS_METERS * np.log((1 + sines) / (1 - sines)) / 2,
    ))


def map_points_for_coordinates(
    coordinates: Sequence[GeoCoordinate],
    signed: bool = False
) -> np.ndarray:
    """
    Vectorized form of map_point_for_coordinate().

    Args:
        coordinates:
            The coordinates to convert

        signed:
            (Default False) If True, keep the sign of the pixel axes. See
            map_point_for_coordinate().

    Returns:
        An (n, 2) array of zoom-20 (x, y) pixels, in input order
    """
    projected = projected_meters_from_coordinates(coordinates)
    pixels = np.column_stack((
        (projected[:, 0] + WORLD_SIZE_METERS.width / 2) * _X_PIXELS_PER_METER,
        (projected[:, 1] - WORLD_SIZE_METERS.height / 2) * _Y_PIXELS_PER_METER,
    ))

    if signed:
        pixels[:, 1] = -pixels[:, 1]
        return pixels

    return np.abs(pixels)
