from mapprojection._version import __version__  # noqa: F401
from mapprojection.utils.logging import LOGGER
from mapprojection.geometry import Point, Rect, Size
from mapprojection.coordinates import GeoCoordinate
from mapprojection.zoom import pixel_width_at_zoom, scale_for_zoom, zoom_for_scale
from mapprojection.projection import (
    coordinate_for_map_point, coordinate_from_projected_meters,
    map_point_for_coordinate, map_points_for_coordinates,
    meters_per_pixel_at_latitude, projected_meters_from_coordinate,
    projected_meters_from_coordinates, projected_rect_for_viewport,
    viewport_bounds,
)
from mapprojection.distance import (
    DistanceMethod, meters_between_coordinates, meters_between_map_points
)

__all__ = [
    'DistanceMethod',
    'GeoCoordinate',
    'LOGGER',
    'Point',
    'Rect',
    'Size',
    'coordinate_for_map_point',
    'coordinate_from_projected_meters',
    'map_point_for_coordinate',
    'map_points_for_coordinates',
    'meters_between_coordinates',
    'meters_between_map_points',
    'meters_per_pixel_at_latitude',
    'pixel_width_at_zoom',
    'projected_meters_from_coordinate',
    'projected_meters_from_coordinates',
    'projected_rect_for_viewport',
    'scale_for_zoom',
    'viewport_bounds',
    'zoom_for_scale',
]
