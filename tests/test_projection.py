import math

import numpy as np
import pytest
from pytest import approx

from mapprojection import GeoCoordinate, Point
from mapprojection._const import EARTH_RADIUS_METERS
from mapprojection.projection import *
from tests.functions import assert_coordinates_equal, assert_points_equal

_HALF_EXTENT = 20_037_508.342789244
_HALF_PIXELS = 134_217_728.


def _mercator_y(latitude: float) -> float:
    return EARTH_RADIUS_METERS * math.log(math.tan(math.pi / 4 + math.radians(latitude) / 2))


def test_projected_meters_from_coordinate():
    assert_points_equal(projected_meters_from_coordinate(GeoCoordinate(0., 0.)), Point(0., 0.))

    actual = projected_meters_from_coordinate(GeoCoordinate(0., 180.))
    assert actual.x == approx(_HALF_EXTENT, abs=1e-6)

    actual = projected_meters_from_coordinate(GeoCoordinate(38.902524, -76.999338))
    assert actual.x == approx(-8_571_527.1, abs=1.)
    assert actual.x == approx(EARTH_RADIUS_METERS * math.radians(-76.999338), abs=1e-6)
    assert actual.y == approx(_mercator_y(38.902524), abs=1e-6)

    actual = projected_meters_from_coordinate(GeoCoordinate(-60., 10.))
    assert actual.y == approx(_mercator_y(-60.), abs=1e-6)

    # No longitude wraparound
    actual = projected_meters_from_coordinate(GeoCoordinate(0., 270.))
    assert actual.x == approx(_HALF_EXTENT * 1.5, abs=1e-6)


def test_projected_meters_clamps_latitude():
    north = projected_meters_from_coordinate(GeoCoordinate(85., 0.))
    assert projected_meters_from_coordinate(GeoCoordinate(89., 0.)) == north
    assert projected_meters_from_coordinate(GeoCoordinate(90., 0.)) == north
    assert north.y < _HALF_EXTENT

    south = projected_meters_from_coordinate(GeoCoordinate(-85., 0.))
    assert projected_meters_from_coordinate(GeoCoordinate(-90., 0.)) == south
    assert south.y == approx(-north.y)


def test_coordinate_from_projected_meters():
    assert_coordinates_equal(
        coordinate_from_projected_meters(Point(0., 0.)),
        GeoCoordinate(0., 0.)
    )

    # Top of the world bounds is ~85.0511, clamped to 85
    assert_coordinates_equal(
        coordinate_from_projected_meters(Point(-_HALF_EXTENT, _HALF_EXTENT)),
        GeoCoordinate(85., -180.)
    )

    assert_coordinates_equal(
        coordinate_from_projected_meters(Point(0., _HALF_EXTENT / 2)),
        GeoCoordinate(66.51326044311186, 0.),
        abs_tol=1e-7
    )

    # Far outside of the world bounds
    assert_coordinates_equal(
        coordinate_from_projected_meters(Point(0., 1e12)),
        GeoCoordinate(85., 0.)
    )
    assert_coordinates_equal(
        coordinate_from_projected_meters(Point(0., -1e12)),
        GeoCoordinate(-85., 0.)
    )


def test_projected_meters_round_trip():
    for lat in (-85., -45.5, -1e-6, 0., 12.3456789, 38.902524, 84.99, 85.):
        for lon in (-180., -76.999338, 0., 135.9283243, 180., 270.):
            coord = GeoCoordinate(lat, lon)
            actual = coordinate_from_projected_meters(projected_meters_from_coordinate(coord))
            assert_coordinates_equal(actual, coord, abs_tol=1e-9)


def test_meters_per_pixel_at_latitude():
    assert meters_per_pixel_at_latitude(0., 0.) == approx(156_543.03392804097)
    assert meters_per_pixel_at_latitude(0., 1.) == approx(156_543.03392804097 / 2)
    assert meters_per_pixel_at_latitude(60., 0.) == approx(156_543.03392804097 / 2)

    # Clamped
    assert meters_per_pixel_at_latitude(90., 10.) == meters_per_pixel_at_latitude(85., 10.)
    assert meters_per_pixel_at_latitude(-90., 10.) == meters_per_pixel_at_latitude(85., 10.)


def test_meters_per_pixel_decreases_toward_poles():
    for zoom in (0., 10., 20.):
        latitudes = [0., 10., 25., 45., 60., 75., 84., 85.]
        north = [meters_per_pixel_at_latitude(x, zoom) for x in latitudes]
        south = [meters_per_pixel_at_latitude(-x, zoom) for x in latitudes]
        assert all(a > b for a, b in zip(north, north[1:]))
        assert north == south


def test_map_point_for_coordinate():
    assert_points_equal(
        map_point_for_coordinate(GeoCoordinate(0., 0.)),
        Point(_HALF_PIXELS, _HALF_PIXELS)
    )

    # Antimeridian is the left edge
    actual = map_point_for_coordinate(GeoCoordinate(0., -180.))
    assert actual.x == approx(0., abs=1e-6)
    assert actual.y == approx(_HALF_PIXELS)

    actual = map_point_for_coordinate(GeoCoordinate(0., 180.))
    assert actual.x == approx(_HALF_PIXELS * 2)

    # North is up
    north = map_point_for_coordinate(GeoCoordinate(45., -122.))
    south = map_point_for_coordinate(GeoCoordinate(-45., -122.))
    assert 0 < north.y < _HALF_PIXELS < south.y
    assert north.x == approx(south.x)
    assert north.x < _HALF_PIXELS


def test_map_point_round_trip():
    for lat in (-85., -64.2342342, -14.2342342, 0., 30.566792, 45., 85.):
        for lon in (-180., -122., -84.2342342, 0., 111.234234323, 135.9283243, 180.):
            coord = GeoCoordinate(lat, lon)
            actual = coordinate_for_map_point(map_point_for_coordinate(coord))
            assert_coordinates_equal(actual, coord, abs_tol=1e-7)


def test_map_point_drops_sign_west_of_antimeridian():
    coord = GeoCoordinate(10., -190.)

    point = map_point_for_coordinate(coord)
    assert_points_equal(point, map_point_for_coordinate(GeoCoordinate(10., -170.)))
    assert point.x > 0

    # Reflected back east of -180
    assert_coordinates_equal(
        coordinate_for_map_point(point),
        GeoCoordinate(10., -170.),
        abs_tol=1e-7
    )


def test_map_point_signed():
    coord = GeoCoordinate(10., -190.)
    point = map_point_for_coordinate(coord, signed=True)
    assert point.x < 0
    assert_coordinates_equal(coordinate_for_map_point(point), coord, abs_tol=1e-7)

    # Identical to the default within the world bounds
    for coord in (GeoCoordinate(45., -122.), GeoCoordinate(-64.2342342, 111.234234323)):
        assert_points_equal(
            map_point_for_coordinate(coord, signed=True),
            map_point_for_coordinate(coord)
        )


def test_coordinate_for_map_point():
    assert_coordinates_equal(
        coordinate_for_map_point(Point(_HALF_PIXELS, _HALF_PIXELS)),
        GeoCoordinate(0., 0.)
    )
    assert_coordinates_equal(
        coordinate_for_map_point(Point(0., 0.)),
        GeoCoordinate(85., -180.)
    )
    assert_coordinates_equal(
        coordinate_for_map_point(Point(_HALF_PIXELS * 2, _HALF_PIXELS * 2)),
        GeoCoordinate(-85., 180.)
    )


def test_projected_rect_for_viewport():
    rect = projected_rect_for_viewport(GeoCoordinate(0., 0.), 256, 256, 0)
    assert rect.origin.x == approx(-_HALF_EXTENT)
    assert rect.origin.y == approx(-_HALF_EXTENT)
    assert rect.size.width == approx(_HALF_EXTENT * 2)
    assert rect.size.height == approx(_HALF_EXTENT * 2)

    rect = projected_rect_for_viewport(GeoCoordinate(0., 0.), 512, 256, 1)
    assert rect.size.width == approx(_HALF_EXTENT * 2)
    assert rect.size.height == approx(_HALF_EXTENT)

    center = GeoCoordinate(38.902524, -76.999338)
    rect = projected_rect_for_viewport(center, 500, 300, 10)
    assert_points_equal(rect.center, projected_meters_from_coordinate(center))
    assert rect.size.width / rect.size.height == approx(500 / 300)


def test_viewport_bounds():
    nw, se = viewport_bounds(GeoCoordinate(0., 0.), 256, 256, 0)
    assert_coordinates_equal(nw, GeoCoordinate(85., -180.))
    assert_coordinates_equal(se, GeoCoordinate(-85., 180.))

    nw, se = viewport_bounds(GeoCoordinate(0., 0.), 512, 256, 1)
    assert_coordinates_equal(nw, GeoCoordinate(66.51326044311186, -180.), abs_tol=1e-7)
    assert_coordinates_equal(se, GeoCoordinate(-66.51326044311186, 180.), abs_tol=1e-7)

    center = GeoCoordinate(38.902524, -76.999338)
    nw, se = viewport_bounds(center, 500, 300, 12)
    assert nw.latitude > center.latitude > se.latitude
    assert nw.longitude < center.longitude < se.longitude


def test_projected_meters_from_coordinates():
    coords = [
        GeoCoordinate(38.902524, -76.999338),
        GeoCoordinate(-64.2342342, 111.234234323),
        GeoCoordinate(90., 10.),
    ]
    actual = projected_meters_from_coordinates(coords)
    assert actual.shape == (3, 2)
    for row, coord in zip(actual, coords):
        expected = projected_meters_from_coordinate(coord)
        assert row[0] == approx(expected.x, abs=1e-6)
        assert row[1] == approx(expected.y, abs=1e-6)

    assert projected_meters_from_coordinates([]).shape == (0, 2)


def test_map_points_for_coordinates():
    coords = [
        GeoCoordinate(0., 0.),
        GeoCoordinate(45., -122.),
        GeoCoordinate(10., -190.),
    ]

    actual = map_points_for_coordinates(coords)
    assert isinstance(actual, np.ndarray)
    for row, coord in zip(actual, coords):
        expected = map_point_for_coordinate(coord)
        assert row[0] == approx(expected.x, abs=1e-6)
        assert row[1] == approx(expected.y, abs=1e-6)

    actual = map_points_for_coordinates(coords, signed=True)
    for row, coord in zip(actual, coords):
        expected = map_point_for_coordinate(coord, signed=True)
        assert row[0] == approx(expected.x, abs=1e-6)
        assert row[1] == approx(expected.y, abs=1e-6)


def test_projected_rect_for_viewport_away_from_equator():
    # Pixels cover the same projected distance at every latitude
    rect = projected_rect_for_viewport(GeoCoordinate(60., 10.), 500, 300, 10)
    assert rect.size.width == approx(500 * _HALF_EXTENT * 2 / (256 * 1024))
    assert rect.size.height == approx(300 * _HALF_EXTENT * 2 / (256 * 1024))

    # Twice the ground resolution at 60 degrees
    assert rect.size.width == approx(500 * meters_per_pixel_at_latitude(60., 10) * 2)

    equator = projected_rect_for_viewport(GeoCoordinate(0., 10.), 500, 300, 10)
    assert rect.size == equator.size
