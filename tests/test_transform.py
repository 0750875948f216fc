import itertools
import math

import pytest
from pytest import approx

from lambertmaroc import (
    Coordinate, CoordinateSystem, GridCoordinate, Transformer, UnsupportedTransformation,
    XY, ZoneRegistry, convert, set_latitude_policy, transform, transform_point,
)
from lambertmaroc.transform import get_latitude_policy
from lambertmaroc.zones import ZONE_DEFINITIONS
from tests.functions import assert_coordinates_equal, assert_xy_equal

ZONES = [
    'lambert_nord_maroc', 'lambert_sud_maroc',
    'lambert_z1', 'lambert_z2', 'lambert_z3', 'lambert_z4',
]

# (zone, WGS84 (lon, lat), grid (x, y)). Grid values were computed separately from the
# EPSG 9801 and 9802 formulas with the zone definitions of lambertmaroc.zones. The
# equivalent PROJ definitions, for cross-checking, are listed in DESIGN.md.
FIXES = [
    ('lambert_nord_maroc', (-6.8498, 34.0209), (365991.4616, 381150.3879)),
    ('lambert_z1', (-6.8498, 34.0209), (365988.0069, 381152.4799)),
    ('lambert_sud_maroc', (-9.5981, 30.4278), (96754.9830, 388235.1961)),
    ('lambert_z2', (-9.5981, 30.4278), (96748.6915, 388236.5727)),
    ('lambert_z3', (-13.2, 27.15), (427313.9977, 539682.4814)),
    ('lambert_z4', (-15.95, 23.7), (424950.2592, 570951.0682)),
]


def test_identity():
    point = (123.4, 567.8)
    assert transform(point, 'local', 'local') is point
    assert transform(point, 'lambert_z1', CoordinateSystem.LAMBERT_Z1) is point

    coordinate = Coordinate(-6.8498, 34.0209)
    assert transform(coordinate, 'wgs84', 'wgs84') is coordinate


def test_wgs84_to_grid():
    for zone, lonlat, expected in FIXES:
        result = transform(lonlat, 'wgs84', zone)
        assert isinstance(result, XY)
        assert_xy_equal(result, expected)


def test_grid_to_wgs84():
    for zone, expected, xy in FIXES:
        lon, lat = transform(xy, zone, 'wgs84')
        assert lon == approx(expected[0], abs=1e-6), zone
        assert lat == approx(expected[1], abs=1e-6), zone


def test_round_trip():
    for zone in ZONES:
        for lonlat in ((-7.61, 33.59), (-5.8, 35.77), (-8.0, 31.63), (-13.2, 27.15)):
            lon, lat = transform(transform(lonlat, 'wgs84', zone), zone, 'wgs84')
            assert lon == approx(lonlat[0], abs=1e-7), zone
            assert lat == approx(lonlat[1], abs=1e-7), zone


def test_grid_to_grid():
    result = transform((365988.0069, 381152.4799), 'lambert_z1', 'lambert_z2')
    assert_xy_equal(result, (365613.001948, 780508.637811))

    # Zone to zone agrees with going through WGS84 explicitly
    lonlat = transform((365988.0069, 381152.4799), 'lambert_z1', 'wgs84')
    assert_xy_equal(result, transform(lonlat, 'wgs84', 'lambert_z2'), abs_tol=0.01)


def test_grid_to_grid_round_trip():
    for from_zone, to_zone in itertools.permutations(ZONES, 2):
        start = transform((-7.0, 30.0), 'wgs84', from_zone)
        there = transform(start, from_zone, to_zone)
        back = transform(there, to_zone, from_zone)
        assert_xy_equal(back, start)


def test_unsupported(caplog):
    assert transform((1., 2.), 'local', 'wgs84') is None
    assert (
        'Unsupported transformation from local to wgs84: '
        'the local system has no geodetic reference'
    ) in caplog.text

    assert transform((-6.8498, 34.0209), 'wgs84', 'local') is None
    assert transform((1., 2.), 'local', 'lambert_z1') is None
    assert transform((1., 2.), 'lambert_z1', 'local') is None


def test_convert():
    assert convert((-6.8498, 34.0209), 'wgs84', 'lambert_z1') == transform(
        (-6.8498, 34.0209), 'wgs84', 'lambert_z1'
    )

    with pytest.raises(UnsupportedTransformation) as err:
        convert((1., 2.), 'local', 'lambert_z3')

    assert err.value.from_system is CoordinateSystem.LOCAL
    assert err.value.to_system is CoordinateSystem.LAMBERT_Z3
    assert err.value.reason == 'the local system has no geodetic reference'

    # Still a ValueError for callers that do not know the subclass
    with pytest.raises(ValueError):
        convert((1., 2.), 'lambert_z3', 'local')


def test_unknown_system(caplog):
    assert transform((0., 0.), 'wgs84', 'utm29n') is None
    assert "Unknown coordinate system 'utm29n'" in caplog.text

    with pytest.raises(ValueError):
        convert((0., 0.), 'utm29n', 'wgs84')


def test_point_inputs():
    expected = (365988.0069, 381152.4799)
    assert_xy_equal(transform({'x': -6.8498, 'y': 34.0209}, 'wgs84', 'lambert_z1'), expected)
    assert_xy_equal(transform(Coordinate(-6.8498, 34.0209), 'wgs84', 'lambert_z1'), expected)
    assert_xy_equal(transform(XY(-6.8498, 34.0209), 'wgs84', 'lambert_z1'), expected)
    assert_xy_equal(transform(['-6.8498', '34.0209'], 'wgs84', 'lambert_z1'), expected)


def test_point_system_mismatch(caplog):
    point = GridCoordinate(365988.0069, 381152.4799, 'lambert_z1')
    with pytest.raises(ValueError, match='expressed in lambert_z1'):
        convert(point, 'lambert_z2', 'wgs84')

    assert transform(point, 'lambert_z2', 'wgs84') is None
    assert 'Transformation from lambert_z2 to wgs84 failed' in caplog.text


def test_non_finite_input():
    assert transform((math.nan, 34.), 'wgs84', 'lambert_z1') is None
    assert transform((365988., math.inf), 'lambert_z1', 'wgs84') is None

    with pytest.raises(ValueError):
        convert((math.nan, 34.), 'wgs84', 'lambert_z1')


def test_far_off_grid_input(caplog):
    for coords, from_zone, to_system in [
        ((1e200, 0.), 'lambert_z1', 'wgs84'),
        ((1e200, 0.), 'lambert_z1', 'lambert_z2'),
        ((0., -1e200), 'lambert_nord_maroc', 'wgs84'),
        ((-1e200, 1e200), 'lambert_z4', 'lambert_sud_maroc'),
    ]:
        assert transform(coords, from_zone, to_system) is None

        with pytest.raises(ValueError):
            convert(coords, from_zone, to_system)

    assert 'outside the projection domain' in caplog.text


def test_transform_point():
    result = transform_point(Coordinate(-6.8498, 34.0209), 'lambert_z1')
    assert isinstance(result, GridCoordinate)
    assert result.system is CoordinateSystem.LAMBERT_Z1
    assert_xy_equal(result.to_float(), (365988.0069, 381152.4799))

    result = transform_point(GridCoordinate(365988.0069, 381152.4799, 'lambert_z1'), 'wgs84')
    assert isinstance(result, Coordinate)
    assert_coordinates_equal(result, Coordinate(-6.8498, 34.0209), abs_tol=1e-6)

    result = transform_point(GridCoordinate(365988.0069, 381152.4799, 'lambert_z1'), 'lambert_z2')
    assert result.system is CoordinateSystem.LAMBERT_Z2
    assert_xy_equal(result.to_float(), (365613.001948, 780508.637811))

    point = GridCoordinate(1., 2., 'local')
    assert transform_point(point, 'local') is point
    assert transform_point(point, 'wgs84') is None


def test_latitude_policy_reject(caplog):
    assert get_latitude_policy() == 'reject'
    assert transform((-5.4, 90.), 'wgs84', 'lambert_z1') is None
    assert 'Transformation from wgs84 to lambert_z1 failed' in caplog.text

    with pytest.raises(ValueError, match='outside the projectable range'):
        convert((-5.4, -90.), 'wgs84', 'lambert_nord_maroc')


def test_latitude_policy_clamp(caplog):
    transformer = Transformer(latitude_policy='clamp')
    assert transformer.latitude_policy == 'clamp'

    x, y = transformer.transform((-5.4, 90.), 'wgs84', 'lambert_z1')
    assert math.isfinite(x)
    assert math.isfinite(y)
    assert 'Polar latitudes are clamped' in caplog.text

    # Latitudes beyond the pole are clamped the same way
    assert transformer.transform((-5.4, 95.), 'wgs84', 'lambert_z1') == approx((x, y))


def test_global_latitude_policy():
    try:
        set_latitude_policy('clamp')
        assert get_latitude_policy() == 'clamp'
        assert transform((-5.4, 90.), 'wgs84', 'lambert_z2') is not None

        # An explicit transformer policy overrides the global one
        assert Transformer(latitude_policy='reject').transform(
            (-5.4, 90.), 'wgs84', 'lambert_z2'
        ) is None
    finally:
        set_latitude_policy('reject')

    assert transform((-5.4, 90.), 'wgs84', 'lambert_z2') is None

    with pytest.raises(ValueError):
        set_latitude_policy('wrap')

    with pytest.raises(ValueError):
        Transformer(latitude_policy='wrap')


def test_custom_registry(caplog):
    registry = ZoneRegistry({'lambert_z1': ZONE_DEFINITIONS[CoordinateSystem.LAMBERT_Z1]})
    transformer = Transformer(registry)

    assert_xy_equal(
        transformer.transform((-6.8498, 34.0209), 'wgs84', 'lambert_z1'),
        (365988.0069, 381152.4799),
    )

    assert transformer.transform((-6.8498, 34.0209), 'wgs84', 'lambert_z2') is None
    assert 'lambert_z2 has no registered zone parameters' in caplog.text
