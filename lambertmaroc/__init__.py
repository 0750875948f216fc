from lambertmaroc._version import __version__  # noqa: F401
from lambertmaroc.utils.logging import LOGGER
from lambertmaroc.coordinates import XY, Coordinate, GridCoordinate
from lambertmaroc.datum import Datum, shift_datum
from lambertmaroc.ellipsoid import CLARKE_1880, WGS84, Ellipsoid
from lambertmaroc.lambert import OneStandardParallel, TwoStandardParallels, ZoneParameters
from lambertmaroc.systems import CoordinateSystem, suggest_zone
from lambertmaroc.zones import DEFAULT_REGISTRY, ZoneRegistry
from lambertmaroc.transform import (
    Transformer, UnsupportedTransformation, convert, set_latitude_policy, transform,
    transform_point
)
from lambertmaroc.batch import BatchResult, transform_array, transform_lines


__all__ = [
    'BatchResult',
    'CLARKE_1880',
    'Coordinate',
    'CoordinateSystem',
    'DEFAULT_REGISTRY',
    'Datum',
    'Ellipsoid',
    'GridCoordinate',
    'LOGGER',
    'OneStandardParallel',
    'Transformer',
    'TwoStandardParallels',
    'UnsupportedTransformation',
    'WGS84',
    'XY',
    'ZoneParameters',
    'ZoneRegistry',
    'convert',
    'set_latitude_policy',
    'shift_datum',
    'suggest_zone',
    'transform',
    'transform_array',
    'transform_lines',
    'transform_point',
]
