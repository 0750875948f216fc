"""
Datum shifts between WGS84 and Merchich (Clarke 1880), through Earth-Centered Earth-Fixed
cartesian coordinates.

The shift is the 3-parameter geocentric translation historically used for Merchich; it
carries no rotation or scale terms. All angles at the public boundary are in degrees.
"""

__all__ = [
    'Datum', 'DatumShiftParams', 'EcefPoint', 'MERCHICH_TO_WGS84',
    'ecef_to_geodetic', 'geodetic_to_ecef', 'shift_datum', 'shift_datum_with_height',
]

from enum import Enum
import math
from typing import NamedTuple, Tuple

from lambertmaroc._const import (
    CONVERGENCE_TOLERANCE, ECEF_MAX_ITERATIONS, MERCHICH_TO_WGS84_DX, MERCHICH_TO_WGS84_DY,
    MERCHICH_TO_WGS84_DZ, POLAR_AXIS_EPSILON,
)
from lambertmaroc.ellipsoid import CLARKE_1880, WGS84, Ellipsoid
from lambertmaroc.utils.logging import log_not_converged


class Datum(str, Enum):
    """Geodetic datums handled by the engine, each bound to its ellipsoid"""
    WGS84 = 'wgs84'
    CLARKE_1880 = 'clarke1880'

    @property
    def ellipsoid(self) -> Ellipsoid:
        return WGS84 if self is Datum.WGS84 else CLARKE_1880


class EcefPoint(NamedTuple):
    """Earth-Centered Earth-Fixed cartesian position, in meters"""
    x: float
    y: float
    z: float

    def translate(self, dx: float, dy: float, dz: float) -> 'EcefPoint':
        return EcefPoint(self.x + dx, self.y + dy, self.z + dz)


class DatumShiftParams(NamedTuple):
    """Geocentric translation, in meters"""
    dx: float
    dy: float
    dz: float


MERCHICH_TO_WGS84 = DatumShiftParams(
    MERCHICH_TO_WGS84_DX, MERCHICH_TO_WGS84_DY, MERCHICH_TO_WGS84_DZ
)


def geodetic_to_ecef(lat: float, lon: float, h: float, ellipsoid: Ellipsoid) -> EcefPoint:
    """
    Converts a geodetic position to ECEF cartesian coordinates using the prime vertical
    radius of curvature N = a / sqrt(1 - e² sin²φ).

    Args:
        lat:
            Latitude, in degrees

        lon:
            Longitude, in degrees

        h:
            Ellipsoidal height, in meters

        ellipsoid:
            The ellipsoid the position refers to

    Returns:
        EcefPoint
    """
    lat_rad, lon_rad = math.radians(lat), math.radians(lon)
    sin_lat, cos_lat = math.sin(lat_rad), math.cos(lat_rad)

    n = ellipsoid.a / math.sqrt(1 - ellipsoid.e2 * sin_lat * sin_lat)

    return EcefPoint(
        (n + h) * cos_lat * math.cos(lon_rad),
        (n + h) * cos_lat * math.sin(lon_rad),
        (n * (1 - ellipsoid.e2) + h) * sin_lat,
    )


def ecef_to_geodetic(point: EcefPoint, ellipsoid: Ellipsoid) -> Tuple[float, float, float]:
    """
    Converts ECEF cartesian coordinates to a geodetic position on the given ellipsoid.

    Latitude is solved by fixed-point iteration, starting from atan2(Z, p(1 - e²)) and
    stopping once successive iterates agree to within 1e-12 rad (at most 10 iterations).
    Longitude is exact. Points on the polar axis return ±90° directly.

    Args:
        point:
            The ECEF position, in meters

        ellipsoid:
            The destination ellipsoid

    Returns:
        (latitude, longitude, height) in degrees, degrees, meters
    """
    a, e2 = ellipsoid.a, ellipsoid.e2
    lon = math.atan2(point.y, point.x)
    p = math.hypot(point.x, point.y)

    if p < POLAR_AXIS_EPSILON:
        lat = math.pi / 2 if point.z >= 0 else -math.pi / 2
        return math.degrees(lat), math.degrees(lon), abs(point.z) - ellipsoid.b

    lat = math.atan2(point.z, p * (1 - e2))
    residual = math.inf
    for _ in range(ECEF_MAX_ITERATIONS):
        sin_lat = math.sin(lat)
        n = a / math.sqrt(1 - e2 * sin_lat * sin_lat)
        new_lat = math.atan2(point.z + n * e2 * sin_lat, p)
        residual = abs(new_lat - lat)
        lat = new_lat
        if residual < CONVERGENCE_TOLERANCE:
            break
    else:
        log_not_converged('ecef_to_geodetic', ECEF_MAX_ITERATIONS, residual)

    sin_lat = math.sin(lat)
    n = a / math.sqrt(1 - e2 * sin_lat * sin_lat)
    h = p / math.cos(lat) - n

    return math.degrees(lat), math.degrees(lon), h


def shift_datum_with_height(
    lat: float,
    lon: float,
    h: float,
    from_datum: Datum,
    to_datum: Datum,
) -> Tuple[float, float, float]:
    """
    Shifts a geodetic position (with ellipsoidal height) from one datum to another.

    Args:
        lat:
            Latitude, in degrees

        lon:
            Longitude, in degrees

        h:
            Ellipsoidal height on the source datum, in meters

        from_datum:
            The datum of the input position

        to_datum:
            The datum to shift to

    Returns:
        (latitude, longitude, height) on the destination datum
    """
    from_datum, to_datum = Datum(from_datum), Datum(to_datum)
    if from_datum is to_datum:
        return lat, lon, h

    sign = -1 if from_datum is Datum.WGS84 else 1
    shifted = geodetic_to_ecef(lat, lon, h, from_datum.ellipsoid).translate(
        sign * MERCHICH_TO_WGS84.dx,
        sign * MERCHICH_TO_WGS84.dy,
        sign * MERCHICH_TO_WGS84.dz,
    )
    return ecef_to_geodetic(shifted, to_datum.ellipsoid)


def shift_datum(
    lat: float,
    lon: float,
    from_datum: Datum,
    to_datum: Datum,
) -> Tuple[float, float]:
    """
    Shifts a horizontal geodetic position from one datum to another. The input is taken
    to lie on the source ellipsoid (zero height) and the resulting height is discarded.

    Args:
        lat:
            Latitude, in degrees

        lon:
            Longitude, in degrees

        from_datum:
            The datum of the input position

        to_datum:
            The datum to shift to

    Returns:
        (latitude, longitude) in degrees
    """
    out_lat, out_lon, _ = shift_datum_with_height(lat, lon, 0., from_datum, to_datum)
    return out_lat, out_lon
