"""
Transformation orchestrator: dispatches a (source, destination) pair of coordinate systems
to the matching composition of datum shifts and Lambert projections.

Grid-to-grid transformations always pivot through WGS84 geographic coordinates.
"""

__all__ = [
    'Transformer', 'UnsupportedTransformation', 'convert', 'get_latitude_policy',
    'set_latitude_policy', 'transform', 'transform_point',
]

import math
from typing import Any, Literal, Mapping, Optional, Tuple, Union

from lambertmaroc._const import POLE_CLAMP_DEGREES
from lambertmaroc.coordinates import XY, Coordinate, GridCoordinate
from lambertmaroc.datum import Datum, shift_datum, shift_datum_with_height
from lambertmaroc.systems import CoordinateSystem
from lambertmaroc.utils.mixins import LoggingMixin
from lambertmaroc.zones import DEFAULT_REGISTRY, ZoneRegistry

SystemLike = Union[str, CoordinateSystem]
Point = Union[XY, Coordinate, GridCoordinate, Tuple[float, float], Mapping[str, float]]

_LATITUDE_POLICIES = ('reject', 'clamp')

# Declares how latitudes at or beyond the poles are handled (default reject)
_latitude_policy = 'reject'


def set_latitude_policy(policy: Literal['reject', 'clamp']):
    """
    Set the global handling of latitudes at or beyond ±90°, which the Lambert projection
    cannot represent.

    Args:
        policy:
            'reject' (the transformation fails) or 'clamp' (the latitude is pulled just
            inside the pole)
    """
    global _latitude_policy

    if policy not in _LATITUDE_POLICIES:
        raise ValueError(f"Unknown latitude policy '{policy}'. Options: {list(_LATITUDE_POLICIES)}")

    _latitude_policy = policy


def get_latitude_policy() -> str:
    return _latitude_policy


class UnsupportedTransformation(ValueError):
    """Raised when no transformation path exists between two coordinate systems"""

    def __init__(self, from_system: Any, to_system: Any, reason: str):
        self.from_system = from_system
        self.to_system = to_system
        self.reason = reason
        super().__init__(f'Unsupported transformation from {from_system} to {to_system}: {reason}')


def _unpack(coords: Point, from_system: CoordinateSystem) -> Tuple[float, float]:
    """Reads (x, y) from any supported point representation"""
    system = getattr(coords, 'system', None)
    if system is not None and system is not from_system:
        raise ValueError(f'point is expressed in {system}, not in {from_system}')

    if isinstance(coords, Mapping):
        x, y = coords['x'], coords['y']
    elif hasattr(coords, 'x') and hasattr(coords, 'y'):
        x, y = coords.x, coords.y
    else:
        x, y = coords

    x, y = float(x), float(y)
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f'coordinates must be finite, got ({x}, {y})')

    return x, y


class Transformer(LoggingMixin):
    """
    Converts coordinates between WGS84 and the Lambert zones of a registry.

    Args:
        registry:
            (Default the Moroccan zones) The precomputed zone parameters to project with

        latitude_policy:
            (Default None) 'reject' or 'clamp'; when None, follows the global policy set
            with set_latitude_policy()
    """

    def __init__(
        self,
        registry: ZoneRegistry = DEFAULT_REGISTRY,
        latitude_policy: Optional[Literal['reject', 'clamp']] = None,
    ):
        super().__init__()
        if latitude_policy is not None and latitude_policy not in _LATITUDE_POLICIES:
            raise ValueError(
                f"Unknown latitude policy '{latitude_policy}'. Options: {list(_LATITUDE_POLICIES)}"
            )

        self.registry = registry
        self._latitude_policy = latitude_policy

    def __repr__(self):
        return f'<Transformer over {self.registry!r}>'

    @property
    def latitude_policy(self) -> str:
        return self._latitude_policy or _latitude_policy

    def _check_latitude(self, lat: float) -> float:
        """Applies the latitude policy ahead of the projection kernel"""
        if -90 < lat < 90:
            return lat

        if self.latitude_policy == 'clamp':
            self.warn_once(
                'Polar latitudes are clamped short of ±90° before projecting. '
                '(this warning will not repeat)'
            )
            return math.copysign(90 - POLE_CLAMP_DEGREES, lat)

        raise ValueError(f'latitude {lat} is outside the projectable range (-90, 90)')

    def _wgs84_to_grid(self, lon: float, lat: float, zone: CoordinateSystem) -> XY:
        lat = self._check_latitude(lat)
        clarke_lat, clarke_lon = shift_datum(lat, lon, Datum.WGS84, Datum.CLARKE_1880)
        return XY(*self.registry[zone].forward(self._check_latitude(clarke_lat), clarke_lon))

    def _grid_to_wgs84(self, x: float, y: float, zone: CoordinateSystem) -> XY:
        clarke_lat, clarke_lon = self.registry[zone].inverse(x, y)
        lat, lon = shift_datum(clarke_lat, clarke_lon, Datum.CLARKE_1880, Datum.WGS84)
        return XY(lon, lat)

    def _grid_to_grid(
        self, x: float, y: float, from_zone: CoordinateSystem, to_zone: CoordinateSystem
    ) -> XY:
        clarke_lat, clarke_lon = self.registry[from_zone].inverse(x, y)
        lat, lon, h = shift_datum_with_height(
            clarke_lat, clarke_lon, 0., Datum.CLARKE_1880, Datum.WGS84
        )
        # The WGS84 height is carried back so the pivot itself does not move the point
        clarke_lat, clarke_lon, _ = shift_datum_with_height(
            lat, lon, h, Datum.WGS84, Datum.CLARKE_1880
        )
        return XY(*self.registry[to_zone].forward(self._check_latitude(clarke_lat), clarke_lon))

    def _unsupported_reason(
        self, from_system: CoordinateSystem, to_system: CoordinateSystem
    ) -> str:
        for system in (from_system, to_system):
            if system is CoordinateSystem.LOCAL:
                return 'the local system has no geodetic reference'
            if system.is_projected and system not in self.registry:
                return f'{system} has no registered zone parameters'

        return 'no transformation path is defined for this pair'

    def convert(self, coords: Point, from_system: SystemLike, to_system: SystemLike):
        """
        Transforms a point between two coordinate systems, raising on failure.

        For wgs84, x is longitude and y is latitude (degrees); for Lambert zones, x/y are
        easting/northing (meters).

        Args:
            coords:
                The point: an (x, y) pair, a mapping with 'x' and 'y' keys, a Coordinate
                or a GridCoordinate

            from_system:
                The system coords are expressed in

            to_system:
                The system to transform to

        Returns:
            The input itself when both systems are the same, otherwise an XY

        Raises:
            UnsupportedTransformation: no path exists between the two systems
            ValueError: the point cannot be transformed (e.g. a polar latitude)
        """
        from_system = CoordinateSystem.parse(from_system)
        to_system = CoordinateSystem.parse(to_system)

        if from_system is to_system:
            return coords

        x, y = _unpack(coords, from_system)
        from_zone = from_system in self.registry
        to_zone = to_system in self.registry

        if from_system is CoordinateSystem.WGS84 and to_zone:
            return self._wgs84_to_grid(x, y, to_system)

        if from_zone and to_system is CoordinateSystem.WGS84:
            return self._grid_to_wgs84(x, y, from_system)

        if from_zone and to_zone:
            return self._grid_to_grid(x, y, from_system, to_system)

        raise UnsupportedTransformation(
            from_system, to_system, self._unsupported_reason(from_system, to_system)
        )

    def transform(self, coords: Point, from_system: SystemLike, to_system: SystemLike):
        """
        Transforms a point between two coordinate systems. Never raises for unsupported
        pairs or untransformable points; the reason is logged and None is returned.

        Args:
            coords:
                The point: an (x, y) pair, a mapping with 'x' and 'y' keys, a Coordinate
                or a GridCoordinate

            from_system:
                The system coords are expressed in

            to_system:
                The system to transform to

        Returns:
            The input itself when both systems are the same, an XY on success, otherwise
            None
        """
        try:
            return self.convert(coords, from_system, to_system)
        except UnsupportedTransformation as err:
            self.logger.warning(str(err))
        except (ValueError, TypeError, KeyError, ArithmeticError) as err:
            self.logger.warning(
                'Transformation from %s to %s failed: %s', from_system, to_system, err
            )

        return None

    def transform_point(
        self, point: Union[Coordinate, GridCoordinate], to_system: SystemLike
    ) -> Union[Coordinate, GridCoordinate, None]:
        """
        Transforms a Coordinate or GridCoordinate into the matching point type of the
        destination system.

        Args:
            point:
                The point to transform; its own system is the source system

            to_system:
                The system to transform to

        Returns:
            Coordinate for wgs84, GridCoordinate otherwise, or None on failure
        """
        to_system = CoordinateSystem.parse(to_system)
        result = self.transform(point, point.system, to_system)
        if result is None or result is point:
            return result

        if to_system is CoordinateSystem.WGS84:
            return Coordinate(result.x, result.y)

        return GridCoordinate(result.x, result.y, to_system)


_DEFAULT_TRANSFORMER = Transformer(DEFAULT_REGISTRY)


def transform(coords: Point, from_system: SystemLike, to_system: SystemLike):
    """Transforms a point with the default Moroccan zone registry; see Transformer.transform"""
    return _DEFAULT_TRANSFORMER.transform(coords, from_system, to_system)


def convert(coords: Point, from_system: SystemLike, to_system: SystemLike):
    """Raising counterpart of transform(); see Transformer.convert"""
    return _DEFAULT_TRANSFORMER.convert(coords, from_system, to_system)


def transform_point(
    point: Union[Coordinate, GridCoordinate], to_system: SystemLike
) -> Union[Coordinate, GridCoordinate, None]:
    return _DEFAULT_TRANSFORMER.transform_point(point, to_system)
