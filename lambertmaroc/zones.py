"""
Definitions of the Moroccan Lambert zones and the registry of their precomputed parameters.

All zones lie on the Clarke 1880 (IGN) ellipsoid of the Merchich datum and share the
central meridian 5°24'W. The registry is built once, when this module is first imported,
and is read-only afterwards.
"""

__all__ = ['DEFAULT_REGISTRY', 'ZONE_DEFINITIONS', 'ZoneRegistry']

from collections.abc import Mapping
import math
from types import MappingProxyType
from typing import Iterator, Union

from lambertmaroc.ellipsoid import CLARKE_1880, Ellipsoid
from lambertmaroc.lambert import (
    OneStandardParallel, TwoStandardParallels, ZoneDefinition, ZoneParameters
)
from lambertmaroc.systems import CoordinateSystem
from lambertmaroc.utils.functions import dms_to_dd


def _rad(degrees: float, minutes: float = 0., seconds: float = 0.) -> float:
    return math.radians(dms_to_dd(degrees, minutes, seconds))


_CENTRAL_MERIDIAN = _rad(-5, 24, 0)

ZONE_DEFINITIONS = MappingProxyType({
    CoordinateSystem.LAMBERT_NORD_MAROC: OneStandardParallel(
        lambda0=_CENTRAL_MERIDIAN,
        phi0=_rad(33, 18, 0),
        k0=0.9996,
        x0=500_000.,
        y0=300_000.,
    ),
    CoordinateSystem.LAMBERT_SUD_MAROC: OneStandardParallel(
        lambda0=_CENTRAL_MERIDIAN,
        phi0=_rad(29, 42, 0),
        k0=0.9996,
        x0=500_000.,
        y0=300_000.,
    ),
    CoordinateSystem.LAMBERT_Z1: TwoStandardParallels(
        lambda0=_CENTRAL_MERIDIAN,
        phi1=_rad(34, 51, 59.2476),
        phi2=_rad(31, 43, 26.1323),
        phi0=_rad(33, 18, 0),
        x0=500_000.,
        y0=300_000.,
    ),
    CoordinateSystem.LAMBERT_Z2: TwoStandardParallels(
        lambda0=_CENTRAL_MERIDIAN,
        phi1=_rad(31, 17, 18.5767),
        phi2=_rad(28, 6, 10.4865),
        phi0=_rad(29, 42, 0),
        x0=500_000.,
        y0=300_000.,
    ),
    CoordinateSystem.LAMBERT_Z3: TwoStandardParallels(
        lambda0=_CENTRAL_MERIDIAN,
        phi1=_rad(27, 41, 16.5113),
        phi2=_rad(24, 30, 16.9209),
        phi0=_rad(26, 6, 0),
        x0=1_200_000.,
        y0=400_000.,
    ),
    CoordinateSystem.LAMBERT_Z4: TwoStandardParallels(
        lambda0=_CENTRAL_MERIDIAN,
        phi1=_rad(24, 5, 18.4911),
        phi2=_rad(20, 54, 19.0180),
        phi0=_rad(22, 30, 0),
        x0=1_500_000.,
        y0=400_000.,
    ),
})


class ZoneRegistry(Mapping):
    """
    Immutable mapping of coordinate systems to their precomputed zone parameters.

    Parameters are derived from each definition exactly once, at construction; a zone's
    parameters depend only on its own definition and the ellipsoid.

    Args:
        definitions:
            Mapping of CoordinateSystem (or its tag) to ZoneDefinition

        ellipsoid:
            (Default Clarke 1880) The ellipsoid every zone is defined on
    """

    def __init__(
        self,
        definitions: Mapping,
        ellipsoid: Ellipsoid = CLARKE_1880,
    ):
        self._ellipsoid = ellipsoid
        self._definitions = MappingProxyType({
            CoordinateSystem.parse(system): definition
            for system, definition in definitions.items()
        })
        self._parameters = MappingProxyType({
            system: definition.precompute(ellipsoid)
            for system, definition in self._definitions.items()
        })

    def __getitem__(self, system: Union[str, CoordinateSystem]) -> ZoneParameters:
        try:
            return self._parameters[CoordinateSystem.parse(system)]
        except ValueError:
            raise KeyError(system) from None

    def __contains__(self, system) -> bool:
        try:
            return CoordinateSystem.parse(system) in self._parameters
        except ValueError:
            return False

    def __iter__(self) -> Iterator[CoordinateSystem]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def __repr__(self):
        return f'<ZoneRegistry of {len(self)} zones on {self._ellipsoid.name or "unnamed ellipsoid"}>'

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    def definition(self, system: Union[str, CoordinateSystem]) -> ZoneDefinition:
        """Returns the static definition a zone's parameters were derived from"""
        return self._definitions[CoordinateSystem.parse(system)]


DEFAULT_REGISTRY = ZoneRegistry(ZONE_DEFINITIONS)
