"""
Coordinate system tags understood by the transformation engine
"""

__all__ = ['CoordinateSystem', 'LAMBERT_1SP_SYSTEMS', 'LAMBERT_2SP_SYSTEMS', 'suggest_zone']

from enum import Enum
from typing import Union


class CoordinateSystem(str, Enum):
    """
    The fixed set of coordinate systems. For WGS84, x is longitude and y is latitude in
    degrees; for every Lambert zone, x/y are easting/northing in meters. LOCAL is an
    arbitrary survey frame with no geodetic meaning.
    """
    LOCAL = 'local'
    WGS84 = 'wgs84'
    LAMBERT_NORD_MAROC = 'lambert_nord_maroc'
    LAMBERT_SUD_MAROC = 'lambert_sud_maroc'
    LAMBERT_Z1 = 'lambert_z1'
    LAMBERT_Z2 = 'lambert_z2'
    LAMBERT_Z3 = 'lambert_z3'
    LAMBERT_Z4 = 'lambert_z4'

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, value: Union[str, 'CoordinateSystem']) -> 'CoordinateSystem':
        """Resolves a system from its tag, e.g. 'lambert_z1'"""
        if isinstance(value, cls):
            return value

        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown coordinate system '{value}'. Options: {[x.value for x in cls]}"
            ) from None

    @property
    def label(self) -> str:
        """Human-readable name of the system"""
        return _LABELS[self]

    @property
    def is_geographic(self) -> bool:
        return self is CoordinateSystem.WGS84

    @property
    def is_projected(self) -> bool:
        """True for planar systems, including the local frame"""
        return self is CoordinateSystem.LOCAL or self.is_lambert

    @property
    def is_lambert(self) -> bool:
        return self.is_lambert_1sp or self.is_lambert_2sp

    @property
    def is_lambert_1sp(self) -> bool:
        return self in LAMBERT_1SP_SYSTEMS

    @property
    def is_lambert_2sp(self) -> bool:
        return self in LAMBERT_2SP_SYSTEMS


LAMBERT_1SP_SYSTEMS = frozenset({
    CoordinateSystem.LAMBERT_NORD_MAROC,
    CoordinateSystem.LAMBERT_SUD_MAROC,
})

LAMBERT_2SP_SYSTEMS = frozenset({
    CoordinateSystem.LAMBERT_Z1,
    CoordinateSystem.LAMBERT_Z2,
    CoordinateSystem.LAMBERT_Z3,
    CoordinateSystem.LAMBERT_Z4,
})

_LABELS = {
    CoordinateSystem.LOCAL: 'Local / Arbitraire',
    CoordinateSystem.WGS84: 'WGS84 (Latitude/Longitude)',
    CoordinateSystem.LAMBERT_NORD_MAROC: 'Lambert Nord Maroc',
    CoordinateSystem.LAMBERT_SUD_MAROC: 'Lambert Sud Maroc',
    CoordinateSystem.LAMBERT_Z1: 'Lambert Maroc: Zone 1',
    CoordinateSystem.LAMBERT_Z2: 'Lambert Maroc: Zone 2',
    CoordinateSystem.LAMBERT_Z3: 'Lambert Maroc: Zone 3',
    CoordinateSystem.LAMBERT_Z4: 'Lambert Maroc: Zone 4',
}

# Southern bound (degrees north) of each zone's latitude band
_ZONE_BANDS = (
    (31.7, CoordinateSystem.LAMBERT_Z1),
    (28.1, CoordinateSystem.LAMBERT_Z2),
    (24.5, CoordinateSystem.LAMBERT_Z3),
)


def suggest_zone(latitude: float) -> CoordinateSystem:
    """
    Suggests the Lambert zone whose latitude band contains the given latitude.

    Args:
        latitude:
            WGS84 latitude, in degrees

    Returns:
        CoordinateSystem
    """
    for lower_bound, zone in _ZONE_BANDS:
        if latitude >= lower_bound:
            return zone

    return CoordinateSystem.LAMBERT_Z4
