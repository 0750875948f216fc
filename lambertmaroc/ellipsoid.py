"""
Reference ellipsoids used by the Moroccan geodetic systems
"""

__all__ = ['CLARKE_1880', 'Ellipsoid', 'WGS84']

import math
from typing import Optional

from pydantic import validate_call

from lambertmaroc._const import CLARKE_1880_A, CLARKE_1880_B, WGS84_A, WGS84_F


class Ellipsoid:
    """
    A reference ellipsoid of revolution, defined by its semi-major axis and either its
    flattening or its semi-minor axis.

    Instances are read-only; the derived eccentricity values are computed once at
    construction.
    """

    __slots__ = ('_name', '_a', '_f', '_b', '_e2')

    @validate_call
    def __init__(
        self,
        a: float,
        f: Optional[float] = None,
        b: Optional[float] = None,
        name: str = '',
    ):
        if (f is None) == (b is None):
            raise ValueError('Ellipsoid requires exactly one of flattening (f) or minor axis (b)')

        if a <= 0:
            raise ValueError(f'semi-major axis must be positive, got {a}')

        if f is not None:
            if not 0 <= f < 1:
                raise ValueError(f'flattening must be in [0, 1), got {f}')
            b = a * (1 - f)
            e2 = 2 * f - f * f
        else:
            if not 0 < b <= a:
                raise ValueError(f'semi-minor axis must be in (0, a], got {b}')
            f = (a - b) / a
            e2 = 1 - (b * b) / (a * a)

        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_a', a)
        object.__setattr__(self, '_f', f)
        object.__setattr__(self, '_b', b)
        object.__setattr__(self, '_e2', e2)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self.a == other.a and self.e2 == other.e2

    def __hash__(self):
        return hash((self.a, self.e2))

    def __repr__(self):
        return f'<Ellipsoid {self.name or "unnamed"} a={self.a} 1/f={self.inverse_flattening}>'

    @classmethod
    def from_inverse_flattening(cls, a: float, rf: float, name: str = '') -> 'Ellipsoid':
        """
        Creates an Ellipsoid from its semi-major axis and inverse flattening, the way
        ellipsoids are usually published (e.g. 298.257223563 for WGS84).
        """
        if rf <= 0:
            raise ValueError(f'inverse flattening must be positive, got {rf}')

        return cls(a, f=1 / rf, name=name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def a(self) -> float:
        """Semi-major axis, in meters"""
        return self._a

    @property
    def b(self) -> float:
        """Semi-minor axis, in meters"""
        return self._b

    @property
    def f(self) -> float:
        """Flattening"""
        return self._f

    @property
    def inverse_flattening(self) -> float:
        return math.inf if self._f == 0 else 1 / self._f

    @property
    def e2(self) -> float:
        """First eccentricity squared"""
        return self._e2

    @property
    def e(self) -> float:
        """First eccentricity"""
        return math.sqrt(self._e2)


WGS84 = Ellipsoid(WGS84_A, f=WGS84_F, name='WGS84')

# IGN variant of Clarke 1880, used by the Merchich datum
CLARKE_1880 = Ellipsoid(CLARKE_1880_A, b=CLARKE_1880_B, name='Clarke 1880 (IGN)')
