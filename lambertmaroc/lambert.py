"""
Lambert Conformal Conic projection, in its one standard parallel (1SP) and two standard
parallel (2SP) forms.

Both forms reduce to a cone described by the same three constants (cone constant n,
scale constant F and origin radius rho0). Each zone definition derives them once in
``precompute``; the resulting ``ZoneParameters`` carry the single forward/inverse kernel
shared by both forms.
"""

__all__ = [
    'OneStandardParallel', 'TwoStandardParallels', 'ZoneDefinition', 'ZoneParameters',
    'isometric_latitude_function', 'm_function',
]

import math
from typing import NamedTuple, Tuple

from pydantic import validate_call

from lambertmaroc._const import (
    CONE_APEX_EPSILON, CONVERGENCE_TOLERANCE, LAMBERT_MAX_ITERATIONS
)
from lambertmaroc.ellipsoid import Ellipsoid
from lambertmaroc.utils.logging import log_not_converged


def isometric_latitude_function(phi: float, e: float) -> float:
    """
    The conformal latitude function t(φ) of the Lambert projection.

    Undefined at the poles; callers must keep |φ| < π/2.

    Args:
        phi:
            Latitude, in radians

        e:
            First eccentricity of the ellipsoid

    Returns:
        float
    """
    e_sin = e * math.sin(phi)
    return math.tan(math.pi / 4 - phi / 2) / ((1 - e_sin) / (1 + e_sin)) ** (e / 2)


def m_function(phi: float, e2: float) -> float:
    """m(φ) = cos φ / sqrt(1 - e² sin² φ), with φ in radians"""
    sin_phi = math.sin(phi)
    return math.cos(phi) / math.sqrt(1 - e2 * sin_phi * sin_phi)


class ZoneParameters(NamedTuple):
    """
    Precomputed constants of a conformal conic zone, along with the projection kernel
    operating on them. Angles are stored in radians, grid values in meters.
    """
    n: float
    F: float
    rho0: float
    e: float
    lambda0: float
    phi0: float
    x0: float
    y0: float

    def forward(self, lat: float, lon: float) -> Tuple[float, float]:
        """
        Projects a geodetic position onto the zone's grid.

        Args:
            lat:
                Latitude on the zone's ellipsoid, in degrees. Must satisfy |lat| < 90.

            lon:
                Longitude, in degrees

        Returns:
            (x, y) easting and northing, in meters
        """
        if not -90 < lat < 90:
            raise ValueError(f'latitude {lat} is outside the projection domain (-90, 90)')

        t = isometric_latitude_function(math.radians(lat), self.e)
        rho = self.F * t ** self.n
        theta = self.n * (math.radians(lon) - self.lambda0)

        return (
            self.x0 + rho * math.sin(theta),
            self.y0 + self.rho0 - rho * math.cos(theta),
        )

    def inverse(self, x: float, y: float) -> Tuple[float, float]:
        """
        Recovers the geodetic position of a grid point.

        Latitude is solved by fixed-point iteration (tolerance 1e-12 rad, at most 5
        iterations). A point at the apex of the cone returns the zone origin.

        Args:
            x:
                Easting, in meters

            y:
                Northing, in meters

        Returns:
            (latitude, longitude) on the zone's ellipsoid, in degrees

        Raises:
            ValueError: the point lies so far off the grid that its cone radius overflows
        """
        dx = x - self.x0
        dy = self.rho0 - (y - self.y0)
        rho = math.hypot(dx, dy)

        if rho < CONE_APEX_EPSILON:
            return math.degrees(self.phi0), math.degrees(self.lambda0)

        theta = math.atan2(dx, dy)
        lam = theta / self.n + self.lambda0
        try:
            t = (rho / self.F) ** (1 / self.n)
        except OverflowError:
            raise ValueError(f'grid point ({x}, {y}) is outside the projection domain') from None

        phi = math.pi / 2 - 2 * math.atan(t)
        residual = math.inf
        for _ in range(LAMBERT_MAX_ITERATIONS):
            e_sin = self.e * math.sin(phi)
            new_phi = math.pi / 2 - 2 * math.atan(t * ((1 - e_sin) / (1 + e_sin)) ** (self.e / 2))
            residual = abs(new_phi - phi)
            phi = new_phi
            if residual < CONVERGENCE_TOLERANCE:
                break
        else:
            log_not_converged('lambert_inverse', LAMBERT_MAX_ITERATIONS, residual)

        return math.degrees(phi), math.degrees(lam)


class ZoneDefinition:
    """
    Base class for the static definition of a Lambert zone. Angles are held in radians.

    Subclasses implement ``precompute``, which resolves the variant into the cone
    constants consumed by the shared kernel.
    """

    __slots__ = ('lambda0', 'x0', 'y0')
    _fields: Tuple[str, ...] = ()

    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            object.__setattr__(self, key, value)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def _key(self) -> Tuple:
        return tuple(getattr(self, field) for field in self._fields)

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False

        return self._key() == other._key()

    def __hash__(self):
        return hash((self.__class__.__name__, *self._key()))

    def __repr__(self):
        params = ', '.join(f'{field}={getattr(self, field)!r}' for field in self._fields)
        return f'<{self.__class__.__name__}({params})>'

    def precompute(self, ellipsoid: Ellipsoid) -> ZoneParameters:
        raise NotImplementedError


class OneStandardParallel(ZoneDefinition):
    """
    Lambert Conformal Conic with a single standard parallel (the latitude of origin) and
    an explicit scale factor on it.
    """

    __slots__ = ('phi0', 'k0')
    _fields = ('lambda0', 'phi0', 'k0', 'x0', 'y0')

    @validate_call
    def __init__(self, lambda0: float, phi0: float, k0: float, x0: float, y0: float):
        if not 0 < abs(phi0) < math.pi / 2:
            raise ValueError(f'latitude of origin must be strictly between 0 and ±π/2, got {phi0}')
        if k0 <= 0:
            raise ValueError(f'scale factor must be positive, got {k0}')

        super().__init__(lambda0=lambda0, phi0=phi0, k0=k0, x0=x0, y0=y0)

    @classmethod
    def from_degrees(
        cls, lambda0: float, phi0: float, k0: float, x0: float, y0: float
    ) -> 'OneStandardParallel':
        return cls(math.radians(lambda0), math.radians(phi0), k0, x0, y0)

    def precompute(self, ellipsoid: Ellipsoid) -> ZoneParameters:
        e = ellipsoid.e
        n = math.sin(self.phi0)
        t0 = isometric_latitude_function(self.phi0, e)
        m0 = m_function(self.phi0, ellipsoid.e2)

        F = ellipsoid.a * self.k0 * m0 / (n * t0 ** n)
        rho0 = F * t0 ** n

        return ZoneParameters(n, F, rho0, e, self.lambda0, self.phi0, self.x0, self.y0)


class TwoStandardParallels(ZoneDefinition):
    """
    Lambert Conformal Conic secant to the ellipsoid along two standard parallels. The
    scale factor is implied by the parallels and is not stored.
    """

    __slots__ = ('phi1', 'phi2', 'phi0')
    _fields = ('lambda0', 'phi1', 'phi2', 'phi0', 'x0', 'y0')

    @validate_call
    def __init__(
        self, lambda0: float, phi1: float, phi2: float, phi0: float, x0: float, y0: float
    ):
        if phi1 == phi2:
            raise ValueError('standard parallels must differ; use OneStandardParallel instead')
        for phi in (phi1, phi2, phi0):
            if not abs(phi) < math.pi / 2:
                raise ValueError(f'latitude {phi} must be strictly between ±π/2')

        super().__init__(lambda0=lambda0, phi1=phi1, phi2=phi2, phi0=phi0, x0=x0, y0=y0)

    @classmethod
    def from_degrees(
        cls, lambda0: float, phi1: float, phi2: float, phi0: float, x0: float, y0: float
    ) -> 'TwoStandardParallels':
        return cls(
            math.radians(lambda0), math.radians(phi1), math.radians(phi2),
            math.radians(phi0), x0, y0
        )

    def precompute(self, ellipsoid: Ellipsoid) -> ZoneParameters:
        e, e2 = ellipsoid.e, ellipsoid.e2
        m1, m2 = m_function(self.phi1, e2), m_function(self.phi2, e2)
        t1 = isometric_latitude_function(self.phi1, e)
        t2 = isometric_latitude_function(self.phi2, e)
        t0 = isometric_latitude_function(self.phi0, e)

        n = (math.log(m1) - math.log(m2)) / (math.log(t1) - math.log(t2))
        F = ellipsoid.a * m1 / (n * t1 ** n)
        rho0 = F * t0 ** n

        return ZoneParameters(n, F, rho0, e, self.lambda0, self.phi0, self.x0, self.y0)
