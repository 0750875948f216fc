"""
Point representations exchanged with the transformation engine
"""

__all__ = ['Coordinate', 'GridCoordinate', 'XY']

from typing import NamedTuple, Tuple, Union

from lambertmaroc.systems import CoordinateSystem
from lambertmaroc.utils.functions import dd_to_dms, dms_to_dd


class Coordinate:
    """
    Representation of a geographic WGS84 coordinate (i.e., a lon/lat pair, in degrees).

    Longitudes are wrapped into [-180, 180). Latitudes outside [-90, 90] are rejected
    rather than wrapped over the pole.
    """

    system = CoordinateSystem.WGS84

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
    ):
        lon, lat = float(longitude), float(latitude)
        if not -90 <= lat <= 90:
            raise ValueError(f'latitude {lat} is outside [-90, 90]')

        while not -180 <= lon <= 180:
            # Crosses the antimeridian
            lon = lon - 360 if lon > 180 else lon + 360

        # Longitudes are bounded to [-180, 180)
        if lon == 180:
            lon = -180

        self.longitude = lon
        self.latitude = lat

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self):
        return hash((self.longitude, self.latitude))

    def __repr__(self):
        return f'<Coordinate({self.longitude}, {self.latitude})>'

    @property
    def x(self) -> float:
        """Longitude, following the engine's x/y convention"""
        return self.longitude

    @property
    def y(self) -> float:
        """Latitude, following the engine's x/y convention"""
        return self.latitude

    @classmethod
    def from_dms(cls, lon: Tuple[int, int, float, str], lat: Tuple[int, int, float, str]):
        """
        Creates a Coordinate from a Degree Minutes Seconds (lon, lat) pair.

        The quadrant value should consist of either 'E'/'W' (longitude) or 'N'/'S' (latitude)

        Args:
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str))
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )

        Returns:
            Coordinate
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * dms_to_dd(abs(dms[0]), dms[1], dms[2])

        return cls(convert(lon), convert(lat))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Converts the coordinate to a pair of (degrees, minutes, seconds, hemisphere)

        Returns:
            (longitude, latitude) as 4-tuples
        """
        return (
            (*dd_to_dms(self.longitude), 'E' if self.longitude >= 0 else 'W'),
            (*dd_to_dms(self.latitude), 'N' if self.latitude >= 0 else 'S'),
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple[float, float]
        """
        if reverse:
            return self.latitude, self.longitude

        return self.longitude, self.latitude


class GridCoordinate:
    """
    A planar point (easting x, northing y, in meters) on a projected coordinate system.
    """

    def __init__(
        self,
        x: Union[float, int, str],
        y: Union[float, int, str],
        system: Union[str, CoordinateSystem],
    ):
        self.system = CoordinateSystem.parse(system)
        if self.system.is_geographic:
            raise ValueError('GridCoordinate requires a projected system; use Coordinate for wgs84')

        self.x = float(x)
        self.y = float(y)

    def __eq__(self, other):
        if not isinstance(other, GridCoordinate):
            return False

        return self.x == other.x and self.y == other.y and self.system is other.system

    def __hash__(self):
        return hash((self.x, self.y, self.system))

    def __repr__(self):
        return f'<GridCoordinate({self.x}, {self.y}, {self.system.value})>'

    def to_float(self) -> Tuple[float, float]:
        return self.x, self.y


class XY(NamedTuple):
    """Plain (x, y) result of a transformation, following the engine's axis convention"""
    x: float
    y: float
