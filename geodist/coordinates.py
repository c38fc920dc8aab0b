"""
Representation of a specific point on earth
"""

__all__ = ['Point', 'coerce_point']

from typing import Any, Mapping, Tuple

from geodist.utils.functions import as_float


class Point:
    """
    Representation of a point on the globe (i.e., a lat/lon pair, in degrees).

    Values are not bounded or normalized; anything that cannot be read as a
    float is held as NaN.
    """

    __slots__ = ('lat', 'lon')

    def __init__(self, lat: Any, lon: Any):
        self.lat = as_float(lat)
        self.lon = as_float(lon)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False

        return self.lat == other.lat and self.lon == other.lon

    def __hash__(self):
        return hash((self.lat, self.lon))

    def __repr__(self):
        return f'<Point({self.lat}, {self.lon})>'

    @classmethod
    def from_dict(cls, value: Mapping[str, Any]) -> 'Point':
        """
        Creates a Point from a mapping with 'lat' and 'lon' keys. Missing
        keys produce NaN values.

        Args:
            value:
                A mapping, e.g. {'lat': 52.2, 'lon': 21.0}

        Returns:
            Point
        """
        return cls(value.get('lat'), value.get('lon'))

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple[float, float]
        """
        if reverse:
            return self.lon, self.lat

        return self.lat, self.lon


def coerce_point(value: Any) -> Point:
    """
    Resolves a Point, a mapping with 'lat'/'lon' keys, or any object exposing
    'lat'/'lon' attributes into a Point.
    """
    if isinstance(value, Point):
        return value

    if isinstance(value, Mapping):
        return Point.from_dict(value)

    return Point(getattr(value, 'lat', None), getattr(value, 'lon', None))
