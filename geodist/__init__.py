from geodist._version import __version__  # noqa: F401
from geodist._const import DEFAULT_UNIT, RADIUS_UNITS
from geodist.utils.logging import LOGGER
from geodist.conversion import degrees_to_radians, get_earth_radius
from geodist.coordinates import Point
from geodist.options import DistanceOptions
from geodist.distance import get_distance

__all__ = [
    'DEFAULT_UNIT',
    'DistanceOptions',
    'LOGGER',
    'Point',
    'RADIUS_UNITS',
    'degrees_to_radians',
    'get_distance',
    'get_earth_radius',
]
