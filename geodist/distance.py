"""
Great-circle distance between two points on the globe
"""

__all__ = ['get_distance']

import math
from typing import Any, Mapping, Union

import numpy as np

from geodist._const import DEFAULT_UNIT
from geodist.conversion import degrees_to_radians, get_earth_radius
from geodist.coordinates import coerce_point
from geodist.options import DistanceOptions, coerce_options
from geodist.utils.functions import format_number, is_truthy


def get_distance(
    start: Any,
    end: Any,
    options: Union[DistanceOptions, Mapping[str, Any], None] = None,
    **kwargs: Any
) -> Union[int, float, str, bool]:
    """
    Calculates the distance between 'start' and 'end' using the Haversine
    formula (spherical earth).

    The distance is floored to an integer unless `exact` is set. When `limit`
    is set a bool is returned (True if the limit is greater than the
    distance), regardless of `format`. When `format` is set the distance is
    returned as a '<value> <unit>' string, labelled with the unit as it was
    requested.

    Degenerate input (NaN coordinates, rounding pushing the haversine term
    past 1) produces NaN rather than an exception.

    Args:
        start:
            The starting point; a Point, a mapping with 'lat'/'lon' keys, or
            any object with 'lat'/'lon' attributes

        end:
            The ending point, as above

        options:
            (Optional) A DistanceOptions, or a mapping of option names to values

        kwargs:
            Individual options (exact, format, limit, unit), overriding `options`

    Returns:
        int, float, str or bool depending on the options
    """
    start, end = coerce_point(start), coerce_point(end)
    options = coerce_options(options, **kwargs)

    earth_radius = get_earth_radius(options.unit)
    with np.errstate(invalid='ignore'):
        lat_delta = degrees_to_radians(end.lat - start.lat)
        lat_delta_sin = np.sin(lat_delta / 2)
        lon_delta = degrees_to_radians(end.lon - start.lon)
        lon_delta_sin = np.sin(lon_delta / 2)
        start_lat = degrees_to_radians(start.lat)
        end_lat = degrees_to_radians(end.lat)

        a = (lat_delta_sin ** 2 +
             lon_delta_sin ** 2 * (np.cos(start_lat) * np.cos(end_lat)))
        c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    dist: Union[int, float] = float(earth_radius * c)

    if not is_truthy(options.exact):
        dist = _floor(dist)

    if is_truthy(options.limit):
        return bool(options.limit > dist)

    if is_truthy(options.format):
        return f'{format_number(dist)} {options.unit or DEFAULT_UNIT}'

    return dist


def _floor(value: float) -> Union[int, float]:
    """Floors toward negative infinity; NaN and infinities pass through"""
    if not math.isfinite(value):
        return value

    return math.floor(value)
