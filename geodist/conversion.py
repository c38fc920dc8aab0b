"""
Module for unit conversions
"""
__all__ = ['degrees_to_radians', 'get_earth_radius']

from typing import Optional

import numpy as np

from geodist._const import DEFAULT_UNIT, RADIUS_UNITS
from geodist.utils.logging import LOGGER


def degrees_to_radians(degrees: float) -> float:
    """
    Converts an angle from degrees to radians.

    Args:
        degrees (float): The angle, in degrees.

    Returns:
        float: The angle, in radians.
    """
    return degrees * (np.pi / 180)


def get_earth_radius(unit: Optional[str] = None) -> float:
    """
    Retrieves the radius of the earth in the specified unit.

    Unrecognized units fall back to the default unit (meters) without error.

    Args:
        unit (str): The unit name, case-insensitive (feet, yards, miles/mi,
        kilometers/km, meters/m).

    Returns:
        float: The earth radius in the given unit.
    """
    unit = (unit or DEFAULT_UNIT).lower()
    if unit not in RADIUS_UNITS:
        LOGGER.debug("Unrecognized unit '%s'; using %s", unit, DEFAULT_UNIT)
        unit = DEFAULT_UNIT

    return float(RADIUS_UNITS[unit])
