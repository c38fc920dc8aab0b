"""
Options accepted by the distance calculator
"""

__all__ = ['DistanceOptions', 'coerce_options']

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Union


@dataclass(frozen=True)
class DistanceOptions:
    """
    Output options for get_distance()

    Args:
        exact:
            (Default False) Return the floating point distance. When False the
            distance is floored to an integer.

        format:
            (Default False) Return the distance as a '<value> <unit>' string.

        limit:
            (Optional) Return True if the limit is greater than the distance,
            otherwise False. Takes precedence over format.

        unit:
            (Optional) Unit of the returned distance, case-insensitive. Defaults
            to meters.
    """
    exact: bool = False
    format: bool = False
    limit: Optional[float] = None
    unit: Optional[str] = None


_OPTION_NAMES = frozenset(f.name for f in fields(DistanceOptions))


def coerce_options(
    value: Union[DistanceOptions, Mapping[str, Any], None] = None,
    **overrides: Any
) -> DistanceOptions:
    """
    Resolves an options value to a DistanceOptions. Unrecognized mapping keys
    are ignored; keyword overrides win over the options value and must name
    a known option.

    Args:
        value:
            None, a DistanceOptions, or a mapping of option names to values

        overrides:
            Individual option values, e.g. unit='km'

    Returns:
        DistanceOptions
    """
    if value is None:
        options = DistanceOptions()
    elif isinstance(value, DistanceOptions):
        options = value
    elif isinstance(value, Mapping):
        options = DistanceOptions(
            **{k: v for k, v in value.items() if k in _OPTION_NAMES}
        )
    else:
        raise TypeError(
            f'Options must be a DistanceOptions or a mapping, not {type(value).__name__}'
        )

    if overrides:
        options = replace(options, **overrides)

    return options
