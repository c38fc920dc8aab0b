"""
Constants declarations for geodist
"""

__all__ = ['DEFAULT_UNIT', 'RADIUS_UNITS']

from types import MappingProxyType

DEFAULT_UNIT = 'meters'

# Mean Earth radius, keyed by (lower-case) unit name
RADIUS_UNITS = MappingProxyType({
    'feet': 20_908_800,
    'yards': 6_969_600,
    'miles': 3_960,
    'mi': 3_960,
    'kilometers': 6_371,
    'km': 6_371,
    'meters': 6_371_000,
    'm': 6_371_000,
})
