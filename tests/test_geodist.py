import pytest

import geodist


def test_public_api():
    for name in geodist.__all__:
        assert hasattr(geodist, name)

    assert geodist.get_distance(
        geodist.Point(0, 0), geodist.Point(0, 1), geodist.DistanceOptions(format=True)
    ) == '111194 meters'


def test_radius_units_read_only():
    with pytest.raises(TypeError):
        geodist.RADIUS_UNITS['parsecs'] = 1

    assert 'parsecs' not in geodist.RADIUS_UNITS
    assert geodist.DEFAULT_UNIT in geodist.RADIUS_UNITS
