from dataclasses import FrozenInstanceError

import pytest

from geodist.options import *


def test_distance_options_defaults():
    options = DistanceOptions()
    assert options.exact is False
    assert options.format is False
    assert options.limit is None
    assert options.unit is None

    with pytest.raises(FrozenInstanceError):
        options.unit = 'km'


def test_coerce_options():
    assert coerce_options() == DistanceOptions()
    assert coerce_options(None) == DistanceOptions()

    options = DistanceOptions(unit='km')
    assert coerce_options(options) is options

    assert coerce_options({'unit': 'km', 'exact': True}) == DistanceOptions(unit='km', exact=True)

    # Unrecognized keys are ignored
    assert coerce_options({'unit': 'km', 'precision': 3}) == DistanceOptions(unit='km')

    with pytest.raises(TypeError):
        coerce_options(['km'])


def test_coerce_options_overrides():
    assert coerce_options({'unit': 'km'}, unit='mi') == DistanceOptions(unit='mi')
    assert coerce_options(DistanceOptions(exact=True), limit=5) == DistanceOptions(exact=True, limit=5)

    with pytest.raises(TypeError):
        coerce_options(None, precision=3)
