import math

from geodist.utils.functions import *


def test_as_float():
    assert as_float(1) == 1.
    assert as_float('1.5') == 1.5
    assert as_float(' -2 ') == -2.
    assert math.isnan(as_float(None))
    assert math.isnan(as_float('abc'))
    assert math.isnan(as_float({}))
    assert as_float(10 ** 400) == math.inf
    assert as_float(-10 ** 400) == -math.inf


def test_format_number():
    assert format_number(111194) == '111194'
    assert format_number(0) == '0'
    assert format_number(5.) == '5'
    assert format_number(-0.) == '0'
    assert format_number(111.19492664455873) == '111.19492664455873'
    assert format_number(0.1) == '0.1'
    assert format_number(math.nan) == 'NaN'
    assert format_number(math.inf) == 'Infinity'
    assert format_number(-math.inf) == '-Infinity'

    # Plain notation between 1e-7 and 1e21
    assert format_number(100.) == '100'
    assert format_number(-0.5) == '-0.5'
    assert format_number(0.00001) == '0.00001'
    assert format_number(0.000123) == '0.000123'
    assert format_number(1e20) == '100000000000000000000'
    assert format_number(1e-7) == '1e-7'
    assert format_number(1.5e-7) == '1.5e-7'
    assert format_number(1e21) == '1e+21'
    assert format_number(1.23e22) == '1.23e+22'
    assert format_number(10 ** 22) == '1e+22'


def test_is_truthy():
    assert is_truthy(1)
    assert is_truthy(200.)
    assert is_truthy(True)
    assert not is_truthy(0)
    assert not is_truthy(None)
    assert not is_truthy(False)
    assert not is_truthy(math.nan)
