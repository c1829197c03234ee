#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import decimal
import math
import sys

from contextlib import nullcontext
from decimal import Decimal

import numpy as np
import pytest

from finprim import RoundingMode, FLOAT32, FLOAT64, DECIMAL, floatlike, round_with_mode


modes = [
    RoundingMode.HALF_TO_EVEN,
    RoundingMode.HALF_AWAY_FROM_ZERO,
    RoundingMode.HALF_TOWARD_ZERO,
    RoundingMode.TOWARD_ZERO,
    RoundingMode.AWAY_FROM_ZERO,
    RoundingMode.TO_NEGATIVE_INFINITY,
    RoundingMode.TO_INFINITY,
]

half_modes = modes[:3]


# value, dp, expected result for each of the modes above
rounding_cases = [
    ( '2.5',  0, [ '2.0',  '3.0',  '2.0',  '2.0',  '3.0',  '2.0',  '3.0']),
    ('-2.5',  0, ['-2.0', '-3.0', '-2.0', '-2.0', '-3.0', '-3.0', '-2.0']),
    ( '3.005', 2, [ '3.00',  '3.01',  '3.00',  '3.00',  '3.01',  '3.00',  '3.01']),
    ('-3.005', 2, ['-3.00', '-3.01', '-3.00', '-3.00', '-3.01', '-3.01', '-3.00']),
    ( '0.333', 2, [ '0.33',  '0.33',  '0.33',  '0.33',  '0.34',  '0.33',  '0.34']),
    ('-0.333', 2, ['-0.33', '-0.33', '-0.33', '-0.33', '-0.34', '-0.34', '-0.33']),
    ( '0.555', 2, [ '0.56',  '0.56',  '0.55',  '0.55',  '0.56',  '0.55',  '0.56']),
    ( '3.00',  2, [ '3.00',  '3.00',  '3.00',  '3.00',  '3.00',  '3.00',  '3.00']),
]


def _params(cases, scalar_types):
    params = []
    for value, dp, expected in cases:
        for mode, e in zip(modes, expected):
            for scalar in scalar_types:
                params.append(pytest.param(scalar, value, dp, mode, e, id=f'{scalar.__name__}-{value}-{mode.name}'))
    return params


@pytest.mark.parametrize("scalar,value,dp,mode,expected",
    _params(rounding_cases[:3], [np.float32]) +
    _params(rounding_cases, [np.float64, Decimal])
)
def test_round_with_mode(scalar, value, dp, mode, expected):
    result = round_with_mode(scalar(value), dp, mode, scalar('1e-5'))
    assert result == scalar(expected)
    assert type(result) is scalar


@pytest.mark.parametrize("value", [case[0] for case in rounding_cases])
@pytest.mark.parametrize("mode", half_modes)
def test_round_with_mode_idempotent_float(value, mode):
    once = round_with_mode(float(value), 2, mode, 1e-8)
    twice = round_with_mode(once, 2, mode, 1e-8)
    assert twice == once


def test_round_with_mode_directed_float():
    # 0.56 * 100 == 56.00000000000001, so rounding up again moves it
    once = round_with_mode(0.555, 2, RoundingMode.TO_INFINITY, 1e-8)
    assert once == 0.56
    assert round_with_mode(once, 2, RoundingMode.TO_INFINITY, 1e-8) == 0.57
    assert round_with_mode(Decimal('0.56'), 2, RoundingMode.TO_INFINITY, Decimal(0)) == Decimal('0.56')


@pytest.mark.parametrize("value", [case[0] for case in rounding_cases] + ['123.456789', '-0.005', '1e-9'])
@pytest.mark.parametrize("mode", modes)
def test_round_with_mode_idempotent_decimal(value, mode):
    once = round_with_mode(Decimal(value), 2, mode, Decimal(0))
    twice = round_with_mode(once, 2, mode, Decimal(0))
    assert twice == once


def test_round_with_mode_decimal_precision():
    # 1e20 to 10 places needs 31 digits, more than the context's 28
    with pytest.raises(decimal.InvalidOperation):
        round_with_mode(Decimal('1e20'), 10, RoundingMode.HALF_TO_EVEN, Decimal(0))
    with decimal.localcontext() as ctx:
        ctx.prec = 40
        assert round_with_mode(Decimal('1e20'), 10, RoundingMode.HALF_TO_EVEN, Decimal(0)) == Decimal('1e20')


def test_round_with_mode_epsilon():
    # 0.555 * 100 == 55.50000000000001, a midpoint only within epsilon
    assert round_with_mode(0.555, 2, RoundingMode.HALF_TOWARD_ZERO, 1e-8) == 0.55
    assert round_with_mode(0.555, 2, RoundingMode.HALF_TOWARD_ZERO, 0.0) == 0.56


def test_round_with_mode_away_from_midpoint():
    for mode in half_modes:
        assert round_with_mode(2.4, 0, mode, 1e-5) == 2.0
        assert round_with_mode(2.6, 0, mode, 1e-5) == 3.0
        assert round_with_mode(-2.6, 0, mode, 1e-5) == -3.0


def test_round_half_to_even_bankers():
    values = [0.5, 1.5, 2.5, 3.5, 4.5, -0.5, -1.5]
    expected = [0.0, 2.0, 2.0, 4.0, 4.0, -0.0, -2.0]
    assert [round_with_mode(v, 0, RoundingMode.HALF_TO_EVEN, 1e-9) for v in values] == expected


def test_identities(scalar):
    fl = floatlike(scalar(0))
    assert fl.zero() == 0
    assert fl.one() == 1
    assert fl.two() == 2
    assert type(fl.zero()) is scalar
    assert type(fl.one()) is scalar
    assert fl.is_zero(fl.zero())
    assert not fl.is_zero(fl.one())
    assert fl.abs(scalar('-1.5')) == scalar('1.5')
    assert fl.min(scalar(1), scalar(2)) == scalar(1)
    assert fl.max(scalar(1), scalar(2)) == scalar(2)


def test_powf(scalar):
    fl = floatlike(scalar(0))
    assert fl.powf(scalar(4), scalar('0.5')) == pytest.approx(scalar(2))
    assert fl.powf(scalar(4), scalar('-0.5')) == pytest.approx(scalar('0.5'))
    assert fl.powf(scalar(2), scalar(10)) == scalar(1024)


def test_powf_binary_float_domain():
    with np.errstate(invalid='ignore'):
        assert math.isnan(FLOAT64.powf(-8.0, 1.0/3.0))


def test_max():
    assert FLOAT64.MAX == sys.float_info.max
    assert FLOAT32.MAX == np.finfo(np.float32).max
    assert type(FLOAT32.MAX) is np.float32
    assert DECIMAL.MAX.is_finite()
    assert DECIMAL.MAX > Decimal('79228162514264337593543950335')


def test_nan_ignored_by_min_max():
    assert FLOAT64.min(1.0, math.nan) == 1.0
    assert FLOAT64.max(math.nan, 1.0) == 1.0


def test_from_f32():
    assert FLOAT32.from_f32(0.1) == np.float32(0.1)
    assert FLOAT64.from_f32(0.1) == float(np.float32(0.1))
    assert FLOAT64.from_f32(0.1) != 0.1
    assert DECIMAL.from_f32(0.1) == Decimal('0.1')
    assert DECIMAL.from_f32(1e-5) == Decimal('0.00001')


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_from_f32_decimal_not_finite(value):
    with pytest.raises(ValueError):
        DECIMAL.from_f32(value)


from_int_params = [
    ('from_u16',   0,         nullcontext(0)),
    ('from_u16',   0xffff,    nullcontext(0xffff)),
    ('from_u16',   0x10000,   pytest.raises(OverflowError)),
    ('from_u16',   -1,        pytest.raises(OverflowError)),
    ('from_usize', 2**40,     nullcontext(2**40)),
    ('from_usize', -1,        pytest.raises(OverflowError)),
    ('from_i32',   -365,      nullcontext(-365)),
    ('from_i32',   2**31,     pytest.raises(OverflowError)),
    ('from_i32',   1.5,       pytest.raises(TypeError)),
]

@pytest.mark.parametrize("method,n,eyc", from_int_params)
def test_from_int(scalar, method, n, eyc):
    fl = floatlike(scalar(0))
    with eyc as e:
        result = getattr(fl, method)(n)
        assert result == e
        assert type(result) is scalar


def test_cast_decimal():
    assert DECIMAL.cast(1) == Decimal(1)
    assert DECIMAL.cast('0.25') == Decimal('0.25')
    assert DECIMAL.cast(0.1) == Decimal('0.1')
    assert DECIMAL.cast(np.float32(0.1)) == Decimal('0.1')
    with pytest.raises(ValueError):
        DECIMAL.cast(math.inf)
    with pytest.raises(TypeError):
        DECIMAL.cast(None)


dispatch_params = [
    (1.0,               nullcontext(FLOAT64)),
    (1,                 nullcontext(FLOAT64)),
    (np.int64(1),       nullcontext(FLOAT64)),
    (np.float64(1),     nullcontext(FLOAT64)),
    (np.float32(1),     nullcontext(FLOAT32)),
    (Decimal(1),        nullcontext(DECIMAL)),
    ('1',               pytest.raises(TypeError)),
    (1j,                pytest.raises(TypeError)),
    (np.float16(1),     pytest.raises(TypeError)),
]

@pytest.mark.parametrize("value,eyc", dispatch_params)
def test_floatlike(value, eyc):
    with eyc as e:
        assert floatlike(value) is e
