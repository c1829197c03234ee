#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#

'''Scalar representations.

Every formula in this package is written once and evaluated with whatever
scalar the caller passes in: binary floating point (NumPy's float32/float64,
or plain Python floats) or fixed-point `decimal.Decimal`.  Formulas get their
constants and their non-operator arithmetic from the `FloatLike` object
returned by `floatlike()`, and never look at which one it is.
'''


import abc
import math
import numbers
import operator
import typing

from decimal import Decimal, getcontext, ROUND_HALF_EVEN, ROUND_HALF_UP, ROUND_HALF_DOWN, ROUND_DOWN, ROUND_UP, ROUND_FLOOR, ROUND_CEILING

import numpy as np

from .rounding import RoundingMode


__all__ = [
    'Scalar',
    'FloatLike',
    'BinaryFloat',
    'FixedDecimal',
    'FLOAT32',
    'FLOAT64',
    'DECIMAL',
    'floatlike',
    'round_with_mode',
]


Scalar = typing.TypeVar('Scalar', float, np.float32, np.float64, Decimal)


def _check_range(n:int, lo:int, hi:int, name:str) -> int:
    n = operator.index(n)
    if not lo <= n <= hi:
        raise OverflowError(f'{n} out of range for {name}')
    return n


class FloatLike(abc.ABC):
    '''Capabilities of one concrete scalar representation.'''

    MAX: typing.Any

    @abc.abstractmethod
    def zero(self): ...

    @abc.abstractmethod
    def one(self): ...

    def two(self):
        return self.one() + self.one()

    def is_zero(self, x) -> bool:
        return x == self.zero()

    def abs(self, x):
        return abs(x)

    @abc.abstractmethod
    def powf(self, x, n): ...

    @abc.abstractmethod
    def min(self, a, b): ...

    @abc.abstractmethod
    def max(self, a, b): ...

    @abc.abstractmethod
    def cast(self, x): ...

    def from_u16(self, n:int):
        return self.cast(_check_range(n, 0, 0xffff, 'u16'))

    def from_usize(self, n:int):
        return self.cast(_check_range(n, 0, 2**64 - 1, 'usize'))

    def from_i32(self, n:int):
        return self.cast(_check_range(n, -2**31, 2**31 - 1, 'i32'))

    @abc.abstractmethod
    def from_f32(self, n:float): ...

    @abc.abstractmethod
    def round_with_mode(self, x, dp:int, mode:RoundingMode, epsilon): ...


def _round_half_away_from_zero(x):
    # np.round rounds half to even, so it can't be used here
    t = np.trunc(x)
    if abs(x - t) >= 0.5:
        t += np.sign(x)
    return t


class BinaryFloat(FloatLike):
    '''IEEE 754 binary floating point, in the given NumPy precision.'''

    def __init__(self, dtype:type[np.floating]):
        self.dtype = dtype
        self.MAX = dtype(np.finfo(dtype).max)

    def __repr__(self) -> str:
        return f'BinaryFloat({self.dtype.__name__})'

    def zero(self):
        return self.dtype(0.0)

    def one(self):
        return self.dtype(1.0)

    def powf(self, x, n):
        return np.power(self.dtype(x), self.dtype(n))

    def min(self, a, b):
        return np.fmin(self.dtype(a), self.dtype(b))

    def max(self, a, b):
        return np.fmax(self.dtype(a), self.dtype(b))

    def cast(self, x):
        return self.dtype(x)

    def from_f32(self, n:float):
        return self.dtype(np.float32(n))

    def round_with_mode(self, x, dp:int, mode:RoundingMode, epsilon):
        t = self.dtype
        factor = self.powf(t(10.0), t(dp))
        shifted = t(x) * factor

        floor = np.floor(shifted)
        ceil = np.ceil(shifted)
        shifted_rd = _round_half_away_from_zero(shifted)

        # Scaling by 10**dp rarely lands exactly on .5, hence the epsilon
        diff_floor = shifted - floor
        midpoint = abs(abs(diff_floor) - t(0.5)) <= t(epsilon)

        positive = shifted > 0.0
        if mode is RoundingMode.HALF_TO_EVEN:
            if not midpoint:
                rounded = shifted_rd
            elif int(floor) % 2 == 0:
                rounded = floor
            else:
                rounded = ceil
        elif mode is RoundingMode.HALF_TOWARD_ZERO:
            if not midpoint:
                rounded = shifted_rd
            else:
                rounded = floor if positive else ceil
        elif mode is RoundingMode.HALF_AWAY_FROM_ZERO:
            if not midpoint:
                rounded = shifted_rd
            else:
                rounded = ceil if positive else floor
        elif mode is RoundingMode.TOWARD_ZERO:
            rounded = floor if positive else ceil
        elif mode is RoundingMode.AWAY_FROM_ZERO:
            rounded = ceil if positive else floor
        elif mode is RoundingMode.TO_NEGATIVE_INFINITY:
            rounded = floor
        elif mode is RoundingMode.TO_INFINITY:
            rounded = ceil
        else:
            raise ValueError(mode)

        return t(rounded / factor)


_decimal_rounding = {
    RoundingMode.HALF_TO_EVEN:         ROUND_HALF_EVEN,
    RoundingMode.HALF_AWAY_FROM_ZERO:  ROUND_HALF_UP,
    RoundingMode.HALF_TOWARD_ZERO:     ROUND_HALF_DOWN,
    RoundingMode.TOWARD_ZERO:          ROUND_DOWN,
    RoundingMode.AWAY_FROM_ZERO:       ROUND_UP,
    RoundingMode.TO_NEGATIVE_INFINITY: ROUND_FLOOR,
    RoundingMode.TO_INFINITY:          ROUND_CEILING,
}
assert len(_decimal_rounding) == len(RoundingMode)


class FixedDecimal(FloatLike):
    '''Fixed-point decimal, with the precision of the current decimal context.'''

    def __repr__(self) -> str:
        return 'FixedDecimal()'

    @property
    def MAX(self) -> Decimal:  # type: ignore[override]
        ctx = getcontext()
        return Decimal((0, (9,) * ctx.prec, ctx.Emax - ctx.prec + 1))

    def zero(self):
        return Decimal(0)

    def one(self):
        return Decimal(1)

    def powf(self, x, n):
        return self.cast(x) ** self.cast(n)

    def min(self, a, b):
        return self.cast(a).min(self.cast(b))

    def max(self, a, b):
        return self.cast(a).max(self.cast(b))

    def cast(self, x):
        if isinstance(x, Decimal):
            return x
        if isinstance(x, numbers.Integral):
            return Decimal(int(x))
        if isinstance(x, str):
            return Decimal(x)
        if isinstance(x, numbers.Real):
            if not math.isfinite(x):
                raise ValueError(f'{x} cannot be represented as a Decimal')
            # Shortest repr of the binary value, not its exact binary expansion
            return Decimal(str(x))
        raise TypeError(f'cannot convert {type(x).__name__} to Decimal')

    def from_f32(self, n:float):
        return self.cast(np.float32(n))

    def round_with_mode(self, x, dp:int, mode:RoundingMode, epsilon=None):
        # Decimal midpoints are exact, so epsilon is not needed.  quantize()
        # raises InvalidOperation if the result exceeds the context precision.
        exp = Decimal(1).scaleb(-dp)
        return self.cast(x).quantize(exp, rounding=_decimal_rounding[mode])


FLOAT32 = BinaryFloat(np.float32)
FLOAT64 = BinaryFloat(np.float64)
DECIMAL = FixedDecimal()


_representations:dict[type, FloatLike] = {
    float:      FLOAT64,
    int:        FLOAT64,
    np.float64: FLOAT64,
    np.float32: FLOAT32,
    Decimal:    DECIMAL,
}


def floatlike(value) -> FloatLike:
    '''Representation of the given scalar.'''
    try:
        return _representations[type(value)]
    except KeyError:
        pass
    if isinstance(value, Decimal):
        return DECIMAL
    if isinstance(value, float) or isinstance(value, numbers.Integral):
        return FLOAT64
    raise TypeError(f'unsupported scalar type {type(value).__name__}')


def round_with_mode(value:Scalar, dp:int, mode:RoundingMode, epsilon:Scalar) -> Scalar:
    '''Round to `dp` decimal places.

    `epsilon` is how close to .5 the scaled value has to be to be considered
    a midpoint; it only matters for binary floats, and has to be chosen by the
    caller according to the magnitude of `value` and `dp`.

    For binary floats the directed modes are not idempotent: 0.56 is stored
    as slightly more than 0.56, so rounding it up to 2 places gives 0.57.
    For Decimal the result must fit the context precision, otherwise
    `decimal.InvalidOperation` is raised (e.g. 1e20 to 10 places needs 31
    digits, more than the default 28).
    '''
    assert dp >= 0
    return floatlike(value).round_with_mode(value, dp, mode, epsilon)
