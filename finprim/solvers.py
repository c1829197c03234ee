#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#

'''Root finders, generic over the scalar representation.

The solvers hold no state between calls: each call starts from the guess it
is given and either returns a root or raises a `RootFindingError` carrying
the last estimate.  There is no automatic retry; pass `err.last_x` as the new
guess, raise `max_iter` or relax `tolerance` to try again.
'''


import logging

from collections.abc import Callable

from .errors import FailedToConverge, RootFindingDivideByZero, InvalidBracket
from .floatlike import Scalar, floatlike


__all__ = [
    'newton_raphson',
    'halley',
    'bisect',
]


logger = logging.getLogger('solvers')


def _check_max_iter(max_iter:int) -> None:
    assert 0 <= max_iter <= 0xffff, f'max_iter ({max_iter}) out of range'


# https://en.wikipedia.org/wiki/Newton%27s_method
def newton_raphson(
    guess:Scalar,
    f:Callable[[Scalar], Scalar],
    f_prime:Callable[[Scalar], Scalar],
    tolerance:Scalar,
    max_iter:int,
) -> Scalar:
    '''Find x such that |f(x)| < tolerance with Newton-Raphson's method.'''
    _check_max_iter(max_iter)
    fl = floatlike(guess)
    tolerance = fl.cast(tolerance)

    x = fl.cast(guess)
    fx = f(x)
    for i in range(max_iter):
        if fl.abs(fx) < tolerance:
            return x
        f_prime_x = f_prime(x)
        if fl.is_zero(f_prime_x):
            raise RootFindingDivideByZero(x, fx)
        x -= fx / f_prime_x
        fx = f(x)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('newton_raphson: iteration %i x = %s f(x) = %s', i, x, fx)
    raise FailedToConverge(x, fx)


def _step_halley(fl, f_x, f_prime_x, f_prime2_x):
    _2 = fl.two()
    numerator = _2 * f_x * f_prime_x
    denominator = _2 * f_prime_x * f_prime_x - f_x * f_prime2_x
    return numerator, denominator


# https://en.wikipedia.org/wiki/Halley%27s_method
def halley(
    guess:Scalar,
    f:Callable[[Scalar], Scalar],
    f_prime:Callable[[Scalar], Scalar],
    f_prime2:Callable[[Scalar], Scalar],
    tolerance:Scalar,
    max_iter:int,
) -> Scalar:
    '''Find x such that |f(x)| < tolerance with Halley's method.

    Converges cubically near a simple root, so it takes fewer evaluations than
    Newton-Raphson when the second derivative is cheap.
    '''
    _check_max_iter(max_iter)
    fl = floatlike(guess)
    tolerance = fl.cast(tolerance)

    x = fl.cast(guess)
    fx = f(x)
    for i in range(max_iter):
        if fl.abs(fx) < tolerance:
            return x
        numerator, denominator = _step_halley(fl, fx, f_prime(x), f_prime2(x))
        if fl.is_zero(denominator):
            raise RootFindingDivideByZero(x, fx)
        x -= numerator / denominator
        fx = f(x)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('halley: iteration %i x = %s f(x) = %s', i, x, fx)
    raise FailedToConverge(x, fx)


def bisect(
    f:Callable[[Scalar], Scalar],
    lower:Scalar,
    upper:Scalar,
    tolerance:Scalar,
    max_iter:int,
) -> Scalar:
    '''Find x in [lower, upper] such that |f(x)| < tolerance by bisection.

    Slow but safe: it needs no derivative, only a sign change of f between
    the bracket ends, and raises InvalidBracket otherwise.
    '''
    _check_max_iter(max_iter)
    fl = floatlike(lower)
    tolerance = fl.cast(tolerance)
    zero = fl.zero()

    lo, hi = fl.cast(lower), fl.cast(upper)
    f_lo, f_hi = f(lo), f(hi)
    if fl.abs(f_lo) < tolerance:
        return lo
    if fl.abs(f_hi) < tolerance:
        return hi
    if (f_lo > zero and f_hi > zero) or (f_lo < zero and f_hi < zero):
        raise InvalidBracket()

    x, fx = lo, f_lo
    for i in range(max_iter):
        x = (lo + hi) / fl.two()
        fx = f(x)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('bisect: iteration %i x = %s f(x) = %s', i, x, fx)
        if fl.abs(fx) < tolerance:
            return x
        # keep the half where the sign changes
        if (f_lo < zero) == (fx < zero):
            lo, f_lo = x, fx
        else:
            hi = x
    raise FailedToConverge(x, fx)
