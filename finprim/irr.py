#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import datetime
import logging

from collections.abc import Sequence

from .derivatives import pv_prime_r, pv_prime2_r
from .floatlike import Scalar, floatlike
from .solvers import halley
from .tvm import npv, xnpv


__all__ = [
    'DEFAULT_GUESS',
    'DEFAULT_TOLERANCE',
    'DEFAULT_MAX_ITER',
    'DAYS_PER_YEAR',
    'days_since',
    'irr',
    'xirr',
]


logger = logging.getLogger('irr')


DEFAULT_GUESS     = 0.1
DEFAULT_TOLERANCE = 1e-5
DEFAULT_MAX_ITER  = 20

# actual/365
DAYS_PER_YEAR = 365


def days_since(dates:Sequence[datetime.date]) -> list[int]:
    '''Day offsets of each date relative to the first one.'''
    assert len(dates) > 0
    d0 = dates[0]
    assert isinstance(d0, datetime.date)
    return [(d - d0).days for d in dates]


def _defaults(fl, guess, tolerance, max_iter):
    guess = fl.from_f32(DEFAULT_GUESS) if guess is None else fl.cast(guess)
    tolerance = fl.from_f32(DEFAULT_TOLERANCE) if tolerance is None else fl.cast(tolerance)
    max_iter = DEFAULT_MAX_ITER if max_iter is None else max_iter
    return guess, tolerance, max_iter


def irr(
    cash_flows:Sequence[Scalar],
    guess:Scalar|None=None,
    tolerance:Scalar|None=None,
    max_iter:int|None=None,
) -> Scalar:
    '''Equivalent of Excel's IRR function.

    Cash flows are periodic, the first one at time zero.  The result has the
    representation of the cash flows.  Raises FailedToConverge or
    RootFindingDivideByZero when Halley's method does not find a rate; retry
    with the error's `last_x` as the guess, or with a relaxed tolerance.
    '''
    if len(cash_flows) == 0:
        raise ValueError('no cash flows')

    fl = floatlike(cash_flows[0])
    guess, tolerance, max_iter = _defaults(fl, guess, tolerance, max_iter)

    cash_flows = tuple(fl.cast(cf) for cf in cash_flows)
    periods = tuple(fl.from_usize(t) for t in range(len(cash_flows)))
    zero = fl.zero()

    def f(rate):
        return npv(rate, cash_flows)

    def f_prime(rate):
        return sum((pv_prime_r(rate, t, cf) for t, cf in zip(periods, cash_flows)), zero)

    def f_prime2(rate):
        return sum((pv_prime2_r(rate, t, cf) for t, cf in zip(periods, cash_flows)), zero)

    logger.debug('irr: %i cash flows, guess = %s', len(cash_flows), guess)

    return halley(guess, f, f_prime, f_prime2, tolerance, max_iter)


def xirr(
    flow_table:Sequence[tuple[Scalar, int]],
    guess:Scalar|None=None,
    tolerance:Scalar|None=None,
    max_iter:int|None=None,
) -> Scalar:
    '''Equivalent of Excel's XIRR function, for (amount, day offset) pairs.

    The first entry is time zero.  Offsets are converted into years with the
    actual/365 convention, so once offsets are given the order of the
    remaining entries does not matter.  Failures are raised as in irr().

    A rate at or below -1 has no real discount factor for fractional years.
    Binary floats then compute NaN and end in FailedToConverge, whereas
    Decimal raises `decimal.InvalidOperation` straight away.
    '''
    if len(flow_table) == 0:
        raise ValueError('no cash flows')

    fl = floatlike(flow_table[0][0])
    guess, tolerance, max_iter = _defaults(fl, guess, tolerance, max_iter)

    init_date = flow_table[0][1]
    flow_table = tuple((fl.cast(cf), date - init_date) for cf, date in flow_table)
    yr_length = fl.from_u16(DAYS_PER_YEAR)
    years = tuple(fl.from_i32(date) / yr_length for _, date in flow_table)
    zero = fl.zero()

    def f(rate):
        return xnpv(rate, flow_table)

    def f_prime(rate):
        return sum((pv_prime_r(rate, t, cf) for t, (cf, _) in zip(years, flow_table)), zero)

    def f_prime2(rate):
        return sum((pv_prime2_r(rate, t, cf) for t, (cf, _) in zip(years, flow_table)), zero)

    logger.debug('xirr: %i cash flows, guess = %s', len(flow_table), guess)

    return halley(guess, f, f_prime, f_prime2, tolerance, max_iter)
