#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#

'''Closed-form rates of return.'''


from collections.abc import Sequence

from .errors import DivideByZero
from .floatlike import Scalar, floatlike
from .irr import DAYS_PER_YEAR
from .tvm import pv, fv


__all__ = [
    'apr',
    'ear',
    'cagr',
    'pct_change',
    'apply_pct_change',
    'twr',
    'mirr',
    'xmirr',
]


# https://en.wikipedia.org/wiki/Annual_percentage_rate
def apr(ear:Scalar, npery:Scalar) -> Scalar:
    '''Nominal annual rate compounded `npery` times a year, given the effective rate.'''
    fl = floatlike(ear)
    one = fl.one()
    nth_root = fl.powf(one + ear, one / npery)
    return npery * (nth_root - one)


# https://en.wikipedia.org/wiki/Effective_interest_rate
def ear(apr:Scalar, npery:Scalar) -> Scalar:
    '''Effective annual rate of a nominal rate compounded `npery` times a year.'''
    fl = floatlike(apr)
    one = fl.one()
    return fl.powf(one + apr / npery, npery) - one


def cagr(beginning_balance:Scalar, ending_balance:Scalar, n:Scalar) -> Scalar:
    '''Compound annual growth rate over `n` periods.'''
    fl = floatlike(beginning_balance)
    one = fl.one()
    return fl.powf(ending_balance / beginning_balance, one / n) - one


def pct_change(beginning_value:Scalar, ending_value:Scalar) -> Scalar:
    '''Relative change, measured against the magnitude of the beginning value.

    Raises DivideByZero when the beginning value is zero.
    '''
    fl = floatlike(beginning_value)
    if fl.is_zero(beginning_value):
        raise DivideByZero()
    return (ending_value - beginning_value) / fl.abs(beginning_value)


def apply_pct_change(value:Scalar, pct_change:Scalar) -> Scalar:
    '''Inverse of pct_change().'''
    fl = floatlike(value)
    return pct_change * fl.abs(value) + value


# https://en.wikipedia.org/wiki/Time-weighted_return
def twr(values:Sequence[tuple[Scalar, Scalar]], annualization_period:Scalar|None=None) -> Scalar:
    '''Time-weighted return of (value, cash flow) pairs.

    Each value is measured at the end of a sub-period, and the cash flow is
    what came in (positive) or out (negative) during that sub-period.  When
    `annualization_period` is given the total return is annualized over that
    many years.  Raises DivideByZero if a sub-period starts at zero.
    '''
    assert len(values) > 0
    fl = floatlike(values[0][0])
    one = fl.one()

    total_return = one
    for (start_value, _), (end_value, end_cash_flow) in zip(values, values[1:]):
        adjusted_end = end_value - end_cash_flow
        total_return *= pct_change(start_value, adjusted_end) + one

    if annualization_period is None:
        return total_return - one
    return fl.powf(total_return, one / annualization_period) - one


# https://en.wikipedia.org/wiki/Modified_internal_rate_of_return
def mirr(cash_flows:Sequence[Scalar], finance_rate:Scalar, reinvest_rate:Scalar) -> Scalar:
    '''Equivalent of Excel's MIRR function.'''
    assert len(cash_flows) > 1
    fl = floatlike(finance_rate)
    zero = fl.zero()

    # Number of compounding periods, excluding the final one
    n = len(cash_flows) - 1

    npv_neg = zero
    fv_pos = zero
    for i, cf in enumerate(cash_flows):
        if cf < zero:
            npv_neg += pv(finance_rate, fl.from_usize(i), zero, cf)
        else:
            fv_pos += fv(reinvest_rate, fl.from_usize(n - i), zero, cf)
    npv_neg = fl.abs(npv_neg)

    return cagr(npv_neg, fv_pos, fl.from_usize(n))


def xmirr(flow_table:Sequence[tuple[Scalar, int]], finance_rate:Scalar, reinvest_rate:Scalar) -> Scalar:
    '''MIRR for (amount, day offset) pairs, in years of 365 days.

    Negative flows are discounted to the first entry's date, positive ones are
    grown to the last entry's date.
    '''
    assert len(flow_table) > 1
    fl = floatlike(finance_rate)
    zero = fl.zero()
    yr_length = fl.from_u16(DAYS_PER_YEAR)

    init_date = flow_table[0][1]
    n = fl.from_i32(flow_table[-1][1] - init_date)

    npv_neg = zero
    fv_pos = zero
    for cf, date in flow_table:
        t = fl.from_i32(date - init_date)
        if cf < zero:
            npv_neg += pv(finance_rate, t / yr_length, zero, cf)
        else:
            fv_pos += fv(reinvest_rate, (n - t) / yr_length, zero, cf)
    npv_neg = fl.abs(npv_neg)

    return cagr(npv_neg, fv_pos, n / yr_length)
