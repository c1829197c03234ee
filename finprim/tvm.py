#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#

'''Time value of money.

Sign convention follows the spreadsheet functions: money paid out is
negative, money received is positive.
'''


from collections.abc import Sequence

from .floatlike import Scalar, floatlike


__all__ = [
    'pv',
    'fv',
    'pmt',
    'npv',
    'npv_differing_rates',
    'xnpv',
]


def pv(rate:Scalar, nper:Scalar, pmt:Scalar, fv:Scalar|None=None, due:bool=False) -> Scalar:
    '''Equivalent of Excel's PV function.'''
    fl = floatlike(rate)
    one = fl.one()
    if fv is None:
        fv = fl.zero()

    if fl.is_zero(rate):
        pv = fv + pmt * nper
    else:
        nth_power = fl.powf(one + rate, nper)
        fv_discounted = fv / nth_power
        factor = (one - one / nth_power) / rate
        if due:
            pv = pmt * factor * (one + rate) + fv_discounted
        else:
            pv = pmt * factor + fv_discounted

    return -pv


def fv(rate:Scalar, nper:Scalar, pmt:Scalar, pv:Scalar|None=None, due:bool=False) -> Scalar:
    '''Future value of a series of payments plus a grown present value.'''
    fl = floatlike(rate)
    one = fl.one()
    if pv is None:
        pv = fl.zero()

    if fl.is_zero(rate):
        return pmt * nper + pv

    nth_power = fl.powf(one + rate, nper)
    factor = (one - nth_power) / rate
    pv_grown = pv * nth_power

    if due:
        return pmt * factor * (one + rate) + pv_grown
    else:
        return pmt * factor + pv_grown


def pmt(rate:Scalar, nper:Scalar, pv:Scalar, fv:Scalar|None=None, due:bool=False) -> Scalar:
    '''Equivalent of Excel's PMT function.'''
    fl = floatlike(rate)
    one = fl.one()
    if fv is None:
        fv = fl.zero()

    if fl.is_zero(rate):
        return -(pv + fv) / nper

    nth_power = fl.powf(one + rate, nper)
    numerator = rate * (-pv * nth_power - fv)
    if due:
        denominator = (one - nth_power) * (one + rate)
    else:
        denominator = one - nth_power

    return -numerator / denominator


def npv(rate:Scalar, cash_flows:Sequence[Scalar]) -> Scalar:
    '''Net present value of periodic cash flows, the first one at time zero.

    Unlike Excel's NPV, the first cash flow is not discounted.
    '''
    fl = floatlike(rate)
    one_plus_r = fl.one() + rate

    # (1 + rate)**t, accumulated
    powf_acc = fl.one()
    npv = fl.zero()
    for cf in cash_flows:
        npv += cf / powf_acc
        powf_acc *= one_plus_r
    return npv


def npv_differing_rates(flow_table:Sequence[tuple[Scalar, Scalar]]) -> Scalar:
    '''Net present value where each period t is discounted at its own rate.'''
    assert len(flow_table) > 0
    fl = floatlike(flow_table[0][1])
    one = fl.one()
    return sum((cf / fl.powf(one + rate, fl.from_usize(t)) for t, (cf, rate) in enumerate(flow_table)), fl.zero())


def xnpv(rate:Scalar, flow_table:Sequence[tuple[Scalar, int]]) -> Scalar:
    '''Equivalent of Excel's XNPV function, for (amount, day offset) pairs.

    Offsets are relative to the first entry, and converted into years with
    the actual/365 convention.
    '''
    assert len(flow_table) > 0
    fl = floatlike(rate)
    init_date = flow_table[0][1]
    one_plus_r = fl.one() + rate
    yr_length = fl.from_u16(365)
    return sum((cf / fl.powf(one_plus_r, fl.from_i32(date - init_date) / yr_length) for cf, date in flow_table), fl.zero())
