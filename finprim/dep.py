#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#

'''Depreciation schedules.

Each method comes in two flavours: one returning a new list, and an `_into`
one filling a list provided by the caller, whose length is the asset's life.
Where rounding is supported it is given as (decimal places, mode, epsilon),
and the last period then absorbs the rounding residue so that the book value
ends at exactly the salvage value.
'''


from collections.abc import MutableSequence, Sequence

from .amort import Rounding
from .floatlike import Scalar, floatlike
from .schedule import DepreciationPeriod


__all__ = [
    'sln',
    'sln_into',
    'db',
    'db_into',
    'syd',
    'syd_into',
    'macrs',
    'macrs_into',
]


def _new(life:int) -> list[DepreciationPeriod]:
    assert life > 0
    return [DepreciationPeriod() for _ in range(life)]


def _settle(periods, salvage, fl) -> None:
    last = periods[-1]
    last.depreciation_expense += last.remaining_book_value - salvage
    last.remaining_book_value = fl.cast(salvage)


# https://en.wikipedia.org/wiki/Depreciation#Straight-line_depreciation
def sln(cost:Scalar, salvage:Scalar, life:int) -> list[DepreciationPeriod]:
    '''Straight line depreciation.'''
    periods = _new(life)
    sln_into(periods, cost, salvage)
    return periods


def sln_into(periods:MutableSequence[DepreciationPeriod], cost:Scalar, salvage:Scalar) -> None:
    assert len(periods) > 0
    fl = floatlike(cost)
    depreciation_expense = (cost - salvage) / fl.from_usize(len(periods))

    remaining_book_value = cost
    for i in range(len(periods)):
        remaining_book_value -= depreciation_expense
        periods[i] = DepreciationPeriod(i + 1, depreciation_expense, remaining_book_value)


# https://en.wikipedia.org/wiki/Depreciation#Declining_balance_method
def db(cost:Scalar, salvage:Scalar, life:int, factor:Scalar|None=None, rounding:Rounding|None=None) -> list[DepreciationPeriod]:
    '''Declining balance depreciation, double-declining unless `factor` is given.'''
    periods = _new(life)
    db_into(periods, cost, salvage, factor, rounding)
    return periods


def db_into(periods:MutableSequence[DepreciationPeriod], cost:Scalar, salvage:Scalar, factor:Scalar|None=None, rounding:Rounding|None=None) -> None:
    assert len(periods) > 0
    fl = floatlike(cost)
    if factor is None:
        factor = fl.two()
    life = fl.from_usize(len(periods))

    remain_bv = cost
    accum_dep = fl.zero()
    for i in range(len(periods)):
        dep_exp = factor * (cost - accum_dep) / life
        if rounding is not None:
            dp, mode, epsilon = rounding
            dep_exp = fl.round_with_mode(dep_exp, dp, mode, epsilon)

        # Never depreciate below the salvage value
        if dep_exp > remain_bv - salvage:
            dep_exp = remain_bv - salvage
        accum_dep += dep_exp
        remain_bv -= dep_exp

        periods[i] = DepreciationPeriod(i + 1, dep_exp, remain_bv)

    if rounding is not None:
        _settle(periods, salvage, fl)


# https://en.wikipedia.org/wiki/Depreciation#Sum-of-years-digits_method
def syd(cost:Scalar, salvage:Scalar, life:int, rounding:Rounding|None=None) -> list[DepreciationPeriod]:
    '''Sum of the years' digits depreciation.'''
    periods = _new(life)
    syd_into(periods, cost, salvage, rounding)
    return periods


def syd_into(periods:MutableSequence[DepreciationPeriod], cost:Scalar, salvage:Scalar, rounding:Rounding|None=None) -> None:
    assert len(periods) > 0
    fl = floatlike(cost)
    life = len(periods)
    sum_of_years = fl.from_usize(life * (life + 1)) / fl.two()

    remain_bv = cost
    for i in range(life):
        dep_exp = (cost - salvage) * fl.from_usize(life - i) / sum_of_years
        if rounding is not None:
            dp, mode, epsilon = rounding
            dep_exp = fl.round_with_mode(dep_exp, dp, mode, epsilon)

        remain_bv -= dep_exp

        periods[i] = DepreciationPeriod(i + 1, dep_exp, remain_bv)

    if rounding is not None:
        _settle(periods, salvage, fl)


# https://www.irs.gov/publications/p946
def macrs(cost:Scalar, rates:Sequence[Scalar]) -> list[DepreciationPeriod]:
    '''MACRS depreciation, given the IRS rate of each year (e.g. 0.20 for 20%).'''
    periods = _new(len(rates))
    macrs_into(periods, cost, rates)
    return periods


def macrs_into(periods:MutableSequence[DepreciationPeriod], cost:Scalar, rates:Sequence[Scalar]) -> None:
    assert len(periods) == len(rates), f'{len(periods)} periods for {len(rates)} rates'

    remain_bv = cost
    for i, rate in enumerate(rates):
        dep_exp = cost * rate
        remain_bv -= dep_exp
        periods[i] = DepreciationPeriod(i + 1, dep_exp, remain_bv)
