#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


from collections.abc import MutableSequence

from .floatlike import Scalar, floatlike
from .rounding import RoundingMode
from .schedule import AmortizationPeriod


__all__ = [
    'amort_schedule',
    'amort_schedule_into',
]


Rounding = tuple[int, RoundingMode, Scalar]


# https://en.wikipedia.org/wiki/Amortization_schedule
def amort_schedule(rate:Scalar, nper:int, principal:Scalar, pmt:Scalar, rounding:Rounding|None=None) -> list[AmortizationPeriod]:
    '''Split each of `nper` payments into principal and interest.

    `principal` is the loan amount (positive) and `pmt` the payment per period
    (negative, as returned by tvm.pmt).  When `rounding` is given as (decimal
    places, mode, epsilon), every amount is rounded and the last principal
    payment absorbs what is left so that the balance ends at exactly zero.
    '''
    periods = [AmortizationPeriod() for _ in range(nper)]
    amort_schedule_into(periods, rate, principal, pmt, rounding)
    return periods


def amort_schedule_into(periods:MutableSequence[AmortizationPeriod], rate:Scalar, principal:Scalar, pmt:Scalar, rounding:Rounding|None=None) -> None:
    '''Like amort_schedule(), but filling `periods`, one entry per payment.'''
    fl = floatlike(rate)

    if rounding is not None:
        assert len(periods) > 0
        dp, mode, epsilon = rounding
        pmt = -fl.round_with_mode(pmt, dp, mode, epsilon)
    else:
        pmt = -pmt

    remaining_balance = principal
    for i in range(len(periods)):
        interest_payment = remaining_balance * rate
        principal_payment = pmt - interest_payment

        if rounding is not None:
            principal_payment = fl.round_with_mode(principal_payment, dp, mode, epsilon)
            interest_payment = fl.round_with_mode(interest_payment, dp, mode, epsilon)

        remaining_balance -= principal_payment

        periods[i] = AmortizationPeriod(i + 1, principal_payment, interest_payment, remaining_balance)

    if rounding is not None:
        final_payment = periods[-1]
        final_payment.principal_payment += final_payment.remaining_balance
        final_payment.remaining_balance = fl.zero()
