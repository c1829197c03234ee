#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#

'''Closed-form derivatives, used by the root finders.'''


from collections.abc import Sequence

from .floatlike import Scalar, floatlike


__all__ = [
    'pv_prime_r',
    'pv_prime2_r',
    'npv_prime_r',
    'npv_prime2_r',
    'wacc_prime_de',
    'wacc_prime2_de',
]


# d/dr cf/(1 + r)**n
def pv_prime_r(rate:Scalar, n:Scalar, cash_flow:Scalar) -> Scalar:
    fl = floatlike(rate)
    return -cash_flow * n / fl.powf(rate + fl.one(), n + fl.one())


# d2/dr2 cf/(1 + r)**n
def pv_prime2_r(rate:Scalar, n:Scalar, cash_flow:Scalar) -> Scalar:
    fl = floatlike(rate)
    return cash_flow * n * (n + fl.one()) / fl.powf(rate + fl.one(), n + fl.two())


def npv_prime_r(rate:Scalar, cash_flows:Sequence[Scalar]) -> Scalar:
    '''Derivative of npv() with respect to the rate.'''
    fl = floatlike(rate)
    one_plus_r = fl.one() + rate

    # (1 + rate)**(t + 1)
    powf_acc = one_plus_r
    npv_prime = fl.zero()
    for t, cf in enumerate(cash_flows):
        npv_prime += -cf * fl.from_usize(t) / powf_acc
        powf_acc *= one_plus_r
    return npv_prime


def npv_prime2_r(rate:Scalar, cash_flows:Sequence[Scalar]) -> Scalar:
    '''Second derivative of npv() with respect to the rate.'''
    fl = floatlike(rate)
    one = fl.one()
    one_plus_r = one + rate

    # (1 + rate)**(t + 2)
    powf_acc = one_plus_r * one_plus_r
    npv_prime2 = fl.zero()
    for t, cf in enumerate(cash_flows):
        n = fl.from_usize(t)
        npv_prime2 += cf * n * (n + one) / powf_acc
        powf_acc *= one_plus_r
    return npv_prime2


# WACC = r_e/(1 + D/E) + r_d*(D/E)/(1 + D/E)*(1 - tax)
def wacc_prime_de(r_e:Scalar, r_d:Scalar, de_ratio:Scalar, tax:Scalar) -> Scalar:
    '''First derivative of WACC with respect to the debt to equity ratio.'''
    fl = floatlike(de_ratio)
    return -(tax * r_d + r_e - r_d) / fl.powf(de_ratio + fl.one(), fl.two())


def wacc_prime2_de(r_e:Scalar, r_d:Scalar, de_ratio:Scalar, tax:Scalar) -> Scalar:
    '''Second derivative of WACC with respect to the debt to equity ratio.'''
    fl = floatlike(de_ratio)
    return fl.two() * (tax * r_d + r_e - r_d) / fl.powf(de_ratio + fl.one(), fl.from_u16(3))
