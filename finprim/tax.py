#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#

'''Progressive income tax.

A rate table is a list of (bracket, rate) pairs, where bracket is the upper
limit of the taxable income taxed at that rate, in ascending order.  The last
bracket stands for infinity and must be the representation's maximum, e.g.:

    rate_table = [
        ( 11_600.0, 0.10),
        ( 47_150.0, 0.12),
        (100_525.0, 0.22),
        (191_950.0, 0.24),
        (243_725.0, 0.32),
        (609_350.0, 0.35),
        (FLOAT64.MAX, 0.37),
    ]
'''


from collections.abc import Sequence

from .floatlike import Scalar, floatlike


__all__ = [
    'progressive_tax',
    'progressive_tax_unchecked',
]


def progressive_tax(agi:Scalar, deductions:Scalar, rate_table:Sequence[tuple[Scalar, Scalar]]) -> Scalar|None:
    '''Tax owed on `agi` minus `deductions`.

    Returns None if the rate table is not sorted, or if its last bracket is not
    the maximum representable value.
    '''
    if len(rate_table) == 0:
        return None

    if any(b1 > b2 for (b1, _), (b2, _) in zip(rate_table, rate_table[1:])):
        return None

    last_bracket = rate_table[-1][0]
    if last_bracket != floatlike(last_bracket).MAX:
        return None

    return progressive_tax_unchecked(agi, deductions, rate_table)


def progressive_tax_unchecked(agi:Scalar, deductions:Scalar, rate_table:Sequence[tuple[Scalar, Scalar]]) -> Scalar:
    '''Same as progressive_tax(), without validating the rate table.'''
    fl = floatlike(agi)
    zero = fl.zero()

    if agi <= deductions:
        return zero

    taxable_income = agi - deductions

    prev_bracket = zero
    total_tax = zero
    for bracket, rate in rate_table:
        if taxable_income <= prev_bracket:
            break
        taxable_in_bracket = fl.max(fl.min(taxable_income, bracket) - prev_bracket, zero)
        total_tax += taxable_in_bracket * rate
        prev_bracket = bracket

    return total_tax
