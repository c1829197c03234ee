#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import dataclasses
import typing

from collections.abc import Sequence

import pandas as pd


__all__ = [
    'AmortizationPeriod',
    'DepreciationPeriod',
    'to_frame',
]


@dataclasses.dataclass
class AmortizationPeriod:
    '''One payment of a loan.'''

    period: int = 0

    # Part of the payment reducing the balance
    principal_payment: typing.Any = 0

    interest_payment: typing.Any = 0

    # Balance after the payment
    remaining_balance: typing.Any = 0


@dataclasses.dataclass
class DepreciationPeriod:
    '''One period of an asset's depreciation.'''

    period: int = 0

    depreciation_expense: typing.Any = 0

    # Cost minus accumulated depreciation
    remaining_book_value: typing.Any = 0


def to_frame(periods:Sequence[AmortizationPeriod|DepreciationPeriod]) -> pd.DataFrame:
    '''Tabulate a schedule, one row per period.'''
    assert len(periods) > 0
    df = pd.DataFrame([dataclasses.asdict(p) for p in periods])
    df.set_index('period', inplace=True)
    return df
