#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#

'''Financial primitives: time value of money, rates of return, schedules and tax.

Every function works with binary floats (float, numpy.float32/float64) or
decimal.Decimal, returning results in the representation it was given.
'''


from .rounding import RoundingMode
from .floatlike import FloatLike, BinaryFloat, FixedDecimal, FLOAT32, FLOAT64, DECIMAL, floatlike, round_with_mode
from .errors import FinPrimError, DivideByZero, RootFindingError, FailedToConverge, RootFindingDivideByZero, InvalidBracket
from .solvers import newton_raphson, halley, bisect
from .tvm import pv, fv, pmt, npv, npv_differing_rates, xnpv
from .derivatives import pv_prime_r, pv_prime2_r, npv_prime_r, npv_prime2_r, wacc_prime_de, wacc_prime2_de
from .irr import irr, xirr, days_since
from .rate import apr, ear, cagr, pct_change, apply_pct_change, twr, mirr, xmirr
from .schedule import AmortizationPeriod, DepreciationPeriod, to_frame
from .amort import amort_schedule, amort_schedule_into
from .dep import sln, sln_into, db, db_into, syd, syd_into, macrs, macrs_into
from .tax import progressive_tax, progressive_tax_unchecked
