#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


from enum import Enum


__all__ = [
    'RoundingMode',
]


# HALF_TO_EVEN is "banker's rounding": 2.5 -> 2, 3.5 -> 4.
# HALF_* modes only differ from ordinary rounding at the .5 midpoint, while
# the remaining modes are directed: TOWARD_ZERO truncates, AWAY_FROM_ZERO
# rounds up in magnitude, TO_NEGATIVE_INFINITY is floor and TO_INFINITY is
# ceiling.
RoundingMode = Enum('RoundingMode', [
    'HALF_TO_EVEN',
    'HALF_AWAY_FROM_ZERO',
    'HALF_TOWARD_ZERO',
    'TOWARD_ZERO',
    'AWAY_FROM_ZERO',
    'TO_NEGATIVE_INFINITY',
    'TO_INFINITY',
])
