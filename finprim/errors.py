#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


__all__ = [
    'FinPrimError',
    'DivideByZero',
    'RootFindingError',
    'FailedToConverge',
    'RootFindingDivideByZero',
    'InvalidBracket',
]


class FinPrimError(Exception):
    '''Base class for failures of financial calculations.'''

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class DivideByZero(FinPrimError, ZeroDivisionError):
    '''Plain arithmetic division by zero, e.g. a percentage change from zero.'''

    def __str__(self):
        return 'Division by zero error.'


class RootFindingError(FinPrimError, RuntimeError):
    '''A root finder stopped without a root.

    `last_x` and `last_fx` hold the last estimate and the objective there, so
    the caller can retry with `last_x` as the new guess.
    '''

    def __init__(self, last_x=None, last_fx=None):
        super().__init__(last_x, last_fx)
        self.last_x = last_x
        self.last_fx = last_fx


class FailedToConverge(RootFindingError):

    def __str__(self):
        return f'Failed to converge. Last x: {self.last_x}, Last f(x): {self.last_fx}'


class RootFindingDivideByZero(RootFindingError, ZeroDivisionError):
    '''The derivative (or Halley's denominator) was exactly zero.'''

    def __str__(self):
        return f'Attempted to divide by zero. Last x: {self.last_x}, Last f(x): {self.last_fx}'


# Reserved for bracketing solvers
class InvalidBracket(RootFindingError):

    def __str__(self):
        return 'Invalid bracket provided.'
