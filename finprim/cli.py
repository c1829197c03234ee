#
# Copyright (c) 2026 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import argparse
import csv
import datetime
import logging
import sys

from decimal import Decimal

from . import environ
from .amort import amort_schedule
from .errors import FinPrimError
from .floatlike import floatlike, round_with_mode
from .irr import irr, xirr, days_since
from .rounding import RoundingMode
from .schedule import to_frame
from .tvm import npv, pmt


logger = logging.getLogger('finprim')


def _mode_name(mode:RoundingMode) -> str:
    return mode.name.lower().replace('_', '-')


_modes = {_mode_name(mode): mode for mode in RoundingMode}


def _read_flow_table(istream, scalar) -> list[tuple]:
    dates = []
    amounts = []
    for row in csv.DictReader(istream):
        dates.append(datetime.date.fromisoformat(row['date'].strip()))
        amounts.append(scalar(row['amount'].strip()))
    return list(zip(amounts, days_since(dates)))


def run(args, scalar) -> object:
    if args.command == 'irr':
        cash_flows = [scalar(cf) for cf in args.cash_flows]
        return irr(cash_flows, args.guess and scalar(args.guess), args.tolerance and scalar(args.tolerance), args.max_iter)

    if args.command == 'xirr':
        with open(args.filename, 'rt') as istream:
            flow_table = _read_flow_table(istream, scalar)
        return xirr(flow_table, args.guess and scalar(args.guess), args.tolerance and scalar(args.tolerance), args.max_iter)

    if args.command == 'npv':
        return npv(scalar(args.rate), [scalar(cf) for cf in args.cash_flows])

    if args.command == 'round':
        return round_with_mode(scalar(args.value), args.dp, _modes[args.mode], scalar(args.epsilon))

    if args.command == 'amort':
        rate = scalar(args.rate)
        principal = scalar(args.principal)
        payment = pmt(rate, floatlike(rate).from_u16(args.nper), principal)
        rounding = None
        if args.dp is not None:
            rounding = (args.dp, _modes[args.mode], scalar(args.epsilon))
        return to_frame(amort_schedule(rate, args.nper, principal, payment, rounding))

    raise NotImplementedError(args.command)


def main(argv=None):
    argparser = argparse.ArgumentParser(prog='finprim', description='Financial calculations.')
    argparser.add_argument('--version', action='version', version=environ.get_version())
    argparser.add_argument('--decimal', action='store_true', help='use fixed-point decimal instead of binary floating point')
    argparser.add_argument('-v', '--verbose', action='store_true', help='log solver iterations')
    subparsers = argparser.add_subparsers(dest='command', required=True)

    solver = argparse.ArgumentParser(add_help=False)
    solver.add_argument('--guess', default=None, help='initial rate guess (default: 0.1)')
    solver.add_argument('--tolerance', default=None, help='maximum NPV magnitude at the root (default: 1e-5)')
    solver.add_argument('--max-iter', type=int, default=None, help='maximum number of iterations (default: 20)')

    rounding = argparse.ArgumentParser(add_help=False)
    rounding.add_argument('--mode', choices=list(_modes), default=_mode_name(RoundingMode.HALF_TO_EVEN))
    rounding.add_argument('--epsilon', default='1e-8', help='midpoint tolerance for binary floating point')

    p = subparsers.add_parser('irr', parents=[solver], help='internal rate of return of periodic cash flows')
    p.add_argument('cash_flows', metavar='CASH_FLOW', nargs='+')

    p = subparsers.add_parser('xirr', parents=[solver], help='internal rate of return of dated cash flows')
    p.add_argument('filename', metavar='FILENAME', help='CSV file with date and amount columns')

    p = subparsers.add_parser('npv', help='net present value of periodic cash flows')
    p.add_argument('rate', metavar='RATE')
    p.add_argument('cash_flows', metavar='CASH_FLOW', nargs='+')

    p = subparsers.add_parser('round', parents=[rounding], help='round a value')
    p.add_argument('value', metavar='VALUE')
    p.add_argument('--dp', type=int, default=2, help='decimal places')

    p = subparsers.add_parser('amort', parents=[rounding], help='amortization schedule, as CSV')
    p.add_argument('rate', metavar='RATE', help='interest rate per period')
    p.add_argument('nper', metavar='NPER', type=int, help='number of payments')
    p.add_argument('principal', metavar='PRINCIPAL')
    p.add_argument('--dp', type=int, default=None, help='round amounts to this many decimal places')

    args = argparser.parse_args(argv)

    logging.basicConfig(
        format='%(asctime)s %(name)s %(levelname)s %(message)s',
        level=logging.DEBUG if args.verbose else environ.log_level,
    )

    scalar = Decimal if args.decimal else float

    try:
        result = run(args, scalar)
    except FinPrimError as e:
        logger.debug('%s failed', args.command, exc_info=True)
        argparser.exit(1, f'{argparser.prog}: error: {e}\n')
    except (ArithmeticError, ValueError) as e:
        argparser.error(str(e))

    if args.command == 'amort':
        result.to_csv(sys.stdout)
    else:
        print(result)
