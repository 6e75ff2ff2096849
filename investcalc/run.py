'''
Command-line front end for the calculators.

Usage:
  python -m investcalc.run equity --investment 10000 --current-price 150 \\
      --target-price 180 --dividend 0.75 --frequency quarterly \\
      --pe-ratio 22.5 --industry-pe 25 --years 3

  python -m investcalc.run fund --investment 10000 --lookup XEQT.TO \\
      --mer 0.2 --benchmark-return 8.5 --years 5 --schedule

  python -m investcalc.run price SHOP.TO

Numeric arguments are read as raw form text, so blank or malformed values
fall back to the calculators' defaults instead of failing.
'''

import argparse
import logging
from typing import Optional, Sequence

from investcalc.analysis.schedule import EquitySensitivityBuilder
from investcalc.analysis.schedule import fund_growth_schedule
from investcalc.domain.types import EquityInputs
from investcalc.domain.types import FundInputs
from investcalc.engine.equity import evaluate_equity
from investcalc.engine.fund import evaluate_fund
from investcalc.pricing.config import ResolverConfig
from investcalc.pricing.resolver import PriceResolver
from investcalc.pricing.slot import LookupSlot

logger = logging.getLogger(__name__)

SEPARATOR = '=' * 60


def _parse_float_list(s: str) -> list[float]:
  '''Parse comma-separated float list.'''
  return [float(x.strip()) for x in s.split(',') if x.strip()]


def _lookup_price(args: argparse.Namespace, slot_name: str) -> Optional[str]:
  '''Resolve --lookup into a current price string, or None on failure.'''
  if not args.lookup:
    return args.current_price

  resolver = PriceResolver(ResolverConfig.from_env())
  outcome = LookupSlot(slot_name).run(resolver, args.lookup)
  logger.info('%s', outcome.message)
  if not outcome.ok or outcome.quote is None:
    return None
  return outcome.quote.display_price


def _log_fields(title: str, fields: dict[str, str]) -> None:
  logger.info(SEPARATOR)
  logger.info(title)
  logger.info(SEPARATOR)
  for key, value in fields.items():
    logger.info('  %-28s %s', key.replace('_', ' ').title() + ':', value)
  logger.info(SEPARATOR)


def run_equity(args: argparse.Namespace) -> int:
  current_price = _lookup_price(args, 'equity')
  if current_price is None:
    return 1

  inputs = EquityInputs.from_raw(
      investment=args.investment,
      current_price=current_price,
      target_price=args.target_price,
      dividend_per_share=args.dividend,
      dividend_frequency=args.frequency,
      pe_ratio=args.pe_ratio,
      industry_pe=args.industry_pe,
      time_horizon_years=args.years,
  )
  result = evaluate_equity(inputs)
  _log_fields('Stock Analysis Results', result.to_display())

  if args.targets or args.horizons:
    targets = (_parse_float_list(args.targets)
               if args.targets else [inputs.target_price])
    horizons = (_parse_float_list(args.horizons)
                if args.horizons else [inputs.time_horizon_years])
    table = EquitySensitivityBuilder(inputs).build(targets, horizons)
    logger.info('Annualized Return (%)')
    logger.info('\n%s', table.to_string(float_format=lambda x: f'{x:.2f}'))
  return 0


def run_fund(args: argparse.Namespace) -> int:
  current_price = _lookup_price(args, 'fund')
  if current_price is None:
    return 1

  inputs = FundInputs.from_raw(
      investment=args.investment,
      current_price=current_price,
      expense_ratio_percent=args.mer,
      dividend_per_share=args.dividend,
      dividend_frequency=args.frequency,
      benchmark_return_percent=args.benchmark_return,
      time_horizon_years=args.years,
  )
  result = evaluate_fund(inputs)
  _log_fields('ETF Analysis Results', result.to_display())

  if args.schedule:
    table = fund_growth_schedule(inputs)
    logger.info('Year-by-Year Projection')
    logger.info('\n%s',
                table.to_string(index=False,
                                float_format=lambda x: f'{x:,.2f}'))
  return 0


def run_price(args: argparse.Namespace) -> int:
  resolver = PriceResolver(ResolverConfig.from_env())
  outcome = resolver.try_resolve(args.ticker)
  logger.info('%s', outcome.message)
  if outcome.ok and outcome.quote is not None and outcome.quote.name:
    logger.info('  %s', outcome.quote.name)
  return 0 if outcome.ok else 1


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
  parser.add_argument('--investment', default='', help='Investment amount')
  parser.add_argument('--current-price', default='', help='Current price')
  parser.add_argument('--lookup',
                      type=str,
                      help='Resolve the current price for this ticker')
  parser.add_argument('--dividend',
                      default='',
                      help='Dividend per share per payment')
  parser.add_argument('--frequency',
                      default='quarterly',
                      help='Dividend frequency: monthly, quarterly, annual')
  parser.add_argument('--years', default='', help='Time horizon in years')


def build_argparser() -> argparse.ArgumentParser:
  p = argparse.ArgumentParser(description='Stock and ETF return calculators')
  p.add_argument('--verbose', '-v', action='store_true', help='Debug output')
  sub = p.add_subparsers(dest='command', required=True)

  equity = sub.add_parser('equity', help='Stock calculator')
  _add_common_arguments(equity)
  equity.add_argument('--target-price', default='', help='Target price')
  equity.add_argument('--pe-ratio', default='', help='Company P/E ratio')
  equity.add_argument('--industry-pe', default='', help='Industry P/E ratio')
  equity.add_argument('--targets',
                      type=str,
                      help='Comma-separated target prices for a '
                      'sensitivity table')
  equity.add_argument('--horizons',
                      type=str,
                      help='Comma-separated horizons (years) for a '
                      'sensitivity table')
  equity.set_defaults(handler=run_equity)

  fund = sub.add_parser('fund', help='ETF calculator')
  _add_common_arguments(fund)
  fund.add_argument('--mer', default='', help='Expense ratio in percent')
  fund.add_argument('--benchmark-return',
                    default='',
                    help='Expected annual benchmark return in percent')
  fund.add_argument('--schedule',
                    action='store_true',
                    help='Print a year-by-year projection')
  fund.set_defaults(handler=run_fund)

  price = sub.add_parser('price', help='Look up a current price')
  price.add_argument('ticker', help='Ticker symbol (e.g., AAPL, SHOP.TO)')
  price.set_defaults(handler=run_price)
  return p


def main(argv: Optional[Sequence[str]] = None) -> int:
  '''CLI entrypoint.'''
  args = build_argparser().parse_args(argv)
  if args.verbose:
    logging.getLogger('investcalc').setLevel(logging.DEBUG)
  return args.handler(args)


if __name__ == '__main__':
  logging.basicConfig(
      level=logging.INFO,
      format='%(message)s',
  )
  raise SystemExit(main())
