"""
Projection tables.

Year-by-year growth of a fund position, and a 2D sensitivity table showing
how an equity position's annualized return varies with the target price
and the holding period.
"""

from dataclasses import replace
import logging
import math
from typing import Sequence

import pandas as pd

from investcalc.domain.coerce import parse_horizon
from investcalc.domain.coerce import parse_or_zero
from investcalc.domain.types import EquityInputs
from investcalc.domain.types import FundInputs
from investcalc.engine.equity import evaluate_equity
from investcalc.engine.fund import compute_fee_cost
from investcalc.engine.fund import compute_net_rate
from investcalc.engine.returns import compute_compound_value
from investcalc.engine.returns import compute_shares
from investcalc.engine.returns import compute_total_dividends

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = [
    'year',
    'projected_value',
    'cumulative_dividends',
    'cumulative_fee_cost',
    'total_return',
]


def schedule_years(horizon: float) -> list[float]:
  """Whole years up to the horizon, plus the horizon itself if fractional."""
  years = [float(t) for t in range(1, math.floor(horizon) + 1)]
  if not years or years[-1] != horizon:
    years.append(horizon)
  return years


def fund_growth_schedule(inputs: FundInputs) -> pd.DataFrame:
  """
  Year-by-year projection of a fund position.

  The last row matches evaluate_fund() for the same inputs.

  Args:
    inputs: Fund assumptions

  Returns:
    DataFrame with SCHEDULE_COLUMNS, one row per year
  """
  investment = parse_or_zero(inputs.investment)
  expense_ratio = parse_or_zero(inputs.expense_ratio_percent)
  net_rate = compute_net_rate(parse_or_zero(inputs.benchmark_return_percent),
                              expense_ratio)
  shares = compute_shares(investment, parse_or_zero(inputs.current_price))
  dividend = parse_or_zero(inputs.dividend_per_share)

  rows = []
  for year in schedule_years(parse_horizon(inputs.time_horizon_years)):
    projected = compute_compound_value(investment, net_rate, year)
    dividends = compute_total_dividends(shares, dividend,
                                        inputs.dividend_frequency, year)
    rows.append({
        'year': year,
        'projected_value': projected,
        'cumulative_dividends': dividends,
        'cumulative_fee_cost': compute_fee_cost(investment, expense_ratio,
                                                year),
        'total_return': projected - investment + dividends,
    })

  return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


class EquitySensitivityBuilder:
  """
  Build 2D tables of annualized return for an equity position.

  Varies the target price and the holding period while keeping the other
  assumptions (investment, price, dividend) fixed.
  """

  def __init__(self, inputs: EquityInputs):
    """
    Initialize sensitivity table builder.

    Args:
      inputs: Base equity assumptions
    """
    self.inputs = inputs

  def build(
      self,
      target_prices: Sequence[float],
      horizons: Sequence[float],
  ) -> pd.DataFrame:
    """
    Build sensitivity table.

    Args:
      target_prices: Target prices to evaluate (rows)
      horizons: Holding periods in years (columns)

    Returns:
      DataFrame of annualized return in percent, NaN where undefined
    """
    if not target_prices:
      raise ValueError('target_prices cannot be empty')
    if not horizons:
      raise ValueError('horizons cannot be empty')

    logger.debug('Building sensitivity table: %d x %d', len(target_prices),
                 len(horizons))

    data_rows = []
    for target in target_prices:
      row_data = []
      for years in horizons:
        result = evaluate_equity(
            replace(self.inputs,
                    target_price=target,
                    time_horizon_years=years))
        annualized = result.annualized_return_percent
        row_data.append(annualized if annualized is not None else math.nan)
      data_rows.append(row_data)

    df = pd.DataFrame(data_rows,
                      index=[float(t) for t in target_prices],
                      columns=[float(h) for h in horizons])
    df.index.name = 'Target Price'
    df.columns.name = 'Horizon (years)'
    return df
