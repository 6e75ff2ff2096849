"""
Fund position calculator.

Projects the return of a fund that tracks a benchmark, with the expense
ratio dragging the compound growth rate.
"""

from investcalc.domain.coerce import parse_horizon
from investcalc.domain.coerce import parse_or_zero
from investcalc.domain.types import FundInputs
from investcalc.domain.types import FundResult
from investcalc.engine.returns import compute_compound_value
from investcalc.engine.returns import compute_shares
from investcalc.engine.returns import compute_total_dividends


def compute_net_rate(benchmark_return_percent: float,
                     expense_ratio_percent: float) -> float:
  """Annual growth rate net of fees, as a fraction."""
  return (benchmark_return_percent - expense_ratio_percent) / 100.0


def compute_fee_cost(investment: float, expense_ratio_percent: float,
                     years: float) -> float:
  """
  Fees paid on the initial investment over the horizon.

  Reported for information only: the fee drag is already inside the net
  rate, so it is not subtracted from the total return a second time.
  """
  return (investment * expense_ratio_percent / 100.0) * years


def evaluate_fund(inputs: FundInputs) -> FundResult:
  """
  Project returns for a fund position.

  Steps:
    1. shares and dividends as for equities
    2. net_rate = (benchmark - expense_ratio) / 100
    3. projected_value = investment * (1 + net_rate) ** years
    4. capital_gains = projected_value - investment
    5. fee_cost = investment * expense_ratio / 100 * years

  Args:
    inputs: Fund assumptions

  Returns:
    FundResult with full-precision values. Never raises.
  """
  investment = parse_or_zero(inputs.investment)
  current_price = parse_or_zero(inputs.current_price)
  expense_ratio = parse_or_zero(inputs.expense_ratio_percent)
  dividend = parse_or_zero(inputs.dividend_per_share)
  benchmark = parse_or_zero(inputs.benchmark_return_percent)
  years = parse_horizon(inputs.time_horizon_years)

  shares = compute_shares(investment, current_price)
  total_dividends = compute_total_dividends(shares, dividend,
                                            inputs.dividend_frequency, years)

  net_rate = compute_net_rate(benchmark, expense_ratio)
  projected_value = compute_compound_value(investment, net_rate, years)
  capital_gains = projected_value - investment

  return FundResult(
      shares_held=shares,
      capital_gains=capital_gains,
      total_dividends=total_dividends,
      total_return=capital_gains + total_dividends,
      projected_value=projected_value,
      net_annual_return_percent=net_rate * 100.0,
      total_fee_cost=compute_fee_cost(investment, expense_ratio, years),
  )
