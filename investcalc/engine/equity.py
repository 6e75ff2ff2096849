"""
Equity position calculator.

Projects the return of buying a stock today and holding it until it reaches
a target price, collecting dividends along the way.
"""

from typing import Optional

from investcalc.domain.coerce import parse_horizon
from investcalc.domain.coerce import parse_optional
from investcalc.domain.coerce import parse_or_zero
from investcalc.domain.types import EquityInputs
from investcalc.domain.types import EquityResult
from investcalc.domain.types import Verdict
from investcalc.engine.returns import compute_annualized_return
from investcalc.engine.returns import compute_shares
from investcalc.engine.returns import compute_total_dividends


def compute_verdict(pe_ratio: Optional[float],
                    industry_pe: Optional[float]) -> Verdict:
  """
  Compare a company P/E against its industry.

  Both ratios must be present and non-zero; a P/E below the industry
  average reads as undervalued, anything else as overvalued.
  """
  if not pe_ratio or not industry_pe:
    return Verdict.NOT_APPLICABLE
  if pe_ratio < industry_pe:
    return Verdict.UNDERVALUED
  return Verdict.OVERVALUED


def evaluate_equity(inputs: EquityInputs) -> EquityResult:
  """
  Project returns for an equity position.

  Steps:
    1. shares = investment / current_price (0 when price <= 0)
    2. dividends = shares * dividend * payments_per_year * years
    3. capital_gains = shares * (target_price - current_price)
    4. total_value = investment + capital_gains + dividends
    5. annualized = ((total_value / investment) ** (1 / years) - 1) * 100

  Fields are coerced again here, so records built directly (not via
  from_raw) with NaN or a non-positive horizon are still safe.

  Args:
    inputs: Equity assumptions

  Returns:
    EquityResult with full-precision values. Never raises.
  """
  investment = parse_or_zero(inputs.investment)
  current_price = parse_or_zero(inputs.current_price)
  target_price = parse_or_zero(inputs.target_price)
  dividend = parse_or_zero(inputs.dividend_per_share)
  years = parse_horizon(inputs.time_horizon_years)

  shares = compute_shares(investment, current_price)
  total_dividends = compute_total_dividends(shares, dividend,
                                            inputs.dividend_frequency, years)

  capital_gains = shares * (target_price - current_price)
  total_return = capital_gains + total_dividends
  total_value = investment + total_return

  return EquityResult(
      shares_held=shares,
      capital_gains=capital_gains,
      total_dividends=total_dividends,
      total_return=total_return,
      total_value=total_value,
      annualized_return_percent=compute_annualized_return(
          investment, total_value, years),
      verdict=compute_verdict(parse_optional(inputs.pe_ratio),
                              parse_optional(inputs.industry_pe)),
  )
