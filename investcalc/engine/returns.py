"""
Pure return math shared by the equity and fund calculators.

No I/O, no parsing: every argument is already a float. Functions never
raise; undefined results come back as None (annualized return) or are
clamped (compounding with a base at or below zero).

Key functions:
  compute_shares: Shares bought with an investment at a price
  compute_total_dividends: Dividend income over a horizon
  compute_annualized_return: Compound annual return in percent
  compute_compound_value: Principal grown at a fixed annual rate
"""

from math import isfinite
from typing import Any, Optional

from investcalc.domain.types import DividendFrequency

DIVIDEND_MULTIPLIERS = {
    DividendFrequency.MONTHLY: 12,
    DividendFrequency.QUARTERLY: 4,
    DividendFrequency.ANNUAL: 1,
}


def dividend_multiplier(frequency: Any) -> int:
  """Payments per year for a frequency; unrecognized values count as 1."""
  return DIVIDEND_MULTIPLIERS.get(DividendFrequency.parse(frequency), 1)


def compute_shares(investment: float, current_price: float) -> float:
  """Shares held; 0 when the price is zero or negative."""
  if current_price <= 0:
    return 0.0
  return investment / current_price


def compute_total_dividends(
    shares: float,
    dividend_per_share: float,
    frequency: Any,
    years: float,
) -> float:
  """
  Total dividend income over the horizon.

  Args:
    shares: Shares held
    dividend_per_share: Dividend per share per payment
    frequency: Payment cadence (monthly, quarterly, annual)
    years: Holding period in years

  Returns:
    shares * dividend_per_share * payments_per_year * years
  """
  annual_dividend = dividend_per_share * dividend_multiplier(frequency)
  return shares * annual_dividend * years


def _safe_pow(base: float, exponent: float) -> float:
  try:
    return base**exponent
  except OverflowError:
    return float('inf')


def compute_annualized_return(
    investment: float,
    total_value: float,
    years: float,
) -> Optional[float]:
  """
  Compound annual return in percent.

  ((total_value / investment) ** (1 / years) - 1) * 100

  Args:
    investment: Initial amount
    total_value: Value at the end of the horizon
    years: Holding period in years

  Returns:
    Annualized return in percent; 0 when years <= 0; None when the ratio
    is undefined (investment <= 0, negative end value, or overflow)
  """
  if years <= 0:
    return 0.0
  if investment <= 0:
    return None

  ratio = total_value / investment
  if ratio < 0 or not isfinite(ratio):
    return None

  growth = _safe_pow(ratio, 1.0 / years)
  if not isfinite(growth):
    return None
  return (growth - 1.0) * 100.0


def compute_compound_value(principal: float, rate: float, years: float) -> float:
  """
  Principal compounded annually at a fixed rate.

  A rate at or below -100% wipes the position out: the value is 0 unless
  the horizon is a whole number of years (where the power stays real).

  Args:
    principal: Initial amount
    rate: Annual rate as a fraction (0.0785 for 7.85%)
    years: Holding period in years

  Returns:
    principal * (1 + rate) ** years
  """
  if principal == 0:
    return 0.0
  base = 1.0 + rate
  if base < 0 and not float(years).is_integer():
    return 0.0
  if base == 0:
    return 0.0
  return principal * _safe_pow(base, years)
