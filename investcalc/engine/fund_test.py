from dataclasses import replace

import pytest

from investcalc.domain.types import DividendFrequency
from investcalc.domain.types import FundInputs
from investcalc.domain.types import FundResult
from investcalc.engine.fund import compute_fee_cost
from investcalc.engine.fund import compute_net_rate
from investcalc.engine.fund import evaluate_fund


class TestComputeNetRate:
  """Tests for compute_net_rate."""

  def test_benchmark_minus_fee(self):
    assert compute_net_rate(8.5, 0.65) == pytest.approx(0.0785)

  def test_fee_exceeds_benchmark(self):
    assert compute_net_rate(0.5, 0.65) == pytest.approx(-0.0015)


class TestComputeFeeCost:
  """Tests for compute_fee_cost."""

  def test_linear_in_years(self):
    """(10000 * 0.0065) * 5 = 325.00"""
    assert compute_fee_cost(10000.0, 0.65, 5.0) == pytest.approx(325.0)

  def test_no_fee(self):
    assert compute_fee_cost(10000.0, 0.0, 5.0) == 0.0


class TestEvaluateFund:
  """Tests for evaluate_fund."""

  def test_example_scenario(self, fund_inputs):
    """
    $10,000 at $85, 0.65% MER, 8.5% benchmark, 5 years.

    Manual calculation:
    Net rate = (8.5 - 0.65) / 100 = 0.0785
    Projected = 10000 * 1.0785 ** 5 = 14591.53
    Capital gains = 4591.53
    Fee cost = 10000 * 0.0065 * 5 = 325.00
    """
    result = evaluate_fund(fund_inputs)

    assert isinstance(result, FundResult)
    assert result.shares_held == pytest.approx(10000.0 / 85.0)
    assert result.net_annual_return_percent == pytest.approx(7.85)
    assert result.projected_value == pytest.approx(10000.0 * 1.0785**5)
    assert result.projected_value == pytest.approx(14591.53, abs=0.01)
    assert result.capital_gains == pytest.approx(result.projected_value -
                                                 10000.0)
    assert result.total_dividends == 0.0
    assert result.total_return == pytest.approx(result.capital_gains)
    assert result.total_fee_cost == pytest.approx(325.0)

  def test_fee_not_subtracted_twice(self, fund_inputs):
    """Total return reflects the net rate only; the fee is informational."""
    result = evaluate_fund(fund_inputs)
    assert result.total_return == pytest.approx(result.projected_value -
                                                fund_inputs.investment)

  def test_with_distributions(self, fund_inputs):
    """
    Manual calculation:
    Units = 10000 / 85 = 117.647
    Distributions = 117.647 * (0.45 * 4) * 5 = 1058.82
    """
    result = evaluate_fund(replace(fund_inputs, dividend_per_share=0.45))

    assert result.total_dividends == pytest.approx(1058.82, abs=0.01)
    assert result.total_return == pytest.approx(result.capital_gains +
                                                result.total_dividends)

  def test_monthly_distributions(self, fund_inputs):
    result = evaluate_fund(
        replace(fund_inputs,
                dividend_per_share=0.10,
                dividend_frequency=DividendFrequency.MONTHLY,
                time_horizon_years=1.0))
    assert result.total_dividends == pytest.approx(10000.0 / 85.0 * 1.2)

  def test_zero_price(self, fund_inputs):
    """Zero price zeroes units and distributions, not growth."""
    result = evaluate_fund(
        replace(fund_inputs, current_price=0.0, dividend_per_share=0.45))

    assert result.shares_held == 0.0
    assert result.total_dividends == 0.0
    assert result.projected_value == pytest.approx(10000.0 * 1.0785**5)

  def test_bad_horizon_treated_as_one_year(self, fund_inputs):
    result = evaluate_fund(replace(fund_inputs, time_horizon_years=0.0))

    assert result.projected_value == pytest.approx(10785.0)
    assert result.total_fee_cost == pytest.approx(65.0)

  def test_fee_above_benchmark_shrinks_value(self, fund_inputs):
    result = evaluate_fund(
        replace(fund_inputs, benchmark_return_percent=0.5))

    assert result.net_annual_return_percent == pytest.approx(-0.15)
    assert result.projected_value < fund_inputs.investment
    assert result.capital_gains < 0

  def test_fractional_horizon(self, fund_inputs):
    result = evaluate_fund(replace(fund_inputs, time_horizon_years=2.5))
    assert result.projected_value == pytest.approx(10000.0 * 1.0785**2.5)

  def test_rate_below_minus_hundred_never_fails(self, fund_inputs):
    result = evaluate_fund(
        replace(fund_inputs,
                benchmark_return_percent=-150.0,
                time_horizon_years=2.5))

    assert result.projected_value == 0.0
    assert result.capital_gains == -10000.0

  def test_blank_form_never_fails(self):
    result = evaluate_fund(FundInputs.from_raw())

    assert result.shares_held == 0.0
    assert result.projected_value == 0.0
    assert result.net_annual_return_percent == 0.0
    assert result.total_fee_cost == 0.0
