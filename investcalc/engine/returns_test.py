import pytest

from investcalc.domain.types import DividendFrequency
from investcalc.engine.returns import compute_annualized_return
from investcalc.engine.returns import compute_compound_value
from investcalc.engine.returns import compute_shares
from investcalc.engine.returns import compute_total_dividends
from investcalc.engine.returns import dividend_multiplier


class TestDividendMultiplier:
  """Tests for dividend_multiplier."""

  @pytest.mark.parametrize('frequency,expected', [
      (DividendFrequency.MONTHLY, 12),
      (DividendFrequency.QUARTERLY, 4),
      (DividendFrequency.ANNUAL, 1),
      ('monthly', 12),
      ('quarterly', 4),
      ('annual', 1),
      ('semi-annual', 1),
      (None, 1),
  ])
  def test_table(self, frequency, expected):
    assert dividend_multiplier(frequency) == expected


class TestComputeShares:
  """Tests for compute_shares."""

  def test_normal_case(self):
    assert compute_shares(10000.0, 150.0) == pytest.approx(66.6667, abs=1e-4)

  def test_exact_division(self):
    assert compute_shares(12345.0, 5.0) == 12345.0 / 5.0

  @pytest.mark.parametrize('price', [0.0, -10.0])
  def test_non_positive_price(self, price):
    """Division-by-zero guard."""
    assert compute_shares(10000.0, price) == 0.0


class TestComputeTotalDividends:
  """Tests for compute_total_dividends."""

  def test_quarterly(self):
    """
    Manual calculation:
    Annual dividend = 0.75 * 4 = 3.00
    Total = 66.667 * 3.00 * 3 = 600.00
    """
    total = compute_total_dividends(10000.0 / 150.0, 0.75, 'quarterly', 3.0)
    assert total == pytest.approx(600.0)

  def test_monthly(self):
    total = compute_total_dividends(100.0, 0.10, 'monthly', 2.0)
    assert total == pytest.approx(240.0)

  def test_zero_shares(self):
    assert compute_total_dividends(0.0, 0.75, 'quarterly', 3.0) == 0.0


class TestComputeAnnualizedReturn:
  """Tests for compute_annualized_return."""

  def test_normal_case(self):
    """
    Manual calculation:
    (12600 / 10000) ** (1 / 3) - 1 = 1.26 ** 0.3333 - 1 = 0.0801
    """
    annualized = compute_annualized_return(10000.0, 12600.0, 3.0)
    assert annualized == pytest.approx(8.008, abs=0.001)

  def test_one_year_is_simple_return(self):
    assert compute_annualized_return(1000.0, 1100.0, 1.0) == pytest.approx(10.0)

  def test_loss(self):
    annualized = compute_annualized_return(1000.0, 810.0, 2.0)
    assert annualized == pytest.approx(-10.0)

  def test_total_loss(self):
    assert compute_annualized_return(1000.0, 0.0, 2.0) == pytest.approx(-100.0)

  def test_zero_investment_not_applicable(self):
    """Undefined ratio reports None instead of NaN or infinity."""
    assert compute_annualized_return(0.0, 500.0, 3.0) is None
    assert compute_annualized_return(0.0, 0.0, 3.0) is None

  def test_negative_end_value_not_applicable(self):
    """A fractional root of a negative ratio is undefined."""
    assert compute_annualized_return(1000.0, -200.0, 2.0) is None

  def test_overflow_not_applicable(self):
    assert compute_annualized_return(1.0, 1e300, 0.001) is None

  def test_non_positive_years(self):
    assert compute_annualized_return(1000.0, 1200.0, 0.0) == 0.0


class TestComputeCompoundValue:
  """Tests for compute_compound_value."""

  def test_normal_case(self):
    """
    Manual calculation:
    1.0785 ** 5 = 1.45915
    10000 * 1.45915 = 14591.53
    """
    value = compute_compound_value(10000.0, 0.0785, 5.0)
    assert value == pytest.approx(10000.0 * 1.0785**5)
    assert value == pytest.approx(14591.53, abs=0.01)

  def test_zero_rate(self):
    assert compute_compound_value(10000.0, 0.0, 7.0) == 10000.0

  def test_negative_rate(self):
    assert compute_compound_value(1000.0, -0.10, 2.0) == pytest.approx(810.0)

  def test_rate_wipes_out_position(self):
    assert compute_compound_value(1000.0, -1.0, 3.0) == 0.0

  def test_below_minus_hundred_fractional_years(self):
    """Negative base with a fractional exponent is clamped to 0."""
    assert compute_compound_value(1000.0, -1.5, 2.5) == 0.0

  def test_below_minus_hundred_whole_years(self):
    assert compute_compound_value(1000.0, -1.5, 2.0) == pytest.approx(250.0)

  def test_zero_principal(self):
    assert compute_compound_value(0.0, 0.08, 5.0) == 0.0
