import json
from typing import Any, Optional

import pytest
import requests

from investcalc.domain.types import DividendFrequency
from investcalc.domain.types import EquityInputs
from investcalc.domain.types import FundInputs


class FakeResponse:
  """Minimal stand-in for requests.Response."""

  def __init__(self,
               payload: Any = None,
               status_code: int = 200,
               text: Optional[str] = None):
    self.status_code = status_code
    self.text = text if text is not None else json.dumps(payload)

  def json(self) -> Any:
    return json.loads(self.text)


class FakeSession:
  """
  Records GET calls and replays a canned response or exception.

  Stands in for requests.Session so no test touches the network.
  """

  def __init__(self,
               response: Optional[FakeResponse] = None,
               error: Optional[Exception] = None):
    self.response = response or FakeResponse({'price': '100.00'})
    self.error = error
    self.calls: list[dict[str, Any]] = []

  def get(self, url: str, params=None, timeout=None) -> FakeResponse:
    self.calls.append({'url': url, 'params': params, 'timeout': timeout})
    if self.error is not None:
      raise self.error
    return self.response


@pytest.fixture
def equity_inputs() -> EquityInputs:
  """Stock example: $10,000 at $150 with a $180 target over 3 years."""
  return EquityInputs(
      investment=10000.0,
      current_price=150.0,
      target_price=180.0,
      dividend_per_share=0.75,
      dividend_frequency=DividendFrequency.QUARTERLY,
      pe_ratio=22.5,
      industry_pe=25.0,
      time_horizon_years=3.0,
  )


@pytest.fixture
def fund_inputs() -> FundInputs:
  """ETF example: $10,000 at $85, 0.65% MER, 8.5% benchmark over 5 years."""
  return FundInputs(
      investment=10000.0,
      current_price=85.0,
      expense_ratio_percent=0.65,
      dividend_per_share=0.0,
      dividend_frequency=DividendFrequency.QUARTERLY,
      benchmark_return_percent=8.5,
      time_horizon_years=5.0,
  )


@pytest.fixture
def fake_session() -> FakeSession:
  """Session answering every request with a price of 100.00."""
  return FakeSession()


@pytest.fixture
def failing_session() -> FakeSession:
  """Session whose requests fail with a connection error."""
  return FakeSession(error=requests.ConnectionError('connection refused'))
