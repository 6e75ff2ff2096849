"""Errors raised by the price lookup."""

from typing import Sequence

EXAMPLE_TICKERS = ('AAPL', 'MSFT', 'VTI', 'SHOP.TO', 'XEQT.TO')


class PricingError(Exception):
  """Base class for price lookup errors."""


class TickerValidationError(PricingError, ValueError):
  """The ticker was empty; no lookup was attempted."""

  def __init__(self, message: str = 'Please enter a ticker symbol'):
    super().__init__(message)


class PriceResolutionError(PricingError):
  """
  A lookup was attempted and failed.

  Attributes:
    ticker: Ticker that failed
    reason: What went wrong (network, payload, unknown symbol)
    hint: Guidance listing symbols known to resolve
  """

  def __init__(self,
               ticker: str,
               reason: str,
               examples: Sequence[str] = EXAMPLE_TICKERS):
    self.ticker = ticker
    self.reason = reason
    self.hint = ('Check the ticker symbol and try again '
                 f'(e.g., {", ".join(examples)}).')
    super().__init__(f'Error fetching price for {ticker}: {reason}. '
                     f'{self.hint}')


class LookupInProgressError(PricingError, RuntimeError):
  """A lookup for the same slot is still pending."""

  def __init__(self, slot_name: str):
    self.slot_name = slot_name
    super().__init__(f'A price lookup is already running for {slot_name}')
