"""
Price sources.

Each source turns a normalized ticker into a PriceQuote or raises
PriceResolutionError. The resolver picks the first source that claims a
ticker, so which source runs is decided by the ticker's pattern.

To add a new source:
1. Subclass PriceSource
2. Implement supports() and fetch()
3. Pass it to PriceResolver(sources=[...]) ahead of the live source
"""

from abc import ABC, abstractmethod
import logging
from math import isfinite
from typing import Any, Optional

import requests

from investcalc.domain.types import PriceQuote
from investcalc.domain.types import Provenance
from investcalc.pricing.config import ResolverConfig
from investcalc.pricing.errors import PriceResolutionError
from investcalc.pricing.offline_table import OFFLINE_PRICES
from investcalc.pricing.offline_table import OfflineListing

logger = logging.getLogger(__name__)


class PriceSource(ABC):
  """
  Base class for price sources.

  Subclasses implement supports() to claim tickers and fetch() to price
  them. Tickers passed in are already stripped and uppercase.
  """

  name = 'source'

  @abstractmethod
  def supports(self, ticker: str) -> bool:
    """Whether this source should price the ticker."""

  @abstractmethod
  def fetch(self, ticker: str) -> PriceQuote:
    """
    Price a ticker.

    Raises:
      PriceResolutionError: If no usable price could be obtained
    """


class OfflineTableSource(PriceSource):
  """
  Static prices for tickers the live provider cannot serve.

  Claims a ticker only when it carries one of the offline suffixes and is
  present in the table; other suffixed tickers fall through to the live
  source.
  """

  name = 'offline'

  def __init__(
      self,
      config: Optional[ResolverConfig] = None,
      table: Optional[dict[str, OfflineListing]] = None,
  ):
    self.config = config or ResolverConfig.default()
    self.table = OFFLINE_PRICES if table is None else table

  def supports(self, ticker: str) -> bool:
    has_suffix = any(
        ticker.endswith(suffix.upper())
        for suffix in self.config.offline_suffixes)
    return has_suffix and ticker in self.table

  def fetch(self, ticker: str) -> PriceQuote:
    listing = self.table.get(ticker)
    if listing is None:
      raise PriceResolutionError(ticker, 'not in the offline price table',
                                 self.config.example_tickers)
    logger.debug('Offline price for %s: %.2f (%s)', ticker, listing.price,
                 listing.name)
    return PriceQuote(
        ticker=ticker,
        price=round(listing.price, 2),
        provenance=Provenance.OFFLINE,
        name=listing.name,
    )


def parse_quote_payload(payload: Any) -> float:
  """
  Extract the price from a quote response.

  Accepted shapes:
    {'price': '123.45'}                  (object, numeric string)
    [{'symbol': 'AAPL', 'price': 123.45}] (list of objects, first used)

  Args:
    payload: Decoded JSON body

  Returns:
    The price as a float

  Raises:
    ValueError: If the payload carries an error indicator, or the price is
      missing, non-numeric, non-finite or not positive
  """
  if isinstance(payload, list):
    if not payload:
      raise ValueError('empty response')
    payload = payload[0]

  if not isinstance(payload, dict):
    raise ValueError(f'unexpected response type {type(payload).__name__}')

  error = payload.get('error')
  if error or payload.get('status') == 'error':
    message = error or payload.get('message') or 'provider returned an error'
    if isinstance(message, dict):
      message = message.get('message', message)
    raise ValueError(f'provider error: {message}')

  raw_price = payload.get('price')
  if raw_price is None or isinstance(raw_price, bool):
    raise ValueError('no price data in response')

  try:
    price = float(raw_price)
  except (TypeError, ValueError) as e:
    raise ValueError(f'invalid price {raw_price!r}') from e

  if not isfinite(price) or price <= 0:
    raise ValueError(f'invalid price {raw_price!r}')
  return price


class LiveQuoteSource(PriceSource):
  """
  Live quotes from an HTTP price endpoint.

  Sends one GET per lookup with `symbol` and `apikey` query parameters.
  No retry: a failed lookup is reported and the user triggers it again.
  """

  name = 'live'

  def __init__(
      self,
      config: Optional[ResolverConfig] = None,
      session: Optional[requests.Session] = None,
  ):
    """
    Initialize live source.

    Args:
      config: Provider configuration (default: ResolverConfig.default())
      session: HTTP session; a new requests.Session when omitted
    """
    self.config = config or ResolverConfig.default()
    self.session = session if session is not None else requests.Session()

  def supports(self, ticker: str) -> bool:
    return True

  def provider_symbol(self, ticker: str) -> str:
    """Rewrite a market suffix into the provider's exchange qualifier."""
    for suffix, qualifier in self.config.exchange_qualifiers.items():
      suffix = suffix.upper()
      if ticker.endswith(suffix) and len(ticker) > len(suffix):
        return ticker[:-len(suffix)] + qualifier
    return ticker

  def fetch(self, ticker: str) -> PriceQuote:
    symbol = self.provider_symbol(ticker)
    examples = self.config.example_tickers
    logger.debug('Requesting live quote for %s as %s', ticker, symbol)

    try:
      resp = self.session.get(
          self.config.base_url,
          params={
              'symbol': symbol,
              'apikey': self.config.api_key
          },
          timeout=self.config.timeout_sec,
      )
    except requests.RequestException as e:
      # Exception text can embed the request URL, and with it the API key.
      reason = f'request failed ({type(e).__name__})'
      raise PriceResolutionError(ticker, reason, examples) from e

    status = int(resp.status_code)
    if status >= 400:
      raise PriceResolutionError(ticker, f'HTTP {status}', examples)

    try:
      payload = resp.json()
    except ValueError as e:
      raise PriceResolutionError(ticker, 'response was not valid JSON',
                                 examples) from e

    try:
      price = parse_quote_payload(payload)
    except ValueError as e:
      raise PriceResolutionError(ticker, str(e), examples) from e

    return PriceQuote(
        ticker=ticker,
        price=round(price, 2),
        provenance=Provenance.LIVE,
        provider_symbol=symbol,
    )
