'''
Ticker price resolver.

Resolves a ticker to a current price through an ordered list of sources:
the offline table for suffixed tickers it knows, the live quote endpoint
for everything else. One attempt per call; nothing is cached.

Usage:
  resolver = PriceResolver(ResolverConfig.from_env())

  quote = resolver.resolve('AAPL')          # raises on failure
  outcome = resolver.try_resolve('SHOP.TO')  # never raises
  if outcome.ok:
    print(outcome.quote.price)
  else:
    print(outcome.message)
'''

import logging
from typing import Optional, Sequence

import requests

from investcalc.domain.types import PriceQuote
from investcalc.domain.types import ResolutionOutcome
from investcalc.pricing.config import ResolverConfig
from investcalc.pricing.errors import PriceResolutionError
from investcalc.pricing.errors import PricingError
from investcalc.pricing.errors import TickerValidationError
from investcalc.pricing.sources import LiveQuoteSource
from investcalc.pricing.sources import OfflineTableSource
from investcalc.pricing.sources import PriceSource

logger = logging.getLogger(__name__)


def normalize_ticker(ticker: Optional[str]) -> str:
  '''
  Strip and uppercase a ticker.

  Raises:
    TickerValidationError: If the ticker is empty or whitespace
  '''
  symbol = (ticker or '').strip().upper()
  if not symbol:
    raise TickerValidationError()
  return symbol


class PriceResolver:
  '''
  Resolve tickers to prices.

  The first source whose supports() accepts the ticker prices it. By
  default that is the offline table for known TSX listings and the live
  endpoint otherwise.
  '''

  def __init__(
      self,
      config: Optional[ResolverConfig] = None,
      sources: Optional[Sequence[PriceSource]] = None,
      session: Optional[requests.Session] = None,
  ):
    '''
    Initialize resolver.

    Args:
      config: Resolver configuration (default: ResolverConfig.default())
      sources: Ordered sources; overrides the default offline/live pair
      session: HTTP session for the default live source
    '''
    self.config = config or ResolverConfig.default()
    if sources is None:
      sources = [
          OfflineTableSource(self.config),
          LiveQuoteSource(self.config, session=session),
      ]
    self.sources = list(sources)

  def select_source(self, ticker: str) -> PriceSource:
    '''Pick the source for a normalized ticker.'''
    for source in self.sources:
      if source.supports(ticker):
        return source
    raise PriceResolutionError(ticker, 'no price source available',
                               self.config.example_tickers)

  def resolve(self, ticker: Optional[str]) -> PriceQuote:
    '''
    Resolve a ticker to a price.

    Args:
      ticker: Ticker as typed by the user (e.g., 'aapl', ' shop.to ')

    Returns:
      PriceQuote with price rounded to 2 decimals and its provenance

    Raises:
      TickerValidationError: If the ticker is blank (no request is made)
      PriceResolutionError: If the selected source cannot price it
    '''
    symbol = normalize_ticker(ticker)
    source = self.select_source(symbol)
    logger.debug('Resolving %s via %s source', symbol, source.name)

    try:
      quote = source.fetch(symbol)
    except PriceResolutionError as e:
      logger.warning('Price lookup failed for %s: %s', symbol, e.reason)
      raise

    logger.info('Resolved %s: %s (%s)', symbol, quote.display_price,
                quote.provenance.value)
    return quote

  def try_resolve(self, ticker: Optional[str]) -> ResolutionOutcome:
    '''Resolve a ticker, reporting failure as a value instead of raising.'''
    try:
      quote = self.resolve(ticker)
    except PricingError as e:
      return ResolutionOutcome.failure((ticker or '').strip().upper(), str(e))
    return ResolutionOutcome.success(quote)
