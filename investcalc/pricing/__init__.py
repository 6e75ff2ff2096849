"""
Ticker price lookup.

PriceResolver chooses between the bundled offline table and a live quote
endpoint based on the ticker's market suffix.
"""

from investcalc.pricing.config import ResolverConfig
from investcalc.pricing.errors import LookupInProgressError
from investcalc.pricing.errors import PriceResolutionError
from investcalc.pricing.errors import PricingError
from investcalc.pricing.errors import TickerValidationError
from investcalc.pricing.resolver import PriceResolver
from investcalc.pricing.slot import LookupSlot
from investcalc.pricing.sources import LiveQuoteSource
from investcalc.pricing.sources import OfflineTableSource
from investcalc.pricing.sources import PriceSource

__all__ = [
  'ResolverConfig',
  'PriceResolver', 'LookupSlot',
  'PriceSource', 'OfflineTableSource', 'LiveQuoteSource',
  'PricingError', 'TickerValidationError', 'PriceResolutionError',
  'LookupInProgressError',
]
