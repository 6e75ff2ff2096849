"""Domain types and input coercion for the investment calculators."""

from investcalc.domain.types import DividendFrequency
from investcalc.domain.types import EquityInputs
from investcalc.domain.types import EquityResult
from investcalc.domain.types import FundInputs
from investcalc.domain.types import FundResult
from investcalc.domain.types import PriceQuote
from investcalc.domain.types import Provenance
from investcalc.domain.types import ResolutionOutcome
from investcalc.domain.types import Verdict

__all__ = [
    'DividendFrequency',
    'EquityInputs',
    'EquityResult',
    'FundInputs',
    'FundResult',
    'PriceQuote',
    'Provenance',
    'ResolutionOutcome',
    'Verdict',
]
