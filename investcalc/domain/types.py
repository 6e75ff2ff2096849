'''
Domain types for the investment calculators.

Inputs are explicit typed records built from raw form state; results are
plain values recreated on every evaluation. Nothing here is cached or
mutated after construction.
'''

from dataclasses import asdict, dataclass
from enum import Enum
import math
from typing import Any, Dict, Mapping, Optional

from investcalc.domain.coerce import RawValue
from investcalc.domain.coerce import parse_horizon
from investcalc.domain.coerce import parse_optional
from investcalc.domain.coerce import parse_or_zero

NOT_AVAILABLE = 'N/A'


class DividendFrequency(str, Enum):
  '''Cadence at which per-share dividends are paid.'''
  MONTHLY = 'monthly'
  QUARTERLY = 'quarterly'
  ANNUAL = 'annual'

  @classmethod
  def parse(cls, value: Any) -> 'DividendFrequency':
    '''Parse a frequency name; anything unrecognized is treated as annual.'''
    if isinstance(value, cls):
      return value
    text = str(value or '').strip().lower()
    for member in cls:
      if member.value == text:
        return member
    return cls.ANNUAL


class Verdict(str, Enum):
  '''P/E based valuation verdict for an equity position.'''
  UNDERVALUED = 'Undervalued'
  OVERVALUED = 'Overvalued'
  NOT_APPLICABLE = NOT_AVAILABLE


class Provenance(str, Enum):
  '''Where a resolved price came from.'''
  LIVE = 'live'
  OFFLINE = 'offline'


# Form-state keys used by presentation layers, mapped to record fields.
_EQUITY_FIELD_ALIASES = {
    'investment': 'investment',
    'currentPrice': 'current_price',
    'current_price': 'current_price',
    'targetPrice': 'target_price',
    'target_price': 'target_price',
    'dividend': 'dividend_per_share',
    'dividend_per_share': 'dividend_per_share',
    'dividendFreq': 'dividend_frequency',
    'dividend_frequency': 'dividend_frequency',
    'peRatio': 'pe_ratio',
    'pe_ratio': 'pe_ratio',
    'industryPE': 'industry_pe',
    'industry_pe': 'industry_pe',
    'timeHorizon': 'time_horizon_years',
    'time_horizon_years': 'time_horizon_years',
}

_FUND_FIELD_ALIASES = {
    'investment': 'investment',
    'currentPrice': 'current_price',
    'current_price': 'current_price',
    'mer': 'expense_ratio_percent',
    'expense_ratio_percent': 'expense_ratio_percent',
    'dividend': 'dividend_per_share',
    'dividend_per_share': 'dividend_per_share',
    'dividendFreq': 'dividend_frequency',
    'dividend_frequency': 'dividend_frequency',
    'benchmarkReturn': 'benchmark_return_percent',
    'benchmark_return_percent': 'benchmark_return_percent',
    'timeHorizon': 'time_horizon_years',
    'time_horizon_years': 'time_horizon_years',
}


def _remap(data: Mapping[str, Any],
           aliases: Mapping[str, str]) -> Dict[str, Any]:
  '''Rename known form keys to field names, dropping everything else.'''
  return {aliases[k]: v for k, v in data.items() if k in aliases}


def format_amount(value: Optional[float]) -> str:
  '''Format a monetary or percentage value with 2 decimals for display.'''
  if value is None or not math.isfinite(value):
    return NOT_AVAILABLE
  # Adding 0.0 turns a rounded -0.0 into 0.0.
  return f'{round(value, 2) + 0.0:.2f}'


@dataclass(frozen=True)
class EquityInputs:
  '''
  Assumptions for a direct equity position.

  Attributes:
    investment: Amount invested (currency)
    current_price: Price per share today
    target_price: Expected price per share at the end of the horizon
    dividend_per_share: Dividend paid per share per payment
    dividend_frequency: Payment cadence of the dividend
    pe_ratio: Company P/E ratio (optional)
    industry_pe: Industry average P/E ratio (optional)
    time_horizon_years: Holding period in years
  '''
  investment: float = 0.0
  current_price: float = 0.0
  target_price: float = 0.0
  dividend_per_share: float = 0.0
  dividend_frequency: DividendFrequency = DividendFrequency.QUARTERLY
  pe_ratio: Optional[float] = None
  industry_pe: Optional[float] = None
  time_horizon_years: float = 1.0

  @classmethod
  def from_raw(
      cls,
      investment: RawValue = None,
      current_price: RawValue = None,
      target_price: RawValue = None,
      dividend_per_share: RawValue = None,
      dividend_frequency: Any = DividendFrequency.QUARTERLY,
      pe_ratio: RawValue = None,
      industry_pe: RawValue = None,
      time_horizon_years: RawValue = None,
  ) -> 'EquityInputs':
    '''Build inputs from raw form values, applying the defaulting rules.'''
    return cls(
        investment=parse_or_zero(investment),
        current_price=parse_or_zero(current_price),
        target_price=parse_or_zero(target_price),
        dividend_per_share=parse_or_zero(dividend_per_share),
        dividend_frequency=DividendFrequency.parse(dividend_frequency),
        pe_ratio=parse_optional(pe_ratio),
        industry_pe=parse_optional(industry_pe),
        time_horizon_years=parse_horizon(time_horizon_years),
    )

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> 'EquityInputs':
    '''Build inputs from a form-state mapping (camelCase or snake_case).'''
    return cls.from_raw(**_remap(data, _EQUITY_FIELD_ALIASES))


@dataclass(frozen=True)
class FundInputs:
  '''
  Assumptions for a fund or index position.

  Attributes:
    investment: Amount invested (currency)
    current_price: Price per unit today
    expense_ratio_percent: Annual fee (MER) in percent
    dividend_per_share: Distribution per unit per payment
    dividend_frequency: Payment cadence of the distribution
    benchmark_return_percent: Expected annual index return before fees
    time_horizon_years: Holding period in years
  '''
  investment: float = 0.0
  current_price: float = 0.0
  expense_ratio_percent: float = 0.0
  dividend_per_share: float = 0.0
  dividend_frequency: DividendFrequency = DividendFrequency.QUARTERLY
  benchmark_return_percent: float = 0.0
  time_horizon_years: float = 1.0

  @classmethod
  def from_raw(
      cls,
      investment: RawValue = None,
      current_price: RawValue = None,
      expense_ratio_percent: RawValue = None,
      dividend_per_share: RawValue = None,
      dividend_frequency: Any = DividendFrequency.QUARTERLY,
      benchmark_return_percent: RawValue = None,
      time_horizon_years: RawValue = None,
  ) -> 'FundInputs':
    '''Build inputs from raw form values, applying the defaulting rules.'''
    return cls(
        investment=parse_or_zero(investment),
        current_price=parse_or_zero(current_price),
        expense_ratio_percent=parse_or_zero(expense_ratio_percent),
        dividend_per_share=parse_or_zero(dividend_per_share),
        dividend_frequency=DividendFrequency.parse(dividend_frequency),
        benchmark_return_percent=parse_or_zero(benchmark_return_percent),
        time_horizon_years=parse_horizon(time_horizon_years),
    )

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> 'FundInputs':
    '''Build inputs from a form-state mapping (camelCase or snake_case).'''
    return cls.from_raw(**_remap(data, _FUND_FIELD_ALIASES))


@dataclass(frozen=True)
class EquityResult:
  '''
  Projected returns for an equity position.

  Values keep full precision; use to_display() for 2-decimal strings.

  Attributes:
    shares_held: Shares bought with the investment
    capital_gains: Gain from the move to the target price
    total_dividends: Dividend income over the horizon
    total_return: Capital gains plus dividends
    total_value: Investment plus total return
    annualized_return_percent: Compound annual return, None when undefined
    verdict: P/E comparison against the industry
  '''
  shares_held: float
  capital_gains: float
  total_dividends: float
  total_return: float
  total_value: float
  annualized_return_percent: Optional[float]
  verdict: Verdict

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to dictionary with raw values.'''
    result = asdict(self)
    result['verdict'] = self.verdict.value
    return result

  def to_display(self) -> Dict[str, str]:
    '''Format every field for display.'''
    return {
        'shares_held': format_amount(self.shares_held),
        'capital_gains': format_amount(self.capital_gains),
        'total_dividends': format_amount(self.total_dividends),
        'total_return': format_amount(self.total_return),
        'total_value': format_amount(self.total_value),
        'annualized_return_percent':
            format_amount(self.annualized_return_percent),
        'verdict': self.verdict.value,
    }


@dataclass(frozen=True)
class FundResult:
  '''
  Projected returns for a fund position.

  Attributes:
    shares_held: Units bought with the investment
    capital_gains: Growth of the investment net of fees
    total_dividends: Distribution income over the horizon
    total_return: Capital gains plus distributions
    projected_value: Investment compounded at the net rate
    net_annual_return_percent: Benchmark return minus expense ratio
    total_fee_cost: Expense ratio paid on the initial investment
  '''
  shares_held: float
  capital_gains: float
  total_dividends: float
  total_return: float
  projected_value: float
  net_annual_return_percent: float
  total_fee_cost: float

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to dictionary with raw values.'''
    return asdict(self)

  def to_display(self) -> Dict[str, str]:
    '''Format every field for display.'''
    return {k: format_amount(v) for k, v in asdict(self).items()}


@dataclass(frozen=True)
class PriceQuote:
  '''
  A resolved price for a ticker.

  Attributes:
    ticker: Normalized (uppercase) ticker as entered
    price: Price rounded to 2 decimals
    provenance: Live data source or offline table
    name: Display name (offline table only)
    provider_symbol: Symbol sent to the live provider, if any
  '''
  ticker: str
  price: float
  provenance: Provenance
  name: Optional[str] = None
  provider_symbol: Optional[str] = None

  @property
  def display_price(self) -> str:
    return f'{self.price:.2f}'

  @property
  def is_offline(self) -> bool:
    return self.provenance is Provenance.OFFLINE


@dataclass(frozen=True)
class ResolutionOutcome:
  '''
  Success or failure of a price lookup, for callers that render results
  instead of handling exceptions.

  Attributes:
    ticker: Ticker as requested
    ok: Whether a price was resolved
    quote: The quote on success
    message: User-facing message (confirmation or error with guidance)
  '''
  ticker: str
  ok: bool
  quote: Optional[PriceQuote] = None
  message: str = ''

  @classmethod
  def success(cls, quote: PriceQuote) -> 'ResolutionOutcome':
    suffix = ' (offline demo price)' if quote.is_offline else ''
    return cls(ticker=quote.ticker,
               ok=True,
               quote=quote,
               message=f'Price for {quote.ticker}: '
               f'${quote.display_price}{suffix}')

  @classmethod
  def failure(cls, ticker: str, message: str) -> 'ResolutionOutcome':
    return cls(ticker=ticker, ok=False, message=message)
