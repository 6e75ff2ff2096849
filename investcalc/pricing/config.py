"""
Price resolver configuration.

ResolverConfig is a serializable (JSON-friendly) description of the live
quote provider and of which tickers are served from the offline table.
"""

from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import field
import json
import os
from typing import Any, Mapping, Optional

from investcalc.pricing.errors import EXAMPLE_TICKERS

DEFAULT_QUOTE_URL = 'https://api.twelvedata.com/price'
DEFAULT_API_KEY = 'demo'

API_KEY_ENV = 'INVESTCALC_API_KEY'
QUOTE_URL_ENV = 'INVESTCALC_QUOTE_URL'
TIMEOUT_ENV = 'INVESTCALC_TIMEOUT_SEC'


@dataclass
class ResolverConfig:
  """
  Configuration for the price resolver.

  Attributes:
    api_key: Credential sent as the `apikey` query parameter
    base_url: Price-quote endpoint (HTTP GET, JSON response)
    timeout_sec: Request timeout in seconds
    offline_suffixes: Ticker suffixes the live provider cannot serve; these
      are looked up in the offline table first
    exchange_qualifiers: Suffix rewrites into the provider's exchange syntax
      (e.g., 'SHOP.TO' -> 'SHOP:TSX')
    example_tickers: Symbols listed in error hints
  """
  api_key: str = DEFAULT_API_KEY
  base_url: str = DEFAULT_QUOTE_URL
  timeout_sec: float = 10.0
  offline_suffixes: tuple[str, ...] = ('.TO',)
  exchange_qualifiers: dict[str, str] = field(
      default_factory=lambda: {'.TO': ':TSX'})
  example_tickers: tuple[str, ...] = EXAMPLE_TICKERS

  @classmethod
  def default(cls) -> 'ResolverConfig':
    """Demo credential against the default provider."""
    return cls()

  @classmethod
  def from_env(cls,
               environ: Optional[Mapping[str, str]] = None) -> 'ResolverConfig':
    """
    Build configuration from environment variables.

    Reads INVESTCALC_API_KEY, INVESTCALC_QUOTE_URL and
    INVESTCALC_TIMEOUT_SEC; unset or blank variables keep the defaults.
    """
    env = os.environ if environ is None else environ
    config = cls.default()

    api_key = env.get(API_KEY_ENV, '').strip()
    if api_key:
      config.api_key = api_key

    base_url = env.get(QUOTE_URL_ENV, '').strip()
    if base_url:
      config.base_url = base_url

    timeout = env.get(TIMEOUT_ENV, '').strip()
    if timeout:
      try:
        config.timeout_sec = float(timeout)
      except ValueError as e:
        raise ValueError(f'Invalid {TIMEOUT_ENV}: {timeout!r}') from e

    return config

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary (the API key is included)."""
    result = asdict(self)
    result['offline_suffixes'] = list(self.offline_suffixes)
    result['example_tickers'] = list(self.example_tickers)
    return result

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'ResolverConfig':
    """Create from dictionary."""
    data = dict(data)
    for key in ('offline_suffixes', 'example_tickers'):
      if key in data:
        data[key] = tuple(data[key])
    return cls(**data)

  @classmethod
  def from_json(cls, json_str: str) -> 'ResolverConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))
