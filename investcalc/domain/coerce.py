'''
Coercion of raw form values into numbers.

Calculator fields arrive as strings from a form (possibly blank, padded, or
decorated with a currency sign or thousands separators). Every numeric field
goes through one of these helpers, so malformed input never reaches the
formulas as NaN or infinity.

Parsing follows the leading-number rule of form inputs: '12.5abc' reads as
12.5, while 'abc' reads as nothing.
'''

import math
import re
from typing import Optional, Union

RawValue = Union[str, int, float, None]

_LEADING_NUMBER = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


def parse_number(value: RawValue) -> Optional[float]:
  '''
  Parse a raw value into a finite float.

  Args:
    value: Form value (string, number, or None)

  Returns:
    The parsed float, or None when the value is blank, unparsable or
    non-finite
  '''
  if value is None or isinstance(value, bool):
    return None

  if isinstance(value, (int, float)):
    number = float(value)
    return number if math.isfinite(number) else None

  text = str(value).strip().replace(',', '')
  if text.startswith('$'):
    text = text[1:].lstrip()
  elif text[:2] in ('-$', '+$'):
    text = text[0] + text[2:].lstrip()

  match = _LEADING_NUMBER.match(text)
  if not match:
    return None

  number = float(match.group(0))
  return number if math.isfinite(number) else None


def parse_or_zero(value: RawValue) -> float:
  '''Parse a monetary or rate field; anything unparsable becomes 0.'''
  number = parse_number(value)
  return number if number is not None else 0.0


def parse_horizon(value: RawValue) -> float:
  '''
  Parse a time horizon in years.

  Missing, unparsable, zero and negative horizons all become 1 year so the
  annualization and compounding formulas stay well defined.
  '''
  number = parse_number(value)
  if number is None or number <= 0:
    return 1.0
  return number


def parse_optional(value: RawValue) -> Optional[float]:
  '''Parse an optional ratio field (P/E); blank or unparsable gives None.'''
  return parse_number(value)
