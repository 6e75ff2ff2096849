'''
Per-slot lookup state.

A presentation layer has one price field per calculator (equity, fund).
Each field gets a LookupSlot that tracks whether a lookup is pending and
refuses a second lookup until the first one settles.

  Idle -> Resolving -> Resolved | Failed

There is no cancellation: a slow request holds the slot until the session
timeout fires.
'''

from enum import Enum
import logging
import threading
from typing import Optional

from investcalc.domain.types import ResolutionOutcome
from investcalc.pricing.errors import LookupInProgressError
from investcalc.pricing.resolver import PriceResolver

logger = logging.getLogger(__name__)


class SlotState(str, Enum):
  IDLE = 'idle'
  RESOLVING = 'resolving'
  RESOLVED = 'resolved'
  FAILED = 'failed'


class LookupSlot:
  '''
  Re-entrancy guard and last result for one price field.

  Attributes:
    name: Slot label used in messages (e.g., 'equity', 'fund')
    state: Current SlotState
    last_outcome: Outcome of the most recent settled lookup
  '''

  def __init__(self, name: str):
    self.name = name
    self.state = SlotState.IDLE
    self.last_outcome: Optional[ResolutionOutcome] = None
    self._lock = threading.Lock()

  @property
  def is_pending(self) -> bool:
    return self.state is SlotState.RESOLVING

  def begin(self) -> None:
    '''
    Mark the slot as resolving.

    Raises:
      LookupInProgressError: If a lookup is already pending
    '''
    with self._lock:
      if self.state is SlotState.RESOLVING:
        raise LookupInProgressError(self.name)
      self.state = SlotState.RESOLVING

  def settle(self, outcome: ResolutionOutcome) -> ResolutionOutcome:
    '''Record a finished lookup and release the slot.'''
    with self._lock:
      self.state = SlotState.RESOLVED if outcome.ok else SlotState.FAILED
      self.last_outcome = outcome
    return outcome

  def run(self, resolver: PriceResolver, ticker: str) -> ResolutionOutcome:
    '''
    Run one lookup through the slot.

    The slot is released however the lookup ends, including on an
    unexpected exception from a custom source (which is re-raised).
    '''
    self.begin()
    try:
      outcome = resolver.try_resolve(ticker)
    except Exception:
      with self._lock:
        self.state = SlotState.FAILED
      logger.exception('Unexpected error resolving %s for %s slot', ticker,
                       self.name)
      raise
    return self.settle(outcome)
