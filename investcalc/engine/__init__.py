'''Calculation engine: pure equity and fund return formulas.'''

from investcalc.engine.equity import evaluate_equity
from investcalc.engine.fund import evaluate_fund

__all__ = [
    'evaluate_equity',
    'evaluate_fund',
]
