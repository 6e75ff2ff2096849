"""Projection and sensitivity tables built on the calculators."""

from investcalc.analysis.schedule import EquitySensitivityBuilder
from investcalc.analysis.schedule import fund_growth_schedule

__all__ = [
    'EquitySensitivityBuilder',
    'fund_growth_schedule',
]
