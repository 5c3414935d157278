"""
Stats Module

Single-pass statistic accumulators over ledger graphs.
"""

from .base import Stat, StatResult, ratio, to_float
from .accumulators import Depths, InReferences, TimeUnits, Timestamps
from .registry import DEFAULT_STATS, StatRegistry, default_registry
from .runner import StatsRunner, render

__all__ = [
    "Stat",
    "StatResult",
    "ratio",
    "to_float",
    "Depths",
    "InReferences",
    "TimeUnits",
    "Timestamps",
    "DEFAULT_STATS",
    "StatRegistry",
    "default_registry",
    "StatsRunner",
    "render",
]
