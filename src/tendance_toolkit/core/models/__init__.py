"""
Core Models Package

Immutable data models shared by every pipeline stage.

All models in this package are frozen dataclasses. Each stage builds new
values from the previous stage's output; nothing is mutated after
construction, so results can be cached or handed to another thread freely.
"""

from .occurrences import RawOccurrence, TendancePayload
from .filters import AxisFilter, FilterSelection
from .topics import (
    AggregatedTopic,
    ModuleSummary,
    SubgroupBlock,
    YearSummary,
    ShareCardData,
)

__all__ = [
    "RawOccurrence",
    "TendancePayload",
    "AxisFilter",
    "FilterSelection",
    "AggregatedTopic",
    "ModuleSummary",
    "SubgroupBlock",
    "YearSummary",
    "ShareCardData",
]
