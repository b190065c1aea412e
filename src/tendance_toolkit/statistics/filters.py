"""
Module: statistics.filters

Purpose:
    Selection helpers that sit in front of the pipeline: exam-type presets
    and the module selection fallback applied whenever filters change.

Key Functions:
    - exam_type_preset(): Exam types for a named preset
    - default_module(): Initial module for a fresh payload
    - resolve_selected_module(): Keep the current module valid

Dependencies:
    - core.models: RawOccurrence, ModuleSummary

Used By:
    - controller: Export defaults
    - cli: --preset option
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Sequence

from tendance_toolkit.core.models import ModuleSummary, RawOccurrence


EMD_PREFIX = "EMD"
RATTRAPAGE_TYPE = "Rattrapage"


class ExamTypePreset(Enum):
    """Shortcut selections over the available exam types."""

    ALL = "all"
    EMD_ONLY = "emd"
    RATTRAPAGE_ONLY = "rattrapage"


def exam_type_preset(available: Iterable[str], preset: ExamTypePreset) -> List[str]:
    """
    Exam types selected by a preset, in the order they are available.

    Example:
        >>> exam_type_preset(["EMD1", "EMD2", "Rattrapage"], ExamTypePreset.EMD_ONLY)
        ['EMD1', 'EMD2']
    """
    if preset is ExamTypePreset.EMD_ONLY:
        return [t for t in available if t.startswith(EMD_PREFIX)]
    if preset is ExamTypePreset.RATTRAPAGE_ONLY:
        return [t for t in available if t == RATTRAPAGE_TYPE]
    return list(available)


def default_module(records: Sequence[RawOccurrence]) -> str:
    """Module of the first record, or '' when there are none."""
    if not records:
        return ""
    return records[0].module


def resolve_selected_module(modules: Sequence[ModuleSummary], current: str) -> str:
    """
    Keep `current` if it is still among `modules`, else fall back.

    Falls back to the top-ranked module, or '' when no module survives the
    filters.
    """
    if not modules:
        return ""
    if any(m.module == current for m in modules):
        return current
    return modules[0].module
