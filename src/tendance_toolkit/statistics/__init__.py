"""
Module: statistics

Purpose:
    Turn raw exam occurrences into ranked, filterable statistics.
    Filter → aggregate → project modules / sub-group blocks.

Key Functions:
    - aggregate(): Collapse occurrences into per-topic statistics
    - project_modules(): Rank modules by total questions
    - project_blocks(): Ranked sub-group blocks for one module
    - build_share_card_data(): Bundle for a share-card export

Key Classes:
    - RankingConfig: Canonical sub-group order
    - ExamTypePreset: Exam-type shortcut selections

Used By:
    - tendance_toolkit.controller: Export pipeline
    - tendance_toolkit.cli: Command line
"""

from .config import RankingConfig, DEFAULT_SUBGROUP_PRIORITY
from .aggregation import aggregate
from .projection import (
    project_modules,
    project_blocks,
    subgroup_sort_key,
    summarize_years,
    build_share_card_data,
)
from .filters import (
    ExamTypePreset,
    exam_type_preset,
    default_module,
    resolve_selected_module,
)

__all__ = [
    # Config
    "RankingConfig",
    "DEFAULT_SUBGROUP_PRIORITY",
    # Aggregation
    "aggregate",
    # Projection
    "project_modules",
    "project_blocks",
    "subgroup_sort_key",
    "summarize_years",
    "build_share_card_data",
    # Filters
    "ExamTypePreset",
    "exam_type_preset",
    "default_module",
    "resolve_selected_module",
]
