"""
Module: statistics.projection

Purpose:
    Derive ranked views from aggregated topics: module summaries, per-module
    sub-group blocks, the exam-year summary and the bundle used for a
    share-card export.

Key Functions:
    - project_modules(): Modules ranked by total questions
    - project_blocks(): Ranked sub-group blocks for one module
    - subgroup_sort_key(): Priority-then-lexicographic ordering
    - summarize_years(): Distinct exam years and range label
    - build_share_card_data(): Export bundle for one module

Ordering rules:
    - Modules: total_questions descending, ties in encounter order
    - Entries: question_count descending, ties in aggregation order
    - Blocks: priority list index, unlisted sub-groups after, A-Z
    Python's sort is stable, which is what keeps ties reproducible.

Dependencies:
    - core.models: AggregatedTopic, ModuleSummary, SubgroupBlock, ...
    - statistics.config: RankingConfig

Used By:
    - controller: Export pipeline
    - cli: Module listing
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from tendance_toolkit.core.models import (
    AggregatedTopic,
    ModuleSummary,
    ShareCardData,
    SubgroupBlock,
    YearSummary,
)

from .config import RankingConfig

logger = logging.getLogger(__name__)


def project_modules(topics: Iterable[AggregatedTopic]) -> List[ModuleSummary]:
    """
    Summarize topics per module.

    Args:
        topics: Aggregated topics, any modules

    Returns:
        ModuleSummary list sorted by total_questions descending (stable).
    """
    totals: Dict[str, int] = {}
    subgroups: Dict[str, Set[str]] = {}

    for topic in topics:
        if topic.module not in totals:
            totals[topic.module] = 0
            subgroups[topic.module] = set()
        totals[topic.module] += topic.question_count
        subgroups[topic.module].add(topic.subgroup)

    summaries = [
        ModuleSummary(
            module=module,
            subgroups=tuple(sorted(subgroups[module])),
            total_questions=total,
        )
        for module, total in totals.items()
    ]
    summaries.sort(key=lambda s: s.total_questions, reverse=True)
    return summaries


def subgroup_sort_key(name: str, priority: Sequence[str]) -> Tuple[int, int, str]:
    """
    Total-order key for sub-group names.

    Listed names sort by list index; unlisted names sort after every listed
    one, lexicographically among themselves.

    Example:
        >>> sorted(["Zoo", "Biochimie", "Anatomie", "Alpha"],
        ...        key=lambda n: subgroup_sort_key(n, ("Anatomie", "Biochimie")))
        ['Anatomie', 'Biochimie', 'Alpha', 'Zoo']
    """
    try:
        return (0, list(priority).index(name), "")
    except ValueError:
        return (1, 0, name)


def project_blocks(
    topics: Iterable[AggregatedTopic],
    module: str,
    *,
    subgroups: Optional[Iterable[str]] = None,
    config: Optional[RankingConfig] = None,
) -> List[SubgroupBlock]:
    """
    Group one module's topics into ranked sub-group blocks.

    Args:
        topics: Aggregated topics, any modules
        module: Module to project
        subgroups: Optional allow-list of sub-groups. None or empty keeps all.
        config: Ranking configuration (defaults to RankingConfig())

    Returns:
        Blocks in canonical sub-group order, entries ranked by
        question_count descending with ties in input order.
    """
    config = config or RankingConfig()
    allowed = set(subgroups) if subgroups else None

    groups: Dict[str, List[AggregatedTopic]] = {}
    for topic in topics:
        if topic.module != module:
            continue
        if allowed is not None and topic.subgroup not in allowed:
            continue
        groups.setdefault(topic.subgroup, []).append(topic)

    ordered_names = sorted(
        groups,
        key=lambda name: subgroup_sort_key(name, config.subgroup_priority),
    )

    blocks = []
    for name in ordered_names:
        entries = sorted(groups[name], key=lambda t: t.question_count, reverse=True)
        blocks.append(SubgroupBlock(subgroup=name, entries=tuple(entries)))

    logger.debug(f"Projected {len(blocks)} sub-group blocks for module {module!r}")
    return blocks


def summarize_years(topics: Iterable[AggregatedTopic]) -> YearSummary:
    """Collect the distinct exam years across all topics."""
    years: Set[int] = set()
    for topic in topics:
        years.update(topic.distinct_years)
    return YearSummary(years=tuple(sorted(years)))


def build_share_card_data(
    topics: Sequence[AggregatedTopic],
    module: str,
    *,
    subgroups: Optional[Iterable[str]] = None,
    config: Optional[RankingConfig] = None,
) -> ShareCardData:
    """
    Assemble the data shown on one module's share card.

    The question total covers the selected sub-groups only, while the year
    summary spans every topic passed in, so the card reports the same promo
    range whichever sub-groups are exported.

    Args:
        topics: Aggregated topics after filtering (all modules)
        module: Exported module
        subgroups: Sub-groups to include. None or empty keeps all.
        config: Ranking configuration

    Returns:
        ShareCardData ready for layout planning
    """
    blocks = project_blocks(topics, module, subgroups=subgroups, config=config)
    total = sum(entry.question_count for block in blocks for entry in block.entries)
    return ShareCardData(
        module_name=module,
        total_questions=total,
        year_summary=summarize_years(topics),
        blocks=tuple(blocks),
    )
