"""
Module: statistics.aggregation

Purpose:
    Filter raw exam occurrences and collapse them into one AggregatedTopic
    per (module, subgroup, topic) triple.

Key Functions:
    - aggregate(): Filter + group + sum

Algorithm:
    1. Keep records accepted by the FilterSelection on both axes
    2. Group survivors by (module, subgroup, topic)
    3. Sum counts and collect exam years per group
    Groups are emitted in first-encounter order. That order carries no
    ranking meaning, but projection sorts are stable and rely on it.

Dependencies:
    - core.models: RawOccurrence, FilterSelection, AggregatedTopic

Used By:
    - statistics.projection: Module and block projections
    - controller: Export pipeline
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

from tendance_toolkit.core.models import AggregatedTopic, FilterSelection, RawOccurrence

logger = logging.getLogger(__name__)


def aggregate(
    records: Iterable[RawOccurrence],
    selection: Optional[FilterSelection] = None,
) -> List[AggregatedTopic]:
    """
    Aggregate raw occurrences into per-topic statistics.

    Args:
        records: Raw occurrences (any iterable, consumed once)
        selection: Exam type/year filter. None keeps every record.

    Returns:
        One AggregatedTopic per surviving (module, subgroup, topic) triple.
        Empty input or a filter matching nothing yields an empty list.

    Example:
        >>> topics = aggregate([
        ...     RawOccurrence("Cardio", "Anatomie", "Heart", 2021, "EMD1", 3),
        ...     RawOccurrence("Cardio", "Anatomie", "Heart", 2022, "EMD1", 2),
        ... ])
        >>> topics[0].question_count
        5
    """
    if selection is None:
        selection = FilterSelection.all()

    counts: Dict[Tuple[str, str, str], int] = {}
    years: Dict[Tuple[str, str, str], Set[int]] = {}
    seen = 0
    kept = 0

    for record in records:
        seen += 1
        if not selection.matches(record):
            continue
        kept += 1
        key = record.key
        if key not in counts:
            counts[key] = 0
            years[key] = set()
        counts[key] += record.count
        years[key].add(record.exam_year)

    topics = [
        AggregatedTopic(
            module=module,
            subgroup=subgroup,
            topic=topic,
            question_count=count,
            distinct_years=frozenset(years[(module, subgroup, topic)]),
        )
        for (module, subgroup, topic), count in counts.items()
    ]

    logger.debug(f"Filter kept {kept}/{seen} occurrences, aggregated into {len(topics)} topics")
    return topics
