"""
Module: topics

Purpose:
    Aggregated statistics derived from raw occurrences: one AggregatedTopic
    per (module, subgroup, topic) triple, module-level summaries, ranked
    sub-group blocks and the exam-year summary shown on the share card.

Key Classes:
    - AggregatedTopic: Question count and years for one topic
    - ModuleSummary: Totals and sub-groups for one module
    - SubgroupBlock: Ranked topics of one sub-group
    - YearSummary: Distinct exam years and their display range
    - ShareCardData: Everything needed to lay out one export

Dependencies:
    - dataclasses (std)

Used By:
    - statistics.aggregation: Produces AggregatedTopic
    - statistics.projection: Produces the other classes
    - layout.planner: Consumes SubgroupBlock
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class AggregatedTopic:
    """
    Statistics for one unique (module, subgroup, topic) triple.

    Attributes:
        module: Module name
        subgroup: Sub-group name
        topic: Topic name
        question_count: Sum of counts over matching occurrences
        distinct_years: Exam years those occurrences come from

    Invariants:
        - question_count >= 0

    Example:
        >>> t = AggregatedTopic("Cardio", "Anatomie", "Heart", 5, frozenset({2022, 2021}))
        >>> t.exam_years_list
        (2021, 2022)
    """

    module: str
    subgroup: str
    topic: str
    question_count: int
    distinct_years: FrozenSet[int] = frozenset()

    def __post_init__(self) -> None:
        """Validate topic on construction."""
        if self.question_count < 0:
            raise ValueError(f"question_count cannot be negative: {self.question_count}")

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.module, self.subgroup, self.topic)

    @property
    def years_appeared(self) -> int:
        """Number of distinct exam years the topic was asked in."""
        return len(self.distinct_years)

    @property
    def exam_years_list(self) -> tuple[int, ...]:
        """Distinct exam years, ascending."""
        return tuple(sorted(self.distinct_years))


@dataclass(frozen=True)
class ModuleSummary:
    """
    Module-level totals.

    Attributes:
        module: Module name
        subgroups: Sub-group names, sorted lexicographically
        total_questions: Sum of question_count over the module's topics
    """

    module: str
    subgroups: tuple[str, ...]
    total_questions: int


@dataclass(frozen=True)
class SubgroupBlock:
    """
    Ranked topics of one sub-group within a module.

    Attributes:
        subgroup: Sub-group name
        entries: Topics ordered by question_count descending (stable)
    """

    subgroup: str
    entries: tuple[AggregatedTopic, ...]

    @property
    def is_empty(self) -> bool:
        return len(self.entries) == 0


@dataclass(frozen=True)
class YearSummary:
    """
    Distinct exam years covered by a set of topics.

    Attributes:
        years: Distinct years, ascending

    Example:
        >>> YearSummary(years=(2019, 2020, 2023)).range_label
        '2019–2023'
    """

    years: tuple[int, ...] = ()

    @property
    def count(self) -> int:
        return len(self.years)

    @property
    def range_label(self) -> str:
        """'<first>–<last>' with an en dash, or '' when there are no years."""
        if not self.years:
            return ""
        return f"{self.years[0]}–{self.years[-1]}"


@dataclass(frozen=True)
class ShareCardData:
    """
    Input bundle for one share-card export.

    Attributes:
        module_name: Exported module
        total_questions: Questions across the exported sub-groups only
        year_summary: Years across every filtered topic, all modules included
        blocks: Ranked sub-group blocks in canonical order
    """

    module_name: str
    total_questions: int
    year_summary: YearSummary
    blocks: tuple[SubgroupBlock, ...]
