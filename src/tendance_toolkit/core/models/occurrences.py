"""
Module: occurrences

Purpose:
    Provides the RawOccurrence dataclass - one granular exam record stating
    that a topic was asked `count` times in one exam sitting - and the
    TendancePayload bundle that carries a full snapshot of records together
    with the exam types and years the upstream service knows about.

Key Classes:
    - RawOccurrence: Immutable exam-occurrence record
    - TendancePayload: Records plus available filter values

Dependencies:
    - dataclasses (std)

Used By:
    - statistics.aggregation: Input of aggregate()
    - core.utils.serialization: Payload decoding
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RawOccurrence:
    """
    Granular exam occurrence (immutable).

    Reads as: topic `topic` of sub-group `subgroup` in module `module` was
    asked `count` times in exam `exam_type` of year `exam_year`.

    Attributes:
        module: Top-level subject grouping (e.g. "Cardio")
        subgroup: Sub-discipline within the module (e.g. "Anatomie")
        topic: Finest-grained ranked unit (a course topic)
        exam_year: Promo / academic year of the exam
        exam_type: Exam sitting tag (e.g. "EMD1", "Rattrapage")
        count: Number of questions, never negative

    Example:
        >>> RawOccurrence("Cardio", "Anatomie", "Heart", 2021, "EMD1", 3).count
        3
    """

    module: str
    subgroup: str
    topic: str
    exam_year: int
    exam_type: str
    count: int

    def __post_init__(self) -> None:
        """Validate occurrence on construction."""
        if self.count < 0:
            raise ValueError(f"count cannot be negative: {self.count}")

    @property
    def key(self) -> tuple[str, str, str]:
        """Aggregation key (module, subgroup, topic)."""
        return (self.module, self.subgroup, self.topic)


@dataclass(frozen=True)
class TendancePayload:
    """
    Decoded upstream payload.

    Attributes:
        records: All raw occurrences, in payload order
        available_exam_types: Exam types offered for filtering
        available_exam_years: Exam years offered for filtering
    """

    records: tuple[RawOccurrence, ...] = ()
    available_exam_types: tuple[str, ...] = ()
    available_exam_years: tuple[int, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Check if the payload carries no records."""
        return len(self.records) == 0
