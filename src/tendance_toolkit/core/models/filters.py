"""
Module: filters

Purpose:
    Filter selection for exam occurrences. The UI convention "nothing
    ticked means everything" is kept explicit through AxisFilter, a tagged
    wrapper that is either unrestricted or restricted to a fixed set, so an
    empty restriction is never confused with "no restriction".

Key Classes:
    - AxisFilter: Filter along one axis (exam type or exam year)
    - FilterSelection: Pair of axis filters applied to every record

Dependencies:
    - dataclasses (std)

Used By:
    - statistics.aggregation: aggregate()
    - controller: Selection built from CLI/config values
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Hashable, Iterable, Optional

from .occurrences import RawOccurrence


@dataclass(frozen=True)
class AxisFilter:
    """
    Filter along a single axis (immutable).

    Either unrestricted (matches every value) or restricted to `values`.
    A restriction to an empty set matches nothing; use `from_selection()`
    to apply the "empty selection = all" convention.

    Attributes:
        values: Allowed values, or None when unrestricted

    Example:
        >>> AxisFilter.unrestricted().matches("EMD1")
        True
        >>> AxisFilter.restricted_to(["EMD1"]).matches("EMD2")
        False
        >>> AxisFilter.from_selection([]).is_unrestricted
        True
    """

    values: Optional[FrozenSet[Hashable]] = None

    @classmethod
    def unrestricted(cls) -> "AxisFilter":
        return cls(values=None)

    @classmethod
    def restricted_to(cls, values: Iterable[Hashable]) -> "AxisFilter":
        return cls(values=frozenset(values))

    @classmethod
    def from_selection(cls, values: Optional[Iterable[Hashable]]) -> "AxisFilter":
        """Build from a UI selection where an empty selection means 'all'."""
        selected = frozenset(values or ())
        if not selected:
            return cls.unrestricted()
        return cls(values=selected)

    @property
    def is_unrestricted(self) -> bool:
        return self.values is None

    def matches(self, value: Hashable) -> bool:
        """Check whether `value` passes this filter."""
        if self.values is None:
            return True
        return value in self.values


@dataclass(frozen=True)
class FilterSelection:
    """
    Exam type and exam year filters (immutable).

    Attributes:
        exam_types: Filter on RawOccurrence.exam_type
        exam_years: Filter on RawOccurrence.exam_year

    Example:
        >>> selection = FilterSelection.from_sets(exam_years=[2021])
        >>> selection.exam_types.is_unrestricted
        True
    """

    exam_types: AxisFilter = AxisFilter()
    exam_years: AxisFilter = AxisFilter()

    @classmethod
    def all(cls) -> "FilterSelection":
        """Selection that keeps every record."""
        return cls(AxisFilter.unrestricted(), AxisFilter.unrestricted())

    @classmethod
    def from_sets(
        cls,
        exam_types: Optional[Iterable[str]] = None,
        exam_years: Optional[Iterable[int]] = None,
    ) -> "FilterSelection":
        """Build from raw UI selections; an empty axis means no restriction."""
        return cls(
            exam_types=AxisFilter.from_selection(exam_types),
            exam_years=AxisFilter.from_selection(exam_years),
        )

    def matches(self, record: RawOccurrence) -> bool:
        """Check whether a record survives both axis filters."""
        return (
            self.exam_types.matches(record.exam_type)
            and self.exam_years.matches(record.exam_year)
        )
