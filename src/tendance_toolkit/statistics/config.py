"""
Module: statistics.config

Purpose:
    Configuration for ranking projections.
    Defines the canonical sub-group order used when stacking blocks.

Key Classes:
    - RankingConfig: Immutable ranking configuration

Dependencies:
    - dataclasses (std)

Used By:
    - statistics.projection: Sub-group ordering
    - controller: Share-card export
"""

from __future__ import annotations

from dataclasses import dataclass


DEFAULT_SUBGROUP_PRIORITY: tuple[str, ...] = (
    "Anatomie",
    "Histologie",
    "Physiologie",
    "Biochimie",
    "Biophysique",
)


@dataclass(frozen=True)
class RankingConfig:
    """
    Configuration for ranking (immutable).

    Attributes:
        subgroup_priority: Canonical sub-group order. Listed sub-groups sort
            by their index; any other sub-group sorts after them,
            lexicographically.

    Example:
        >>> RankingConfig().subgroup_priority[0]
        'Anatomie'
    """

    subgroup_priority: tuple[str, ...] = DEFAULT_SUBGROUP_PRIORITY

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if len(set(self.subgroup_priority)) != len(self.subgroup_priority):
            raise ValueError(f"subgroup_priority has duplicates: {self.subgroup_priority}")
