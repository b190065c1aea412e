"""
Module: layout.models

Purpose:
    Data models for share-card layout.
    Immutable dataclasses describing rows, blocks and the full plan.

Key Classes:
    - RowPlacement: One ranked topic positioned on the canvas
    - BlockPlan: One sub-group block with its visible rows
    - LayoutPlan: Complete layout for one canvas

Dependencies:
    - dataclasses (std)
    - core.models: AggregatedTopic
    - layout.config: LayoutConfig

Used By:
    - layout.planner: Creates LayoutPlan
    - output.renderer: Serializes LayoutPlan
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tendance_toolkit.core.models import AggregatedTopic

from .config import LayoutConfig


@dataclass(frozen=True)
class RowPlacement:
    """
    A ranked topic positioned on the canvas.

    Attributes:
        rank: 1-based rank within its block
        entry: The topic shown on this row
        top: Y offset of the row from the canvas top (px)
        bar_pct: Bar length, percent of the track
        bar_width: Bar length in px

    Example:
        >>> row = RowPlacement(rank=1, entry=topic, top=212, bar_pct=100.0, bar_width=904)
        >>> row.bottom
        248  # with the default 36px row height
    """

    rank: int
    entry: AggregatedTopic
    top: int
    bar_pct: float
    bar_width: int
    height: int = 36

    @property
    def bottom(self) -> int:
        """Bottom Y coordinate (top + height)."""
        return self.top + self.height


@dataclass(frozen=True)
class BlockPlan:
    """
    Layout of one sub-group block.

    Attributes:
        subgroup: Sub-group name
        index: Position among the plan's blocks; keys per-block SVG ids
        top: Y offset of the block header
        rows: Visible rows, best ranked first
    """

    subgroup: str
    index: int
    top: int
    rows: tuple[RowPlacement, ...]

    @property
    def visible_entries(self) -> tuple[AggregatedTopic, ...]:
        return tuple(row.entry for row in self.rows)

    @property
    def bar_widths(self) -> tuple[float, ...]:
        """Bar lengths in percent, one per visible entry."""
        return tuple(row.bar_pct for row in self.rows)

    @property
    def row_count(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class LayoutPlan:
    """
    Complete layout for one canvas.

    Attributes:
        canvas_width: Canvas width (px)
        canvas_height: Canvas height (px)
        header_height: Space above the first block, divider included
        available_height: Space reserved for blocks
        dynamic_cap: Rows shown per block (same for every block)
        blocks: Non-empty blocks in render order
        height_used: Stacked height of all blocks
        degraded: True when the minimum row count overflows the space
        warnings: Diagnostic messages
        config: Geometry the plan was built with; the renderer draws from it

    Example:
        >>> plan = plan_layout(blocks)
        >>> plan.is_empty
        False
    """

    canvas_width: int
    canvas_height: int
    header_height: int
    available_height: int
    dynamic_cap: int
    blocks: tuple[BlockPlan, ...]
    height_used: int = 0
    degraded: bool = False
    warnings: tuple[str, ...] = ()
    config: LayoutConfig = field(default_factory=LayoutConfig)

    @property
    def is_empty(self) -> bool:
        """Check if the plan has no blocks."""
        return len(self.blocks) == 0

    @property
    def total_rows(self) -> int:
        """Total number of rows across all blocks."""
        return sum(b.row_count for b in self.blocks)
