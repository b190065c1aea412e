"""
Module: layout.planner

Purpose:
    Decide how many ranked rows per sub-group block fit on a fixed canvas
    and position every visible row with its proportional bar.

Key Functions:
    - plan_layout(): Main planning function
    - compute_dynamic_cap(): Rows per block for a given block count

Algorithm:
    Single pass, uniform cap:
    1. available = canvas height - header/divider - footer reserve
    2. n = number of non-empty blocks (zero → empty plan)
    3. space = available - n·G - (n-1)·Γ
    4. cap = floor(space / R / n) clamped to [Kmin, K]; space <= 0 → Kmin
    5. Each block shows its first min(cap, len) ranked entries
    6. Bars are relative to the block's own top entry, never below
       min_bar_pct
    7. Stack: G per block header, R per row, Γ between blocks

    The cap is the same for every block even when blocks differ in size.
    Clamping up to Kmin may overflow the available height; the plan is
    then flagged degraded instead of dropping rows.

Dependencies:
    - layout.config: LayoutConfig
    - layout.models: LayoutPlan, BlockPlan, RowPlacement
    - core.models: SubgroupBlock

Used By:
    - controller: Share-card export
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple

from tendance_toolkit.core.models import AggregatedTopic, SubgroupBlock

from .config import LayoutConfig
from .models import BlockPlan, LayoutPlan, RowPlacement

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    # Bar widths round .5 up rather than to even
    return int(math.floor(value + 0.5))


def compute_dynamic_cap(num_blocks: int, config: LayoutConfig) -> Tuple[int, bool]:
    """
    Rows shown per block when `num_blocks` blocks share the canvas.

    Args:
        num_blocks: Number of non-empty blocks (must be positive)
        config: Layout configuration

    Returns:
        (cap, starved) where starved is True when no space was left for
        rows at all and the cap fell back to min_entries.

    Example:
        >>> cfg = LayoutConfig(canvas_height=640)  # available_height = 400
        >>> compute_dynamic_cap(3, cfg)
        (2, False)  # floor((400 - 96 - 40) / 36 / 3) = 2
    """
    space_for_rows = (
        config.available_height
        - num_blocks * config.block_header_height
        - max(0, num_blocks - 1) * config.block_gap
    )
    if space_for_rows <= 0:
        return config.min_entries, True

    cap = space_for_rows // (config.row_height * num_blocks)
    return max(config.min_entries, min(config.max_entries, cap)), False


def bar_percentages(entries: Sequence[AggregatedTopic], min_bar_pct: float) -> List[float]:
    """
    Bar lengths relative to the first (highest ranked) entry.

    A zero top count gives every bar the minimum length.
    """
    if not entries:
        return []
    local_max = entries[0].question_count
    if local_max <= 0:
        return [min_bar_pct for _ in entries]
    return [max(min_bar_pct, e.question_count / local_max * 100) for e in entries]


def plan_layout(
    blocks: Sequence[SubgroupBlock],
    config: Optional[LayoutConfig] = None,
) -> LayoutPlan:
    """
    Lay out ranked sub-group blocks on the canvas.

    Args:
        blocks: Ranked blocks for one module, in render order
        config: Layout configuration (defaults to LayoutConfig())

    Returns:
        LayoutPlan with one BlockPlan per non-empty block
    """
    config = config or LayoutConfig()
    header_height = config.header_and_divider_height
    available = config.available_height

    non_empty = [b for b in blocks if not b.is_empty]
    if not non_empty:
        logger.info("No sub-group blocks to lay out")
        return LayoutPlan(
            canvas_width=config.canvas_width,
            canvas_height=config.canvas_height,
            header_height=header_height,
            available_height=available,
            dynamic_cap=0,
            blocks=(),
            config=config,
        )

    cap, starved = compute_dynamic_cap(len(non_empty), config)

    planned: List[BlockPlan] = []
    cursor = header_height
    for index, block in enumerate(non_empty):
        block_top = cursor
        cursor += config.block_header_height

        visible = block.entries[:cap]
        rows = []
        for rank, (entry, pct) in enumerate(
            zip(visible, bar_percentages(visible, config.min_bar_pct)), start=1
        ):
            rows.append(RowPlacement(
                rank=rank,
                entry=entry,
                top=cursor,
                bar_pct=pct,
                bar_width=_round_half_up(config.bar_area_width * pct / 100),
                height=config.row_height,
            ))
            cursor += config.row_height

        planned.append(BlockPlan(
            subgroup=block.subgroup,
            index=index,
            top=block_top,
            rows=tuple(rows),
        ))

        if index < len(non_empty) - 1:
            cursor += config.block_gap

    height_used = cursor - header_height
    warnings: List[str] = []
    degraded = starved or height_used > available
    if degraded:
        message = (
            f"Layout overflows by {height_used - available}px: "
            f"{len(non_empty)} blocks at {cap} rows each need {height_used}px, "
            f"{available}px available"
        )
        warnings.append(message)
        logger.warning(message)

    logger.info(f"Planned {len(planned)} blocks at up to {cap} rows each")

    return LayoutPlan(
        canvas_width=config.canvas_width,
        canvas_height=config.canvas_height,
        header_height=header_height,
        available_height=available,
        dynamic_cap=cap,
        blocks=tuple(planned),
        height_used=height_used,
        degraded=degraded,
        warnings=tuple(warnings),
        config=config,
    )
