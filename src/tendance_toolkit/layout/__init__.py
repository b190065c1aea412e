"""
Module: layout

Purpose:
    Share-card layout planning.
    Converts ranked sub-group blocks into positioned rows on a fixed canvas.

Key Functions:
    - plan_layout(): Main entry point for layout
    - compute_dynamic_cap(): Uniform rows-per-block cap

Key Classes:
    - LayoutConfig: Canvas and row geometry
    - RowPlacement: Positioned ranked row
    - BlockPlan: Positioned sub-group block
    - LayoutPlan: Complete canvas plan

Used By:
    - tendance_toolkit.controller: Export pipeline
    - tendance_toolkit.output.renderer: SVG serialization
"""

from .config import LayoutConfig
from .models import RowPlacement, BlockPlan, LayoutPlan
from .planner import plan_layout, compute_dynamic_cap, bar_percentages

__all__ = [
    # Config
    "LayoutConfig",
    # Models
    "RowPlacement",
    "BlockPlan",
    "LayoutPlan",
    # Functions
    "plan_layout",
    "compute_dynamic_cap",
    "bar_percentages",
]
