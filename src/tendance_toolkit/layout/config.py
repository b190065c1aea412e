"""
Module: layout.config

Purpose:
    Configuration for the share-card layout planner.
    Defines canvas dimensions, fixed region heights and row capping.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - layout.planner: Block and row placement
    - output.renderer: Header/footer geometry
"""

from __future__ import annotations

from dataclasses import dataclass


# Square share card
DEFAULT_CANVAS_WIDTH_PX = 1080
DEFAULT_CANVAS_HEIGHT_PX = 1080


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for share-card layout (immutable).

    Vertical budget, top to bottom: padding, header (brand row + title row),
    divider, sub-group blocks, footer reserve.

    Attributes:
        canvas_width: Canvas width in px
        canvas_height: Canvas height in px
        padding: Outer padding; also the top margin
        header_height: Brand row plus module title row
        divider_height: Divider line plus the space under it
        footer_reserve: Space kept free for the footer
        row_height: Height of one ranked row (R)
        block_header_height: Height of a sub-group label (G)
        block_gap: Gap between consecutive blocks (Γ)
        max_entries: Upper bound on rows per block (K)
        min_entries: Rows per block kept even when space runs out (Kmin)
        min_bar_pct: Smallest bar length, percent of the bar track
        bar_label_reserve: Track width kept free for the rank and count labels

    Example:
        >>> config = LayoutConfig()
        >>> config.available_height
        840  # 1080 - (48 + 104 + 28) - 60
    """

    # Canvas
    canvas_width: int = DEFAULT_CANVAS_WIDTH_PX
    canvas_height: int = DEFAULT_CANVAS_HEIGHT_PX
    padding: int = 48

    # Fixed regions
    header_height: int = 104
    divider_height: int = 28
    footer_reserve: int = 60

    # Blocks
    row_height: int = 36
    block_header_height: int = 32
    block_gap: int = 20

    # Capping
    max_entries: int = 5
    min_entries: int = 2

    # Bars
    min_bar_pct: float = 8.0
    bar_label_reserve: int = 80

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.canvas_width <= 0:
            raise ValueError(f"canvas_width must be positive: {self.canvas_width}")
        if self.canvas_height <= 0:
            raise ValueError(f"canvas_height must be positive: {self.canvas_height}")
        if self.row_height <= 0:
            raise ValueError(f"row_height must be positive: {self.row_height}")
        if self.min_entries < 1:
            raise ValueError(f"min_entries must be at least 1: {self.min_entries}")
        if self.min_entries > self.max_entries:
            raise ValueError(
                f"min_entries ({self.min_entries}) exceeds max_entries ({self.max_entries})"
            )
        if not 0 <= self.min_bar_pct <= 100:
            raise ValueError(f"min_bar_pct must be within [0, 100]: {self.min_bar_pct}")
        if self.bar_area_width <= 0:
            raise ValueError("Padding and label reserve exceed canvas width")
        if self.available_height <= 0:
            raise ValueError("Header and footer exceed canvas height")

    @property
    def header_and_divider_height(self) -> int:
        """Offset of the first block from the canvas top."""
        return self.padding + self.header_height + self.divider_height

    @property
    def available_height(self) -> int:
        """Height available for sub-group blocks."""
        return self.canvas_height - self.header_and_divider_height - self.footer_reserve

    @property
    def content_width(self) -> int:
        """Width between left and right padding."""
        return self.canvas_width - self.padding * 2

    @property
    def bar_area_width(self) -> int:
        """Width of a full (100%) bar track."""
        return self.content_width - self.bar_label_reserve
