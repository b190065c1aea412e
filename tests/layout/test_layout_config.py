"""
Unit tests for layout config and models.
"""

import pytest

from tendance_toolkit.core.models import AggregatedTopic
from tendance_toolkit.layout import BlockPlan, LayoutConfig, LayoutPlan, RowPlacement


class TestLayoutConfig:
    """Tests for LayoutConfig dataclass."""

    def test_init_when_defaults_then_square_card(self):
        config = LayoutConfig()

        assert config.canvas_width == 1080
        assert config.canvas_height == 1080
        assert config.max_entries == 5
        assert config.min_entries == 2
        assert config.min_bar_pct == 8.0

    def test_derived_heights_when_defaults_then_correct(self):
        config = LayoutConfig()

        assert config.header_and_divider_height == 180  # 48 + 104 + 28
        assert config.available_height == 840  # 1080 - 180 - 60

    def test_derived_widths_when_defaults_then_correct(self):
        config = LayoutConfig()

        assert config.content_width == 984  # 1080 - 2 * 48
        assert config.bar_area_width == 904  # 984 - 80

    def test_init_when_min_exceeds_max_then_raises_error(self):
        with pytest.raises(ValueError, match="exceeds max_entries"):
            LayoutConfig(min_entries=6, max_entries=5)

    def test_init_when_header_fills_canvas_then_raises_error(self):
        with pytest.raises(ValueError, match="Header and footer exceed canvas height"):
            LayoutConfig(canvas_height=240)

    def test_init_when_padding_fills_width_then_raises_error(self):
        with pytest.raises(ValueError, match="exceed canvas width"):
            LayoutConfig(canvas_width=150)

    def test_init_when_bar_pct_out_of_range_then_raises_error(self):
        with pytest.raises(ValueError, match="min_bar_pct"):
            LayoutConfig(min_bar_pct=120)


class TestLayoutModels:
    """Tests for RowPlacement, BlockPlan and LayoutPlan."""

    @pytest.fixture
    def rows(self):
        topic_a = AggregatedTopic("Cardio", "Anatomie", "A", 10)
        topic_b = AggregatedTopic("Cardio", "Anatomie", "B", 5)
        return (
            RowPlacement(rank=1, entry=topic_a, top=212, bar_pct=100.0, bar_width=904),
            RowPlacement(rank=2, entry=topic_b, top=248, bar_pct=50.0, bar_width=452),
        )

    def test_row_bottom_when_default_height_then_top_plus_36(self, rows):
        assert rows[0].bottom == 248

    def test_block_views_when_rows_then_entries_and_percentages(self, rows):
        block = BlockPlan(subgroup="Anatomie", index=0, top=180, rows=rows)

        assert [t.topic for t in block.visible_entries] == ["A", "B"]
        assert block.bar_widths == (100.0, 50.0)
        assert block.row_count == 2

    def test_plan_counts_when_blocks_then_total_rows(self, rows):
        block = BlockPlan(subgroup="Anatomie", index=0, top=180, rows=rows)
        plan = LayoutPlan(1080, 1080, 180, 840, 5, (block,))

        assert not plan.is_empty
        assert plan.total_rows == 2
