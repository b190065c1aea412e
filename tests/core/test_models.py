"""
Unit tests for core data models.

Test Coverage:
- RawOccurrence validation and key
- AxisFilter / FilterSelection sentinel handling
- AggregatedTopic derived properties
- YearSummary range label
"""

import pytest

from tendance_toolkit.core.models import (
    AggregatedTopic,
    AxisFilter,
    FilterSelection,
    RawOccurrence,
    SubgroupBlock,
    TendancePayload,
    YearSummary,
)


class TestRawOccurrence:
    """Tests for RawOccurrence dataclass."""

    def test_init_when_negative_count_then_raises_error(self):
        """Negative counts are rejected."""
        with pytest.raises(ValueError, match="count cannot be negative"):
            RawOccurrence("Cardio", "Anatomie", "Heart", 2021, "EMD1", -1)

    def test_init_when_zero_count_then_accepted(self):
        """A zero count is a valid occurrence."""
        record = RawOccurrence("Cardio", "Anatomie", "Heart", 2021, "EMD1", 0)

        assert record.count == 0

    def test_key_when_built_then_module_subgroup_topic(self, make_record):
        """key is the aggregation triple."""
        record = make_record("Heart")

        assert record.key == ("Cardio", "Anatomie", "Heart")

    def test_frozen_when_assigned_then_raises(self, make_record):
        """Records are immutable."""
        record = make_record()

        with pytest.raises(AttributeError):
            record.count = 10


class TestAxisFilter:
    """Tests for AxisFilter tagged wrapper."""

    def test_unrestricted_when_any_value_then_matches(self):
        axis = AxisFilter.unrestricted()

        assert axis.is_unrestricted
        assert axis.matches("EMD1")
        assert axis.matches(1999)

    def test_restricted_to_when_value_outside_then_rejects(self):
        axis = AxisFilter.restricted_to(["EMD1", "EMD2"])

        assert axis.matches("EMD2")
        assert not axis.matches("Rattrapage")

    def test_restricted_to_when_empty_then_matches_nothing(self):
        """An explicit empty restriction is not 'all'."""
        axis = AxisFilter.restricted_to([])

        assert not axis.is_unrestricted
        assert not axis.matches("EMD1")

    def test_from_selection_when_empty_then_unrestricted(self):
        """Empty UI selection means no restriction."""
        assert AxisFilter.from_selection([]).is_unrestricted
        assert AxisFilter.from_selection(None).is_unrestricted

    def test_from_selection_when_values_then_restricted(self):
        axis = AxisFilter.from_selection([2021])

        assert axis.values == frozenset({2021})


class TestFilterSelection:
    """Tests for FilterSelection."""

    def test_all_when_any_record_then_matches(self, make_record):
        assert FilterSelection.all().matches(make_record(exam_type="Anything", exam_year=1900))

    def test_from_sets_when_one_axis_empty_then_only_other_axis_filters(self, make_record):
        """Each axis applies the empty-means-all rule independently."""
        selection = FilterSelection.from_sets(exam_types=[], exam_years=[2021])

        assert selection.matches(make_record(exam_type="Rattrapage", exam_year=2021))
        assert not selection.matches(make_record(exam_year=2022))

    def test_matches_when_both_axes_restricted_then_requires_both(self, make_record):
        selection = FilterSelection.from_sets(["EMD1"], [2021])

        assert selection.matches(make_record(exam_type="EMD1", exam_year=2021))
        assert not selection.matches(make_record(exam_type="EMD2", exam_year=2021))
        assert not selection.matches(make_record(exam_type="EMD1", exam_year=2020))


class TestAggregatedTopic:
    """Tests for AggregatedTopic."""

    def test_init_when_negative_count_then_raises_error(self):
        with pytest.raises(ValueError, match="question_count cannot be negative"):
            AggregatedTopic("Cardio", "Anatomie", "Heart", -3)

    def test_exam_years_list_when_unordered_then_sorted(self):
        topic = AggregatedTopic("Cardio", "Anatomie", "Heart", 5, frozenset({2023, 2019, 2021}))

        assert topic.exam_years_list == (2019, 2021, 2023)
        assert topic.years_appeared == 3


class TestContainers:
    """Tests for SubgroupBlock, YearSummary and TendancePayload."""

    def test_subgroup_block_when_no_entries_then_empty(self):
        assert SubgroupBlock("Anatomie", ()).is_empty

    def test_year_summary_when_years_then_en_dash_range(self):
        summary = YearSummary(years=(2019, 2020, 2024))

        assert summary.range_label == "2019–2024"
        assert summary.count == 3

    def test_year_summary_when_single_year_then_same_bounds(self):
        assert YearSummary(years=(2022,)).range_label == "2022–2022"

    def test_year_summary_when_no_years_then_empty_label(self):
        summary = YearSummary()

        assert summary.range_label == ""
        assert summary.count == 0

    def test_payload_when_default_then_empty(self):
        assert TendancePayload().is_empty
