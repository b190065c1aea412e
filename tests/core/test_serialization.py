"""
Unit Tests for Serialization Utilities

Tests for payload decoding and view-model serialization.
"""

import json

import pytest

from tendance_toolkit.core.models import AggregatedTopic, ModuleSummary, RawOccurrence
from tendance_toolkit.core.utils.serialization import (
    deserialize_payload,
    load_payload,
    serialize_occurrence,
    serialize_module,
    serialize_topic,
)
from tendance_toolkit.core.schemas.validator import ValidationError


class TestPayloadDeserialization:
    """Tests for deserialize_payload / load_payload."""

    def test_deserialize_when_payload_given_then_records_in_order(self, sample_payload):
        payload = deserialize_payload(sample_payload)

        assert len(payload.records) == 4
        assert payload.records[0] == RawOccurrence("Cardio", "Anatomie", "Heart", 2021, "EMD1", 3)
        assert payload.records[3].module == "Pneumo"
        assert payload.available_exam_types == ("EMD1", "EMD2", "Rattrapage")
        assert payload.available_exam_years == (2020, 2021, 2022)

    def test_deserialize_when_data_missing_then_empty_payload(self):
        payload = deserialize_payload({})

        assert payload.is_empty
        assert payload.available_exam_types == ()

    def test_deserialize_when_data_null_then_empty_payload(self):
        assert deserialize_payload({"data": None, "availableExamTypes": None}).is_empty

    def test_deserialize_when_invalid_then_raises(self):
        with pytest.raises(ValidationError):
            deserialize_payload({"data": [{"m": "Cardio"}]})

    def test_serialize_occurrence_when_round_tripped_then_equal(self, make_record):
        record = make_record("Heart", 4)
        data = serialize_occurrence(record)

        assert set(data) == {"m", "sd", "c", "ey", "et", "cnt"}
        assert deserialize_payload({"data": [data]}).records[0] == record

    def test_load_when_file_missing_then_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_payload(tmp_path / "missing.json")

    def test_load_when_not_json_then_raises_validation_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValidationError, match="not valid JSON"):
            load_payload(path)

    def test_load_when_top_level_array_then_raises(self, tmp_path):
        path = tmp_path / "array.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(ValidationError, match="JSON object"):
            load_payload(path)

    def test_load_when_not_utf8_then_raises_validation_error(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"data": [{"m": "\xff"}]}')

        with pytest.raises(ValidationError, match="not valid UTF-8"):
            load_payload(path)

    def test_load_when_path_is_directory_then_raises_os_error(self, tmp_path):
        with pytest.raises(OSError):
            load_payload(tmp_path)

    def test_load_when_valid_file_then_decodes(self, tmp_path, sample_payload):
        path = tmp_path / "tendance.json"
        path.write_text(json.dumps(sample_payload, ensure_ascii=False), encoding="utf-8")

        assert len(load_payload(path).records) == 4


class TestViewModelSerialization:
    """Tests for topic/module serialization."""

    def test_serialize_topic_when_given_then_upstream_field_names(self):
        topic = AggregatedTopic("Cardio", "Anatomie", "Heart", 5, frozenset({2022, 2021}))

        assert serialize_topic(topic) == {
            "module_name": "Cardio",
            "sub_discipline": "Anatomie",
            "cours_topic": "Heart",
            "question_count": 5,
            "years_appeared": 2,
            "exam_years_list": [2021, 2022],
        }

    def test_serialize_module_when_given_then_lists(self):
        summary = ModuleSummary("Cardio", ("Anatomie", "Physiologie"), 9)

        assert serialize_module(summary) == {
            "module_name": "Cardio",
            "sub_disciplines": ["Anatomie", "Physiologie"],
            "total_questions": 9,
        }
