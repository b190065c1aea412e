"""
Serialization Utilities

Provides to/from JSON utilities for the tendance data models.

The upstream payload uses shortened record keys:

| Key | Field |
|-----|-------|
| `m` | module |
| `sd` | subgroup (sub-discipline) |
| `c` | topic (course) |
| `ey` | exam_year |
| `et` | exam_type |
| `cnt` | count |

An absent, null or empty `data` array is valid and decodes to an empty
payload.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models.occurrences import RawOccurrence, TendancePayload
from ..models.topics import AggregatedTopic, ModuleSummary, SubgroupBlock
from ..schemas.validator import validate_payload, ValidationError


# ─────────────────────────────────────────────────────────────────────────────
# Payload Deserialization
# ─────────────────────────────────────────────────────────────────────────────

def deserialize_occurrence(data: dict[str, Any]) -> RawOccurrence:
    """Decode one short-key record into a RawOccurrence."""
    return RawOccurrence(
        module=data["m"],
        subgroup=data["sd"],
        topic=data["c"],
        exam_year=int(data["ey"]),
        exam_type=data["et"],
        count=int(data["cnt"]),
    )


def serialize_occurrence(record: RawOccurrence) -> dict[str, Any]:
    """Encode a RawOccurrence with the payload's short keys."""
    return {
        "m": record.module,
        "sd": record.subgroup,
        "c": record.topic,
        "ey": record.exam_year,
        "et": record.exam_type,
        "cnt": record.count,
    }


def deserialize_payload(data: dict[str, Any], *, validate: bool = True) -> TendancePayload:
    """
    Deserialize an upstream payload.

    Args:
        data: Parsed JSON payload
        validate: Whether to validate against the schema first

    Returns:
        TendancePayload instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If a record cannot be built
    """
    if validate:
        validate_payload(data)

    records = tuple(deserialize_occurrence(item) for item in (data.get("data") or []))
    return TendancePayload(
        records=records,
        available_exam_types=tuple(data.get("availableExamTypes") or ()),
        available_exam_years=tuple(int(y) for y in (data.get("availableExamYears") or ())),
    )


def load_payload(path: Path, *, validate: bool = True) -> TendancePayload:
    """
    Load a payload from a JSON file.

    Args:
        path: Path to the payload file
        validate: Whether to validate against the schema

    Returns:
        TendancePayload instance

    Raises:
        FileNotFoundError: If file doesn't exist
        OSError: If the file cannot be read (e.g. a directory)
        ValidationError: If the file is not UTF-8 JSON or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Payload file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except UnicodeDecodeError as e:
            raise ValidationError(
                f"Payload is not valid UTF-8: {e}",
                path=str(path),
                errors=[str(e)],
            ) from e
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Payload is not valid JSON: {e}",
                path=str(path),
                errors=[str(e)],
            ) from e

    if not isinstance(data, dict):
        raise ValidationError(
            f"Payload must be a JSON object, got {type(data).__name__}",
            path=str(path),
        )

    return deserialize_payload(data, validate=validate)


# ─────────────────────────────────────────────────────────────────────────────
# View Model Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_topic(topic: AggregatedTopic) -> dict[str, Any]:
    """Serialize an AggregatedTopic to a dictionary."""
    return {
        "module_name": topic.module,
        "sub_discipline": topic.subgroup,
        "cours_topic": topic.topic,
        "question_count": topic.question_count,
        "years_appeared": topic.years_appeared,
        "exam_years_list": list(topic.exam_years_list),
    }


def serialize_module(summary: ModuleSummary) -> dict[str, Any]:
    """Serialize a ModuleSummary to a dictionary."""
    return {
        "module_name": summary.module,
        "sub_disciplines": list(summary.subgroups),
        "total_questions": summary.total_questions,
    }


def serialize_block(block: SubgroupBlock) -> dict[str, Any]:
    """Serialize a SubgroupBlock with its ranked entries."""
    return {
        "sub_discipline": block.subgroup,
        "entries": [serialize_topic(t) for t in block.entries],
    }
