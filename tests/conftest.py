import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import tendance_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from tendance_toolkit.core.models import AggregatedTopic, RawOccurrence, SubgroupBlock


# Common test fixtures
@pytest.fixture
def make_record():
    """Factory for RawOccurrence with sensible defaults."""
    def _create(
        topic: str = "Heart",
        count: int = 1,
        *,
        module: str = "Cardio",
        subgroup: str = "Anatomie",
        exam_year: int = 2021,
        exam_type: str = "EMD1",
    ) -> RawOccurrence:
        return RawOccurrence(module, subgroup, topic, exam_year, exam_type, count)
    return _create


@pytest.fixture
def make_topic():
    """Factory for AggregatedTopic with sensible defaults."""
    def _create(
        topic: str,
        count: int,
        *,
        module: str = "Cardio",
        subgroup: str = "Anatomie",
        years=(2021,),
    ) -> AggregatedTopic:
        return AggregatedTopic(module, subgroup, topic, count, frozenset(years))
    return _create


@pytest.fixture
def make_block(make_topic):
    """Factory for a SubgroupBlock from a list of counts."""
    def _create(subgroup: str, counts) -> SubgroupBlock:
        entries = tuple(
            make_topic(f"{subgroup} topic {i + 1}", c, subgroup=subgroup)
            for i, c in enumerate(counts)
        )
        return SubgroupBlock(subgroup=subgroup, entries=entries)
    return _create


@pytest.fixture
def cardio_records(make_record):
    """The two-sitting Heart scenario plus some neighbours."""
    return [
        make_record("Heart", 3, exam_year=2021),
        make_record("Heart", 2, exam_year=2022),
        make_record("Valves", 4, exam_year=2022, exam_type="Rattrapage"),
        make_record("ECG", 6, subgroup="Physiologie", exam_year=2023),
        make_record("Lungs", 7, module="Pneumo", exam_year=2020),
    ]


@pytest.fixture
def sample_payload() -> dict:
    """Upstream payload with short record keys."""
    return {
        "data": [
            {"m": "Cardio", "sd": "Anatomie", "c": "Heart", "ey": 2021, "et": "EMD1", "cnt": 3},
            {"m": "Cardio", "sd": "Anatomie", "c": "Heart", "ey": 2022, "et": "EMD1", "cnt": 2},
            {"m": "Cardio", "sd": "Physiologie", "c": "ECG", "ey": 2022, "et": "Rattrapage", "cnt": 4},
            {"m": "Pneumo", "sd": "Anatomie", "c": "Lungs", "ey": 2020, "et": "EMD2", "cnt": 1},
        ],
        "availableExamTypes": ["EMD1", "EMD2", "Rattrapage"],
        "availableExamYears": [2020, 2021, 2022],
    }
