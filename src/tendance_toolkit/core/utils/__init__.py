"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    deserialize_occurrence,
    serialize_occurrence,
    deserialize_payload,
    load_payload,
    serialize_topic,
    serialize_module,
    serialize_block,
)

__all__ = [
    "deserialize_occurrence",
    "serialize_occurrence",
    "deserialize_payload",
    "load_payload",
    "serialize_topic",
    "serialize_module",
    "serialize_block",
]
