"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_payload,
    ValidationError,
    PAYLOAD_SCHEMA_NAME,
)

__all__ = [
    "validate_payload",
    "ValidationError",
    "PAYLOAD_SCHEMA_NAME",
]
