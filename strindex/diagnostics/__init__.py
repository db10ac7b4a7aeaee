"""Diagnostics."""

from strindex.diagnostics.codes import (
    SERDE_DUPLICATE_FIELD,
    SERDE_INVALID_JSON,
    SERDE_INVALID_LENGTH,
    SERDE_INVALID_RANGE,
    SERDE_INVALID_TYPE,
    SERDE_INVALID_VALUE,
    SERDE_MISSING_FIELD,
    SERDE_UNKNOWN_FIELD,
    DiagnosticSpec,
)
from strindex.diagnostics.errors import TextDecodeError

__all__ = [
    "SERDE_DUPLICATE_FIELD",
    "SERDE_INVALID_JSON",
    "SERDE_INVALID_LENGTH",
    "SERDE_INVALID_RANGE",
    "SERDE_INVALID_TYPE",
    "SERDE_INVALID_VALUE",
    "SERDE_MISSING_FIELD",
    "SERDE_UNKNOWN_FIELD",
    "DiagnosticSpec",
    "TextDecodeError",
]
