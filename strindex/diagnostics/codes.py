"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    category: str | None = None


SERDE_INVALID_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SERDE_INVALID_TYPE",
    message="Value has the wrong type.",
    hint="Offsets are unsigned integers; ranges are `{start, end}` maps or `[start, end]` sequences.",
    category="serde",
)

SERDE_INVALID_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SERDE_INVALID_VALUE",
    message="Offset does not fit in an unsigned 32-bit integer.",
    category="serde",
)

SERDE_INVALID_LENGTH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SERDE_INVALID_LENGTH",
    message="Range sequence must have exactly two elements.",
    hint="Encode ranges positionally as `[start, end]`.",
    category="serde",
)

SERDE_MISSING_FIELD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SERDE_MISSING_FIELD",
    message="Range map is missing a field.",
    hint="Both `start` and `end` are required.",
    category="serde",
)

SERDE_DUPLICATE_FIELD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SERDE_DUPLICATE_FIELD",
    message="Range map repeats a field.",
    category="serde",
)

SERDE_UNKNOWN_FIELD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SERDE_UNKNOWN_FIELD",
    message="Range map has an unexpected field.",
    hint="Only `start` and `end` are allowed.",
    category="serde",
)

SERDE_INVALID_RANGE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SERDE_INVALID_RANGE",
    message="Range start is after its end.",
    category="serde",
)

SERDE_INVALID_JSON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SERDE_INVALID_JSON",
    message="Input is not valid JSON.",
    category="serde",
)
