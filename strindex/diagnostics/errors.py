"""Recoverable errors raised while decoding untrusted data."""

from __future__ import annotations

from dataclasses import dataclass

from strindex.diagnostics.codes import DiagnosticSpec


@dataclass(slots=True, eq=False)
class TextDecodeError(ValueError):
    """Decoded data is malformed or breaks the range invariant.

    `message` is the full, human-readable reason; `spec` classifies it.
    """

    spec: DiagnosticSpec
    message: str
    field: str | None = None

    def __post_init__(self):
        ValueError.__init__(self, self.message)

    def __reduce__(self):
        return (type(self), (self.spec, self.message, self.field))

    @property
    def code(self) -> str:
        return self.spec.code

    @property
    def hint(self) -> str | None:
        return self.spec.hint

    def __str__(self) -> str:
        return self.message
