# badlogvis/core/diagnostics.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from badlogvis.utils.logging import get_logger

logger = get_logger(__name__)

# Warning codes
UNKNOWN_ATTRIBUTE = "unknown-attribute"
DUPLICATE_ATTRIBUTE = "duplicate-attribute"
DUPLICATE_VALUE = "duplicate-value"
JOIN_LABEL_COLLISION = "join-label-collision"
JOIN_UNIT_MISMATCH = "join-unit-mismatch"
NAME_WHITESPACE = "name-whitespace"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A non-fatal problem found while processing; the run continues."""

    code: str
    message: str
    subject: str | None = None


@dataclass(slots=True)
class Diagnostics:
    """
    Ordered collection of warnings produced during a run.

    Every warning is also forwarded to the ``badlogvis`` logger, so command
    line users see it while callers (and tests) can inspect the records.
    """

    records: list[Diagnostic] = field(default_factory=list)

    def warn(self, code: str, message: str, *, subject: str | None = None) -> Diagnostic:
        diag = Diagnostic(code=code, message=message, subject=subject)
        self.records.append(diag)
        logger.warning(message)
        return diag

    def codes(self) -> list[str]:
        return [d.code for d in self.records]

    def by_code(self, code: str) -> list[Diagnostic]:
        return [d for d in self.records if d.code == code]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)
