"""Diagnostic model: structured lint messages for style objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single lint finding about a block style object.

    Attributes:
        rule: Identifier for the lint rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        path: Keys locating the offending value, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    path: tuple[str, ...] | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def to_dict(self) -> dict[str, object]:
        return {
            "rule": self.rule,
            "severity": self.severity.value,
            "message": self.message,
            "path": list(self.path) if self.path else None,
            "fix": self.fix,
        }

    def __str__(self) -> str:
        location = ""
        if self.path:
            location = f" [path={'.'.join(self.path)}]"
        return f"{self.severity.value}{location}: {self.message}"
