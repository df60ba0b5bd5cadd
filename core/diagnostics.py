# -*- coding: utf-8 -*-
"""core/diagnostics.py

Compiler diagnostic records as handed over by the host (no PyQt dependency).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping


class DiagnosticFormatError(ValueError):
    """Raised when host data cannot be turned into a Diagnostic."""


class Severity(str, Enum):
    HIDDEN = "Hidden"
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"

    @classmethod
    def parse(cls, value: Any) -> "Severity":
        if isinstance(value, Severity):
            return value
        if isinstance(value, Enum):
            # host enums: match by member name (DiagnosticSeverity.Error)
            value = value.name
        if isinstance(value, bool):
            raise DiagnosticFormatError(f"Invalid severity: {value!r}")
        if isinstance(value, int):
            try:
                return _SEVERITY_BY_CODE[value]
            except KeyError:
                raise DiagnosticFormatError(f"Unknown severity code: {value}") from None
        name = str(value or "").strip().lower()
        for sev in cls:
            if sev.value.lower() == name:
                return sev
        raise DiagnosticFormatError(f"Unknown severity: {value!r}")


# Host ordering: Hidden=0, Info=1, Warning=2, Error=3
_SEVERITY_BY_CODE = {
    0: Severity.HIDDEN,
    1: Severity.INFO,
    2: Severity.WARNING,
    3: Severity.ERROR,
}

# Accepted spellings per field: snake_case, camelCase, PascalCase
_FIELD_NAMES = {
    "severity": ("severity", "Severity"),
    "project": ("project", "Project"),
    "message": ("message", "Message"),
    "file_path": ("file_path", "filePath", "FilePath", "file"),
    "line_number": ("line_number", "lineNumber", "LineNumber", "line"),
    "char_number": ("char_number", "charNumber", "CharNumber", "column"),
}


def _first(lookup: Callable[[str], Any], field: str, default: Any = None) -> Any:
    for name in _FIELD_NAMES[field]:
        value = lookup(name)
        if value is not None:
            return value
    return default


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    project: str
    message: str
    file_path: str = ""
    line_number: int = 0
    char_number: int = 0

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def location(self) -> str:
        return f"{self.file_path}({self.line_number},{self.char_number})"

    @property
    def subtitle(self) -> str:
        return f"{self.project} - {self.location}"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Diagnostic":
        """Build a diagnostic from a host/JSON mapping.

        Accepts snake_case (``file_path``), camelCase (``filePath``) and
        PascalCase (``FilePath``) keys.
        """
        if not isinstance(data, Mapping):
            raise DiagnosticFormatError(f"Diagnostic must be a mapping, got {type(data).__name__}")
        return cls._build(data.get)

    @classmethod
    def from_object(cls, obj: Any) -> "Diagnostic":
        """Build a diagnostic from a host object exposing the fields as attributes."""
        return cls._build(lambda name: getattr(obj, name, None))

    @classmethod
    def _build(cls, lookup: Callable[[str], Any]) -> "Diagnostic":
        message = _first(lookup, "message")
        if message is None:
            raise DiagnosticFormatError("Diagnostic is missing 'message'")
        try:
            line = int(_first(lookup, "line_number", default=0))
            col = int(_first(lookup, "char_number", default=0))
        except (TypeError, ValueError) as e:
            raise DiagnosticFormatError(f"Invalid diagnostic position: {e}") from e
        return cls(
            severity=Severity.parse(_first(lookup, "severity", default=Severity.INFO)),
            project=str(_first(lookup, "project", default="")),
            message=str(message),
            file_path=str(_first(lookup, "file_path", default="")),
            line_number=line,
            char_number=col,
        )
