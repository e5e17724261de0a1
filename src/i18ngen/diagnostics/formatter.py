"""Rendering of diagnostics for terminals and tools.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_ANSI_BY_SEVERITY: dict[str, str] = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
}
_ANSI_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """How the CLI prints diagnostics (``--format``)."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns Diagnostic objects into text.

    Attributes:
        output_format: rust (multi-line, default), simple (one line), or json
        color: Wrap the severity in ANSI colors (rust format only)

    Example:
        >>> diagnostic = ErrorTemplate.duplicate_message_id("Welcome")
        >>> print(DiagnosticFormatter().format(diagnostic))
        error[DUPLICATE_MESSAGE_ID]: Message 'Welcome' is defined more than once
          --> message 'Welcome'
          = help: Message IDs must be unique across all message files
        >>> print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic))
        DUPLICATE_MESSAGE_ID: Message 'Welcome' is defined more than once
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured format."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {diagnostic.message}"
            case OutputFormat.JSON:
                return json.dumps(self.to_dict(diagnostic), ensure_ascii=False)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics separated by blank lines."""
        return "\n\n".join(map(self.format, diagnostics))

    @staticmethod
    def to_dict(diagnostic: Diagnostic) -> dict[str, str | int]:
        """JSON-ready mapping; empty context fields are left out."""
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }
        optional = {
            "message_id": diagnostic.message_id,
            "locale": diagnostic.locale,
            "field_name": diagnostic.field_name,
            "source_path": diagnostic.source_path,
            "hint": diagnostic.hint,
        }
        data.update({key: value for key, value in optional.items() if value})
        return data

    @staticmethod
    def location(diagnostic: Diagnostic) -> str:
        """``path, message 'X', locale 'y'`` with absent parts skipped."""
        parts = [diagnostic.source_path or ""]
        if diagnostic.message_id:
            parts.append(f"message '{diagnostic.message_id}'")
        if diagnostic.locale:
            parts.append(f"locale '{diagnostic.locale}'")
        return ", ".join(part for part in parts if part)

    def _rust(self, diagnostic: Diagnostic) -> str:
        severity = diagnostic.severity
        if self.color:
            severity = f"{_ANSI_BY_SEVERITY[severity]}{severity}{_ANSI_RESET}"

        lines = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]
        if location := self.location(diagnostic):
            lines.append(f"  --> {location}")
        if diagnostic.field_name:
            lines.append(f"  = field: {diagnostic.field_name}")
        if diagnostic.hint:
            lines.append(f"  = help: {diagnostic.hint}")
        return "\n".join(lines)
