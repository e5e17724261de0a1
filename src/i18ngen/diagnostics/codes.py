"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Template errors (per message, per locale)
        2000-2999: Identifier errors (generated names)
        3000-3999: Model errors (definition uniqueness)
        4000-4999: Source and configuration errors
        5000-5999: Generation errors (emitter)
        6000-6999: Warnings (collected, never raised)
    """

    # Template errors (1000-1999)
    DUPLICATE_PLACEHOLDER = 1001
    TEMPLATE_TOO_DEEP = 1002
    TEMPLATE_TOO_MANY_PLACEHOLDERS = 1003
    INVALID_TEMPLATE_VALUE = 1004
    EMPTY_PLURAL_MAP = 1005

    # Identifier errors (2000-2999)
    INVALID_IDENTIFIER = 2001

    # Model errors (3000-3999)
    DUPLICATE_MESSAGE_ID = 3001
    DUPLICATE_PLACEHOLDER_TYPE = 3002
    DUPLICATE_FIELD_NAME = 3003
    DUPLICATE_STRUCT_NAME = 3004
    DUPLICATE_ITEM_NAME = 3005

    # Source and configuration errors (4000-4999)
    SOURCE_NOT_FOUND = 4001
    SOURCE_DECODE_FAILED = 4002
    SOURCE_INVALID_SHAPE = 4003
    CONFIG_INVALID = 4004

    # Generation errors (5000-5999)
    GENERATED_CODE_INVALID = 5001
    OUTPUT_WRITE_FAILED = 5002

    # Warnings (6000-6999)
    AMBIGUOUS_PLACEHOLDER = 6001
    UNKNOWN_PLURAL_CATEGORY = 6002
    MISSING_PLURAL_CATEGORY = 6003
    MISSING_TRANSLATION = 6004
    STRINGIFIED_TEMPLATE_VALUE = 6005
    UNKNOWN_LOCALE = 6006


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Carries enough context (message id, locale, field) for the surrounding
    CLI to present an actionable message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        message_id: Message being processed when the problem was found
        locale: Locale of the offending template
        field_name: Offending placeholder, kind, or item name
        source_path: Source file the data came from
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    message_id: str | None = None
    locale: str | None = None
    field_name: str | None = None
    source_path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[DUPLICATE_PLACEHOLDER]: Duplicate placeholder 'name' (2 times)
              --> message 'Greeting', locale 'en'
              = field: name
              = help: Use suffix notation ...

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
