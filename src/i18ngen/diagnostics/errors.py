"""i18ngen exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Every error is terminal for the run that raises it.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class I18nGenError(Exception):
    """Base exception for all i18ngen errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        message_id: Message being processed ("" when not applicable)
        locale: Locale being processed ("" when not applicable)
        field_name: Offending field, kind, or item ("" when not applicable)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nGenError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def message_id(self) -> str:
        """Message ID carried by the diagnostic."""
        return (self.diagnostic.message_id if self.diagnostic else None) or ""

    @property
    def locale(self) -> str:
        """Locale carried by the diagnostic."""
        return (self.diagnostic.locale if self.diagnostic else None) or ""

    @property
    def field_name(self) -> str:
        """Field, kind, or item name carried by the diagnostic."""
        return (self.diagnostic.field_name if self.diagnostic else None) or ""


class DuplicatePlaceholderError(I18nGenError):
    """Unsuffixed placeholder repeated within one locale's template.

    Example:
        "{{.name}} and {{.name}}"  ← use {{.name:a}} and {{.name:b}}
    """


class TemplateTooComplexError(I18nGenError):
    """Template exceeds the brace nesting or placeholder count bound."""


class InvalidIdentifierError(I18nGenError):
    """A kind name, item id, field name, or message ID cannot become an identifier."""


class InvalidTemplateValueError(I18nGenError):
    """Decoded template value is neither a string nor a plural-category map."""


class DuplicateDefinitionError(I18nGenError):
    """Two definitions would share one message ID or generated type name."""


class ConfigurationError(I18nGenError):
    """Configuration file is unreadable or holds invalid values."""


class SourceLoadError(I18nGenError):
    """Message or placeholder source files could not be found or decoded."""


class GenerationError(I18nGenError):
    """Emitted source failed to compile or could not be written."""
