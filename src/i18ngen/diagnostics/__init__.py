"""Diagnostic system for i18ngen errors.

Provides structured error diagnostics with codes, context, and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConfigurationError,
    DuplicateDefinitionError,
    DuplicatePlaceholderError,
    GenerationError,
    I18nGenError,
    InvalidIdentifierError,
    InvalidTemplateValueError,
    SourceLoadError,
    TemplateTooComplexError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateDefinitionError",
    "DuplicatePlaceholderError",
    "ErrorTemplate",
    "GenerationError",
    "I18nGenError",
    "InvalidIdentifierError",
    "InvalidTemplateValueError",
    "OutputFormat",
    "SourceLoadError",
    "TemplateTooComplexError",
]
