"""Enumerations for i18ngen type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PlaceholderClass(StrEnum):
    """Classification of a placeholder kind, inferred from its data shape.

    StrEnum provides automatic string conversion: str(PlaceholderClass.TEXT) == "Text"
    """

    VALUE = "Value"
    """Opaque caller-supplied value with no localized text."""

    TEXT = "Text"
    """Catalog-backed item with per-locale localized text."""


class Backend(StrEnum):
    """Rendering backend targeted by the emitter.

    StrEnum provides automatic string conversion: str(Backend.BABEL) == "babel"
    """

    BABEL = "babel"
    """Generated code selects CLDR plural forms via Babel."""

    PLAIN = "plain"
    """Plain substitution only; plural maps render their flattened form."""

    @property
    def supports_pluralization(self) -> bool:
        """Whether the backend renders plural-category maps natively."""
        return self is Backend.BABEL


class SourceFormat(StrEnum):
    """Decoder used for a source file, chosen by extension."""

    YAML = "yaml"
    """PyYAML safe_load (.yaml, .yml and anything unrecognized)."""

    JSON = "json"
    """Standard library json (.json)."""


__all__ = [
    "Backend",
    "PlaceholderClass",
    "SourceFormat",
]
