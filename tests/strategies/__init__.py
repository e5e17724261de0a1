"""Hypothesis strategies for i18ngen property-based testing.

Usage:
    from tests.strategies import identifiers, plural_maps
    from tests.strategies.templates import suffixed_templates
"""

from .templates import (
    brace_free_text,
    field_expressions,
    identifiers,
    message_catalogs,
    plural_maps,
    snake_identifiers,
    suffixed_templates,
)

__all__ = [
    "brace_free_text",
    "field_expressions",
    "identifiers",
    "message_catalogs",
    "plural_maps",
    "snake_identifiers",
    "suffixed_templates",
]
