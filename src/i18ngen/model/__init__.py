"""Model resolution: field resolution, catalog matching, plural detection, assembly.

Python 3.13+.
"""

from .assembler import assemble_message, build_definitions
from .catalog import PlaceholderCatalog, classify_placeholder, placeholder_type_name
from .fields import field_name, resolve_field, template_key
from .plural import PluralDetector, check_plural_categories, required_plural_categories
from .types import (
    Definitions,
    MessageDefinition,
    MessageSource,
    PlaceholderDefinition,
    PlaceholderItem,
    PlaceholderSource,
    ResolvedField,
    order_locales,
)

__all__ = [
    "Definitions",
    "MessageDefinition",
    "MessageSource",
    "PlaceholderCatalog",
    "PlaceholderDefinition",
    "PlaceholderItem",
    "PlaceholderSource",
    "PluralDetector",
    "ResolvedField",
    "assemble_message",
    "build_definitions",
    "check_plural_categories",
    "classify_placeholder",
    "field_name",
    "order_locales",
    "placeholder_type_name",
    "required_plural_categories",
    "resolve_field",
    "template_key",
]
