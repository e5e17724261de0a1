"""Field resolution: FieldReference → generated identifiers.

    base "entity",        suffix ""      -> field "Entity",       key "entity"
    base "entity",        suffix "from"  -> field "EntityFrom",   key "entityFrom"
    base "email_address", suffix ""      -> field "EmailAddress", key "email_address"

The template key keeps the base name as authored; only the suffix is
CamelCased. Every suffixed variant of one base name resolves against the
same placeholder kind (looked up by base name).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from i18ngen.core.identifiers import escape_reserved, to_camel_case
from i18ngen.syntax import FieldReference

from .types import ResolvedField

__all__ = [
    "field_name",
    "resolve_field",
    "template_key",
]


def field_name(ref: FieldReference) -> str:
    """Generated attribute name for a reference."""
    name = to_camel_case(ref.base_name)
    if ref.suffix:
        name += to_camel_case(ref.suffix)
    return escape_reserved(name)


def template_key(ref: FieldReference) -> str:
    """Key a rewritten template uses for a reference."""
    if ref.suffix:
        return ref.base_name + to_camel_case(ref.suffix)
    return ref.base_name


def resolve_field(ref: FieldReference, type_name: str) -> ResolvedField:
    """Bind a reference to its generated names and placeholder type."""
    return ResolvedField(
        field_name=field_name(ref),
        template_key=template_key(ref),
        type_name=type_name,
        base_name=ref.base_name,
        suffix=ref.suffix,
    )
