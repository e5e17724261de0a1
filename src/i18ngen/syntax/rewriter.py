"""Suffix-aware template rewriting.

Rewrites every suffixed field occurrence to its generated template key so a
single-field renderer sees one ordinary field per identity:

    "{{.entity:from}} to {{.entity:to | title}}"
    -> "{{.entityFrom}} to {{.entityTo | title}}"

Unsuffixed occurrences and all other text are left byte-for-byte intact.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from .extractor import iter_field_occurrences
from .fields import FieldReference
from .template import PlainTemplate, PluralTemplate, RawTemplate

__all__ = [
    "format_field",
    "rewrite_raw_template",
    "rewrite_template",
]

KeyFunction: TypeAlias = Callable[[FieldReference], str]


def format_field(key: str, function_chain: tuple[str, ...] = ()) -> str:
    """Format a canonical field expression.

    Example:
        >>> format_field("entityFrom", ("title",))
        '{{.entityFrom | title}}'
    """
    chain = "".join(f" | {fn}" for fn in function_chain)
    return f"{{{{.{key}{chain}}}}}"


def rewrite_template(template: str, key_for: KeyFunction) -> str:
    """Rewrite suffixed occurrences using ``key_for(reference)``.

    Args:
        template: Template text
        key_for: Maps a reference to its generated template key

    Returns:
        Rewritten template
    """
    parts: list[str] = []
    position = 0
    for occurrence in iter_field_occurrences(template):
        ref = occurrence.field
        if not ref.has_suffix:
            continue
        parts.append(template[position : occurrence.start])
        parts.append(format_field(key_for(ref), ref.function_chain))
        position = occurrence.end
    if not parts:
        return template
    parts.append(template[position:])
    return "".join(parts)


def rewrite_raw_template(raw: RawTemplate, key_for: KeyFunction) -> RawTemplate:
    """Apply rewrite_template() to every text inside a RawTemplate."""
    match raw:
        case PlainTemplate(text=text):
            return PlainTemplate(rewrite_template(text, key_for))
        case PluralTemplate(forms=forms):
            return PluralTemplate(
                tuple((category, rewrite_template(text, key_for)) for category, text in forms)
            )
