"""Field extraction from template strings.

Recognizes exactly one placeholder grammar:

    {{ .name }}
    {{ .name:suffix }}
    {{ .name:suffix | fn | fn }}

Scanning is lenient. Expressions not starting with "." are
ignored, and an unterminated "{{" stops the scan without emitting a partial
field. Order and duplicates are preserved exactly as encountered.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .fields import FieldReference

__all__ = [
    "FieldOccurrence",
    "dedupe_fields",
    "extract_fields",
    "iter_field_occurrences",
]

_OPEN = "{{"
_CLOSE = "}}"


@dataclass(frozen=True, slots=True)
class FieldOccurrence:
    """A field reference together with its character span in the template.

    Attributes:
        start: Offset of the opening "{{"
        end: Offset just past the closing "}}"
        field: Parsed reference
    """

    start: int
    end: int
    field: FieldReference


def _parse_expression(expression: str) -> FieldReference | None:
    """Parse the trimmed content between delimiters, or None if not a field."""
    if not expression.startswith("."):
        return None

    path, _, chain = expression[1:].partition("|")
    name, _, suffix = path.strip().partition(":")
    name = name.strip()
    if not name:
        return None

    functions = tuple(fn.strip() for fn in chain.split("|") if fn.strip()) if chain else ()
    return FieldReference(name, suffix.strip(), functions)


def iter_field_occurrences(template: str) -> Iterator[FieldOccurrence]:
    """Yield every field occurrence in left-to-right order.

    Args:
        template: Template text

    Yields:
        FieldOccurrence for each ``{{.…}}`` expression
    """
    position = 0
    while True:
        start = template.find(_OPEN, position)
        if start == -1:
            return
        close = template.find(_CLOSE, start + len(_OPEN))
        if close == -1:
            return

        reference = _parse_expression(template[start + len(_OPEN) : close].strip())
        end = close + len(_CLOSE)
        if reference is not None:
            yield FieldOccurrence(start, end, reference)
        position = end


def extract_fields(template: str) -> list[FieldReference]:
    """Extract ordered field references from one template string.

    Args:
        template: Template text

    Returns:
        References in encounter order, duplicates included

    Example:
        >>> extract_fields("{{.entity:from}} to {{.entity:to | title}}")
        [FieldReference(base_name='entity', suffix='from', function_chain=()),
         FieldReference(base_name='entity', suffix='to', function_chain=('title',))]
    """
    return [occurrence.field for occurrence in iter_field_occurrences(template)]


def dedupe_fields(fields: Iterable[FieldReference]) -> tuple[FieldReference, ...]:
    """Drop repeated identities, keeping first-seen order."""
    seen: set[tuple[str, str]] = set()
    result: list[FieldReference] = []
    for ref in fields:
        if ref.identity not in seen:
            seen.add(ref.identity)
            result.append(ref)
    return tuple(result)
