"""Per-locale template validation.

Runs before suffix-aware rewriting, once for every (message, locale) pair:

    1. Duplicate check: an unsuffixed field name may occur at most once;
       repeats must be disambiguated with suffix notation.
    2. Complexity check: brace nesting depth and "{{" count are bounded.

A template may be valid in one locale and invalid in another. The first
failure is raised; callers abort the whole message (fail-fast).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections import Counter

from i18ngen.constants import MAX_NESTING_DEPTH, MAX_PLACEHOLDERS
from i18ngen.diagnostics import DuplicatePlaceholderError, ErrorTemplate, TemplateTooComplexError
from i18ngen.syntax import extract_fields

__all__ = [
    "count_placeholders",
    "find_duplicate_placeholders",
    "measure_nesting_depth",
    "validate_template",
]


def measure_nesting_depth(template: str) -> int:
    """Maximum brace nesting depth, counting single braces.

    Example:
        >>> measure_nesting_depth("{{.name}}")
        2
        >>> measure_nesting_depth("plain")
        0
    """
    depth = 0
    deepest = 0
    for char in template:
        if char == "{":
            depth += 1
            deepest = max(deepest, depth)
        elif char == "}":
            depth -= 1
    return deepest


def count_placeholders(template: str) -> int:
    """Number of non-overlapping "{{" openings."""
    return template.count("{{")


def find_duplicate_placeholders(template: str) -> list[tuple[str, int]]:
    """Unsuffixed field names occurring more than once, in first-seen order.

    Returns:
        List of (name, occurrence count) pairs
    """
    counts = Counter(ref.base_name for ref in extract_fields(template) if not ref.has_suffix)
    return [(name, count) for name, count in counts.items() if count > 1]


def validate_template(
    template: str,
    *,
    message_id: str,
    locale: str,
    max_depth: int = MAX_NESTING_DEPTH,
    max_placeholders: int = MAX_PLACEHOLDERS,
) -> None:
    """Validate one locale's template.

    Args:
        template: Flat template text
        message_id: Owning message (diagnostic context)
        locale: Locale of the template (diagnostic context)
        max_depth: Brace nesting bound
        max_placeholders: "{{" occurrence bound

    Raises:
        DuplicatePlaceholderError: If an unsuffixed name repeats
        TemplateTooComplexError: If a safety bound is exceeded
    """
    duplicates = find_duplicate_placeholders(template)
    if duplicates:
        name, count = duplicates[0]
        raise DuplicatePlaceholderError(
            ErrorTemplate.duplicate_placeholder(name, count, message_id, locale)
        )

    depth = measure_nesting_depth(template)
    if depth > max_depth:
        raise TemplateTooComplexError(
            ErrorTemplate.template_too_deep(depth, max_depth, message_id, locale)
        )

    placeholders = count_placeholders(template)
    if placeholders > max_placeholders:
        raise TemplateTooComplexError(
            ErrorTemplate.template_too_many_placeholders(
                placeholders, max_placeholders, message_id, locale
            )
        )
