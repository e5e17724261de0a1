"""Raw template variants and per-locale normalization.

A decoded per-locale template value is either a plain string or a
CLDR-style plural-category map. It is converted once, at load time, into a
tagged variant so downstream code never inspects decoded types again:

    RawTemplate = PlainTemplate(text) | PluralTemplate(forms)

Flattening a plural map for extraction and non-plural consumers prefers
"other", then "one", then the lexicographically first category. Category
keys are sorted on construction, so flattening never depends on decoder
iteration order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from i18ngen.constants import PLURAL_CATEGORIES, PLURAL_FLATTEN_PRIORITY
from i18ngen.diagnostics import Diagnostic, ErrorTemplate, InvalidTemplateValueError

__all__ = [
    "PlainTemplate",
    "PluralTemplate",
    "RawTemplate",
    "coerce_raw_template",
    "flatten_plural_forms",
    "normalize_template",
]


@dataclass(frozen=True, slots=True)
class PlainTemplate:
    """Single template string."""

    text: str

    @property
    def flat(self) -> str:
        """The text itself."""
        return self.text


@dataclass(frozen=True, slots=True)
class PluralTemplate:
    """Plural-category map, stored as category-sorted ``(category, text)`` pairs."""

    forms: tuple[tuple[str, str], ...]

    @classmethod
    def from_mapping(cls, forms: Mapping[str, str]) -> PluralTemplate:
        """Build from a category → text mapping in any order."""
        return cls(tuple(sorted(forms.items())))

    @property
    def categories(self) -> tuple[str, ...]:
        """Category keys in sorted order."""
        return tuple(category for category, _ in self.forms)

    @property
    def flat(self) -> str:
        """Single string chosen by flatten_plural_forms()."""
        return flatten_plural_forms(self.forms)

    def as_dict(self) -> dict[str, str]:
        """Return forms as a new dictionary."""
        return dict(self.forms)


RawTemplate: TypeAlias = PlainTemplate | PluralTemplate


def flatten_plural_forms(forms: tuple[tuple[str, str], ...] | Mapping[str, str]) -> str:
    """Reduce a plural map to one string.

    Priority is "other", then "one", then the lexicographically first key.

    Args:
        forms: Category → text pairs or mapping (must not be empty)

    Returns:
        Chosen form's text

    Example:
        >>> flatten_plural_forms({"one": "1 item", "other": "{{.Count}} items"})
        '{{.Count}} items'
        >>> flatten_plural_forms({"few": "a", "many": "b"})
        'a'
    """
    mapping = dict(forms)
    for category in PLURAL_FLATTEN_PRIORITY:
        if category in mapping:
            return mapping[category]
    return mapping[min(mapping)]


def coerce_raw_template(
    value: object,
    *,
    message_id: str,
    locale: str,
) -> tuple[RawTemplate, tuple[Diagnostic, ...]]:
    """Convert one locale's decoded template value into a RawTemplate.

    Policy:
        - str: PlainTemplate
        - mapping of str → str: PluralTemplate (unknown categories warn)
        - int/float/bool: stringified PlainTemplate with a warning
        - anything else, empty maps, non-string keys or forms: error

    Args:
        value: Decoded YAML/JSON value
        message_id: Owning message (diagnostic context)
        locale: Locale key (diagnostic context)

    Returns:
        Tuple of (raw template, warnings)

    Raises:
        InvalidTemplateValueError: If the value has no usable template shape
    """
    match value:
        case str():
            return PlainTemplate(value), ()
        case bool() | int() | float():
            warning = ErrorTemplate.stringified_template_value(
                type(value).__name__, message_id, locale
            )
            text = str(value).lower() if isinstance(value, bool) else str(value)
            return PlainTemplate(text), (warning,)
        case Mapping():
            return _coerce_plural_map(value, message_id=message_id, locale=locale)
        case _:
            raise InvalidTemplateValueError(
                ErrorTemplate.invalid_template_value(type(value).__name__, message_id, locale)
            )


def _coerce_plural_map(
    value: Mapping[object, object],
    *,
    message_id: str,
    locale: str,
) -> tuple[PluralTemplate, tuple[Diagnostic, ...]]:
    if not value:
        raise InvalidTemplateValueError(ErrorTemplate.empty_plural_map(message_id, locale))

    forms: dict[str, str] = {}
    warnings: list[Diagnostic] = []
    for category, text in value.items():
        if not isinstance(category, str):
            raise InvalidTemplateValueError(
                ErrorTemplate.invalid_plural_form(
                    str(category), type(category).__name__, message_id, locale
                )
            )
        if not isinstance(text, str):
            raise InvalidTemplateValueError(
                ErrorTemplate.invalid_plural_form(
                    category, type(text).__name__, message_id, locale
                )
            )
        if category not in PLURAL_CATEGORIES:
            warnings.append(ErrorTemplate.unknown_plural_category(category, message_id, locale))
        forms[category] = text

    return PluralTemplate.from_mapping(forms), tuple(warnings)


def normalize_template(value: str | RawTemplate | Mapping[str, str]) -> tuple[str, RawTemplate]:
    """Return ``(flat string, raw template)`` for one locale's value.

    A string passes through unchanged for both consumers. Flattening an
    already-flat string is a no-op.

    Args:
        value: Plain string, plural map, or an existing RawTemplate

    Returns:
        Tuple of (flat text for extraction, raw variant for plural-aware consumers)

    Raises:
        InvalidTemplateValueError: If a plural map is empty or malformed
    """
    match value:
        case PlainTemplate() | PluralTemplate():
            return value.flat, value
        case _:
            raw, _warnings = coerce_raw_template(value, message_id="", locale="")
            return raw.flat, raw
