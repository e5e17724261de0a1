"""Plural (count-aware) message detection.

A message is count-aware when, in any locale:

    (a) its flat template references a configured plural placeholder
        (case-insensitive base-name match, default "Count"), or
    (b) its raw template is a plural-category map.

With a backend that pluralizes natively, plural fields leave the ordinary
field list and are bound through the generated count affordance instead.
Without native support they remain ordinary Value fields.

Python 3.13+. Babel is optional (CLDR category checks only).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from i18ngen.constants import DEFAULT_PLURAL_PLACEHOLDERS
from i18ngen.core.babel_compat import plural_categories
from i18ngen.diagnostics import Diagnostic, ErrorTemplate
from i18ngen.enums import Backend
from i18ngen.syntax import PluralTemplate, extract_fields

from .types import MessageSource

__all__ = [
    "PluralDetector",
    "check_plural_categories",
    "required_plural_categories",
]


@dataclass(frozen=True, slots=True)
class PluralDetector:
    """Count-awareness rules for one run.

    Attributes:
        plural_placeholders: Placeholder names treated as the count
            (empty falls back to the built-in default)
        backend: Target backend; decides whether plural fields are excluded
    """

    plural_placeholders: tuple[str, ...] = DEFAULT_PLURAL_PLACEHOLDERS
    backend: Backend = Backend.BABEL
    _folded: frozenset[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Apply defaults and cache case-folded names."""
        names = tuple(self.plural_placeholders) or DEFAULT_PLURAL_PLACEHOLDERS
        object.__setattr__(self, "plural_placeholders", names)
        object.__setattr__(self, "_folded", frozenset(name.casefold() for name in names))

    @property
    def default_count_key(self) -> str:
        """Template key bound to the count when no plural field is referenced."""
        return self.plural_placeholders[0]

    def is_plural_field(self, base_name: str) -> bool:
        """Whether a base name is a configured plural placeholder."""
        return base_name.casefold() in self._folded

    def is_count_aware(self, source: MessageSource) -> bool:
        """Whether any locale of the message is count-aware."""
        for locale, raw in source.raw_templates.items():
            if isinstance(raw, PluralTemplate):
                return True
            if any(self.is_plural_field(ref.base_name) for ref in extract_fields(source.templates[locale])):
                return True
        return False

    def excludes_plural_fields(self, count_aware: bool) -> bool:
        """Whether plural fields move to the count affordance."""
        return count_aware and self.backend.supports_pluralization


def required_plural_categories(locale: str) -> frozenset[str] | None:
    """CLDR plural categories a locale can select, or None if unknown.

    Returns None when Babel is not installed or the locale is unknown.

    Example:
        >>> sorted(required_plural_categories("en"))
        ['one', 'other']
        >>> sorted(required_plural_categories("ja"))
        ['other']
    """
    return plural_categories(locale)


def check_plural_categories(
    source: MessageSource, locales: Iterable[str] | None = None
) -> tuple[Diagnostic, ...]:
    """Warn about CLDR categories a plural map cannot render.

    Args:
        source: Message to check
        locales: Restrict the check to these locales (default: all present)

    Returns:
        Warning diagnostics, one per missing category, in locale/category order
    """
    selected = source.raw_templates.keys() if locales is None else locales
    warnings: list[Diagnostic] = []
    for locale in selected:
        raw = source.raw_templates.get(locale)
        if not isinstance(raw, PluralTemplate):
            continue
        required = required_plural_categories(locale)
        if required is None:
            continue
        warnings.extend(
            ErrorTemplate.missing_plural_category(category, source.id, locale)
            for category in sorted(required.difference(raw.categories))
        )
    return tuple(warnings)
