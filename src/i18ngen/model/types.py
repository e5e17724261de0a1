"""Build-time data model: message/placeholder sources and the IR.

Sources are the core's input, already decoded by the loader. Definitions
are the intermediate representation handed to the emitter. Every type is a
frozen dataclass; mappings are exposed read-only.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeVar

from i18ngen.core.identifiers import require_identifier
from i18ngen.diagnostics import Diagnostic
from i18ngen.enums import Backend, PlaceholderClass
from i18ngen.syntax import (
    FieldReference,
    PluralTemplate,
    RawTemplate,
    coerce_raw_template,
    dedupe_fields,
    extract_fields,
)
from i18ngen.validation import validate_template

__all__ = [
    "Definitions",
    "MessageDefinition",
    "MessageSource",
    "PlaceholderDefinition",
    "PlaceholderItem",
    "PlaceholderSource",
    "ResolvedField",
    "order_locales",
]


K = TypeVar("K")
V = TypeVar("V")


def _freeze(mapping: Mapping[K, V]) -> MappingProxyType[K, V]:
    return MappingProxyType(dict(mapping))


def order_locales(present: Iterable[str], configured: Iterable[str]) -> tuple[str, ...]:
    """Configured locales that are present first, then the rest sorted.

    Example:
        >>> order_locales(["ja", "fr", "en"], ["en", "ja"])
        ('en', 'ja', 'fr')
    """
    present_set = set(present)
    ordered = [locale for locale in dict.fromkeys(configured) if locale in present_set]
    return (*ordered, *sorted(present_set.difference(ordered)))


# ==============================================================================
# SOURCES (core input)
# ==============================================================================


@dataclass(frozen=True, slots=True)
class MessageSource:
    """One message as authored, after normalization and extraction.

    Attributes:
        id: Message identifier
        raw_templates: locale → RawTemplate (plural forms preserved)
        templates: locale → flat template string
        fields: Field references deduplicated by identity, first-seen order
        warnings: Diagnostics raised while coercing decoded values
    """

    id: str
    raw_templates: Mapping[str, RawTemplate]
    templates: Mapping[str, str]
    fields: tuple[FieldReference, ...]
    warnings: tuple[Diagnostic, ...] = ()

    @classmethod
    def from_raw(
        cls,
        message_id: str,
        raw_by_locale: Mapping[str, object],
        *,
        locales: Iterable[str] = (),
    ) -> MessageSource:
        """Normalize, validate, and extract one message (fail-fast).

        Locales are visited in configured order, then any others sorted.
        Within a locale the flat template is scanned first, then every
        plural form in category order.

        Args:
            message_id: Message identifier
            raw_by_locale: locale → decoded value (str or plural map)
            locales: Configured locale order

        Returns:
            MessageSource

        Raises:
            InvalidTemplateValueError: If a value has no template shape
            DuplicatePlaceholderError: If an unsuffixed name repeats
            TemplateTooComplexError: If a safety bound is exceeded
            InvalidIdentifierError: If a field name or suffix is not an identifier
        """
        raw_templates: dict[str, RawTemplate] = {}
        templates: dict[str, str] = {}
        references: list[FieldReference] = []
        warnings: list[Diagnostic] = []

        for locale in order_locales(raw_by_locale, locales):
            raw, coerced_warnings = coerce_raw_template(
                raw_by_locale[locale], message_id=message_id, locale=locale
            )
            warnings.extend(coerced_warnings)

            texts = [raw.flat]
            if isinstance(raw, PluralTemplate):
                texts.extend(text for _, text in raw.forms)

            for text in dict.fromkeys(texts):
                validate_template(text, message_id=message_id, locale=locale)
                for ref in extract_fields(text):
                    require_identifier(
                        "placeholder", ref.base_name, message_id=message_id, locale=locale
                    )
                    if ref.has_suffix:
                        require_identifier(
                            "placeholder suffix", ref.suffix, message_id=message_id, locale=locale
                        )
                    references.append(ref)

            raw_templates[locale] = raw
            templates[locale] = raw.flat

        return cls(
            id=message_id,
            raw_templates=_freeze(raw_templates),
            templates=_freeze(templates),
            fields=dedupe_fields(references),
            warnings=tuple(warnings),
        )


@dataclass(frozen=True, slots=True)
class PlaceholderSource:
    """One placeholder kind as loaded: item id → locale → localized text.

    An item with an empty locale map carries no text; a kind whose items
    all carry no text is classified as a Value kind.
    """

    kind: str
    items: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze nested mappings."""
        frozen = {item_id: _freeze(texts) for item_id, texts in self.items.items()}
        object.__setattr__(self, "items", MappingProxyType(frozen))


# ==============================================================================
# INTERMEDIATE REPRESENTATION (emitter input)
# ==============================================================================


@dataclass(frozen=True, slots=True)
class ResolvedField:
    """One distinct field of a message, ready for emission.

    Attributes:
        field_name: Generated attribute name (CamelCase, reserved words escaped)
        template_key: Key used inside rewritten templates
        type_name: Generated type name of the resolved placeholder kind
        base_name: Authored base name
        suffix: Authored suffix ("" when absent)
    """

    field_name: str
    template_key: str
    type_name: str
    base_name: str
    suffix: str = ""


@dataclass(frozen=True, slots=True)
class PlaceholderItem:
    """One addressable item of a placeholder kind."""

    id: str
    field_name: str
    texts: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the locale map."""
        object.__setattr__(self, "texts", _freeze(self.texts))

    def text_for(self, locale: str, fallback_locale: str | None = None) -> str:
        """Localized text, falling back to another locale, then the item id."""
        text = self.texts.get(locale)
        if not text and fallback_locale is not None:
            text = self.texts.get(fallback_locale)
        return text or self.id


@dataclass(frozen=True, slots=True)
class PlaceholderDefinition:
    """Resolved placeholder kind.

    Attributes:
        kind: Authored kind name (or base name, when synthesized)
        type_name: Generated type name, unique per run
        classification: Value or Text, inferred from data shape
        items: Ordered items
        synthesized: True when created for an unmatched field
    """

    kind: str
    type_name: str
    classification: PlaceholderClass
    items: tuple[PlaceholderItem, ...] = ()
    synthesized: bool = False

    @property
    def is_value(self) -> bool:
        """Whether the kind is an opaque Value kind."""
        return self.classification is PlaceholderClass.VALUE

    @property
    def item_ids(self) -> tuple[str, ...]:
        """Item identifiers in emission order."""
        return tuple(item.id for item in self.items)


@dataclass(frozen=True, slots=True)
class MessageDefinition:
    """Resolved message.

    Attributes:
        id: Message identifier
        struct_name: Generated class name
        fields: Ordered resolved fields (plural fields excluded when the
            backend threads the count separately)
        templates: locale → flat template with suffixes rewritten to keys
        raw_templates: locale → original RawTemplate
        plural_forms: locale → category → rewritten text, for plural maps only
        supports_count: Whether the message is count-aware
        count_keys: Template keys bound to the count value (empty unless
            the backend pluralizes natively)
    """

    id: str
    struct_name: str
    fields: tuple[ResolvedField, ...]
    templates: Mapping[str, str]
    raw_templates: Mapping[str, RawTemplate]
    plural_forms: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    supports_count: bool = False
    count_keys: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Freeze mappings."""
        object.__setattr__(self, "templates", _freeze(self.templates))
        object.__setattr__(self, "raw_templates", _freeze(self.raw_templates))
        object.__setattr__(
            self,
            "plural_forms",
            MappingProxyType({loc: _freeze(forms) for loc, forms in self.plural_forms.items()}),
        )

    @property
    def uses_count(self) -> bool:
        """Whether the generated class exposes a count affordance."""
        return bool(self.count_keys)


@dataclass(frozen=True, slots=True)
class Definitions:
    """Complete, deterministically ordered IR for one run.

    Attributes:
        messages: Message definitions sorted by id
        placeholders: Placeholder definitions sorted by type name
        locales: Configured locales, primary first
        backend: Rendering backend the IR was resolved for
        warnings: Non-fatal diagnostics collected during the build
    """

    messages: tuple[MessageDefinition, ...]
    placeholders: tuple[PlaceholderDefinition, ...]
    locales: tuple[str, ...]
    backend: Backend = Backend.BABEL
    warnings: tuple[Diagnostic, ...] = ()

    @property
    def primary_locale(self) -> str:
        """First configured locale (rendering fallback)."""
        return self.locales[0]

    def placeholder(self, type_name: str) -> PlaceholderDefinition:
        """Look up a placeholder definition by generated type name.

        Raises:
            KeyError: If no definition has that name
        """
        for definition in self.placeholders:
            if definition.type_name == type_name:
                return definition
        raise KeyError(type_name)

    def message(self, message_id: str) -> MessageDefinition:
        """Look up a message definition by id.

        Raises:
            KeyError: If no message has that id
        """
        for definition in self.messages:
            if definition.id == message_id:
                return definition
        raise KeyError(message_id)
