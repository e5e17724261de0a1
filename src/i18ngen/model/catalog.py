"""Placeholder catalog matching and kind synthesis.

A field's base name is looked up against declared kinds in two ways:

    {{.entity}}  matches kind "entity"            (typed group usage)
    {{.user}}    matches item "user" in "entity"  (direct item usage)

An unmatched base name gets a synthesized single-item Value kind. Synthesis
is idempotent per base name. Kind classification is structural: a kind is
Text when any item carries locale text, Value otherwise.

The catalog lives for one build only; it holds no state across runs.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from i18ngen.constants import TEXT_SUFFIX, VALUE_SUFFIX
from i18ngen.core.identifiers import escape_reserved, require_identifier, to_camel_case
from i18ngen.diagnostics import Diagnostic, DuplicateDefinitionError, ErrorTemplate
from i18ngen.enums import PlaceholderClass

from .types import PlaceholderDefinition, PlaceholderItem, PlaceholderSource

__all__ = [
    "PlaceholderCatalog",
    "classify_placeholder",
    "placeholder_type_name",
]


def classify_placeholder(items: Mapping[str, Mapping[str, str]]) -> PlaceholderClass:
    """Value if no item carries any locale text, Text otherwise.

    Example:
        >>> classify_placeholder({"user": {}})
        <PlaceholderClass.VALUE: 'Value'>
        >>> classify_placeholder({"user": {"en": "User"}})
        <PlaceholderClass.TEXT: 'Text'>
    """
    if any(texts for texts in items.values()):
        return PlaceholderClass.TEXT
    return PlaceholderClass.VALUE


def placeholder_type_name(kind: str, classification: PlaceholderClass) -> str:
    """Generated type name, e.g. ``entity`` + Text → ``EntityText``."""
    suffix = TEXT_SUFFIX if classification is PlaceholderClass.TEXT else VALUE_SUFFIX
    return to_camel_case(kind) + suffix


def _build_items(
    items: Mapping[str, Mapping[str, str]],
    classification: PlaceholderClass,
    primary_locale: str,
) -> tuple[PlaceholderItem, ...]:
    built = [
        PlaceholderItem(id=item_id, field_name=escape_reserved(to_camel_case(item_id)), texts=texts)
        for item_id, texts in items.items()
    ]
    if classification is PlaceholderClass.TEXT:
        # Primary-locale text first, id breaks ties and covers missing text.
        built.sort(key=lambda item: (item.texts.get(primary_locale) or item.id, item.id))
    else:
        built.sort(key=lambda item: item.id)
    return tuple(built)


def _check_members(kind: str, items: tuple[PlaceholderItem, ...]) -> None:
    claimed: dict[str, str] = {}
    for item in items:
        require_identifier("placeholder member", item.field_name, field_name=item.id)
        first = claimed.setdefault(item.field_name, item.id)
        if first != item.id:
            raise DuplicateDefinitionError(
                ErrorTemplate.duplicate_item_name(item.field_name, first, item.id, kind)
            )


class PlaceholderCatalog:
    """Declared placeholder kinds plus kinds synthesized during one build.

    Example:
        >>> catalog = PlaceholderCatalog.from_sources(
        ...     [PlaceholderSource("entity", {"user": {"en": "User"}})], primary_locale="en"
        ... )
        >>> catalog.resolve("entity").type_name
        'EntityText'
        >>> catalog.resolve("reason").type_name
        'ReasonValue'
    """

    __slots__ = ("_by_kind", "_by_item", "_by_type_name", "_synthesized", "_warnings")

    def __init__(self, definitions: Iterable[PlaceholderDefinition] = ()) -> None:
        """Index declared definitions by kind, item id, and type name.

        Raises:
            DuplicateDefinitionError: If two definitions share a type name
        """
        self._by_kind: dict[str, PlaceholderDefinition] = {}
        self._by_item: dict[str, list[PlaceholderDefinition]] = {}
        self._by_type_name: dict[str, PlaceholderDefinition] = {}
        self._synthesized: dict[str, PlaceholderDefinition] = {}
        self._warnings: list[Diagnostic] = []

        for definition in definitions:
            self._register(definition)
            self._by_kind[definition.kind] = definition
            for item_id in definition.item_ids:
                self._by_item.setdefault(item_id, []).append(definition)

    @classmethod
    def from_sources(
        cls,
        sources: Iterable[PlaceholderSource],
        *,
        primary_locale: str,
    ) -> PlaceholderCatalog:
        """Build the catalog from loaded placeholder sources.

        Args:
            sources: Placeholder sources in declaration order
            primary_locale: Locale whose text orders Text items

        Returns:
            PlaceholderCatalog

        Raises:
            InvalidIdentifierError: If a kind name, item id, or a name derived
                from them is not an identifier
            DuplicateDefinitionError: If two kinds derive the same type name, or
                two items of one kind derive the same member name
        """
        definitions: list[PlaceholderDefinition] = []
        for source in sources:
            require_identifier("placeholder kind", source.kind)
            for item_id in source.items:
                require_identifier("placeholder item", item_id)
            classification = classify_placeholder(source.items)
            type_name = require_identifier(
                "placeholder type",
                placeholder_type_name(source.kind, classification),
                field_name=source.kind,
            )
            items = _build_items(source.items, classification, primary_locale)
            _check_members(source.kind, items)
            definitions.append(
                PlaceholderDefinition(
                    kind=source.kind,
                    type_name=type_name,
                    classification=classification,
                    items=items,
                )
            )
        return cls(definitions)

    def _register(self, definition: PlaceholderDefinition) -> None:
        existing = self._by_type_name.get(definition.type_name)
        if existing is not None:
            raise DuplicateDefinitionError(
                ErrorTemplate.duplicate_placeholder_type(
                    definition.type_name, existing.kind, definition.kind
                )
            )
        self._by_type_name[definition.type_name] = definition

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        """Diagnostics collected by match() and resolve()."""
        return tuple(self._warnings)

    def match(self, base_name: str) -> PlaceholderDefinition | None:
        """Find the declared kind for a base name, or None.

        Kind names take precedence over item ids. When several kinds declare
        the item id, the first declared kind wins and a warning is recorded.
        """
        definition = self._by_kind.get(base_name)
        if definition is not None:
            return definition

        candidates = self._by_item.get(base_name)
        if not candidates:
            return None
        chosen = candidates[0]
        if len(candidates) > 1:
            warning = ErrorTemplate.ambiguous_placeholder(
                base_name, chosen.kind, tuple(c.kind for c in candidates[1:])
            )
            if warning not in self._warnings:
                self._warnings.append(warning)
        return chosen

    def synthesize(self, base_name: str) -> PlaceholderDefinition:
        """Return the synthesized Value kind for a base name, creating it once.

        Raises:
            InvalidIdentifierError: If the base name derives an empty member name
            DuplicateDefinitionError: If the type name collides with a declared kind
        """
        definition = self._synthesized.get(base_name)
        if definition is not None:
            return definition

        member = require_identifier(
            "placeholder member", escape_reserved(to_camel_case(base_name)), field_name=base_name
        )
        definition = PlaceholderDefinition(
            kind=base_name,
            type_name=placeholder_type_name(base_name, PlaceholderClass.VALUE),
            classification=PlaceholderClass.VALUE,
            items=(PlaceholderItem(id=base_name, field_name=member),),
            synthesized=True,
        )
        self._register(definition)
        self._synthesized[base_name] = definition
        return definition

    def resolve(self, base_name: str) -> PlaceholderDefinition:
        """match() the base name, synthesizing a Value kind when unmatched."""
        return self.match(base_name) or self.synthesize(base_name)

    def definitions(self) -> tuple[PlaceholderDefinition, ...]:
        """All declared and synthesized definitions, sorted by type name."""
        return tuple(sorted(self._by_type_name.values(), key=lambda d: d.type_name))
