"""Tests for placeholder catalog matching, synthesis, and classification."""

import pytest

from i18ngen.diagnostics import (
    DiagnosticCode,
    DuplicateDefinitionError,
    InvalidIdentifierError,
)
from i18ngen.enums import PlaceholderClass
from i18ngen.model import (
    PlaceholderCatalog,
    PlaceholderSource,
    classify_placeholder,
    placeholder_type_name,
)


def _catalog(*sources: PlaceholderSource, primary_locale: str = "en") -> PlaceholderCatalog:
    return PlaceholderCatalog.from_sources(sources, primary_locale=primary_locale)


ENTITY = PlaceholderSource(
    "entity",
    {
        "user": {"en": "User", "ja": "ユーザー"},
        "product": {"en": "Product", "ja": "製品"},
    },
)


class TestClassifyPlaceholder:
    """Test structural Value/Text classification."""

    def test_all_items_empty_is_value(self) -> None:
        """A kind whose items carry no text is a Value kind."""
        assert classify_placeholder({"a": {}, "b": {}}) is PlaceholderClass.VALUE

    def test_no_items_is_value(self) -> None:
        """An empty kind is a Value kind."""
        assert classify_placeholder({}) is PlaceholderClass.VALUE

    def test_any_text_is_text(self) -> None:
        """One item with text makes the kind Text."""
        assert classify_placeholder({"a": {}, "b": {"en": "B"}}) is PlaceholderClass.TEXT


class TestPlaceholderTypeName:
    """Test generated type names."""

    def test_names(self) -> None:
        """Kind is CamelCased and suffixed by classification."""
        assert placeholder_type_name("entity", PlaceholderClass.TEXT) == "EntityText"
        assert placeholder_type_name("user_id", PlaceholderClass.VALUE) == "UserIdValue"


class TestMatch:
    """Test kind-name and item-id matching."""

    def test_kind_name_match(self) -> None:
        """A base name equal to a kind name matches that kind."""
        definition = _catalog(ENTITY).match("entity")
        assert definition is not None
        assert definition.type_name == "EntityText"

    def test_item_id_match(self) -> None:
        """A base name equal to an item id matches the declaring kind."""
        definition = _catalog(ENTITY).match("user")
        assert definition is not None
        assert definition.kind == "entity"

    def test_no_match(self) -> None:
        """Unknown base names do not match."""
        assert _catalog(ENTITY).match("reason") is None

    def test_kind_name_beats_item_id(self) -> None:
        """Exact kind names take precedence over item ids elsewhere."""
        user_kind = PlaceholderSource("user", {"admin": {"en": "Admin"}})
        definition = _catalog(ENTITY, user_kind).match("user")
        assert definition is not None
        assert definition.kind == "user"

    def test_ambiguous_item_warns_and_picks_first(self) -> None:
        """An item declared by two kinds binds to the first with one warning."""
        other = PlaceholderSource("owner", {"user": {"en": "User owner"}})
        catalog = _catalog(ENTITY, other)
        first = catalog.match("user")
        catalog.match("user")
        assert first is not None
        assert first.kind == "entity"
        assert [w.code for w in catalog.warnings] == [DiagnosticCode.AMBIGUOUS_PLACEHOLDER]


class TestSynthesize:
    """Test Value-kind synthesis for unmatched fields."""

    def test_resolve_synthesizes_value_kind(self) -> None:
        """Unmatched base names get a single-item Value kind."""
        definition = _catalog(ENTITY).resolve("reason")
        assert definition.type_name == "ReasonValue"
        assert definition.classification is PlaceholderClass.VALUE
        assert definition.synthesized
        assert definition.item_ids == ("reason",)

    def test_synthesis_is_idempotent(self) -> None:
        """A second request reuses the first synthesized kind."""
        catalog = _catalog()
        assert catalog.resolve("reason") is catalog.resolve("reason")
        assert len(catalog.definitions()) == 1

    def test_collision_with_declared_kind_raises(self) -> None:
        """Synthesizing a type name a declared kind owns is rejected."""
        catalog = _catalog(PlaceholderSource("Reason", {"code": {}}))
        with pytest.raises(DuplicateDefinitionError):
            catalog.resolve("reason")


class TestFromSources:
    """Test catalog construction and validation."""

    def test_invalid_kind_name(self) -> None:
        """Kind names must be identifiers."""
        with pytest.raises(InvalidIdentifierError) as exc_info:
            _catalog(PlaceholderSource("bad-kind", {}))
        assert exc_info.value.field_name == "bad-kind"

    def test_invalid_item_id(self) -> None:
        """Item ids must be identifiers."""
        with pytest.raises(InvalidIdentifierError):
            _catalog(PlaceholderSource("entity", {"1st": {"en": "First"}}))

    def test_underscore_item_id_has_no_member_name(self) -> None:
        """An item id of ``_`` derives an empty member name and is rejected."""
        with pytest.raises(InvalidIdentifierError) as exc_info:
            _catalog(PlaceholderSource("entity", {"_": {"en": "Blank"}}))
        assert exc_info.value.field_name == "_"

    def test_items_deriving_same_member_name(self) -> None:
        """Two items of one kind may not share a member name."""
        with pytest.raises(DuplicateDefinitionError) as exc_info:
            _catalog(PlaceholderSource("code", {"a_b": {}, "aB": {}}))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.DUPLICATE_ITEM_NAME

    def test_duplicate_type_name(self) -> None:
        """Two kinds generating the same type name are rejected."""
        with pytest.raises(DuplicateDefinitionError):
            _catalog(
                PlaceholderSource("user_name", {"a": {}}),
                PlaceholderSource("userName", {"b": {}}),
            )

    def test_text_items_sorted_by_primary_text(self) -> None:
        """Text items are ordered by primary-locale text, then id."""
        definition = _catalog(ENTITY).resolve("entity")
        assert definition.item_ids == ("product", "user")
        japanese_first = _catalog(ENTITY, primary_locale="ja").resolve("entity")
        # "ユーザー" sorts before "製品" by code point.
        assert japanese_first.item_ids == ("user", "product")

    def test_value_items_sorted_by_id(self) -> None:
        """Value items are ordered by id."""
        definition = _catalog(PlaceholderSource("code", {"b": {}, "a": {}})).resolve("code")
        assert definition.item_ids == ("a", "b")

    def test_item_field_names(self) -> None:
        """Item field names are CamelCased and escaped."""
        source = PlaceholderSource("reason", {"already_deleted": {"en": "x"}, "none": {"en": "y"}})
        definition = _catalog(source).resolve("reason")
        assert {item.field_name for item in definition.items} == {"AlreadyDeleted", "None_"}

    def test_definitions_sorted_by_type_name(self) -> None:
        """definitions() orders declared and synthesized kinds by type name."""
        catalog = _catalog(ENTITY)
        catalog.resolve("zeta")
        catalog.resolve("alpha")
        assert [d.type_name for d in catalog.definitions()] == [
            "AlphaValue",
            "EntityText",
            "ZetaValue",
        ]
