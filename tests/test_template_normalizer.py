"""Tests for RawTemplate coercion, plural flattening, and normalization."""

import pytest
from hypothesis import given

from i18ngen.diagnostics import DiagnosticCode, InvalidTemplateValueError
from i18ngen.syntax import (
    PlainTemplate,
    PluralTemplate,
    coerce_raw_template,
    flatten_plural_forms,
    normalize_template,
)
from tests.strategies import brace_free_text, plural_maps


class TestFlattenPluralForms:
    """Test plural flattening priority."""

    def test_prefers_other(self) -> None:
        """'other' wins over every other category."""
        assert flatten_plural_forms({"one": "1 item", "other": "N items"}) == "N items"

    def test_falls_back_to_one(self) -> None:
        """'one' is used when 'other' is absent."""
        assert flatten_plural_forms({"few": "a few", "one": "one"}) == "one"

    def test_lexicographic_tie_break(self) -> None:
        """Without 'other' or 'one' the lexicographically first key wins."""
        assert flatten_plural_forms({"many": "b", "few": "a", "two": "c"}) == "a"

    def test_accepts_pairs(self) -> None:
        """Sorted (category, text) pairs are accepted as well as mappings."""
        assert flatten_plural_forms((("one", "x"), ("other", "y"))) == "y"


class TestCoerceRawTemplate:
    """Test decoded value → RawTemplate conversion."""

    def test_string_becomes_plain(self) -> None:
        """A string is a PlainTemplate with no warnings."""
        raw, warnings = coerce_raw_template("hello", message_id="m", locale="en")
        assert raw == PlainTemplate("hello")
        assert warnings == ()

    def test_mapping_becomes_plural_with_sorted_forms(self) -> None:
        """A category map is a PluralTemplate with sorted forms."""
        raw, warnings = coerce_raw_template(
            {"other": "{{.Count}} items", "one": "1 item"}, message_id="m", locale="en"
        )
        assert isinstance(raw, PluralTemplate)
        assert raw.categories == ("one", "other")
        assert raw.flat == "{{.Count}} items"
        assert warnings == ()

    def test_unknown_category_warns(self) -> None:
        """Categories outside the CLDR set are kept with a warning."""
        raw, warnings = coerce_raw_template(
            {"other": "x", "plenty": "y"}, message_id="m", locale="en"
        )
        assert isinstance(raw, PluralTemplate)
        assert "plenty" in raw.categories
        assert [w.code for w in warnings] == [DiagnosticCode.UNKNOWN_PLURAL_CATEGORY]
        assert warnings[0].severity == "warning"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(42, "42"), (1.5, "1.5"), (True, "true"), (False, "false")],
    )
    def test_scalars_are_stringified_with_warning(self, value: object, expected: str) -> None:
        """Numbers and booleans become text and produce a warning."""
        raw, warnings = coerce_raw_template(value, message_id="m", locale="en")
        assert raw == PlainTemplate(expected)
        assert [w.code for w in warnings] == [DiagnosticCode.STRINGIFIED_TEMPLATE_VALUE]

    @pytest.mark.parametrize("value", [None, ["a", "b"], object()])
    def test_unusable_values_raise(self, value: object) -> None:
        """None, lists, and other objects have no template shape."""
        with pytest.raises(InvalidTemplateValueError) as exc_info:
            coerce_raw_template(value, message_id="Greeting", locale="ja")
        assert exc_info.value.message_id == "Greeting"
        assert exc_info.value.locale == "ja"

    def test_empty_plural_map_raises(self) -> None:
        """An empty map cannot be flattened."""
        with pytest.raises(InvalidTemplateValueError) as exc_info:
            coerce_raw_template({}, message_id="m", locale="en")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.EMPTY_PLURAL_MAP

    def test_non_string_plural_form_raises(self) -> None:
        """Plural form texts must be strings."""
        with pytest.raises(InvalidTemplateValueError):
            coerce_raw_template({"one": 1, "other": "x"}, message_id="m", locale="en")

    def test_non_string_category_raises(self) -> None:
        """Plural category keys must be strings."""
        with pytest.raises(InvalidTemplateValueError):
            coerce_raw_template({1: "x"}, message_id="m", locale="en")


class TestNormalizeTemplate:
    """Test the (flat, raw) pair returned for one locale."""

    def test_string_passes_through(self) -> None:
        """A string is both the flat text and the raw value."""
        flat, raw = normalize_template("{{.name}} joined")
        assert flat == "{{.name}} joined"
        assert raw == PlainTemplate("{{.name}} joined")

    def test_plural_map_keeps_raw_forms(self) -> None:
        """The raw value keeps every form; the flat text is the chosen one."""
        flat, raw = normalize_template({"one": "1 item", "other": "{{.Count}} items"})
        assert flat == "{{.Count}} items"
        assert isinstance(raw, PluralTemplate)
        assert raw.as_dict() == {"one": "1 item", "other": "{{.Count}} items"}

    def test_existing_raw_template_accepted(self) -> None:
        """An already-coerced RawTemplate is returned as-is."""
        plural = PluralTemplate.from_mapping({"other": "x"})
        assert normalize_template(plural) == ("x", plural)

    @given(brace_free_text)
    def test_flattening_flat_string_is_idempotent(self, text: str) -> None:
        """Normalizing the flat output again changes nothing."""
        flat, _ = normalize_template(text)
        assert normalize_template(flat)[0] == flat

    @given(plural_maps())
    def test_plural_flattening_is_idempotent(self, forms: dict[str, str]) -> None:
        """Flattening a plural map then normalizing the result is stable."""
        flat, _ = normalize_template(forms)
        assert flat in forms.values()
        assert normalize_template(flat)[0] == flat

    @given(plural_maps())
    def test_flattening_ignores_insertion_order(self, forms: dict[str, str]) -> None:
        """Reversed insertion order flattens to the same text."""
        reversed_forms = dict(reversed(list(forms.items())))
        assert normalize_template(forms)[0] == normalize_template(reversed_forms)[0]
