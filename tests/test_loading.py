"""Tests for message and placeholder source loading."""

import json
from pathlib import Path

import pytest

from i18ngen.diagnostics import (
    DiagnosticCode,
    InvalidTemplateValueError,
    SourceLoadError,
)
from i18ngen.enums import SourceFormat
from i18ngen.loading import (
    decode_file,
    find_source_files,
    load_message_sources,
    load_placeholder_sources,
    source_format,
)
from i18ngen.syntax import PluralTemplate


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class TestDecodeFile:
    """Test single-file decoding."""

    def test_format_by_extension(self) -> None:
        """.json uses json; everything else uses YAML."""
        assert source_format(Path("a.json")) is SourceFormat.JSON
        assert source_format(Path("a.JSON")) is SourceFormat.JSON
        assert source_format(Path("a.yaml")) is SourceFormat.YAML
        assert source_format(Path("a.yml")) is SourceFormat.YAML

    def test_yaml_keys_become_strings(self, tmp_path: Path) -> None:
        """Integer keys decoded by YAML are converted to strings."""
        path = _write(tmp_path / "m.yaml", "404: Not found\n")
        assert decode_file(path) == {"404": "Not found"}

    def test_json(self, tmp_path: Path) -> None:
        """JSON files decode to mappings."""
        path = _write(tmp_path / "m.json", json.dumps({"Hello": {"en": "Hi"}}))
        assert decode_file(path) == {"Hello": {"en": "Hi"}}

    def test_empty_file(self, tmp_path: Path) -> None:
        """Empty files decode to an empty mapping."""
        assert decode_file(_write(tmp_path / "m.yaml", "")) == {}
        assert decode_file(_write(tmp_path / "m.json", "")) == {}

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        """Decoder errors raise SOURCE_DECODE_FAILED."""
        path = _write(tmp_path / "m.yaml", "a: [b\n")
        with pytest.raises(SourceLoadError) as exc_info:
            decode_file(path)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.SOURCE_DECODE_FAILED

    def test_malformed_json(self, tmp_path: Path) -> None:
        """JSON syntax errors raise SourceLoadError."""
        with pytest.raises(SourceLoadError):
            decode_file(_write(tmp_path / "m.json", "{"))

    def test_non_mapping(self, tmp_path: Path) -> None:
        """Top-level lists raise SOURCE_INVALID_SHAPE."""
        path = _write(tmp_path / "m.yaml", "- a\n")
        with pytest.raises(SourceLoadError) as exc_info:
            decode_file(path)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.SOURCE_INVALID_SHAPE

    def test_find_source_files_sorted(self, tmp_path: Path) -> None:
        """Matches are returned in sorted order, files only."""
        _write(tmp_path / "b.yaml", "")
        _write(tmp_path / "a.yaml", "")
        (tmp_path / "dir.yaml").mkdir()
        found = find_source_files(str(tmp_path / "*.yaml"))
        assert [path.name for path in found] == ["a.yaml", "b.yaml"]


class TestLoadMessageSources:
    """Test message file loading."""

    def test_compound_format(self, tmp_path: Path) -> None:
        """Compound files map id → locale → template."""
        _write(
            tmp_path / "messages" / "errors.yaml",
            "EntityNotFound:\n"
            '  ja: "{{.entity}}が見つかりません: {{.reason}}"\n'
            '  en: "{{.entity}} not found: {{.reason}}"\n',
        )
        (source,) = load_message_sources(str(tmp_path / "messages" / "*.yaml"), ["ja", "en"])
        assert source.id == "EntityNotFound"
        assert list(source.templates) == ["ja", "en"]
        assert [ref.base_name for ref in source.fields] == ["entity", "reason"]

    def test_simple_format_uses_primary_locale(self, tmp_path: Path) -> None:
        """Simple files map id → template for the primary locale."""
        _write(tmp_path / "m.yaml", 'Welcome: "Welcome, {{.name}}"\n')
        (source,) = load_message_sources(str(tmp_path / "*.yaml"), ["fr", "en"])
        assert dict(source.templates) == {"fr": "Welcome, {{.name}}"}

    def test_plural_forms(self, tmp_path: Path) -> None:
        """Plural maps load as PluralTemplate."""
        _write(
            tmp_path / "m.yaml",
            "Items:\n  en:\n    one: one item\n    other: '{{.Count}} items'\n",
        )
        (source,) = load_message_sources(str(tmp_path / "*.yaml"), ["en"])
        assert isinstance(source.raw_templates["en"], PluralTemplate)
        assert source.templates["en"] == "{{.Count}} items"

    def test_files_in_sorted_order(self, tmp_path: Path) -> None:
        """Sources come in file order, then declaration order."""
        _write(tmp_path / "b.yaml", "Second: b\nThird: c\n")
        _write(tmp_path / "a.json", json.dumps({"First": "a"}))
        sources = load_message_sources(str(tmp_path / "*"), ["en"])
        assert [source.id for source in sources] == ["First", "Second", "Third"]

    def test_duplicate_ids_across_files_kept(self, tmp_path: Path) -> None:
        """Repeated IDs are passed on so assembly can reject them."""
        _write(tmp_path / "a.yaml", "Hello: a\n")
        _write(tmp_path / "b.yaml", "Hello: b\n")
        assert len(load_message_sources(str(tmp_path / "*.yaml"), ["en"])) == 2

    def test_no_files(self, tmp_path: Path) -> None:
        """An unmatched pattern is SOURCE_NOT_FOUND."""
        with pytest.raises(SourceLoadError) as exc_info:
            load_message_sources(str(tmp_path / "*.yaml"), ["en"])
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.SOURCE_NOT_FOUND

    def test_invalid_value(self, tmp_path: Path) -> None:
        """A list template is rejected by the normalizer."""
        _write(tmp_path / "m.yaml", "Bad:\n  en: [a, b]\n")
        with pytest.raises(InvalidTemplateValueError):
            load_message_sources(str(tmp_path / "*.yaml"), ["en"])


class TestLoadPlaceholderSources:
    """Test placeholder file loading."""

    def test_compound(self, tmp_path: Path) -> None:
        """Kind comes from the file stem; items map locale → text."""
        _write(
            tmp_path / "entity.yaml",
            "user:\n  en: User\n  ja: ユーザー\nproduct:\n  en: Product\n  ja: 製品\n",
        )
        (source,) = load_placeholder_sources(str(tmp_path / "*.yaml"), ["en", "ja"])
        assert source.kind == "entity"
        assert dict(source.items["user"]) == {"en": "User", "ja": "ユーザー"}

    def test_value_items(self, tmp_path: Path) -> None:
        """Items without text load with empty locale maps."""
        _write(tmp_path / "code.yaml", "alpha:\nbeta: {}\n")
        (source,) = load_placeholder_sources(str(tmp_path / "*.yaml"), ["en"])
        assert {item: dict(texts) for item, texts in source.items.items()} == {
            "alpha": {},
            "beta": {},
        }

    def test_simple_files_merge_by_kind(self, tmp_path: Path) -> None:
        """Per-locale files of one kind merge into one source."""
        _write(tmp_path / "entity.en.yaml", "user: User\n")
        _write(tmp_path / "entity.ja.yaml", "user: ユーザー\n")
        (source,) = load_placeholder_sources(
            str(tmp_path / "*.yaml"), ["en", "ja"], compound=False
        )
        assert dict(source.items["user"]) == {"en": "User", "ja": "ユーザー"}

    def test_simple_file_without_locale_uses_primary(self, tmp_path: Path) -> None:
        """A simple file named '<kind>.yaml' holds primary-locale text."""
        _write(tmp_path / "entity.yaml", "user: User\n")
        (source,) = load_placeholder_sources(str(tmp_path / "*.yaml"), ["en"], compound=False)
        assert dict(source.items["user"]) == {"en": "User"}

    def test_no_files_is_empty(self, tmp_path: Path) -> None:
        """Placeholders are optional."""
        assert load_placeholder_sources(str(tmp_path / "*.yaml"), ["en"]) == []

    def test_wrong_shape(self, tmp_path: Path) -> None:
        """Compound items must be mappings."""
        _write(tmp_path / "entity.yaml", "user: [a]\n")
        with pytest.raises(SourceLoadError):
            load_placeholder_sources(str(tmp_path / "*.yaml"), ["en"])

    def test_non_string_text(self, tmp_path: Path) -> None:
        """Nested structures are not valid text."""
        _write(tmp_path / "entity.yaml", "user:\n  en: {nested: x}\n")
        with pytest.raises(SourceLoadError):
            load_placeholder_sources(str(tmp_path / "*.yaml"), ["en"])
