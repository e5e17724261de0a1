"""Tests for generator configuration loading and overrides."""

from pathlib import Path

import pytest

from i18ngen.config import GeneratorConfig, check_locales, load_config
from i18ngen.diagnostics import ConfigurationError, DiagnosticCode
from i18ngen.enums import Backend


class TestGeneratorConfig:
    """Test defaults, derived values and validation."""

    def test_defaults(self) -> None:
        """Defaults match the documented configuration."""
        config = GeneratorConfig()
        assert config.locales == ("en", "ja")
        assert config.compound is True
        assert config.plural_placeholders == ("Count",)
        assert config.backend is Backend.BABEL
        assert config.primary_locale == "en"

    def test_output_path(self) -> None:
        """output_path joins directory and module name."""
        config = GeneratorConfig(output_dir="gen", output_module="messages")
        assert config.output_path == Path("gen") / "messages.py"

    def test_merge_ignores_empty_values(self) -> None:
        """Unset overrides never clobber existing values."""
        config = GeneratorConfig(messages="m/*.yaml")
        assert config.merge(messages=None, locales="", output_dir=None) is config

    def test_merge_applies_and_coerces(self) -> None:
        """Comma strings become tuples and backends are parsed."""
        merged = GeneratorConfig().merge(locales="ja, en,fr", backend="PLAIN")
        assert merged.locales == ("ja", "en", "fr")
        assert merged.backend is Backend.PLAIN

    def test_merge_rejects_unknown_backend(self) -> None:
        """Unknown backends are configuration errors."""
        with pytest.raises(ConfigurationError):
            GeneratorConfig().merge(backend="go-i18n")

    def test_validate_requires_locales(self) -> None:
        """An empty locale list is invalid."""
        with pytest.raises(ConfigurationError):
            GeneratorConfig(locales=()).validate()

    def test_validate_module_name(self) -> None:
        """The output module must be importable."""
        with pytest.raises(ConfigurationError):
            GeneratorConfig(output_module="my-module").validate()

    def test_validate_returns_self(self) -> None:
        """A valid configuration is returned for chaining."""
        config = GeneratorConfig()
        assert config.validate() is config


class TestLoadConfig:
    """Test YAML configuration files."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """A missing file is not an error."""
        assert load_config(tmp_path / "absent.yaml") == GeneratorConfig()

    def test_full_file(self, tmp_path: Path) -> None:
        """Every documented key is read and relative paths are resolved."""
        path = tmp_path / "i18ngen.yaml"
        path.write_text(
            "\n".join(
                [
                    "locales: [ja, en]",
                    "compound: false",
                    "messages: messages/*.yaml",
                    "placeholders: placeholders/*.yaml",
                    "output_dir: out",
                    "output_package: i18n_messages",
                    "plural_placeholders: [Count, Quantity]",
                    "backend: plain",
                ]
            ),
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.locales == ("ja", "en")
        assert config.compound is False
        assert config.messages == str(tmp_path / "messages/*.yaml")
        assert config.placeholders == str(tmp_path / "placeholders/*.yaml")
        assert config.output_dir == str(tmp_path / "out")
        assert config.output_module == "i18n_messages"
        assert config.plural_placeholders == ("Count", "Quantity")
        assert config.backend is Backend.PLAIN

    def test_defaults_resolve_against_config_dir(self, tmp_path: Path) -> None:
        """Default globs are relative to the configuration file."""
        path = tmp_path / "i18ngen.yaml"
        path.write_text("locales: [en]\n", encoding="utf-8")
        config = load_config(path)
        assert config.messages.startswith(str(tmp_path))

    def test_absolute_paths_kept(self, tmp_path: Path) -> None:
        """Absolute paths are not rebased."""
        path = tmp_path / "i18ngen.yaml"
        absolute = str(tmp_path / "elsewhere" / "*.yaml")
        path.write_text(f"messages: '{absolute}'\n", encoding="utf-8")
        assert load_config(path).messages == absolute

    def test_empty_file_gives_defaults_with_resolved_paths(self, tmp_path: Path) -> None:
        """An empty file behaves like an empty mapping."""
        path = tmp_path / "i18ngen.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path).locales == GeneratorConfig().locales

    @pytest.mark.parametrize(
        "content",
        [
            "- a\n- b\n",
            "unknown_key: 1\n",
            "compound: 'yes please'\n",
            "locales: 5\n",
            "messages: [a, b]\n",
            "backend: nope\n",
            "locales: [en\n",
        ],
    )
    def test_invalid_files(self, tmp_path: Path, content: str) -> None:
        """Malformed files raise ConfigurationError with a CONFIG_INVALID diagnostic."""
        path = tmp_path / "i18ngen.yaml"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CONFIG_INVALID


class TestCheckLocales:
    """Test CLDR locale warnings."""

    def test_known_locales_silent(self) -> None:
        """Known locales produce no warnings."""
        pytest.importorskip("babel")
        assert check_locales(["en", "ja", "pt-BR"]) == ()

    def test_unknown_locale_warns(self) -> None:
        """Unknown locales produce UNKNOWN_LOCALE warnings."""
        pytest.importorskip("babel")
        warnings = check_locales(["en", "zz"])
        assert [(w.code, w.locale) for w in warnings] == [(DiagnosticCode.UNKNOWN_LOCALE, "zz")]
