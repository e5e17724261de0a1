"""Generator configuration.

Configuration is read from a YAML file (default ``i18ngen.yaml``)::

    locales: [en, ja]
    compound: true
    messages: ./messages/*.yaml
    placeholders: ./placeholders/*.yaml
    output_dir: ./generated
    output_module: i18n
    plural_placeholders: [Count]
    backend: babel

Relative paths resolve against the configuration file's directory. A
missing file yields the defaults. CLI flags are applied with merge().

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

from i18ngen.constants import (
    DEFAULT_LOCALES,
    DEFAULT_MESSAGES_GLOB,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_OUTPUT_MODULE,
    DEFAULT_PLACEHOLDERS_GLOB,
    DEFAULT_PLURAL_PLACEHOLDERS,
)
from i18ngen.core.babel_compat import is_known_locale
from i18ngen.diagnostics import ConfigurationError, Diagnostic, ErrorTemplate
from i18ngen.enums import Backend

__all__ = [
    "GeneratorConfig",
    "check_locales",
    "load_config",
]

logger = logging.getLogger(__name__)

# Keys accepted in the YAML file; "output_package" is an alias of "output_module".
_KEY_ALIASES: dict[str, str] = {"output_package": "output_module"}
_PATH_KEYS: tuple[str, ...] = ("messages", "placeholders", "output_dir")


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Immutable configuration for one generator run.

    Attributes:
        locales: Ordered locales; the first is primary/fallback
        compound: Placeholder files hold every locale (else one file per locale)
        messages: Glob pattern for message files
        placeholders: Glob pattern for placeholder files
        output_dir: Directory receiving the generated module
        output_module: Generated module name (without ``.py``)
        plural_placeholders: Placeholder names treated as the plural count
        backend: Rendering backend for generated code
    """

    locales: tuple[str, ...] = DEFAULT_LOCALES
    compound: bool = True
    messages: str = DEFAULT_MESSAGES_GLOB
    placeholders: str = DEFAULT_PLACEHOLDERS_GLOB
    output_dir: str = DEFAULT_OUTPUT_DIR
    output_module: str = DEFAULT_OUTPUT_MODULE
    plural_placeholders: tuple[str, ...] = DEFAULT_PLURAL_PLACEHOLDERS
    backend: Backend = Backend.BABEL

    @property
    def primary_locale(self) -> str:
        """First configured locale."""
        return self.locales[0]

    @property
    def output_path(self) -> Path:
        """Full path of the generated module."""
        return Path(self.output_dir) / f"{self.output_module}.py"

    def merge(self, **overrides: object) -> GeneratorConfig:
        """Return a copy with non-empty overrides applied.

        None, empty strings, empty sequences, and False are ignored so that
        unset CLI flags never clobber file values.

        Raises:
            ConfigurationError: If an override has the wrong type
        """
        applied = {key: value for key, value in overrides.items() if value}
        if not applied:
            return self
        return replace(self, **_coerce_values(applied, source="<overrides>"))

    def validate(self) -> GeneratorConfig:
        """Check cross-field invariants.

        Raises:
            ConfigurationError: If a required value is empty
        """
        if not self.locales:
            raise ConfigurationError(ErrorTemplate.config_invalid("<config>", "no locales specified"))
        for name in ("messages", "placeholders", "output_dir", "output_module"):
            if not getattr(self, name):
                raise ConfigurationError(
                    ErrorTemplate.config_invalid("<config>", f"'{name}' cannot be empty")
                )
        if not self.output_module.isidentifier():
            raise ConfigurationError(
                ErrorTemplate.config_invalid(
                    "<config>", f"output_module '{self.output_module}' is not a module name"
                )
            )
        return self


def _string_tuple(key: str, value: object, source: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    if isinstance(value, Iterable) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise ConfigurationError(ErrorTemplate.config_invalid(source, f"'{key}' must be a list of strings"))


def _coerce_values(raw: Mapping[str, object], *, source: str) -> dict[str, object]:
    known = {f.name for f in fields(GeneratorConfig)}
    values: dict[str, object] = {}
    for raw_key, value in raw.items():
        key = _KEY_ALIASES.get(raw_key, raw_key)
        if key not in known:
            raise ConfigurationError(ErrorTemplate.config_invalid(source, f"unknown key '{raw_key}'"))
        match key:
            case "locales" | "plural_placeholders":
                values[key] = _string_tuple(key, value, source)
            case "compound":
                if not isinstance(value, bool):
                    raise ConfigurationError(
                        ErrorTemplate.config_invalid(source, "'compound' must be a boolean")
                    )
                values[key] = value
            case "backend":
                try:
                    values[key] = Backend(str(value).lower())
                except ValueError:
                    choices = ", ".join(backend.value for backend in Backend)
                    raise ConfigurationError(
                        ErrorTemplate.config_invalid(
                            source, f"unknown backend '{value}' (choose from {choices})"
                        )
                    ) from None
            case _:
                if not isinstance(value, str):
                    raise ConfigurationError(
                        ErrorTemplate.config_invalid(source, f"'{key}' must be a string")
                    )
                values[key] = value
    return values


def load_config(path: str | Path) -> GeneratorConfig:
    """Load configuration from a YAML file.

    Args:
        path: Configuration file path

    Returns:
        GeneratorConfig (defaults when the file does not exist)

    Raises:
        ConfigurationError: If the file cannot be parsed or holds invalid values
    """
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("Configuration file %s not found; using defaults", config_path)
        return GeneratorConfig()
    except OSError as exc:
        raise ConfigurationError(ErrorTemplate.config_invalid(str(config_path), str(exc))) from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(ErrorTemplate.config_invalid(str(config_path), str(exc))) from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError(
            ErrorTemplate.config_invalid(str(config_path), "top level must be a mapping")
        )

    defaults = GeneratorConfig()
    values = _coerce_values(raw, source=str(config_path))
    base_dir = config_path.parent
    for key in _PATH_KEYS:
        value = values.get(key, getattr(defaults, key))
        if isinstance(value, str) and value and not Path(value).is_absolute():
            values[key] = str(base_dir / value)

    logger.debug("Loaded configuration from %s", config_path)
    return replace(defaults, **values)


def check_locales(locales: Iterable[str]) -> tuple[Diagnostic, ...]:
    """Warn about locales CLDR does not know (requires Babel; else no-op)."""
    return tuple(
        ErrorTemplate.unknown_locale(locale) for locale in locales if is_known_locale(locale) is False
    )
