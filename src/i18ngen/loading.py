"""Source file loading: glob → decode → MessageSource / PlaceholderSource.

Message files (``.json`` via json, anything else via PyYAML)::

    # compound: id → locale → template or plural map
    EntityNotFound:
      en: "{{.entity}} not found"
      ja: "{{.entity}}が見つかりません"

    # simple: id → template (assigned to the primary locale)
    Welcome: "Welcome, {{.name}}"

Placeholder files take their kind from the file stem before the first ".".
Compound files map item → locale → text; simple files are named
``<kind>.<locale>.yaml`` and map item → text. An item with no text (null or
empty mapping) contributes to a Value kind.

Files are visited in sorted path order so load results never depend on
filesystem enumeration order.

Python 3.13+.
"""

from __future__ import annotations

import glob
import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

import yaml

from i18ngen.diagnostics import ErrorTemplate, SourceLoadError
from i18ngen.enums import SourceFormat
from i18ngen.model import MessageSource, PlaceholderSource

__all__ = [
    "decode_file",
    "find_source_files",
    "load_message_sources",
    "load_placeholder_sources",
    "source_format",
]

logger = logging.getLogger(__name__)

_FALLBACK_LOCALE = "en"


def source_format(path: Path) -> SourceFormat:
    """Decoder for a path, chosen by extension."""
    if path.suffix.lower() == ".json":
        return SourceFormat.JSON
    return SourceFormat.YAML


def find_source_files(pattern: str) -> list[Path]:
    """Files matching a glob pattern, sorted."""
    return sorted(Path(match) for match in glob.glob(pattern, recursive=True) if Path(match).is_file())


def decode_file(path: Path) -> dict[str, object]:
    """Read and decode one source file into a mapping.

    Keys are converted to strings (YAML may decode ``404:`` as an int).
    An empty file decodes to an empty mapping.

    Raises:
        SourceLoadError: If the file cannot be read or decoded, or is not a mapping
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceLoadError(ErrorTemplate.source_decode_failed(str(path), str(exc))) from exc

    try:
        match source_format(path):
            case SourceFormat.JSON:
                data = json.loads(text) if text.strip() else None
            case SourceFormat.YAML:
                data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SourceLoadError(ErrorTemplate.source_decode_failed(str(path), str(exc))) from exc

    if data is None:
        logger.debug("Source file %s is empty", path)
        return {}
    if not isinstance(data, Mapping):
        raise SourceLoadError(ErrorTemplate.source_invalid_shape(str(path), "a top-level mapping"))
    return {str(key): value for key, value in data.items()}


def _message_locales(value: object, primary_locale: str) -> dict[str, object]:
    if isinstance(value, Mapping):
        return {str(locale): template for locale, template in value.items()}
    return {primary_locale: value}


def load_message_sources(pattern: str, locales: Iterable[str] = ()) -> list[MessageSource]:
    """Load every message file matching a glob pattern.

    Args:
        pattern: Glob pattern for message files
        locales: Configured locales, primary first

    Returns:
        Message sources in file order, then declaration order within a file.
        IDs repeated across files are kept so assembly can reject them.

    Raises:
        SourceLoadError: If no file matches or a file cannot be decoded
        I18nGenError: If a template fails normalization or validation
    """
    locale_order = tuple(locales)
    primary_locale = locale_order[0] if locale_order else _FALLBACK_LOCALE

    files = find_source_files(pattern)
    if not files:
        raise SourceLoadError(ErrorTemplate.source_not_found("message", pattern))

    sources: list[MessageSource] = []
    for path in files:
        data = decode_file(path)
        logger.debug("Loaded %d message(s) from %s", len(data), path)
        for message_id, value in data.items():
            raw_by_locale = _message_locales(value, primary_locale)
            sources.append(MessageSource.from_raw(message_id, raw_by_locale, locales=locale_order))
    return sources


def _text(path: Path, value: object) -> str:
    match value:
        case str():
            return value
        case bool():
            return str(value).lower()
        case int() | float():
            return str(value)
        case _:
            raise SourceLoadError(
                ErrorTemplate.source_invalid_shape(str(path), "placeholder text to be a string")
            )


def _compound_items(path: Path, data: Mapping[str, object]) -> dict[str, dict[str, str]]:
    items: dict[str, dict[str, str]] = {}
    for item_id, texts in data.items():
        match texts:
            case None:
                items[item_id] = {}
            case Mapping():
                items[item_id] = {
                    str(locale): _text(path, text) for locale, text in texts.items() if text is not None
                }
            case _:
                raise SourceLoadError(
                    ErrorTemplate.source_invalid_shape(str(path), "item → locale → text mappings")
                )
    return items


def _simple_items(path: Path, data: Mapping[str, object], locale: str) -> dict[str, dict[str, str]]:
    return {
        item_id: {} if text is None else {locale: _text(path, text)} for item_id, text in data.items()
    }


def load_placeholder_sources(
    pattern: str,
    locales: Iterable[str] = (),
    *,
    compound: bool = True,
) -> list[PlaceholderSource]:
    """Load every placeholder file matching a glob pattern.

    Items of one kind spread across several files (one per locale in the
    simple layout) are merged. Kinds are returned in first-seen order.

    Args:
        pattern: Glob pattern for placeholder files
        locales: Configured locales; the primary one is used for simple
            files whose name carries no locale
        compound: Whether files map item → locale → text

    Returns:
        Placeholder sources (empty when no file matches)

    Raises:
        SourceLoadError: If a file cannot be decoded or has the wrong shape
    """
    locale_order = tuple(locales)
    primary_locale = locale_order[0] if locale_order else _FALLBACK_LOCALE

    files = find_source_files(pattern)
    if not files:
        logger.debug("No placeholder files match %s", pattern)
        return []

    kinds: dict[str, dict[str, dict[str, str]]] = {}
    for path in files:
        kind, _, rest = path.name.partition(".")
        data = decode_file(path)
        if compound:
            items = _compound_items(path, data)
        else:
            file_locale = rest.partition(".")[0] if "." in rest else primary_locale
            items = _simple_items(path, data, file_locale)
        logger.debug("Loaded %d item(s) of kind %r from %s", len(items), kind, path)

        merged = kinds.setdefault(kind, {})
        for item_id, texts in items.items():
            merged.setdefault(item_id, {}).update(texts)

    return [PlaceholderSource(kind=kind, items=items) for kind, items in kinds.items()]
