"""Generator run: load sources, assemble definitions, render, write.

Each run is a pure function of the configuration and the source files.
The first error aborts the run before anything is written; warnings are
logged and returned.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from i18ngen.config import GeneratorConfig, check_locales
from i18ngen.diagnostics import Diagnostic, ErrorTemplate, GenerationError
from i18ngen.emitter import render_module
from i18ngen.loading import load_message_sources, load_placeholder_sources
from i18ngen.model import Definitions, build_definitions

__all__ = [
    "GenerationResult",
    "build",
    "generate",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of one generator run.

    Attributes:
        definitions: Assembled IR
        source: Rendered module source
        output_path: Target file
        up_to_date: Whether the target already held exactly this source
        written: Whether the target was (re)written by this run
        warnings: Every non-fatal diagnostic of the run
    """

    definitions: Definitions
    source: str
    output_path: Path
    up_to_date: bool
    written: bool
    warnings: tuple[Diagnostic, ...] = ()


def build(config: GeneratorConfig) -> tuple[Definitions, tuple[Diagnostic, ...]]:
    """Load sources and assemble definitions.

    Returns:
        (definitions, warnings) where warnings include locale checks

    Raises:
        I18nGenError: On the first configuration, source, or model error
    """
    config.validate()
    messages = load_message_sources(config.messages, config.locales)
    placeholders = load_placeholder_sources(
        config.placeholders, config.locales, compound=config.compound
    )
    logger.info(
        "Loaded %d message(s) and %d placeholder kind(s)", len(messages), len(placeholders)
    )
    definitions = build_definitions(messages, placeholders, config.locales, config)
    return definitions, (*check_locales(config.locales), *definitions.warnings)


def _read_existing(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise GenerationError(ErrorTemplate.output_write_failed(str(path), str(exc))) from exc


def generate(config: GeneratorConfig, *, check: bool = False) -> GenerationResult:
    """Run the generator.

    Args:
        config: Run configuration
        check: Only compare against the existing output; never write

    Returns:
        GenerationResult

    Raises:
        I18nGenError: On the first error (nothing is written)
    """
    definitions, warnings = build(config)
    for warning in warnings:
        logger.warning("%s", warning.format_error())

    output_path = config.output_path
    source = render_module(definitions, filename=str(output_path))
    up_to_date = _read_existing(output_path) == source

    written = False
    if not check and not up_to_date:
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(source, encoding="utf-8")
        except OSError as exc:
            raise GenerationError(
                ErrorTemplate.output_write_failed(str(output_path), str(exc))
            ) from exc
        written = True
        logger.info("Wrote %s", output_path)
    elif up_to_date:
        logger.info("%s is up to date", output_path)

    return GenerationResult(
        definitions=definitions,
        source=source,
        output_path=output_path,
        up_to_date=up_to_date,
        written=written,
        warnings=warnings,
    )
