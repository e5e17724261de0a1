"""i18ngen - typed localization code generator.

Reads message catalogs (per-locale templates with ``{{.name}}`` fields,
optional CLDR plural maps) and placeholder catalogs, resolves them into a
deterministic intermediate representation, and emits a Python module with
one typed class per message.

Public API:
    generate - Run the full pipeline for a GeneratorConfig
    build_definitions - Assemble the IR from already-loaded sources
    render_module - Render the IR to Python source
    load_config - Read a YAML configuration file
    GeneratorConfig - Run configuration
    MessageSource / PlaceholderSource - Core input types
    Definitions - The assembled IR

Exceptions:
    I18nGenError - Base exception class (carries a Diagnostic)

Submodules:
    i18ngen.syntax - Field extraction, template normalization, rewriting
    i18ngen.validation - Duplicate and complexity checks
    i18ngen.model - Field resolution, catalog matching, plural detection, assembly
    i18ngen.loading - YAML/JSON source loading
    i18ngen.diagnostics - Error codes, templates, formatting
"""

from .config import GeneratorConfig, load_config
from .diagnostics import I18nGenError
from .emitter import render_module
from .generator import GenerationResult, generate
from .model import Definitions, MessageSource, PlaceholderSource, build_definitions

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18ngen")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Definitions",
    "GenerationResult",
    "GeneratorConfig",
    "I18nGenError",
    "MessageSource",
    "PlaceholderSource",
    "__version__",
    "build_definitions",
    "generate",
    "load_config",
    "render_module",
]
