"""Shared constants for i18ngen.

This module provides centralized configuration constants used across
the syntax, validation, and model packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Template limits: Safety bounds on human-authored templates
- Plural categories: CLDR category names and flattening priority
- Naming: Fixed prefixes and suffixes for generated identifiers
- Defaults: Configuration defaults

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Template limits
    "MAX_NESTING_DEPTH",
    "MAX_PLACEHOLDERS",
    "MAX_IDENTIFIER_LENGTH",
    # Plural categories
    "PLURAL_CATEGORIES",
    "PLURAL_FLATTEN_PRIORITY",
    # Naming
    "DIGIT_PREFIX",
    "VALUE_SUFFIX",
    "TEXT_SUFFIX",
    "RESERVED_ESCAPE",
    "GENERATED_MODULE_NAMES",
    # Defaults
    "DEFAULT_LOCALES",
    "DEFAULT_PLURAL_PLACEHOLDERS",
    "DEFAULT_MESSAGES_GLOB",
    "DEFAULT_PLACEHOLDERS_GLOB",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_OUTPUT_MODULE",
    "DEFAULT_CONFIG_FILE",
]

# ============================================================================
# TEMPLATE LIMITS
# ============================================================================

# Maximum brace nesting depth inside one template string.
# Counted per single brace, so "{{.name}}" already has depth 2.
MAX_NESTING_DEPTH: int = 5

# Maximum number of "{{" openings inside one template string.
MAX_PLACEHOLDERS: int = 20

# Maximum identifier length accepted for kinds, items and message IDs.
MAX_IDENTIFIER_LENGTH: int = 256

# ============================================================================
# PLURAL CATEGORIES
# ============================================================================

# CLDR plural categories in canonical order.
PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# Preferred categories when a plural map must be reduced to one string.
# Remaining categories fall back to lexicographic order.
PLURAL_FLATTEN_PRIORITY: tuple[str, ...] = ("other", "one")

# ============================================================================
# NAMING
# ============================================================================

# Prepended to struct names derived from message IDs starting with a digit.
DIGIT_PREFIX: str = "Msg"

# Appended to kind type names by classification.
VALUE_SUFFIX: str = "Value"
TEXT_SUFFIX: str = "Text"

# Appended to identifiers colliding with a Python keyword.
RESERVED_ESCAPE: str = "_"

# Module-level names bound by the generated runtime; message classes
# deriving one of them are escaped like keywords.
GENERATED_MODULE_NAMES: frozenset[str] = frozenset(
    {
        "ClassVar",
        "Enum",
        "LOCALES",
        "Locale",
        "PRIMARY_LOCALE",
        "UnknownLocaleError",
        "annotations",
        "dataclass",
        "lru_cache",
        "re",
        "replace",
    }
)

# ============================================================================
# DEFAULTS
# ============================================================================

DEFAULT_LOCALES: tuple[str, ...] = ("en", "ja")
DEFAULT_PLURAL_PLACEHOLDERS: tuple[str, ...] = ("Count",)
DEFAULT_MESSAGES_GLOB: str = "./messages/*.yaml"
DEFAULT_PLACEHOLDERS_GLOB: str = "./placeholders/*.yaml"
DEFAULT_OUTPUT_DIR: str = "./"
DEFAULT_OUTPUT_MODULE: str = "i18n"
DEFAULT_CONFIG_FILE: str = "i18ngen.yaml"
