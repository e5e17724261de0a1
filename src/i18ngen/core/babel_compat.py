"""Optional Babel access for CLDR checks in the generator process.

i18ngen installs in two modes:

    pip install i18ngen          # build definitions and emit code
    pip install i18ngen[babel]   # also check locales and plural categories

Babel is imported lazily here and nowhere else in the generator. Modules
generated for the babel backend import Babel on their own at runtime.

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "BabelImportError",
    "get_babel_locale",
    "get_locale_class",
    "get_unknown_locale_error",
    "is_babel_available",
    "is_known_locale",
    "normalize_locale",
    "plural_categories",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    try:
        import babel  # noqa: F401, PLC0415
    except ImportError:
        return False
    return True


class BabelImportError(ImportError):
    """A feature needing CLDR data was used without Babel installed.

    Attributes:
        feature: What needed Babel
    """

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} needs Babel for CLDR data. Install with: pip install i18ngen[babel]"
        )
        self.feature = feature


def is_babel_available() -> bool:
    """Whether Babel can be imported (checked once per process)."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Raise BabelImportError naming ``feature`` when Babel is missing."""
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """babel.Locale, imported on first use.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("Locale lookup")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[Exception]:
    """babel.core.UnknownLocaleError, imported on first use.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("Locale lookup")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def normalize_locale(locale_code: str) -> str:
    """BCP-47 to POSIX separator form (``pt-BR`` → ``pt_BR``)."""
    return locale_code.replace("-", "_")


@lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale code into a cached babel.Locale.

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If CLDR has no such locale
        ValueError: If the code is malformed
    """
    return get_locale_class().parse(normalize_locale(locale_code))


def is_known_locale(locale_code: str) -> bool | None:
    """Whether CLDR knows a locale; None when Babel is not installed."""
    if not _check_babel_available():
        return None
    try:
        get_babel_locale(locale_code)
    except (get_unknown_locale_error(), ValueError):
        return False
    return True


def plural_categories(locale_code: str) -> frozenset[str] | None:
    """CLDR plural categories a locale selects, or None if unavailable.

    None means Babel is missing or the locale is unknown.

    Example:
        >>> sorted(plural_categories("en"))
        ['one', 'other']
    """
    if not is_known_locale(locale_code):
        return None
    # PluralRule.tags leaves out the implicit "other".
    return frozenset(get_babel_locale(locale_code).plural_form.tags) | {"other"}
