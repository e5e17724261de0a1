"""Identifier derivation and validation for generated code.

This module is the single source of truth for turning authored names
(message IDs, placeholder kinds, item IDs, field names) into identifiers
that are legal in the generated Python module.

Identifier Grammar:
    [a-zA-Z_][a-zA-Z0-9_]*

    - Start: ASCII letter or underscore
    - Continue: ASCII letter, ASCII digit, or underscore
    - Length: Maximum 256 characters

CamelCase Rules:
    Split on underscores, uppercase the first character of every non-empty
    segment, join. "email_address" -> "EmailAddress", "from" -> "From".

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

import keyword
import re

from i18ngen.constants import (
    DIGIT_PREFIX,
    GENERATED_MODULE_NAMES,
    MAX_IDENTIFIER_LENGTH,
    RESERVED_ESCAPE,
)
from i18ngen.diagnostics import ErrorTemplate, InvalidIdentifierError

__all__ = [
    "RESERVED_WORDS",
    "escape_reserved",
    "generate_struct_name",
    "is_valid_identifier",
    "require_identifier",
    "to_camel_case",
]

# Hard and soft keywords of the target language. Soft keywords ("match",
# "case", "type", "_") are legal names but read badly as generated fields.
RESERVED_WORDS: frozenset[str] = frozenset(keyword.kwlist) | frozenset(keyword.softkwlist)

_IDENTIFIER_PATTERN: re.Pattern[str] = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")


def to_camel_case(name: str) -> str:
    """Convert snake_case to CamelCase.

    Only underscores split segments; the rest of each segment keeps its case.

    Args:
        name: Authored name

    Returns:
        CamelCase name

    Example:
        >>> to_camel_case("user_name")
        'UserName'
        >>> to_camel_case("from_location")
        'FromLocation'
        >>> to_camel_case("userID")
        'UserID'
    """
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


def escape_reserved(name: str) -> str:
    """Append an underscore to names colliding with a reserved word.

    Example:
        >>> escape_reserved("None")
        'None_'
        >>> escape_reserved("Entity")
        'Entity'
    """
    if name in RESERVED_WORDS:
        return name + RESERVED_ESCAPE
    return name


def generate_struct_name(message_id: str) -> str:
    """Derive the generated class name for a message ID.

    IDs starting with a digit receive a fixed prefix. Names the generated
    module already binds at top level (``Locale``, ``Enum``, ...) are escaped
    like keywords.

    Example:
        >>> generate_struct_name("entity_not_found")
        'EntityNotFound'
        >>> generate_struct_name("404_page")
        'Msg404Page'
        >>> generate_struct_name("locale")
        'Locale_'
    """
    name = to_camel_case(message_id)
    if message_id[:1].isdigit():
        name = DIGIT_PREFIX + name
    if name in GENERATED_MODULE_NAMES:
        return name + RESERVED_ESCAPE
    return escape_reserved(name)


def is_valid_identifier(name: str) -> bool:
    """Validate a complete identifier.

    Args:
        name: Identifier string to validate

    Returns:
        True if name matches the identifier grammar and length bound

    Example:
        >>> is_valid_identifier("entity_from")
        True
        >>> is_valid_identifier("1st")
        False
        >>> is_valid_identifier("")
        False
    """
    if not name or len(name) > MAX_IDENTIFIER_LENGTH:
        return False
    return _IDENTIFIER_PATTERN.fullmatch(name) is not None


def require_identifier(
    what: str,
    name: str,
    *,
    message_id: str | None = None,
    locale: str | None = None,
    field_name: str | None = None,
    source_path: str | None = None,
) -> str:
    """Return ``name`` unchanged, or raise if it is not a valid identifier.

    ``field_name`` names the authored input a derived name came from; it
    defaults to ``name`` itself.

    Raises:
        InvalidIdentifierError: If name fails is_valid_identifier()
    """
    if not is_valid_identifier(name):
        raise InvalidIdentifierError(
            ErrorTemplate.invalid_identifier(
                what,
                name,
                message_id=message_id,
                locale=locale,
                field_name=field_name,
                source_path=source_path,
            )
        )
    return name
