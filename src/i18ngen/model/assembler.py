"""Model assembly: sources → deterministic Definitions (the IR).

Pipeline per message, in declaration order:

    1. Derive the struct name (digit-leading IDs get a prefix)
    2. Detect count-awareness
    3. Resolve each distinct field against the placeholder catalog,
       excluding plural fields when the backend threads the count
    4. Rewrite suffixed occurrences to generated template keys
    5. Collect non-fatal warnings

Output is sorted (messages by ID, placeholders by type name) so repeated
runs over unchanged input produce identical definitions. The first error
aborts the run; nothing is partially emitted.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable

from i18ngen.config import GeneratorConfig
from i18ngen.core.identifiers import generate_struct_name, require_identifier
from i18ngen.diagnostics import Diagnostic, DuplicateDefinitionError, ErrorTemplate
from i18ngen.syntax import (
    FieldReference,
    PluralTemplate,
    extract_fields,
    rewrite_raw_template,
    rewrite_template,
)

from .catalog import PlaceholderCatalog
from .fields import field_name, resolve_field, template_key
from .plural import PluralDetector, check_plural_categories
from .types import (
    Definitions,
    MessageDefinition,
    MessageSource,
    PlaceholderDefinition,
    PlaceholderSource,
    ResolvedField,
)

__all__ = [
    "assemble_message",
    "build_definitions",
]

# Primary locale when none is configured.
_FALLBACK_LOCALE = "en"


def _check_unique_fields(message_id: str, fields: list[ResolvedField]) -> None:
    for attribute in ("field_name", "template_key"):
        claimed: dict[str, ResolvedField] = {}
        for resolved in fields:
            name = getattr(resolved, attribute)
            first = claimed.setdefault(name, resolved)
            if first is not resolved:
                raise DuplicateDefinitionError(
                    ErrorTemplate.duplicate_field_name(
                        name, _path(first), _path(resolved), message_id
                    )
                )


def _path(resolved: ResolvedField) -> str:
    if resolved.suffix:
        return f"{resolved.base_name}:{resolved.suffix}"
    return resolved.base_name


def _first_locale(source: MessageSource, ref: FieldReference) -> str | None:
    for locale, text in source.templates.items():
        if ref in extract_fields(text):
            return locale
    return None


def _check_unique_struct_names(
    messages: Iterable[MessageDefinition], placeholders: Iterable[PlaceholderDefinition]
) -> None:
    claimed = {p.type_name: f"placeholder kind '{p.kind}'" for p in placeholders}
    for message in messages:
        owner = f"message '{message.id}'"
        first = claimed.setdefault(message.struct_name, owner)
        if first != owner:
            raise DuplicateDefinitionError(
                ErrorTemplate.duplicate_struct_name(message.struct_name, first, owner)
            )


def assemble_message(
    source: MessageSource,
    catalog: PlaceholderCatalog,
    detector: PluralDetector,
) -> MessageDefinition:
    """Resolve one message against the catalog.

    Args:
        source: Extracted message source
        catalog: Catalog for this run (may synthesize kinds)
        detector: Count-awareness rules for this run

    Returns:
        MessageDefinition

    Raises:
        InvalidIdentifierError: If the message ID or a field yields no valid
            identifier
        DuplicateDefinitionError: If two fields generate the same name, or a
            synthesized kind collides with a declared one
    """
    struct_name = require_identifier(
        "message", generate_struct_name(source.id), message_id=source.id
    )
    count_aware = detector.is_count_aware(source)
    exclude_plural = detector.excludes_plural_fields(count_aware)

    fields: list[ResolvedField] = []
    count_keys: list[str] = []
    for ref in source.fields:
        if exclude_plural and detector.is_plural_field(ref.base_name):
            count_keys.append(template_key(ref))
            continue
        require_identifier(
            "field",
            field_name(ref),
            message_id=source.id,
            locale=_first_locale(source, ref),
            field_name=ref.path,
        )
        kind = catalog.resolve(ref.base_name)
        fields.append(resolve_field(ref, kind.type_name))
    _check_unique_fields(source.id, fields)

    if exclude_plural and not count_keys:
        count_keys.append(detector.default_count_key)

    templates = {
        locale: rewrite_template(text, template_key) for locale, text in source.templates.items()
    }
    plural_forms: dict[str, dict[str, str]] = {}
    for locale, raw in source.raw_templates.items():
        match rewrite_raw_template(raw, template_key):
            case PluralTemplate() as rewritten:
                plural_forms[locale] = rewritten.as_dict()

    return MessageDefinition(
        id=source.id,
        struct_name=struct_name,
        fields=tuple(fields),
        templates=templates,
        raw_templates=source.raw_templates,
        plural_forms=plural_forms,
        supports_count=count_aware,
        count_keys=tuple(dict.fromkeys(count_keys)),
    )


def _message_warnings(source: MessageSource, locales: tuple[str, ...]) -> list[Diagnostic]:
    warnings = list(source.warnings)
    warnings.extend(
        ErrorTemplate.missing_translation(source.id, locale)
        for locale in locales
        if locale not in source.raw_templates
    )
    warnings.extend(check_plural_categories(source))
    return warnings


def build_definitions(
    messages: Iterable[MessageSource],
    placeholders: Iterable[PlaceholderSource],
    locales: Iterable[str],
    config: GeneratorConfig | None = None,
) -> Definitions:
    """Assemble the complete IR for one run.

    Args:
        messages: Message sources in declaration order
        placeholders: Placeholder sources in declaration order
        locales: Configured locales, primary first
        config: Plural placeholder names and backend (defaults when None)

    Returns:
        Definitions sorted for byte-identical reruns

    Raises:
        DuplicateDefinitionError: If two messages, or a message and a
            placeholder kind, generate the same class name
        I18nGenError: On the first error encountered (fail-fast)
    """
    config = config or GeneratorConfig()
    locale_order = tuple(dict.fromkeys(locales)) or (_FALLBACK_LOCALE,)

    catalog = PlaceholderCatalog.from_sources(placeholders, primary_locale=locale_order[0])
    detector = PluralDetector(config.plural_placeholders, config.backend)

    definitions: dict[str, MessageDefinition] = {}
    warnings: list[Diagnostic] = []
    for source in messages:
        if source.id in definitions:
            raise DuplicateDefinitionError(ErrorTemplate.duplicate_message_id(source.id))
        definitions[source.id] = assemble_message(source, catalog, detector)
        warnings.extend(_message_warnings(source, locale_order))
    warnings.extend(catalog.warnings)

    placeholder_definitions = catalog.definitions()
    _check_unique_struct_names(definitions.values(), placeholder_definitions)

    return Definitions(
        messages=tuple(definitions[message_id] for message_id in sorted(definitions)),
        placeholders=placeholder_definitions,
        locales=locale_order,
        backend=config.backend,
        warnings=tuple(warnings),
    )
