"""Python module emitter.

Renders Definitions into a single importable module through a Jinja2
template shipped with the package (``templates/module.py.j2``). Literal
values are written with repr(), so any text that survived loading is a
valid Python string literal. The rendered source is compiled before it is
returned; a module that does not compile is never written.

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined

from i18ngen.diagnostics import ErrorTemplate, GenerationError
from i18ngen.model import Definitions, MessageDefinition, PlaceholderDefinition

__all__ = [
    "MODULE_TEMPLATE",
    "create_environment",
    "render_module",
]

MODULE_TEMPLATE = "module.py.j2"


@lru_cache(maxsize=1)
def create_environment() -> Environment:
    """Jinja2 environment loading the bundled templates.

    Autoescaping is off (the output is Python, not HTML); ``pyrepr`` writes
    Python literals.
    """
    env = Environment(
        loader=PackageLoader("i18ngen.emitter", "templates"),
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["pyrepr"] = repr
    return env


def _placeholder_context(
    placeholder: PlaceholderDefinition, locales: tuple[str, ...]
) -> dict[str, Any]:
    primary = locales[0]
    members = []
    for item in placeholder.items:
        item_locales = (*locales, *sorted(set(item.texts).difference(locales)))
        members.append(
            {
                "id": item.id,
                "field_name": item.field_name,
                "texts": {locale: item.text_for(locale, primary) for locale in item_locales},
            }
        )
    return {
        "kind": placeholder.kind,
        "type_name": placeholder.type_name,
        "table_name": f"{placeholder.type_name.upper()}_TEXTS",
        "is_value": placeholder.is_value,
        "members": members,
    }


def _message_context(message: MessageDefinition, pluralization: bool) -> dict[str, Any]:
    plural_forms = (
        {locale: dict(forms) for locale, forms in message.plural_forms.items()}
        if pluralization
        else {}
    )
    return {
        "id": message.id,
        "struct_name": message.struct_name,
        "templates": dict(message.templates),
        "plural_forms": plural_forms,
        "fields": message.fields,
        "uses_count": pluralization and message.uses_count,
        "count_keys": message.count_keys,
    }


def render_module(definitions: Definitions, *, filename: str = "<i18ngen>") -> str:
    """Render the generated module source.

    Args:
        definitions: Assembled IR
        filename: Name reported when the rendered source fails to compile

    Returns:
        Python source text (deterministic for equal definitions)

    Raises:
        GenerationError: If the rendered source does not compile
    """
    pluralization = definitions.backend.supports_pluralization
    template = create_environment().get_template(MODULE_TEMPLATE)
    source = template.render(
        locales=definitions.locales,
        primary_locale=definitions.primary_locale,
        backend=str(definitions.backend),
        pluralization=pluralization,
        placeholders=[_placeholder_context(p, definitions.locales) for p in definitions.placeholders],
        messages=[_message_context(m, pluralization) for m in definitions.messages],
    )

    try:
        compile(source, filename, "exec")
    except SyntaxError as exc:
        raise GenerationError(ErrorTemplate.generated_code_invalid(filename, str(exc))) from exc
    return source
