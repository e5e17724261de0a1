"""Template syntax: field references, extraction, raw variants, rewriting.

Exactly one placeholder grammar is recognized: ``{{.name[:suffix][ | fn]}}``.

Python 3.13+. Zero external dependencies.
"""

from .extractor import FieldOccurrence, dedupe_fields, extract_fields, iter_field_occurrences
from .fields import FieldReference
from .rewriter import format_field, rewrite_raw_template, rewrite_template
from .template import (
    PlainTemplate,
    PluralTemplate,
    RawTemplate,
    coerce_raw_template,
    flatten_plural_forms,
    normalize_template,
)

__all__ = [
    "FieldOccurrence",
    "FieldReference",
    "PlainTemplate",
    "PluralTemplate",
    "RawTemplate",
    "coerce_raw_template",
    "dedupe_fields",
    "extract_fields",
    "flatten_plural_forms",
    "format_field",
    "iter_field_occurrences",
    "normalize_template",
    "rewrite_raw_template",
    "rewrite_template",
]
