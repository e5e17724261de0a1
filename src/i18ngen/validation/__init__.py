"""Template validation (duplicate placeholders, complexity bounds).

Python 3.13+. Zero external dependencies.
"""

from .template import (
    count_placeholders,
    find_duplicate_placeholders,
    measure_nesting_depth,
    validate_template,
)

__all__ = [
    "count_placeholders",
    "find_duplicate_placeholders",
    "measure_nesting_depth",
    "validate_template",
]
