"""Code emission from assembled definitions.

Python 3.13+.
"""

from .python import MODULE_TEMPLATE, create_environment, render_module

__all__ = [
    "MODULE_TEMPLATE",
    "create_environment",
    "render_module",
]
