"""Field reference type produced by the extractor.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["FieldReference"]


@dataclass(frozen=True, slots=True)
class FieldReference:
    """One occurrence of a ``{{.name[:suffix][ | fn ...]}}`` placeholder.

    Identity is ``(base_name, suffix)``: two references that differ only in
    their function chain compare equal and hash alike.

    Attributes:
        base_name: Placeholder name before the optional ``:suffix``
        suffix: Disambiguating suffix ("" when absent)
        function_chain: Template functions applied after ``|``, in order
    """

    base_name: str
    suffix: str = ""
    function_chain: tuple[str, ...] = field(default=(), compare=False)

    @property
    def identity(self) -> tuple[str, str]:
        """Identity tuple used for deduplication."""
        return (self.base_name, self.suffix)

    @property
    def has_suffix(self) -> bool:
        """Whether the reference uses suffix notation."""
        return bool(self.suffix)

    @property
    def path(self) -> str:
        """Authored path, e.g. ``entity:from`` or ``entity``."""
        if self.suffix:
            return f"{self.base_name}:{self.suffix}"
        return self.base_name
