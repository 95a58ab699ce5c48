"""Selector model: SelectorKind enum and the SelectorPart value type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class SelectorKind(StrEnum):
    """The six categories of a compound CSS selector, in render order.

    Render order (and the order parts must be appended in):
        element < id < class < attr < pseudo-class < pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attr"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    @property
    def unique(self) -> bool:
        """True if a selector may hold at most one part of this kind."""
        return self in _UNIQUE

    def render(self, value: object) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_ORDER: tuple[SelectorKind, ...] = tuple(SelectorKind)

_UNIQUE = frozenset(
    {SelectorKind.ELEMENT, SelectorKind.ID, SelectorKind.PSEUDO_ELEMENT}
)

_AFFIXES: dict[SelectorKind, tuple[str, str]] = {
    SelectorKind.ELEMENT: ("", ""),
    SelectorKind.ID: ("#", ""),
    SelectorKind.CLASS: (".", ""),
    SelectorKind.ATTRIBUTE: ("[", "]"),
    SelectorKind.PSEUDO_CLASS: (":", ""),
    SelectorKind.PSEUDO_ELEMENT: ("::", ""),
}


@dataclass(frozen=True)
class SelectorPart:
    """One formatted fragment of a selector, e.g. ``.container`` or ``::before``."""

    kind: SelectorKind
    text: str

    @classmethod
    def of(cls, kind: SelectorKind, value: object) -> SelectorPart:
        """Build a part from a raw value, applying the kind's formatting."""
        return cls(kind=kind, text=kind.render(value))
