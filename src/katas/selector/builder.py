"""Fluent CSS selector builder with ordering and uniqueness validation.

A compound selector is built one part at a time::

    css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus")

Parts must be appended in the fixed kind order (element, id, class, attr,
pseudo-class, pseudo-element). Element, id and pseudo-element may occur at
most once. Violations raise immediately and leave the selector unchanged.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from katas.selector.errors import OrderViolation, UniquenessViolation
from katas.selector.model import SelectorKind, SelectorPart

__all__ = ["Combinator", "CssSelectorBuilder", "Selector", "combine", "css_selector_builder"]

logger = logging.getLogger(__name__)


class Combinator(StrEnum):
    """CSS combinators accepted by :func:`combine`."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


class Selector:
    """An in-progress compound selector, one bucket of parts per kind."""

    def __init__(self) -> None:
        self._buckets: dict[SelectorKind, list[SelectorPart]] = {
            kind: [] for kind in SelectorKind
        }

    # --- appending ------------------------------------------------------------

    def add(self, kind: SelectorKind, value: object) -> Selector:
        """Append one part of *kind*; return self for chaining."""
        if kind.unique and self._buckets[kind]:
            logger.debug("rejected %s %r: already present", kind, value)
            raise UniquenessViolation(kind)
        for later in SelectorKind:
            if later.rank > kind.rank and self._buckets[later]:
                logger.debug("rejected %s %r: %s already present", kind, value, later)
                raise OrderViolation(kind, later)

        part = SelectorPart.of(kind, value)
        self._buckets[kind].append(part)
        logger.debug("appended %s part %r", kind, part.text)
        return self

    def element(self, value: object) -> Selector:
        return self.add(SelectorKind.ELEMENT, value)

    def id(self, value: object) -> Selector:
        return self.add(SelectorKind.ID, value)

    def class_(self, value: object) -> Selector:
        return self.add(SelectorKind.CLASS, value)

    def attr(self, value: object) -> Selector:
        return self.add(SelectorKind.ATTRIBUTE, value)

    def pseudo_class(self, value: object) -> Selector:
        return self.add(SelectorKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: object) -> Selector:
        return self.add(SelectorKind.PSEUDO_ELEMENT, value)

    # --- rendering ------------------------------------------------------------

    @property
    def parts(self) -> tuple[SelectorPart, ...]:
        """All parts in render order."""
        return tuple(part for kind in SelectorKind for part in self._buckets[kind])

    def stringify(self) -> str:
        return "".join(part.text for part in self.parts)

    def __str__(self) -> str:
        return self.stringify()

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

    def __repr__(self) -> str:
        return f"Selector({self.stringify()!r})"


def combine(left: Selector, combinator: str, right: Selector) -> Selector:
    """Join two selectors with *combinator* into a new element-kind selector.

    The token is not validated: anything other than the four
    :class:`Combinator` values is inserted verbatim.
    """
    text = f"{left.stringify()} {combinator} {right.stringify()}"
    return Selector().element(text)


class CssSelectorBuilder:
    """Facade whose methods start a new :class:`Selector` with one part."""

    def element(self, value: object) -> Selector:
        return Selector().element(value)

    def id(self, value: object) -> Selector:
        return Selector().id(value)

    def class_(self, value: object) -> Selector:
        return Selector().class_(value)

    def attr(self, value: object) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: object) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: object) -> Selector:
        return Selector().pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        return combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
