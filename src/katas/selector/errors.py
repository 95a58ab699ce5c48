"""Selector builder error types."""

from __future__ import annotations

from katas.selector.model import SelectorKind


class SelectorError(Exception):
    """Base error for invalid selector call sequences."""

    def __init__(self, message: str, kind: SelectorKind) -> None:
        self.kind = kind
        super().__init__(message)


class UniquenessViolation(SelectorError):
    """Raised when element, id or pseudo-element is added a second time."""

    def __init__(self, kind: SelectorKind) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector",
            kind,
        )


class OrderViolation(SelectorError):
    """Raised when a part is added after a part of a later kind."""

    def __init__(self, kind: SelectorKind, conflicting_kind: SelectorKind) -> None:
        self.conflicting_kind = conflicting_kind
        super().__init__(
            "Selector parts should be arranged in the following order: element, "
            "id, class, attribute, pseudo-class, pseudo-element",
            kind,
        )
