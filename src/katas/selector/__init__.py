from katas.selector.builder import (
    Combinator,
    CssSelectorBuilder,
    Selector,
    combine,
    css_selector_builder,
)
from katas.selector.errors import OrderViolation, SelectorError, UniquenessViolation
from katas.selector.model import SelectorKind, SelectorPart

__all__ = [
    # model
    "SelectorKind",
    "SelectorPart",
    # builder
    "Selector",
    "Combinator",
    "CssSelectorBuilder",
    "css_selector_builder",
    "combine",
    # errors
    "SelectorError",
    "UniquenessViolation",
    "OrderViolation",
]
