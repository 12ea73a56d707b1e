"""objtasks — object exercises and a validating CSS selector builder."""

from objtasks.domain.errors import DuplicateFragmentError, OrderViolationError, SelectorError
from objtasks.domain.selectors import (
    Combinator,
    CssSelectorBuilder,
    SelectorBuilder,
    css_selector_builder,
)

__version__ = "0.1.0"

__all__ = [
    "Combinator",
    "CssSelectorBuilder",
    "DuplicateFragmentError",
    "OrderViolationError",
    "SelectorBuilder",
    "SelectorError",
    "__version__",
    "css_selector_builder",
]
