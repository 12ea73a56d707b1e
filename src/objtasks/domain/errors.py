"""Selector construction errors.

Both errors signal a misuse of the builder (an invalid call sequence),
never a transient fault. The rejected fragment is not appended; fragments
added before it are kept.
"""

from __future__ import annotations

from objtasks.domain.fragments import FragmentKind


class SelectorError(ValueError):
    """Base class for invalid selector construction."""

    code = "SELECTOR_ERROR"

    def __init__(self, message: str, kind: FragmentKind) -> None:
        self.kind = kind
        super().__init__(message)


class DuplicateFragmentError(SelectorError):
    """A second element, id, or pseudo-element was appended."""

    code = "DUPLICATE_FRAGMENT"

    def __init__(self, kind: FragmentKind) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector",
            kind,
        )


class OrderViolationError(SelectorError):
    """A fragment was appended before a kind that must precede it."""

    code = "ORDER_VIOLATION"

    def __init__(self, kind: FragmentKind, previous: FragmentKind) -> None:
        self.previous = previous
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            kind,
        )
