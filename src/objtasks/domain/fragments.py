"""Selector fragment kinds, ordering rules, and per-kind formatting.

A compound selector reads::

    element#id.class[attr]:pseudo-class::pseudo-element

Kinds must appear in that order. Element, id, and pseudo-element occur at
most once; class, attribute, and pseudo-class may repeat.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FragmentKind(StrEnum):
    """Kinds of simple selector held by a builder."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    COMPOUND = "compound"  # pre-rendered result of a combination


# --- Rule tables ---

KIND_ORDER: tuple[FragmentKind, ...] = (
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.CLASS,
    FragmentKind.ATTRIBUTE,
    FragmentKind.PSEUDO_CLASS,
    FragmentKind.PSEUDO_ELEMENT,
)

SINGLETON_KINDS: frozenset[FragmentKind] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)


def kind_rank(kind: FragmentKind) -> int | None:
    """Position of *kind* in the canonical order, or None for COMPOUND."""
    try:
        return KIND_ORDER.index(kind)
    except ValueError:
        return None


def is_valid_order(previous: FragmentKind | None, nxt: FragmentKind) -> bool:
    """Check whether *nxt* may follow *previous* in one compound selector.

    A missing or COMPOUND predecessor places no constraint on what follows.
    """
    if previous is None:
        return True
    prev_rank = kind_rank(previous)
    next_rank = kind_rank(nxt)
    if prev_rank is None or next_rank is None:
        return True
    return next_rank >= prev_rank


@dataclass(frozen=True)
class SelectorFragment:
    """One simple selector: a kind plus the caller's opaque text."""

    kind: FragmentKind
    value: str

    def render(self) -> str:
        match self.kind:
            case FragmentKind.ELEMENT | FragmentKind.COMPOUND:
                return self.value
            case FragmentKind.ID:
                return f"#{self.value}"
            case FragmentKind.CLASS:
                return f".{self.value}"
            case FragmentKind.ATTRIBUTE:
                return f"[{self.value}]"
            case FragmentKind.PSEUDO_CLASS:
                return f":{self.value}"
            case FragmentKind.PSEUDO_ELEMENT:
                return f"::{self.value}"
        raise ValueError(f"Unknown fragment kind: {self.kind!r}")
