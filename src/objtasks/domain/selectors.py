"""SelectorBuilder — fluent construction of CSS selectors.

A builder accumulates simple-selector fragments in insertion order and
enforces the cardinality and ordering rules from :mod:`objtasks.domain.fragments`.
Two builders can be joined with a combinator into a new builder holding a
single pre-rendered COMPOUND fragment.

Usage::

    builder = css_selector_builder
    builder.element("a").attr('href$=".png"').pseudo_class("focus").render()
    # 'a[href$=".png"]:focus'

    builder.combine(
        builder.element("div").id("main"), "+", builder.element("table").id("data")
    ).render()
    # 'div#main + table#data'

INVARIANT: a combined builder renders as ``left + " " + combinator + " " + right``.
The descendant combinator is itself a space, so it yields a three-space gap.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from objtasks.domain.errors import DuplicateFragmentError, OrderViolationError
from objtasks.domain.fragments import (
    SINGLETON_KINDS,
    FragmentKind,
    SelectorFragment,
    is_valid_order,
)


class Combinator(StrEnum):
    """Structural combinators joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


class SelectorBuilder:
    """Mutable, single-owner accumulator of selector fragments.

    Append methods mutate the builder and return it for chaining. A failed
    append raises and leaves the existing fragments untouched.
    Not thread-safe.
    """

    def __init__(self, kind: FragmentKind, value: str) -> None:
        self._fragments: list[SelectorFragment] = []
        self._kinds: set[FragmentKind] = set()
        self._push(SelectorFragment(kind, value))

    # --- Fragment appends ---

    def element(self, value: str) -> Self:
        return self._append_single(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> Self:
        return self._append_single(FragmentKind.ID, value)

    def class_(self, value: str) -> Self:
        return self._append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> Self:
        return self._append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Self:
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Self:
        return self._append_single(FragmentKind.PSEUDO_ELEMENT, value)

    def add(self, kind: FragmentKind | str, value: str) -> Self:
        """Append a fragment by kind name, applying the same rules."""
        kind = FragmentKind(kind)
        if kind is FragmentKind.COMPOUND:
            raise ValueError("Compound fragments are produced only by combine()")
        if kind in SINGLETON_KINDS:
            return self._append_single(kind, value)
        return self._append(kind, value)

    # --- Output ---

    def render(self) -> str:
        """Concatenate every fragment's formatted text, in append order."""
        return "".join(fragment.render() for fragment in self._fragments)

    stringify = render

    def combine(
        self,
        other: SelectorBuilder,
        combinator: Combinator | str,
        *,
        strict: bool = True,
    ) -> SelectorBuilder:
        """Join this selector and *other* into a new builder.

        With *strict* (the default) the combinator must be one of the four
        structural combinators; otherwise any symbol is used verbatim.
        Neither operand is modified.
        """
        symbol = str(Combinator(combinator)) if strict else str(combinator)
        return SelectorBuilder(
            FragmentKind.COMPOUND,
            f"{self.render()} {symbol} {other.render()}",
        )

    # --- Introspection ---

    @property
    def fragments(self) -> tuple[SelectorFragment, ...]:
        return tuple(self._fragments)

    @property
    def kinds(self) -> frozenset[FragmentKind]:
        return frozenset(self._kinds)

    @property
    def last_kind(self) -> FragmentKind | None:
        return self._fragments[-1].kind if self._fragments else None

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.render()!r})"

    # --- Internals ---

    def _append_single(self, kind: FragmentKind, value: str) -> Self:
        if kind in self._kinds:
            raise DuplicateFragmentError(kind)
        return self._append(kind, value)

    def _append(self, kind: FragmentKind, value: str) -> Self:
        previous = self.last_kind
        if not is_valid_order(previous, kind):
            assert previous is not None
            raise OrderViolationError(kind, previous)
        self._push(SelectorFragment(kind, value))
        return self

    def _push(self, fragment: SelectorFragment) -> None:
        self._fragments.append(fragment)
        self._kinds.add(fragment.kind)


class CssSelectorBuilder:
    """Facade: every method starts a fresh :class:`SelectorBuilder`."""

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder(FragmentKind.PSEUDO_ELEMENT, value)

    def combine(
        self,
        left: SelectorBuilder,
        combinator: Combinator | str,
        right: SelectorBuilder,
        *,
        strict: bool = True,
    ) -> SelectorBuilder:
        return left.combine(right, combinator, strict=strict)


css_selector_builder = CssSelectorBuilder()
