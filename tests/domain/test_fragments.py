"""Tests for fragment kinds, ordering rules, and formatting."""

import pytest

from objtasks.domain.fragments import (
    KIND_ORDER,
    SINGLETON_KINDS,
    FragmentKind,
    SelectorFragment,
    is_valid_order,
    kind_rank,
)


class TestKindOrder:
    def test_canonical_sequence(self) -> None:
        assert KIND_ORDER == (
            FragmentKind.ELEMENT,
            FragmentKind.ID,
            FragmentKind.CLASS,
            FragmentKind.ATTRIBUTE,
            FragmentKind.PSEUDO_CLASS,
            FragmentKind.PSEUDO_ELEMENT,
        )

    def test_compound_has_no_rank(self) -> None:
        assert kind_rank(FragmentKind.COMPOUND) is None

    def test_singletons(self) -> None:
        assert SINGLETON_KINDS == {
            FragmentKind.ELEMENT,
            FragmentKind.ID,
            FragmentKind.PSEUDO_ELEMENT,
        }


class TestIsValidOrder:
    def test_first_fragment_always_valid(self) -> None:
        assert is_valid_order(None, FragmentKind.PSEUDO_ELEMENT)

    def test_ascending(self) -> None:
        assert is_valid_order(FragmentKind.ELEMENT, FragmentKind.CLASS)

    def test_same_kind(self) -> None:
        assert is_valid_order(FragmentKind.CLASS, FragmentKind.CLASS)

    def test_descending_rejected(self) -> None:
        assert not is_valid_order(FragmentKind.CLASS, FragmentKind.ELEMENT)
        assert not is_valid_order(FragmentKind.PSEUDO_CLASS, FragmentKind.ATTRIBUTE)

    def test_after_compound_anything_goes(self) -> None:
        assert is_valid_order(FragmentKind.COMPOUND, FragmentKind.ELEMENT)


class TestSelectorFragmentRender:
    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (FragmentKind.ELEMENT, "div"),
            (FragmentKind.ID, "#div"),
            (FragmentKind.CLASS, ".div"),
            (FragmentKind.ATTRIBUTE, "[div]"),
            (FragmentKind.PSEUDO_CLASS, ":div"),
            (FragmentKind.PSEUDO_ELEMENT, "::div"),
            (FragmentKind.COMPOUND, "div"),
        ],
    )
    def test_format_per_kind(self, kind: FragmentKind, expected: str) -> None:
        assert SelectorFragment(kind, "div").render() == expected

    def test_value_is_opaque(self) -> None:
        """Values are not validated or escaped."""
        frag = SelectorFragment(FragmentKind.ATTRIBUTE, 'href$=".png"')
        assert frag.render() == '[href$=".png"]'

    def test_frozen(self) -> None:
        frag = SelectorFragment(FragmentKind.ID, "main")
        with pytest.raises(AttributeError):
            frag.value = "other"  # type: ignore[misc]
