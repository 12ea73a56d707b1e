"""Plain-dict helpers: copying, merging, comparing, and freezing.

Pure functions, no dependencies. "Object" here means a ``dict`` with
string keys, the closest Python counterpart of a plain JS object.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any


def shallow_copy(obj: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict with the same keys; nested values are shared."""
    return dict(obj)


def merge_objects(objects: list[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge dicts into one, summing the values of overlapping keys.

    Examples:
        >>> merge_objects([{"a": 1, "b": 2}, {"b": 3, "c": 5}])
        {'a': 1, 'b': 5, 'c': 5}
        >>> merge_objects([])
        {}
    """
    if not isinstance(objects, list):
        raise TypeError("merge_objects: input parameter should be a list")
    merged: dict[str, Any] = {}
    for obj in objects:
        for key, value in obj.items():
            merged[key] = merged[key] + value if key in merged else value
    return merged


def remove_properties(obj: dict[str, Any], keys: str | Iterable[str]) -> dict[str, Any]:
    """Delete *keys* from *obj* in place and return it.

    A single string is treated as one key. Missing keys are ignored.
    """
    if isinstance(keys, str):
        keys = [keys]
    for key in keys:
        obj.pop(key, None)
    return obj


def compare_objects(first: Mapping[str, Any], second: Mapping[str, Any]) -> bool:
    """Shallow equality: same key count and equal values per key."""
    if len(first) != len(second):
        return False
    return all(key in second and second[key] == value for key, value in first.items())


def is_empty_object(obj: Mapping[str, Any]) -> bool:
    return len(obj) == 0


def make_immutable(obj: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only view over a copy of *obj*.

    Item assignment and deletion on the result raise ``TypeError``.
    """
    return MappingProxyType(dict(obj))


def make_word(letters: Mapping[str, Iterable[int]]) -> str:
    """Build a word from letters mapped to the positions they occupy.

    Examples:
        >>> make_word({"a": [0, 1], "b": [2, 3], "c": [4, 5]})
        'aabbcc'
    """
    placed: dict[int, str] = {}
    for letter, positions in letters.items():
        for position in positions:
            placed[position] = letter
    return "".join(placed[i] for i in sorted(placed))
