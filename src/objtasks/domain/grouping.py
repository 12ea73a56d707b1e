"""Sorting and multimap grouping over lists of records."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def sort_cities_array(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Sort records by country, then city, case-insensitively, in place.

    Returns the same list for chaining.
    """
    items.sort(key=lambda item: (item["country"].upper(), item["city"].upper()))
    return items


def group(
    items: Iterable[Any],
    key_selector: Callable[[Any], K],
    value_selector: Callable[[Any], V],
) -> dict[K, list[V]]:
    """Build a multimap of selected keys to selected values.

    Keys keep first-seen order; values keep item order.

    Examples:
        >>> rows = [{"country": "Belarus", "city": "Brest"},
        ...         {"country": "Russia", "city": "Omsk"},
        ...         {"country": "Belarus", "city": "Grodno"}]
        >>> group(rows, lambda r: r["country"], lambda r: r["city"])
        {'Belarus': ['Brest', 'Grodno'], 'Russia': ['Omsk']}
    """
    result: dict[K, list[V]] = {}
    for item in items:
        result.setdefault(key_selector(item), []).append(value_selector(item))
    return result
