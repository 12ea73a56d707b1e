"""JSON round-trip helpers and the Rectangle exercise."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")

_COMPACT = (",", ":")


@dataclass
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def _default(obj: Any) -> Any:
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return compact JSON for *obj*; plain objects are dumped by attributes.

    Examples:
        >>> get_json([1, 2, 3])
        '[1,2,3]'
        >>> get_json(Rectangle(10, 20))
        '{"width":10,"height":20}'
    """
    return json.dumps(obj, separators=_COMPACT, default=_default)


def from_json(cls: type[T], text: str) -> T:
    """Build an instance of *cls* from a JSON object without calling ``__init__``.

    The parsed keys become instance attributes, so methods of *cls* work on
    the result.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    instance = cls.__new__(cls)
    instance.__dict__.update(data)
    return instance
