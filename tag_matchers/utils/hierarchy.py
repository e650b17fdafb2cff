"""
Helpers for naming hierarchies.

A naming hierarchy describes the attribute path behind a form input, e.g.
``{"user": "birthday"}`` or ``["user", "birthday"]`` for ``user[birthday]``.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, List, Sequence


def flatten_hierarchy(value: Any) -> List[str]:
    """Flatten a naming hierarchy into an ordered list of string segments.

    Mappings contribute each key followed by the flattened value, so outer
    segments always come before inner ones. Lists and tuples are flattened
    item by item. ``None`` contributes nothing. Anything else is a single
    segment.

    Args:
        value: The hierarchy to flatten

    Returns:
        List[str]: A new list of segments; ``value`` is never modified

    Example:
        >>> flatten_hierarchy([{"user": {"address": "city"}}])
        ['user', 'address', 'city']
    """
    segments: List[str] = []
    _flatten_into(value, segments)
    return segments


def _flatten_into(value: Any, segments: List[str]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, nested in value.items():
            _flatten_into(key, segments)
            _flatten_into(nested, segments)
        return
    if isinstance(value, (str, bytes)):
        segments.append(_segment(value))
        return
    if isinstance(value, (list, tuple)):
        for item in value:
            _flatten_into(item, segments)
        return
    segments.append(_segment(value))


def _segment(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def build_input_name(segments: Sequence[str]) -> str:
    """Join segments the way Rails form helpers name inputs.

    ``["user", "birthday(1i)"]`` becomes ``"user[birthday(1i)]"``.
    """
    if not segments:
        return ""
    first, *rest = segments
    return str(first) + "".join(f"[{segment}]" for segment in rest)
