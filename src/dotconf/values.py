"""Nested tree values: freezing and string rendering."""

from __future__ import annotations

import datetime
import json
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Union

__all__ = ["Scalar", "NestedValue", "freeze_tree", "render_value"]

Scalar = Union[str, int, float, bool, None, datetime.date]
NestedValue = Union[Scalar, "tuple[NestedValue, ...]", "Mapping[str, NestedValue]"]


def _render_key(key: Any) -> str:
    # YAML allows non-string keys; dotted lookups only ever carry strings.
    return key if isinstance(key, str) else render_value(key)


def freeze_tree(value: Any) -> NestedValue:
    """Return a read-only deep copy of a decoded document value.

    Mappings become MappingProxyType views with string keys, lists
    become tuples and sets become frozensets. Scalars are returned as is.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({_render_key(k): freeze_tree(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_tree(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze_tree(v) for v in value)
    return value


def _json_default(obj: Any) -> Any:
    if isinstance(obj, Mapping):
        return dict(obj)
    if isinstance(obj, (datetime.date, datetime.time)):
        return obj.isoformat()
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=str)
    if isinstance(obj, bytes):
        return obj.decode("utf-8", errors="replace")
    return str(obj)


def render_value(value: Any) -> str:
    """Render a tree value the way it would be written in a document.

    Booleans and null use their document spelling, dates use ISO-8601,
    and mappings or sequences are printed as compact JSON.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return json.dumps(value, default=_json_default, ensure_ascii=False, separators=(",", ":"))
