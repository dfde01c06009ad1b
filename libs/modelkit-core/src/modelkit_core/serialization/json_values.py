"""Convert parsed JSON trees into read-only native values."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


def to_native(value: Any, *, narrow_integral_numbers: bool = False) -> Any:
    """Convert a decoded JSON value into immutable native values.

    Objects become read-only mappings and arrays become tuples. Strings, booleans
    and ``None`` pass through. Numbers keep their decoded type unless
    *narrow_integral_numbers* is set, in which case floats with no fractional
    part collapse to ``int`` (``2.0`` -> ``2``). The narrowing is lossy and only
    meant for consumers that expect it.

    >>> to_native({"a": [1, 2.0]})["a"]
    (1, 2.0)
    >>> to_native({"a": [1, 2.0]}, narrow_integral_numbers=True)["a"]
    (1, 2)
    """
    if isinstance(value, Mapping):
        return to_map(value, narrow_integral_numbers=narrow_integral_numbers)
    if isinstance(value, (list, tuple)):
        return to_list(value, narrow_integral_numbers=narrow_integral_numbers)
    if isinstance(value, bool) or value is None or isinstance(value, str):
        return value
    if isinstance(value, float):
        if narrow_integral_numbers and value.is_integer():
            return int(value)
        return value
    if isinstance(value, int):
        return value
    raise TypeError(f"Unsupported JSON value of type {type(value).__name__}: {value!r}")


def to_map(obj: Mapping[str, Any], *, narrow_integral_numbers: bool = False) -> Mapping[str, Any]:
    """Convert a JSON object into a read-only mapping."""
    return MappingProxyType(
        {str(k): to_native(v, narrow_integral_numbers=narrow_integral_numbers) for k, v in obj.items()}
    )


def to_list(array: list[Any] | tuple[Any, ...], *, narrow_integral_numbers: bool = False) -> tuple[Any, ...]:
    """Convert a JSON array into a tuple."""
    return tuple(to_native(v, narrow_integral_numbers=narrow_integral_numbers) for v in array)
