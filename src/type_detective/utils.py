import collections.abc
import dataclasses
import json
import re
from collections.abc import Callable, Hashable, Iterable
from typing import Any, Optional, TypeVar

ItemT = TypeVar("ItemT")

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_INDEX_RE = re.compile(r"^(0|[1-9][0-9]*)$")


class _Undefined:
    """Marker for a value that is explicitly absent, i.e. JS undefined"""

    _instance: Optional["_Undefined"] = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


def deduplicate(items: Iterable[ItemT], key: Optional[Callable[[ItemT], Hashable]] = None) -> list[ItemT]:
    """Removes repeated items, keeping the first occurrence of each

    With a key function, items are considered repeated when their keys are equal.
    """
    if key is None:
        return list(dict.fromkeys(items))
    unique: dict[Hashable, ItemT] = {}
    for item in items:
        unique.setdefault(key(item), item)
    return list(unique.values())


def is_object_like(value: Any) -> bool:
    return isinstance(value, collections.abc.Mapping) or (
        dataclasses.is_dataclass(value) and not isinstance(value, type)
    )


def is_array_like(value: Any) -> bool:
    return isinstance(value, collections.abc.Collection) and not isinstance(
        value, (str, bytes, bytearray, collections.abc.Mapping)
    )


def object_entries(value: Any) -> dict[str, list[Any]]:
    """Values of an object-like value grouped by key coerced to string, keys in their natural order

    Distinct keys with the same string form, e.g. 1 and "1", end up in the same group. A dataclass
    field that has never been assigned maps to UNDEFINED.
    """
    entries: dict[str, list[Any]] = {}
    if isinstance(value, collections.abc.Mapping):
        for key, item in value.items():
            entries.setdefault(str(key), []).append(item)
    else:
        for field in dataclasses.fields(value):
            entries[field.name] = [getattr(value, field.name, UNDEFINED)]
    return entries


def _stable_order_key(item: Any) -> tuple[str, str]:
    return type(item).__qualname__, repr(item)


def array_elements(value: Any) -> list[Any]:
    """Elements of an array-like value; unordered collections are put in a stable order first"""
    if isinstance(value, collections.abc.Set):
        return sorted(value, key=_stable_order_key)
    return list(value)


def to_property_key(key: str) -> str:
    if _IDENTIFIER_RE.match(key) or _INDEX_RE.match(key):
        return key
    return json.dumps(key, ensure_ascii=False)
