import logging
import numbers
from enum import Enum
from typing import Any, Optional

from . import array_unification
from .config import Mode, TypeDetectiveConfig, get_config
from .rendering import render
from .type_expressions import (
    EMPTY_ARRAY,
    EMPTY_OBJECT,
    UNKNOWN,
    TCallable,
    TCircular,
    TField,
    TObject,
    TPrimitive,
    TypeExpression,
    union_of,
)
from .utils import UNDEFINED, array_elements, deduplicate, is_array_like, is_object_like, object_entries

logger = logging.getLogger(__name__)

# integers beyond this can't be represented exactly by a JS number
MAX_SAFE_INTEGER = 2**53 - 1


def resolve_config(config: Optional[TypeDetectiveConfig] = None, mode: Optional[Mode] = None) -> TypeDetectiveConfig:
    """Takes a single config snapshot for the whole inference call"""
    config = config or get_config()
    if mode is not None:
        config = config.updated(mode=mode)
    return config


def infer_expression(
    value: Any,
    depth: int,
    config: TypeDetectiveConfig,
    _ancestors: frozenset[int] = frozenset(),
) -> TypeExpression:
    # simple basic types
    if value is None:
        return TPrimitive("null")
    if value is UNDEFINED:
        return TPrimitive("undefined")
    if isinstance(value, bool):
        return TPrimitive("boolean")
    if isinstance(value, Enum) or type(value) is object:
        return TPrimitive("symbol")
    if isinstance(value, int):
        return TPrimitive("number" if abs(value) <= MAX_SAFE_INTEGER else "bigint")
    if isinstance(value, numbers.Number):
        return TPrimitive("number")
    if isinstance(value, str):
        return TPrimitive("string")

    # containers with recursion
    if is_object_like(value) or is_array_like(value):
        if id(value) in _ancestors:
            logger.debug("Circular reference to %s at depth %d", type(value).__qualname__, depth)
            return TCircular()
        ancestors = _ancestors | {id(value)}
        if is_object_like(value):
            return _infer_object(value, depth, config, ancestors)
        return _infer_array(array_elements(value), depth, config, ancestors)

    if callable(value):
        return TCallable()

    # opaque value as a fallback
    return UNKNOWN


def _infer_object(value: Any, depth: int, config: TypeDetectiveConfig, ancestors: frozenset[int]) -> TypeExpression:
    # keys colliding after string coercion get a union of their value types
    field_types = {
        key: union_of(
            deduplicate(
                (infer_expression(item, depth + 1, config, ancestors) for item in items),
                key=lambda te: render(te, config),
            )
        )
        for key, items in object_entries(value).items()
    }
    if not field_types:
        return EMPTY_OBJECT
    return TObject(tuple(TField(key, value_type) for key, value_type in field_types.items()), depth)


def _infer_array(
    elements: list[Any], depth: int, config: TypeDetectiveConfig, ancestors: frozenset[int]
) -> TypeExpression:
    if not elements:
        return EMPTY_ARRAY
    if all(is_array_like(element) for element in elements):
        kind = array_unification.ArrayKind.ARRAYS
    elif all(is_object_like(element) and id(element) not in ancestors for element in elements):
        kind = array_unification.ArrayKind.OBJECTS
    else:
        kind = array_unification.ArrayKind.MIXED
    return array_unification.unify_array(elements, depth, config, kind, ancestors)


def infer_type(
    value: Any,
    indent_level: int = 0,
    mode: Optional[Mode] = None,
    config: Optional[TypeDetectiveConfig] = None,
) -> str:
    """Infers a TypeScript type for the value and renders it as text

    indent_level only affects the indentation of multi-line output. Mode and the rest of settings
    are taken from the process-wide config unless passed explicitly.
    """
    config = resolve_config(config, mode)
    return render(infer_expression(value, indent_level, config), config)


def detect_type(
    value: Any,
    indent_level: int = 0,
    mode: Optional[Mode] = None,
    config: Optional[TypeDetectiveConfig] = None,
) -> str:
    """Alias for infer_type"""
    return infer_type(value, indent_level, mode, config)
