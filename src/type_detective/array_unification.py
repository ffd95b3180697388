from enum import Enum
from typing import Any

from . import inference, shape_merging
from .config import Mode, TypeDetectiveConfig
from .rendering import render
from .type_expressions import TArray, TUnion, TypeExpression, union_of
from .utils import deduplicate, is_object_like


class ArrayKind(Enum):
    """Array classification done by the caller, based on element kinds"""

    ARRAYS = "arrays"
    OBJECTS = "objects"
    MIXED = "mixed"


def unify_array(
    elements: list[Any],
    depth: int,
    config: TypeDetectiveConfig,
    kind: ArrayKind,
    _ancestors: frozenset[int] = frozenset(),
) -> TypeExpression:
    """Array type for a non-empty list of elements of the given kind"""
    if kind == ArrayKind.ARRAYS:
        return _unify_arrays(elements, depth, config, _ancestors)
    elif kind == ArrayKind.OBJECTS:
        return _unify_objects(elements, depth, config, _ancestors)
    else:
        return _unify_mixed(elements, depth, config, _ancestors)


def unwrap_array(te: TypeExpression) -> list[TypeExpression]:
    """Element types of an array type with one level of array removed; non-array types are kept as is"""
    if not isinstance(te, TArray):
        return [te]
    if isinstance(te.element_type, TUnion):
        return list(te.element_type.member_types)
    return [te.element_type]


def _distinct_shapes(
    elements: list[Any], depth: int, config: TypeDetectiveConfig, ancestors: frozenset[int]
) -> TypeExpression:
    """Union of distinct element types in order of first appearance, one per line if any spans lines

    A single distinct shape is inferred again at the array's own depth, so that it's indented as
    a plain element type rather than a union member.
    """
    element_types = deduplicate(
        (inference.infer_expression(element, depth + 1, config, ancestors) for element in elements),
        key=lambda te: render(te, config),
    )
    if len(element_types) == 1:
        return inference.infer_expression(elements[0], depth, config, ancestors)
    return TUnion(
        tuple(element_types),
        depth=depth,
        multiline=any(element_type.spans_lines() for element_type in element_types),
    )


def _unify_arrays(
    elements: list[Any], depth: int, config: TypeDetectiveConfig, ancestors: frozenset[int]
) -> TypeExpression:
    if config.mode == Mode.UNION:
        distinct = _distinct_shapes(elements, depth, config, ancestors)
        if distinct.spans_lines():
            return TArray(distinct)
        sub_array_types = distinct.member_types if isinstance(distinct, TUnion) else (distinct,)
    else:
        sub_array_types = tuple(
            inference.infer_expression(element, depth + 1, config, ancestors) for element in elements
        )

    element_types = [
        element_type for sub_array_type in sub_array_types for element_type in unwrap_array(sub_array_type)
    ]
    return TArray(TArray(shape_merging.sorted_union(element_types, config)))


def _unify_objects(
    elements: list[Any], depth: int, config: TypeDetectiveConfig, ancestors: frozenset[int]
) -> TypeExpression:
    if config.mode == Mode.MERGE:
        return TArray(shape_merging.merge_shapes(elements, depth, config, ancestors))
    return TArray(_distinct_shapes(elements, depth, config, ancestors))


def _unify_mixed(
    elements: list[Any], depth: int, config: TypeDetectiveConfig, ancestors: frozenset[int]
) -> TypeExpression:
    element_types: list[TypeExpression] = []
    for element in elements:
        if config.mode == Mode.MERGE and is_object_like(element):
            element_types.append(shape_merging.merge_object(element, depth + 1, config, ancestors))
        else:
            element_types.append(inference.infer_expression(element, depth + 1, config, ancestors))
    # unlike merged object fields, members keep the order they were first seen in
    return TArray(union_of(deduplicate(element_types, key=lambda te: render(te, config))))
