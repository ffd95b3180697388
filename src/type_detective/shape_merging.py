import itertools
import logging
from dataclasses import dataclass, field
from typing import Any

from . import inference
from .config import TypeDetectiveConfig
from .rendering import render
from .type_expressions import ANY_OBJECT, EMPTY_OBJECT, TArray, TCircular, TField, TObject, TypeExpression, union_of
from .utils import is_array_like, is_object_like, object_entries

logger = logging.getLogger(__name__)


@dataclass
class FieldAccumulator:
    """Types contributed for a single key by every merged object that has it"""

    candidate_types: list[TypeExpression] = field(default_factory=list)
    present_count: int = 0

    def merged_type(self, config: TypeDetectiveConfig) -> TypeExpression:
        return sorted_union(self.candidate_types, config)


def sorted_union(types: list[TypeExpression], config: TypeDetectiveConfig) -> TypeExpression:
    """Single-line union of distinct types, ordered alphabetically by their rendered text"""
    texts = {render(te, config): te for te in types}
    return union_of([texts[text] for text in sorted(texts)])


def merge_shapes(
    objects: list[Any],
    depth: int,
    config: TypeDetectiveConfig,
    _ancestors: frozenset[int] = frozenset(),
) -> TypeExpression:
    """Merges several objects into a single object type

    Keys are sorted; a key missing from some of the objects is marked optional, and its type
    is a union of everything observed for it.
    """
    if not objects:
        return ANY_OBJECT

    entries_by_object = [object_entries(obj) for obj in objects]
    all_keys = sorted(set(itertools.chain.from_iterable(entries_by_object)))
    if not all_keys:
        return EMPTY_OBJECT

    accumulators = {key: FieldAccumulator() for key in all_keys}
    for key, accumulator in accumulators.items():
        for obj, entries in zip(objects, entries_by_object):
            if key not in entries:
                continue
            accumulator.candidate_types.extend(
                _contributed_type(item, depth + 1, config, _ancestors | {id(obj)}) for item in entries[key]
            )
            accumulator.present_count += 1

    return TObject(
        tuple(
            TField(key, accumulator.merged_type(config), optional=accumulator.present_count < len(objects))
            for key, accumulator in accumulators.items()
        ),
        depth,
    )


def merge_object(value: Any, depth: int, config: TypeDetectiveConfig, ancestors: frozenset[int]) -> TypeExpression:
    """Object type built through the merger from a single object, i.e. with sorted keys"""
    if id(value) in ancestors:
        logger.debug("Circular reference to %s at depth %d", type(value).__qualname__, depth)
        return TCircular()
    return merge_shapes([value], depth, config, ancestors)


def _contributed_type(value: Any, depth: int, config: TypeDetectiveConfig, ancestors: frozenset[int]) -> TypeExpression:
    if (
        is_array_like(value)
        and value
        and id(value) not in ancestors
        and all(is_object_like(item) and id(item) not in ancestors for item in value)
    ):
        return TArray(merge_shapes(list(value), depth, config, ancestors | {id(value)}))
    if is_object_like(value):
        return merge_object(value, depth, config, ancestors)
    return inference.infer_expression(value, depth, config, ancestors)
