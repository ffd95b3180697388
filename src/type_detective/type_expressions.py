from abc import ABC
from dataclasses import dataclass


class TypeExpression(ABC):
    def spans_lines(self) -> bool:
        return False


@dataclass(frozen=True)
class TPrimitive(TypeExpression):
    """Named primitive type, e.g. number, string or null"""

    name: str


@dataclass(frozen=True)
class TCallable(TypeExpression):
    """Zero-argument function returning unknown"""


@dataclass(frozen=True)
class TCircular(TypeExpression):
    """Placeholder for a container that has already been entered on the current path"""


@dataclass(frozen=True)
class TRecord(TypeExpression):
    """Object with arbitrary string, number or symbol keys, e.g. Record<string | number | symbol, never>"""

    value_type: TypeExpression


@dataclass(frozen=True)
class TArray(TypeExpression):
    element_type: TypeExpression

    def spans_lines(self) -> bool:
        return self.element_type.spans_lines()


@dataclass(frozen=True)
class TField:
    key: str
    value_type: TypeExpression
    optional: bool = False


@dataclass(frozen=True)
class TObject(TypeExpression):
    """Object block with per-key typing; depth is the indentation level of the closing brace"""

    fields: tuple[TField, ...]
    depth: int

    def spans_lines(self) -> bool:
        return True


@dataclass(frozen=True)
class TUnion(TypeExpression):
    """Union of several other types, rendered one member per line when multiline is set

    Member order is significant and preserved as given.
    """

    member_types: tuple[TypeExpression, ...]
    depth: int = 0
    multiline: bool = False

    def spans_lines(self) -> bool:
        return self.multiline or any(member.spans_lines() for member in self.member_types)


UNKNOWN = TPrimitive("unknown")
NEVER = TPrimitive("never")
EMPTY_ARRAY = TArray(UNKNOWN)
EMPTY_OBJECT = TRecord(NEVER)
ANY_OBJECT = TRecord(UNKNOWN)


def union_of(member_types: list[TypeExpression], depth: int = 0, multiline: bool = False) -> TypeExpression:
    """Union of the given members, simplified to the member itself when there's only one"""
    if len(member_types) == 1:
        return member_types[0]
    return TUnion(tuple(member_types), depth=depth, multiline=multiline)
