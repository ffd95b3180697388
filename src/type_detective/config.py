import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    """How arrays of objects are combined: one merged shape or a union of observed shapes"""

    MERGE = "merge"
    UNION = "union"


class IndentType(str, Enum):
    SPACE = "space"
    TAB = "tab"


class ArrayStyle(str, Enum):
    """Array type syntax: T[] (postfix) or Array<T> (generic)"""

    POSTFIX = "postfix"
    GENERIC = "generic"


@dataclass(frozen=True)
class TypeDetectiveConfig:
    mode: Mode = Mode.MERGE
    indent: int = 2
    indent_type: IndentType = IndentType.SPACE
    array_style: ArrayStyle = ArrayStyle.POSTFIX

    @property
    def computed_indent(self) -> str:
        return ("\t" if self.indent_type == IndentType.TAB else " ") * self.indent

    def indentation(self, depth: int) -> str:
        return self.computed_indent * depth

    def updated(self, **options: Any) -> "TypeDetectiveConfig":
        """Returns a copy with valid options applied; invalid or unknown options are ignored"""
        changes: dict[str, Any] = {}
        for name, value in options.items():
            validated = _validate_option(name, value)
            if validated is None:
                logger.debug("Ignoring config option %s=%r", name, value)
            else:
                changes[name] = validated
        return dataclasses.replace(self, **changes)


def _enum_member(enum_type: type[Enum], value: Any) -> Any:
    try:
        return enum_type(value)
    except ValueError:
        return None


def _validate_option(name: str, value: Any) -> Any:
    if name == "indent":
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return value
        return None
    if name == "mode":
        return _enum_member(Mode, value)
    if name == "indent_type":
        return _enum_member(IndentType, value)
    if name == "array_style":
        return _enum_member(ArrayStyle, value)
    return None


_current_config = TypeDetectiveConfig()


def configure(**options: Any) -> None:
    """Replaces process-wide defaults used by calls that don't pass an explicit config

    Recognised options are mode, indent, indent_type and array_style; anything unrecognised
    or invalid is silently dropped and the previous value is kept.
    """
    global _current_config
    _current_config = _current_config.updated(**options)


def get_config() -> TypeDetectiveConfig:
    return _current_config
