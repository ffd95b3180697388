import re

from .config import ArrayStyle, TypeDetectiveConfig
from .type_expressions import (
    EMPTY_OBJECT,
    TArray,
    TCallable,
    TCircular,
    TObject,
    TPrimitive,
    TRecord,
    TUnion,
    TypeExpression,
)
from .utils import to_property_key


def capitalize_first_letter(s: str) -> str:
    if s:
        return s[0].capitalize() + s[1:]
    else:
        return s


def new_type_name(name: str) -> str:
    """Turns an arbitrary string into a PascalCase identifier usable as a type alias name"""
    name = "".join([capitalize_first_letter(m.group()) for m in re.finditer(r"[A-Za-z0-9]+", name)])
    if not name:
        return "GeneratedType"
    if not name.isidentifier():
        name = "_" + name
    return name


def generate_type_declaration(type_name: str, type_text: str) -> str:
    return f"export type {type_name} = {type_text};\n"


def _needs_parentheses(element: TypeExpression) -> bool:
    # only needed before a postfix [] suffix
    return isinstance(element, (TUnion, TCallable, TRecord))


def _render_array(te: TArray, config: TypeDetectiveConfig) -> str:
    element = te.element_type
    if isinstance(element, TUnion) and element.multiline:
        body = config.indentation(element.depth + 1) + render(element, config)
        closing_indent = config.indentation(element.depth)
        if config.array_style == ArrayStyle.GENERIC:
            return f"Array<\n{body}\n{closing_indent}>"
        return f"(\n{body}\n{closing_indent})[]"

    element_text = render(element, config)
    if config.array_style == ArrayStyle.GENERIC:
        return f"Array<{element_text}>"
    if _needs_parentheses(element):
        return f"({element_text})[]"
    return f"{element_text}[]"


def render(te: TypeExpression, config: TypeDetectiveConfig) -> str:
    """Text of a type expression under the given settings

    Nodes are immutable, so the text is kept on the node and reused when the same subtree is
    rendered again, e.g. while sorting and deduplicating unions on every level of a merge.
    """
    if not isinstance(te, TypeExpression):
        return _render_uncached(te, config)
    rendered_by_config = te.__dict__.setdefault("_rendered_text", {})
    if config not in rendered_by_config:
        rendered_by_config[config] = _render_uncached(te, config)
    return rendered_by_config[config]


def _render_uncached(te: TypeExpression, config: TypeDetectiveConfig) -> str:
    if isinstance(te, TPrimitive):
        return te.name
    elif isinstance(te, TCallable):
        return "() => unknown"
    elif isinstance(te, TCircular):
        return "/* circular */ unknown"
    elif isinstance(te, TRecord):
        return f"Record<string | number | symbol, {render(te.value_type, config)}>"
    elif isinstance(te, TArray):
        return _render_array(te, config)
    elif isinstance(te, TUnion):
        if te.multiline:
            separator = " |\n" + config.indentation(te.depth + 1)
        else:
            separator = " | "
        return separator.join(render(member, config) for member in te.member_types)
    elif isinstance(te, TObject):
        if not te.fields:
            return render(EMPTY_OBJECT, config)
        field_indent = config.indentation(te.depth + 1)
        lines = ["{"]
        for field in te.fields:
            optional_marker = "?" if field.optional else ""
            lines.append(
                f"{field_indent}{to_property_key(field.key)}{optional_marker}: {render(field.value_type, config)};"
            )
        lines.append(config.indentation(te.depth) + "}")
        return "\n".join(lines)

    raise RuntimeError(f"Can't render type expression {te!r}")
