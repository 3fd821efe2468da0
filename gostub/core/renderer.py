"""Canonical text rendering of Go type expressions."""

from collections.abc import Sequence

from gostub.logger import get_logger
from gostub.parser.nodes import (
    ArrayType,
    BadExpr,
    ChanDir,
    ChanType,
    Expr,
    Field,
    FuncType,
    Ident,
    InterfaceType,
    MapType,
    SelectorExpr,
    StarExpr,
    StructType,
    VariadicType,
)

logger = get_logger(__name__)

# Rendered in place of shapes with no canonical form
ABSENT = "nil"


def render(expr: Expr) -> str:
    """Render a type expression the way it would be spelled in a signature."""
    if isinstance(expr, Ident):
        return expr.name
    if isinstance(expr, SelectorExpr):
        return render(expr.qualifier) + "." + expr.member.name
    if isinstance(expr, StarExpr):
        return "*" + render(expr.elem)
    if isinstance(expr, ArrayType):
        return "[]" + render(expr.elem)
    if isinstance(expr, MapType):
        return "map[" + render(expr.key) + "]" + render(expr.value)
    if isinstance(expr, FuncType):
        head = "func(" + render_types(expr.params) + ")"
        if not expr.results:
            return head
        return head + " " + render_signature(expr.results)
    if isinstance(expr, ChanType):
        if expr.direction is ChanDir.RECV:
            prefix = "<-chan "
        elif expr.direction is ChanDir.SEND:
            prefix = "chan<- "
        else:
            prefix = "chan "
        return prefix + render(expr.value)
    if isinstance(expr, StructType):
        return "struct{}"
    if isinstance(expr, InterfaceType):
        return "interface{}"
    if isinstance(expr, VariadicType):
        return "..." + render(expr.elem)

    source_kind = expr.source_kind if isinstance(expr, BadExpr) else type(expr).__name__
    logger.warning("Unrenderable type shape", source_kind=source_kind)
    return ABSENT


def expand(fields: Sequence[Field]) -> list[tuple[str | None, Expr]]:
    """Flatten a field list into one ``(name, type)`` slot per declared name.

    ``a, b int`` becomes two slots; an unnamed field is one slot with no name.
    """
    slots: list[tuple[str | None, Expr]] = []
    for f in fields:
        if f.names:
            slots.extend((name, f.type) for name in f.names)
        else:
            slots.append((None, f.type))
    return slots


def render_types(fields: Sequence[Field]) -> str:
    """Comma-joined types of a field list, one entry per slot."""
    return ", ".join(render(expr) for _, expr in expand(fields))


def render_signature(fields: Sequence[Field]) -> str:
    """Render a result list as the return clause of a signature.

    More than one slot is parenthesized, as is a single named result.
    An empty list renders as an empty string.
    """
    slots = expand(fields)
    parts = [
        f"{name} {render(expr)}" if name else render(expr) for name, expr in slots
    ]
    # A lone named result is parenthesized too; `func() err error` does not parse
    if len(parts) > 1 or (parts and slots[0][0]):
        return "(" + ", ".join(parts) + ")"
    return "".join(parts)
