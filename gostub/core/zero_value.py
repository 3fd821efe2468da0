"""Zero-value expressions for Go types."""

from gostub.logger import get_logger
from gostub.parser.nodes import (
    ArrayType,
    ChanType,
    Expr,
    FuncType,
    Ident,
    InterfaceType,
    MapType,
    SelectorExpr,
    StarExpr,
    StructType,
    TypeResolver,
    UnderlyingKind,
    VariadicType,
)
from gostub.utils.exceptions import UnresolvedTypeError

logger = get_logger(__name__)

NIL = "nil"

# Shapes whose zero value never depends on what they point at
_NIL_SHAPES = (
    StarExpr,
    ArrayType,
    MapType,
    FuncType,
    ChanType,
    StructType,
    InterfaceType,
    VariadicType,
)


class ZeroValueResolver:
    """Derives the default value of a type from its underlying kind.

    The surface spelling of a named type says nothing about its zero value,
    so simple names are always looked up through the resolver.
    """

    def __init__(self, resolver: TypeResolver) -> None:
        self.resolver = resolver

    def zero_value(self, expr: Expr) -> str:
        if isinstance(expr, _NIL_SHAPES):
            return NIL
        if isinstance(expr, SelectorExpr):
            return self.zero_value(expr.member)
        if isinstance(expr, Ident):
            return self._builtin_zero_value(expr)
        return NIL

    def _builtin_zero_value(self, ident: Ident) -> str:
        kind = self.resolver.resolved_underlying_kind(ident)
        if kind is None:
            spelled = f"{ident.package}.{ident.name}" if ident.package else ident.name
            msg = f"Cannot resolve underlying type of {spelled}"
            raise UnresolvedTypeError(msg, identifier=spelled)

        logger.debug("Resolved underlying kind", ident=ident.name, kind=kind.value)
        if kind.is_numeric:
            return "0"
        if kind is UnderlyingKind.BOOL:
            return "false"
        if kind is UnderlyingKind.STRING:
            return '""'
        return NIL
