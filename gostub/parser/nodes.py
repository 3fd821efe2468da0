"""Declaration tree consumed by the stub generator.

Every type expression shape is its own frozen dataclass so the core can
dispatch on the concrete class. The front end in ``go_parser`` builds these
from tree-sitter output; tests build them by hand.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol, runtime_checkable


class ChanDir(Enum):
    """Channel direction."""

    BOTH = "both"
    SEND = "send"
    RECV = "recv"


@dataclass(frozen=True)
class Ident:
    """Simple type name.

    ``package`` is set when the identifier is the member of a qualified
    name, so a resolver can look it up without the enclosing selector.
    """

    name: str
    package: str | None = None


@dataclass(frozen=True)
class SelectorExpr:
    """Qualified name such as ``context.Context``."""

    qualifier: "Expr"
    member: Ident


@dataclass(frozen=True)
class StarExpr:
    elem: "Expr"


@dataclass(frozen=True)
class ArrayType:
    """Slice (``length is None``) or fixed-size array."""

    elem: "Expr"
    length: str | None = None


@dataclass(frozen=True)
class MapType:
    key: "Expr"
    value: "Expr"


@dataclass(frozen=True)
class Field:
    """One entry of a parameter, result or interface method list.

    ``names`` is empty for unnamed parameters and embedded elements.
    """

    names: tuple[str, ...]
    type: "Expr"
    line: int = 0


@dataclass(frozen=True)
class FuncType:
    params: tuple[Field, ...] = ()
    results: tuple[Field, ...] = ()


@dataclass(frozen=True)
class ChanType:
    value: "Expr"
    direction: ChanDir = ChanDir.BOTH


@dataclass(frozen=True)
class StructType:
    pass


@dataclass(frozen=True)
class InterfaceType:
    methods: tuple[Field, ...] = ()


@dataclass(frozen=True)
class VariadicType:
    """Variadic parameter type ``...T``."""

    elem: "Expr"


@dataclass(frozen=True)
class BadExpr:
    """Type shape the front end could not map to any other variant."""

    source_kind: str
    text: str = ""


Expr = (
    Ident
    | SelectorExpr
    | StarExpr
    | ArrayType
    | MapType
    | FuncType
    | ChanType
    | StructType
    | InterfaceType
    | VariadicType
    | BadExpr
)


@dataclass(frozen=True)
class TypeSpec:
    """``type Name T`` or, with ``alias`` set, ``type Name = T``."""

    name: str
    type: Expr
    alias: bool = False
    line: int = 0


@dataclass(frozen=True)
class SourceFile:
    """Root of the declaration tree for one Go file."""

    package: str
    decls: tuple[TypeSpec, ...] = ()
    path: Path | None = None
    imports: dict[str, str] = field(default_factory=dict, compare=False)


class UnderlyingKind(Enum):
    """Resolved underlying classification of a named type."""

    BOOL = "bool"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    UINTPTR = "uintptr"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    COMPLEX64 = "complex64"
    COMPLEX128 = "complex128"
    STRING = "string"
    OTHER = "other"

    @property
    def is_numeric(self) -> bool:
        return self not in (
            UnderlyingKind.BOOL,
            UnderlyingKind.STRING,
            UnderlyingKind.OTHER,
        )


@runtime_checkable
class TypeResolver(Protocol):
    """Answers the underlying kind of an identifier.

    Returns ``None`` when the kind cannot be determined.
    """

    def resolved_underlying_kind(self, ident: Ident) -> UnderlyingKind | None: ...
