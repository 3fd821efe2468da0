"""Underlying-kind resolution over parsed Go declarations."""

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Final

from gostub.config import settings
from gostub.logger import get_logger
from gostub.parser.nodes import (
    BadExpr,
    Expr,
    Ident,
    SelectorExpr,
    SourceFile,
    TypeSpec,
    UnderlyingKind,
)
from gostub.utils.exceptions import ConfigurationError

logger = get_logger(__name__)

# Go's predeclared type identifiers
PREDECLARED: Final = MappingProxyType(
    {
        "bool": UnderlyingKind.BOOL,
        "int": UnderlyingKind.INT,
        "int8": UnderlyingKind.INT8,
        "int16": UnderlyingKind.INT16,
        "int32": UnderlyingKind.INT32,
        "int64": UnderlyingKind.INT64,
        "uint": UnderlyingKind.UINT,
        "uint8": UnderlyingKind.UINT8,
        "uint16": UnderlyingKind.UINT16,
        "uint32": UnderlyingKind.UINT32,
        "uint64": UnderlyingKind.UINT64,
        "uintptr": UnderlyingKind.UINTPTR,
        "byte": UnderlyingKind.UINT8,
        "rune": UnderlyingKind.INT32,
        "float32": UnderlyingKind.FLOAT32,
        "float64": UnderlyingKind.FLOAT64,
        "complex64": UnderlyingKind.COMPLEX64,
        "complex128": UnderlyingKind.COMPLEX128,
        "string": UnderlyingKind.STRING,
        "error": UnderlyingKind.OTHER,
        "any": UnderlyingKind.OTHER,
        "comparable": UnderlyingKind.OTHER,
    }
)


def load_qualified_kinds() -> dict[str, dict[str, UnderlyingKind]]:
    """Read ``resolver.qualified_kinds`` into a lookup keyed by import path."""
    table: dict[str, dict[str, UnderlyingKind]] = {}
    for import_path, members in settings.resolver.qualified_kinds.items():
        kinds: dict[str, UnderlyingKind] = {}
        for name, kind in members.items():
            try:
                kinds[str(name)] = UnderlyingKind(str(kind).lower())
            except ValueError as e:
                msg = f"Unknown underlying kind {kind!r} for {import_path}.{name}"
                raise ConfigurationError(
                    msg,
                    details={"import_path": str(import_path), "name": str(name)},
                ) from e
        table[str(import_path)] = kinds
    return table


class DeclarationResolver:
    """Resolves identifiers against the type declarations of a package.

    Named types and aliases are followed until they reach a predeclared
    type or a composite shape. Qualified names are looked up in a table of
    known foreign types keyed by import path. Anything else is unresolved
    and answered with ``None``.
    """

    def __init__(
        self,
        files: Sequence[SourceFile],
        qualified_kinds: Mapping[str, Mapping[str, UnderlyingKind]] | None = None,
    ) -> None:
        self._decls: dict[str, TypeSpec] = {}
        self._imports: dict[str, str] = {}
        for source in files:
            for decl in source.decls:
                self._decls.setdefault(decl.name, decl)
            for local, path in source.imports.items():
                self._imports.setdefault(local, path)

        if qualified_kinds is None:
            qualified_kinds = load_qualified_kinds()
        self.qualified_kinds = qualified_kinds

    def resolved_underlying_kind(self, ident: Ident) -> UnderlyingKind | None:
        return self._resolve(ident, frozenset())

    def _resolve(self, ident: Ident, seen: frozenset[str]) -> UnderlyingKind | None:
        if ident.package is not None:
            return self._resolve_qualified(ident)

        if ident.name in seen:
            logger.warning("Cyclic type declaration", name=ident.name)
            return None

        # Package-level declarations shadow predeclared names
        decl = self._decls.get(ident.name)
        if decl is None:
            return PREDECLARED.get(ident.name)
        return self._kind_of(decl.type, seen | {ident.name})

    def _kind_of(self, expr: Expr, seen: frozenset[str]) -> UnderlyingKind | None:
        if isinstance(expr, Ident):
            return self._resolve(expr, seen)
        if isinstance(expr, SelectorExpr):
            return self._resolve(expr.member, seen)
        if isinstance(expr, BadExpr):
            return None
        return UnderlyingKind.OTHER

    def _resolve_qualified(self, ident: Ident) -> UnderlyingKind | None:
        import_path = self._imports.get(ident.package, ident.package)
        kind = self.qualified_kinds.get(import_path, {}).get(ident.name)
        if kind is None:
            logger.debug(
                "Unknown qualified type", import_path=import_path, name=ident.name
            )
        return kind
