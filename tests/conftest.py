"""Shared pytest fixtures and configuration."""

from pathlib import Path

import pytest

from gostub.core.collector import InterfaceCollector
from gostub.parser.go_parser import GoParser
from gostub.parser.nodes import Ident, UnderlyingKind
from gostub.parser.resolver import PREDECLARED


class StubResolver:
    """Resolver backed by a plain mapping.

    Keys are bare names for local types and ``pkg.Name`` for qualified ones.
    Unknown names resolve to ``None``.
    """

    def __init__(self, kinds: dict[str, UnderlyingKind] | None = None) -> None:
        self.kinds: dict[str, UnderlyingKind] = {**PREDECLARED, **(kinds or {})}
        self.queries: list[Ident] = []

    def resolved_underlying_kind(self, ident: Ident) -> UnderlyingKind | None:
        self.queries.append(ident)
        key = f"{ident.package}.{ident.name}" if ident.package else ident.name
        return self.kinds.get(key)


def split_top_level(text: str) -> list[str]:
    """Split on commas that are not nested in brackets, braces or parens."""
    if not text:
        return []
    parts, depth, current = [], 0, []
    for ch in text:
        if ch in "([{":
            depth += 1
        elif ch in ")]}":
            depth -= 1
        if ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    parts.append("".join(current).strip())
    return parts


@pytest.fixture
def stub_resolver() -> StubResolver:
    """Resolver that knows predeclared types plus a few named ones."""
    return StubResolver(
        {
            "Value": UnderlyingKind.OTHER,
            "Celsius": UnderlyingKind.FLOAT64,
            "Kelvin": UnderlyingKind.FLOAT64,
            "Name": UnderlyingKind.STRING,
            "Flag": UnderlyingKind.BOOL,
            "context.Context": UnderlyingKind.OTHER,
            "time.Duration": UnderlyingKind.INT64,
        }
    )


@pytest.fixture
def collector(stub_resolver: StubResolver) -> InterfaceCollector:
    """Collector with the stub resolver and the blank empty-results policy."""
    return InterfaceCollector(stub_resolver, empty_results="blank")


@pytest.fixture
def go_parser() -> GoParser:
    """Create Go parser fixture."""
    return GoParser()


@pytest.fixture
def store_source() -> str:
    """Go file declaring two interfaces and the types they use."""
    return """package store

import (
	"context"
	stdtime "time"
)

type Celsius float64

type Value struct {
	Data []byte
}

type Key = string

type Store interface {
	Get(key string) (Value, bool)
	Do(context.Context, map[string]int) error
	Sum(int, int, int) int
	Temp() Celsius
	Watch(ctx context.Context, keys ...string) (<-chan Value, error)
	TTL(Key) stdtime.Duration
	Close()
}

type Reader interface {
	Read(p []byte) (n int, err error)
}
"""


@pytest.fixture
def store_file(tmp_path: Path, store_source: str) -> Path:
    """Write the store source into a temporary package directory."""
    path = tmp_path / "store.go"
    path.write_text(store_source)
    return path


@pytest.fixture
def split_fields():
    """Comma splitter that respects nesting."""
    return split_top_level
