"""Parameter names derived from type shapes.

Unnamed parameters get a name built from their rendered type:
``context.Context`` becomes ``ctx``, ``int`` becomes ``ival``, ``[]string``
becomes ``strvals`` and ``map[string]int`` becomes ``ivalmap``. Repeated
stems within one parameter list are numbered ``x, x0, x1, ...``.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

# Predeclared type names mapped to the stem used instead of the keyword
RESERVED: Final = MappingProxyType(
    {
        "bool": "bval",
        "int": "ival",
        "int8": "i8val",
        "int16": "i16val",
        "int32": "i32val",
        "int64": "i64val",
        "uint": "uival",
        "uint8": "ui8val",
        "uint16": "ui16val",
        "uint32": "ui32val",
        "uint64": "ui64val",
        "float32": "f32val",
        "float64": "f64val",
        "complex64": "cmplx64val",
        "complex128": "cmplx128val",
        "string": "strval",
        "struct{}": "structval",
        "interface{}": "ifaceval",
    }
)


@dataclass(frozen=True)
class CompositePrefix:
    """Leading marker of a composite type and the suffix it contributes.

    Bracketed markers (``[]``, ``map[``) take the stem of the text after
    their closing bracket; the others take the text right after the marker.
    """

    marker: str
    suffix: str
    bracketed: bool = False


COMPOSITE_PREFIXES: Final = (
    CompositePrefix("[]", "s", bracketed=True),
    CompositePrefix("map[", "map", bracketed=True),
    CompositePrefix("...", "s"),
    CompositePrefix("*", ""),
    CompositePrefix("<-chan ", "ch"),
    CompositePrefix("chan<- ", "ch"),
    CompositePrefix("chan ", "ch"),
)

FUNC_MARKER: Final = "func("
FUNC_STEM: Final = "fn"

CONTEXT_TYPE: Final = "context"
CONTEXT_STEM: Final = "ctx"

GO_KEYWORDS: Final = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)

KEYWORD_SUFFIX: Final = "val"
FALLBACK_STEM: Final = "arg"


def _is_composite(lower: str) -> bool:
    return lower.startswith(FUNC_MARKER) or any(
        lower.startswith(p.marker) for p in COMPOSITE_PREFIXES
    )


def first_step(lower: str) -> str:
    """Reduce a qualified name to its member; composites are left alone."""
    if _is_composite(lower):
        return lower
    _, sep, member = lower.partition(".")
    if sep:
        return CONTEXT_STEM if member == CONTEXT_TYPE else member
    return lower


def _closing_bracket(text: str, start: int) -> int:
    """Index of the ``]`` matching the ``[`` at ``start``, or -1."""
    depth = 0
    for i in range(start, len(text)):
        if text[i] == "[":
            depth += 1
        elif text[i] == "]":
            depth -= 1
            if depth == 0:
                return i
    return -1


def make_stem(lower: str) -> str:
    """Derive the identifier stem of a case-folded type text."""
    ident = first_step(lower)
    if ident in RESERVED:
        return RESERVED[ident]
    if ident.startswith(FUNC_MARKER):
        return FUNC_STEM

    for prefix in COMPOSITE_PREFIXES:
        if not ident.startswith(prefix.marker):
            continue
        if prefix.bracketed:
            idx = _closing_bracket(ident, prefix.marker.index("["))
            if idx == -1:
                break
            rest = ident[idx + 1 :]
        else:
            rest = ident[len(prefix.marker) :]
        return make_stem(rest) + prefix.suffix
    return ident


def make_ident_name(type_text: str) -> str:
    """Turn a rendered type into a valid Go identifier stem."""
    stem = make_stem(type_text.lower())
    stem = "".join(ch for ch in stem if ch.isalnum() or ch == "_")
    if not stem or stem[0].isdigit():
        stem = FALLBACK_STEM + stem
    if stem in GO_KEYWORDS:
        stem += KEYWORD_SUFFIX
    return stem


class NameSynthesizer:
    """Hands out collision-free names within a single parameter list.

    The first use of a stem is returned bare; later uses get a counter
    starting at 0. Create a new instance for every parameter list.
    """

    def __init__(self) -> None:
        self._counters: dict[str, int] = {}

    def synthesize(self, type_text: str) -> str:
        stem = make_ident_name(type_text)
        if stem not in self._counters:
            self._counters[stem] = 0
            return stem

        name = f"{stem}{self._counters[stem]}"
        self._counters[stem] += 1
        return name
