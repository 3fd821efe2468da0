"""Collect normalized method signatures from interface declarations."""

from collections.abc import Sequence

from gostub.config import EMPTY_RESULTS_POLICIES, settings
from gostub.core.naming import NameSynthesizer
from gostub.core.renderer import expand, render, render_signature
from gostub.core.zero_value import ZeroValueResolver
from gostub.logger import get_logger
from gostub.models import Interface, Method, Param, Return
from gostub.parser.nodes import (
    Field,
    FuncType,
    InterfaceType,
    SourceFile,
    TypeResolver,
    TypeSpec,
)
from gostub.utils.exceptions import (
    ConfigurationError,
    GoStubError,
    MalformedSignatureError,
)

logger = get_logger(__name__)


def make_param(fields: Sequence[Field]) -> Param:
    """Build the three aligned projections of a parameter list."""
    synthesizer = NameSynthesizer()
    full_fields: list[str] = []
    names: list[str] = []
    types: list[str] = []

    for name, expr in expand(fields):
        type_text = render(expr)
        if name is None:
            name = synthesizer.synthesize(type_text)
        full_fields.append(f"{name} {type_text}")
        names.append(name)
        types.append(type_text)

    return Param(
        full_fields=", ".join(full_fields),
        names_only=", ".join(names),
        types_only=", ".join(types),
    )


class InterfaceCollector:
    """Walks a declaration tree and builds one Method per interface method.

    Args:
        resolver: Answers underlying kinds for zero-value resolution.
        empty_results: ``"blank"`` renders methods without results as an
            empty signature, ``"error"`` rejects them. Defaults to the
            ``generator.empty_results`` setting.
    """

    def __init__(
        self,
        resolver: TypeResolver,
        empty_results: str | None = None,
    ) -> None:
        policy = empty_results or settings.generator.empty_results
        if policy not in EMPTY_RESULTS_POLICIES:
            msg = f"Unknown empty results policy: {policy}"
            raise ConfigurationError(msg, details={"empty_results": policy})
        self.empty_results = policy
        self.zero_values = ZeroValueResolver(resolver)

    def collect(self, source: SourceFile) -> dict[str, tuple[Method, ...]]:
        """Map interface names to their methods; a later duplicate name wins."""
        result: dict[str, tuple[Method, ...]] = {}
        for interface in self.collect_interfaces(source):
            if interface.name in result:
                logger.warning(
                    "Duplicate interface declaration", interface=interface.name
                )
            result[interface.name] = interface.methods
        return result

    def collect_interfaces(self, source: SourceFile) -> list[Interface]:
        """Return every interface declaration in source order."""
        collected: list[Interface] = []
        for decl in source.decls:
            collected = self._visit(decl, collected)
        logger.info(
            "Collected interfaces",
            package=source.package,
            path=str(source.path) if source.path else None,
            count=len(collected),
        )
        return collected

    def _visit(self, decl: TypeSpec, collected: list[Interface]) -> list[Interface]:
        if not isinstance(decl.type, InterfaceType):
            return collected
        return [*collected, self._collect_interface(decl.name, decl.type)]

    def _collect_interface(self, name: str, iface: InterfaceType) -> Interface:
        log = logger.bind(interface=name)
        methods: list[Method] = []

        for f in iface.methods:
            if not isinstance(f.type, FuncType):
                log.debug("Skipping embedded element", line=f.line)
                continue

            method_name = f.names[0] if len(f.names) == 1 else None
            try:
                if method_name is None:
                    msg = f"Method element carries {len(f.names)} names, expected 1"
                    raise MalformedSignatureError(msg)
                methods.append(self._make_method(method_name, f.type))
            except GoStubError as e:
                e.add_context(interface=name, method=method_name, line=f.line or None)
                log.error(
                    "Failed to build method",
                    method=method_name,
                    error=e.message,
                    code=e.code,
                )
                raise

        log.debug("Collected interface", methods=len(methods))
        return Interface(name=name, methods=tuple(methods))

    def _make_method(self, name: str, func: FuncType) -> Method:
        logger.debug("Building method", method=name)
        return Method(
            name=name,
            param=make_param(func.params),
            ret=self.make_return(func),
        )

    def make_return(self, func: FuncType) -> Return:
        """Build the return clause and its aligned zero values."""
        if not func.results and self.empty_results == "error":
            msg = "Method declares no results"
            raise MalformedSignatureError(msg)

        values = [
            self.zero_values.zero_value(expr) for _, expr in expand(func.results)
        ]
        return Return(
            signature_text=render_signature(func.results),
            default_values=", ".join(values),
        )
