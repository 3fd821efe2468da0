"""Parse a Go file and collect stub-ready interface methods."""

from pathlib import Path

from gostub.core.collector import InterfaceCollector
from gostub.logger import get_logger
from gostub.models import Method
from gostub.parser.go_parser import GoParser
from gostub.parser.resolver import DeclarationResolver

logger = get_logger(__name__)


def collect_source(
    content: str,
    filename: str = "<string>",
    empty_results: str | None = None,
) -> dict[str, tuple[Method, ...]]:
    """Collect interfaces from Go source held in memory."""
    source = GoParser().parse_string(content, filename)
    collector = InterfaceCollector(DeclarationResolver([source]), empty_results)
    return collector.collect(source)


def collect_file(
    path: Path | str,
    include_package_files: bool | None = None,
    empty_results: str | None = None,
) -> dict[str, tuple[Method, ...]]:
    """Collect interfaces from a Go file.

    Type declarations from the other files of the same package are indexed
    too, so named types declared there resolve to their underlying kinds.

    Args:
        path: Go source file.
        include_package_files: Overrides ``parser.include_package_files``.
        empty_results: Overrides ``generator.empty_results``.

    Returns:
        Interface name mapped to its methods in declaration order.
    """
    files = GoParser().parse_package(Path(path), include_package_files)
    collector = InterfaceCollector(DeclarationResolver(files), empty_results)
    result = collector.collect(files[0])
    logger.info("Collected file", path=str(path), interfaces=len(result))
    return result
