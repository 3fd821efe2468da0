"""Go stub generator CLI."""

import json
import sys
from pathlib import Path

import click

from gostub.config import EMPTY_RESULTS_POLICIES
from gostub.generator import collect_file
from gostub.logger import setup_logging
from gostub.models import Method
from gostub.utils.exceptions import GoStubError


def format_text(result: dict[str, tuple[Method, ...]]) -> str:
    """One Go-like line per method."""
    lines = []
    for interface, methods in result.items():
        for method in methods:
            head = f"{interface}.{method.name}({method.param.full_fields})"
            if method.ret.signature_text:
                head += f" {method.ret.signature_text}"
            if method.ret.default_values:
                lines.append(f"{head} {{ return {method.ret.default_values} }}")
            else:
                lines.append(f"{head} {{}}")
    return "\n".join(lines)


def format_json(result: dict[str, tuple[Method, ...]]) -> str:
    payload = {
        interface: [method.model_dump(by_alias=True) for method in methods]
        for interface, methods in result.items()
    }
    return json.dumps(payload, indent=2)


@click.group()
def cli() -> None:
    """Go interface stub generator CLI."""


@cli.command()
@click.argument(
    "file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="json",
    help="Output format",
)
@click.option(
    "--empty-results",
    type=click.Choice(list(EMPTY_RESULTS_POLICIES)),
    default=None,
    help="How to treat methods without results",
)
@click.option(
    "--package-files/--no-package-files",
    default=None,
    help="Index type declarations from the rest of the package",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default=None,
    help="Logging level",
)
def collect(
    file: Path,
    output_format: str,
    empty_results: str | None,
    package_files: bool | None,
    log_level: str | None,
) -> None:
    """Print normalized method signatures for every interface in FILE."""
    if log_level:
        setup_logging(log_level, force=True)

    try:
        result = collect_file(
            file,
            include_package_files=package_files,
            empty_results=empty_results,
        )
    except GoStubError as e:
        click.echo(f"Error: {e.message}", err=True)
        for key, value in e.details.items():
            click.echo(f"  {key}: {value}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(format_json(result))
    else:
        click.echo(format_text(result))


if __name__ == "__main__":
    cli()
