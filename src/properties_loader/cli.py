"""Command-line interface for properties-loader."""

import logging
from enum import Enum
from importlib.metadata import version
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .exceptions import PropertiesError
from .loader import load_file
from .output import build_table, generate_json, generate_yaml, validate_yaml
from .reader import DEFAULT_ENCODING

console = Console()
error_console = Console(stderr=True)


class OutputFormat(str, Enum):
    """Supported output formats."""

    TABLE = "table"
    YAML = "yaml"
    JSON = "json"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        pkg_version = version("properties-loader")
        console.print(f"properties-loader version {pkg_version}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send the package's debug logging to stderr through rich."""
    package_logger = logging.getLogger("properties_loader")
    if not verbose:
        package_logger.setLevel(logging.WARNING)
        return
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=error_console, show_path=False, show_time=False)
        )


def main(
    file: Annotated[
        Path,
        typer.Argument(help="Path to the .properties file"),
    ],
    keys: Annotated[
        list[str] | None,
        typer.Option(
            "--key",
            "-k",
            help="Only print this key (can be repeated)",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    encoding: Annotated[
        str,
        typer.Option(
            "--encoding",
            "-e",
            help="Encoding of the file's raw bytes",
            envvar="PROPERTIES_LOADER_ENCODING",
        ),
    ] = DEFAULT_ENCODING,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Log loading details to stderr",
        ),
    ] = False,
    version_flag: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Load a Java .properties file and print its decoded properties."""
    configure_logging(verbose)

    try:
        properties = load_file(file, encoding=encoding)
    except (OSError, PropertiesError, UnicodeDecodeError, LookupError) as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    if keys:
        missing = [k for k in keys if k not in properties]
        if missing:
            error_console.print(
                f"[red]Error:[/red] Key(s) not found: {escape(', '.join(missing))}"
            )
            raise typer.Exit(1)
        selected = {k: properties[k] for k in keys}
    else:
        selected = dict(properties)

    if output_format is OutputFormat.YAML:
        result = generate_yaml(selected, source_path=file)
        is_valid, validation_error = validate_yaml(result)
        if not is_valid:
            error_console.print(f"[red]Error:[/red] {escape(validation_error or '')}")
            raise typer.Exit(1)
        typer.echo(result, nl=False)
    elif output_format is OutputFormat.JSON:
        typer.echo(generate_json(selected))
    else:
        console.print(build_table(selected, title=file.name))


def app() -> None:
    """Entry point for the CLI application."""
    typer.run(main)


if __name__ == "__main__":
    app()
