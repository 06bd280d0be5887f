"""Main CLI interface for Locksmith."""

import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ..core.detector import detect_lockfile_format
from ..core.dispatch import parse_lockfile_as
from ..core.models import LockfileFormat
from ..exceptions import LocksmithError
from ..output.formatters import ConsoleFormatter, JSONFormatter
from ..utils.logging import setup_logging, get_logger
from ..utils.path_utils import LOCKFILE_NAMES, LockfileLocator

app = typer.Typer(
    name="locksmith",
    help="Detect and normalize npm, Yarn and pnpm lockfiles",
    add_completion=False
)

console = Console()
logger = get_logger("CLI")


def _resolve_lockfile(path: Path, locator: LockfileLocator) -> Path:
    """Return the lockfile for PATH, searching it when PATH is a directory."""
    if path.is_dir():
        return locator.find(path)
    if not path.exists():
        raise LocksmithError(f"Path does not exist: {path}")
    return path


@app.command()
def detect(
    path: Path = typer.Argument(..., help="Lockfile or project directory")
) -> None:
    """Print the detected format of a lockfile."""
    locator = LockfileLocator()
    try:
        lockfile = _resolve_lockfile(path, locator)
        text = locator.read(lockfile)
    except (LocksmithError, OSError) as e:
        ConsoleFormatter(console).format_error(str(e))
        raise typer.Exit(1)

    detected = detect_lockfile_format(text)
    console.print(f"{lockfile}: {detected.value}")

    if detected is LockfileFormat.UNKNOWN:
        raise typer.Exit(1)


@app.command()
def parse(
    path: Path = typer.Argument(
        Path("."),
        help="Lockfile or project directory to parse"
    ),
    lockfile_format: Optional[LockfileFormat] = typer.Option(
        None,
        "--format",
        "-f",
        help="Skip detection and parse as this format"
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the normalized document as JSON"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file for the JSON document"
    ),
    limit: int = typer.Option(
        50,
        "--limit",
        help="Maximum number of packages shown in the table (0 for all)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    )
) -> None:
    """Parse a lockfile and show its normalized packages."""
    setup_logging(verbose=verbose)

    locator = LockfileLocator()
    try:
        lockfile = _resolve_lockfile(path, locator)
        text = locator.read(lockfile)

        start_time = time.perf_counter()
        document = parse_lockfile_as(text, lockfile_format or LockfileFormat.UNKNOWN)
        parse_time = time.perf_counter() - start_time
    except (LocksmithError, OSError) as e:
        logger.error(f"Parse failed: {type(e).__name__}: {escape(str(e))}")
        ConsoleFormatter(console).format_error(str(e), title=type(e).__name__)
        raise typer.Exit(1)

    json_formatter = JSONFormatter(output)
    if output:
        json_formatter.save_results(json_formatter.format_document(document))

    if as_json:
        typer.echo(json_formatter.dumps(json_formatter.format_document(document)))
        return

    ConsoleFormatter(console).format_document(
        document,
        source=lockfile,
        parse_time=parse_time,
        limit=limit or None
    )


@app.command()
def info() -> None:
    """Show Locksmith information."""
    console.print(Panel.fit(
        "[bold blue]Locksmith[/bold blue]\n"
        "Normalizes npm, Yarn Classic, Yarn Berry and pnpm lockfiles\n"
        "into a single package model",
        title="Information"
    ))

    formats = [f.value for f in LockfileFormat if f is not LockfileFormat.UNKNOWN]
    console.print(f"\n[bold]Supported Formats:[/bold] {', '.join(formats)}")
    console.print(f"[bold]Lockfile Names:[/bold] {', '.join(LOCKFILE_NAMES)}")


def main() -> None:
    """Main entry point for Locksmith CLI."""
    app()


if __name__ == "__main__":
    main()
