"""Output formatters for parsed lockfiles."""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..core.models import LockfileDocument
from ..utils.logging import get_logger


class ConsoleFormatter:
    """Rich console formatter for lockfile documents."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the console formatter.

        Args:
            console: Rich console instance
        """
        self.console = console or Console()
        self.logger = get_logger("ConsoleFormatter")

    def format_document(
        self,
        document: LockfileDocument,
        source: Optional[Path] = None,
        parse_time: Optional[float] = None,
        limit: Optional[int] = None
    ) -> None:
        """Display a summary panel followed by the package table.

        Args:
            document: Parsed lockfile document
            source: Path the document was read from
            parse_time: Time taken to parse in seconds
            limit: Maximum number of table rows to show
        """
        self.console.print(self._create_summary_panel(document, source, parse_time))

        if not document.packages:
            self.console.print(Panel("No packages found", style="yellow"))
            return

        self.console.print(self._create_packages_table(document, limit))

    def _create_summary_panel(
        self,
        document: LockfileDocument,
        source: Optional[Path],
        parse_time: Optional[float]
    ) -> Panel:
        edges = sum(entry.dependency_sets.total() for entry in document.packages.values())
        missing_versions = sum(1 for entry in document.packages.values() if entry.version is None)

        lines = [
            f"• Format: {document.lockfile_format.value}",
            f"• Ecosystem: {document.ecosystem.value} (version {document.ecosystem_version})",
            f"• Packages: {len(document.packages)}",
            f"• Dependency edges: {edges}",
            f"• Packages without version: {missing_versions}",
        ]
        if parse_time is not None:
            lines.append(f"• Parse time: {parse_time:.3f}s")

        title = f"Parsed {source.name}" if source else "Parsed lockfile"
        return Panel("\n".join(lines), title=title, style="green")

    def _create_packages_table(self, document: LockfileDocument, limit: Optional[int]) -> Table:
        table = Table(title="Packages")

        table.add_column("Key", style="cyan", overflow="fold", min_width=20)
        table.add_column("Version", style="green")
        table.add_column("Deps", justify="right")
        table.add_column("Dev", justify="right")
        table.add_column("Optional", justify="right")
        table.add_column("Peer", justify="right")
        table.add_column("Integrity", style="dim", overflow="ellipsis", max_width=24)

        items = list(document.packages.items())
        for key, entry in items[:limit] if limit else items:
            sets = entry.dependency_sets
            table.add_row(
                key or "(root)",
                entry.version or "-",
                str(len(sets.dependencies)),
                str(len(sets.dev_dependencies)),
                str(len(sets.optional_dependencies)),
                str(len(sets.peer_dependencies)),
                entry.integrity or "-",
            )

        if limit and len(items) > limit:
            table.caption = f"Showing {limit} of {len(items)} packages"

        return table

    def format_error(self, message: str, title: Optional[str] = None) -> None:
        """Display an error message.

        Args:
            message: Error message
            title: Optional panel title
        """
        self.console.print(Panel(escape(message), title=title or "Error", style="red"))


class JSONFormatter:
    """JSON formatter for lockfile documents."""

    def __init__(self, output_file: Optional[Path] = None) -> None:
        """Initialize the JSON formatter.

        Args:
            output_file: Optional output file path
        """
        self.output_file = output_file
        self.logger = get_logger("JSONFormatter")

    def format_document(self, document: LockfileDocument) -> Dict[str, Any]:
        """Convert a document to a JSON-ready dictionary."""
        return document.to_dict()

    def dumps(self, results: Dict[str, Any]) -> str:
        """Serialize results to an indented JSON string."""
        return json.dumps(results, indent=2, ensure_ascii=False, default=str)

    def save_results(
        self,
        results: Dict[str, Any],
        output_file: Optional[Path] = None
    ) -> None:
        """Save results to a JSON file.

        Args:
            results: Results dictionary
            output_file: Output file path (uses instance default if None)
        """
        file_path = output_file or self.output_file
        if not file_path:
            raise ValueError("No output file specified")

        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(self.dumps(results))

            self.logger.info(f"Results saved to {file_path}")
        except IOError as e:
            self.logger.error(f"Failed to save results to {file_path}: {e}")
            raise
