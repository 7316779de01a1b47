"""Output formatting for the backtrack CLI."""

import json
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import Version


@dataclass
class OutputContext:
    """Context for output formatting."""

    console: Console
    json_mode: bool = False

    def print(self, message: str, style: str | None = None) -> None:
        """Print message respecting output mode."""
        if not self.json_mode:
            self.console.print(message, style=style)

    def print_json(self, data: Any) -> None:
        """Print JSON data."""
        if self.json_mode:
            print(json.dumps(data, indent=2, default=str))

    def result(self, data: Any, message: str = "") -> None:
        """Print result in appropriate format."""
        if self.json_mode:
            self.print_json(data)
        elif message:
            self.console.print(message)

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print error in appropriate format."""
        if self.json_mode:
            self.print_json({"error": message, **(data or {})})
        else:
            self.console.print(f"[red]Error: {escape(message)}[/red]")

    def milestone_table(self, rows: list[tuple[str, Version]], title: str = "Milestones") -> None:
        """Print milestones as a table, or as a JSON list in json mode."""
        if self.json_mode:
            self.print_json([version_record(name, version) for name, version in rows])
            return
        table = Table(title=title)
        table.add_column("Name")
        table.add_column("Kind")
        table.add_column("Version")
        table.add_column("Components")
        for name, version in rows:
            table.add_row(
                name,
                version.kind,
                version.displayable,
                ", ".join(str(part) for part in version.observable),
            )
        self.console.print(table)


def version_record(name: str | None, version: Version) -> dict[str, Any]:
    """JSON-ready description of a version."""
    return {
        "name": name,
        "kind": version.kind,
        "displayable": version.displayable,
        "observable": list(version.observable),
        "cmpable": list(version.cmpable),
    }
