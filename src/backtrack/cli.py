"""Backtrack CLI: inspect and compare Typst milestone versions."""

import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

from backtrack import __version__

from .config import load_config, write_config_template
from .constants import ALL_MILESTONES, CONFIG_FILENAME
from .errors import BacktrackError
from .logging import configure_logging
from .models import Version
from .output import OutputContext, version_record
from .selection import MilestoneSelection
from .versions import get_milestone, latest_milestone_at_or_below

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"backtrack {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="backtrack",
    help="Inspect and compare Typst versions across release eras",
    no_args_is_help=True,
)

# Global output context
_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Get the current output context."""
    if _ctx is None:
        return OutputContext(Console(soft_wrap=True))
    return _ctx


def _fail(message: str) -> NoReturn:
    get_output_context().error(message)
    raise typer.Exit(1)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Backtrack CLI - Typst version identity."""
    global _ctx
    configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
    )
    _ctx = OutputContext(
        console=Console(no_color=no_color, soft_wrap=True), json_mode=json_output
    )


# ============================================================================
# backtrack list
# ============================================================================


@app.command("list")
def list_milestones(
    selection: str = typer.Argument(
        ALL_MILESTONES, help="'*' or comma-separated milestone names"
    ),
) -> None:
    """List catalogued milestones in release order."""
    ctx = get_output_context()
    try:
        rows = MilestoneSelection.parse(selection).resolve()
    except BacktrackError as e:
        _fail(str(e))
    ctx.milestone_table(rows)


# ============================================================================
# backtrack show
# ============================================================================


@app.command()
def show(name: str = typer.Argument(..., help="Milestone name, e.g. v0.8.0")) -> None:
    """Show one milestone's display form, components and order key."""
    ctx = get_output_context()
    try:
        version = get_milestone(name)
    except BacktrackError as e:
        _fail(str(e))
    record = version_record(name, version)
    ctx.result(
        record,
        f"[bold]{name}[/bold] ({version.kind})\n"
        f"  display:    {version.displayable}\n"
        f"  components: {', '.join(str(part) for part in version.observable)}\n"
        f"  order key:  {version.cmpable}",
    )


# ============================================================================
# backtrack compare
# ============================================================================


def _relation(left: Version, right: Version) -> str:
    if left < right:
        return "<"
    if left > right:
        return ">"
    return "=="


@app.command()
def compare(
    left: str = typer.Argument(..., help="First milestone name"),
    right: str = typer.Argument(..., help="Second milestone name"),
) -> None:
    """Compare two milestones in release order."""
    ctx = get_output_context()
    try:
        left_version = get_milestone(left)
        right_version = get_milestone(right)
    except BacktrackError as e:
        _fail(str(e))
    relation = _relation(left_version, right_version)
    ctx.result(
        {"left": left, "right": right, "relation": relation},
        f"{left} {relation} {right}",
    )


# ============================================================================
# backtrack check
# ============================================================================


@app.command()
def check(
    config_dir: Path = typer.Option(
        Path("."),
        "--config-dir",
        "-c",
        help=f"Directory containing {CONFIG_FILENAME}",
    ),
    current: str | None = typer.Option(
        None,
        "--current",
        help="Milestone name to use as the current version instead of the config",
    ),
) -> None:
    """Report which selected milestones the current version has reached."""
    ctx = get_output_context()
    try:
        config = load_config(config_dir)
        current_version = get_milestone(current) if current else config.current
        if current_version is None:
            _fail(f"No current version: pass --current or set [current] in {CONFIG_FILENAME}")
        rows = config.selection.selection().resolve()
    except BacktrackError as e:
        _fail(str(e))

    # Config output settings only ever switch JSON/color on top of the CLI flags
    if config.output.json_output and not ctx.json_mode:
        ctx = OutputContext(console=ctx.console, json_mode=True)
    if not config.output.color:
        ctx.console.no_color = True

    reached = [name for name, version in rows if version <= current_version]
    pending = [name for name, version in rows if version > current_version]
    latest = latest_milestone_at_or_below(current_version)
    logger.debug(f"Current version order key: {current_version.cmpable}")

    lines = [f"Current version: [bold]{current_version.displayable}[/bold]"]
    if latest is not None:
        lines.append(f"Latest milestone reached: {latest[0]}")
    lines.append(f"Reached: {', '.join(reached) or '-'}")
    lines.append(f"Not reached: {', '.join(pending) or '-'}")
    ctx.result(
        {
            "current": version_record(None, current_version),
            "latest": latest[0] if latest else None,
            "reached": reached,
            "pending": pending,
        },
        "\n".join(lines),
    )


# ============================================================================
# backtrack init
# ============================================================================


@app.command()
def init(
    directory: Path = typer.Argument(Path("."), help="Directory to write the config into"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
) -> None:
    """Write a starter backtrack.toml."""
    ctx = get_output_context()
    if (directory / CONFIG_FILENAME).exists() and not force:
        _fail(f"{directory / CONFIG_FILENAME} already exists (use --force to overwrite)")
    if not directory.is_dir():
        _fail(f"{directory} is not a directory")
    path = write_config_template(directory)
    ctx.result({"config": str(path)}, f"[green]Wrote {path}[/green]")


if __name__ == "__main__":
    app()
