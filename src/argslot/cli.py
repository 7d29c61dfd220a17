"""Typer-based CLI for checking command lines against option declarations."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console

from argslot.core.declarations import build_manager, load_declarations
from argslot.core.registry import ArgumentManager
from argslot.logger import get_logger, setup_logger
from argslot.presentation.formatters import (
    build_values_table,
    format_errors_text,
    format_usage_text,
)

load_dotenv()

logger = get_logger("cli")
console = Console()

cli = typer.Typer(
    name="argslot",
    help="Check command lines against argslot option declarations",
    epilog="""
    Examples:
    $ argslot check options.json -- ./tool -o out.txt --count 3
    $ argslot usage options.json
    """,
    add_completion=False,
)


@cli.callback()
def main(
    log_level: str = typer.Option(
        os.getenv("ARGSLOT_LOG_LEVEL", "WARNING"),
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Write log records to stderr"),
) -> None:
    """Configure logging for every command."""
    setup_logger(log_level=log_level.upper(), console_output=verbose, exclusive=True)


def _load_manager(declarations: Path) -> ArgumentManager:
    try:
        return build_manager(load_declarations(declarations))
    except FileNotFoundError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=2)
    except json.JSONDecodeError as e:
        typer.echo(f"❌ Invalid JSON in {declarations}: {e}", err=True)
        raise typer.Exit(code=2)
    except ValidationError as e:
        typer.echo(f"❌ Invalid declarations in {declarations}:\n{e}", err=True)
        raise typer.Exit(code=2)


@cli.command()
def check(
    declarations: Path = typer.Argument(..., help="JSON file declaring the options"),
    tokens: Optional[List[str]] = typer.Argument(
        None, help="Command line to check, program path first (put it after --)"
    ),
) -> None:
    """Parse a command line and show the values and errors it produces."""
    manager = _load_manager(declarations)
    error_count = manager.parse(tokens or [])
    logger.info(f"Checked {len(tokens or [])} token(s) against {declarations}: {error_count} error(s)")

    if manager.help_requested():
        console.print(format_usage_text(manager.usage_sections()))

    console.print(build_values_table(manager))
    console.print(format_errors_text(manager.errors))

    if error_count > 0:
        raise typer.Exit(code=1)


@cli.command()
def usage(
    declarations: Path = typer.Argument(..., help="JSON file declaring the options"),
    binary: str = typer.Option("", "--binary", help="Binary name shown on the usage line"),
) -> None:
    """Print the plain-text usage described by a declarations file."""
    manager = _load_manager(declarations)
    if binary:
        manager.parse([binary])
    typer.echo(manager.usage(), nl=False)

    if manager.errors:
        typer.echo(manager.error_messages(), err=True, nl=False)
        raise typer.Exit(code=1)
