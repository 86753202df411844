"""
Find command implementation.

Thin wrapper around FinderService that handles CLI argument parsing
and delegates business logic to the service layer.
"""
import re
import sys
from typing import Optional

import typer

from transdep.core.finder_service import FinderService


def validate_filter(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    try:
        re.compile(value)
    except re.error as e:
        raise typer.BadParameter(f"not a valid regular expression: {e}")
    return value


def find_command(
    path: str = typer.Argument(".", help="Project, solution, assets file or directory to analyse"),
    collate_all: bool = typer.Option(False, "-a", "--all", help="Also list direct dependencies"),
    name_filter: Optional[str] = typer.Option(
        None, "-f", "--filter", help="Only list dependencies whose name matches this regex",
        callback=validate_filter,
    ),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    output: Optional[str] = typer.Option(None, "-o", "--output", help="Write a JSON report to this file"),
    restore: bool = typer.Option(False, "--restore", help="Run 'dotnet restore' before reading assets files"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Classify project dependencies and show the transitive ones."""

    # Delegate to service layer
    finder_service = FinderService()
    exit_code = finder_service.execute_find(
        path=path,
        collate_all=collate_all,
        name_filter=name_filter,
        config_path=config_path,
        output=output,
        restore=restore,
        verbose=verbose,
    )

    # Exit with appropriate code
    if exit_code != 0:
        sys.exit(exit_code)
