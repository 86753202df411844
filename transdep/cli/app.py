"""
Main CLI application for transdep.

Defines the Typer application structure and command routing.
"""
from importlib import metadata

import typer

from transdep.cli.commands.find import find_command


# Initialize Typer app
app = typer.Typer(help="transdep - find the transitive NuGet dependencies of .NET projects")

# Register commands
app.command("find", help="Classify project dependencies and show the transitive ones.")(find_command)


@app.command("version", help="Show the installed transdep version.")
def version_command():
    try:
        version = metadata.version("transdep")
    except metadata.PackageNotFoundError:
        version = "unknown"
    typer.echo(f"transdep {version}")


# Add callback to make find the default command when no subcommand is specified
@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """transdep - transitive dependency finder.

    Run 'transdep find PATH' to list the transitive dependencies of the
    projects under PATH.
    """
    if ctx.invoked_subcommand is None:
        # Default to find on the current directory
        ctx.invoke(
            find_command,
            path=".",
            collate_all=False,
            name_filter=None,
            config_path=None,
            output=None,
            restore=False,
            verbose=False,
        )
