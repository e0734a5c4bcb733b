"""
Main CLI application for transitive-frontier.

Defines the Typer application; the single command is invoked directly.
"""
import typer

from transitive_frontier.cli.commands.frontier import frontier_command


app = typer.Typer(
    help=(
        "Given a package id substring and workspace root, find all graph links "
        "where dependencies on that package are introduced into the workspace."
    ),
    add_completion=False,
)

app.command("frontier")(frontier_command)
