"""
Frontier command implementation.

Thin wrapper around FrontierService that handles CLI argument parsing
and delegates the work to the service layer.
"""
from typing import List, Optional

import typer

from transitive_frontier.core.service import FrontierService


def frontier_command(
    workspace: Optional[str] = typer.Argument(
        None, help="Workspace to run cargo metadata in. Defaults to the current directory."
    ),
    package_id: str = typer.Option(
        ..., "-p", "--package-id",
        help="Substring of the package id to run on. Must match exactly one package in the graph.",
    ),
    skip: Optional[List[str]] = typer.Option(
        None, "-s", "--skip", help="Skip links into packages whose id contains this substring (repeatable)."
    ),
    fmt: Optional[str] = typer.Option(
        None, "-f", "--format", help="Output format: toml, json, yaml or html. Defaults to toml."
    ),
    output: Optional[str] = typer.Option(None, "-o", "--output", help="Write the report to this file"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    manifest_path: Optional[str] = typer.Option(None, "--manifest-path", help="Path to Cargo.toml"),
    metadata_file: Optional[str] = typer.Option(
        None, "--metadata-file", help="Read a saved `cargo metadata` JSON document instead of running cargo"
    ),
    debug: bool = typer.Option(False, "-d", "--debug", help="Activate debug logging (via stderr)"),
):
    """Report where transitive dependencies on a package cross the workspace boundary."""

    service = FrontierService()
    exit_code, _ = service.execute(
        package_id=package_id,
        workspace=workspace,
        skip=skip,
        fmt=fmt,
        output=output,
        config_path=config_path,
        manifest_path=manifest_path,
        metadata_file=metadata_file,
        debug=debug,
    )

    if exit_code != 0:
        raise typer.Exit(code=exit_code)
