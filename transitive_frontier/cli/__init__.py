"""
CLI module for transitive-frontier.

Thin typer layer over FrontierService.
"""
from transitive_frontier.cli.app import app as _app

# Export app function for pyproject.toml entry point
def app():
    """Entry point function for pyproject.toml scripts."""
    _app()

__all__ = ['app']
