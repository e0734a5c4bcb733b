import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler


def is_ci_environment():
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not sys.stderr.isatty()
    )


def get_console() -> Console:
    """Detect environment and create a stderr console; stdout carries the report."""
    if is_ci_environment():
        # CI/automated environment - no colors, no interactive elements
        return Console(stderr=True, force_terminal=False, no_color=True)
    # Interactive terminal - full Rich capabilities
    return Console(stderr=True)


def configure_logging(level: str = "WARNING", console: Console = None) -> None:
    """Route package logging through a RichHandler on ``console``."""
    handler = RichHandler(
        console=console or get_console(),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("transitive_frontier")
    package_logger.handlers = [handler]
    package_logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    package_logger.propagate = False
