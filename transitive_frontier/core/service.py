"""
Frontier service implementation.

Runs the whole workflow behind the CLI: configuration, graph loading, target
resolution, frontier resolution and rendering.
"""
import logging
from typing import Iterable, Optional, Tuple

from transitive_frontier.config_validator import ConfigValidator
from transitive_frontier.core.config_manager import ConfigManager
from transitive_frontier.core.predicate import skip_predicate
from transitive_frontier.core.resolver import FrontierResolver
from transitive_frontier.core.target import resolve_target
from transitive_frontier.graph.cargo_metadata import DEFAULT_TIMEOUT, load_package_graph
from transitive_frontier.graph.package_graph import PackageGraph
from transitive_frontier.models import FrontierReport
from transitive_frontier.output.formatters import render, write_report
from transitive_frontier.rich_utils.ui_helpers import configure_logging, get_console
from transitive_frontier.utils.exceptions import (
    AmbiguousTargetError,
    ConfigurationError,
    FrontierError,
)

logger = logging.getLogger(__name__)


class FrontierService:
    """Concrete implementation of the frontier workflow."""

    def __init__(self, console=None):
        self.config_manager = ConfigManager()
        self.validator = ConfigValidator()
        self.console = console or get_console()

    def initialize(
        self,
        config_path: Optional[str],
        skip: Optional[Iterable[str]] = None,
        fmt: Optional[str] = None,
        output: Optional[str] = None,
        manifest_path: Optional[str] = None,
        metadata_file: Optional[str] = None,
        debug: bool = False,
    ) -> dict:
        """Load, merge and validate configuration, then set up logging."""
        config = self.config_manager.discover_and_load_config(config_path)
        config = self.config_manager.merge_config_and_args(
            config,
            skip=skip,
            fmt=fmt,
            output=output,
            manifest_path=manifest_path,
            metadata_file=metadata_file,
            debug=debug,
        )

        errors = self.validator.validate_config(config)
        if errors:
            raise ConfigurationError("Invalid configuration", errors)

        configure_logging(config["logging"].get("level", "WARNING"), self.console)
        return config

    def load_graph(self, config: dict, workspace: Optional[str]) -> PackageGraph:
        cargo_config = config.get("cargo", {})
        return load_package_graph(
            workspace=workspace,
            manifest_path=cargo_config.get("manifest_path"),
            metadata_file=cargo_config.get("metadata_file"),
            cargo=cargo_config.get("command") or "cargo",
            extra_args=cargo_config.get("extra_args") or (),
            timeout=cargo_config.get("timeout") or DEFAULT_TIMEOUT,
        )

    def analyze(self, graph: PackageGraph, package_id: str, config: dict) -> FrontierReport:
        """Resolve the target and compute its frontier."""
        target = resolve_target(graph, package_id)
        predicate = skip_predicate(config["analysis"].get("skip") or [])
        return FrontierResolver(graph).resolve(target, predicate, debug=config.get("debug", False))

    def execute(
        self,
        package_id: str,
        workspace: Optional[str] = None,
        skip: Optional[Iterable[str]] = None,
        fmt: Optional[str] = None,
        output: Optional[str] = None,
        config_path: Optional[str] = None,
        manifest_path: Optional[str] = None,
        metadata_file: Optional[str] = None,
        debug: bool = False,
    ) -> Tuple[int, Optional[FrontierReport]]:
        """Execute the complete workflow and return ``(exit_code, report)``."""
        try:
            config = self.initialize(
                config_path,
                skip=skip,
                fmt=fmt,
                output=output,
                manifest_path=manifest_path,
                metadata_file=metadata_file,
                debug=debug,
            )
            graph = self.load_graph(config, workspace)
            report = self.analyze(graph, package_id, config)

            content = render(report, config["output"].get("format", "toml"))
            written = write_report(content, config["output"].get("file"))
            if written:
                self.console.print(f"Frontier report saved to {written}", style="dim")
            return 0, report

        except KeyboardInterrupt:
            self.console.print("\nInterrupted by user", style="bold yellow")
            return 130, None
        except AmbiguousTargetError as e:
            for candidate in e.matches:
                self.console.print(f"\t - {candidate}", markup=False, highlight=False)
            self.console.print(f"Error: {e}", style="bold red", markup=False)
            return 1, None
        except (FrontierError, FileNotFoundError) as e:
            self.console.print(f"Error: {e}", style="bold red", markup=False)
            return 1, None
