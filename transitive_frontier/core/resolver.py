"""
Frontier resolution.

Given a target package, finds every package that transitively depends on it
and reports the links in that subgraph where exactly one endpoint lives in
the workspace. Those links are where a dependency on the target enters (or
leaves) code the workspace owns.
"""
import logging
from typing import Callable, Iterable, Optional

from transitive_frontier.core.predicate import skip_predicate
from transitive_frontier.graph.package_graph import PackageGraph, PackageSet
from transitive_frontier.models import (
    DependencyDirection,
    FrontierReport,
    PackageLink,
    PackageNode,
    display_name,
)

logger = logging.getLogger(__name__)


def crosses_boundary(link: PackageLink) -> bool:
    """True when exactly one endpoint is a workspace member."""
    return link.from_.in_workspace != link.to.in_workspace


class FrontierResolver:
    """Computes frontier reports against a single package graph."""

    def __init__(self, graph: PackageGraph):
        self.graph = graph

    def ancestors(
        self,
        target: PackageNode,
        predicate: Optional[Callable[[PackageLink], bool]] = None,
    ) -> PackageSet:
        query = self.graph.query_reverse(target.id)
        if predicate is None:
            return query.resolve()
        return query.resolve_with(predicate)

    def resolve(
        self,
        target: PackageNode,
        predicate: Optional[Callable[[PackageLink], bool]] = None,
        debug: bool = False,
    ) -> FrontierReport:
        """
        Build the frontier report for ``target``.

        Args:
            target: Package whose dependents are analyzed
            predicate: Link admissibility used to prune the reverse walk
            debug: Log each crossing as direct or indirect

        Returns:
            FrontierReport keyed by the display name of each link's ``from`` side
        """
        package_set = self.ancestors(target, predicate)

        if debug:
            logger.debug(f"workspace frontier for dependencies on {target.id}:")

        report = FrontierReport(target_display=target.display())

        for link in package_set.links(DependencyDirection.REVERSE):
            if not crosses_boundary(link):
                continue

            dependency_source = display_name(link.from_)

            if debug:
                kind = "direct" if link.to.id == target.id else "indirect"
                logger.debug(f"\t*{kind}: {dependency_source} -> {link.to.name}")

            report.add(dependency_source, link.to.display())

        logger.info(
            f"{len(package_set)} packages depend on {report.target_display}; "
            f"{len(report.frontier)} introduce it across the workspace boundary"
        )
        return report


def resolve_frontier(
    graph: PackageGraph,
    target: PackageNode,
    skip: Iterable[str] = (),
    debug: bool = False,
) -> FrontierReport:
    """Resolve the frontier of ``target`` pruning links into ``skip`` matches."""
    return FrontierResolver(graph).resolve(target, skip_predicate(skip), debug=debug)
