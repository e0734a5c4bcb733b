"""Select the analysis target from a package-id substring."""
import logging
from typing import List

from transitive_frontier.graph.package_graph import PackageGraph
from transitive_frontier.models import PackageNode
from transitive_frontier.utils.exceptions import AmbiguousTargetError

logger = logging.getLogger(__name__)


def find_candidates(graph: PackageGraph, substring: str) -> List[str]:
    """Package ids containing ``substring`` (case-sensitive)."""
    return [package_id for package_id in graph.package_ids() if substring in package_id]


def resolve_target(graph: PackageGraph, substring: str) -> PackageNode:
    """
    Return the single package whose id contains ``substring``.

    Raises:
        AmbiguousTargetError: zero or several ids matched. Every candidate is
            logged and carried on the exception.
    """
    candidates = find_candidates(graph, substring)

    if len(candidates) == 1:
        return graph.metadata(candidates[0])

    for package_id in candidates:
        logger.debug(f"\t - {package_id}")
    raise AmbiguousTargetError(substring, candidates)
