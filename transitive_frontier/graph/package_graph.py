"""
In-memory package dependency graph.

Provides the read-only query surface the frontier resolver works against:
node enumeration, metadata lookup, and predicate-pruned reverse reachability
over a precomputed reverse adjacency list.
"""
import logging
from collections import deque
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Set, Union

from transitive_frontier.models import DependencyDirection, PackageLink, PackageNode
from transitive_frontier.utils.exceptions import PackageNotFoundError

logger = logging.getLogger(__name__)

LinkPredicate = Callable[[PackageLink], bool]


class PackageGraph:
    """Immutable package graph built once by a loader."""

    def __init__(self, nodes: Iterable[PackageNode], links: Iterable[PackageLink]):
        self._nodes: Dict[str, PackageNode] = {}
        for node in nodes:
            self._nodes[node.id] = node

        self._forward: Dict[str, List[PackageLink]] = {node_id: [] for node_id in self._nodes}
        self._reverse: Dict[str, List[PackageLink]] = {node_id: [] for node_id in self._nodes}
        self._link_count = 0
        for link in links:
            for endpoint in (link.from_, link.to):
                if endpoint.id not in self._nodes:
                    raise PackageNotFoundError(endpoint.id)
            self._forward[link.from_.id].append(link)
            self._reverse[link.to.id].append(link)
            self._link_count += 1

    @classmethod
    def from_links(cls, nodes: Iterable[PackageNode], links: Iterable[PackageLink]) -> "PackageGraph":
        return cls(nodes, links)

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def link_count(self) -> int:
        return self._link_count

    def package_ids(self) -> Iterator[str]:
        """All package identifiers, in the order the loader supplied them."""
        return iter(self._nodes)

    def metadata(self, package_id: str) -> PackageNode:
        try:
            return self._nodes[package_id]
        except KeyError:
            raise PackageNotFoundError(package_id) from None

    def workspace_members(self) -> List[PackageNode]:
        return [node for node in self._nodes.values() if node.in_workspace]

    def dependencies(self, package_id: str) -> List[PackageLink]:
        """Outgoing links of a package."""
        self.metadata(package_id)
        return list(self._forward[package_id])

    def dependents(self, package_id: str) -> List[PackageLink]:
        """Incoming links of a package."""
        self.metadata(package_id)
        return list(self._reverse[package_id])

    def iter_dependencies(self, package_id: str) -> Iterator[PackageLink]:
        """Outgoing links of a package, without copying."""
        return iter(self._forward[package_id])

    def iter_dependents(self, package_id: str) -> Iterator[PackageLink]:
        """Incoming links of a package, without copying."""
        return iter(self._reverse[package_id])

    def query_reverse(self, root_ids: Union[str, Iterable[str]]) -> "PackageQuery":
        """Prepare a reverse (dependents-of) query rooted at ``root_ids``."""
        if isinstance(root_ids, str):
            root_ids = [root_ids]
        roots = []
        for root_id in root_ids:
            self.metadata(root_id)
            roots.append(root_id)
        return PackageQuery(self, roots)


class PackageQuery:
    """A reverse reachability query that has not been resolved yet."""

    def __init__(self, graph: PackageGraph, roots: List[str]):
        self.graph = graph
        self.roots = roots

    def resolve(self) -> "PackageSet":
        return self.resolve_with(lambda link: True)

    def resolve_with(self, predicate: LinkPredicate) -> "PackageSet":
        """
        Compute the ancestor closure of the query roots.

        Walks links backwards from the roots with a FIFO work list. A link
        rejected by ``predicate`` is not followed, so anything reachable only
        through it stays out of the closure. The roots are always included.

        Args:
            predicate: Called once for each link into a package of the closure

        Returns:
            PackageSet holding the closure in discovery order
        """
        visited: Dict[str, None] = {}
        queue = deque()
        for root in self.roots:
            if root not in visited:
                visited[root] = None
                queue.append(root)

        rejected = set()

        # Terminates on acyclic graphs; the visited set also bounds cyclic input.
        while queue:
            current = queue.popleft()
            for link in self.graph.iter_dependents(current):
                if not predicate(link):
                    logger.debug(f"Pruned link {link.from_.id} -> {link.to.id}")
                    rejected.add(link)
                    continue
                if link.from_.id not in visited:
                    visited[link.from_.id] = None
                    queue.append(link.from_.id)

        logger.debug(f"Reverse closure of {len(self.roots)} root(s) holds {len(visited)} packages")
        return PackageSet(self.graph, list(visited), rejected)


class PackageSet:
    """
    A subset of a package graph.

    Its links are the graph links with both endpoints inside, minus any link
    the resolving predicate rejected.
    """

    def __init__(self, graph: PackageGraph, package_ids: List[str], rejected: Optional[Set[PackageLink]] = None):
        self.graph = graph
        self._ids = package_ids
        self._members = set(package_ids)
        self._rejected = rejected or set()

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, package_id: str) -> bool:
        return package_id in self._members

    def contains(self, package_id: str) -> bool:
        return package_id in self._members

    def package_ids(self) -> Iterator[str]:
        return iter(self._ids)

    def packages(self) -> Iterator[PackageNode]:
        for package_id in self._ids:
            yield self.graph.metadata(package_id)

    def links(self, direction: DependencyDirection = DependencyDirection.FORWARD) -> Iterator[PackageLink]:
        """
        Iterate the links of the induced subgraph.

        Both directions yield the same links. FORWARD groups them by
        their ``from`` package, REVERSE by their ``to`` package, each in the
        set's discovery order.
        """
        if direction == DependencyDirection.REVERSE:
            for package_id in self._ids:
                for link in self.graph.iter_dependents(package_id):
                    if link.from_.id in self._members and link not in self._rejected:
                        yield link
        else:
            for package_id in self._ids:
                for link in self.graph.iter_dependencies(package_id):
                    if link.to.id in self._members and link not in self._rejected:
                        yield link
