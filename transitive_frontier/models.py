from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class DependencyDirection(str, Enum):
    """Direction in which links of a package set are enumerated."""
    FORWARD = "forward"
    REVERSE = "reverse"


@dataclass(frozen=True)
class PackageNode:
    """A single package in the resolved dependency graph."""
    id: str
    name: str
    version: str
    in_workspace: bool = False
    source: Optional[str] = None

    def display(self) -> str:
        return f"{self.name} {self.version}"


@dataclass(frozen=True)
class PackageLink:
    """Directed dependency: ``from_`` declares a dependency on ``to``."""
    from_: PackageNode
    to: PackageNode
    kinds: Tuple[str, ...] = ()


def display_name(node: PackageNode) -> str:
    """Kebab-case package name used as a report key."""
    return node.name.replace("_", "-")


@dataclass
class FrontierReport:
    """Boundary-crossing links grouped by the package that introduces them."""
    target_display: str
    frontier: Dict[str, List[str]] = field(default_factory=dict)

    def add(self, source: str, dependency: str) -> None:
        entry = self.frontier.setdefault(source, [])
        entry.append(dependency)

    def to_dict(self) -> dict:
        return {
            "target_display": self.target_display,
            "frontier": {key: list(values) for key, values in self.frontier.items()},
        }
