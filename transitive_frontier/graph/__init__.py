"""Package graph model and loaders."""

from .cargo_metadata import graph_from_metadata, load_metadata, load_package_graph, read_metadata_file
from .package_graph import PackageGraph, PackageQuery, PackageSet

__all__ = [
    "PackageGraph",
    "PackageQuery",
    "PackageSet",
    "graph_from_metadata",
    "load_metadata",
    "load_package_graph",
    "read_metadata_file",
]
