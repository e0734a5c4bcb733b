"""Shared fixtures for building small package graphs."""

import json
import logging

import pytest

from transitive_frontier.graph.package_graph import PackageGraph
from transitive_frontier.models import PackageLink, PackageNode

REGISTRY = "registry+https://github.com/rust-lang/crates.io-index"


def make_node(name, version="1.0.0", in_workspace=False):
    """Build a node with a cargo-style package id."""
    if in_workspace:
        source = None
        package_id = f"{name} {version} (path+file:///ws/{name})"
    else:
        source = REGISTRY
        package_id = f"{name} {version} ({REGISTRY})"
    return PackageNode(id=package_id, name=name, version=version, in_workspace=in_workspace, source=source)


def make_graph(nodes, edges):
    """Build a graph from nodes keyed by name and ``(from, to)`` name pairs."""
    links = [PackageLink(nodes[from_name], nodes[to_name]) for from_name, to_name in edges]
    return PackageGraph.from_links(nodes.values(), links)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging so caplog sees package records."""
    yield
    package_logger = logging.getLogger("transitive_frontier")
    package_logger.handlers = []
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def chain_nodes():
    return {
        "A": make_node("A", "0.1.0", in_workspace=True),
        "B": make_node("B", "0.1.0", in_workspace=True),
        "C": make_node("C", "1.0.0"),
        "D": make_node("target", "2.0.0"),
    }


@pytest.fixture
def chain_graph(chain_nodes):
    """A -> B -> C -> D where A and B are workspace members."""
    return make_graph(chain_nodes, [("A", "B"), ("B", "C"), ("C", "D")])


@pytest.fixture
def cargo_metadata_document():
    """A trimmed `cargo metadata --format-version 1` document."""
    return {
        "packages": [
            {"name": "app", "version": "0.1.0", "id": "app 0.1.0 (path+file:///ws/app)", "source": None},
            {"name": "core_lib", "version": "0.1.0", "id": "core_lib 0.1.0 (path+file:///ws/core_lib)", "source": None},
            {"name": "reqwest", "version": "0.11.9", "id": f"reqwest 0.11.9 ({REGISTRY})", "source": REGISTRY},
            {"name": "native-tls", "version": "0.2.8", "id": f"native-tls 0.2.8 ({REGISTRY})", "source": REGISTRY},
            {"name": "openssl-sys", "version": "0.9.72", "id": f"openssl-sys 0.9.72 ({REGISTRY})", "source": REGISTRY},
            {"name": "cc", "version": "1.0.73", "id": f"cc 1.0.73 ({REGISTRY})", "source": REGISTRY},
        ],
        "workspace_members": [
            "app 0.1.0 (path+file:///ws/app)",
            "core_lib 0.1.0 (path+file:///ws/core_lib)",
        ],
        "resolve": {
            "nodes": [
                {
                    "id": "app 0.1.0 (path+file:///ws/app)",
                    "dependencies": [
                        "core_lib 0.1.0 (path+file:///ws/core_lib)",
                        f"reqwest 0.11.9 ({REGISTRY})",
                    ],
                    "deps": [
                        {
                            "name": "core_lib",
                            "pkg": "core_lib 0.1.0 (path+file:///ws/core_lib)",
                            "dep_kinds": [{"kind": None, "target": None}],
                        },
                        {
                            "name": "reqwest",
                            "pkg": f"reqwest 0.11.9 ({REGISTRY})",
                            "dep_kinds": [{"kind": None, "target": None}, {"kind": "dev", "target": None}],
                        },
                    ],
                    "features": [],
                },
                {
                    "id": "core_lib 0.1.0 (path+file:///ws/core_lib)",
                    "dependencies": [f"native-tls 0.2.8 ({REGISTRY})"],
                    "deps": [
                        {
                            "name": "native_tls",
                            "pkg": f"native-tls 0.2.8 ({REGISTRY})",
                            "dep_kinds": [{"kind": None, "target": None}],
                        }
                    ],
                    "features": [],
                },
                {
                    "id": f"reqwest 0.11.9 ({REGISTRY})",
                    "dependencies": [f"native-tls 0.2.8 ({REGISTRY})"],
                    "deps": [
                        {
                            "name": "native_tls",
                            "pkg": f"native-tls 0.2.8 ({REGISTRY})",
                            "dep_kinds": [{"kind": None, "target": None}],
                        }
                    ],
                    "features": [],
                },
                {
                    "id": f"native-tls 0.2.8 ({REGISTRY})",
                    "dependencies": [f"openssl-sys 0.9.72 ({REGISTRY})"],
                    "deps": [
                        {
                            "name": "openssl_sys",
                            "pkg": f"openssl-sys 0.9.72 ({REGISTRY})",
                            "dep_kinds": [{"kind": None, "target": None}],
                        }
                    ],
                    "features": [],
                },
                {
                    "id": f"openssl-sys 0.9.72 ({REGISTRY})",
                    "dependencies": [f"cc 1.0.73 ({REGISTRY})"],
                    "deps": [
                        {
                            "name": "cc",
                            "pkg": f"cc 1.0.73 ({REGISTRY})",
                            "dep_kinds": [{"kind": "build", "target": None}],
                        }
                    ],
                    "features": [],
                },
                {"id": f"cc 1.0.73 ({REGISTRY})", "dependencies": [], "deps": [], "features": []},
            ],
            "root": "app 0.1.0 (path+file:///ws/app)",
        },
        "target_directory": "/ws/target",
        "version": 1,
        "workspace_root": "/ws",
    }


@pytest.fixture
def metadata_file(tmp_path, cargo_metadata_document):
    path = tmp_path / "metadata.json"
    path.write_text(json.dumps(cargo_metadata_document))
    return path
