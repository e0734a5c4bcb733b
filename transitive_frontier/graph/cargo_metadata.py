"""
Build a PackageGraph from `cargo metadata` output.

Runs ``cargo metadata --format-version 1`` (or reads a saved document) and
turns its ``packages``, ``workspace_members`` and ``resolve`` sections into
nodes and links.
"""
import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from transitive_frontier.graph.package_graph import PackageGraph
from transitive_frontier.models import PackageLink, PackageNode
from transitive_frontier.utils.exceptions import GraphLoadError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 300


def build_metadata_command(
    cargo: str = "cargo",
    manifest_path: Optional[str] = None,
    extra_args: Sequence[str] = (),
) -> List[str]:
    """Build the cargo argument list."""
    args = [cargo, "metadata", "--format-version", "1"]
    if manifest_path:
        args.extend(["--manifest-path", str(manifest_path)])
    args.extend(extra_args)
    return args


def load_metadata(
    workspace: Optional[str] = None,
    manifest_path: Optional[str] = None,
    cargo: str = "cargo",
    extra_args: Sequence[str] = (),
    timeout: int = DEFAULT_TIMEOUT,
) -> Dict[str, Any]:
    """
    Run `cargo metadata` and return the parsed document.

    Args:
        workspace: Directory cargo runs in (current directory when None)
        manifest_path: Explicit Cargo.toml to analyze
        cargo: Cargo executable
        extra_args: Extra arguments such as ``--all-features``
        timeout: Seconds before the invocation is abandoned

    Returns:
        Parsed metadata document

    Raises:
        GraphLoadError: cargo is missing, fails, times out or prints invalid JSON
    """
    args = build_metadata_command(cargo, manifest_path, extra_args)
    logger.info(f"Running {' '.join(args)}")

    try:
        result = subprocess.run(
            args,
            cwd=workspace,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise GraphLoadError(
            "cargo executable not found", command=args, original_exception=e
        ) from e
    except subprocess.TimeoutExpired as e:
        raise GraphLoadError(
            f"cargo metadata timed out after {timeout}s", command=args, original_exception=e
        ) from e

    if result.returncode != 0:
        raise GraphLoadError(
            f"cargo metadata exited with status {result.returncode}",
            command=args,
            stderr=result.stderr,
        )

    try:
        return json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise GraphLoadError(
            "cargo metadata produced invalid JSON", command=args, original_exception=e
        ) from e


def read_metadata_file(path: str) -> Dict[str, Any]:
    """Load a saved `cargo metadata` document."""
    metadata_path = Path(path)
    if not metadata_path.exists():
        raise GraphLoadError(f"Metadata file not found: {path}")

    try:
        return json.loads(metadata_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise GraphLoadError(f"Invalid metadata JSON in {path}", original_exception=e) from e


def _link_kinds(dep: Dict[str, Any]) -> tuple:
    kinds = []
    for dep_kind in dep.get("dep_kinds") or []:
        kind = dep_kind.get("kind") or "normal"
        if kind not in kinds:
            kinds.append(kind)
    return tuple(kinds)


def graph_from_metadata(document: Dict[str, Any]) -> PackageGraph:
    """
    Convert a `cargo metadata` document into a PackageGraph.

    Raises:
        GraphLoadError: the document has no resolve section or is inconsistent
    """
    workspace_members = set(document.get("workspace_members") or [])

    nodes: Dict[str, PackageNode] = {}
    for package in document.get("packages") or []:
        try:
            package_id = package["id"]
            node = PackageNode(
                id=package_id,
                name=package["name"],
                version=package["version"],
                in_workspace=package_id in workspace_members,
                source=package.get("source"),
            )
        except KeyError as e:
            raise GraphLoadError(f"Package entry is missing field {e}") from e
        nodes[package_id] = node

    resolve = document.get("resolve")
    if not resolve:
        raise GraphLoadError(
            "Metadata has no 'resolve' section; run cargo metadata without --no-deps"
        )

    links: List[PackageLink] = []
    for resolve_node in resolve.get("nodes") or []:
        from_id = resolve_node.get("id")
        if from_id not in nodes:
            raise GraphLoadError(f"Resolve node refers to unknown package: {from_id}")

        for dep in resolve_node.get("deps") or []:
            to_id = dep.get("pkg")
            if to_id not in nodes:
                raise GraphLoadError(f"Dependency of {from_id} refers to unknown package: {to_id}")
            links.append(PackageLink(nodes[from_id], nodes[to_id], _link_kinds(dep)))

    logger.info(
        f"Loaded package graph: {len(nodes)} packages, {len(links)} links, "
        f"{len(workspace_members)} workspace members"
    )
    return PackageGraph.from_links(nodes.values(), links)


def load_package_graph(
    workspace: Optional[str] = None,
    manifest_path: Optional[str] = None,
    metadata_file: Optional[str] = None,
    cargo: str = "cargo",
    extra_args: Sequence[str] = (),
    timeout: int = DEFAULT_TIMEOUT,
) -> PackageGraph:
    """Load a graph from a saved metadata file when given, otherwise from cargo."""
    if metadata_file:
        document = read_metadata_file(metadata_file)
    else:
        document = load_metadata(workspace, manifest_path, cargo, extra_args, timeout)
    return graph_from_metadata(document)
