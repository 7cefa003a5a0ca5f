"""
Package graph construction.

Starting from the root manifest, every referenced package is located through
the location index, its manifest loaded, and a node created for it exactly
once. Nodes are registered before their own edges are resolved, so edges
pointing back at a package still being processed link to the existing node
instead of recursing forever.
"""
import logging
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple

from pubgraph.classify import classify_dependency
from pubgraph.extract import deps_from_manifest
from pubgraph.manifest import load_manifest
from pubgraph.models import DependencyType, PackageNode
from pubgraph.utils.exceptions import MalformedManifestError, PackageLocationNotFoundError

logger = logging.getLogger(__name__)

ManifestLoader = Callable[[str], Dict[str, Any]]


class GraphBuilder:
    """Builds a PackageGraph from a root manifest and a location index."""

    def __init__(
        self,
        package_locations: Mapping[str, str],
        manifest_loader: Optional[ManifestLoader] = None,
    ):
        """
        Initialize the builder.

        Args:
            package_locations: Package name to absolute package root directory.
                Must cover every transitively reachable dependency.
            manifest_loader: Returns the parsed manifest for a package root
                directory. Defaults to reading `pubspec.yaml`.
        """
        self.package_locations = package_locations
        self.manifest_loader = manifest_loader or load_manifest

    def build(self, root_manifest: Dict[str, Any], root_path: Optional[str] = None):
        """
        Build the graph for the package described by root_manifest.

        Args:
            root_manifest: Parsed manifest of the package under analysis
            root_path: Fallback path for the root when the index lacks it

        Returns:
            PackageGraph wrapping the root node and every discovered node

        Raises:
            PackageLocationNotFoundError: If a dependency is missing from the index
            UnknownDependencySourceError: If a root specification is unclassifiable
            PackageGraphError: Any manifest loading failure
        """
        from pubgraph.graph import PackageGraph

        nodes: Dict[str, PackageNode] = {}
        root_deps = deps_from_manifest(root_manifest, is_root=True)

        # The root is always the local package being built
        root = self._add_node(nodes, root_manifest, DependencyType.PATH, root_path)

        # Explicit stack of (node, remaining dependency entries) in place of recursion
        stack: List[Tuple[PackageNode, Iterator[str]]] = [(root, iter(root_deps))]
        while stack:
            node, pending = stack[-1]
            name = next(pending, None)
            if name is None:
                stack.pop()
                continue

            dep = nodes.get(name)
            if dep is None:
                location = self.package_locations.get(name)
                if location is None:
                    raise PackageLocationNotFoundError(name)

                manifest = self.manifest_loader(location)
                if manifest.get("name") != name:
                    raise MalformedManifestError(
                        location, f"expected package `{name}`, found `{manifest.get('name')}`"
                    )

                # Classification always follows the root's specification for this name
                dependency_type = classify_dependency(root_deps.get(name))
                dep = self._add_node(nodes, manifest, dependency_type, location)
                stack.append((dep, iter(deps_from_manifest(manifest))))

            logger.debug(f"Linking {node.name} -> {dep.name}")
            node.dependencies.append(dep)

        logger.info(f"Built package graph for {root.name} with {len(nodes)} packages")
        return PackageGraph(root, nodes)

    def _add_node(
        self,
        nodes: Dict[str, PackageNode],
        manifest: Dict[str, Any],
        dependency_type: DependencyType,
        fallback_path: Optional[str],
    ) -> PackageNode:
        """Create a node and register it before any of its edges are resolved."""
        name = manifest["name"]
        version = manifest.get("version")
        node = PackageNode(
            name=name,
            version=None if version is None else str(version),
            dependency_type=dependency_type,
            path=self.package_locations.get(name, fallback_path),
        )
        nodes[name] = node
        logger.debug(f"Discovered {name} ({dependency_type.value}) at {node.path}")
        return node
