"""
A graph of the package dependencies for an application.
"""
import logging
import os
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set, Tuple

from pubgraph.manifest import DEFAULT_MANIFEST_FILE, load_manifest
from pubgraph.models import PackageNode
from pubgraph.package_locations import DEFAULT_LOCATION_INDEX_FILE, read_package_locations

logger = logging.getLogger(__name__)


class PackageGraph:
    """
    Read-only dependency graph rooted at the package under analysis.

    Attributes:
        root: The root application package
        all_packages: Every PackageNode reachable from root, indexed by name
    """

    def __init__(self, root: PackageNode, all_packages: Mapping[str, PackageNode]):
        self.root = root
        self.all_packages: Mapping[str, PackageNode] = MappingProxyType(dict(all_packages))

    @classmethod
    def from_root(cls, root: PackageNode) -> "PackageGraph":
        """Create a PackageGraph from an already wired root PackageNode."""
        all_packages: Dict[str, PackageNode] = {root.name: root}
        stack: List[Iterator[PackageNode]] = [iter(root.dependencies)]
        while stack:
            dep = next(stack[-1], None)
            if dep is None:
                stack.pop()
                continue
            if dep.name in all_packages:
                continue
            all_packages[dep.name] = dep
            stack.append(iter(dep.dependencies))
        return cls(root, all_packages)

    @classmethod
    def from_manifest(
        cls,
        root_manifest: Dict[str, Any],
        package_locations: Mapping[str, str],
        manifest_loader=None,
        root_path: Optional[str] = None,
    ) -> "PackageGraph":
        """Create a PackageGraph from a parsed root manifest and a location index."""
        from pubgraph.builder import GraphBuilder

        return GraphBuilder(package_locations, manifest_loader).build(root_manifest, root_path)

    @classmethod
    def for_path(cls, package_path: str, config: Optional[Dict[str, Any]] = None) -> "PackageGraph":
        """
        Create a PackageGraph for the package whose top level directory lives
        at package_path.

        Args:
            package_path: Package root directory
            config: Optional configuration providing `manifest_file` and
                `location_index_file`
        """
        config = config or {}
        manifest_file = config.get("manifest_file", DEFAULT_MANIFEST_FILE)
        index_file = config.get("location_index_file", DEFAULT_LOCATION_INDEX_FILE)

        root_manifest = load_manifest(package_path, manifest_file)
        package_locations = read_package_locations(package_path, index_file)

        logger.debug(f"Building package graph for {os.path.abspath(package_path)}")
        return cls.from_manifest(
            root_manifest,
            package_locations,
            manifest_loader=lambda location: load_manifest(location, manifest_file),
            root_path=os.path.abspath(package_path),
        )

    @classmethod
    def for_this_package(cls, config: Optional[Dict[str, Any]] = None) -> "PackageGraph":
        """Create a PackageGraph for the package in the current directory."""
        return cls.for_path(".", config)

    def lookup(self, package_name: str) -> Optional[PackageNode]:
        """Get a package by name, None if it is not in the graph."""
        return self.all_packages.get(package_name)

    __getitem__ = lookup

    def __contains__(self, package_name: object) -> bool:
        return package_name in self.all_packages

    def __len__(self) -> int:
        return len(self.all_packages)

    @property
    def ordered_packages(self) -> List[PackageNode]:
        """
        All of the packages in postorder by dependencies.

        Dependencies of a package come before the package in the result. If
        there is a package cycle the relative position of packages within the
        cycle is non-deterministic, except that the root package always comes
        last. For any two packages where neither is a transitive dependency
        of the other, the relative position is non-deterministic.
        """
        return _ordered_packages(self.root)

    def dependents_of(self, package_name: str) -> List[PackageNode]:
        """
        Find all packages which depend on package_name in postorder by dependencies.

        See ordered_packages for ordering guarantees. The node for
        package_name is never included in the result.
        """
        node = self.all_packages.get(package_name)
        if node is None:
            return []
        return [
            package
            for package in self.ordered_packages
            if package is not node and any(dep is node for dep in package.dependencies)
        ]

    def __str__(self) -> str:
        return "".join(f"{package}\n" for package in self.all_packages.values())


def _ordered_packages(root: PackageNode) -> List[PackageNode]:
    """Postorder traversal marking nodes seen on entry so cycles are skipped."""
    ordered: List[PackageNode] = []
    seen: Set[PackageNode] = {root}
    stack: List[Tuple[PackageNode, Iterator[PackageNode]]] = [(root, iter(root.dependencies))]
    while stack:
        current, pending = stack[-1]
        for dep in pending:
            if dep not in seen:
                seen.add(dep)
                stack.append((dep, iter(dep.dependencies)))
                break
        else:
            stack.pop()
            ordered.append(current)
    return ordered
