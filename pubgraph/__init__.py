"""
pubgraph - dependency graph of a package and its transitive dependencies.
"""
from pubgraph.classify import classify_dependency
from pubgraph.extract import deps_from_manifest
from pubgraph.graph import PackageGraph
from pubgraph.models import DependencyType, PackageNode

__all__ = [
    "DependencyType",
    "PackageGraph",
    "PackageNode",
    "classify_dependency",
    "deps_from_manifest",
]
