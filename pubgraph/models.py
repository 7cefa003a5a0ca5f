from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class DependencyType(str, Enum):
    """How a package is pulled in. This dictates how it should be watched for changes."""
    PUB = "pub"
    GITHUB = "github"
    PATH = "path"
    HOSTED = "hosted"


@dataclass(eq=False)
class PackageNode:
    """
    A node in a PackageGraph.

    Nodes compare and hash by identity: a graph holds exactly one node per
    package name, and edges are plain references to those nodes.
    """
    name: str
    version: Optional[str]
    dependency_type: DependencyType
    # Absolute path of the package root, None when the location index lacks it
    path: Optional[str]
    dependencies: List["PackageNode"] = field(default_factory=list, repr=False)

    def __str__(self) -> str:
        dependency_names = ", ".join(dep.name for dep in self.dependencies)
        return (
            f"  {self.name}:\n"
            f"    version: {self.version}\n"
            f"    type: {self.dependency_type.value}\n"
            f"    path: {self.path}\n"
            f"    dependencies: [{dependency_names}]"
        )
