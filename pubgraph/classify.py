"""
Dependency source classification.

A dependency specification is the value a manifest lists for one package
under `dependencies`, `dev_dependencies` or `dependency_overrides`. It is
either a bare version constraint (or null) or a mapping keyed by source.
"""
from typing import Any, Dict

from pubgraph.models import DependencyType
from pubgraph.utils.exceptions import UnknownDependencySourceError


# Source keys recognized inside a structured specification
SOURCE_KEY_TYPES: Dict[str, DependencyType] = {
    "git": DependencyType.GITHUB,
    "hosted": DependencyType.HOSTED,
    "path": DependencyType.PATH,
    # Until Flutter supports another sdk, treat it the same as path
    "sdk": DependencyType.PATH,
}


def classify_dependency(specification: Any) -> DependencyType:
    """
    Determine the dependency type of a raw specification.

    Args:
        specification: A version constraint string, None, or a mapping of source keys

    Returns:
        DependencyType for the first recognized key in mapping order,
        PUB for bare or absent specifications

    Raises:
        UnknownDependencySourceError: If a mapping has no recognized source key
    """
    if not isinstance(specification, dict):
        return DependencyType.PUB

    for key in specification:
        dependency_type = SOURCE_KEY_TYPES.get(key)
        if dependency_type is not None:
            return dependency_type

    raise UnknownDependencySourceError(specification)
