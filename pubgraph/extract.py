"""
Dependency extraction from parsed manifests.
"""
from typing import Any, Dict


def deps_from_manifest(manifest: Dict[str, Any], is_root: bool = False) -> Dict[str, Any]:
    """
    Get the dependency specifications declared by a manifest.

    Only the root manifest contributes `dev_dependencies` and
    `dependency_overrides`. Overrides replace any same-named entry from
    either of the other sections.

    Args:
        manifest: Parsed manifest mapping
        is_root: Whether the manifest belongs to the package under analysis

    Returns:
        Mapping of dependency name to raw specification, in declaration order
    """
    deps = dict(manifest.get("dependencies") or {})
    if is_root:
        deps.update(manifest.get("dev_dependencies") or {})
        for name, specification in (manifest.get("dependency_overrides") or {}).items():
            deps[name] = specification
    return deps
