"""
Manifest (pubspec.yaml) loading.
"""
import logging
import os
from typing import Any, Dict

import yaml

from pubgraph.utils.exceptions import ManifestNotFoundError, MalformedManifestError

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_FILE = "pubspec.yaml"

# Sections holding dependency specifications, each a name -> specification mapping
DEPENDENCY_SECTIONS = ("dependencies", "dev_dependencies", "dependency_overrides")


def load_manifest(package_dir: str, manifest_file: str = DEFAULT_MANIFEST_FILE) -> Dict[str, Any]:
    """
    Load and parse the manifest in the top level directory of a package.

    Args:
        package_dir: Package root directory
        manifest_file: Manifest file name inside package_dir

    Returns:
        Parsed manifest mapping with `version` coerced to a string

    Raises:
        ManifestNotFoundError: If the manifest file does not exist
        MalformedManifestError: If the file is not a YAML mapping with a name,
            or a dependency section is not a mapping
    """
    manifest_path = os.path.join(package_dir, manifest_file)
    if not os.path.isfile(manifest_path):
        raise ManifestNotFoundError(manifest_path)

    logger.debug(f"Loading manifest {manifest_path}")
    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            manifest = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise MalformedManifestError(manifest_path, str(e)) from e

    if not isinstance(manifest, dict):
        raise MalformedManifestError(manifest_path, "expected a mapping at the top level")
    if not manifest.get("name"):
        raise MalformedManifestError(manifest_path, "missing `name`")
    for section in DEPENDENCY_SECTIONS:
        if manifest.get(section) is not None and not isinstance(manifest[section], dict):
            raise MalformedManifestError(manifest_path, f"`{section}` must be a mapping")

    manifest["name"] = str(manifest["name"])
    if manifest.get("version") is not None:
        manifest["version"] = str(manifest["version"])
    return manifest
