"""
Exceptions raised while building a package graph.

Every failure during graph construction is fatal: nothing is retried and no
partial graph is returned. Each exception includes:
- Clear error message
- The offending path, package name or specification
- Suggested user action
"""

from typing import Any, Optional


class PackageGraphError(Exception):
    """
    Base exception for all package graph construction errors.
    """

    def __init__(self, message: str, suggested_action: Optional[str] = None):
        """
        Initialize PackageGraphError.

        Args:
            message: Human-readable error message
            suggested_action: Suggested action for the user to resolve the issue
        """
        self.message = message
        self.suggested_action = suggested_action

        error_parts = [message]
        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        super().__init__(" | ".join(error_parts))


class ManifestNotFoundError(PackageGraphError):
    """Raised when a package has no manifest at its expected location."""

    def __init__(self, manifest_path: str):
        self.manifest_path = manifest_path
        super().__init__(
            f"Unable to generate package graph, no `{manifest_path}` found.",
            suggested_action="Run from the root directory of your package",
        )


class MalformedManifestError(PackageGraphError):
    """Raised when a manifest cannot be parsed into a usable mapping."""

    def __init__(self, manifest_path: str, reason: str):
        self.manifest_path = manifest_path
        self.reason = reason
        super().__init__(f"Invalid manifest `{manifest_path}`: {reason}")


class LocationIndexNotFoundError(PackageGraphError):
    """Raised when the package location index file is missing."""

    def __init__(self, index_path: str):
        self.index_path = index_path
        super().__init__(
            f"Unable to generate package graph, no `{index_path}` found.",
            suggested_action="Run `pub get` to generate the location index",
        )


class PackageLocationNotFoundError(PackageGraphError):
    """Raised when a referenced package is absent from the location index."""

    def __init__(self, package_name: str):
        self.package_name = package_name
        super().__init__(
            f"No package found for {package_name}.",
            suggested_action="Run `pub get` to refresh the location index",
        )


class UnknownDependencySourceError(PackageGraphError):
    """
    Raised when a dependency specification has none of the recognized
    source keys (git, hosted, path, sdk).
    """

    def __init__(self, specification: Any):
        self.specification = specification
        super().__init__(f"Unable to determine dependency type:\n{specification}")


class MalformedLocationEntryError(PackageGraphError):
    """Raised when a location index line cannot be parsed into name and uri."""

    def __init__(self, line: str, line_number: int, reason: str):
        self.line = line
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Malformed location entry on line {line_number}: {line!r} ({reason})")


class InvalidConfigError(PackageGraphError):
    """Raised when a pubgraph configuration file has an unusable value."""

    def __init__(self, config_path: str, reason: str):
        self.config_path = config_path
        self.reason = reason
        super().__init__(
            f"Invalid configuration `{config_path}`: {reason}",
            suggested_action="Fix the value or remove it to use the default",
        )
