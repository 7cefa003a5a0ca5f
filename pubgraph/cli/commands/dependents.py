"""
Dependents command implementation.
"""
import sys
from typing import Optional

import typer

from pubgraph.core.graph_service import GraphService


def dependents_command(
    package_name: str = typer.Argument(..., help="Package to find dependents of"),
    package_path: str = typer.Argument(".", help="Package root directory"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Print the packages that directly depend on a package."""

    exit_code = GraphService().execute_dependents(
        package_name,
        package_path,
        config_path=config_path,
        verbose=verbose,
    )

    if exit_code != 0:
        sys.exit(exit_code)
