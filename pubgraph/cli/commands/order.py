"""
Order command implementation.
"""
import sys
from typing import Optional

import typer

from pubgraph.core.graph_service import GraphService


def order_command(
    package_path: str = typer.Argument(".", help="Package root directory"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Print packages so that dependencies precede dependents."""

    exit_code = GraphService().execute_order(package_path, config_path=config_path, verbose=verbose)

    if exit_code != 0:
        sys.exit(exit_code)
