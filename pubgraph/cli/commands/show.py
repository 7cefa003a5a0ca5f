"""
Show command implementation.

Thin wrapper around GraphService that handles CLI argument parsing.
"""
import sys
from typing import Optional

import typer

from pubgraph.core.config_manager import OutputFormat
from pubgraph.core.graph_service import GraphService


def show_command(
    package_path: str = typer.Argument(".", help="Package root directory"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    output_format: Optional[OutputFormat] = typer.Option(None, "-f", "--format", help="Output format", case_sensitive=False),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Print every package in the dependency graph."""

    exit_code = GraphService().execute_show(
        package_path,
        config_path=config_path,
        output_format=output_format,
        verbose=verbose,
    )

    if exit_code != 0:
        sys.exit(exit_code)
