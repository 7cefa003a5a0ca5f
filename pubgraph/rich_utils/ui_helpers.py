import os
import sys

from rich.console import Console
from rich.table import Table

from pubgraph.graph import PackageGraph


def is_ci_environment():
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not sys.stdout.isatty()
    )


def get_console() -> Console:
    """Detect environment and create console."""
    if is_ci_environment():
        # CI/automated environment - no colors, no interactive elements
        return Console(force_terminal=False, no_color=True)

    # Interactive terminal - full Rich capabilities
    return Console()


def graph_table(graph: PackageGraph) -> Table:
    """Render every package in the graph as a table row."""
    table = Table(title=f"Package graph for {graph.root.name}")
    table.add_column("Package", style="bold")
    table.add_column("Version")
    table.add_column("Type")
    table.add_column("Path", overflow="fold")
    table.add_column("Dependencies")

    for package in graph.all_packages.values():
        table.add_row(
            package.name,
            package.version or "",
            package.dependency_type.value,
            package.path or "",
            ", ".join(dep.name for dep in package.dependencies),
        )
    return table
