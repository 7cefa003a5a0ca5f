"""
Command line interface for pubgraph.

`app` is the Typer application; pyproject.toml exposes it as the `pubgraph`
console script.
"""
from pubgraph.cli.app import app

__all__ = ["app"]
