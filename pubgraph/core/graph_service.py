"""
Graph service implementation for pubgraph.

Loads configuration, builds the package graph and renders query results.
Commands delegate here so the CLI layer stays thin.
"""
import logging
from typing import Callable, List, Optional

from pubgraph.core.config_manager import ConfigManager, OutputFormat
from pubgraph.graph import PackageGraph
from pubgraph.models import PackageNode
from pubgraph.rich_utils.ui_helpers import get_console, graph_table
from pubgraph.utils.exceptions import PackageGraphError

logger = logging.getLogger(__name__)


class GraphService:
    """Builds package graphs and prints them for the CLI commands."""

    def __init__(self):
        self.config_manager = ConfigManager()
        self.console = get_console()

    def initialize(
        self,
        config_path: Optional[str],
        output_format: Optional[OutputFormat] = None,
        verbose: bool = False,
    ) -> dict:
        """Load configuration and set up logging."""
        config = self.config_manager.discover_and_load_config(config_path)
        config = self.config_manager.apply_cli_args(config, output_format, verbose)

        logging.basicConfig(level=config["logging"]["level"], format="%(levelname)s %(name)s: %(message)s")
        return config

    def build_graph(self, package_path: str, config: dict) -> PackageGraph:
        """Build the package graph rooted at package_path."""
        return PackageGraph.for_path(package_path, config)

    def execute_show(
        self,
        package_path: str,
        config_path: Optional[str] = None,
        output_format: Optional[OutputFormat] = None,
        verbose: bool = False,
    ) -> int:
        """Render the whole graph. Returns the process exit code."""

        def render(graph: PackageGraph, config: dict) -> None:
            if config["output"]["format"] == OutputFormat.TABLE.value:
                self.console.print(graph_table(graph))
            else:
                self._print_plain(str(graph).rstrip("\n"))

        return self._run(package_path, config_path, output_format, verbose, render)

    def execute_order(self, package_path: str, config_path: Optional[str] = None, verbose: bool = False) -> int:
        """Print every package in dependency order. Returns the process exit code."""
        return self._run(
            package_path,
            config_path,
            None,
            verbose,
            lambda graph, config: self._print_names(graph.ordered_packages),
        )

    def execute_dependents(
        self,
        package_name: str,
        package_path: str,
        config_path: Optional[str] = None,
        verbose: bool = False,
    ) -> int:
        """Print the packages depending on package_name. Returns the process exit code."""

        def render(graph: PackageGraph, config: dict) -> None:
            if package_name not in graph:
                logger.warning(f"{package_name} is not part of the package graph")
            self._print_names(graph.dependents_of(package_name))

        return self._run(package_path, config_path, None, verbose, render)

    def _run(
        self,
        package_path: str,
        config_path: Optional[str],
        output_format: Optional[OutputFormat],
        verbose: bool,
        render: Callable[[PackageGraph, dict], None],
    ) -> int:
        try:
            config = self.initialize(config_path, output_format, verbose)
            graph = self.build_graph(package_path, config)
        except (PackageGraphError, FileNotFoundError) as e:
            self.console.print(f"❌ {e}", style="red", markup=False, highlight=False, soft_wrap=True)
            return 1

        render(graph, config)
        return 0

    def _print_names(self, packages: List[PackageNode]) -> None:
        for package in packages:
            self._print_plain(package.name)

    def _print_plain(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)
