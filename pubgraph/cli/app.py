"""
Main CLI application for pubgraph.

Defines the Typer application structure and command routing.
"""
import typer

from pubgraph.cli.commands.dependents import dependents_command
from pubgraph.cli.commands.order import order_command
from pubgraph.cli.commands.show import show_command


# Initialize Typer app
app = typer.Typer(help="pubgraph - package dependency graph inspector")

# Register commands
app.command("show", help="Print every package in the dependency graph.")(show_command)
app.command("order", help="Print packages so that dependencies precede dependents.")(order_command)
app.command("dependents", help="Print the packages that directly depend on a package.")(dependents_command)
