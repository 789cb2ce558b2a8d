"""
CLI commands for inspecting the component registry.

This module provides commands for listing the components that a search
would cover and the controls they expose.
"""

import typer
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.table import Table

from compsearch.cli import load_registry

registry_app = typer.Typer(help="Commands to inspect the searchable components.")
console = Console()


@registry_app.command("components")
def list_components_cmd(
    registry: Optional[Path] = typer.Option(
        None, "--registry", "-r",
        help="Registry JSON file or directory of components"
    )
):
    """
    List all components with their control counts.
    """
    components = load_registry(registry).get_components()

    if not components:
        typer.echo("No components found.")
        return

    table = Table(title="Components")
    table.add_column("Name", style="green")
    table.add_column("Controls", style="magenta")
    table.add_column("Text Controls", style="cyan")

    for component in components:
        table.add_row(
            component.name,
            str(len(component.controls)),
            str(component.text_control_count)
        )

    console.print(table)


@registry_app.command("controls")
def list_controls_cmd(
    component_name: str = typer.Argument(..., help="Name of the component to show"),
    registry: Optional[Path] = typer.Option(
        None, "--registry", "-r",
        help="Registry JSON file or directory of components"
    )
):
    """
    Show the controls of one component.
    """
    controls = load_registry(registry).get_controls(component_name)

    if not controls:
        typer.echo(f"No controls found for component '{component_name}'.")
        raise typer.Exit(code=1)

    table = Table(title=f"Controls of {component_name}")
    table.add_column("Name", style="green")
    table.add_column("Type", style="blue")
    table.add_column("Length", style="yellow")

    for control in controls:
        table.add_row(
            control.name,
            type(control.value).__name__,
            str(len(control.value)) if control.is_text else "-"
        )

    console.print(table)
