"""
Initialize the CLI package. Contains shared CLI utilities and configuration.
"""

from pathlib import Path
from typing import Optional

import typer

from compsearch.buffer.buffer_manager import ComponentRegistry
from compsearch.core.config import settings
from compsearch.core.exceptions import RegistryError


def load_registry(registry_path: Optional[Path]) -> ComponentRegistry:
    """
    Load the registry named on the command line, falling back to the
    configured registry path. Exits with code 1 when neither is usable.
    """
    path = registry_path or settings.registry_path
    if path is None:
        typer.echo("Error: no registry given. Use --registry or set COMPSEARCH_REGISTRY_PATH.")
        raise typer.Exit(code=1)
    try:
        return ComponentRegistry.load(path)
    except RegistryError as e:
        typer.echo(f"Error: {str(e)}")
        raise typer.Exit(code=1)
