# src/compsearch/cli/search_cli.py
import typer
from pathlib import Path
from typing import Optional

from compsearch.cli import load_registry
from compsearch.core.config import settings
from compsearch.search.search_manager import SearchManager
from compsearch.search.search_schemas import ReportStatus


def search_cmd(
    pattern: str = typer.Argument(..., help="Text or pattern to search for"),
    registry: Optional[Path] = typer.Option(
        None, "--registry", "-r",
        help="Registry JSON file or directory of components"
    ),
    use_patterns: Optional[bool] = typer.Option(
        None, "--patterns/--plain",
        help="Match as a regular expression (parentheses are always literal) or as plain text"
    ),
    all_controls: Optional[bool] = typer.Option(
        None, "--all/--single",
        help="Search every text control, or only the control given by --control"
    ),
    control: Optional[str] = typer.Option(
        None, "--control", "-c",
        help="Control to search when not searching all controls"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON")
):
    """
    Search component controls and print every occurrence with its line and column.
    """
    components = load_registry(registry)

    report = SearchManager.search_registry(
        components,
        pattern,
        use_patterns=settings.use_patterns if use_patterns is None else use_patterns,
        search_all_controls=settings.search_all_controls if all_controls is None else all_controls,
        control_name=settings.control_name if control is None else control,
    )

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    else:
        typer.echo(report.text)

    if report.status == ReportStatus.ERROR:
        raise typer.Exit(code=1)
