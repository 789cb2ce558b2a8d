"""
Top-level CLI that aggregates the search command and the registry sub-app.
"""

import logging
import typer
from compsearch.cli.registry_cli import registry_app
from compsearch.cli.search_cli import search_cmd
from compsearch.core.config import settings


logging.basicConfig(
    level=settings.log_level,
    format="%(levelname)s %(name)s - %(message)s"
)

main_app = typer.Typer(help="compsearch CLI")

main_app.command("search")(search_cmd)
main_app.add_typer(registry_app, name="registry")


def main():
    main_app()

if __name__ == "__main__":
    main()
