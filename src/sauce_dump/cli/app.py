"""Typer CLI application."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from sauce_dump.render.json_format import render_json
from sauce_dump.render.text import format_report, render
from sauce_dump.sauce.errors import SauceError
from sauce_dump.sauce.reader import parse_sauce


def configure_logging(verbose: bool) -> None:
    """Send sauce_dump log records to stderr through rich."""
    logger = logging.getLogger("sauce_dump")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    # One handler however many times the app is created or run
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="sauce-dump",
        help="Show SAUCE metadata records of art, image and archive files.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(soft_wrap=True, emoji=False)

    @app.command()
    def dump(
        paths: Annotated[list[Path], typer.Argument(help="Files to inspect")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log decoder details")] = False,
    ) -> None:
        """Dump the SAUCE record of each file."""
        configure_logging(verbose)

        failed = 0
        for path in paths:
            try:
                record = parse_sauce(path)
            except SauceError as exc:
                console.print(f"[red]{escape(str(path))}: error {escape(str(exc))}[/]")
                failed += 1
                continue

            if record is None:
                console.print(f"[yellow]{escape(str(path))}: no SAUCE record[/]")
                continue

            if json_output:
                console.print(render_json(record), markup=False, highlight=False)
            else:
                console.print(f"[bold]{escape(str(path))}[/]")
                console.print(format_report(render(record)), markup=False, highlight=False)

        if failed:
            raise typer.Exit(1)

    return app
