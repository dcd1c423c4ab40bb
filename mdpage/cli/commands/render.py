"""Render command: write the single-page HTML view to a file."""

from typing import Optional

import typer
from rich.console import Console

from mdpage.cli.utils import config as cli_config
from mdpage.content.sources import source_for
from mdpage.controller import ReadySignal, RenderController
from mdpage.rendering.regions import PageFileRegion
from mdpage.rendering.renderer import PythonMarkdownRenderer

console = Console()


def main(
    base: str = typer.Argument(
        ..., help="Page location: an http(s) URL or a local directory"
    ),
    out: str = typer.Option("index.html", "--out", "-o", help="Output HTML file"),
    path: Optional[str] = typer.Option(
        None, "--path", "-p", help="Document path relative to the page location"
    ),
    title: Optional[str] = typer.Option(None, help="Page title"),
    config_file: Optional[str] = typer.Option(
        None, "--config", help="Path to a config.json file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Fetch the document, convert it and write the page."""
    cli_config.setup_logging(verbose)
    config = cli_config.build_config(
        content_path=path, title=title, settings_path=config_file
    )
    region = PageFileRegion(out, title=config.title, region_id=config.region_id)
    controller = RenderController(
        source_for(base, timeout=config.timeout),
        PythonMarkdownRenderer.from_config(config),
        region,
        config,
    )
    ready = ReadySignal()
    controller.attach(ready)
    try:
        ready.fire()
    except OSError as exc:
        console.print(f"[bold red]Error:[/bold red] Could not write {out}: {exc}")
        raise typer.Exit(1)

    view = controller.view
    if view is None or not view.ok:
        console.print(
            f"[bold red]Error:[/bold red] Could not load {config.content_path}; "
            f"wrote fallback page to [bold]{out}[/bold]"
        )
        raise typer.Exit(1)
    console.print(f"Wrote [bold]{out}[/bold]")
