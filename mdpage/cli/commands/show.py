"""Show command: print the rendered markup to the console."""

from typing import Optional

import typer
from rich.console import Console

from mdpage.cli.utils import config as cli_config
from mdpage.content.sources import source_for
from mdpage.controller import render_content
from mdpage.rendering.regions import MemoryRegion
from mdpage.rendering.renderer import PythonMarkdownRenderer

console = Console()


def main(
    base: str = typer.Argument(
        ..., help="Page location: an http(s) URL or a local directory"
    ),
    path: Optional[str] = typer.Option(
        None, "--path", "-p", help="Document path relative to the page location"
    ),
    config_file: Optional[str] = typer.Option(
        None, "--config", help="Path to a config.json file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Fetch the document and print the HTML fragment (or the fallback)."""
    cli_config.setup_logging(verbose)
    config = cli_config.build_config(
        content_path=path, settings_path=config_file
    )
    region = MemoryRegion()
    view = render_content(
        source_for(base, timeout=config.timeout),
        PythonMarkdownRenderer.from_config(config),
        region,
        config,
    )
    console.print(region.content, markup=False, highlight=False, soft_wrap=True)
    if not view.ok:
        raise typer.Exit(1)
