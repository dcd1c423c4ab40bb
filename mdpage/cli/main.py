#!/usr/bin/env python
"""Command line interface for mdpage."""

import typer

from mdpage.cli.commands import render, show

app = typer.Typer(help="Render a markdown document into a single HTML page")

app.command(name="render", help="Render the markdown document to an HTML page")(
    render.main
)
app.command(name="show", help="Print the rendered HTML fragment")(show.main)


@app.callback()
def callback():
    """Fetch a markdown document and render it to HTML."""
    pass


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
