"""Example: render a markdown document into an in-memory region and a page file."""

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler

from mdpage import (
    MemoryRegion,
    PageFileRegion,
    PythonMarkdownRenderer,
    ReadySignal,
    RenderConfig,
    RenderController,
    source_for,
)

console = Console()


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render a markdown page")
    p.add_argument("base", help="http(s) URL or local directory serving the page")
    p.add_argument("--path", default="README.md", help="Document path")
    p.add_argument("--out", default="", help="Also write a full page here")
    p.add_argument("--verbose", action="store_true", default=False)
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_time=True)],
    )
    config = RenderConfig(content_path=args.path)
    source = source_for(args.base, timeout=config.timeout)
    renderer = PythonMarkdownRenderer.from_config(config)

    region = MemoryRegion()
    ready = ReadySignal()
    RenderController(source, renderer, region, config).attach(ready)
    ready.fire()
    console.rule("fragment")
    console.print(region.content, markup=False, highlight=False)

    if args.out:
        page = PageFileRegion(args.out, title=config.title)
        view = RenderController(source, renderer, page, config).render_content()
        console.print(f"Wrote {args.out} (ok={view.ok})")


if __name__ == "__main__":
    main()
