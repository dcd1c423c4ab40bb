"""Rendering support for the markdown page.

Contains:
- renderer_iface: the MarkdownRenderer and DisplayRegion protocols
- renderer: Python-Markdown backed renderer and the page shell
- regions: in-memory and file-backed display regions
- options: RenderConfig
"""

from .options import RenderConfig
from .regions import MemoryRegion, PageFileRegion
from .renderer import PythonMarkdownRenderer, render_page
from .renderer_iface import DisplayRegion, MarkdownRenderer

__all__ = [
    "DisplayRegion",
    "MarkdownRenderer",
    "MemoryRegion",
    "PageFileRegion",
    "PythonMarkdownRenderer",
    "RenderConfig",
    "render_page",
]
