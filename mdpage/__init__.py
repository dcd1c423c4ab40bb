"""Fetch a markdown document and render it into a single-page HTML view."""

from mdpage.content import (
    ContentDocument,
    FileContentSource,
    HttpContentSource,
    RenderedView,
    RenderState,
    source_for,
)
from mdpage.controller import ReadySignal, RenderController, render_content
from mdpage.exceptions import MdPageError, RenderStateError, ResourceUnavailable
from mdpage.rendering import (
    MemoryRegion,
    PageFileRegion,
    PythonMarkdownRenderer,
    RenderConfig,
    render_page,
)

__all__ = [
    "ContentDocument",
    "FileContentSource",
    "HttpContentSource",
    "MdPageError",
    "MemoryRegion",
    "PageFileRegion",
    "PythonMarkdownRenderer",
    "ReadySignal",
    "RenderConfig",
    "RenderController",
    "RenderState",
    "RenderStateError",
    "RenderedView",
    "ResourceUnavailable",
    "render_content",
    "render_page",
    "source_for",
]
