"""Content retrieval: sources and the documents they produce."""

from .models import ContentDocument, RenderedView, RenderState
from .sources import ContentSource, FileContentSource, HttpContentSource, source_for

__all__ = [
    "ContentDocument",
    "ContentSource",
    "FileContentSource",
    "HttpContentSource",
    "RenderState",
    "RenderedView",
    "source_for",
]
