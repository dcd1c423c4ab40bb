"""
Markdown to HTML conversion and the single-page shell. No I/O.
"""

from __future__ import annotations

import html
from typing import Iterable, Optional

import markdown

from .options import DEFAULT_REGION_ID, RenderConfig


class PythonMarkdownRenderer:
    """MarkdownRenderer backed by Python-Markdown."""

    def __init__(self, extensions: Optional[Iterable[str]] = None):
        if extensions is None:
            extensions = RenderConfig().extensions
        self._md = markdown.Markdown(extensions=list(extensions))

    @classmethod
    def from_config(cls, config: RenderConfig) -> "PythonMarkdownRenderer":
        return cls(extensions=config.extensions)

    def render(self, text: str) -> str:
        # Markdown instances keep state (footnotes, toc, references) between
        # conversions unless reset.
        self._md.reset()
        return self._md.convert(text)


def render_page(
    title: str,
    html_fragment: str = "",
    region_id: str = DEFAULT_REGION_ID,
    extra_css: str = "",
) -> str:
    return (
        '<!doctype html><meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        '<meta name="color-scheme" content="light dark">'
        f"<title>{html.escape(title)}</title>"
        "<style>"
        "body{font-family:-apple-system,BlinkMacSystemFont,Segoe UI,Roboto,Helvetica,Arial,sans-serif;line-height:1.5;max-width:50rem;margin:0 auto;padding:1rem;background:#fff;color:#111}"
        "pre{white-space:pre-wrap;background:#f5f5f5;padding:.5rem}"
        "code{font-family:SFMono-Regular,Menlo,Consolas,monospace}"
        "blockquote{margin:.5em 0 .5em 1em;padding-left:.8em;border-left:3px solid #ddd}"
        "img{max-width:100%;height:auto}"
        "table{border-collapse:collapse;margin:.5rem 0}"
        "td,th{border:1px solid #ccc;padding:.25rem .5rem;vertical-align:top}"
        "@media (prefers-color-scheme: dark){"
        "body{background:#111;color:#eee}"
        "a{color:#8ab4f8}"
        "pre{background:#1b1b1b;color:#eee}"
        "blockquote{border-left-color:#444}"
        "td,th{border-color:#555}"
        "}"
        f"{extra_css}</style>"
        f'<main id="{html.escape(region_id, quote=True)}">{html_fragment}</main>'
    )
