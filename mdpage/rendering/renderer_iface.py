"""
Seams used by the render controller.

Defines the two collaborators the controller never looks up by itself:
  - MarkdownRenderer: text -> HTML markup, pure and synchronous
  - DisplayRegion: the single-slot output the markup is written into

The controller performs no conversion and no output on its own; it only
calls these interfaces.
"""

from __future__ import annotations

from typing import Protocol


class MarkdownRenderer(Protocol):
    """Converts markdown text into an HTML fragment."""

    def render(self, text: str) -> str: ...


class DisplayRegion(Protocol):
    """Mutable container that is fully overwritten on every write."""

    def replace(self, markup: str) -> None: ...
