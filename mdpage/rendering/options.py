"""
Render configuration for the markdown page.

Centralizes behavior flags so callers can tune defaults without touching
core logic. ``RenderConfig.from_env`` applies MDPAGE_* environment
overrides on top of the module defaults.
"""

from __future__ import annotations

import html
import logging
import math
import os
from dataclasses import dataclass, replace
from typing import Optional, Tuple

DEFAULT_CONTENT_PATH = "README.md"
DEFAULT_REGION_ID = "content"

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderConfig:
    # Resource location, relative to the page
    content_path: str = DEFAULT_CONTENT_PATH

    # Id of the container that receives the markup
    region_id: str = DEFAULT_REGION_ID

    # Page <title>
    title: str = "Tutorials"

    # Fallback block shown when the document cannot be loaded
    fallback_title: str = "Error"
    fallback_message: str = "Sorry, the content could not be loaded."

    # Python-Markdown extensions
    extensions: Tuple[str, ...] = ("fenced_code", "tables", "toc")

    # Transport timeout in seconds; None leaves it to the transport
    timeout: Optional[float] = 10.0

    def fallback_markup(self) -> str:
        return (
            f"<h1>{html.escape(self.fallback_title)}</h1>\n"
            f"<p>{html.escape(self.fallback_message)}</p>"
        )

    @classmethod
    def from_env(cls, base: Optional["RenderConfig"] = None) -> "RenderConfig":
        conf = base or cls()
        overrides = {}
        path = os.getenv("MDPAGE_CONTENT_PATH")
        if path:
            overrides["content_path"] = path
        title = os.getenv("MDPAGE_TITLE")
        if title:
            overrides["title"] = title
        timeout = os.getenv("MDPAGE_TIMEOUT")
        if timeout:
            try:
                value = float(timeout)
            except ValueError:
                value = None
            if value is not None and math.isfinite(value) and value > 0:
                overrides["timeout"] = value
            else:
                LOGGER.warning(
                    "Ignoring MDPAGE_TIMEOUT=%r: expected a positive number", timeout
                )
        return replace(conf, **overrides) if overrides else conf
