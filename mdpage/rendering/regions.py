"""
Display regions: where the rendered view ends up.

Both implementations overwrite their whole content on every write, so a
region only ever holds the latest view.
"""

from __future__ import annotations

import logging
import os

from .options import DEFAULT_REGION_ID
from .renderer import render_page

LOGGER = logging.getLogger(__name__)


class MemoryRegion:
    """In-memory region; records how many times it was written."""

    def __init__(self, content: str = ""):
        self.content = content
        self.write_count = 0

    def replace(self, markup: str) -> None:
        self.content = markup
        self.write_count += 1


class PageFileRegion:
    """Region backed by a complete HTML page on disk."""

    def __init__(
        self,
        path: str,
        *,
        title: str = "",
        region_id: str = DEFAULT_REGION_ID,
        extra_css: str = "",
    ):
        self.path = path
        self.title = title
        self.region_id = region_id
        self.extra_css = extra_css

    def replace(self, markup: str) -> None:
        out_dir = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(out_dir, exist_ok=True)
        page = render_page(
            self.title, markup, region_id=self.region_id, extra_css=self.extra_css
        )
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(page)
        LOGGER.debug("Wrote %d bytes to %s", len(page), self.path)

