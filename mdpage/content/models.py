"""Content and view data transfer objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RenderState(Enum):
    NOT_STARTED = "not_started"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class ContentDocument:
    """Raw markdown text retrieved from a content source."""

    path: str
    text: str


@dataclass(frozen=True)
class RenderedView:
    """Markup written to the display region.

    ``ok`` is False when ``markup`` is the fallback block.
    """

    markup: str
    ok: bool = True
