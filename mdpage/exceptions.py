"""Library exceptions."""

from __future__ import annotations

from typing import Optional


class MdPageError(Exception):
    """Generic mdpage exception."""


class ResourceUnavailable(MdPageError):
    """The content document could not be retrieved.

    Covers transport failures, non-success status codes and errors while
    reading the body. No finer distinction is made.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.path = path
        self.status_code = status_code


class RenderStateError(MdPageError):
    """A render controller was invoked again after it had already run."""
