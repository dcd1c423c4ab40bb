"""
Content sources for the markdown document.

A source answers a single question: "give me the text at this relative
path". Two implementations are provided:

  - HttpContentSource: one GET through a requests session, relative to the
    page location (browser-style URL joining)
  - FileContentSource: read a UTF-8 file below a base directory

Every failure mode surfaces as ResourceUnavailable.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Optional, Protocol
from urllib.parse import urljoin

import requests

from ..exceptions import ResourceUnavailable
from .models import ContentDocument

LOGGER = logging.getLogger(__name__)

_CHARSET_RE = re.compile(r"charset=[\"']?([\w.:-]+)", re.IGNORECASE)


class ContentSource(Protocol):
    """Anything that can retrieve a markdown document by relative path."""

    def fetch(self, path: str) -> ContentDocument: ...


class HttpContentSource:
    """
    Minimal HTTP content source:
      - one GET per fetch, no retries
      - any status outside 200-299 is a failure
      - body decoded with the declared charset, UTF-8 otherwise
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self._base_url = base_url
        self._session = session or requests.Session()
        self._timeout = timeout
        LOGGER.debug("Initialized HttpContentSource with base_url: %s", base_url)

    def url_for(self, path: str) -> str:
        return urljoin(self._base_url, path)

    def fetch(self, path: str) -> ContentDocument:
        url = self.url_for(path)
        LOGGER.info("GET %s", url)
        try:
            resp = self._session.get(url, timeout=self._timeout)
        except (requests.RequestException, ValueError) as exc:
            raise ResourceUnavailable(
                f"GET {url} failed: {exc}", path=path
            ) from exc

        code = getattr(resp, "status_code", 0)
        LOGGER.debug("GET %s returned status %d", url, code)
        if not 200 <= code < 300:
            raise ResourceUnavailable(
                f"HTTP {code} on GET {url}", path=path, status_code=code
            )

        try:
            body = resp.content
            text = body.decode(self._charset(resp))
        except (requests.RequestException, ValueError, LookupError) as exc:
            raise ResourceUnavailable(
                f"Could not read body of {url}: {exc}", path=path, status_code=code
            ) from exc
        return ContentDocument(path=path, text=text)

    @staticmethod
    def _charset(resp) -> str:
        # requests assumes ISO-8859-1 for text/* without a charset; markdown
        # files are served that way often enough that UTF-8 is the better guess.
        ctype = getattr(resp, "headers", {}).get("Content-Type") or ""
        m = _CHARSET_RE.search(ctype)
        return m.group(1) if m else "utf-8"


class FileContentSource:
    """Reads documents from a local directory, as a static host would serve them."""

    def __init__(self, root: str, encoding: str = "utf-8"):
        self._root = os.path.abspath(root)
        self._encoding = encoding

    def path_for(self, path: str) -> str:
        return os.path.join(self._root, *path.split("/"))

    def fetch(self, path: str) -> ContentDocument:
        full = self.path_for(path)
        LOGGER.debug("Reading %s", full)
        try:
            with open(full, "r", encoding=self._encoding) as f:
                text = f.read()
        except (OSError, ValueError) as exc:
            raise ResourceUnavailable(
                f"Could not read {full}: {exc}", path=path
            ) from exc
        return ContentDocument(path=path, text=text)


def source_for(
    base: str,
    *,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> ContentSource:
    """Pick a source for ``base``: http(s) URLs go over the network, anything else is a directory."""
    if base.startswith("http://") or base.startswith("https://"):
        return HttpContentSource(base, session=session, timeout=timeout)
    return FileContentSource(base)
