"""
Render controller: fetch the markdown document, convert it, display it.

Public API:
  - RenderController.render_content() -> RenderedView
  - RenderController.attach(signal)   run render_content once the signal fires
  - ReadySignal                       one-shot "document ready" event source

The controller owns no output and no parser; the content source, the
markdown renderer and the display region are injected.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .content.models import ContentDocument, RenderedView, RenderState
from .content.sources import ContentSource
from .exceptions import RenderStateError, ResourceUnavailable
from .rendering.options import RenderConfig
from .rendering.renderer_iface import DisplayRegion, MarkdownRenderer

LOGGER = logging.getLogger(__name__)


class ReadySignal:
    """One-shot readiness event.

    Callbacks run once, in registration order, when ``fire`` is first
    called. Callbacks connected after that run immediately.
    """

    def __init__(self):
        self._callbacks: List[Callable[[], object]] = []
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    def connect(self, callback: Callable[[], object]) -> None:
        if self._fired:
            callback()
            return
        self._callbacks.append(callback)

    def fire(self) -> None:
        if self._fired:
            return
        self._fired = True
        callbacks, self._callbacks = self._callbacks, []
        for cb in callbacks:
            cb()


class RenderController:
    """Performs one fetch -> convert -> display cycle."""

    def __init__(
        self,
        source: ContentSource,
        renderer: MarkdownRenderer,
        region: DisplayRegion,
        config: Optional[RenderConfig] = None,
    ):
        self.source = source
        self.renderer = renderer
        self.region = region
        self.config = config or RenderConfig()
        self._state = RenderState.NOT_STARTED
        self._view: Optional[RenderedView] = None

    @property
    def state(self) -> RenderState:
        return self._state

    @property
    def view(self) -> Optional[RenderedView]:
        """The view written by the last render, if any."""
        return self._view

    def attach(self, signal: ReadySignal) -> None:
        signal.connect(self.render_content)

    def render_content(self) -> RenderedView:
        """
        Retrieve the document at ``config.content_path`` and write it to the
        display region as HTML. If retrieval fails for any reason the
        fallback block is written instead. The region is written exactly
        once either way.

        Raises:
            RenderStateError: the controller has already rendered.
        """
        if self._state is not RenderState.NOT_STARTED:
            raise RenderStateError(
                f"render_content already called (state={self._state.value})"
            )
        self._state = RenderState.PENDING
        path = self.config.content_path
        LOGGER.debug("Rendering %s", path)

        try:
            doc = self._fetch(path)
        except ResourceUnavailable as exc:
            LOGGER.error("Failed to load content from %s: %s", path, exc)
            view = RenderedView(self.config.fallback_markup(), ok=False)
            self._finish(view, RenderState.FAILED)
            return view

        view = RenderedView(self.renderer.render(doc.text))
        self._finish(view, RenderState.SUCCEEDED)
        return view

    def _fetch(self, path: str) -> ContentDocument:
        # Any error raised by the source during retrieval is a retrieval failure.
        try:
            return self.source.fetch(path)
        except ResourceUnavailable:
            raise
        except Exception as exc:
            raise ResourceUnavailable(
                f"{type(exc).__name__}: {exc}", path=path
            ) from exc

    def _finish(self, view: RenderedView, state: RenderState) -> None:
        self.region.replace(view.markup)
        self._view = view
        self._state = state
        LOGGER.debug("Render finished: %s", state.value)


def render_content(
    source: ContentSource,
    renderer: MarkdownRenderer,
    region: DisplayRegion,
    config: Optional[RenderConfig] = None,
) -> RenderedView:
    """Run a single render cycle with a fresh controller."""
    return RenderController(source, renderer, region, config).render_content()
