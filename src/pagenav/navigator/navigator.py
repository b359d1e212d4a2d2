"""
PageNavigator: wait-aware actions over a Playwright page or frame.

A navigator binds three things:
- the frame it acts on (the page's main frame, or an iframe's content frame)
- its own `NavigatorOptions`
- the page's shared `ActivityMonitor`

Navigators are not safe for overlapping use: await each action before
starting the next one.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional

from .activity import ActivityMonitor
from .exceptions import FrameNotFoundError
from .logging_utils import _log_navigator_event
from .navigator_interaction import NavigatorInteractionMixin
from .navigator_queries import NavigatorQueryMixin
from .navigator_waits import NavigatorWaitMixin
from .options import NavigatorOptions

logger = logging.getLogger(__name__)


class PageNavigator(
    NavigatorInteractionMixin,
    NavigatorQueryMixin,
    NavigatorWaitMixin,
):
    """Navigate, click, type, select and query with automatic waits."""

    def __init__(
        self,
        page: Any,
        *,
        frame: Optional[Any] = None,
        options: Optional[NavigatorOptions] = None,
        activity: Optional[ActivityMonitor] = None,
    ) -> None:
        self._page = page
        self._frame = frame if frame is not None else page.main_frame
        self._options = replace(options) if options is not None else NavigatorOptions()
        self._owns_activity = activity is None
        self._activity = activity if activity is not None else ActivityMonitor(page)

    @property
    def page(self) -> Any:
        """The Playwright page this navigator belongs to."""
        return self._page

    @property
    def frame(self) -> Any:
        return self._frame

    @property
    def activity(self) -> ActivityMonitor:
        return self._activity

    @property
    def options(self) -> NavigatorOptions:
        """A copy of the effective options; change them with `update_options`."""
        return replace(self._options)

    def update_options(self, **changes: Any) -> NavigatorOptions:
        """Override the given option fields, leaving the others unchanged."""
        self._options = self._options.with_overrides(**changes)
        _log_navigator_event(
            logger,
            level=logging.DEBUG,
            event="options_updated",
            **changes,
        )
        return self.options

    async def frame_navigator(self, selector: str) -> "PageNavigator":
        """
        Navigator for the document inside the iframe at ``selector``.

        The child shares this page's activity monitor and starts with a copy of
        the current options; later changes to either side are independent.
        """
        element = await self._resolve_target(selector)
        frame = await element.content_frame()
        if frame is None:
            raise FrameNotFoundError("Element does not host a frame", selector=selector)
        _log_navigator_event(
            logger,
            level=logging.DEBUG,
            event="frame_navigator",
            selector=selector,
            frame_url=getattr(frame, "url", None),
        )
        return PageNavigator(
            self._page,
            frame=frame,
            options=self._options,
            activity=self._activity,
        )

    def close(self) -> None:
        """Stop activity tracking if this navigator created the monitor."""
        if self._owns_activity:
            self._activity.stop()


def make_page_navigator(
    page: Any,
    options: Optional[NavigatorOptions] = None,
    **overrides: Any,
) -> PageNavigator:
    """
    Create a navigator for ``page`` with a fresh activity monitor.

    Example:
        >>> navigator = make_page_navigator(page, wait_idle_time_ms=500)
        >>> await navigator.goto("http://localhost:8000")
        >>> await navigator.select("#pet-select", label="Spider")
    """
    base = options if options is not None else NavigatorOptions()
    if overrides:
        base = base.with_overrides(**overrides)
    return PageNavigator(page, options=base)
