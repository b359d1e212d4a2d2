"""
Page activity tracking.

`ActivityMonitor` listens to one Playwright page's network and DOM lifecycle
events and answers whether the page has gone quiet. Network requests issued by
sub-frames are reported on the owning page, so a single monitor serves the page
and every frame navigator derived from it.

All callbacks run on the event loop thread, as do the poll ticks reading the
counters, so no locking is involved.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, List, Tuple

from .common import DEFAULT_POLL_INTERVAL_MS, MAX_SETTLE_WAIT_MS
from .logging_utils import _log_navigator_event
from .poller import poll_until_true_or_timeout

logger = logging.getLogger(__name__)


class ActivityMonitor:
    """Pending-request and DOM-load bookkeeping for one page."""

    def __init__(
        self,
        page: Any,
        *,
        clock: Callable[[], float] = time.monotonic,
        poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
        max_wait_ms: int = MAX_SETTLE_WAIT_MS,
    ) -> None:
        self._page = page
        self._clock = clock
        self._poll_interval_ms = max(1, int(poll_interval_ms))
        self._max_wait_ms = max(0, int(max_wait_ms))

        self._pending_request_count = 0
        # Clock readings in seconds, meaningful only once the matching flag is set.
        self._last_request_activity_time = 0.0
        self._last_dom_loaded_time = 0.0
        self._request_activity_seen = False
        self._dom_loaded_pending = False

        self._listeners: List[Tuple[str, Callable[..., None]]] = [
            ("request", self._handle_request),
            ("requestfinished", self._handle_request_finished),
            ("requestfailed", self._handle_request_failed),
            ("domcontentloaded", self._handle_dom_content_loaded),
            ("close", self._handle_close),
        ]
        self._stopped = False
        for event_name, handler in self._listeners:
            page.on(event_name, handler)

    @property
    def page(self) -> Any:
        return self._page

    @property
    def pending_request_count(self) -> int:
        return self._pending_request_count

    @property
    def last_request_activity_time(self) -> float:
        return self._last_request_activity_time

    @property
    def last_dom_loaded_time(self) -> float:
        return self._last_dom_loaded_time

    @property
    def stopped(self) -> bool:
        return self._stopped

    # ------------------------------------------------------------------ #
    # Event bookkeeping
    # ------------------------------------------------------------------ #

    def on_request_started(self) -> None:
        self._pending_request_count += 1

    def on_request_finished(self) -> None:
        self._resolve_request("finished")

    def on_request_failed(self) -> None:
        # A failed request is resolved activity, not a pending one.
        self._resolve_request("failed")

    def on_dom_content_loaded(self) -> None:
        self._last_dom_loaded_time = self._clock()
        self._dom_loaded_pending = True

    def _resolve_request(self, outcome: str) -> None:
        if self._pending_request_count > 0:
            self._pending_request_count -= 1
        else:
            _log_navigator_event(
                logger,
                level=logging.WARNING,
                event="request_count_anomaly",
                outcome=outcome,
                pending=self._pending_request_count,
            )
        self._last_request_activity_time = self._clock()
        self._request_activity_seen = True

    def _handle_request(self, _request: Any) -> None:
        self.on_request_started()

    def _handle_request_finished(self, _request: Any) -> None:
        self.on_request_finished()

    def _handle_request_failed(self, _request: Any) -> None:
        self.on_request_failed()

    def _handle_dom_content_loaded(self, *_args: Any) -> None:
        self.on_dom_content_loaded()

    def _handle_close(self, *_args: Any) -> None:
        self.stop()

    # ------------------------------------------------------------------ #
    # Settle detection
    # ------------------------------------------------------------------ #

    def is_settled(self, idle_time_ms: float, idle_load_time_ms: float) -> bool:
        if self._pending_request_count > 0:
            return False
        if not self._request_activity_seen:
            return True
        effective_idle_ms = idle_load_time_ms if self._dom_loaded_pending else idle_time_ms
        idle_for_ms = (self._clock() - self._last_request_activity_time) * 1000.0
        return idle_for_ms > effective_idle_ms

    async def wait_for_settled(
        self,
        idle_time_ms: float = 0,
        idle_load_time_ms: float = 0,
    ) -> bool:
        """
        Wait until no request is pending and the page has been quiet long enough.

        ``idle_load_time_ms`` replaces ``idle_time_ms`` while a DOM-content-loaded
        event is outstanding; the marker is cleared when this call returns, so it
        applies to one settle call only. The wait is capped at ``max_wait_ms``
        and never raises: returns False when the cap was hit.
        """
        if self._stopped:
            _log_navigator_event(logger, level=logging.DEBUG, event="settle_skipped", reason="stopped")
            return True

        idle_time_ms = max(0.0, float(idle_time_ms or 0))
        idle_load_time_ms = max(0.0, float(idle_load_time_ms or 0))
        started = time.monotonic()
        try:
            settled = await poll_until_true_or_timeout(
                self._poll_interval_ms,
                self._max_wait_ms,
                lambda _elapsed_ms: self.is_settled(idle_time_ms, idle_load_time_ms),
            )
        finally:
            self._last_dom_loaded_time = 0.0
            self._dom_loaded_pending = False

        _log_navigator_event(
            logger,
            level=logging.DEBUG if settled else logging.INFO,
            event="settled" if settled else "settle_ceiling_reached",
            idle_time_ms=idle_time_ms,
            idle_load_time_ms=idle_load_time_ms,
            pending=self._pending_request_count,
            waited_ms=(time.monotonic() - started) * 1000.0,
        )
        return settled

    def stop(self) -> None:
        """Unsubscribe from the page. Safe to call more than once."""
        if self._stopped:
            return
        self._stopped = True
        for event_name, handler in self._listeners:
            try:
                self._page.remove_listener(event_name, handler)
            except Exception as exc:
                _log_navigator_event(
                    logger,
                    level=logging.DEBUG,
                    event="remove_listener_failed",
                    listener=event_name,
                    error=exc,
                )
        _log_navigator_event(logger, level=logging.DEBUG, event="activity_monitor_stopped")
