"""Wait helper mixin for PageNavigator."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Union

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .common import to_driver_selector
from .exceptions import ElementNotFoundError, WaitTimeoutError
from .logging_utils import _log_navigator_event
from .scripts import PageFunction, PageFunctionLike, page_function

logger = logging.getLogger(__name__)

WaitCondition = Union[str, PageFunction, int, float]


@contextmanager
def _translate_driver_timeout(
    message: str,
    *,
    selector: Optional[str],
    timeout_ms: int,
) -> Iterator[None]:
    try:
        yield
    except PlaywrightTimeoutError as exc:
        raise WaitTimeoutError(message, selector=selector, timeout_ms=timeout_ms) from exc


class NavigatorWaitMixin:
    async def wait(self, condition: WaitCondition) -> Any:
        """
        Wait for a selector, a page function or a fixed time.

        - ``str``: CSS selector, or XPath when it starts with ``//``. Waits for the
          element to be visible (or only attached, see ``wait_until_visible``)
          and returns its ElementHandle.
        - ``PageFunction``: waits until the function returns a truthy value in the
          page and returns the resulting JSHandle.
        - ``int``/``float``: sleeps that many milliseconds and returns None.

        Raises WaitTimeoutError when the driver wait times out.
        """
        if isinstance(condition, bool):
            raise TypeError("wait condition must be a selector, PageFunction or milliseconds")
        if isinstance(condition, str):
            return await self._wait_for_selector(condition)
        if isinstance(condition, PageFunction):
            return await self._wait_for_page_function(condition)
        if isinstance(condition, (int, float)):
            await self._frame.wait_for_timeout(max(0, condition))
            return None
        raise TypeError(
            f"Unsupported wait condition type: {type(condition).__name__}"
        )

    async def _wait_for_selector(self, selector: str) -> Any:
        options = self._options
        state = "visible" if options.wait_until_visible else "attached"
        with _translate_driver_timeout(
            f"Timed out waiting for selector to be {state}",
            selector=selector,
            timeout_ms=options.timeout_ms,
        ):
            return await self._frame.wait_for_selector(
                to_driver_selector(selector),
                state=state,
                timeout=options.timeout_ms,
            )

    async def _wait_for_page_function(
        self,
        fn: PageFunction,
        *,
        arg: Any = None,
        selector: Optional[str] = None,
        timeout_ms: Optional[int] = None,
        polling: Optional[Union[int, str]] = None,
    ) -> Any:
        timeout_value = self._options.timeout_ms if timeout_ms is None else timeout_ms
        kwargs: dict[str, Any] = {"arg": arg, "timeout": timeout_value}
        if polling is not None:
            kwargs["polling"] = polling
        with _translate_driver_timeout(
            "Timed out waiting for page function",
            selector=selector,
            timeout_ms=timeout_value,
        ):
            return await self._frame.wait_for_function(fn.source, **kwargs)

    async def wait_fn(
        self,
        selector: str,
        element_predicate: PageFunctionLike,
        *,
        wait_after_ms: Optional[int] = None,
        timeout_ms: Optional[int] = None,
        polling: Optional[Union[int, str]] = None,
    ) -> Any:
        """
        Wait for ``selector``, then for ``element_predicate(element)`` to hold in the page.

        ``wait_after_ms`` adds a fixed delay once the predicate is true. Returns
        the element handle of ``selector``.
        ``timeout_ms=0`` waits for the predicate without a time limit.
        """
        element = await self.wait(selector)
        await self._wait_for_page_function(
            page_function(element_predicate),
            arg=element,
            selector=selector,
            timeout_ms=timeout_ms,
            polling=polling,
        )
        if wait_after_ms:
            await self.wait(wait_after_ms)
        return element

    async def wait_activity(
        self,
        idle_time_ms: Optional[int] = None,
        idle_load_time_ms: Optional[int] = None,
    ) -> bool:
        """Wait for network activity to settle; unset thresholds come from the options."""
        options = self._options
        return await self._activity.wait_for_settled(
            options.wait_idle_time_ms if idle_time_ms is None else idle_time_ms,
            options.wait_idle_load_time_ms if idle_load_time_ms is None else idle_load_time_ms,
        )

    async def _pre_wait(self, selector: str) -> None:
        if not self._options.wait_on_selectors:
            return
        try:
            await self.wait(selector)
        except WaitTimeoutError as exc:
            raise ElementNotFoundError(
                "Element not found before timeout",
                selector=selector,
                timed_out=True,
                context={"timeout_ms": exc.timeout_ms},
            ) from exc

    async def _wait_after_action(self) -> None:
        options = self._options
        if options.waits_for_activity:
            await self.wait_activity()
        if options.wait_after_action_ms:
            await self.wait(options.wait_after_action_ms)
            if options.waits_for_activity:
                await self.wait_activity()
        _log_navigator_event(
            logger,
            level=logging.DEBUG,
            event="post_action_wait",
            idle_time_ms=options.wait_idle_time_ms,
            idle_load_time_ms=options.wait_idle_load_time_ms,
            wait_after_action_ms=options.wait_after_action_ms,
        )
