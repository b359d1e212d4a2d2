"""Interaction helper mixin for PageNavigator.

Every action follows the same protocol: optional pre-wait for its selector,
delegate to the driver, then the post-action wait from the options.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from .common import to_driver_selector
from .exceptions import ElementNotFoundError
from .logging_utils import _log_navigator_event
from .navigator_waits import WaitCondition, _translate_driver_timeout
from .scripts import SCROLL_TO_BOTTOM_JS, SELECT_OPTION_JS, SIMULATED_CLICK_JS

logger = logging.getLogger(__name__)


class NavigatorInteractionMixin:
    async def goto(
        self,
        url: str,
        wait_condition: Optional[WaitCondition] = None,
        *,
        wait_until: str = "load",
    ) -> Any:
        """
        Navigate to ``url`` and return the driver's response.

        After navigation completes, waits for ``wait_condition`` when given,
        otherwise runs the regular post-action wait.
        """
        _log_navigator_event(logger, level=logging.INFO, event="goto", url=url)
        response = await self._frame.goto(
            url,
            timeout=self._options.timeout_ms,
            wait_until=wait_until,
        )
        if wait_condition is not None:
            await self.wait(wait_condition)
        else:
            await self._wait_after_action()
        return response

    async def _resolve_target(self, selector: str) -> Any:
        await self._pre_wait(selector)
        element = await self.query_element_handle(selector)
        if element is None:
            raise ElementNotFoundError("Element not found", selector=selector)
        return element

    async def click(self, target: Union[str, Any], **click_options: Any) -> None:
        """
        Click an element given by selector (css or xpath) or ElementHandle.

        With ``use_simulated_clicks`` the click event is dispatched on the element
        inside the page, so it does not need to be visible, stable or unobstructed.
        Otherwise the driver moves the pointer and clicks; ``click_options`` are
        passed through to it (button, click_count, modifiers, position, ...).
        """
        if isinstance(target, str):
            element = await self._resolve_target(target)
            label = target
        else:
            element = target
            label = None
            if element is None:
                raise ElementNotFoundError("Element not found")

        simulated = self._options.use_simulated_clicks
        _log_navigator_event(
            logger,
            level=logging.DEBUG,
            event="click",
            selector=label,
            simulated=simulated,
        )
        if simulated:
            await element.evaluate(SIMULATED_CLICK_JS)
        else:
            click_options.setdefault("timeout", self._options.timeout_ms)
            with _translate_driver_timeout(
                "Timed out clicking element",
                selector=label,
                timeout_ms=click_options["timeout"],
            ):
                await element.click(**click_options)

        await self._wait_after_action()

    async def type(self, selector: str, text: str, *, delay_ms: Optional[int] = None) -> None:
        """Type ``text`` into the field at ``selector``; ``delay_ms`` sets the delay between keys."""
        await self._pre_wait(selector)
        kwargs: dict[str, Any] = {"timeout": self._options.timeout_ms}
        if delay_ms:
            kwargs["delay"] = delay_ms
        _log_navigator_event(
            logger,
            level=logging.DEBUG,
            event="type",
            selector=selector,
            length=len(text),
            delay_ms=delay_ms,
        )
        with _translate_driver_timeout(
            "Timed out typing into element",
            selector=selector,
            timeout_ms=self._options.timeout_ms,
        ):
            await self._frame.type(to_driver_selector(selector), text, **kwargs)

        await self._wait_after_action()

    async def select(
        self,
        selector: str,
        *,
        value: Optional[str] = None,
        label: Optional[str] = None,
    ) -> None:
        """
        Selects an option within a HTML list and fires a ``change`` event.

        ``label`` matches the option label and wins over ``value``, which matches
        the option value attribute. Non-printable and non-ASCII characters in
        the options are ignored when comparing. A missing option surfaces as the
        driver's evaluation error.
        """
        if value is None and label is None:
            raise ValueError("value or label is required")
        if label is not None and not label:
            raise ValueError("label must not be empty")

        element = await self._resolve_target(selector)
        _log_navigator_event(
            logger,
            level=logging.DEBUG,
            event="select",
            selector=selector,
            value=value,
            label=label,
        )
        await element.evaluate(SELECT_OPTION_JS, {"value": value, "label": label})

        await self._wait_after_action()

    async def scroll_element_to_bottom(self, selector: str, delay_ms: int = 0) -> None:
        """Scroll a scrollable element to the bottom, then wait ``delay_ms`` for content to load."""
        element = await self._resolve_target(selector)
        await element.evaluate(SCROLL_TO_BOTTOM_JS)
        if delay_ms:
            await self.wait(delay_ms)

        await self._wait_after_action()

    def expect_download(self, **kwargs: Any) -> Any:
        """
        Return the page's download waiter, bounded by ``options.timeout_ms``.

        Usage:
            async with navigator.expect_download() as download_info:
                await navigator.click("#export")
            download = await download_info.value
            await download.save_as(target_path)
        """
        kwargs.setdefault("timeout", self._options.timeout_ms)
        return self._page.expect_download(**kwargs)
