"""Launch a browser and hand out a ready navigator."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Dict, Optional, Sequence, Union

from playwright.async_api import async_playwright

from .navigator import PageNavigator, make_page_navigator
from .options import NavigatorOptions

logger = logging.getLogger(__name__)

SUPPORTED_BROWSER_TYPES = ("chromium", "firefox", "webkit")


@asynccontextmanager
async def launch_page_navigator(
    *,
    headless: bool = True,
    browser_type: str = "chromium",
    launch_args: Optional[Sequence[str]] = None,
    downloads_path: Optional[Union[str, Path]] = None,
    options: Optional[NavigatorOptions] = None,
    **overrides: Any,
) -> AsyncIterator[PageNavigator]:
    """
    Start Playwright, open one page and yield a navigator bound to it.

    Downloads are accepted. With ``downloads_path`` they are written to that
    directory under driver-generated names; use ``PageNavigator.expect_download``
    and ``Download.save_as`` to keep a file under its own name.

    Everything is closed again in reverse order when the block exits.
    """
    if browser_type not in SUPPORTED_BROWSER_TYPES:
        raise ValueError(
            f"Unsupported browser_type: {browser_type}. "
            f"Expected one of {', '.join(SUPPORTED_BROWSER_TYPES)}"
        )

    async with async_playwright() as playwright:
        launcher = getattr(playwright, browser_type)
        launch_kwargs: Dict[str, Any] = {"headless": headless, "args": list(launch_args or ())}
        if downloads_path is not None:
            Path(downloads_path).mkdir(parents=True, exist_ok=True)
            launch_kwargs["downloads_path"] = str(downloads_path)
        browser = await launcher.launch(**launch_kwargs)
        logger.info(
            "Browser started type=%s headless=%s downloads_path=%s",
            browser_type,
            headless,
            downloads_path,
        )
        try:
            context = await browser.new_context(accept_downloads=True)
            page = await context.new_page()
            navigator = make_page_navigator(page, options, **overrides)
            try:
                yield navigator
            finally:
                navigator.close()
                await context.close()
        finally:
            await browser.close()
            logger.info("Browser stopped type=%s", browser_type)
