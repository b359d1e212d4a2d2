"""
Wait-aware browser navigation.

The navigator wraps a Playwright page (or frame) and applies one wait policy
around every action: wait for the target selector, act, then wait for network
activity to settle and for any configured fixed delay.
"""

from .activity import ActivityMonitor
from .common import DEFAULT_POLL_INTERVAL_MS, DEFAULT_TIMEOUT_MS, MAX_SETTLE_WAIT_MS
from .exceptions import (
    ElementNotFoundError,
    FrameNotFoundError,
    NavigatorError,
    WaitTimeoutError,
)
from .launch import launch_page_navigator
from .navigator import PageNavigator, make_page_navigator
from .options import NavigatorOptions
from .poller import poll_until_true_or_timeout
from .scripts import PageFunction

__all__ = [
    "ActivityMonitor",
    "DEFAULT_POLL_INTERVAL_MS",
    "DEFAULT_TIMEOUT_MS",
    "ElementNotFoundError",
    "FrameNotFoundError",
    "MAX_SETTLE_WAIT_MS",
    "NavigatorError",
    "NavigatorOptions",
    "PageFunction",
    "PageNavigator",
    "WaitTimeoutError",
    "launch_page_navigator",
    "make_page_navigator",
    "poll_until_true_or_timeout",
]
