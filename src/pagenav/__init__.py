from pagenav.navigator import (
    ActivityMonitor,
    ElementNotFoundError,
    FrameNotFoundError,
    NavigatorError,
    NavigatorOptions,
    PageFunction,
    PageNavigator,
    WaitTimeoutError,
    launch_page_navigator,
    make_page_navigator,
)

__version__ = "0.1.0"

__all__ = [
    "ActivityMonitor",
    "ElementNotFoundError",
    "FrameNotFoundError",
    "NavigatorError",
    "NavigatorOptions",
    "PageFunction",
    "PageNavigator",
    "WaitTimeoutError",
    "launch_page_navigator",
    "make_page_navigator",
]
