"""
Navigator Exception Hierarchy.

Exception Hierarchy:
    NavigatorError (base)
    ├── WaitTimeoutError      (also a builtin TimeoutError)
    ├── ElementNotFoundError  (also a LookupError)
    └── FrameNotFoundError    (also a LookupError)

Failures raised inside the page while evaluating caller-supplied functions are
not wrapped; they surface as the driver's own evaluation error.
"""

from typing import Any, Dict, Optional


class NavigatorError(Exception):
    """Base exception for all navigator errors.

    Attributes:
        selector: Selector the failing operation was working against
        context: Additional context dictionary
    """

    def __init__(
        self,
        message: str,
        selector: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.selector = selector
        self.context = context or {}

        parts = [message]
        if selector:
            parts.append(f"selector={selector}")

        super().__init__(" | ".join(parts))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": str(self.args[0]) if self.args else "",
            "selector": self.selector,
            **self.context,
        }


class WaitTimeoutError(NavigatorError, TimeoutError):
    """A selector or page-function wait exceeded the driver wait timeout.

    Raised when:
    - A selector never appeared (or never became visible)
    - A page function never returned a truthy value
    """

    def __init__(
        self,
        message: str,
        timeout_ms: Optional[int] = None,
        **kwargs,
    ):
        self.timeout_ms = timeout_ms
        context = kwargs.pop("context", {})
        if timeout_ms is not None:
            context["timeout_ms"] = timeout_ms
        super().__init__(message, context=context, **kwargs)


class ElementNotFoundError(NavigatorError, LookupError):
    """An action needed exactly one element and resolution yielded none.

    Raised when:
    - The target of click/type/select/scroll is missing after its pre-wait
    - The pre-wait itself timed out (the timeout is chained as ``__cause__``)
    """

    def __init__(
        self,
        message: str,
        timed_out: bool = False,
        **kwargs,
    ):
        self.timed_out = timed_out
        context = kwargs.pop("context", {})
        context["timed_out"] = timed_out
        super().__init__(message, context=context, **kwargs)


class FrameNotFoundError(NavigatorError, LookupError):
    """Frame descent was requested on an element that hosts no nested document."""

    pass
