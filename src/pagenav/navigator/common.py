"""Shared constants and helpers for navigator modules."""

from __future__ import annotations

import os
from typing import Any


DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_POLL_INTERVAL_MS = 50
MAX_SETTLE_WAIT_MS = 30_000
XPATH_PREFIX = "//"


def _safe_title(value: Any) -> str:
    try:
        return str(value) if value is not None else ""
    except Exception:
        return ""


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    text = _safe_title(value).strip().lower()
    if text in {"1", "true", "yes", "on"}:
        return True
    if text in {"0", "false", "no", "off", ""}:
        return False
    return bool(value)


def _coerce_duration_ms(value: Any, *, name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number of milliseconds, got {value!r}")
    try:
        parsed = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a number of milliseconds, got {value!r}") from exc
    return max(0, parsed)


def _parse_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    text = raw.strip().lower()
    if text in {"1", "true", "yes", "on"}:
        return True
    if text in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_int_env(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return max(minimum, int(default))
    try:
        parsed = int(raw.strip())
    except Exception:
        return max(minimum, int(default))
    return max(minimum, parsed)


def is_xpath(selector: str) -> bool:
    return selector.startswith(XPATH_PREFIX)


def to_driver_selector(selector: str) -> str:
    """Map a CSS selector or ``//``-prefixed XPath to a Playwright selector."""
    clean = (selector or "").strip()
    if not clean:
        raise ValueError("selector is required")
    if is_xpath(clean):
        return f"xpath={clean}"
    return clean
