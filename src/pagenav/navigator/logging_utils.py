"""Structured logging helpers for navigator modules."""

from __future__ import annotations

import logging
from typing import Any, Mapping


def _normalize_log_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return f"{value:.1f}"
    return str(value)


def _render_log_kv(fields: Mapping[str, Any]) -> str:
    parts: list[str] = []
    for key, value in fields.items():
        if value is None:
            continue
        clean_key = str(key).strip()
        if not clean_key:
            continue
        parts.append(f"{clean_key}={_normalize_log_value(value)}")
    return " ".join(parts)


def _log_navigator_event(
    logger: logging.Logger,
    *,
    level: int,
    event: str,
    **fields: Any,
) -> None:
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    payload.update(fields)
    rendered = _render_log_kv(payload)
    logger.log(level, "navigator %s", rendered)
