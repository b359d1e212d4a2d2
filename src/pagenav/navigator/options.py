"""
NavigatorOptions: the wait policy read by every navigator action.

Fields are read fresh on each action, so a navigator can change its policy
between actions with ``update_options``. Frame navigators start from a copy of
their parent's options and are independent afterwards.

Durations are milliseconds.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from pagenav.util.file_utils import from_json_or_yaml

from .common import (
    DEFAULT_TIMEOUT_MS,
    _coerce_bool,
    _coerce_duration_ms,
    _parse_bool_env,
    _parse_int_env,
)

_BOOL_FIELDS = ("wait_until_visible", "wait_on_selectors", "use_simulated_clicks")
_DURATION_FIELDS = (
    "wait_after_action_ms",
    "wait_idle_time_ms",
    "wait_idle_load_time_ms",
    "timeout_ms",
)


@dataclass
class NavigatorOptions:
    """
    Wait policy for a navigator.

    Selector waits:
        wait_until_visible: selector waits require visibility, not only DOM presence
        wait_on_selectors: actions wait for their target selector before acting
        timeout_ms: driver-level timeout for selector and page-function waits

    Post-action waits:
        wait_after_action_ms: fixed delay appended after every action
        wait_idle_time_ms: quiet period with no pending request before "settled"
        wait_idle_load_time_ms: quiet period used right after a DOM load instead

    Clicks:
        use_simulated_clicks: dispatch ``element.click()`` in the page instead of
            moving the pointer and clicking like a user
    """

    wait_until_visible: bool = True
    wait_on_selectors: bool = True
    wait_after_action_ms: int = 0
    wait_idle_time_ms: int = 0
    wait_idle_load_time_ms: int = 0
    use_simulated_clicks: bool = True
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self) -> None:
        for name in _BOOL_FIELDS:
            setattr(self, name, _coerce_bool(getattr(self, name)))
        for name in _DURATION_FIELDS:
            setattr(self, name, _coerce_duration_ms(getattr(self, name), name=name))
        if self.timeout_ms <= 0:
            self.timeout_ms = DEFAULT_TIMEOUT_MS

    @property
    def waits_for_activity(self) -> bool:
        return bool(self.wait_idle_time_ms or self.wait_idle_load_time_ms)

    def with_overrides(self, **kwargs: Any) -> "NavigatorOptions":
        """
        Create a new options object with some values overridden.

        Example:
            >>> base = NavigatorOptions()
            >>> slow = base.with_overrides(wait_after_action_ms=500)
        """
        known = {item.name for item in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ValueError(f"Unknown navigator option(s): {', '.join(unknown)}")
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NavigatorOptions":
        section = data.get("navigator", data) if isinstance(data, Mapping) else None
        if not isinstance(section, Mapping):
            raise ValueError("navigator options must be a mapping")
        return cls().with_overrides(**dict(section))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "NavigatorOptions":
        """Load options from a YAML or JSON file, optionally under a ``navigator`` key."""
        return cls.from_mapping(from_json_or_yaml(path) or {})

    @classmethod
    def from_env(cls, prefix: str = "PAGENAV_") -> "NavigatorOptions":
        """Build options from ``<prefix><FIELD_NAME>`` environment variables."""
        defaults = cls()
        values: Dict[str, Any] = {}
        for name in _BOOL_FIELDS:
            values[name] = _parse_bool_env(f"{prefix}{name.upper()}", getattr(defaults, name))
        for name in _DURATION_FIELDS:
            values[name] = _parse_int_env(f"{prefix}{name.upper()}", getattr(defaults, name), 0)
        return cls(**values)
