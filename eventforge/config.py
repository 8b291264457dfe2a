"""Configuration models for EventForge."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from .domain.exceptions import ConfigurationError, InvalidSortOrder
from .domain.listeners import DEFAULT_PRIORITY


class SortOrder(IntEnum):
    """Order in which listener priorities are executed."""

    LOW_TO_HIGH = 1
    HIGH_TO_LOW = 2

    @classmethod
    def coerce(cls, value: Any) -> "SortOrder":
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidSortOrder(value)
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidSortOrder(value) from exc


_SORT_ORDER_NAMES = {
    "low_to_high": SortOrder.LOW_TO_HIGH,
    "high_to_low": SortOrder.HIGH_TO_LOW,
    "1": SortOrder.LOW_TO_HIGH,
    "2": SortOrder.HIGH_TO_LOW,
}

_TRUTHY = {"1", "true", "yes"}


@dataclass(slots=True)
class DispatcherConfig:
    """Initial settings for a Dispatcher."""

    sort_order: SortOrder = SortOrder.LOW_TO_HIGH
    stop_on_false: bool = False
    default_priority: int = DEFAULT_PRIORITY

    @classmethod
    def from_env(cls) -> "DispatcherConfig":
        """Create config from environment variables prefixed with EVENTFORGE_."""
        prefix = "EVENTFORGE_"
        raw_order = os.getenv(f"{prefix}SORT_ORDER", "low_to_high").strip().lower()
        try:
            sort_order = _SORT_ORDER_NAMES[raw_order]
        except KeyError as exc:
            raise ConfigurationError(
                f"Invalid value for {prefix}SORT_ORDER: {raw_order!r}"
            ) from exc

        raw_priority = os.getenv(f"{prefix}DEFAULT_PRIORITY", str(DEFAULT_PRIORITY))
        try:
            default_priority = int(raw_priority)
        except ValueError as exc:
            raise ConfigurationError(
                f"{prefix}DEFAULT_PRIORITY must be an integer, got {raw_priority!r}"
            ) from exc

        return cls(
            sort_order=sort_order,
            stop_on_false=os.getenv(f"{prefix}STOP_ON_FALSE", "false").lower() in _TRUTHY,
            default_priority=default_priority,
        )


__all__ = ["DispatcherConfig", "SortOrder"]
