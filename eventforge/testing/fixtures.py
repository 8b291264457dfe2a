"""Pytest fixtures for EventForge."""

from __future__ import annotations

import pytest

from ..config import DispatcherConfig
from ..dispatcher import Dispatcher


@pytest.fixture()
def dispatcher() -> Dispatcher:
    return Dispatcher(DispatcherConfig())


def dispatcher_fixture(**kwargs) -> Dispatcher:
    """Helper for ad-hoc tests where pytest is not available."""
    return Dispatcher(DispatcherConfig(**kwargs))
