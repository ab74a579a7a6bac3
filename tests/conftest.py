"""Pytest configuration and shared fixtures for the watcher service tests."""

import pytest
from typing import Generator
from unittest.mock import Mock

from capability_channel.base_capability_channel import BaseCapabilityChannel
from capability_channel.in_memory_capability_channel import InMemoryCapabilityChannel
from common.watcher_service.manager import CapabilityWatcherService


@pytest.fixture
def mock_channel() -> Mock:
    """Mock capability channel that accepts every request."""
    return Mock(spec=BaseCapabilityChannel)


@pytest.fixture
def mock_channel_provider(mock_channel: Mock) -> Mock:
    """Provider handle returning the mock channel."""
    return Mock(return_value=mock_channel)


@pytest.fixture
def watcher_service(mock_channel_provider: Mock) -> CapabilityWatcherService:
    """Watcher service wired to the mock channel."""
    return CapabilityWatcherService(channel_provider=mock_channel_provider)


@pytest.fixture
def in_memory_channel() -> InMemoryCapabilityChannel:
    return InMemoryCapabilityChannel()


@pytest.fixture
def container_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Generator[str, None, None]:
    """Point the container configuration at a temporary log directory."""
    log_dir = str(tmp_path / "logs")
    monkeypatch.setenv("WATCHER_CHANNEL_MODE", "memory")
    monkeypatch.setenv("WATCHER_LOG_DIR", log_dir)
    monkeypatch.setenv("WATCHER_LOG_LEVEL", "DEBUG")
    yield log_dir
