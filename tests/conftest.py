"""Shared pytest fixtures for the neondocker test suite."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from neondocker.config import Settings


@pytest.fixture()
def settings(tmp_path) -> Settings:
    """Return a Settings instance pointed at a scratch X socket dir."""
    socket_dir = tmp_path / ".X11-unix"
    socket_dir.mkdir()
    return Settings(
        x11_socket_dir=str(socket_dir),
        poll_interval_seconds=0,
        devices=(),
    )


@pytest.fixture()
def mock_container() -> MagicMock:
    c = MagicMock()
    c.id = "abc123def456"
    c.short_id = "abc123def4"
    c.status = "exited"
    c.attrs = {"Config": {"Image": "kdeneon/plasma:user"}}
    return c


@pytest.fixture()
def mock_docker(mock_container: MagicMock) -> MagicMock:
    client = MagicMock()
    client.images.list.return_value = []
    client.containers.list.return_value = []
    client.containers.create.return_value = mock_container
    return client
