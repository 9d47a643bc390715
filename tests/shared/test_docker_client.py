"""Tests for the Docker connection probe."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from docker.errors import DockerException

from neondocker.config import Settings
from neondocker.shared.docker_client import connect_docker
from neondocker.shared.exceptions import DockerConnectionError


class TestConnectDocker:
    def test_from_env_and_ping(self) -> None:
        client = MagicMock()
        with patch("neondocker.shared.docker_client.docker.from_env", return_value=client) as from_env:
            result = connect_docker(Settings())

        assert result is client
        from_env.assert_called_once_with(timeout=120)
        client.ping.assert_called_once()

    def test_explicit_base_url(self) -> None:
        client = MagicMock()
        with patch("neondocker.shared.docker_client.docker.DockerClient", return_value=client) as ctor:
            connect_docker(Settings(docker_base_url="tcp://10.0.0.5:2375"))

        ctor.assert_called_once_with(base_url="tcp://10.0.0.5:2375", timeout=120)

    def test_daemon_unreachable(self) -> None:
        with patch(
            "neondocker.shared.docker_client.docker.from_env",
            side_effect=DockerException("Error while fetching server API version"),
        ):
            with pytest.raises(DockerConnectionError, match="Could not connect to Docker"):
                connect_docker(Settings())

    def test_ping_fails(self) -> None:
        client = MagicMock()
        client.ping.side_effect = DockerException("connection refused")
        with patch("neondocker.shared.docker_client.docker.from_env", return_value=client):
            with pytest.raises(DockerConnectionError):
                connect_docker(Settings())
