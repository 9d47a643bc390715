"""Docker daemon connection wrapper."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docker.errors import DockerException

import docker
from neondocker.shared.exceptions import DockerConnectionError

if TYPE_CHECKING:
    from neondocker.config import Settings

logger = logging.getLogger(__name__)


def connect_docker(settings: Settings) -> docker.DockerClient:
    """Create a Docker client and probe the daemon once.

    Raises:
        DockerConnectionError: If the daemon cannot be reached.
    """
    try:
        if settings.docker_base_url:
            client = docker.DockerClient(
                base_url=settings.docker_base_url,
                timeout=settings.docker_timeout_seconds,
            )
        else:
            client = docker.from_env(timeout=settings.docker_timeout_seconds)
        client.ping()
    except DockerException as exc:
        raise DockerConnectionError(
            "Could not connect to Docker, check it is installed, running "
            "and your user is in the right group for access"
        ) from exc
    logger.debug("connected to docker daemon")
    return client
