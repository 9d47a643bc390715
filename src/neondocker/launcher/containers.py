"""KDE neon container lifecycle management using Docker SDK."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Sequence
from functools import partial
from typing import Any

from docker.errors import APIError, NotFound

from neondocker.shared.exceptions import ContainerError, ImageNotFoundError
from neondocker.shared.models import SessionOptions

logger = logging.getLogger(__name__)

_WAYLAND_COMMAND = ["startplasmacompositor"]
_DEVICE_PERMISSIONS = "rwm"


class DockerContainerManager:
    """Docker-based implementation of the ContainerRuntime protocol.

    Picks or creates the container for a session, runs it until it stops
    and removes it afterwards unless asked to keep it.
    """

    def __init__(
        self,
        client: Any,
        *,
        host_display: str = ":0",
        x11_socket_dir: str = "/tmp/.X11-unix",
        devices: Sequence[str] = (),
        skip_missing_devices: bool = True,
        poll_interval: float = 1.0,
    ) -> None:
        self._docker = client
        self._host_display = host_display
        self._x11_socket_dir = x11_socket_dir
        self._devices = tuple(devices)
        self._skip_missing_devices = skip_missing_devices
        self._poll_interval = poll_interval

    async def find_existing(self, reference: str) -> Any | None:
        """Return a container (running or stopped) created from ``reference``, if any."""
        loop = asyncio.get_running_loop()
        try:
            containers = await loop.run_in_executor(None, partial(self._docker.containers.list, all=True))
        except APIError as exc:
            raise ContainerError(f"failed to list containers: {exc}") from exc

        for container in containers:
            if container.attrs.get("Config", {}).get("Image") == reference:
                logger.info("reusing container %s from %s", container.short_id, reference)
                return container
        return None

    async def acquire(self, reference: str, options: SessionOptions, display: int | None = None) -> Any | None:
        """Return the container to run for this session.

        Returns:
            The container, or None if Docker does not know ``reference``.

        Raises:
            ContainerError: If creation fails for any other reason.
        """
        # reattach takes priority over --new and standalone commands
        if options.reattach:
            container = await self.find_existing(reference)
            if container is not None:
                return container
            return await self._create(reference, environment=[self._display_env(display)], full_session=True)
        if options.standalone:
            return await self._create(
                reference,
                command=list(options.command),
                environment=[f"DISPLAY={self._host_display}"],
                full_session=False,
            )
        if options.wayland:
            return await self._create(
                reference,
                command=_WAYLAND_COMMAND,
                environment=[f"DISPLAY={self._host_display}"],
                full_session=True,
            )
        return await self._create(reference, environment=[self._display_env(display)], full_session=True)

    def _display_env(self, display: int | None) -> str:
        if display is None:
            return f"DISPLAY={self._host_display}"
        return f"DISPLAY=:{display}"

    async def _create(
        self,
        reference: str,
        *,
        environment: list[str],
        command: list[str] | None = None,
        full_session: bool,
    ) -> Any | None:
        kwargs: dict[str, Any] = {
            "environment": environment,
            "volumes": [f"{self._x11_socket_dir}:{self._x11_socket_dir}"],
        }
        if command:
            kwargs["command"] = command
        if full_session:
            devices = self._device_bindings()
            if devices:
                kwargs["devices"] = devices

        loop = asyncio.get_running_loop()
        try:
            container = await loop.run_in_executor(None, partial(self._docker.containers.create, reference, **kwargs))
        except NotFound:
            logger.error("Could not find an image with tag %s", reference)
            return None
        except APIError as exc:
            raise ContainerError(f"failed to create container from {reference}: {exc}") from exc
        logger.info("created container %s from %s", container.short_id, reference)
        return container

    def _device_bindings(self) -> list[str]:
        bindings: list[str] = []
        for device in self._devices:
            if self._skip_missing_devices and not os.path.exists(device):
                logger.warning("device %s not present on host, skipping", device)
                continue
            bindings.append(f"{device}:{device}:{_DEVICE_PERMISSIONS}")
        return bindings

    async def start(self, container: Any) -> None:
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, container.start)
        except APIError as exc:
            raise ContainerError(f"failed to start container {container.short_id}: {exc}") from exc
        logger.info("started container %s", container.short_id)

    async def wait_until_stopped(self, container: Any) -> str:
        """Poll the container until it is no longer running.

        Returns:
            The last observed status, e.g. ``exited``.
        """
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, container.reload)
            while container.status == "running":
                await asyncio.sleep(self._poll_interval)
                await loop.run_in_executor(None, container.reload)
        except NotFound:
            logger.warning("container %s disappeared while running", container.short_id)
            return "removed"
        except APIError as exc:
            raise ContainerError(f"failed to inspect container {container.short_id}: {exc}") from exc
        logger.info("container %s is %s", container.short_id, container.status)
        return str(container.status)

    async def remove(self, container: Any) -> None:
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, partial(container.remove, force=True))
            logger.info("removed container %s", container.short_id)
        except NotFound:
            logger.warning("container %s already removed", container.short_id)
        except APIError as exc:
            raise ContainerError(f"failed to remove container {container.short_id}: {exc}") from exc

    async def run_session(self, reference: str, options: SessionOptions, display: int | None = None) -> None:
        """Run one container to completion and tear it down.

        Raises:
            ImageNotFoundError: If no container could be created from ``reference``.
            ContainerError: On any other Docker failure.
        """
        container = await self.acquire(reference, options, display)
        if container is None:
            raise ImageNotFoundError(f"Could not find an image with tag {reference}")

        try:
            await self.start(container)
            await self.wait_until_stopped(container)
        finally:
            if options.keep_container:
                logger.info("keeping container %s", container.short_id)
            else:
                await self.remove(container)
