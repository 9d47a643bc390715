"""Session launcher tying image, display and container handling together."""

from __future__ import annotations

import logging
from typing import Any

from neondocker.config import Settings
from neondocker.launcher.containers import DockerContainerManager
from neondocker.launcher.display import find_free_display, host_display_access, nested_display
from neondocker.launcher.images import DockerImageManager, image_reference
from neondocker.launcher.interfaces import ContainerRuntime, ImageStore
from neondocker.shared.models import SessionOptions

logger = logging.getLogger(__name__)


class SessionLauncher:
    """Orchestrate image -> display -> container for one invocation."""

    def __init__(self, images: ImageStore, containers: ContainerRuntime, settings: Settings) -> None:
        self.images = images
        self.containers = containers
        self._settings = settings

    async def launch(self, options: SessionOptions) -> None:
        """Run a KDE neon session and return once its container has stopped."""
        reference = image_reference(options, self._settings.image_repository)
        await self.images.ensure(reference, force_pull=options.pull)

        if options.uses_host_display:
            logger.info("running %s on host display %s", reference, self._settings.host_display)
            async with host_display_access(xhost_bin=self._settings.xhost_bin):
                await self.containers.run_session(reference, options)
            return

        display = find_free_display(self._settings.x11_socket_dir)
        async with nested_display(
            display,
            xephyr_bin=self._settings.xephyr_bin,
            screen=self._settings.screen_geometry,
        ):
            await self.containers.run_session(reference, options, display)


def build_launcher(client: Any, settings: Settings) -> SessionLauncher:
    """Wire Docker-backed components from settings."""
    return SessionLauncher(
        images=DockerImageManager(client),
        containers=DockerContainerManager(
            client,
            host_display=settings.host_display,
            x11_socket_dir=settings.x11_socket_dir,
            devices=settings.devices,
            skip_missing_devices=settings.skip_missing_devices,
            poll_interval=settings.poll_interval_seconds,
        ),
        settings=settings,
    )
