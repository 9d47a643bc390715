"""KDE neon image resolution and download using Docker SDK."""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import Any

from docker.errors import APIError, NotFound

from neondocker.shared.exceptions import ImageError, ImageNotFoundError
from neondocker.shared.models import SessionOptions

logger = logging.getLogger(__name__)

DEFAULT_REPOSITORY = "kdeneon"


def image_reference(options: SessionOptions, repository: str = DEFAULT_REPOSITORY) -> str:
    """Return the image tag for the requested variant and edition, e.g. ``kdeneon/plasma:user``."""
    return f"{repository}/{options.variant.value}:{options.edition.value}"


class DockerImageManager:
    """Docker-based implementation of the ImageStore protocol."""

    def __init__(self, client: Any) -> None:
        self._docker = client

    async def has_image(self, reference: str) -> bool:
        """Check whether the image has already been downloaded to the local Docker.

        Raises:
            ImageError: If the image catalog cannot be listed.
        """
        loop = asyncio.get_running_loop()
        try:
            images = await loop.run_in_executor(None, self._docker.images.list)
        except APIError as exc:
            raise ImageError(f"failed to list local images: {exc}") from exc

        for image in images:
            # dangling images have no tags
            if reference in (image.tags or []):
                return True
        return False

    async def pull(self, reference: str) -> None:
        """Download ``reference`` from the registry.

        Raises:
            ImageNotFoundError: If the registry has no such image.
            ImageError: If the download fails.
        """
        repository, _, tag = reference.rpartition(":")
        logger.info("Downloading image %s", reference)
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, partial(self._docker.images.pull, repository, tag=tag))
        except NotFound as exc:
            raise ImageNotFoundError(f"Could not find an image with tag {reference}") from exc
        except APIError as exc:
            raise ImageError(f"failed to pull {reference}: {exc}") from exc

    async def ensure(self, reference: str, *, force_pull: bool = False) -> bool:
        """Pull ``reference`` when it is missing locally or ``force_pull`` is set.

        Returns:
            True if a pull was issued.
        """
        if not force_pull and await self.has_image(reference):
            logger.debug("image %s already present", reference)
            return False
        await self.pull(reference)
        return True
