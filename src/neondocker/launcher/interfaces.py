"""Protocol interfaces for launcher dependency injection."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from neondocker.shared.models import SessionOptions


@runtime_checkable
class ImageStore(Protocol):
    """Protocol for the local image catalog."""

    async def has_image(self, reference: str) -> bool:
        """Check whether ``reference`` is already downloaded.

        Raises:
            ImageError: If the catalog cannot be read
        """
        ...

    async def pull(self, reference: str) -> None:
        """Download ``reference``.

        Raises:
            ImageNotFoundError: If the registry has no such image
            ImageError: If the download fails
        """
        ...

    async def ensure(self, reference: str, *, force_pull: bool = False) -> bool:
        """Pull ``reference`` if missing or forced.

        Returns:
            True if a pull was issued
        """
        ...


@runtime_checkable
class ContainerRuntime(Protocol):
    """Protocol for running one session container to completion."""

    async def acquire(self, reference: str, options: SessionOptions, display: int | None = None) -> Any | None:
        """Reuse or create the container for a session.

        Returns:
            Container handle, or None if the image is unknown
        """
        ...

    async def run_session(self, reference: str, options: SessionOptions, display: int | None = None) -> None:
        """Start the container, wait for it to stop and tear it down.

        Raises:
            ImageNotFoundError: If the image is unknown
            ContainerError: On any other runtime failure
        """
        ...
