"""X display management: nested Xephyr servers and host display access."""

from __future__ import annotations

import asyncio
import logging
import shutil
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from neondocker.shared.exceptions import DependencyMissingError, DisplayError

logger = logging.getLogger(__name__)

_INSTALL_HINT = "apt-get install xserver-xephyr or similar"


def find_free_display(socket_dir: str | Path = "/tmp/.X11-unix") -> int:
    """Return the lowest display number >= 1 with no X socket in ``socket_dir``."""
    base = Path(socket_dir)
    display = 1
    while (base / f"X{display}").exists():
        display += 1
    return display


def require_command(name: str) -> str:
    """Return the full path of ``name`` on PATH.

    Raises:
        DependencyMissingError: If the executable is not installed.
    """
    path = shutil.which(name)
    if path is None:
        raise DependencyMissingError(f"{name} is not installed, {_INSTALL_HINT}")
    return path


async def _run_quiet(*cmd: str) -> int:
    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
    except OSError as exc:
        raise DisplayError(f"failed to run {' '.join(cmd)}: {exc}") from exc
    return await proc.wait()


@asynccontextmanager
async def host_display_access(*, xhost_bin: str = "xhost") -> AsyncIterator[None]:
    """Open the host X server to all clients while the block runs.

    Containers talk to the host display over the bind-mounted X socket,
    which X access control would otherwise reject.

    Raises:
        DependencyMissingError: If xhost is not installed.
    """
    xhost = require_command(xhost_bin)
    rc = await _run_quiet(xhost, "+")
    if rc != 0:
        logger.warning("xhost + exited with status %d", rc)
    try:
        yield
    finally:
        rc = await _run_quiet(xhost, "-")
        if rc != 0:
            logger.warning("xhost - exited with status %d", rc)


@asynccontextmanager
async def nested_display(
    display: int,
    *,
    xephyr_bin: str = "Xephyr",
    screen: str = "1024x768",
) -> AsyncIterator[int]:
    """Run Xephyr on ``:display`` for the duration of the block.

    The server is sent SIGTERM exactly once on every exit path.

    Raises:
        DependencyMissingError: If Xephyr is not installed.
        DisplayError: If Xephyr cannot be spawned.
    """
    xephyr = require_command(xephyr_bin)
    try:
        proc = await asyncio.create_subprocess_exec(xephyr, "-screen", screen, f":{display}")
    except OSError as exc:
        raise DisplayError(f"failed to start {xephyr_bin} on :{display}: {exc}") from exc
    logger.info("started %s on :%d (pid %d)", xephyr_bin, display, proc.pid)

    try:
        yield display
    finally:
        try:
            proc.terminate()
        except ProcessLookupError:
            logger.warning("%s (pid %d) already exited", xephyr_bin, proc.pid)
        await proc.wait()
        logger.info("stopped %s on :%d", xephyr_bin, display)
