"""neondocker command-line entry point.

A wee command to simplify running KDE neon Docker images::

    neondocker                          # full Plasma session, User Edition
    neondocker --edition dev-unstable   # Developer Unstable Edition
    neondocker -a konsole               # standalone app from the "all" image
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from neondocker.config import get_settings
from neondocker.launcher.options import resolve_options
from neondocker.shared.exceptions import NeonDockerError

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    try:
        settings = get_settings()
    except ValidationError as exc:
        logger.error("invalid NEONDOCKER_* settings: %s", exc)
        return 1
    logging.getLogger().setLevel(settings.log_level)

    try:
        options = resolve_options(argv)
    except NeonDockerError as exc:
        logger.error("%s", exc)
        return 1

    try:
        from neondocker.launcher.service import build_launcher
        from neondocker.shared.docker_client import connect_docker
    except ImportError:
        logger.error("Could not find the docker library, run: pip install docker")
        return 1

    try:
        client = connect_docker(settings)
        try:
            asyncio.run(build_launcher(client, settings).launch(options))
        finally:
            client.close()
    except NeonDockerError as exc:
        logger.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        logger.warning("interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
