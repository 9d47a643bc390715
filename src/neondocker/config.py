"""Centralised configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings

# Camera plus the DRI nodes Plasma needs for GL in the container.
DEFAULT_DEVICES = (
    "/dev/video0",
    "/dev/dri/card0",
    "/dev/dri/controlD64",
    "/dev/dri/renderD128",
)


class Settings(BaseSettings):
    """Host-specific configuration loaded from environment variables."""

    model_config = {"env_prefix": "NEONDOCKER_", "frozen": True}

    # Docker
    # Empty means DOCKER_HOST / the default socket via docker.from_env().
    docker_base_url: str = ""
    docker_timeout_seconds: int = 120

    # Images
    image_repository: str = "kdeneon"

    # X11
    x11_socket_dir: str = "/tmp/.X11-unix"
    host_display: str = ":0"
    xephyr_bin: str = "Xephyr"
    xhost_bin: str = "xhost"
    screen_geometry: str = "1024x768"

    # Container
    poll_interval_seconds: float = 1.0
    devices: tuple[str, ...] = DEFAULT_DEVICES
    skip_missing_devices: bool = True

    log_level: str = "INFO"


def get_settings() -> Settings:
    """Factory, allows overriding in tests."""
    return Settings()
