"""Hierarchical exception types for neondocker."""

from __future__ import annotations


class NeonDockerError(Exception):
    """Base exception for all neondocker errors."""


# ── Configuration ──────────────────────────────────────────────


class ConfigurationError(NeonDockerError):
    """Invalid user-supplied options."""


class InvalidEditionError(ConfigurationError):
    """Edition is not one of the published KDE neon editions."""


# ── Host environment ───────────────────────────────────────────


class DependencyMissingError(NeonDockerError):
    """A required executable or library is not installed."""


class DockerConnectionError(NeonDockerError):
    """Failed to reach the Docker daemon."""


class DisplayError(NeonDockerError):
    """Nested X server could not be started."""


# ── Docker resources ───────────────────────────────────────────


class ImageError(NeonDockerError):
    """Image listing or download failed."""


class ImageNotFoundError(ImageError):
    """Docker does not know the requested image tag."""


class ContainerError(NeonDockerError):
    """Container lifecycle error."""
