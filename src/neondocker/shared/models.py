"""Frozen Pydantic models shared by the launcher components."""

from __future__ import annotations

from pydantic import BaseModel

from neondocker.shared.enums import Edition, ImageVariant


class SessionOptions(BaseModel):
    """Options for one neondocker invocation, built once from the command line."""

    model_config = {"frozen": True}

    edition: Edition = Edition.USER
    all_apps: bool = False
    pull: bool = False
    keep_alive: bool = False
    reattach: bool = False
    new: bool = False
    wayland: bool = False
    command: tuple[str, ...] = ()

    @property
    def variant(self) -> ImageVariant:
        return ImageVariant.ALL if self.all_apps else ImageVariant.PLASMA

    @property
    def standalone(self) -> bool:
        """True when a single application runs instead of a full Plasma shell."""
        return bool(self.command)

    @property
    def always_new(self) -> bool:
        return self.new or self.standalone

    @property
    def keep_container(self) -> bool:
        # reattach implies keep-alive
        return self.keep_alive or self.reattach

    @property
    def uses_host_display(self) -> bool:
        """Standalone apps and Wayland sessions draw on the host display, not Xephyr."""
        return self.standalone or self.wayland
