"""Command-line option parsing for the session launcher."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from neondocker.shared.enums import Edition
from neondocker.shared.exceptions import InvalidEditionError
from neondocker.shared.models import SessionOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="neondocker",
        usage="neondocker [options] [standalone-application]",
        description="Run KDE neon Docker images in a nested X server.",
        epilog=(
            "standalone-application: Run a standalone application rather than full Plasma shell. "
            "Assumes -n to always start a new container."
        ),
    )
    parser.add_argument("-p", "--pull", action="store_true", help="Always pull latest version")
    parser.add_argument(
        "-a", "--all", dest="all_apps", action="store_true", help="Use Neon All images (larger, contains all apps)"
    )
    parser.add_argument(
        "-e",
        "--edition",
        default=Edition.USER.value,
        metavar="EDITION",
        help=f"[{','.join(Edition.values())}]",
    )
    parser.add_argument("-k", "--keep-alive", action="store_true", help="keep-alive container on exit")
    parser.add_argument("-r", "--reattach", action="store_true", help="reuse an existing container [assumes -k]")
    parser.add_argument(
        "-n",
        "--new",
        action="store_true",
        help="Always start a new container even if one is already running from the requested image",
    )
    parser.add_argument("-w", "--wayland", action="store_true", help="Run a Wayland session")
    parser.add_argument("command", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)
    return parser


def parse_edition(value: str) -> Edition:
    """Validate an edition name.

    Raises:
        InvalidEditionError: If the name is not a known edition.
    """
    try:
        return Edition(value)
    except ValueError as exc:
        raise InvalidEditionError(f"Unknown edition. Valid editions are: {Edition.values()}") from exc


def resolve_options(argv: Sequence[str] | None = None) -> SessionOptions:
    """Parse ``argv`` into an immutable :class:`SessionOptions`.

    Raises:
        InvalidEditionError: If ``--edition`` is not a known edition.
    """
    args = build_parser().parse_args(argv)
    command = list(args.command)
    if command and command[0] == "--":
        command = command[1:]
    return SessionOptions(
        edition=parse_edition(args.edition),
        all_apps=args.all_apps,
        pull=args.pull,
        keep_alive=args.keep_alive,
        reattach=args.reattach,
        new=args.new,
        wayland=args.wayland,
        command=tuple(command),
    )
