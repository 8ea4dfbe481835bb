"""Operating-system detection and OS constraints on a game's save files."""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterable
from dataclasses import dataclass


class Os(enum.Enum):
    """Operating systems that save-file entries can be constrained to."""

    WINDOWS = "windows"
    LINUX = "linux"
    MAC = "mac"
    OTHER = "other"


@dataclass(frozen=True)
class GameFileConstraint:
    """A condition under which a save-file entry applies.

    ``os`` limits the entry to one operating system and ``store`` to one
    game store; either may be None when the entry is not limited by it.
    """

    os: Os | None = None
    store: str | None = None


def get_os() -> Os:
    """Return the operating system this process is running on."""
    platform = sys.platform
    if platform.startswith("linux"):
        return Os.LINUX
    if platform in ("win32", "cygwin"):
        return Os.WINDOWS
    if platform == "darwin":
        return Os.MAC
    return Os.OTHER


def should_exclude_as_other_os_data(
    constraints: Iterable[GameFileConstraint],
    host: Os,
    maybe_proton: bool,
) -> bool:
    """Whether an entry only applies to operating systems other than ``host``.

    An entry is kept when it has no constraints, when any constraint does not
    name an OS, when any constraint names ``host``, or when it is meant for
    Windows and the game may be running under Proton.
    """
    constraints = list(constraints)
    if not constraints:
        return False
    if any(c.os is None for c in constraints):
        return False
    if any(c.os == host for c in constraints):
        return False
    if maybe_proton and any(c.os == Os.WINDOWS for c in constraints):
        return False
    return True