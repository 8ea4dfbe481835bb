"""Registry key paths that accept either slash style."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class RegistryItem:
    """A registry key path such as ``HKEY_CURRENT_USER/Software/Foo``.

    The raw text may use forward slashes or backslashes as separators.
    """

    raw: str

    def __str__(self) -> str:
        return self.raw

    def render(self) -> str:
        """Return the path with forward slashes."""
        return self.raw.replace("\\", "/")

    def rendered(self) -> RegistryItem:
        """Return a copy whose raw text uses forward slashes."""
        return RegistryItem(self.render())

    def interpret(self) -> str:
        """Return the path with backslashes, as the registry expects."""
        return self.raw.replace("/", "\\")

    def interpreted(self) -> RegistryItem:
        """Return a copy whose raw text uses backslashes."""
        return RegistryItem(self.interpret())

    def split(self) -> list[str]:
        """Return the path's components."""
        return self.interpret().split("\\")

    def split_hive(self) -> tuple[str, str] | None:
        """Split into ``(hive, key)``, or return None if there is no key part."""
        parts = self.interpret().split("\\", 1)
        if len(parts) != 2:
            return None
        return parts[0], parts[1]

    def is_prefix_of(self, other: RegistryItem) -> bool:
        """Whether this key is a strict ancestor of ``other``."""
        ours = self.split()
        theirs = other.split()
        if len(ours) >= len(theirs):
            return False
        return all(us == them for us, them in zip(ours, theirs))

    def nearest_prefix(self, others: Iterable[RegistryItem]) -> RegistryItem | None:
        """Return the deepest item in ``others`` that is a strict ancestor of this key."""
        ours = self.split()
        nearest: RegistryItem | None = None
        nearest_len = 0
        for other in others:
            theirs = other.split()
            if len(ours) <= len(theirs):
                continue
            if len(theirs) > nearest_len and all(us == them for us, them in zip(ours, theirs)):
                nearest = other
                nearest_len = len(theirs)
        return nearest