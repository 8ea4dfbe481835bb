"""Detection of files and registry keys claimed by more than one game."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from savescan.registry_item import RegistryItem
from savescan.scan_info import ScanInfo, ScannedFile


def _pick_path(file: ScannedFile) -> str:
    """The path that identifies a file: its original location if known."""
    return file.original_path if file.original_path is not None else file.path


def _count_duplicates(owners: Iterable[set[str]], game: str) -> int:
    return sum(1 for games in owners if game in games and len(games) > 1)


class DuplicateDetector:
    """Tracks which games claim each file and registry key."""

    def __init__(self) -> None:
        self._files: defaultdict[str, set[str]] = defaultdict(set)
        self._registry: defaultdict[RegistryItem, set[str]] = defaultdict(set)
        self._file_cache: dict[str, int] = {}
        self._registry_cache: dict[str, int] = {}

    def add_game(self, scan_info: ScanInfo) -> None:
        """Record every item a game's scan found and refresh affected counts."""
        game = scan_info.game_name
        stale = {game}

        for item in scan_info.found_files:
            path = _pick_path(item)
            existing = self._files.get(path)
            # With exactly one other owner, that owner's count changes now;
            # with two or more, it already counts this item.
            if existing is not None and len(existing) == 1:
                stale.update(existing)
            self._files[path].add(game)

        for item in scan_info.found_registry_keys:
            existing = self._registry.get(item.path)
            if existing is not None and len(existing) == 1:
                stale.update(existing)
            self._registry[item.path].add(game)

        for name in stale:
            self._file_cache[name] = _count_duplicates(self._files.values(), name)
            self._registry_cache[name] = _count_duplicates(self._registry.values(), name)

    def is_game_duplicated(self, scan_info: ScanInfo) -> bool:
        """Whether the game shares any item with another game."""
        return self.count_duplicates_for(scan_info.game_name) > 0

    def file(self, file: ScannedFile) -> set[str]:
        """Return the names of the games that claim this file."""
        return set(self._files.get(_pick_path(file), ()))

    def is_file_duplicated(self, file: ScannedFile) -> bool:
        """Whether more than one game claims this file."""
        return len(self.file(file)) > 1

    def registry(self, path: RegistryItem) -> set[str]:
        """Return the names of the games that claim this registry key."""
        return set(self._registry.get(path, ()))

    def is_registry_duplicated(self, path: RegistryItem) -> bool:
        """Whether more than one game claims this registry key."""
        return len(self.registry(path)) > 1

    def clear(self) -> None:
        """Forget everything recorded so far."""
        self._files.clear()
        self._registry.clear()
        self._file_cache.clear()
        self._registry_cache.clear()

    def any_duplicates(self) -> bool:
        """Whether any recorded game shares any item with another."""
        return any(count > 0 for count in self._file_cache.values()) or any(
            count > 0 for count in self._registry_cache.values()
        )

    def count_duplicates_for(self, game: str) -> int:
        """Number of the game's files and registry keys shared with other games."""
        return self._file_cache.get(game, 0) + self._registry_cache.get(game, 0)