"""Helpers for deterministic serialisation of unordered collections."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

V = TypeVar("V")


def ordered_map(value: Mapping[str, V]) -> dict[str, V]:
    """Return a dict with the same items, ordered by key."""
    return dict(sorted(value.items(), key=lambda item: item[0]))


def ordered_set(value: Iterable[str]) -> list[str]:
    """Return the members of a set as a sorted list."""
    return sorted(value)


def is_false(value: bool) -> bool:
    """Whether a flag is unset, so it can be left out of output."""
    return not value


def is_empty_set(value: Any) -> bool:
    """Whether a collection is empty, so it can be left out of output."""
    return len(value) == 0