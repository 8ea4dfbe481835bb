"""Saved registry content: hives, keys and typed values, stored as YAML."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from savescan.registry_item import RegistryItem
from savescan.serialization import ordered_map

_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1

# Serialised field name -> attribute name, in the order values are written back.
_FIELDS = {
    "sz": "sz",
    "expandSz": "expand_sz",
    "multiSz": "multi_sz",
    "dword": "dword",
    "qword": "qword",
}


def _check_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"registry value {name!r} must be a string, got {value!r}")
    return value


def _check_int(name: str, value: Any, maximum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= maximum:
        raise ValueError(f"registry value {name!r} must be an integer in 0..{maximum}, got {value!r}")
    return value


@dataclass
class Entry:
    """One registry value; at most one of the typed fields is normally set."""

    sz: str | None = None
    expand_sz: str | None = None
    multi_sz: str | None = None
    dword: int | None = None
    qword: int | None = None

    def is_set(self) -> bool:
        """Whether any typed value is present."""
        return any(getattr(self, attr) is not None for attr in _FIELDS.values())

    def to_dict(self) -> dict[str, Any]:
        """Return the serialised form, leaving out unset fields."""
        return {
            key: getattr(self, attr)
            for key, attr in _FIELDS.items()
            if getattr(self, attr) is not None
        }

    @classmethod
    def from_dict(cls, data: Any) -> Entry:
        """Build an entry from its serialised form.

        Unknown fields are ignored; badly typed values raise ValueError.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"registry entry must be a mapping, got {data!r}")
        values: dict[str, Any] = {}
        for key in ("sz", "expandSz", "multiSz"):
            if data.get(key) is not None:
                values[_FIELDS[key]] = _check_str(key, data[key])
        if data.get("dword") is not None:
            values["dword"] = _check_int("dword", data["dword"], _U32_MAX)
        if data.get("qword") is not None:
            values["qword"] = _check_int("qword", data["qword"], _U64_MAX)
        return cls(**values)


def _require_mapping(what: str, value: Any) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be a mapping, got {value!r}")
    return value


@dataclass
class Hives:
    """Registry content grouped as hive name -> key path -> value name -> entry."""

    hives: dict[str, dict[str, dict[str, Entry]]] = field(default_factory=dict)

    @classmethod
    def from_yaml(cls, text: str) -> Hives:
        """Parse serialised registry content; raise ValueError if it is invalid."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid registry YAML: {exc}") from exc
        data = _require_mapping("registry document", data)
        hives: dict[str, dict[str, dict[str, Entry]]] = {}
        for hive_name, keys in data.items():
            keys = _require_mapping(f"hive {hive_name!r}", keys)
            hive: dict[str, dict[str, Entry]] = {}
            for key_name, entries in keys.items():
                entries = _require_mapping(f"key {key_name!r}", entries)
                hive[str(key_name)] = {
                    str(entry_name): Entry.from_dict(entry)
                    for entry_name, entry in entries.items()
                }
            hives[str(hive_name)] = hive
        return cls(hives)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Hives | None:
        """Read a saved file, or return None if it is missing or unreadable."""
        file = Path(path)
        if not file.is_file():
            return None
        try:
            return cls.from_yaml(file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError):
            return None

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write to ``path`` unless it already holds the same content."""
        file = Path(path)
        new_content = self.serialize()
        old = Hives.load(file)
        if old is not None and old.serialize() == new_content:
            return
        try:
            file.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            return
        file.write_text(new_content, encoding="utf-8")

    def serialize(self) -> str:
        """Return the YAML form, with every level ordered by name."""
        data = ordered_map(
            {
                hive_name: ordered_map(
                    {
                        key_name: ordered_map(
                            {name: entry.to_dict() for name, entry in entries.items()}
                        )
                        for key_name, entries in keys.items()
                    }
                )
                for hive_name, keys in self.hives.items()
            }
        )
        return yaml.safe_dump(
            data,
            explicit_start=True,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    def same_content(self, other: Hives) -> bool:
        """Whether both hold the same hives, keys and values."""
        return self.hives == other.hives

    def registry_items(self) -> set[RegistryItem]:
        """Return every stored key as a forward-slash registry path."""
        return {
            RegistryItem(f"{hive_name}/{key_name}".replace("\\", "/"))
            for hive_name, keys in self.hives.items()
            for key_name in keys
        }