"""Data models for string tables."""

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class StringEntry:
    """Represents a single entry in a string table.

    Attributes:
        key: The string key/identifier.
        value: The localized string value.
        comment: Optional comment associated with the entry.
    """
    key: str
    value: str
    comment: Optional[str] = None


class StringTable:
    """Ordered mapping of string keys to entries.

    Keys keep the position of their first appearance. Setting a key that is
    already present replaces its value (last write wins).
    """

    def __init__(self, entries: Optional[list[StringEntry]] = None):
        self._entries: dict[str, StringEntry] = {}
        for entry in entries or []:
            self.add(entry)

    @classmethod
    def from_dict(cls, values: dict[str, str]) -> "StringTable":
        """Build a table from a plain key/value dictionary."""
        return cls([StringEntry(key, value) for key, value in values.items()])

    def add(self, entry: StringEntry) -> None:
        self._entries[entry.key] = entry

    def set(self, key: str, value: str, comment: Optional[str] = None) -> None:
        self.add(StringEntry(key=key, value=value, comment=comment))

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        entry = self._entries.get(key)
        return entry.value if entry is not None else default

    def entries(self) -> list[StringEntry]:
        return list(self._entries.values())

    def items(self) -> Iterator[tuple[str, str]]:
        for key, entry in self._entries.items():
            yield key, entry.value

    def filter(self, substring: Optional[str]) -> "StringTable":
        """Return a table holding only keys that contain ``substring``.

        A ``None`` filter keeps every key.
        """
        if substring is None:
            return StringTable(self.entries())
        return StringTable([e for e in self._entries.values() if substring in e.key])

    def to_dict(self) -> dict[str, str]:
        return dict(self.items())

    def __getitem__(self, key: str) -> str:
        return self._entries[key].value

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringTable):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"StringTable({self.to_dict()!r})"
