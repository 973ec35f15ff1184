from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import BinaryIO, Self

from dircollection.models.entry import EntryMetadata, basename
from dircollection.models.enums import MatchPath
from dircollection.models.errors import InvalidStateError

CLOSED_NAME = "-"


def matches(entry: EntryMetadata, name: str, match: MatchPath) -> bool:
    if match is MatchPath.IGNORE:
        return entry.basename == basename(name)
    return entry.name == name


class FileCollection(ABC):
    """A read-only, queryable set of entries.

    Every query raises ``InvalidStateError`` once the collection is invalid.
    Lookups that find nothing return ``None`` instead of raising.
    """

    def __init__(self, name: str = CLOSED_NAME, valid: bool = False) -> None:
        self._name = name
        self._valid = valid

    @property
    def name(self) -> str:
        return self._name

    def is_valid(self) -> bool:
        return self._valid

    def must_be_valid(self) -> None:
        if not self._valid:
            raise InvalidStateError(self._name)

    @abstractmethod
    def entries(self) -> list[EntryMetadata]:
        """Return a copy of the entries; the caller may mutate it freely."""

    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def clone(self) -> FileCollection:
        """Return an independent copy of the current state."""

    @abstractmethod
    def close(self) -> None: ...

    @abstractmethod
    def get_entry(self, name: str, match: MatchPath = MatchPath.MATCH) -> EntryMetadata | None:
        """Return the first entry matching *name* in entry order, or ``None``."""

    @abstractmethod
    def open(self, entry_name: str, match: MatchPath = MatchPath.MATCH) -> BinaryIO | None:
        """Open a file entry for binary reading.

        Returns ``None`` when nothing matches or the entry is a directory.
        The caller owns the returned stream.
        """

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[EntryMetadata]:
        return iter(self.entries())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get_entry(name) is not None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "valid" if self._valid else "invalid"
        return f"{type(self).__name__}({self._name!r}, {state})"
