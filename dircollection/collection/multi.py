from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import BinaryIO

from typing_extensions import override

from dircollection.collection._base import CLOSED_NAME, FileCollection
from dircollection.models.entry import EntryMetadata
from dircollection.models.enums import MatchPath

logger = logging.getLogger(__name__)


class MultiCollection(FileCollection):
    """Several collections presented as one.

    Each added collection is cloned, so closing the original later has no
    effect here. Lookups search the children in the order they were added.
    """

    def __init__(self, collections: Iterable[FileCollection] = ()) -> None:
        super().__init__(valid=True)
        self._collections: list[FileCollection] = []
        for collection in collections:
            self.add(collection)

    def add(self, collection: FileCollection) -> bool:
        """Add a clone of *collection*; returns ``False`` if it is invalid."""
        self.must_be_valid()
        if collection is self:
            raise ValueError("Cannot add a MultiCollection to itself")
        if not collection.is_valid():
            logger.debug("Not adding invalid collection %r", collection)
            return False
        self._collections.append(collection.clone())
        return True

    @property
    @override
    def name(self) -> str:
        """Bracketed list of the child names, or ``"-"`` once closed."""
        if not self._valid:
            return CLOSED_NAME
        return "[" + ", ".join(collection.name for collection in self._collections) + "]"

    @property
    def collections(self) -> list[FileCollection]:
        return list(self._collections)

    @override
    def entries(self) -> list[EntryMetadata]:
        self.must_be_valid()
        result: list[EntryMetadata] = []
        for collection in self._collections:
            result.extend(collection.entries())
        return result

    @override
    def size(self) -> int:
        self.must_be_valid()
        return sum(collection.size() for collection in self._collections)

    @override
    def get_entry(self, name: str, match: MatchPath = MatchPath.MATCH) -> EntryMetadata | None:
        found = self._find(name, match)
        return found[1] if found is not None else None

    @override
    def open(self, entry_name: str, match: MatchPath = MatchPath.MATCH) -> BinaryIO | None:
        found = self._find(entry_name, match)
        if found is None:
            return None
        collection, _ = found
        return collection.open(entry_name, match)

    def _find(self, name: str, match: MatchPath) -> tuple[FileCollection, EntryMetadata] | None:
        self.must_be_valid()
        for collection in self._collections:
            entry = collection.get_entry(name, match)
            if entry is not None:
                return collection, entry
        return None

    @override
    def clone(self) -> MultiCollection:
        copy = MultiCollection()
        copy._valid = self._valid
        copy._collections = [collection.clone() for collection in self._collections]
        return copy

    @override
    def close(self) -> None:
        for collection in self._collections:
            collection.close()
        self._collections = []
        self._valid = False
