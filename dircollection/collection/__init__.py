from __future__ import annotations

from dircollection.collection._base import FileCollection
from dircollection.collection.directory import DirectoryCollection
from dircollection.collection.multi import MultiCollection
from dircollection.models.entry import EntryMetadata
from dircollection.models.enums import MatchPath
from dircollection.models.errors import InvalidStateError

__all__ = [
    "DirectoryCollection",
    "EntryMetadata",
    "FileCollection",
    "InvalidStateError",
    "MatchPath",
    "MultiCollection",
]
