from __future__ import annotations

import logging
from dataclasses import replace
from typing import BinaryIO

from typing_extensions import override

from dircollection.collection._base import CLOSED_NAME, FileCollection, matches
from dircollection.models.entry import EntryMetadata, ScanStats
from dircollection.models.enums import MatchPath
from dircollection.services.fs import DEFAULT_FS, FileSystem
from dircollection.services.scanner import scan_entries

logger = logging.getLogger(__name__)


class DirectoryCollection(FileCollection):
    """Collection of the files and directories found under a root directory.

    Construction only checks that *root_path* is a directory; the tree is
    walked on the first query and cached from then on. Instances are not
    thread-safe until :meth:`ensure_loaded` has run.
    """

    def __init__(self, root_path: str = "", recursive: bool = True, fs: FileSystem = DEFAULT_FS) -> None:
        super().__init__(
            name=root_path or CLOSED_NAME,
            valid=bool(root_path) and fs.is_dir(root_path),
        )
        self._root_path = root_path
        self._recursive = recursive
        self._fs = fs
        self._loaded = False
        self._entries: list[EntryMetadata] = []
        self._stats = ScanStats()

    @property
    def root_path(self) -> str:
        return self._root_path

    @property
    def recursive(self) -> bool:
        return self._recursive

    @property
    def loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> None:
        """Scan the root directory unless that already happened."""
        # Checked on every call: the collection may have been closed since.
        self.must_be_valid()
        if self._loaded:
            return
        self._entries, self._stats = scan_entries(self._root_path, self._recursive, self._fs)
        self._loaded = True

    @override
    def entries(self) -> list[EntryMetadata]:
        self.ensure_loaded()
        return list(self._entries)

    @override
    def size(self) -> int:
        self.ensure_loaded()
        return len(self._entries)

    def stats(self) -> ScanStats:
        self.ensure_loaded()
        return replace(self._stats)

    @override
    def get_entry(self, name: str, match: MatchPath = MatchPath.MATCH) -> EntryMetadata | None:
        self.ensure_loaded()
        return next((entry for entry in self._entries if matches(entry, name, match)), None)

    @override
    def open(self, entry_name: str, match: MatchPath = MatchPath.MATCH) -> BinaryIO | None:
        entry = self.get_entry(entry_name, match)
        if entry is None or entry.is_dir:
            return None
        return self._fs.open_binary(entry.path)

    @override
    def clone(self) -> DirectoryCollection:
        copy = DirectoryCollection.__new__(DirectoryCollection)
        FileCollection.__init__(copy, name=self._name, valid=self._valid)
        copy._root_path = self._root_path
        copy._recursive = self._recursive
        copy._fs = self._fs
        copy._loaded = self._loaded
        copy._entries = list(self._entries)
        copy._stats = replace(self._stats)
        logger.debug("Cloned %r (loaded=%s)", self, self._loaded)
        return copy

    @override
    def close(self) -> None:
        logger.debug("Closing %r", self)
        self._valid = False
        self._loaded = False
        self._entries = []
        self._stats = ScanStats()
        self._name = CLOSED_NAME
        self._root_path = ""
