from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from dircollection.models.entry import EntryMetadata, ScanStats, join_name
from dircollection.models.enums import NodeKind
from dircollection.services.fs import DEFAULT_FS, DirEntry, FileSystem

logger = logging.getLogger(__name__)

_PSEUDO_ENTRIES = frozenset({".", ".."})

DirIdentity = tuple[int, int]


@dataclass(slots=True)
class _Pending:
    prefix: str
    children: Iterator[DirEntry]
    identity: DirIdentity | None = None


def _list_dir(path: str, fs: FileSystem, stats: ScanStats) -> Iterator[DirEntry]:
    try:
        listing = list(fs.scandir(path))
    except OSError as exc:
        stats.access_errors += 1
        logger.warning("Cannot list %s: %s", path, exc)
        return iter(())
    return iter(listing)


def _root_identity(root_path: str, fs: FileSystem) -> DirIdentity | None:
    try:
        return fs.stat(root_path).identity
    except OSError:
        return None


def scan_entries(
    root_path: str,
    recursive: bool = True,
    fs: FileSystem = DEFAULT_FS,
) -> tuple[list[EntryMetadata], ScanStats]:
    """Walk *root_path* and return its entries in depth-first pre-order.

    The root itself comes first with an empty name. Children keep the order
    the filesystem lists them in. Directories that cannot be listed keep their
    own entry but add no children; children that cannot be stat'ed are skipped.
    Both count as access errors.

    Symlinked directories are descended like any other directory, except one
    that resolves to a directory already on the current path from the root:
    that one is listed but not entered, so link cycles terminate.
    """
    logger.debug("Scanning %s (recursive=%s)", root_path, recursive)
    stats = ScanStats(files=0, directories=1, access_errors=0)
    entries = [EntryMetadata(name="", kind=NodeKind.DIRECTORY, path=root_path)]

    root_id = _root_identity(root_path, fs) if recursive else None
    pending = [_Pending(prefix="", children=_list_dir(root_path, fs, stats), identity=root_id)]
    on_path: set[DirIdentity] = {root_id} if root_id is not None else set()
    while pending:
        top = pending[-1]
        child = next(top.children, None)
        if child is None:
            pending.pop()
            if top.identity is not None:
                on_path.discard(top.identity)
            continue
        if child.name in _PSEUDO_ENTRIES:
            continue

        st = child.stat
        if st is None:
            stats.access_errors += 1
            logger.warning("Skipping %s: cannot determine entry type", child.path)
            continue

        name = join_name(top.prefix, child.name)
        entry = EntryMetadata(
            name=name,
            kind=NodeKind.DIRECTORY if st.is_dir else NodeKind.FILE,
            path=fs.join(root_path, name),
        )
        entries.append(entry)

        if not entry.is_dir:
            stats.files += 1
            continue
        stats.directories += 1
        if not recursive:
            continue

        identity = st.identity
        if identity is not None and identity in on_path:
            logger.debug("Not descending into %s: directory cycle", entry.path)
            continue
        if identity is not None:
            on_path.add(identity)
        pending.append(_Pending(prefix=name, children=_list_dir(entry.path, fs, stats), identity=identity))

    logger.debug(
        "Scanned %s: %d files, %d directories, %d access errors",
        root_path,
        stats.files,
        stats.directories,
        stats.access_errors,
    )
    return entries, stats
