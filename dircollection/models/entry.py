from __future__ import annotations

from dataclasses import dataclass

from dircollection.models.enums import NodeKind


@dataclass(slots=True, frozen=True)
class EntryMetadata:
    """Point-in-time identity of one node found under a collection root.

    ``name`` is relative to the root with ``/`` separators (empty for the root
    itself). ``path`` is the concrete filesystem path used to reopen the node.
    """

    name: str
    kind: NodeKind
    path: str

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def basename(self) -> str:
        return basename(self.name)


@dataclass(slots=True)
class ScanStats:
    files: int = 0
    directories: int = 0
    access_errors: int = 0


def basename(name: str) -> str:
    return name.rstrip("/").rsplit("/", 1)[-1]


def join_name(prefix: str, name: str) -> str:
    return f"{prefix}/{name}" if prefix else name
