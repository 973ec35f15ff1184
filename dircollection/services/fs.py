from __future__ import annotations

import os
import stat as statmod
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterable, Protocol


@dataclass(slots=True, frozen=True)
class StatResult:
    is_dir: bool
    is_symlink: bool = False
    dev: int = 0
    ino: int = 0

    @property
    def identity(self) -> tuple[int, int] | None:
        """Device and inode pair, or ``None`` where the platform reports no inode."""
        return (self.dev, self.ino) if self.ino else None


@dataclass(slots=True, frozen=True)
class DirEntry:
    path: str
    name: str
    stat: StatResult | None = None


class FileSystem(Protocol):
    def expanduser(self, path: str) -> str: ...

    def exists(self, path: str) -> bool: ...

    def is_dir(self, path: str) -> bool: ...

    def stat(self, path: str) -> StatResult: ...

    def join(self, base: str, name: str) -> str: ...

    def scandir(self, path: str) -> Iterable[DirEntry]: ...

    def open_binary(self, path: str) -> BinaryIO: ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str: ...


class OsFileSystem:
    def expanduser(self, path: str) -> str:
        return str(Path(path).expanduser())

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def is_dir(self, path: str) -> bool:
        return bool(path) and Path(path).is_dir()

    def stat(self, path: str) -> StatResult:
        st = os.stat(path)
        return StatResult(is_dir=statmod.S_ISDIR(st.st_mode), dev=st.st_dev, ino=st.st_ino)

    def join(self, base: str, name: str) -> str:
        return os.path.join(base, *name.split("/"))

    def scandir(self, path: str) -> Iterable[DirEntry]:
        # Kind follows symlinks; a broken link has no stat.
        with os.scandir(path) as entries:
            for e in entries:
                try:
                    st = e.stat(follow_symlinks=True)
                    sr = StatResult(
                        is_dir=statmod.S_ISDIR(st.st_mode),
                        is_symlink=e.is_symlink(),
                        dev=st.st_dev,
                        ino=st.st_ino,
                    )
                except OSError:
                    sr = None
                yield DirEntry(path=e.path, name=e.name, stat=sr)

    def open_binary(self, path: str) -> BinaryIO:
        return open(path, "rb")

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        return Path(path).read_text(encoding=encoding)


DEFAULT_FS: FileSystem = OsFileSystem()
