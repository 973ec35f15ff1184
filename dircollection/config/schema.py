from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dircollection.models.enums import MatchPath

MIN_CHUNK_SIZE = 1024


@dataclass(slots=True)
class AppConfig:
    recursive: bool = True
    match_mode: MatchPath = MatchPath.MATCH
    chunk_size: int = 64 * 1024
    show_paths: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "recursive": self.recursive,
            "matchMode": self.match_mode.value,
            "chunkSize": self.chunk_size,
            "showPaths": self.show_paths,
        }


def _parse_match_mode(value: Any, default: MatchPath) -> MatchPath:
    try:
        return MatchPath(str(value))
    except ValueError:
        return default


def from_dict(data: dict[str, Any], defaults: AppConfig) -> AppConfig:
    return AppConfig(
        recursive=bool(data.get("recursive", defaults.recursive)),
        match_mode=_parse_match_mode(data.get("matchMode", defaults.match_mode.value), defaults.match_mode),
        chunk_size=max(MIN_CHUNK_SIZE, int(data.get("chunkSize", defaults.chunk_size))),
        show_paths=bool(data.get("showPaths", defaults.show_paths)),
    )
