from __future__ import annotations

from enum import Enum


class NodeKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


class MatchPath(str, Enum):
    """How a lookup name is compared against entry names."""

    MATCH = "match"
    IGNORE = "ignore"
