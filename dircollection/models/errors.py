from __future__ import annotations


class InvalidStateError(RuntimeError):
    """Raised when a query is made on a closed or never-valid collection."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Collection {name!r} is not valid")
        self.name = name
