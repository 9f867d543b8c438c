from __future__ import annotations

from typing import Optional


class PersistenceError(Exception):
    """Base exception for persistence gateway errors."""

    pass


class ListNotFoundError(PersistenceError):
    """Raised when a list lookup matches no row."""

    def __init__(self, list_id: Optional[int] = None, name: Optional[str] = None) -> None:
        self.list_id = list_id
        self.name = name
        if name is not None:
            message = f"No list named {name!r}"
        else:
            message = f"No list with id {list_id}"
        super().__init__(message)
