"""
Todo lists persistence package.

Exposes the gateway that reads and writes the `lists` and `todos` tables,
along with its record types and errors.
"""

from .errors import ListNotFoundError, PersistenceError
from .gateway import PersistenceGateway, get_gateway
from .models import ListRecord, TodoRecord

__all__ = [
    "ListNotFoundError",
    "ListRecord",
    "PersistenceError",
    "PersistenceGateway",
    "TodoRecord",
    "get_gateway",
]
