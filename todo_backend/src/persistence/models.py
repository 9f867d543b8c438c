from __future__ import annotations

from typing import Any, List, Mapping

from pydantic import BeforeValidator, TypeAdapter
from typing_extensions import Annotated, TypedDict

# SQLite stores BOOLEAN columns as integers; 1 is the only value read as true.
COMPLETED_TRUE_LITERAL = 1


def decode_completed(value: Any) -> bool:
    """
    Normalize a stored `completed` value to a real boolean.

    Only COMPLETED_TRUE_LITERAL decodes to True; NULL, 0, and any other
    driver value decode to False.
    """
    if isinstance(value, bool):
        return value
    return value == COMPLETED_TRUE_LITERAL


# PUBLIC_INTERFACE
class TodoRecord(TypedDict):
    """
    A single todo as read from the `todos` table.

    Fields:
    - id: Database-assigned integer identifier
    - name: Todo text
    - completed: Completion flag, decoded with decode_completed
    """

    id: int
    name: str
    completed: Annotated[bool, BeforeValidator(decode_completed)]


# PUBLIC_INTERFACE
class ListRecord(TypedDict):
    """
    A todo list with its todos loaded eagerly, ordered by ascending todo id.
    """

    id: int
    name: str
    todos: List[TodoRecord]


_TODO_ADAPTER = TypeAdapter(TodoRecord)
_LIST_ADAPTER = TypeAdapter(ListRecord)


# PUBLIC_INTERFACE
def todo_from_row(row: Mapping[str, Any]) -> TodoRecord:
    """Build a TodoRecord from a `todos` row. Extra columns such as list_id are dropped."""
    return _TODO_ADAPTER.validate_python(
        {"id": row["id"], "name": row["name"], "completed": row["completed"]}
    )


# PUBLIC_INTERFACE
def list_from_row(row: Mapping[str, Any], todos: List[TodoRecord]) -> ListRecord:
    """Build a ListRecord from a `lists` row and its already-loaded todos."""
    return _LIST_ADAPTER.validate_python({"id": row["id"], "name": row["name"], "todos": todos})
