"""Pydantic models for todo lists and their items."""

from typing import List

from pydantic import BaseModel
from pydantic import Field

# Names of lists and todos must be between 1 and this many characters.
MAX_NAME_LENGTH = 100


class Todo(BaseModel):
    """A single todo item, identified within its parent list."""

    id: int = Field(..., ge=1, description="Id, unique within the parent list")
    name: str = Field(..., description="Todo text")
    completed: bool = Field(default=False, description="Completion flag")

    def __repr__(self):
        return f"<Todo(id={self.id}, name={self.name!r}, completed={self.completed})>"


class TodoList(BaseModel):
    """A named, ordered collection of todos."""

    id: int = Field(..., ge=1, description="Id, unique within the session")
    name: str = Field(..., description="List name, unique within the session")
    todos: List[Todo] = Field(default_factory=list)
    last_todo_id: int = Field(
        default=0, ge=0, description="Highest todo id ever issued for this list"
    )

    def __repr__(self):
        return f"<TodoList(id={self.id}, name={self.name!r}, todos={len(self.todos)})>"

    def find_todo(self, todo_id: int):
        """Return the todo with the given id, or None."""
        return next((todo for todo in self.todos if todo.id == todo_id), None)

    def next_todo_id(self) -> int:
        """Next free todo id; ids of deleted todos are never handed out again."""
        highest = max((todo.id for todo in self.todos), default=0)
        return max(highest, self.last_todo_id) + 1


def lists_to_dicts(lists: List[TodoList]) -> List[dict]:
    """Convert lists to plain dicts for session storage."""
    return [todo_list.model_dump() for todo_list in lists]


def dicts_to_lists(data: List[dict]) -> List[TodoList]:
    """Convert session data back to validated TodoList instances."""
    return [TodoList.model_validate(item) for item in data or []]
