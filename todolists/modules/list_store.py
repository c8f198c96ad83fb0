"""Session-scoped collection of todo lists."""

import logging
from typing import List
from typing import Optional

from todolists.models.result import Result
from todolists.models.todo_list import MAX_NAME_LENGTH
from todolists.models.todo_list import TodoList
from todolists.models.todo_list import dicts_to_lists
from todolists.models.todo_list import lists_to_dicts

logger = logging.getLogger(__name__)

LIST_NOT_FOUND = "The specified list was not found."


def error_for_list_name(
    name: str, lists: List[TodoList], exclude_id: Optional[int] = None
) -> Optional[str]:
    """Return an error message if the list name is invalid, None otherwise.

    Args:
        name: Candidate list name
        lists: Lists the name must be unique among
        exclude_id: Id of a list allowed to already carry the name (the one
            being renamed)
    """
    if not 1 <= len(name) <= MAX_NAME_LENGTH:
        return f"List name must be between 1 and {MAX_NAME_LENGTH} characters."
    if any(
        todo_list.name == name and todo_list.id != exclude_id for todo_list in lists
    ):
        return "List name must be unique."
    return None


class ListStore:
    """Ordered collection of a session's lists.

    One instance is built per request from the session data and written back
    by the session binding when its contents change.
    """

    def __init__(self, lists: Optional[List[TodoList]] = None, last_list_id: int = 0):
        self.lists: List[TodoList] = list(lists or [])
        self.last_list_id = last_list_id

    def __len__(self):
        return len(self.lists)

    def __iter__(self):
        return iter(self.lists)

    @classmethod
    def from_session_data(cls, lists, last_list_id: int = 0) -> "ListStore":
        """Build a store from what was kept in the session."""
        return cls(dicts_to_lists(lists), int(last_list_id or 0))

    def to_session_data(self) -> dict:
        """Serialise the store for the session."""
        return {"lists": lists_to_dicts(self.lists), "last_list_id": self.last_list_id}

    def next_list_id(self) -> int:
        """Next free list id; ids of deleted lists are never handed out again."""
        highest = max((todo_list.id for todo_list in self.lists), default=0)
        return max(highest, self.last_list_id) + 1

    def find_list(self, list_id: int) -> Optional[TodoList]:
        """Return the list with the given id, or None."""
        return next(
            (todo_list for todo_list in self.lists if todo_list.id == list_id), None
        )

    def add_list(self, name: str) -> Result[TodoList]:
        """Create a list and append it to the store."""
        error = error_for_list_name(name, self.lists)
        if error:
            return Result.invalid(error)

        todo_list = TodoList(id=self.next_list_id(), name=name)
        self.lists.append(todo_list)
        self.last_list_id = todo_list.id
        logger.debug(f"Created list {todo_list.id}: {name!r}")
        return Result.success(todo_list)

    def rename_list(self, list_id: int, name: str) -> Result[TodoList]:
        """Rename a list. Keeping the current name is allowed."""
        todo_list = self.find_list(list_id)
        if todo_list is None:
            return Result.not_found(LIST_NOT_FOUND)

        error = error_for_list_name(name, self.lists, exclude_id=list_id)
        if error:
            return Result.invalid(error)

        todo_list.name = name
        logger.debug(f"Renamed list {list_id} to {name!r}")
        return Result.success(todo_list)

    def delete_list(self, list_id: int) -> bool:
        """Remove a list and its todos. Returns False if there was no such list."""
        remaining = [todo_list for todo_list in self.lists if todo_list.id != list_id]
        if len(remaining) == len(self.lists):
            return False

        self.lists = remaining
        logger.debug(f"Deleted list {list_id}")
        return True
