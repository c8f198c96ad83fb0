"""Operations on the todos of a single list."""

import logging
from typing import Optional

from todolists.models.result import Result
from todolists.models.todo_list import MAX_NAME_LENGTH
from todolists.models.todo_list import Todo
from todolists.models.todo_list import TodoList

logger = logging.getLogger(__name__)

TODO_NOT_FOUND = "The specified todo was not found."


def error_for_todo(name: str) -> Optional[str]:
    """Return an error message if the todo name is invalid, None otherwise."""
    if not 1 <= len(name) <= MAX_NAME_LENGTH:
        return f"Todo must be between 1 and {MAX_NAME_LENGTH} characters."
    return None


def add_todo(todo_list: TodoList, name: str) -> Result[Todo]:
    """Append a new, incomplete todo to the list.

    Args:
        todo_list: List receiving the todo
        name: Todo text, already stripped

    Returns:
        Result holding the new Todo, or a validation error
    """
    error = error_for_todo(name)
    if error:
        return Result.invalid(error)

    todo = Todo(id=todo_list.next_todo_id(), name=name, completed=False)
    todo_list.todos.append(todo)
    todo_list.last_todo_id = todo.id
    logger.debug(f"Added todo {todo.id} to list {todo_list.id}")
    return Result.success(todo)


def delete_todo(todo_list: TodoList, todo_id: int) -> bool:
    """Remove a todo. Returns False if the list has no such todo."""
    remaining = [todo for todo in todo_list.todos if todo.id != todo_id]
    if len(remaining) == len(todo_list.todos):
        return False

    todo_list.todos = remaining
    logger.debug(f"Deleted todo {todo_id} from list {todo_list.id}")
    return True


def set_todo_completed(todo_list: TodoList, todo_id: int, value: bool) -> Result[Todo]:
    """Set the completed flag of a todo."""
    todo = todo_list.find_todo(todo_id)
    if todo is None:
        return Result.not_found(TODO_NOT_FOUND)

    todo.completed = value
    return Result.success(todo)


def complete_all(todo_list: TodoList) -> int:
    """Mark every todo of the list complete and return how many there are."""
    for todo in todo_list.todos:
        todo.completed = True

    logger.debug(f"Completed {len(todo_list.todos)} todos in list {todo_list.id}")
    return len(todo_list.todos)
