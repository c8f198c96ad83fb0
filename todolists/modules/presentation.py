"""
Helpers for displaying lists and todos.
"""

from typing import List
from typing import Optional

from todolists.models.todo_list import Todo
from todolists.models.todo_list import TodoList


def todos_count(todo_list: TodoList) -> int:
    return len(todo_list.todos)


def remaining_todos_count(todo_list: TodoList) -> int:
    return sum(1 for todo in todo_list.todos if not todo.completed)


def is_list_complete(todo_list: TodoList) -> bool:
    """A list is complete when it has todos and none of them remain."""
    return todos_count(todo_list) > 0 and remaining_todos_count(todo_list) == 0


def list_class(todo_list: TodoList) -> Optional[str]:
    """CSS class for a list, "complete" for complete lists."""
    return "complete" if is_list_complete(todo_list) else None


def sort_lists(lists: List[TodoList]) -> List[TodoList]:
    """Incomplete lists first, then complete ones, keeping relative order."""
    incomplete = [todo_list for todo_list in lists if not is_list_complete(todo_list)]
    complete = [todo_list for todo_list in lists if is_list_complete(todo_list)]
    return incomplete + complete


def sort_todos(todos: List[Todo]) -> List[Todo]:
    """Incomplete todos first, then completed ones, keeping relative order."""
    incomplete = [todo for todo in todos if not todo.completed]
    complete = [todo for todo in todos if todo.completed]
    return incomplete + complete
