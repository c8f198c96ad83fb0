from todolists.modules.presentation import is_list_complete
from todolists.modules.presentation import list_class
from todolists.modules.presentation import remaining_todos_count
from todolists.modules.presentation import sort_lists
from todolists.modules.presentation import sort_todos
from todolists.modules.presentation import todos_count


def pluralize(count: int, singular: str, plural: str = None) -> str:
    """Format a count with the right noun form, e.g. "1 todo" or "3 todos".

    Args:
        count: The number to display
        singular: Noun used when count is 1
        plural: Noun used otherwise (default: singular + "s")

    Returns:
        Formatted string
    """
    if count == 1:
        return f"{count} {singular}"
    return f"{count} {plural or singular + 's'}"


def register_filters(app):
    """Register template filters and globals with the Quart application.

    Args:
        app: Quart application instance
    """
    app.jinja_env.filters["sort_lists"] = sort_lists
    app.jinja_env.filters["sort_todos"] = sort_todos
    app.jinja_env.filters["pluralize"] = pluralize

    app.jinja_env.globals["is_list_complete"] = is_list_complete
    app.jinja_env.globals["list_class"] = list_class
    app.jinja_env.globals["todos_count"] = todos_count
    app.jinja_env.globals["remaining_todos_count"] = remaining_todos_count
