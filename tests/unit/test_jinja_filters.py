"""Unit tests for template filters and globals."""

from todolists.jinja_filters import pluralize
from todolists.modules.presentation import sort_lists


def test_pluralize_singular():
    assert pluralize(1, "todo") == "1 todo"


def test_pluralize_default_plural():
    assert pluralize(0, "todo") == "0 todos"
    assert pluralize(3, "todo") == "3 todos"


def test_pluralize_custom_plural():
    assert pluralize(2, "entry", "entries") == "2 entries"


def test_helpers_are_registered(app):
    assert app.jinja_env.filters["sort_lists"] is sort_lists
    assert "sort_todos" in app.jinja_env.filters
    for name in (
        "is_list_complete",
        "list_class",
        "todos_count",
        "remaining_todos_count",
    ):
        assert name in app.jinja_env.globals
