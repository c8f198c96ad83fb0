"""Forms for list and todo input.

Fields only carry and clean the submitted values; name rules live in the
list store and todo service so the same messages reach every caller.
"""

from flask_wtf import FlaskForm
from wtforms import BooleanField
from wtforms import StringField


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class ListNameForm(FlaskForm):
    """Create or rename a list."""

    list_name = StringField("List name", default="", filters=[_strip])

    @property
    def submitted_name(self) -> str:
        return self.list_name.data or ""


class TodoForm(FlaskForm):
    """Add a todo to a list."""

    todo = StringField("Todo", default="", filters=[_strip])

    @property
    def submitted_name(self) -> str:
        return self.todo.data or ""


class TodoStatusForm(FlaskForm):
    """Mark a todo complete or incomplete."""

    completed = BooleanField("Completed", false_values=("false", "0", ""))


class ActionForm(FlaskForm):
    """Field-less form guarding delete and complete-all buttons with CSRF."""
