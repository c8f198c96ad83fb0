"""Routes.py."""

from flask_wtf.csrf import CSRFError
from quart import Blueprint
from quart import current_app
from quart import flash
from quart import redirect
from quart import render_template
from quart import request
from quart import url_for

from todolists.forms import ActionForm
from todolists.forms import ListNameForm
from todolists.forms import TodoForm
from todolists.forms import TodoStatusForm
from todolists.models.result import ErrorKind
from todolists.modules.list_store import LIST_NOT_FOUND
from todolists.modules.session_store import get_list_store
from todolists.modules.todo_service import add_todo
from todolists.modules.todo_service import complete_all
from todolists.modules.todo_service import delete_todo
from todolists.modules.todo_service import set_todo_completed

lists_bp = Blueprint("lists", __name__)


def _is_xhr() -> bool:
    """Whether the request was sent from JavaScript."""
    return request.headers.get("X-Requested-With") == "XMLHttpRequest"


async def _submitted_form(form_class):
    """Bind a form to the posted data, raising CSRFError if it is rejected."""
    form = form_class(formdata=await request.form)
    if not form.validate():
        errors = form.errors.get("csrf_token") or ["Invalid form submission."]
        raise CSRFError(errors[0])
    return form


async def _list_not_found():
    await flash(LIST_NOT_FOUND, "error")
    return redirect(url_for("lists.index"))


@lists_bp.route("/health")
async def healthcheck():
    """Healthcheck endpoint."""
    return "ok", 200


@lists_bp.route("/")
async def home():
    return redirect(url_for("lists.index"))


@lists_bp.route("/lists")
async def index():
    """View all of the lists."""
    return await render_template("lists.html", lists=get_list_store().lists)


@lists_bp.route("/lists/new")
async def new_list():
    """Render the new list form."""
    return await render_template("new_list.html", form=ListNameForm(formdata=None))


@lists_bp.route("/lists", methods=["POST"])
async def create_list():
    """Create a new list."""
    form = await _submitted_form(ListNameForm)
    result = get_list_store().add_list(form.submitted_name)

    if not result.ok:
        await flash(result.message, "error")
        return await render_template("new_list.html", form=form), 422

    current_app.logger.info(f"Created list {result.value.id}")
    await flash("The list has been created.", "success")
    return redirect(url_for("lists.index"))


async def _render_list(todo_list, todo_form=None, status=200):
    return (
        await render_template(
            "list.html",
            todo_list=todo_list,
            todo_form=todo_form or TodoForm(formdata=None),
            action_form=ActionForm(formdata=None),
        ),
        status,
    )


@lists_bp.route("/lists/<int:list_id>")
async def show_list(list_id: int):
    """View a single list."""
    todo_list = get_list_store().find_list(list_id)
    if todo_list is None:
        return await _list_not_found()

    return await _render_list(todo_list)


@lists_bp.route("/lists/<int:list_id>/edit")
async def edit_list(list_id: int):
    """Render the rename form for an existing list."""
    todo_list = get_list_store().find_list(list_id)
    if todo_list is None:
        return await _list_not_found()

    form = ListNameForm(formdata=None, list_name=todo_list.name)
    return await render_template("edit_list.html", todo_list=todo_list, form=form)


@lists_bp.route("/lists/<int:list_id>/edit", methods=["POST"])
async def update_list(list_id: int):
    """Change a list's name."""
    form = await _submitted_form(ListNameForm)
    store = get_list_store()
    result = store.rename_list(list_id, form.submitted_name)

    if result.error == ErrorKind.NOT_FOUND:
        return await _list_not_found()
    if not result.ok:
        await flash(result.message, "error")
        todo_list = store.find_list(list_id)
        return (
            await render_template("edit_list.html", todo_list=todo_list, form=form),
            422,
        )

    await flash("The list has been updated.", "success")
    return redirect(url_for("lists.show_list", list_id=list_id))


@lists_bp.route("/lists/<int:list_id>/delete", methods=["POST"])
async def delete_list(list_id: int):
    """Delete a list. Deleting a missing list is not an error."""
    await _submitted_form(ActionForm)
    if get_list_store().delete_list(list_id):
        current_app.logger.info(f"Deleted list {list_id}")

    if _is_xhr():
        return url_for("lists.index")

    await flash("The list has been deleted.", "success")
    return redirect(url_for("lists.index"))


@lists_bp.route("/lists/<int:list_id>/todos", methods=["POST"])
async def create_todo(list_id: int):
    """Add a new todo to a list."""
    form = await _submitted_form(TodoForm)
    todo_list = get_list_store().find_list(list_id)
    if todo_list is None:
        return await _list_not_found()

    result = add_todo(todo_list, form.submitted_name)
    if not result.ok:
        await flash(result.message, "error")
        return await _render_list(todo_list, todo_form=form, status=422)

    await flash("The todo was added.", "success")
    return redirect(url_for("lists.show_list", list_id=list_id))


@lists_bp.route("/lists/<int:list_id>/todos/<int:todo_id>/delete", methods=["POST"])
async def remove_todo(list_id: int, todo_id: int):
    """Delete a todo from a list."""
    await _submitted_form(ActionForm)
    todo_list = get_list_store().find_list(list_id)
    if todo_list is None:
        return await _list_not_found()

    delete_todo(todo_list, todo_id)

    if _is_xhr():
        return "", 204

    await flash("The todo has been deleted.", "success")
    return redirect(url_for("lists.show_list", list_id=list_id))


@lists_bp.route("/lists/<int:list_id>/todos/<int:todo_id>", methods=["POST"])
async def update_todo(list_id: int, todo_id: int):
    """Update the status of a todo."""
    form = await _submitted_form(TodoStatusForm)
    todo_list = get_list_store().find_list(list_id)
    if todo_list is None:
        return await _list_not_found()

    result = set_todo_completed(todo_list, todo_id, form.completed.data)
    if not result.ok:
        await flash(result.message, "error")
    else:
        await flash("The todo has been updated.", "success")
    return redirect(url_for("lists.show_list", list_id=list_id))


@lists_bp.route("/lists/<int:list_id>/complete_all", methods=["POST"])
async def complete_all_todos(list_id: int):
    """Mark all todos in a list complete."""
    await _submitted_form(ActionForm)
    todo_list = get_list_store().find_list(list_id)
    if todo_list is None:
        return await _list_not_found()

    complete_all(todo_list)
    await flash("All todos have been completed.", "success")
    return redirect(url_for("lists.show_list", list_id=list_id))


def register_blueprints(app):
    """Register all blueprints with the application."""
    app.register_blueprint(lists_bp)
