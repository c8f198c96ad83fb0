import pytest
import pytest_asyncio

from todolists import create_app
from todolists.models.todo_list import Todo
from todolists.models.todo_list import TodoList


@pytest_asyncio.fixture
async def app():
    """Create an application for testing."""
    test_config = {
        "TESTING": True,
        "DEBUG": True,
        "SECRET_KEY": "test_key",
        "SESSION_COOKIE_SECURE": False,  # Test client talks plain http
        "WTF_CSRF_ENABLED": False,
    }
    app = create_app(test_config)

    async with app.app_context():
        yield app


@pytest_asyncio.fixture
async def client(app):
    """Create a test client for the app."""
    return app.test_client()


@pytest.fixture
def cli_runner(app):
    """Create a CLI runner for testing CLI commands."""
    return app.test_cli_runner()


@pytest.fixture
def make_list():
    """Build a TodoList whose todos have the given completed flags."""

    def _make_list(list_id, name, *flags):
        todos = [
            Todo(id=i, name=f"todo {i}", completed=flag)
            for i, flag in enumerate(flags, start=1)
        ]
        return TodoList(id=list_id, name=name, todos=todos, last_todo_id=len(todos))

    return _make_list
