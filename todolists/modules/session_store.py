import logging

from pydantic import ValidationError
from quart import g
from quart import session

from todolists.modules.list_store import ListStore

logger = logging.getLogger(__name__)

LISTS_KEY = "lists"
LAST_LIST_ID_KEY = "last_list_id"


class SessionStore:
    """Binds a ListStore to the user's session for the length of a request.

    The store is rebuilt from the session before each request and written
    back after it, but only when its contents changed, so read-only requests
    leave the session cookie alone.
    """

    def __init__(self, app=None):
        """Initialise the SessionStore.

        Args:
            app (Quart, optional): The Quart application instance.
        """
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.before_request(self.load_store)
        app.after_request(self.save_store)
        app.extensions["session_store"] = self

    async def load_store(self):
        """Build this request's ListStore from the session."""
        if not session.permanent:
            session.permanent = True
        try:
            store = ListStore.from_session_data(
                session.get(LISTS_KEY, []), session.get(LAST_LIST_ID_KEY, 0)
            )
        except (ValidationError, TypeError, ValueError) as e:
            logger.warning(f"Discarding unreadable session lists: {e}")
            store = ListStore()

        g.list_store = store
        g.list_store_snapshot = store.to_session_data()

    async def save_store(self, response):
        """Write the ListStore back to the session if it changed."""
        store = g.get("list_store")
        if store is None:
            return response

        data = store.to_session_data()
        if data != g.get("list_store_snapshot"):
            session[LISTS_KEY] = data["lists"]
            session[LAST_LIST_ID_KEY] = data["last_list_id"]
            logger.debug(f"Saved {len(store)} lists to session")
        return response


def get_list_store() -> ListStore:
    """Return the ListStore bound to the current request."""
    return g.list_store
