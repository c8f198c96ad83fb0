from quart_compress import Compress

from todolists.modules.logging_helper import LoggingHelper
from todolists.modules.session_store import SessionStore

# Create instances without initializing
compress = Compress()
logging_helper = LoggingHelper()
session_store = SessionStore()


def init_extensions(app):
    """Initialize all extensions with the application."""
    # Logging first so the others can log during init
    logging_helper.init_app(app)
    compress.init_app(app)
    session_store.init_app(app)
