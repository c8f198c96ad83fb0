from flask_wtf.csrf import CSRFError
from quart import current_app
from quart import flash
from quart import redirect
from quart import url_for


def register_error_handlers(app):
    """Register error handlers with the application."""

    @app.errorhandler(Exception)
    async def handle_exception(e):
        current_app.logger.error(f"Unhandled exception: {str(e)}", exc_info=True)
        return "An unexpected error occurred", 500

    @app.errorhandler(404)
    async def handle_not_found(e):
        return "Not found", 404

    @app.errorhandler(405)
    async def handle_method_not_allowed(e):
        return "Method not allowed", 405

    @app.errorhandler(CSRFError)
    async def handle_csrf_error(e):
        current_app.logger.warning(f"CSRF validation failed: {e.description}")
        await flash("The form has expired. Please try again.", "error")
        return redirect(url_for("lists.index"))
