import quart_flask_patch  # noqa - this has to be imported before Quart.
from quart import Quart


def create_app(config=None):
    """Create and configure the Quart application."""
    app = Quart(__name__)

    # Add Jinja extensions
    app.jinja_env.add_extension("jinja2.ext.do")
    app.jinja_env.add_extension("jinja2.ext.loopcontrols")
    app.jinja_env.lstrip_blocks = True
    app.jinja_env.trim_blocks = True

    # Load default configuration
    app.config.from_object("todolists.config.Config")

    # Apply config overrides
    if config:
        if isinstance(config, dict):
            app.config.update(config)
        else:
            app.config.from_object(config)

    # Initialize Sentry if DSN is configured and not in debug mode
    if app.config.get("SENTRY_DSN") and not app.config.get("DEBUG"):
        import sentry_sdk

        sentry_sdk.init(dsn=app.config["SENTRY_DSN"])

    # Initialize extensions (each extension has init_app)
    from todolists.extensions import init_extensions

    init_extensions(app)

    # Register template filters
    from todolists.jinja_filters import register_filters

    register_filters(app)

    # Register blueprints
    from todolists.routes import register_blueprints

    register_blueprints(app)

    # Register error handlers
    from todolists.error_handlers import register_error_handlers

    register_error_handlers(app)

    # Register CLI commands
    from todolists.commands import register_commands

    register_commands(app)

    return app
