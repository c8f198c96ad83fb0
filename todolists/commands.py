"""CLI commands, run with `quart --app main init-env`."""

import os

import click

from todolists.config import save_settings_to_env
from todolists.models.settings import Settings


def register_commands(app):
    """Register CLI commands with the application."""

    @app.cli.command("init-env")
    @click.option("--path", default=".env", help="Where to write the settings file")
    @click.option("--force", is_flag=True, help="Overwrite an existing file")
    @click.option("--debug/--no-debug", default=False, help="Enable debug mode")
    def init_env(path, force, debug):
        """Write a .env file with a fixed session secret key.

        Without one, a new key is generated on every start and existing
        sessions, lists included, stop being readable.
        """
        if os.path.exists(path) and not force:
            raise click.ClickException(f"{path} already exists, use --force")

        settings = Settings(debug=debug)
        save_settings_to_env(settings, env_path=path)
        click.echo(f"Wrote settings to {path}")
