import os
from datetime import timedelta

from dotenv import load_dotenv

from todolists.models.settings import Settings

# Load settings from .env file if it exists
settings = Settings.from_env_file(validate=False)

# Load environment variables (will override .env file values)
load_dotenv()


def env_bool(key: str, default: bool = False) -> bool:
    """Parse boolean from environment variable."""
    value = os.environ.get(key, str(default)).lower()
    return value in ("true", "1", "yes", "on")


class Config:
    # Use settings from model, but allow environment variables to override
    DEBUG = env_bool("DEBUG", settings.debug)
    LOG_LEVEL = os.environ.get("LOG_LEVEL", settings.log_level)
    SECRET_KEY = os.environ.get("SECRET_KEY", settings.secret_key)

    HOST = os.environ.get("HOST", settings.host)
    PORT = int(os.environ.get("PORT", str(settings.port)))

    # Session cookie; the whole ListStore lives in it
    PERMANENT_SESSION_LIFETIME = timedelta(
        days=int(
            os.environ.get(
                "SESSION_LIFETIME_DAYS", str(settings.session_lifetime_days)
            )
        )
    )
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = not DEBUG  # Allow insecure cookies in debug mode

    # WTF Configuration
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = None  # No time limit on CSRF tokens

    SENTRY_DSN = os.environ.get("SENTRY_DSN", settings.sentry_dsn or "")


def save_settings_to_env(settings: Settings, env_path: str = None) -> None:
    """Save settings to .env file, by default in the working directory."""
    env_path = env_path or os.path.join(os.getcwd(), ".env")

    env_dict = settings.to_env_dict()

    with open(env_path, "w") as f:
        for key, value in env_dict.items():
            f.write(f"{key}={value}\n")
