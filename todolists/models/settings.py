import os
import secrets
from typing import Literal
from typing import Optional

from dotenv import dotenv_values
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic_core import PydanticCustomError


class Settings(BaseModel):
    """Settings model for environment variables with validation and defaults."""

    # Server
    host: str = Field(default="0.0.0.0", description="Address to bind to")
    port: int = Field(default=8080, ge=1, le=65535, description="Port to listen on")

    # Sessions
    secret_key: str = Field(
        default_factory=lambda: secrets.token_hex(32),
        description="Secret key for signing the session cookie",
    )
    session_lifetime_days: int = Field(
        default=31, ge=1, description="Days a session (and its lists) is kept"
    )

    # Error reporting
    sentry_dsn: Optional[str] = Field(default=None, description="Sentry DSN")

    debug: bool = Field(default=False, description="Debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, v):
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v):
        """Reject secret keys too short to sign sessions safely."""
        if len(v) < 16:
            raise PydanticCustomError(
                "weak_secret_key",
                "Secret key must be at least 16 characters long",
            )
        return v

    def to_env_dict(self) -> dict[str, str]:
        """Convert settings to a dictionary suitable for writing to .env file."""
        env_dict = {}

        for field_name in self.__class__.model_fields:
            value = getattr(self, field_name)
            if value is not None:
                env_dict[field_name.upper()] = str(value)

        return env_dict

    @classmethod
    def from_env_file(cls, env_path: str = ".env", validate: bool = True) -> "Settings":
        """Load settings from .env file if it exists.

        Args:
            env_path: Path to .env file
            validate: Whether to validate the settings
        """
        if not os.path.exists(env_path):
            if not validate:
                return cls.model_construct()
            raise FileNotFoundError(f".env file not found at {env_path}")

        env_values = dotenv_values(env_path)

        settings_dict = {}
        for field_name, field_info in cls.model_fields.items():
            env_value = env_values.get(field_name.upper())
            if env_value is not None:
                if field_info.annotation is int:
                    settings_dict[field_name] = int(env_value)
                elif field_info.annotation is bool:
                    settings_dict[field_name] = env_value.lower() in (
                        "true",
                        "1",
                        "yes",
                        "on",
                    )
                else:
                    settings_dict[field_name] = env_value

        # Use model_construct to bypass validation if requested
        if not validate:
            return cls.model_construct(**settings_dict)

        return cls(**settings_dict)
