import logging
import os
from typing import Dict

from quart.logging import default_handler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LoggingHelper:
    """Helper class for setting up logging.

    Library log levels can be overriden using envvars, e.g.:
    HYPERCORN_LOG_LEVEL=DEBUG
    """

    def __init__(self, app=None):
        """Initialise the LoggingHelper.

        Args:
            app (Quart, optional): The Quart application instance.
        """
        self._enabled_loggers: Dict[str, str] = {}
        self._handler = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Initialize logging configuration.

        Sets up the root logger with a console handler shared by the
        application, the todolists modules and any library loggers.
        """
        log_level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
        numeric_level = getattr(logging, log_level, None)
        if not isinstance(numeric_level, int):
            raise ValueError(f"Invalid log level: {log_level}")

        root_logger = logging.getLogger()
        root_logger.setLevel(numeric_level)

        # Creating several apps (tests) must not stack handlers
        if not any(getattr(h, "_todolists", False) for h in root_logger.handlers):
            self._handler = logging.StreamHandler()
            self._handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self._handler._todolists = True
            root_logger.addHandler(self._handler)

        app.logger.removeHandler(default_handler)
        app.logger.setLevel(numeric_level)
        logging.getLogger("todolists").setLevel(numeric_level)

        self._configure_third_party_loggers(app)
        self._load_enabled_loggers(app)

        app.extensions["logging_helper"] = self
        app.logger.info(f"Logging initialised with level: {log_level}")

    def _configure_third_party_loggers(self, app):
        """Set all third-party loggers to WARNING."""
        own = (app.name, "todolists")
        for name in list(logging.root.manager.loggerDict):
            if any(name == prefix or name.startswith(f"{prefix}.") for prefix in own):
                continue
            logging.getLogger(name).setLevel(logging.WARNING)

    def _load_enabled_loggers(self, app):
        """Load explicitly configured loggers from environment."""
        for key, value in os.environ.items():
            if key.endswith("_LOG_LEVEL"):
                logger_name = key[:-10].lower()  # Remove _LOG_LEVEL suffix
                self.set_logger_level(app, logger_name, value)

    def set_logger_level(self, app, logger_name: str, level: str):
        """Set log level for a specific logger.

        Args:
            logger_name: Name of the logger
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f"Invalid log level: {level}")

        logger = logging.getLogger(logger_name)
        logger.setLevel(numeric_level)
        self._enabled_loggers[logger_name] = level
        app.logger.info(f"Set {logger_name} log level to {level}")
