# storefront/core/logging_service.py
"""
Logging service implementing ILogger interface.
Separated from config for Single Responsibility Principle.
"""

import os
import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime
from flask import Flask

from .interfaces import ILogger, IConfigProvider


class ColorFormatter(logging.Formatter):
    """Console formatter with a color per level"""

    _COLORS = {
        logging.DEBUG: "\x1b[38;5;244m",  # gray
        logging.INFO: "\x1b[32;20m",  # green
        logging.WARNING: "\x1b[33;20m",  # yellow
        logging.ERROR: "\x1b[31;20m",  # red
        logging.CRITICAL: "\x1b[31;1m",  # red bold
        "reset": "\x1b[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        color = self._COLORS.get(record.levelno, "")
        base = (
            f"{ts} | {record.levelname:<8} | [{record.name}] | "
            f"{record.module}:{record.lineno} | {record.getMessage()}"
        )
        return f"{color}{base}{self._COLORS['reset']}"


class FlaskLogger(ILogger):
    """
    Flask-integrated logger implementing ILogger interface.
    Messages sent before configure() go to this module's logger.
    """

    def __init__(self, config: IConfigProvider):
        self.config = config
        self._logger = logging.getLogger(__name__)
        self.log_file = None
        self.file_handler = None

    def configure(self, app: Flask) -> None:
        """Configure logging for Flask application"""
        try:
            logs_dir = self.config.get("LOG_DIR")
            os.makedirs(logs_dir, exist_ok=True)

            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            self.log_file = os.path.join(logs_dir, f"storefront_{timestamp}.log")

            file_handler = RotatingFileHandler(
                filename=self.log_file,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setFormatter(
                logging.Formatter(
                    "[%(asctime)s] %(levelname)-8s | [%(name)s] | "
                    "%(module)s:%(lineno)d -> %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            file_handler.setLevel(logging.DEBUG)
            self.file_handler = file_handler

            console_handler = logging.StreamHandler()
            console_handler.setLevel(self.config.get("LOG_LEVEL", "INFO"))
            console_handler.setFormatter(ColorFormatter())

            root_logger = logging.getLogger()
            root_logger.setLevel(logging.DEBUG)

            for h in list(root_logger.handlers):
                root_logger.removeHandler(h)
                h.close()

            root_logger.addHandler(file_handler)
            root_logger.addHandler(console_handler)

            # Quiet verbose libraries
            logging.getLogger("werkzeug").setLevel(logging.WARNING)
            logging.getLogger("waitress").setLevel(logging.WARNING)

            self._logger = app.logger

            self.info(
                f"Logging configured (environment: {self.config.get('ENV')}, "
                f"file: {self.log_file})"
            )

        except Exception as e:
            raise RuntimeError(f"Failed to configure logging: {e}") from e

    def get_logger(self, name: str) -> logging.Logger:
        """Get logger by name"""
        return logging.getLogger(name)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def critical(self, message: str) -> None:
        self._logger.critical(message)
