import logging
import os

LOG_PATH = os.environ.get("STRING_MATCHER_LOG_PATH", os.path.join("data", "logs"))
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _file_logger(name, log_path, filename, level):
    """Attach a dedicated file handler to the named logger and stop propagation."""
    file_logger = logging.getLogger(name)
    file_logger.setLevel(level)
    file_logger.handlers.clear()  # Clear any existing handlers

    handler = logging.FileHandler(os.path.join(log_path, filename), encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    file_logger.addHandler(handler)
    file_logger.propagate = False
    return file_logger


def setup_logging(log_path=LOG_PATH):
    """Sets up the logging configuration for the application."""

    # Create logs directory if it doesn't exist
    os.makedirs(log_path, exist_ok=True)

    # Clear all existing handlers to prevent duplication
    logging.getLogger().handlers.clear()

    # set up the root logger for console output only
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Create a console handler for user-facing output
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)  # Only show WARNING and above on the console
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    root_logger.addHandler(console_handler)

    # App log will be for unexpected errors and menu activity
    _file_logger("app", log_path, "app.log", logging.INFO)

    # Search layer captures DEBUG and above so every query can be traced
    _file_logger("matcher", log_path, "matcher.log", logging.DEBUG)

    # Document extraction log
    _file_logger("documents", log_path, "documents.log", logging.INFO)
