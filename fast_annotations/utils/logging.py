import logging
from pathlib import Path

from fast_annotations import config

_logging_configured = False
_log_file_path: Path | None = None


def setup_logging(log_file_name: str | None = None, level: str | None = None) -> logging.Logger:
    """
    Setup logging for an application using fast-annotations.

    The library itself only emits DEBUG records (message synthesis, empty-message
    backstop) through the root logger.

    Log levels:
    - CRITICAL
    - ERROR
    - WARNING
    - INFO
    - DEBUG
    - NOTSET
    """
    global _logging_configured, _log_file_path

    file_name = log_file_name or config.LOG_FILE_NAME
    log_file = Path(config.LOG_DIR) / file_name if file_name else None

    root_logger = logging.getLogger()

    # If already configured and path matches, skip reconfiguration
    if _logging_configured and _log_file_path == log_file:
        if level:
            root_logger.setLevel(level.upper())
        return root_logger

    root_logger.setLevel((level or config.LOG_LEVEL).upper())

    # Clear any existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(levelname)s - %(name)s - %(message)s'))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_file), mode='a')
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        root_logger.addHandler(file_handler)

    _log_file_path = log_file
    _logging_configured = True
    logging.debug("Logging configured successfully")
    return root_logger


def get_log_file_path() -> Path | None:
    return _log_file_path
