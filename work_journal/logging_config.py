import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    app_name: str = "work-journal",
    level: str = "INFO",
    log_dir: Optional[str] = None,
) -> None:
    """Configure application logging

    Args:
        app_name: Name to use for log files
        level: Root log level name
        log_dir: Directory for rotating log files. Falls back to the
            LOG_DIR environment variable; console only when neither is set.

    Calling it again for the same app_name only updates the root level.

    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    console_name = f"{app_name}-console"
    if any(h.get_name() == console_name for h in root_logger.handlers):
        return  # Already configured
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(console_name)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_dir = log_dir or os.getenv("LOG_DIR")
    if not log_dir:
        return

    log_path = Path(log_dir)
    os.makedirs(log_path, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_path / f"{app_name}.log",
        maxBytes=10_000_000,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    error_handler = logging.handlers.RotatingFileHandler(
        filename=log_path / f"{app_name}-error.log",
        maxBytes=10_000_000,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)
    root_logger.addHandler(error_handler)
