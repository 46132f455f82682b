import os
from typing import Optional

from userservice.config.settings import Settings, get_settings
from userservice.shared.logger import StructuredLogger


def get_logger(name: str = "userservice", settings: Optional[Settings] = None) -> StructuredLogger:
    """
    Return the StructuredLogger registered under ``name``.
    log_file and log_level come from ``settings`` (the cached global settings
    when omitted); loggers are cached by name, so the first call wins.
    """
    settings = settings or get_settings()
    log_file = settings.app.log_file

    # Ensure the log directory exists
    log_dir = os.path.dirname(log_file) if log_file else ""
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir, exist_ok=True)

    return StructuredLogger(
        name=name,
        log_file=log_file,
        level=settings.app.log_level,
    )
