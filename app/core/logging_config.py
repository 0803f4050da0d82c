import os
import logging
from logging.handlers import RotatingFileHandler
from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_logging(level: str = None, log_to_file: bool = None):
    """Configure the root logger once: console always, rotating file optionally."""
    global _configured
    if _configured:
        return logging.getLogger()

    level = (level or settings.LOG_LEVEL).upper()
    if log_to_file is None:
        log_to_file = settings.LOG_TO_FILE

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_to_file:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        file_handler = RotatingFileHandler(
            settings.APP_LOG_PATH,
            maxBytes=10485760,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _configured = True
    return root
