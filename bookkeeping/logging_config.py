"""
Logging setup.

Configures the root logger once at application start. Every
module then logs through ``logging.getLogger(__name__)``.
"""

import logging

from bookkeeping.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def configure_logging(settings: Settings) -> None:
    """Send records to the console, and to LOG_FILE when one is set."""
    global _configured
    if _configured:
        return

    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if settings.LOG_FILE:
        file_handler = logging.FileHandler(settings.LOG_FILE, mode="a")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    # SQL echo is noisy; only surface it in debug mode.
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )
    _configured = True
