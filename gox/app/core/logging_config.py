"""
Logging configuration for the service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger once, then sets the level on the loggers
this service writes to: the ``gox`` package, the ``gox_client``
module and Uvicorn's server loggers.  Level names are the ones Uvicorn
accepts, including ``trace``; ``Settings`` rejects anything else
before this module is reached.
"""

import logging
from pathlib import Path
from typing import Optional

from uvicorn.config import LOG_LEVELS

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVICE_LOGGERS = ("gox", "gox_client", "uvicorn", "uvicorn.error")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure service logging.

    Handlers are only attached if the root logger has none yet, so a
    second call (a test building another app, or ``run.main`` after
    ``create_app``) only updates the levels.  Raises ``KeyError`` for a
    level name Uvicorn does not know.
    """
    numeric_level = LOG_LEVELS[level.lower()]

    root = logging.getLogger()
    if not root.handlers:
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

        if logfile:
            file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
        root.setLevel(numeric_level)

    for name in SERVICE_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)
