"""
Logging setup for the Lab Records API.

``create_app`` calls ``setup_logging`` before loading the record
document, so the startup messages (how many records were read and from
where, or why the document was rejected) reach the console and, when
``LOG_FILE`` is set, a log file.  Module loggers under
``lab_records_api`` propagate to the root logger configured here.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console and optional file handlers to the root logger.

    Does nothing when the root logger already has handlers, which is
    the case under pytest and on a second ``create_app`` call.

    Parameters
    ----------
    level : str
        Value of ``LOG_LEVEL``, e.g. ``"DEBUG"`` to see every name
        filter with its match count.  Unknown names mean ``INFO``.
    logfile : Optional[str]
        Value of ``LOG_FILE``; ``None`` logs to the console only.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
