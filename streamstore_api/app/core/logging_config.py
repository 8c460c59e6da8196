"""
Logging setup for the API process.

``setup_logging`` attaches a console handler, and a file handler when
``LOG_FILE`` is set, to the root logger.  Handlers are named so that a
second call (another ``create_app``, a test run) leaves them alone while
handlers installed by other tools, such as pytest's capture, do not
count as configuration.
"""

import logging
from pathlib import Path
from typing import Optional

CONSOLE_HANDLER = "streamstore.console"
FILE_HANDLER = "streamstore.file"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, *, debug: bool = False) -> None:
    """Configure the root logger once per process.

    ``level`` is a level name, case insensitive, with unknown names
    meaning ``INFO``.  ``debug`` forces ``DEBUG``.  The directory of
    ``logfile`` is created when missing.
    """
    root = logging.getLogger()
    installed = {handler.get_name() for handler in root.handlers}
    if CONSOLE_HANDLER in installed:
        return

    root.setLevel(logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.set_name(CONSOLE_HANDLER)
    console.setFormatter(formatter)
    root.addHandler(console)

    if logfile:
        path = Path(logfile).resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
