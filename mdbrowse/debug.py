import logging
import os
from typing import Optional


LOGGER_NAME = "mdbrowse"
DEFAULT_LOG_FILE = "mdbrowse_debug.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Silent until configure_logging() installs a real handler
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(LOGGER_NAME).getChild(name)


def configure_logging(debug: bool = False, log_path: Optional[str] = None) -> Optional[str]:
    """Attach a file handler to the ``mdbrowse`` logger.

    Nothing is written unless ``debug`` is set or ``log_path`` is given. With
    ``debug`` alone the log goes to ``mdbrowse_debug.log`` in the working
    directory. If the file cannot be opened, records go to stderr instead.

    Returns the path being written, or None when logging stays silent or fell
    back to stderr.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    if log_path:
        log_path = os.path.expanduser(log_path)
    elif debug:
        log_path = os.path.join(os.getcwd(), DEFAULT_LOG_FILE)
    else:
        logger.addHandler(logging.NullHandler())
        return None

    fmt = logging.Formatter(LOG_FORMAT)
    try:
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as exc:
        # The TUI owns stdout; stderr is only visible after exit
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.warning(
            "Failed to create log file '%s': %s. Falling back to standard error.",
            log_path,
            exc,
        )
        return None
    handler.setLevel(level)
    handler.setFormatter(fmt)
    logger.addHandler(handler)
    return log_path
