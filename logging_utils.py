# logging_utils.py

import logging
import threading

LOG_FORMAT = "%(asctime)s | %(levelname)-5s | %(module)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"

_logger = None
_logger_lock = threading.Lock()


def get_logger(name="todos"):
    """
    Returns the shared application logger, creating its console handler on first use.
    Safe to call from the save/load worker threads.
    """
    global _logger
    if _logger is not None:
        return _logger
    with _logger_lock:
        if _logger is not None:
            return _logger
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)

        console = logging.StreamHandler()
        console.setLevel(logging.INFO)
        console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        logger.addHandler(console)
        _logger = logger
    return _logger
