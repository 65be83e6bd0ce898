# utils/logging_config.py
import logging
from typing import List, Optional, TextIO

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Handlers installed by setup_logging, replaced on the next call
_installed_handlers: List[logging.Handler] = []


def setup_logging(level: int = logging.WARNING,
                  log_file: Optional[str] = None,
                  stream: Optional[TextIO] = None) -> None:
    """
    Set up logging with a console handler and optionally a file handler.

    Args:
        level: Logging level (e.g., logging.INFO, logging.DEBUG).
        log_file: Optional path to a file for logging output.
        stream: Console stream; defaults to sys.stderr so stdout stays reserved
            for results.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Only drop our own handlers; others (e.g. pytest's) stay attached
    while _installed_handlers:
        handler = _installed_handlers.pop()
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler(stream)
    ch.setFormatter(formatter)
    logger.addHandler(ch)
    _installed_handlers.append(ch)

    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(formatter)
        logger.addHandler(fh)
        _installed_handlers.append(fh)


def get_logger(name: str, level: int = logging.NOTSET) -> logging.Logger:
    """
    Retrieve a logger with the given name. The default level defers to the
    root logger configured by setup_logging.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger
