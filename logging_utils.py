"""Logging setup.

The model modules log their intermediate terms at DEBUG level through
module-level loggers (`logging.getLogger(__name__)`); nothing is printed
unless the host configures logging. `setup_logger` is the one-call setup
used by the CLI.
"""

import logging
from sys import stderr
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str = 'empirical_pathloss', level: str = 'INFO',
                 log_file: Optional[str] = None) -> logging.Logger:
    """Configure and return a logger.

    Parameters
    ----------
    name : str
        Logger name (the package logger by default, so model loggers inherit it)
    level : str
        'DEBUG', 'INFO', 'WARNING', 'ERROR' or 'CRITICAL'
    log_file : str, optional
        Also write records to this file
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # repeated calls must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
