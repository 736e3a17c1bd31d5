import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FMT = "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s | %(message)s"

def setup_logger(logger_name: str, level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Sets up a console handler (and a rotating file handler when log_file is given)
    on the named logger. Calling it again replaces the previous handlers.
    """
    lgr = logging.getLogger(logger_name)
    lgr.setLevel(level.upper())
    for handler in list(lgr.handlers):
        lgr.removeHandler(handler)

    formatter = logging.Formatter(LOG_FMT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    lgr.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        # Bounded log growth: 5 MiB per file, 5 backups
        file_handler = RotatingFileHandler(
            log_file, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        lgr.addHandler(file_handler)

    lgr.debug("logger %s initialized", logger_name)
    return lgr
