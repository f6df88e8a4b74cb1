import logging
import pathlib
import sys
from logging.handlers import RotatingFileHandler

DEFAULT_LOG_LEVEL = logging.DEBUG
LOGGER_NAME = 'heartbeat_monitor'


def get_logger(log: dict = None):
    log = log or {}
    log_file = log.get('file')
    logger = logging.getLogger(LOGGER_NAME)
    if not len(logger.handlers):
        formatter = logging.Formatter('[%(levelname)s] %(asctime)s | %(name)s: %(message)s')
        if log_file:
            pathlib.Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file, maxBytes=1000000, backupCount=50)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)

        logger.setLevel(log.get('level', DEFAULT_LOG_LEVEL))
        logger.addHandler(console_handler)
        logger.propagate = False

    return logger
