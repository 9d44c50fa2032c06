import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logger(level=logging.WARNING):
    """
    Sets up the package logger with the specified logging level.
    Logs go to stderr so they never mix with the scraped data on stdout.
    """
    logger = logging.getLogger('airbnb_scraper')
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
