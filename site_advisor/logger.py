import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PACKAGE_LOGGER = "site_advisor"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """
    Attaches a console handler to the package logger.
    Module loggers (logging.getLogger(__name__)) propagate to it. Safe to call
    more than once: the handler is added only the first time, the level is always updated.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)
    return logger
