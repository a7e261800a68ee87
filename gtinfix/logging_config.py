# gtinfix/logging_config.py
import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
HANDLER_NAME = "gtinfix-stderr"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach one stderr handler to the 'gtinfix' logger. Safe to call on every rerun."""
    logger = logging.getLogger("gtinfix")
    logger.setLevel(level)
    if not any(h.name == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    return logger
