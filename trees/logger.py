import logging

from trees.config import LOG_LEVEL

LOGGER_NAME = "quadtree"
LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"

# la librería no agrega handlers; main.py configura la consola
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))


def set_debug(enabled: bool) -> None:
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)
