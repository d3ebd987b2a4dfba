import sys

from loguru import logger

from .config import Config


VERBOSE = Config.VERBOSE
LOG_PATH = Config.LOG_PATH
LOG_LEVEL = Config.LOG_LEVEL
LOG_ROTATION = Config.LOG_ROTATION
LOG_RETENTION = Config.LOG_RETENTION


# Library messages stay silent unless a sink is asked for
if not (VERBOSE or LOG_PATH):
    logger.disable("ettv_dump")

# Log to a file
if LOG_PATH:
    logger.add(
        LOG_PATH,
        rotation=LOG_ROTATION,
        retention=LOG_RETENTION,
        level=LOG_LEVEL,
        filter="ettv_dump",
    )

# Log to console
if VERBOSE:
    logger.add(
        sink=sys.stderr,
        level=LOG_LEVEL,
        filter="ettv_dump",
    )
