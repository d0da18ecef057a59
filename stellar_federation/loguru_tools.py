import sys
from typing import Optional

from loguru import logger

from stellar_federation.config_reader import config

_log_format = ("<green>{time:YYYY-MM-DD HH:mm:ss}</green> - [<level>{level}</level>] - "
               "{name}:{function}({line}) - <level>{message}</level>")


def configure_logging(level: Optional[str] = None) -> int:
    """
    Replace loguru default sink with a stderr sink.

    :param level: Log level, config.log_level if None.
    :return: Id of the added sink.
    """
    logger.remove()
    return logger.add(sys.stderr, level=(level or config.log_level).upper(), format=_log_format)
