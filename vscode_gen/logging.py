from logging import (
    DEBUG,
    ERROR,
    FATAL,
    INFO,
    WARN,
    Formatter,
    StreamHandler,
    getLevelName,
    getLogger,
)
from typing import Dict

from .consts import LOG_LEVEL, LOGGER_NAME

LOG_FMT = """
--  {name}
level:    {levelname}
time:     {asctime}
module:   {module}
line:     {lineno}
function: {funcName}
message:  |-
{message}
"""

DATE_FMT = "%Y-%m-%d %H:%M:%S"

LEVELS: Dict[str, int] = {
    getLevelName(lv): lv for lv in (DEBUG, INFO, WARN, ERROR, FATAL)
}


log = getLogger(LOGGER_NAME)


def setup(level: str = LOG_LEVEL) -> None:
    log.setLevel(LEVELS.get(level.upper(), INFO))
    formatter = Formatter(fmt=LOG_FMT, datefmt=DATE_FMT, style="{")
    handler = StreamHandler()
    handler.setFormatter(formatter)
    log.addHandler(handler)
