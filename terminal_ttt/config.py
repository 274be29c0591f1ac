import logging
import os
from typing import Optional


WIN_SCORE = 10  # a win at depth d scores WIN_SCORE - d

CLEAR_SCREEN = "\x1B[2J\x1B[1;1H"

LOG_LEVEL_ENV = "TTT_LOG_LEVEL"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_log_level() -> str:
    level = (os.getenv(LOG_LEVEL_ENV, "WARNING") or "WARNING").strip().upper()
    if level not in LOG_LEVELS:
        logging.getLogger(__name__).warning(
            "ignoring unknown %s=%r, using WARNING", LOG_LEVEL_ENV, level)
        return "WARNING"
    return level


def setup_logging(level: Optional[str] = None) -> None:
    # stderr keeps log lines out of the board drawn on stdout
    logging.basicConfig(
        level=(level or default_log_level()).upper(),
        format=LOG_FORMAT,
        force=True,
    )
