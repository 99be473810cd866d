from __future__ import annotations

import logging

# Third-party loggers that flood DEBUG output with PNG chunk and font cache
# messages while frames are saved.
QUIET_LOGGERS = ("PIL", "matplotlib")

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_default_logging(level: int | str = "INFO") -> None:
    """
    Configure logging for the sketch scripts.

    The root logger gets a single stream handler at `level` unless it already
    has handlers. Pillow and matplotlib are held at WARNING or above so that
    `--log-level DEBUG` only shows this project's drawing messages.
    """
    if isinstance(level, str):
        lvl = logging.getLevelName(level.upper())
        if not isinstance(lvl, int):
            raise ValueError(f"unknown log level: {level!r}")
    else:
        lvl = int(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(lvl, logging.WARNING))

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
