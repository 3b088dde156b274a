# Copyright (c) Meta Platforms, Inc. and affiliates.
import logging

LOG_FORMAT = "%(levelname)s %(asctime)s %(name)s: %(message)s"


class SeqCursorHandler(logging.StreamHandler):
    pass


def init_logger(level: str = "INFO", *, stream=None) -> logging.Logger:
    """
    Configure the root logger once. Handlers already installed by a previous
    call are replaced rather than stacked.
    """
    logger = logging.getLogger()
    for handler in list(logger.handlers):
        if isinstance(handler, SeqCursorHandler):
            logger.removeHandler(handler)
    handler = SeqCursorHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
