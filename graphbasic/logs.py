"""Logging setup for the graphbasic command."""

import logging
from logging import Formatter, LogRecord, StreamHandler
import sys
from typing import Dict, NoReturn, Optional, TextIO


class ColorFormatter(Formatter):

    """Formatter that prefixes messages with the level name, bold and colored."""

    COLORS = {
        logging.FATAL: 31,  # red
        logging.ERROR: 31,  # red
        logging.WARNING: 33,  # yellow
        logging.INFO: 36,  # cyan
        logging.DEBUG: 35,  # magenta
    }

    def __init__(self, use_color: bool):
        super().__init__("%(levelname)s: %(message)s")
        self.colored: Dict[int, Formatter] = {}
        if use_color:
            for level, code in self.COLORS.items():
                fmt = f"\x1b[{code};1m%(levelname)s:\x1b[0m %(message)s"
                self.colored[level] = Formatter(fmt)

    def format(self, record: LogRecord) -> str:
        formatter = self.colored.get(record.levelno)
        if formatter is None:
            return super().format(record)
        return formatter.format(record)


class ExitStreamHandler(StreamHandler):

    """Stream handler that exits with status 1 after a severe enough record.

    The threshold is exit_level, FATAL by default. Lowering it to ERROR makes
    every logged error stop the program.
    """

    def __init__(
        self, stream: Optional[TextIO] = None, exit_level: int = logging.FATAL
    ):
        super().__init__(stream)
        self.exit_level = exit_level

    def emit(self, record: LogRecord):
        super().emit(record)
        if record.levelno >= self.exit_level:
            sys.exit(1)


def setup_logging(stream: TextIO, log_level: int, exit_level: int):
    """Configure the root logger to write to stream.

    Colors are used only when stream is a TTY. Any handlers from an earlier
    call are replaced. The log_level must not be above exit_level, and
    exit_level must not be above FATAL.
    """
    assert log_level <= exit_level
    assert exit_level <= logging.FATAL
    logging.addLevelName(logging.FATAL, "FATAL")
    logger = logging.getLogger()
    for handler in list(logger.handlers):
        if isinstance(handler, ExitStreamHandler):
            logger.removeHandler(handler)
    logger.setLevel(log_level)
    handler = ExitStreamHandler(stream, exit_level)
    handler.setFormatter(ColorFormatter(use_color=stream.isatty()))
    logger.addHandler(handler)


def fatal(msg: str, *args, **kwargs) -> NoReturn:
    """Log at FATAL level, which always exits.

    Typed NoReturn so that code after a call is known to be unreachable.
    """
    logging.fatal(msg, *args, **kwargs)
    assert False
