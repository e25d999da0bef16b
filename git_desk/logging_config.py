"""Logging configuration for git-desk"""
import logging
import sys
from pathlib import Path

PACKAGE_PREFIX = 'git_desk.'

CONSOLE_FORMAT = 'git-desk [%(name)s] %(message)s'
DEBUG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name when stderr is a terminal."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.COLORS.get(record.levelname)
        if color is None or not sys.stderr.isatty():
            return super().format(record)
        # Colour a copy so the file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class BelowErrorFilter(logging.Filter):
    """Drop ERROR and CRITICAL records from a handler.

    Failures reach the operator through the display layer as a single
    ``Error: ...`` line, so the console log handler leaves them out outside
    debug mode.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.ERROR


def get_log_dir() -> Path:
    """Directory holding the git-desk log file."""
    return Path.home() / '.git-desk'


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Configure logging for the application.

    Without flags only warnings are shown. ``verbose`` adds the INFO trail of
    git and git-spice commands; ``debug`` shows everything, including errors
    already reported by the CLI, and also writes it to ``~/.git-desk/git-desk.log``.

    Args:
        verbose: If True, show INFO level messages
        debug: If True, show DEBUG level messages and keep a log file
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    if debug:
        console_handler.setFormatter(ColoredFormatter(fmt=DEBUG_FORMAT, datefmt=DATE_FORMAT))

        log_dir = get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / 'git-desk.log', mode='w')  # Overwrite each run
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(fmt=DEBUG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)
    else:
        console_handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        console_handler.addFilter(BelowErrorFilter())

    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a git-desk module.

    The package prefix is dropped for shorter log lines. Only that prefix is
    stripped: ``git_desk.services.git.repository`` becomes
    ``services.git.repository``, which stays outside GitPython's ``git``
    logger hierarchy.

    Args:
        name: Name of the module (typically __name__)
    """
    if name.startswith(PACKAGE_PREFIX):
        name = name[len(PACKAGE_PREFIX):]
    return logging.getLogger(name)
