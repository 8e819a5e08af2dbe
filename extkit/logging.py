import logging
import sys
from typing import Iterator, Optional

DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Map string log levels to logging constants
LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

# Modules that log every row or parameter they touch. They stay at WARNING
# unless verbose mode or an explicit level asks for more.
TECHNICAL_MODULES = [
    "extkit.data.command",
    "extkit.data.reader",
]


def get_logger(name: str) -> logging.Logger:
    """Return a logger with the specified name.

    Args:
        name: The name for the logger, typically __name__

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    # Only add a handler if it doesn't have one already
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)

        # Don't propagate to root logger to avoid duplicate logging
        logger.propagate = False

    return logger


def parse_log_level(level: Optional[str]) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant.

    Unknown or empty names fall back to DEFAULT_LOG_LEVEL.
    """
    if not level:
        return DEFAULT_LOG_LEVEL
    return LOG_LEVELS.get(level.strip().lower(), DEFAULT_LOG_LEVEL)


def resolve_level(verbose: bool = False, quiet: bool = False, level: Optional[str] = None) -> int:
    """Pick the root level: quiet beats verbose, and both beat ``level``."""
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return parse_log_level(level)


def _extkit_loggers() -> Iterator[logging.Logger]:
    for name in list(logging.root.manager.loggerDict):
        if name == "extkit" or name.startswith("extkit."):
            yield logging.getLogger(name)


def configure_logging(
    verbose: bool = False,
    quiet: bool = False,
    level: Optional[str] = None,
    fmt: str = DEFAULT_FORMAT,
) -> int:
    """Configure logging for an application using extkit.

    Args:
        verbose: Show debug output everywhere, technical modules included
        quiet: Only show warnings and errors
        level: Level name used when neither flag is set; technical modules
            follow it instead of staying at WARNING
        fmt: Format applied to the root handler and to every extkit logger

    Returns:
        The root logging level that was set
    """
    root_level = resolve_level(verbose, quiet, level)
    formatter = logging.Formatter(fmt)

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)

    # Clear existing handlers to avoid duplicate logs
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_handler = logging.StreamHandler(sys.stdout)
    root_handler.setFormatter(formatter)
    root_logger.addHandler(root_handler)

    if verbose or (level and not quiet):
        technical_level = root_level
    else:
        technical_level = max(root_level, logging.WARNING)

    for module_name in TECHNICAL_MODULES:
        get_logger(module_name).setLevel(technical_level)

    for logger in _extkit_loggers():
        for handler in logger.handlers:
            handler.setFormatter(formatter)

    return root_level
