"""
Logging Configuration
=====================
The kernel only emits records through module loggers under the
'geometrykernel' namespace. The package registers a NullHandler on import and
never configures output by itself; an embedding application either routes the
records through its own handlers or calls setup_logging() for a ready-made
console (and optional file) output.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "geometrykernel"

# Marks the handlers installed by setup_logging() so a repeated call only replaces those
_OWNED_HANDLER_ATTR = "_geometrykernel_owned"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console (and optionally file) output to the 'geometrykernel' logger.

    Calling it again replaces the handlers of the previous call and updates the
    level. Handlers attached by the application are left untouched.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, _OWNED_HANDLER_ATTR, False)]:
        logger.removeHandler(handler)
        handler.close()

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _OWNED_HANDLER_ATTR, True)
        logger.addHandler(handler)

    logger.debug(f"Logging configured (level={logging.getLevelName(level)}, file={log_file})")
    return logger
