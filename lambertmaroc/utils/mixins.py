"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional, Set


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Gives a class its own logger, named '<module>.<class>[.<suffix>]'. Classes defined in
    lambertmaroc therefore log through the package logger and its handler.

    Args:
        suffix:
            (Default None) Extra component appended to the logger name
    """
    logger: logging.Logger

    # Messages already emitted through warn_once, shared by every subclass
    WARNED_ONCE: Set[str] = set()

    def __init__(self, suffix: Optional[str] = None):
        name = self.__class__.__qualname__
        if suffix:
            name = f'{name}.{suffix}'

        module = self.__class__.__module__
        if module != 'builtins':
            name = f'{module}.{name}'

        self.logger = logging.getLogger(name)

    def warn_once(self, msg: str, *args, **kwargs):
        """Logs a warning the first time a given message is seen"""
        if msg in LoggingMixin.WARNED_ONCE:
            return

        LoggingMixin.WARNED_ONCE.add(msg)
        self.logger.warning(msg, *args, **kwargs)
