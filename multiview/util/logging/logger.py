# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import functools
import logging

from typing import Any, override

from .loggable_protocol import LoggableProtocol


class Logger(logging.Logger):
    """Logger aware of the handlers owned by the :class:`LoggingManager`.

    ``isEnabledFor`` takes an optional ``handler`` (``"tty"`` or ``"file"``), so that expensive messages are only
    built when the handler that will print them is going to let them through.
    """

    @override
    def isEnabledFor(self, level: int, *, handler: str | None = None) -> bool:
        match handler:
            case None:
                return super().isEnabledFor(level)
            case "tty":
                return self.isEnabledForTty(level)
            case "file":
                return self.isEnabledForFile(level)

        msg = f"Unknown handler: {handler}. Expected 'tty' or 'file'."
        raise ValueError(msg)

    def isEnabledForTty(self, level: int) -> bool:  # noqa: N802 which matches isEnabledFor
        from .manager import LoggingManager

        return self._isEnabledForHandler(LoggingManager().ch, level)

    def isEnabledForFile(self, level: int) -> bool:  # noqa: N802 which matches isEnabledFor
        from .manager import LoggingManager

        return self._isEnabledForHandler(LoggingManager().fh, level)

    def _isEnabledForHandler(self, handler: logging.Handler | None, level: int) -> bool:  # noqa: N802
        if handler is None or level < handler.level:
            return False
        return super().isEnabledFor(level)


logging.setLoggerClass(Logger)


# MARK: getLogger
original_logging_getLogger = logging.getLogger  # noqa: N816


def _getLogger(obj: object, parent: Any = None, name: str | None = None) -> logging.Logger:  # noqa: N802
    if name is None:
        name = obj if isinstance(obj, str) else type(obj).__name__

    match parent:
        case logging.Logger():
            logger = parent.getChild(name)
        case LoggableProtocol():
            logger = parent.log.getChild(name)
        case _:
            logger = original_logging_getLogger(name)

    from .manager import LoggingManager

    if (manager := LoggingManager()).initialized:
        manager.apply_logging_level(logger)

    return logger


def getLogger(obj: object, parent: Any = None, name: str | None = None) -> Logger:  # noqa: N802
    """Return the logger for ``obj``: itself when a string, otherwise its type name.

    When ``parent`` is a logger, or anything with a ``log`` property, the logger is created as its child.
    """
    logger = _getLogger(obj, parent=parent, name=name)

    if not isinstance(logger, Logger):
        msg = f"Expected a Logger instance, got: {type(logger)}"
        raise TypeError(msg)

    return logger


# Third-party code calling logging.getLogger also gets the configured levels
@functools.wraps(logging.getLogger)
def logging_getLogger_wrapper(name: str | None = None) -> logging.Logger:  # noqa: N802
    return logging.root if name is None else _getLogger(name)


logging.getLogger = logging_getLogger_wrapper
