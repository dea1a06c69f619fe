# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Process-wide logging setup for multiview.

The :class:`LoggingManager` owns the two root handlers (a log file and the TTY) and the per-logger levels. It is
initialised once, either by the configuration loader or, under unit tests, by the test suite.
"""

from __future__ import annotations

import logging
import sys

from typing import TYPE_CHECKING, Any, ClassVar, Self
from typing import cast as typing_cast

from ..helpers import script_info
from .config import LoggingConfig
from .handlers import ConditionalFormatter, HandlerFilter


if TYPE_CHECKING:
    from pathlib import Path


LOG_FILE_NAME: str = "multiview.log"

FILE_FORMAT: str = "%(asctime)s [%(levelname)s:%(name)s] %(message)s"
TTY_FORMAT: str = "[%(levelname).1s:%(name)s] %(message)s"


class LoggingManager:
    _instance: ClassVar[LoggingManager | None] = None

    initialized: bool
    config: LoggingConfig
    fh: logging.Handler | None
    ch: logging.Handler | None

    def __new__(cls) -> Self:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.initialized = False
            instance.fh = instance.ch = None
            cls._instance = instance
        return typing_cast("Self", cls._instance)

    @property
    def log_file_path(self) -> Path:
        return self.config.dir / LOG_FILE_NAME

    # MARK: Initialisation
    def initialize(self, config: LoggingConfig | dict[str, Any]) -> None:
        config = config if isinstance(config, LoggingConfig) else LoggingConfig.model_validate(config)

        if self.initialized:
            msg = f"Must not initialise {type(self).__name__} twice"
            raise RuntimeError(msg)
        self.initialized = True
        self.config = config

        logging.captureWarnings(capture=True)
        logging.root.setLevel(config.levels.root.logger_level)

        self.fh = self._create_file_handler()
        self.ch = self._create_tty_handler()

        # pytest captures records through its own root handler
        for handler in (self.fh, None if script_info.is_unit_test() else self.ch):
            if handler is not None:
                logging.root.addHandler(handler)

        if config.rich and not script_info.is_unit_test():
            self._install_rich_tracebacks()

        # Loggers created before initialisation did not get a level yet
        for name in list(logging.root.manager.loggerDict):
            self.apply_logging_level(logging.getLogger(name))

    def _create_file_handler(self) -> logging.Handler | None:
        level = self.config.levels.file
        if not level.enabled:
            return None

        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(self.log_file_path, mode="w", encoding="UTF-8")
        handler.setLevel(level.logger_level)
        handler.setFormatter(ConditionalFormatter(FILE_FORMAT))
        handler.addFilter(HandlerFilter("file"))
        return handler

    def _create_tty_handler(self) -> logging.Handler | None:
        level = self.config.levels.tty
        if not level.enabled:
            return None

        handler: logging.Handler
        if self.config.rich:
            from .rich_handler import CustomRichHandler

            handler = CustomRichHandler()
        else:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(ConditionalFormatter(TTY_FORMAT))

        handler.setLevel(level.logger_level)
        handler.addFilter(HandlerFilter("tty"))
        return handler

    def _install_rich_tracebacks(self) -> None:
        from rich.traceback import install

        install(extra_lines=1, code_width=160, width=200, show_locals=True, locals_hide_dunder=True, word_wrap=False)

    # MARK: Levels
    def apply_logging_level(self, logger: logging.Logger) -> None:
        """Set the level of ``logger`` from the most specific matching custom level, or the default level.

        Loggers with an explicit level are left alone, and so are loggers that would be set to ``NOTSET``.
        """
        if logger.level != logging.NOTSET:
            return

        level = self.config.levels.default
        longest = 0
        for pattern, custom in self.config.levels.custom.items():
            match = pattern.match(logger.name)
            if match is not None and len(match.group(0)) > longest:
                level, longest = custom, len(match.group(0))

        if level != logging.NOTSET:
            logger.setLevel(level.logger_level)
