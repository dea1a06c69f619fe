# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

from reprlib import Repr

from pydantic import Field

from ..logging.config import LoggingConfig
from .base_model import BaseConfigModel


class ConfigLoggingOnly(BaseConfigModel):
    """The subset of the configuration needed to bring up logging before the full configuration is validated."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")


class ConfigBase(ConfigLoggingOnly):
    def debug(self) -> None:
        model_dump = None

        # TTY
        if self.log.isEnabledForTty(logging.DEBUG):
            if self.logging.rich:
                from rich import pretty

                pretty.pprint(self, indent_guides=True, expand_all=True)
            else:
                model_dump = self.model_dump()
                self.log.debug(Repr(indent=4).repr(model_dump), extra={"handler": "tty"})

        # File
        if self.log.isEnabledForFile(logging.DEBUG):
            if model_dump is None:
                model_dump = self.model_dump()
            self.log.debug("Configuration: %s", Repr(indent=4).repr(model_dump), extra={"handler": "file"})
