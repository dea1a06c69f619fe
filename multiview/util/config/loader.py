# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml

from ..helpers import script_info
from ..logging import getLogger
from ..logging.manager import LoggingManager
from .config_path import ConfigFilePath
from .models import ConfigBase, ConfigLoggingOnly
from .yaml_loader import IncludeLoader


if TYPE_CHECKING:
    import pathlib


class ConfigFileLoader[C: ConfigBase]:
    """Loads a configuration document (YAML text, dict or file) into a ``config_class`` instance.

    Outside unit tests, the ``logging`` section is used to initialise the :class:`LoggingManager` before the rest of
    the document is validated, so that validation itself can already log.
    """

    def __init__(self, config_class: type[C]) -> None:
        self.config_class = config_class
        self.config: C | None = None
        self.path: ConfigFilePath | None = None
        self.log = getLogger(self)

    def open(self, path: ConfigFilePath | pathlib.Path | str) -> C:
        if self.config is not None:
            msg = "Configuration already loaded. Cannot load again."
            raise RuntimeError(msg)

        self.path = ConfigFilePath.coerce(path)

        with self.path.open() as f:
            data = yaml.load(f, IncludeLoader)  # noqa: S506 as IncludeLoader extends yaml.SafeLoader

        if not isinstance(data, dict):
            msg = f"Invalid configuration file format. Expected a dictionary, got {type(data).__name__}"
            raise TypeError(msg)

        return self.load(data)

    def load(self, data: dict[str, Any] | str) -> C:
        if self.config is not None:
            msg = "Configuration already loaded. Cannot load again."
            raise RuntimeError(msg)

        if isinstance(data, str):
            data = yaml.load(data, IncludeLoader)  # noqa: S506 as IncludeLoader extends yaml.SafeLoader

        if data is None:
            msg = "Configuration is empty"
            raise ValueError(msg)
        if not isinstance(data, dict):
            msg = f"Invalid configuration format. Expected a dictionary, got {type(data).__name__}"
            raise TypeError(msg)

        self.data: dict[str, Any] = data

        # Use current state of data to initialize logging manager
        self._init_logging_manager()

        # Validate the full configuration
        self.config = self.config_class.model_validate(self.data)

        self.log.info("Configuration loaded successfully from %s", self.path or "<memory>")
        if not script_info.is_unit_test():
            self.config.debug()

        return self.config

    def _init_logging_manager(self) -> None:
        if script_info.is_unit_test():
            return

        manager = LoggingManager()
        if manager.initialized:
            return

        # Convert logging config entry into LoggingConfig object
        config = ConfigLoggingOnly(logging=self.data.get("logging", {}))
        self.data["logging"] = config.logging

        manager.initialize(config.logging)
