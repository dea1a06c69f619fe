# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..helpers import script_info
from .loader import ConfigFileLoader
from .models import ConfigBase


if TYPE_CHECKING:
    import pathlib

    from .config_path import ConfigFilePath


class ConfigManager[C: ConfigBase]:
    """Holds the active configuration, and forwards attribute access to it."""

    def __init__(self, config_class: type[C]) -> None:
        self.config_class = config_class
        self.config: C | None = None

    @property
    def loaded(self) -> bool:
        return self.config is not None

    def open(self, path: ConfigFilePath | pathlib.Path | str) -> C:
        self.config = ConfigFileLoader(self.config_class).open(path)
        return self.config

    def load(self, config: str | dict[str, Any] | C) -> C:
        if isinstance(config, self.config_class):
            self.config = config
        elif isinstance(config, (str, dict)):
            self.config = ConfigFileLoader(self.config_class).load(config)
        else:
            msg = f"Expected {self.config_class.__name__}, str or dict, got {type(config).__name__}"
            raise TypeError(msg)
        return self.config

    def reset(self) -> None:
        if not script_info.is_unit_test():
            msg = "Cannot reset configuration outside of unit tests"
            raise RuntimeError(msg)
        self.config = None

    def __getattr__(self, name: str) -> Any:
        config = self.__dict__.get("config")
        if config is None:
            msg = f"Configuration not initialized. Call 'load()' or 'open()' first before accessing '{name}'."
            raise RuntimeError(msg)
        return getattr(config, name)
