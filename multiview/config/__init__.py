# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from ..util.config.wrapper import ConfigManager
from .main import Config


# Export configuration wrapper
CFG = ConfigManager(Config)


__all__ = [
    "CFG",
    "Config",
]
