# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

# Loggable Protocol
from .loggable_protocol import LoggableProtocol

# Logger / getLogger
from .logger import Logger, getLogger


__all__ = [
    "LoggableProtocol",
    "Logger",
    "getLogger",
]
