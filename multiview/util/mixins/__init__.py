# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


# Import mixins
from .loggable import LoggableMixin, LoggableNamedMixin
from .named import NamedMixin, NamedProtocol


__all__ = [
    "LoggableMixin",
    "LoggableNamedMixin",
    "NamedMixin",
    "NamedProtocol",
]
