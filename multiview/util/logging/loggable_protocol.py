# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    import logging


@runtime_checkable
class LoggableProtocol(Protocol):
    """Anything exposing a ``log`` property, usable as the parent of child loggers."""

    @property
    def log(self) -> logging.Logger: ...
