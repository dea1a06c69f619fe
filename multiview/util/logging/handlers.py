# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Filters and formatters shared by the file and TTY handlers.

Records may carry two extras:

- ``handler``: ``"tty"`` or ``"file"``, to send the record to a single handler.
- ``simple``: when true, the record is printed as its bare message, without level or logger prefix.
"""

import logging

from typing import override


class HandlerFilter(logging.Filter):
    def __init__(self, handler_name: str) -> None:
        super().__init__(name="")
        self.handler_name = handler_name

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        return getattr(record, "handler", self.handler_name) == self.handler_name


def is_simple(record: logging.LogRecord) -> bool:
    return bool(getattr(record, "simple", False))


class ConditionalFormatter(logging.Formatter):
    @override
    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage() if is_simple(record) else super().format(record)
