# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from . import mro, script_info
from .frozendict import FrozenDict
from .wrappers import before_attribute_check


__all__ = [
    "FrozenDict",
    "before_attribute_check",
    "mro",
    "script_info",
]
