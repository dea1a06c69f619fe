# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


from .collection import TraversableCollection
from .config import CollectionConfig
from .errors import OutOfRangeError, TraversalError, TraversalReleasedError
from .order import OrderingStrategy, TraversalOrder
from .protocols import HasLengthKey, HasScoreKey, HasTextKey, PositionalAccessProtocol, RecordProtocol
from .traversal import Traversal


__all__ = [
    "CollectionConfig",
    "HasLengthKey",
    "HasScoreKey",
    "HasTextKey",
    "OrderingStrategy",
    "OutOfRangeError",
    "PositionalAccessProtocol",
    "RecordProtocol",
    "TraversableCollection",
    "Traversal",
    "TraversalError",
    "TraversalOrder",
    "TraversalReleasedError",
]
