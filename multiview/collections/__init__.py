# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


from .traversable import (
    CollectionConfig,
    OrderingStrategy,
    OutOfRangeError,
    RecordProtocol,
    TraversableCollection,
    Traversal,
    TraversalError,
    TraversalOrder,
    TraversalReleasedError,
)


__all__ = [
    "CollectionConfig",
    "OrderingStrategy",
    "OutOfRangeError",
    "RecordProtocol",
    "TraversableCollection",
    "Traversal",
    "TraversalError",
    "TraversalOrder",
    "TraversalReleasedError",
]
