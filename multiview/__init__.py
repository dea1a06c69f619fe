# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Append-only record collections, walked through independent snapshot traversals in several orders.

>>> from multiview import Song, TraversableCollection, TraversalOrder
>>> playlist = TraversableCollection(
...     [
...         Song(title="Bohemian Rhapsody", artist="Queen", length=354, popularity=1000),
...         Song(title="Imagine", artist="John Lennon", length=183, popularity=1200),
...         Song(title="Hey Jude", artist="The Beatles", length=431, popularity=900),
...     ]
... )
>>> with playlist.create_traversal(TraversalOrder.BY_POPULARITY_DESCENDING) as traversal:
...     [song.title for song in traversal]
['Imagine', 'Bohemian Rhapsody', 'Hey Jude']
>>> traversal.released
True
"""

from .collections import (
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
from .models import Record, Song


__all__ = [
    "CollectionConfig",
    "OrderingStrategy",
    "OutOfRangeError",
    "Record",
    "RecordProtocol",
    "Song",
    "TraversableCollection",
    "Traversal",
    "TraversalError",
    "TraversalOrder",
    "TraversalReleasedError",
]
