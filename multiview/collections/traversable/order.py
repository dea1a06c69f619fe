# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Ordering strategies for traversals.

A strategy is a key function plus a direction. It is applied once, when a traversal is created, to sort the
positions ``0 … len - 1`` of a collection into a permutation; the collection itself is never reordered.

Ties on equal keys keep insertion order, since :func:`sorted` is stable in both directions:

>>> from multiview.collections.traversable.order import TraversalOrder
>>> from multiview.models import Record
>>> records = [Record(key_text="b", key_len=1, key_score=5), Record(key_text="a", key_len=1, key_score=9)]
>>> class Store:
...     def __len__(self): return len(records)
...     def element_at(self, position): return records[position]
>>> TraversalOrder.ALPHABETIC.strategy.permute(Store())
(1, 0)
>>> TraversalOrder.BY_LENGTH_DESCENDING.strategy.permute(Store())
(0, 1)
"""

from __future__ import annotations

import enum

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self

from .protocols import HasLengthKey, HasScoreKey, HasTextKey


if TYPE_CHECKING:
    from collections.abc import Callable

    from _typeshed import SupportsRichComparison

    from .protocols import PositionalAccessProtocol


# MARK: Strategy
@dataclass(frozen=True, slots=True)
class OrderingStrategy[T]:
    name: str
    key: Callable[[T], SupportsRichComparison]
    reverse: bool = False

    def permute(self, source: PositionalAccessProtocol[T]) -> tuple[int, ...]:
        key = self.key
        return tuple(sorted(range(len(source)), key=lambda position: key(source.element_at(position)), reverse=self.reverse))

    @classmethod
    def coerce(cls, order: Any) -> Self:
        """Convert a :class:`TraversalOrder`, its string value, or a strategy into a strategy."""
        if isinstance(order, OrderingStrategy):
            return order  # pyright: ignore[reportReturnType]
        if isinstance(order, TraversalOrder):
            return order.strategy  # pyright: ignore[reportReturnType]
        if isinstance(order, str):
            try:
                return TraversalOrder(order.lower()).strategy  # pyright: ignore[reportReturnType]
            except ValueError as err:
                valid = ", ".join(repr(o.value) for o in TraversalOrder)
                msg = f"Unknown traversal order '{order}', expected one of {valid}."
                raise ValueError(msg) from err

        msg = f"Expected a TraversalOrder, str or OrderingStrategy, got {type(order).__name__}."
        raise TypeError(msg)


# MARK: Key functions
def text_key(record: HasTextKey) -> str:
    return record.key_text


def length_key(record: HasLengthKey) -> int:
    return record.key_len


def score_key(record: HasScoreKey) -> int:
    return record.key_score


ALPHABETIC = OrderingStrategy[HasTextKey]("alphabetic", key=text_key)
BY_LENGTH_DESCENDING = OrderingStrategy[HasLengthKey]("length", key=length_key, reverse=True)
BY_POPULARITY_DESCENDING = OrderingStrategy[HasScoreKey]("popularity", key=score_key, reverse=True)


# MARK: Fixed orders
class TraversalOrder(enum.StrEnum):
    ALPHABETIC = "alphabetic"
    BY_LENGTH_DESCENDING = "length"
    BY_POPULARITY_DESCENDING = "popularity"

    @property
    def strategy(self) -> OrderingStrategy[Any]:
        return STRATEGIES[self]


STRATEGIES: dict[TraversalOrder, OrderingStrategy[Any]] = {
    TraversalOrder.ALPHABETIC: ALPHABETIC,
    TraversalOrder.BY_LENGTH_DESCENDING: BY_LENGTH_DESCENDING,
    TraversalOrder.BY_POPULARITY_DESCENDING: BY_POPULARITY_DESCENDING,
}
