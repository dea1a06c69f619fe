# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Snapshot cursors over a :class:`TraversableCollection`.

A :class:`Traversal` freezes a permutation of the collection's positions when it is created, and walks it with the
``reset`` / ``has_more`` / ``current`` / ``advance`` contract::

    with collection.create_traversal(TraversalOrder.ALPHABETIC) as traversal:
        traversal.reset()
        while traversal.has_more():
            print(traversal.current().key_text)
            traversal.advance()

Records added to the collection afterwards are never visited by an existing traversal (it becomes *stale*).
Leaving the ``with`` block releases the traversal; after release every walk operation raises
:class:`TraversalReleasedError`.

Iterating a traversal runs the same loop on its single cursor: every ``iter(traversal)`` restarts it, so nested or
interleaved ``for`` loops over one traversal interfere with each other. Independent walks need separate traversals.
"""

from __future__ import annotations

import weakref

from typing import TYPE_CHECKING, Any, Self, override

from ...util.helpers import before_attribute_check
from ...util.mixins import LoggableNamedMixin
from .errors import OutOfRangeError, TraversalReleasedError


if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from types import TracebackType

    from ...util.logging import Logger
    from .collection import TraversableCollection
    from .order import OrderingStrategy
    from .protocols import RecordProtocol


released_check = before_attribute_check(attribute="released", desired=False, message="Traversal has been released", exception=TraversalReleasedError)
exhausted_check = before_attribute_check(attribute="exhausted", desired=False, message="Traversal has reached the end", exception=OutOfRangeError)


def _warn_unreleased(log: Logger, description: str) -> None:
    log.warning("%s was garbage collected without being released", description)


class Traversal[T: RecordProtocol](LoggableNamedMixin):
    def __init__(
        self,
        collection: TraversableCollection[T],
        permutation: Sequence[int],
        *,
        order: OrderingStrategy[Any],
        warn_unreleased: bool = True,
    ) -> None:
        self._collection: TraversableCollection[T] | None = collection
        self._permutation: tuple[int, ...] = tuple(permutation)
        self._order = order
        self._cursor = 0
        self._released = False

        super().__init__(instance_name=order.name)

        # Only warns if the traversal dies while still unreleased; release() detaches it
        self._finalizer: weakref.finalize | None = None
        if warn_unreleased:
            self._finalizer = weakref.finalize(self, _warn_unreleased, self.log, repr(self))
            self._finalizer.atexit = False

        self.log.debug("Created traversal over %d records", len(self._permutation))

    # MARK: Properties
    @property
    def instance_parent(self) -> TraversableCollection[T] | None:
        return self._collection

    @property
    def order(self) -> OrderingStrategy[Any]:
        return self._order

    @property
    def position(self) -> int:
        return self._cursor

    @property
    def released(self) -> bool:
        return self._released

    @property
    def exhausted(self) -> bool:
        return self._cursor >= len(self._permutation)

    @property
    @released_check
    def stale(self) -> bool:
        """Whether the collection has grown since this traversal was created."""
        assert self._collection is not None
        return len(self._collection) > len(self._permutation)

    # MARK: Walk
    @released_check
    def reset(self) -> None:
        self._cursor = 0
        if self.stale:
            self.log.debug("Reset stale traversal, records added after its creation will not be visited")

    @released_check
    def has_more(self) -> bool:
        return not self.exhausted

    @released_check
    def advance(self) -> None:
        if self.exhausted:
            return
        self._cursor += 1
        if self.exhausted:
            self.log.debug("Traversal exhausted")

    @released_check
    @exhausted_check
    def current(self) -> T:
        assert self._collection is not None
        return self._collection.element_at(self._permutation[self._cursor])

    @released_check
    def __iter__(self) -> Iterator[T]:
        return self._walk()

    def _walk(self) -> Iterator[T]:
        self.reset()
        while self.has_more():
            yield self.current()
            self.advance()

    def __len__(self) -> int:
        return len(self._permutation)

    def __bool__(self) -> bool:
        """Always true, even for an empty or released traversal, which have no length."""
        return True

    # MARK: Release
    def release(self) -> None:
        if self._released:
            return

        self._released = True
        if self._finalizer is not None:
            self._finalizer.detach()

        self._collection = None
        self._permutation = ()
        self._cursor = 0

        self.log.debug("Released")

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_value: BaseException | None, traceback: TracebackType | None) -> None:
        self.release()

    # MARK: Printing
    @override
    def __repr__(self) -> str:
        state = "released" if self._released else f"{self._cursor}/{len(self._permutation)}"
        return f"<{type(self).__name__} {self._order.name} {state}>"
