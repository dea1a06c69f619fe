# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from __future__ import annotations

import functools
import typing
import weakref

from collections.abc import Collection, Iterable, Iterator, Mapping
from typing import Any, Self, override

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from ...util.mixins import LoggableNamedMixin
from .config import CollectionConfig
from .order import OrderingStrategy, TraversalOrder
from .protocols import RecordProtocol
from .traversal import Traversal


class TraversableCollection[T: RecordProtocol](LoggableNamedMixin, Collection[T]):
    """Append-only store of records that can be walked in several independent orders.

    Records are kept in insertion order, and are never moved or removed. Orders are never baked into the
    collection: each call to :meth:`create_traversal` sorts a fresh permutation of the current positions, and hands
    ownership of the resulting :class:`Traversal` to the caller.

    Args:
        data: Optional records to seed the collection with, added in order.
        config: Collection behaviour. Defaults to the ``collection`` section of the loaded configuration, or to the
            default :class:`CollectionConfig` when no configuration was loaded.
        instance_name: Optional name, used for logging.

    """

    def __init__(self, data: Iterable[T] | None = None, /, *, config: CollectionConfig | None = None, instance_name: str | None = None) -> None:
        super().__init__(instance_name=instance_name)

        self._records: list[T] = []
        self._traversals: weakref.WeakSet[Traversal[T]] = weakref.WeakSet()
        self._config = config

        if data is not None:
            for record in data:
                self.add(record)

    # MARK: Configuration
    @property
    def config(self) -> CollectionConfig:
        if self._config is not None:
            return self._config

        from ...config import CFG

        return CFG.collection if CFG.loaded else CollectionConfig()

    # MARK: Storage
    def add(self, record: T) -> None:
        if not isinstance(record, RecordProtocol):
            msg = f"Expected a record exposing 'key_text', 'key_len' and 'key_score', got {type(record).__name__}."
            raise TypeError(msg)

        self._records.append(record)
        self.log.debug("Added record %r at position %d", record, len(self._records) - 1)

    def element_at(self, position: int) -> T:
        if not 0 <= position < len(self._records):
            msg = f"Position {position} out of bounds for {self} with {len(self._records)} records."
            raise IndexError(msg)
        return self._records[position]

    # MARK: Traversals
    def create_traversal(self, order: TraversalOrder | OrderingStrategy[Any] | str | None = None) -> Traversal[T]:
        """Create a new traversal over the records currently in the collection.

        The caller owns the returned traversal and is responsible for releasing it, preferably by using it as a
        context manager.

        Args:
            order: The order to traverse in. Defaults to the configured ``default_order``.

        Returns:
            Traversal: A traversal positioned on its first record.

        """
        config = self.config
        strategy = OrderingStrategy.coerce(config.default_order if order is None else order)

        traversal = Traversal(self, strategy.permute(self), order=strategy, warn_unreleased=config.warn_unreleased)
        self._traversals.add(traversal)
        return traversal

    def create_alphabetic_traversal(self) -> Traversal[T]:
        return self.create_traversal(TraversalOrder.ALPHABETIC)

    def create_length_traversal(self) -> Traversal[T]:
        return self.create_traversal(TraversalOrder.BY_LENGTH_DESCENDING)

    def create_popularity_traversal(self) -> Traversal[T]:
        return self.create_traversal(TraversalOrder.BY_POPULARITY_DESCENDING)

    @property
    def live_traversals(self) -> int:
        """Number of traversals created from this collection that are still alive and not yet released."""
        return sum(1 for traversal in self._traversals if not traversal.released)

    # MARK: Collection ABC
    @override
    def __contains__(self, value: object) -> bool:
        return value in self._records

    @override
    def __iter__(self) -> Iterator[T]:
        with self.create_traversal() as traversal:
            yield from traversal

    @override
    def __len__(self) -> int:
        return len(self._records)

    @override
    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.final_instance_name}: {len(self._records)} records>"

    # MARK: Pydantic
    @classmethod
    def __get_pydantic_core_schema__(cls, source: type[Any], handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(function=functools.partial(cls.validate_and_coerce, source=source))

    @classmethod
    def validate_and_coerce(cls, value: Any, *, source: Any = None) -> Self:
        if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
            msg = f"Expected an iterable of records, got {type(value).__name__}."
            raise ValueError(msg)

        items = list(value._records) if isinstance(value, TraversableCollection) else list(value)

        args = typing.get_args(source)
        content_type = args[0] if args and isinstance(args[0], type) else RecordProtocol
        for item in items:
            if not isinstance(item, content_type):
                msg = f"Expected item of type {content_type.__name__}, got {type(item).__name__}."
                raise ValueError(msg)

        if isinstance(value, cls):
            return value

        cls.class_log().debug("Coercing %d records into a new %s", len(items), cls.__name__)
        return cls(items)
