# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from typing import Protocol, runtime_checkable


# MARK: Record capabilities
@runtime_checkable
class HasTextKey(Protocol):
    @property
    def key_text(self) -> str: ...


@runtime_checkable
class HasLengthKey(Protocol):
    @property
    def key_len(self) -> int: ...


@runtime_checkable
class HasScoreKey(Protocol):
    @property
    def key_score(self) -> int: ...


@runtime_checkable
class RecordProtocol(HasTextKey, HasLengthKey, HasScoreKey, Protocol):
    """Anything that can be stored in a :class:`TraversableCollection`.

    Each ordering only needs its own capability, but a collection requires all three so that any of its
    traversal orders can be requested.
    """


# MARK: Positional access
class PositionalAccessProtocol[T](Protocol):
    """Read-only positional view over a backing store, as used to compute and walk permutations."""

    def __len__(self) -> int: ...
    def element_at(self, position: int) -> T: ...
