# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro


class TraversalError(Exception):
    pass


class OutOfRangeError(TraversalError, IndexError):
    """Raised when reading the current element of an exhausted traversal."""


class TraversalReleasedError(TraversalError, RuntimeError):
    """Raised when walking a traversal after it has been released."""
