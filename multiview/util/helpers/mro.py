# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterable


def ensure_mro_order(final: type | object, target: type, *, before: type | Iterable[type] = ()) -> None:
    """Ensure that ``target`` precedes every class in ``before`` within the MRO of ``final``.

    Classes in ``before`` that are not part of the MRO are ignored.

    Raises:
        TypeError: If any of the classes in ``before`` comes first.

    """
    if not isinstance(final, type):
        final = type(final)
    if isinstance(before, type):
        before = (before,)

    mro = final.__mro__
    index = mro.index(target)

    for other in before:
        if other in mro and mro.index(other) < index:
            msg = f"'{target.__name__}' must come *before* '{other.__name__}' in the '{final.__name__}' MRO"
            raise TypeError(msg)
