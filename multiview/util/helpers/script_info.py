# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import functools
import os


# Values of UNIT_TEST that do not enable unit test mode
_DISABLED = frozenset(("", "0", "false", "no", "off"))


@functools.cache
def is_unit_test() -> bool:
    """Test whether running in a unit test environment.

    True under pytest (which exports ``PYTEST_VERSION``), or when ``UNIT_TEST`` is set to anything other than an
    empty or false-like value.
    """
    if "PYTEST_VERSION" in os.environ:
        return True
    return os.environ.get("UNIT_TEST", "").strip().lower() not in _DISABLED
