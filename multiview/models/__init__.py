# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from .record import Record
from .song import Song


__all__ = [
    "Record",
    "Song",
]
