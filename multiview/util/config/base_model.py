# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from ..logging import Logger, getLogger


if TYPE_CHECKING:
    import rich.repr


class BaseConfigModel(BaseModel):
    """Base class for all configuration sections: immutable, and rejecting unknown keys."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    @property
    def log(self) -> Logger:
        return getLogger(self)

    def __rich_repr__(self) -> rich.repr.Result:
        for attr, info in type(self).model_fields.items():
            if info.repr is False:
                continue
            yield attr, getattr(self, attr, None)
