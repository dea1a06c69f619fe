# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """The minimal storable value: one text key and two numeric keys.

    Records are immutable and compare by value. Equal records are still distinct entries once added to a
    collection.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    key_text: str = Field(description="Text key, used for alphabetic ordering.")
    key_len: int = Field(description="Length key, used for descending length ordering.")
    key_score: int = Field(description="Score key, used for descending popularity ordering.")
