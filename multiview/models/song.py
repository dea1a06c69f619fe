# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from pydantic import BaseModel, ConfigDict, Field


class Song(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    # MARK: Fields
    title: str = Field(description="Song title.")
    artist: str = Field(description="Performing artist.")
    length: int = Field(ge=0, description="Length of the song, in seconds.")
    popularity: int = Field(description="Popularity score, higher is more popular.")

    # MARK: Ordering keys
    @property
    def key_text(self) -> str:
        return self.title

    @property
    def key_len(self) -> int:
        return self.length

    @property
    def key_score(self) -> int:
        return self.popularity

    @property
    def duration(self) -> str:
        """Length formatted as ``m:ss``."""
        minutes, seconds = divmod(self.length, 60)
        return f"{minutes}:{seconds:02d}"
