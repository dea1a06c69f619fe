# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import logging

import pytest

from pydantic import BaseModel, ValidationError

from multiview.collections import TraversableCollection
from multiview.models import Record, Song


class Playlist(BaseModel):
    name: str
    songs: TraversableCollection[Song]


class Records(BaseModel):
    records: TraversableCollection


@pytest.mark.traversable
@pytest.mark.collection
class TestPydanticIntegration:
    def test_coerces_iterable(self, songs, caplog):
        with caplog.at_level(logging.DEBUG):
            playlist = Playlist(name="favourites", songs=list(songs))

        assert "Coercing 4 records into a new TraversableCollection" in caplog.text

        assert isinstance(playlist.songs, TraversableCollection)
        assert len(playlist.songs) == len(songs)
        assert all(playlist.songs.element_at(i) is song for i, song in enumerate(songs))

    def test_keeps_collection_instance(self, playlist):
        model = Playlist(name="favourites", songs=playlist)
        assert model.songs is playlist

    def test_rejects_wrong_item_type(self):
        with pytest.raises(ValidationError, match="Expected item of type Song, got Record"):
            Playlist(name="favourites", songs=[Record(key_text="a", key_len=1, key_score=1)])

    @pytest.mark.parametrize("value", ["abc", 5, {"title": "Imagine"}])
    def test_rejects_non_iterables(self, value):
        with pytest.raises(ValidationError, match="Expected an iterable of records"):
            Playlist(name="favourites", songs=value)

    def test_unparameterised_accepts_any_record(self, songs):
        model = Records(records=[*songs, Record(key_text="a", key_len=1, key_score=1)])
        assert len(model.records) == len(songs) + 1

    def test_unparameterised_rejects_non_records(self):
        with pytest.raises(ValidationError, match="Expected item of type RecordProtocol"):
            Records(records=[1, 2])
