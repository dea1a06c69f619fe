# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import pytest

from multiview.collections import TraversableCollection
from multiview.collections.traversable.config import CollectionConfig
from multiview.models import Record, Song


SONGS: tuple[Song, ...] = (
    Song(title="Bohemian Rhapsody", artist="Queen", length=354, popularity=1000),
    Song(title="Stairway to Heaven", artist="Led Zeppelin", length=482, popularity=800),
    Song(title="Imagine", artist="John Lennon", length=183, popularity=1200),
    Song(title="Hey Jude", artist="The Beatles", length=431, popularity=900),
)


@pytest.fixture
def songs() -> tuple[Song, ...]:
    return SONGS


@pytest.fixture
def playlist(songs) -> TraversableCollection[Song]:
    return TraversableCollection(songs, config=CollectionConfig(), instance_name="playlist")


@pytest.fixture
def records() -> TraversableCollection[Record]:
    return TraversableCollection(
        [
            Record(key_text="b", key_len=2, key_score=10),
            Record(key_text="a", key_len=2, key_score=30),
            Record(key_text="c", key_len=5, key_score=10),
        ],
        config=CollectionConfig(),
    )


@pytest.fixture
def scenario() -> TraversableCollection[Record]:
    return TraversableCollection(
        [
            Record(key_text="Bohemian", key_len=354, key_score=1000),
            Record(key_text="Stairway", key_len=482, key_score=800),
            Record(key_text="Imagined", key_len=183, key_score=1200),
            Record(key_text="Hey Jude", key_len=431, key_score=900),
        ],
        config=CollectionConfig(),
        instance_name="scenario",
    )
