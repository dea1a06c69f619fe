# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import pytest

from pydantic import ValidationError

from multiview.collections.traversable.protocols import HasLengthKey, HasScoreKey, HasTextKey, RecordProtocol
from multiview.models import Record, Song


@pytest.mark.models
class TestRecord:
    def test_fields(self):
        record = Record(key_text="Imagined", key_len=183, key_score=1200)

        assert record.key_text == "Imagined"
        assert record.key_len == 183
        assert record.key_score == 1200
        assert isinstance(record, RecordProtocol)

    def test_frozen(self):
        record = Record(key_text="a", key_len=1, key_score=1)
        with pytest.raises(ValidationError, match="frozen"):
            record.key_len = 2  # type: ignore[misc]

    def test_extra_forbidden(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            Record(key_text="a", key_len=1, key_score=1, colour="red")  # type: ignore[call-arg]

    def test_missing_field(self):
        with pytest.raises(ValidationError, match="key_score"):
            Record(key_text="a", key_len=1)  # type: ignore[call-arg]

    def test_value_equality(self):
        a = Record(key_text="a", key_len=1, key_score=1)
        b = Record(key_text="a", key_len=1, key_score=1)

        assert a == b
        assert a is not b
        assert hash(a) == hash(b)


@pytest.mark.models
class TestSong:
    def test_keys(self, songs):
        song = songs[0]

        assert song.key_text == song.title == "Bohemian Rhapsody"
        assert song.key_len == song.length == 354
        assert song.key_score == song.popularity == 1000
        assert isinstance(song, RecordProtocol)

    def test_duration(self):
        assert Song(title="Imagine", artist="John Lennon", length=183, popularity=1200).duration == "3:03"
        assert Song(title="Silence", artist="Nobody", length=0, popularity=0).duration == "0:00"

    def test_negative_length(self):
        with pytest.raises(ValidationError, match="greater than or equal to 0"):
            Song(title="Backwards", artist="Nobody", length=-1, popularity=0)

    def test_partial_capabilities(self):
        class TextOnly:
            key_text = "only"

        assert isinstance(TextOnly(), HasTextKey)
        assert not isinstance(TextOnly(), HasLengthKey)
        assert not isinstance(TextOnly(), HasScoreKey)
        assert not isinstance(TextOnly(), RecordProtocol)
