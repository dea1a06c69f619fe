# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

import pytest

from multiview.collections import TraversableCollection, TraversalOrder
from multiview.collections.traversable.config import CollectionConfig
from multiview.models import Record


@pytest.mark.traversable
@pytest.mark.collection
class TestTraversableCollection:
    def test_empty(self):
        collection = TraversableCollection()

        assert len(collection) == 0
        assert list(collection) == []
        assert collection.live_traversals == 0

    def test_add_appends(self, songs):
        collection = TraversableCollection(config=CollectionConfig())
        for i, song in enumerate(songs):
            collection.add(song)
            assert len(collection) == i + 1
            assert collection.element_at(i) is song

        assert all(song in collection for song in songs)

    def test_seeded_equals_added(self, songs, playlist):
        collection = TraversableCollection(config=CollectionConfig())
        for song in songs:
            collection.add(song)

        assert [collection.element_at(i) for i in range(len(collection))] == [playlist.element_at(i) for i in range(len(playlist))]

    def test_duplicates_are_distinct_entries(self):
        record = Record(key_text="same", key_len=1, key_score=1)
        collection = TraversableCollection([record, record, Record(key_text="same", key_len=1, key_score=1)])

        assert len(collection) == 3
        with collection.create_traversal() as traversal:
            assert len(list(traversal)) == 3

    @pytest.mark.parametrize("value", [None, "text", 5, {"key_text": "a", "key_len": 1, "key_score": 1}])
    def test_add_rejects_non_records(self, value):
        collection = TraversableCollection()
        with pytest.raises(TypeError, match="Expected a record"):
            collection.add(value)
        assert len(collection) == 0

    def test_add_accepts_duck_typed_records(self):
        class Plain:
            key_text = "plain"
            key_len = 3
            key_score = 7

        collection = TraversableCollection()
        record = Plain()
        collection.add(record)

        assert collection.element_at(0) is record

    @pytest.mark.parametrize("position", [-1, 4, 100])
    def test_element_at_out_of_bounds(self, playlist, position):
        with pytest.raises(IndexError, match=f"Position {position} out of bounds"):
            playlist.element_at(position)

    def test_insertion_order_is_not_exposed(self, scenario):
        # Iteration uses the default order, not insertion order
        assert [record.key_text for record in scenario] == ["Bohemian", "Hey Jude", "Imagined", "Stairway"]

    def test_iteration_uses_configured_default(self, scenario):
        collection = TraversableCollection(
            (scenario.element_at(i) for i in range(len(scenario))),
            config=CollectionConfig(default_order=TraversalOrder.BY_LENGTH_DESCENDING),
        )
        assert [record.key_len for record in collection] == [482, 431, 354, 183]

    def test_iteration_releases_traversal(self, playlist):
        iterator = iter(playlist)
        next(iterator)
        assert playlist.live_traversals == 1

        iterator.close()
        assert playlist.live_traversals == 0

        list(playlist)
        assert playlist.live_traversals == 0

    def test_falls_back_to_loaded_config(self, config, songs):
        config.create({"collection": {"default_order": "popularity"}})

        collection = TraversableCollection(songs)
        assert collection.config.default_order is TraversalOrder.BY_POPULARITY_DESCENDING
        assert [song.popularity for song in collection] == [1200, 1000, 900, 800]

    def test_explicit_config_wins(self, config, songs):
        config.create({"collection": {"default_order": "popularity"}})

        collection = TraversableCollection(songs, config=CollectionConfig(default_order=TraversalOrder.BY_LENGTH_DESCENDING))
        assert [song.length for song in collection] == [482, 431, 354, 183]

    def test_defaults_without_loaded_config(self, config, songs):
        config.reset()

        collection = TraversableCollection(songs)
        assert collection.config == CollectionConfig()
        assert [song.title for song in collection][0] == "Bohemian Rhapsody"


@pytest.mark.traversable
@pytest.mark.collection
class TestCreateTraversal:
    @pytest.mark.parametrize(
        ("order", "expected"),
        [
            (TraversalOrder.ALPHABETIC, ["Bohemian", "Hey Jude", "Imagined", "Stairway"]),
            (TraversalOrder.BY_LENGTH_DESCENDING, ["Stairway", "Hey Jude", "Bohemian", "Imagined"]),
            (TraversalOrder.BY_POPULARITY_DESCENDING, ["Imagined", "Bohemian", "Hey Jude", "Stairway"]),
            ("alphabetic", ["Bohemian", "Hey Jude", "Imagined", "Stairway"]),
            ("LENGTH", ["Stairway", "Hey Jude", "Bohemian", "Imagined"]),
            ("popularity", ["Imagined", "Bohemian", "Hey Jude", "Stairway"]),
        ],
    )
    def test_orders(self, scenario, order, expected):
        with scenario.create_traversal(order) as traversal:
            assert [record.key_text for record in traversal] == expected

    def test_shortcuts(self, scenario):
        with scenario.create_alphabetic_traversal() as traversal:
            assert traversal.order is TraversalOrder.ALPHABETIC.strategy
        with scenario.create_length_traversal() as traversal:
            assert traversal.order is TraversalOrder.BY_LENGTH_DESCENDING.strategy
        with scenario.create_popularity_traversal() as traversal:
            assert traversal.order is TraversalOrder.BY_POPULARITY_DESCENDING.strategy

    def test_unknown_order(self, scenario):
        with pytest.raises(ValueError, match="Unknown traversal order 'shuffled'"):
            scenario.create_traversal("shuffled")
        assert scenario.live_traversals == 0

    def test_empty_collection(self):
        collection = TraversableCollection()
        with collection.create_traversal() as traversal:
            assert len(traversal) == 0
            assert not traversal.has_more()

    def test_live_traversals(self, playlist):
        first = playlist.create_traversal()
        second = playlist.create_length_traversal()
        assert playlist.live_traversals == 2

        first.release()
        assert playlist.live_traversals == 1

        with playlist.create_popularity_traversal():
            assert playlist.live_traversals == 2

        second.release()
        assert playlist.live_traversals == 0

    def test_repr(self, playlist):
        assert repr(playlist) == "<TraversableCollection playlist: 4 records>"
        assert str(playlist) == "playlist"
        assert repr(TraversableCollection()) == "<TraversableCollection TraversableCollection: 0 records>"
