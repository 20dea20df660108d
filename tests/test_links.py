"""Tests for LinkSet parsing and the fetcher's replace-not-merge link updates."""

from __future__ import annotations

import pytest

from libsync.kitsu import LibraryRequest
from libsync.pagination import LinkSet, PaginatedFetcher

_FULL = LinkSet(first="abc", next="def", previous="ghi", last="jkl")


class TestHasAnyLinks:
    def test_empty(self) -> None:
        assert LinkSet().has_any_links() is False

    @pytest.mark.parametrize("field", ["first", "next", "previous", "last"])
    def test_any_single_link(self, field: str) -> None:
        assert LinkSet(**{field: "https://kitsu.io/x"}).has_any_links() is True


class TestFromEnvelope:
    def test_partial_links(self) -> None:
        links = LinkSet.from_envelope({"links": {"first": "abc", "last": "def"}})

        assert links.has_any_links() is True
        assert links.first == "abc"
        assert links.next is None
        assert links.previous is None
        assert links.last == "def"

    def test_prev_wire_key_maps_to_previous(self) -> None:
        links = LinkSet.from_envelope({"links": {"prev": "p", "previous": "ignored"}})
        assert links.previous == "p"

    def test_links_not_an_object(self) -> None:
        assert LinkSet.from_envelope({"links": "abc"}) == LinkSet()

    def test_no_links_key(self) -> None:
        assert LinkSet.from_envelope({"data": []}) == LinkSet()

    def test_envelope_not_an_object(self) -> None:
        assert LinkSet.from_envelope("abc") == LinkSet()

    def test_non_string_values_are_ignored(self) -> None:
        links = LinkSet.from_envelope({"links": {"first": 1, "next": None, "last": "z"}})
        assert links == LinkSet(last="z")


class TestUpdateLinks:
    @pytest.fixture
    def fetcher(self):
        fetcher = PaginatedFetcher(LibraryRequest(user_id=1), executor=None, on_page=lambda i, e: None)
        fetcher.links = _FULL
        yield fetcher
        fetcher.close()

    def test_sets_links_from_json(self, fetcher) -> None:
        fetcher.update_links({"links": {"first": "abc", "last": "def"}})
        assert fetcher.links == LinkSet(first="abc", last="def")

    def test_no_links_resets_everything(self, fetcher) -> None:
        fetcher.update_links({"data": "abc"})
        assert fetcher.links.has_any_links() is False
        assert fetcher.links == LinkSet()

    def test_links_not_a_dict_resets_everything(self, fetcher) -> None:
        fetcher.update_links({"links": "abc"})
        assert fetcher.links == LinkSet()

    def test_replaces_rather_than_merges(self, fetcher) -> None:
        fetcher.update_links({"links": {"next": "new"}})
        assert fetcher.links == LinkSet(next="new")
