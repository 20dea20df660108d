"""Tests for the httpx-backed request executor and the JSON:API parser.

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made.
"""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from libsync.kitsu import HttpxExecutor, Resource, ResourceParser
from libsync.pagination import PageRequest, TransportError

BASE = "https://kitsu.test/api/edge"


# ---------------------------------------------------------------------------
# HttpxExecutor
# ---------------------------------------------------------------------------

class TestHttpxExecutor:
    def test_relative_url_joined_to_base(self) -> None:
        executor = HttpxExecutor(base_url=BASE + "/", access_token="")
        assert executor.url_for(PageRequest("/anime")) == f"{BASE}/anime"
        assert executor.url_for(PageRequest("anime")) == f"{BASE}/anime"

    def test_absolute_url_kept(self) -> None:
        executor = HttpxExecutor(base_url=BASE, access_token="")
        link = "https://other.test/anime?page%5Boffset%5D=20"
        assert executor.url_for(PageRequest(link)) == link

    def test_returns_body_and_sends_params(self) -> None:
        executor = HttpxExecutor(base_url=BASE, access_token="")
        with respx.mock:
            route = respx.get(url__startswith=f"{BASE}/library-entries").mock(
                return_value=httpx.Response(200, json={"data": []})
            )
            body = executor.execute(
                PageRequest("/library-entries", params=(("page[limit]", "5"),))
            )

        assert json.loads(body) == {"data": []}
        sent = route.calls.last.request
        assert sent.url.params["page[limit]"] == "5"
        assert sent.headers["Accept"] == "application/vnd.api+json"
        assert "Authorization" not in sent.headers

    def test_sends_bearer_token(self) -> None:
        executor = HttpxExecutor(base_url=BASE, access_token="s3cret")
        with respx.mock:
            route = respx.get(f"{BASE}/anime").mock(
                return_value=httpx.Response(200, json={})
            )
            executor.execute(PageRequest("/anime"))

        assert route.calls.last.request.headers["Authorization"] == "Bearer s3cret"

    def test_token_defaults_to_settings(self, monkeypatch) -> None:
        monkeypatch.setattr("libsync.kitsu.client.settings.kitsu_access_token", "from-env")
        assert HttpxExecutor(base_url=BASE).headers["Authorization"] == "Bearer from-env"

    def test_empty_body_is_none(self) -> None:
        executor = HttpxExecutor(base_url=BASE, access_token="")
        with respx.mock:
            respx.get(f"{BASE}/anime").mock(return_value=httpx.Response(204))
            assert executor.execute(PageRequest("/anime")) is None

    def test_http_error_raises_transport_error(self) -> None:
        executor = HttpxExecutor(base_url=BASE, access_token="")
        with respx.mock:
            respx.get(f"{BASE}/anime").mock(return_value=httpx.Response(503))
            with pytest.raises(TransportError, match="503") as info:
                executor.execute(PageRequest("/anime"))

        assert isinstance(info.value.__cause__, httpx.HTTPStatusError)

    def test_connection_error_raises_transport_error(self) -> None:
        executor = HttpxExecutor(base_url=BASE, access_token="")
        with respx.mock:
            respx.get(f"{BASE}/anime").mock(side_effect=httpx.ConnectError("refused"))
            with pytest.raises(TransportError) as info:
                executor.execute(PageRequest("/anime"))

        assert isinstance(info.value.__cause__, httpx.ConnectError)


# ---------------------------------------------------------------------------
# ResourceParser
# ---------------------------------------------------------------------------

_LIBRARY_DOC = {
    "data": [
        {
            "id": "10",
            "type": "libraryEntries",
            "attributes": {"status": "current", "progress": 3},
            "relationships": {
                "anime": {"data": {"type": "anime", "id": "1"}},
                "user": {"links": {"related": "https://kitsu.io/users/1"}},
                "reactions": {"data": [{"type": "reactions", "id": "7"}]},
            },
        },
        {"type": "libraryEntries", "attributes": {}},
    ],
    "included": [
        {"id": "1", "type": "anime", "attributes": {"canonicalTitle": "Cowboy Bebop"}},
    ],
}


class TestResourceParser:
    def test_parses_data_list(self) -> None:
        entries = ResourceParser().parse(_LIBRARY_DOC)

        assert len(entries) == 1
        entry = entries[0]
        assert entry.id == "10"
        assert entry.type == "libraryEntries"
        assert entry.attributes["progress"] == 3

    def test_resolves_included(self) -> None:
        entry = ResourceParser().parse(_LIBRARY_DOC)[0]
        anime = entry.related["anime"]
        assert isinstance(anime, Resource)
        assert anime.title == "Cowboy Bebop"

    def test_unresolved_identifier_is_stub(self) -> None:
        entry = ResourceParser().parse(_LIBRARY_DOC)[0]
        assert entry.related["reactions"] == [Resource(id="7", type="reactions")]

    def test_links_only_relationship_is_skipped(self) -> None:
        entry = ResourceParser().parse(_LIBRARY_DOC)[0]
        assert "user" not in entry.related

    def test_single_resource_document(self) -> None:
        doc = {"data": {"id": 5, "type": "manga", "attributes": {"slug": "berserk"}}}
        (manga,) = ResourceParser().parse(doc)
        assert manga.id == "5"
        assert manga.title == "berserk"

    def test_missing_data(self) -> None:
        assert ResourceParser().parse({"links": {}}) == []

    def test_title_fallback(self) -> None:
        assert Resource(id="3", type="anime").title == "anime/3"
        assert Resource(id="3", type="anime", attributes={"titles": {"en_jp": "Shingeki"}}).title == "Shingeki"
