import json

import pytest
import requests

from playlist_client import ApiEndpoint, PlaylistAPI


class TestClientSession:
    """Minimal ``requests.Session`` stand‑in that forwards to a TestClient."""

    __test__ = False

    def __init__(self, client):
        self.client = client
        self.calls = []

    def request(self, method, url, params=None, json=None, timeout=None):
        self.calls.append((method, url, params))
        resp = self.client.request(method, url, params=params, json=json)
        converted = requests.Response()
        converted.status_code = resp.status_code
        converted._content = resp.content
        converted.headers.update(resp.headers)
        converted.url = str(resp.url)
        converted.reason = resp.reason_phrase
        return converted


class BrokenSession:
    def request(self, method, url, **kwargs):
        raise requests.ConnectionError("connection refused")


@pytest.fixture
def api(client):
    return PlaylistAPI(base_url="http://testserver/", session=TestClientSession(client))


def test_default_endpoints_are_used_without_openapi(api):
    assert ("PUT", "/songs/{id}") in [(ep.method, ep.path) for ep in api.endpoints]
    assert api.base_url == "http://testserver"


def test_ping(api):
    assert api.ping() == ("Playlist API is running!", None)


def test_list_and_search(api):
    songs, error = api.list_songs()
    assert error is None
    assert len(songs) == 5

    found, error = api.search_songs("ahe")
    assert error is None
    assert [s["id"] for s in found] == [1, 4]
    assert api.session.calls[-1] == ("GET", "http://testserver/songs/search", {"q": "ahe"})


def test_create_update_delete(api, store):
    song, error = api.create_song({"title": "X", "artist": "Y"})
    assert error is None
    assert song == {"id": 6, "title": "X", "artist": "Y"}

    song, error = api.update_song(6, {"duration": "1:00"})
    assert error is None
    assert song["duration"] == "1:00"

    ok, error = api.delete_song(6)
    assert (ok, error) == (True, None)
    assert store.get_song(6) is None


def test_missing_song_reports_plain_text_error(api):
    song, error = api.update_song(999, {"title": "ghost"})
    assert song is None
    assert error == {"status_code": 404, "message": "Song not found"}

    ok, error = api.delete_song(999)
    assert ok is False
    assert error["status_code"] == 404


def test_validation_error_message_comes_from_detail(api):
    song, error = api.create_song(["not", "an", "object"])
    assert song is None
    assert error["status_code"] == 422
    assert error["message"]


def test_connection_errors_are_returned_not_raised():
    api = PlaylistAPI(base_url="http://localhost:1", session=BrokenSession())
    songs, error = api.list_songs()
    assert songs == []
    assert error == {"status_code": None, "message": "connection refused"}


def test_endpoints_are_discovered_from_openapi(app, client, tmp_path):
    spec_file = tmp_path / "openapi.json"
    spec_file.write_text(json.dumps(app.openapi()), encoding="utf-8")

    api = PlaylistAPI(
        base_url="http://testserver",
        openapi_path=str(spec_file),
        session=TestClientSession(client),
    )
    discovered = {(ep.method, ep.path) for ep in api.endpoints}
    assert ("DELETE", "/songs/{song_id}") in discovered
    assert ("DELETE", "/songs/{id}") not in discovered

    song, error = api.update_song(2, {"title": "Renamed"})
    assert error is None
    assert song["title"] == "Renamed"


def test_unreadable_openapi_falls_back_to_defaults(tmp_path):
    spec_file = tmp_path / "openapi.json"
    spec_file.write_text("{broken", encoding="utf-8")
    api = PlaylistAPI(base_url="http://x", openapi_path=str(spec_file), session=BrokenSession())
    assert len(api.endpoints) == 5


def test_endpoint_helpers():
    ep = ApiEndpoint(path="/songs/{song_id}", method="PUT")
    assert ep.has_id
    assert not ep.is_search
    assert ep.format(3) == "/songs/3"
    assert ApiEndpoint(path="/songs/search", method="GET").is_search
