"""
Tests for the contents router — full stack through FastAPI's TestClient.
"""

from __future__ import annotations

import json

import pytest

PREFIX = "/api/v1/contents"

BODY = {
    "title": "Sample Content 1",
    "sub_title": "Sub",
    "description": "Desc",
    "image_url": "img",
    "duration": 60,
    "start_time": "2024-01-01T12:00:00Z",
    "end_time": "2024-01-01T13:00:00Z",
    "genre_list": ["Genre1", "Genre2"],
}


@pytest.fixture()
def created(client):
    resp = client.post(PREFIX, json=BODY)
    assert resp.status_code == 200
    return resp.json()


class TestListContents:
    def test_empty_catalog_404(self, client):
        resp = client.get(PREFIX)
        assert resp.status_code == 404
        assert resp.json()["title"] == "No contents found"

    def test_seeded_catalog(self, seeded_client):
        resp = seeded_client.get(PREFIX)
        assert resp.status_code == 200
        titles = sorted(c["title"] for c in resp.json())
        assert titles == ["Sample Content 1", "Sample Content 2"]


class TestSearchContents:
    def test_title_and_genre(self, seeded_client):
        resp = seeded_client.get(f"{PREFIX}/search", params={"title": "Sample Content 1", "genre": "Genre1"})
        assert resp.status_code == 200
        body = resp.json()
        assert len(body) == 1
        assert body[0]["title"] == "Sample Content 1"

    def test_no_match_is_200_empty(self, seeded_client):
        resp = seeded_client.get(f"{PREFIX}/search", params={"genre": "Nope"})
        assert resp.status_code == 200
        assert resp.json() == []

    def test_no_params_returns_all(self, seeded_client):
        assert len(seeded_client.get(f"{PREFIX}/search").json()) == 2


class TestCrud:
    def test_create_returns_record(self, created):
        assert created["id"]
        assert created["title"] == "Sample Content 1"
        assert created["genre_list"] == ["Genre1", "Genre2"]
        assert created["duration"] == 60

    def test_create_defaults(self, client):
        resp = client.post(PREFIX, json={})
        assert resp.status_code == 200
        body = resp.json()
        assert body["title"] is None
        assert body["duration"] == 0
        assert body["genre_list"] == []

    def test_create_negative_duration_rejected(self, client):
        resp = client.post(PREFIX, json={"duration": -1})
        assert resp.status_code == 422
        body = resp.json()
        assert body["title"] == "Request validation failed"
        assert body["errors"][0]["code"] == "VALIDATION_FAILED"
        assert body["errors"][0]["field"] == "body.duration"

    def test_get(self, client, created):
        resp = client.get(f"{PREFIX}/{created['id']}")
        assert resp.status_code == 200
        assert resp.json() == created

    def test_get_unknown(self, client):
        resp = client.get(f"{PREFIX}/missing")
        assert resp.status_code == 404
        body = resp.json()
        assert body["status"] == 404
        assert "missing" in body["title"]

    def test_update_replaces(self, client, created):
        resp = client.patch(f"{PREFIX}/{created['id']}", json={"title": "Renamed"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["id"] == created["id"]
        assert body["title"] == "Renamed"
        assert body["genre_list"] == []
        assert client.get(f"{PREFIX}/{created['id']}").json() == body

    def test_update_unknown(self, client):
        assert client.patch(f"{PREFIX}/missing", json={"title": "x"}).status_code == 404

    def test_delete(self, client, created):
        resp = client.delete(f"{PREFIX}/{created['id']}")
        assert resp.status_code == 200
        assert resp.json() == created["id"]
        assert client.get(f"{PREFIX}/{created['id']}").status_code == 404

    def test_delete_unknown(self, client):
        assert client.delete(f"{PREFIX}/missing").status_code == 404


class TestGenres:
    def test_add(self, client, created):
        resp = client.post(f"{PREFIX}/{created['id']}/genre", json=["Genre3"])
        assert resp.status_code == 200
        assert resp.json()["genre_list"] == ["Genre1", "Genre2", "Genre3"]

    def test_add_repeated_tag_once_with_warning_header(self, client, created):
        resp = client.post(f"{PREFIX}/{created['id']}/genre", json=["Genre3", "genre3"])
        assert resp.status_code == 200
        assert resp.json()["genre_list"] == ["Genre1", "Genre2", "Genre3"]
        assert json.loads(resp.headers["X-Genre-Warnings"]) == [
            "Genre 'genre3' repeated in request; added once"
        ]

    def test_add_without_repeats_has_no_warning_header(self, client, created):
        resp = client.post(f"{PREFIX}/{created['id']}/genre", json=["Genre3"])
        assert "X-Genre-Warnings" not in resp.headers

    def test_add_requires_list_body(self, client, created):
        resp = client.post(f"{PREFIX}/{created['id']}/genre", json={"genre": "Genre3"})
        assert resp.status_code == 422
        assert resp.json()["errors"][0]["code"] == "VALIDATION_FAILED"

    def test_add_duplicate_400(self, client, created):
        resp = client.post(f"{PREFIX}/{created['id']}/genre", json=["Genre1", "Genre3"])
        assert resp.status_code == 400
        body = resp.json()
        assert body["title"] == "Genres: ['Genre1'] already exist"
        assert body["errors"] == [
            {"code": "DUPLICATE_GENRE", "message": "Genre 'Genre1' already exists", "field": "genres"}
        ]
        assert client.get(f"{PREFIX}/{created['id']}").json()["genre_list"] == ["Genre1", "Genre2"]

    def test_add_unknown(self, client):
        assert client.post(f"{PREFIX}/missing/genre", json=["Genre1"]).status_code == 404

    def test_remove(self, client, created):
        resp = client.request("DELETE", f"{PREFIX}/{created['id']}/genre", json=["genre1"])
        assert resp.status_code == 200
        assert resp.json()["genre_list"] == ["Genre2"]

    def test_remove_nothing_400(self, client, created):
        resp = client.request("DELETE", f"{PREFIX}/{created['id']}/genre", json=["Genre9"])
        assert resp.status_code == 400
        assert resp.json()["title"] == "No genres to remove."

    def test_remove_unknown(self, client):
        resp = client.request("DELETE", f"{PREFIX}/missing/genre", json=["Genre1"])
        assert resp.status_code == 404

    def test_scenario(self, client):
        content_id = client.post(
            PREFIX, json={"title": "Sample Content 1", "genre_list": ["Genre1", "Genre2"]}
        ).json()["id"]
        url = f"{PREFIX}/{content_id}/genre"

        assert client.post(url, json=["Genre1", "Genre3"]).status_code == 400
        assert client.post(url, json=["Genre3"]).json()["genre_list"] == ["Genre1", "Genre2", "Genre3"]
        removed = client.request("DELETE", url, json=["genre1"])
        assert removed.json()["genre_list"] == ["Genre2", "Genre3"]
