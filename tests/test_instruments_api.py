"""API tests for /instruments"""

from fastapi.testclient import TestClient

from app.db.models.song import SongInstrument


def _song_with_guitar(client, catalog):
    song = client.post(
        "/songs",
        json={"title": "Hysteria", "artist": "Muse", "instrumentIds": [catalog["Guitar"].id]},
    ).json()
    return song["instruments"][0]


def test_list_catalog(client: TestClient, catalog) -> None:
    response = client.get("/instruments")
    assert response.status_code == 200
    assert [i["name"] for i in response.json()] == ["Guitar", "Bass", "Drums"]
    assert all(set(i) == {"id", "name"} for i in response.json())


def test_list_catalog_empty(client: TestClient) -> None:
    response = client.get("/instruments")
    assert response.status_code == 200
    assert response.json() == []


def test_update_progress(client: TestClient, db_session, demo_user, catalog) -> None:
    row = _song_with_guitar(client, catalog)

    response = client.patch(f"/instruments/{row['id']}", json={"progress": 65})
    assert response.status_code == 200
    body = response.json()
    assert body["progress"] == 65
    assert body["song_id"] == row["song_id"]
    assert body["instrument"]["name"] == "Guitar"

    db_session.expire_all()
    assert db_session.get(SongInstrument, row["id"]).progress == 65


# Progress is stored as sent: no clamping to 0-100
def test_update_progress_out_of_range_is_stored_unchanged(client: TestClient, demo_user, catalog) -> None:
    row = _song_with_guitar(client, catalog)

    assert client.patch(f"/instruments/{row['id']}", json={"progress": 150}).json()["progress"] == 150
    assert client.patch(f"/instruments/{row['id']}", json={"progress": -5}).json()["progress"] == -5

    listed = client.get("/songs").json()[0]["instruments"][0]
    assert listed["progress"] == -5


def test_update_progress_coerces_numeric_string(client: TestClient, demo_user, catalog) -> None:
    row = _song_with_guitar(client, catalog)
    response = client.patch(f"/instruments/{row['id']}", json={"progress": "40"})
    assert response.status_code == 200
    assert response.json()["progress"] == 40


def test_update_progress_rejects_non_numeric(client: TestClient, demo_user, catalog) -> None:
    row = _song_with_guitar(client, catalog)
    response = client.patch(f"/instruments/{row['id']}", json={"progress": "lots"})
    assert response.status_code == 400


def test_update_progress_missing_row_is_404(client: TestClient) -> None:
    response = client.patch("/instruments/7", json={"progress": 10})
    assert response.status_code == 404
    assert isinstance(response.json()["error"], str)


# SQLite cannot store integers this large; the route keeps its own message
def test_update_progress_too_large_for_column_is_500(client: TestClient, db_session, demo_user, catalog) -> None:
    row = _song_with_guitar(client, catalog)

    response = client.patch(f"/instruments/{row['id']}", json={"progress": 2**70})
    assert response.status_code == 500
    assert response.json() == {"error": "無法更新練習進度"}

    db_session.expire_all()
    assert db_session.get(SongInstrument, row["id"]).progress == 0
