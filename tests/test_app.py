from fastapi.testclient import TestClient


def test_root_is_plain_liveness_text(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "GrooveLog API is running" in response.text


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_unknown_route_uses_error_body(client: TestClient) -> None:
    response = client.get("/nope")
    assert response.status_code == 404
    assert isinstance(response.json()["error"], str)


# Missing required fields are a 400 with the same {"error": ...} shape, not FastAPI's 422
def test_validation_error_is_400_with_error_body(client: TestClient) -> None:
    response = client.post("/songs", json={"artist": "Nobody"})
    assert response.status_code == 400
    assert set(response.json()) == {"error"}


def test_setup_logging_adds_one_handler() -> None:
    import logging
    from app.core.logging import setup_logging

    root = logging.getLogger()
    before = len(root.handlers)
    setup_logging()
    setup_logging()
    assert len(root.handlers) == before
