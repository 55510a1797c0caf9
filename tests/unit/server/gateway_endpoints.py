"""Endpoint tests for the HTTP routes and the /ws session protocol."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlsplit

from fastapi.testclient import TestClient

from gateway.config import ASSET_MAX_BYTES
from gateway.server import create_app
from gateway.storage import LocalAssetStore
from tests.helpers.images import GIF_BYTES, PNG_BYTES
from tests.helpers.fake_storage import FakeAssetStore
from tests.helpers.fake_provider import FakeProvider


def _client(provider: FakeProvider | None = None, store: FakeAssetStore | None = None) -> TestClient:
    return TestClient(create_app(provider=provider or FakeProvider(), asset_store=store or FakeAssetStore()))


# --- HTTP ---


def test_root_and_healthz() -> None:
    with _client() as client:
        assert client.get("/").json() == {"status": "ok"}
        body = client.get("/healthz").json()
        assert body["status"] == "ok"
        assert body["sessions"]["active"] == 0


def test_upload_stores_valid_image() -> None:
    store = FakeAssetStore()
    with _client(store=store) as client:
        response = client.post("/upload", files={"image": ("cat.png", PNG_BYTES, "image/png")})

    assert response.status_code == 200
    url = response.json()["url"]
    assert store.saved[url] == (PNG_BYTES, "image/png")


def test_upload_rejects_oversize_image() -> None:
    store = FakeAssetStore()
    big = PNG_BYTES + b"\x00" * ASSET_MAX_BYTES
    with _client(store=store) as client:
        response = client.post("/upload", files={"image": ("big.png", big, "image/png")})

    assert response.status_code == 400
    assert response.json()["error_code"] == "bad_request"
    assert store.saved == {}


def test_upload_rejects_disallowed_type() -> None:
    with _client() as client:
        response = client.post("/upload", files={"image": ("anim.gif", GIF_BYTES, "image/gif")})

    assert response.status_code == 415
    assert response.json()["error_code"] == "unsupported_media_type"


def test_upload_requires_image_field() -> None:
    with _client() as client:
        response = client.post("/upload", files={"file": ("cat.png", PNG_BYTES, "image/png")})

    assert response.status_code == 400
    assert response.json()["message"] == "Image is required"


def test_uploaded_asset_is_served_from_static_mount(tmp_path: Path) -> None:
    store = LocalAssetStore(tmp_path, base_url="http://testserver", route="/assets")
    app = create_app(provider=FakeProvider(), asset_store=store)
    with TestClient(app) as client:
        url = client.post("/upload", files={"image": ("cat.png", PNG_BYTES, "image/png")}).json()["url"]
        served = client.get(urlsplit(url).path)

    assert served.status_code == 200
    assert served.content == PNG_BYTES


# --- WebSocket ---


def test_ws_connect_ping_and_send_text() -> None:
    with _client() as client, client.websocket_connect("/ws") as ws:
        connected = ws.receive_json()
        assert connected["type"] == "connected"
        assert connected["connection_id"]

        ws.send_json({"type": "ping"})
        assert ws.receive_json() == {"type": "pong"}

        ws.send_json({"type": "send-text", "prompt": "hello", "request_id": "r1"})
        response = ws.receive_json()
        assert response["type"] == "message-response"
        assert response["request_id"] == "r1"
        assert response["assistant_entry"]["content"]["text"] == "reply to hello"

        ws.send_json({"type": "fetch-messages"})
        history = ws.receive_json()
        assert history["type"] == "chat-history"
        assert len(history["history"]) == 2


def test_ws_invalid_frames_get_bad_request() -> None:
    with _client() as client, client.websocket_connect("/ws") as ws:
        ws.receive_json()

        ws.send_text("not json")
        error = ws.receive_json()
        assert error["type"] == "error"
        assert error["error_code"] == "bad_request"

        ws.send_json({"type": "dance", "request_id": "r9"})
        error = ws.receive_json()
        assert error["error_code"] == "bad_request"
        assert error["request_id"] == "r9"

        ws.send_bytes(b'{"type": "fetch-history"}')
        error = ws.receive_json()
        assert error["type"] == "error"
        assert error["error_code"] == "bad_request"
        assert error["message"] == "Binary frames are not supported"

        ws.send_json({"type": "ping"})
        assert ws.receive_json()["type"] == "pong"


def test_ws_validation_error_frame() -> None:
    with _client() as client, client.websocket_connect("/ws") as ws:
        ws.receive_json()

        ws.send_json({"type": "send-text", "prompt": "x" * 151})
        error = ws.receive_json()

        assert error == {
            "type": "error",
            "error_code": "bad_request",
            "status": 400,
            "message": "Prompt is too large",
            "request_id": error["request_id"],
        }


def test_ws_end_sentinel_disconnects_and_unregisters() -> None:
    app = create_app(provider=FakeProvider(), asset_store=FakeAssetStore())
    with TestClient(app) as client:
        with client.websocket_connect("/ws") as ws:
            ws.receive_json()
            assert app.state.gateway.registry.get_capacity_info()["active"] == 1
            ws.send_text("__END__")
            assert ws.receive_json()["type"] == "disconnected"
            assert ws.receive()["type"] == "websocket.close"

        assert client.get("/healthz").json()["sessions"]["active"] == 0


def test_ws_shutdown_closes_provider() -> None:
    provider = FakeProvider()
    with _client(provider=provider):
        pass
    assert provider.shutdown_called
