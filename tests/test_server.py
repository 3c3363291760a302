from __future__ import annotations

import asyncio
import io
import socket

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from imagen.main import app
from imagen.server import _serve_all, build_servers, parse_address, split_listen


@pytest.fixture
def client():
    return TestClient(app)


def _decode(response) -> Image.Image:
    return Image.open(io.BytesIO(response.content))


class TestImageEndpoint:
    def test_png_request(self, client) -> None:
        response = client.get('/400x300/c:blue/t:"hi"/f:png/b:5,ffffff')
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        image = _decode(response)
        assert image.size == (400, 300)
        assert image.convert("RGB").getpixel((0, 0)) == (255, 255, 255)
        assert image.convert("RGB").getpixel((20, 20)) == (0, 0, 255)

    def test_jpeg_request(self, client) -> None:
        response = client.get("/64x48/g:red,blue:90/f:jpg")
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/jpeg"
        assert _decode(response).format == "JPEG"

    def test_default_image(self, client) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert _decode(response).size == (256, 192)

    def test_quoted_text_with_comma(self, client) -> None:
        response = client.get('/200x100/t:"hello, world",s:26,c:yellow')
        assert response.status_code == 200

    @pytest.mark.parametrize("path", ["/400x300/x:1", "/400", "/g:red", "/c:bluish"])
    def test_parse_errors_are_client_errors(self, client, path: str) -> None:
        response = client.get(path)
        assert response.status_code == 400
        assert response.json()["detail"].startswith("Invalid URL")

    def test_unsupported_format_is_server_error(self, client) -> None:
        response = client.get("/10x10/f:webp")
        assert response.status_code == 500
        assert "unsupported format" in response.json()["detail"]

    def test_healthz(self, client) -> None:
        assert client.get("/healthz").json() == {"status": "ok"}


class TestListenAddresses:
    @pytest.mark.parametrize(
        "address, expected",
        [
            (":3000", ("0.0.0.0", 3000)),
            ("192.168.1.20:5555", ("192.168.1.20", 5555)),
            ("[::1]:4567", ("::1", 4567)),
            (" localhost:80 ", ("localhost", 80)),
        ],
    )
    def test_parse_address(self, address: str, expected) -> None:
        assert parse_address(address) == expected

    @pytest.mark.parametrize("address", ["3000", "host:", "host:http"])
    def test_bad_address(self, address: str) -> None:
        with pytest.raises(ValueError):
            parse_address(address)

    def test_split_listen(self) -> None:
        assert split_listen(":3000, :8080,") == [":3000", ":8080"]

    def test_one_server_per_address(self) -> None:
        servers = build_servers([":3000", "127.0.0.1:8080"])
        assert [(s.config.host, s.config.port) for s in servers] == [("0.0.0.0", 3000), ("127.0.0.1", 8080)]

    def test_default_address(self) -> None:
        (server,) = build_servers([])
        assert server.config.port == 3000


class _Listener:
    """Stand-in for uvicorn.Server: fails with *error* or runs until cancelled."""

    def __init__(self, error: BaseException | None = None):
        self.error = error

    async def serve(self) -> None:
        if self.error is not None:
            raise self.error
        await asyncio.Event().wait()


class TestServeAll:
    def test_first_failure_propagates(self) -> None:
        listeners = [_Listener(), _Listener(RuntimeError("bind failed"))]
        with pytest.raises(RuntimeError, match="bind failed"):
            asyncio.run(_serve_all(listeners))

    def test_port_in_use_stops_serving(self) -> None:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as taken:
            taken.bind(("127.0.0.1", 0))
            taken.listen()
            port = taken.getsockname()[1]
            with pytest.raises(SystemExit):
                asyncio.run(_serve_all(build_servers([f"127.0.0.1:{port}"], "critical")))
