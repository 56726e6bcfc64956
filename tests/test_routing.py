"""
Tests for the Starlette integration: endpoints, modules and BufferedTransport.
"""
import pytest
from starlette.applications import Starlette
from starlette.testclient import TestClient

from responsewriter import (
    BufferedTransport,
    ConfigurationError,
    JSONType,
    PlainTextType,
    RequestContext,
    ResponseModule,
    create_app,
)


class NotFound(Exception):
    def get_code(self) -> int:
        return 404


def get_item(request: RequestContext):
    if request.param("item_id") == "missing":
        return NotFound("no such item")
    return {"id": request.param("item_id")}


def echo(request: RequestContext):
    return request.json()


@pytest.fixture
def client(json_type: JSONType, text_type: PlainTextType) -> TestClient:
    items = (
        ResponseModule("items")
        .route("echo", echo, json_type, methods=["POST"])
        .route("empty", lambda request: b"", json_type)
        .route("nothing", lambda request: None, json_type)
        .route("{item_id}", get_item, json_type, text_type)
    )
    return TestClient(create_app(items))


class TestEndpoints:
    """Requests through a Starlette app."""

    def test_json_by_default(self, client: TestClient) -> None:
        response = client.get("/items/5")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {"id": "5"}

    def test_negotiated_plain_text(self, client: TestClient) -> None:
        response = client.get("/items/5", headers={"Accept": "text/plain"})
        assert response.status_code == 200
        assert response.headers["content-type"] == "text/plain; charset=utf-8"
        assert response.text == "id: 5"

    def test_coded_error(self, client: TestClient) -> None:
        response = client.get("/items/missing")
        assert response.status_code == 404
        assert response.json() == {"code": 404, "description": "Internal Server Error"}

    def test_request_body_reaches_callback(self, client: TestClient) -> None:
        response = client.post("/items/echo", json={"name": "x"})
        assert response.status_code == 200
        assert response.json() == {"name": "x"}

    def test_empty_body(self, client: TestClient) -> None:
        response = client.get("/items/empty")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.content == b""

    def test_no_content(self, client: TestClient) -> None:
        response = client.get("/items/nothing")
        assert response.status_code == 204
        assert "content-type" not in response.headers


class TestResponseModule:
    """Tests for route collection."""

    def test_prefix_and_paths(self, json_type: JSONType) -> None:
        module = ResponseModule("orders", prefix="/api/orders/").route("list", lambda r: [], json_type)
        assert [route.path for route in module.routes()] == ["/api/orders/list"]

    def test_register_into_existing_app(self, json_type: JSONType) -> None:
        app = Starlette()
        ResponseModule("ping").route("/", lambda r: "pong", json_type).register_into(app)
        assert TestClient(app).get("/ping/").text == "pong"

    def test_bad_response_type_fails_at_setup(self) -> None:
        with pytest.raises(ConfigurationError):
            ResponseModule("broken").route("x", lambda r: None, None)


class TestBufferedTransport:
    """Tests for the in-memory transport."""

    def test_to_response(self) -> None:
        transport = BufferedTransport()
        transport.set_header("Content-Type", "application/json")
        transport.write_status(201)
        assert transport.write(b"{}") == 2
        response = transport.to_response()
        assert response.status_code == 201
        assert response.body == b"{}"
        assert response.headers["content-type"] == "application/json"

    def test_single_status_line(self) -> None:
        transport = BufferedTransport()
        transport.write_status(204)
        with pytest.raises(RuntimeError):
            transport.write_status(200)
        with pytest.raises(RuntimeError):
            transport.set_header("X", "y")

    def test_write_sends_implicit_ok(self) -> None:
        transport = BufferedTransport()
        transport.write(b"a")
        transport.write(b"b")
        assert transport.status_code == 200
        assert transport.body == b"ab"
