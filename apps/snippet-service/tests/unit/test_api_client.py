from unittest.mock import Mock

import pytest
import requests

from snipvault.client.api_client import ClientConfig, SnippetApiClient
from snipvault.errors import Forbidden, InternalError, NotFound, Unauthorized, ValidationError


SNIPPET = {
    "id": 7,
    "heading": "Fib",
    "code": "def fib(n): ...",
    "language": "python",
    "owner_id": 1,
    "tags": [{"id": 1, "name": "math"}],
    "created_at": "2026-01-01T00:00:00Z",
    "updated_at": "2026-01-01T00:00:00Z",
}


def _response(status_code=200, payload=None):
    resp = Mock()
    resp.status_code = status_code
    resp.ok = status_code < 400
    resp.json.return_value = payload
    return resp


def _client(response):
    session = Mock()
    session.headers = {}
    session.request.return_value = response
    config = ClientConfig(base_url="http://api.test/", user="alice", email="alice@example.com", timeout=3)
    return SnippetApiClient(config, session=session), session


def test_identity_headers_are_attached():
    client, session = _client(_response(200, []))
    assert session.headers["X-Auth-Request-Email"] == "alice@example.com"
    assert session.headers["X-Auth-Request-User"] == "alice"
    assert client.base_url == "http://api.test"


def test_list_snippets_parses_payload():
    client, session = _client(_response(200, [SNIPPET]))
    snippets = client.list_snippets()
    assert snippets[0].heading == "Fib"
    assert snippets[0].tags[0].name == "math"
    session.request.assert_called_once_with("GET", "http://api.test/api/dashboard", json=None, timeout=3)


def test_update_sends_only_changes():
    client, session = _client(_response(200, {**SNIPPET, "heading": "Fibonacci"}))
    updated = client.update_snippet(7, heading="Fibonacci")
    assert updated.heading == "Fibonacci"
    session.request.assert_called_once_with("PUT", "http://api.test/api/new/7", json={"heading": "Fibonacci"}, timeout=3)


def test_create_posts_full_payload():
    client, session = _client(_response(201, SNIPPET))
    client.create_snippet("Fib", "def fib(n): ...", "python", ["math"])
    _, kwargs = session.request.call_args
    assert kwargs["json"] == {"heading": "Fib", "code": "def fib(n): ...", "language": "python", "tags": ["math"]}


def test_delete_returns_message():
    client, _ = _client(_response(200, {"message": "Snippet deleted successfully"}))
    assert client.delete_snippet(7) == "Snippet deleted successfully"


@pytest.mark.parametrize(
    "status_code,error_cls",
    [(401, Unauthorized), (403, Forbidden), (404, NotFound), (400, ValidationError), (500, InternalError)],
)
def test_error_status_raises_taxonomy_error(status_code, error_cls):
    client, _ = _client(_response(status_code, {"detail": "server says no"}))
    with pytest.raises(error_cls) as exc_info:
        client.get_snippet(7)
    assert exc_info.value.message == "server says no"


def test_error_without_json_body_uses_default_message():
    resp = _response(404)
    resp.json.side_effect = ValueError("not json")
    client, _ = _client(resp)
    with pytest.raises(NotFound) as exc_info:
        client.delete_snippet(1)
    assert exc_info.value.message == "Snippet not found"


def test_transport_failure_is_internal_error():
    client, session = _client(_response(200, []))
    session.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(InternalError):
        client.list_snippets()


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("SNIPVAULT_API_URL", "http://snips:9000")
    monkeypatch.setenv("SNIPVAULT_EMAIL", "env@example.com")
    monkeypatch.setenv("SNIPVAULT_TIMEOUT", "not-a-number")
    monkeypatch.delenv("SNIPVAULT_USER", raising=False)
    config = ClientConfig.from_env()
    assert config.base_url == "http://snips:9000"
    assert config.timeout == 10.0
    assert config.identity_headers() == {"X-Auth-Request-Email": "env@example.com"}
