from __future__ import annotations

import httpx
import pytest

from couchdb_connector import reader

from support import BASE, DB, make_response


def test_get_returns_document(db_props, transport, http_client):
    body = '{"_id":"foo","_rev":"1-a","key":"value"}\n'
    http_client.get.return_value = make_response(200, body)

    result = reader.get(db_props, "foo", transport=transport)

    assert result.ok
    assert result.body == body
    assert result.headers is None
    http_client.get.assert_called_once_with(f"{DB}/foo")


def test_get_missing_document_is_error(db_props, transport, http_client):
    http_client.get.return_value = make_response(404, '{"error":"not_found","reason":"missing"}')

    result = reader.get(db_props, "_not_there_", transport=transport)

    assert not result.ok
    assert result.error == "not_found"


def test_get_with_auth_sends_credentials_outside_url(db_props, test_user, transport, http_client):
    http_client.get.return_value = make_response(200, "{}")

    reader.get(db_props, "foo", test_user, transport=transport)

    args, kwargs = http_client.get.call_args
    assert args == (f"{DB}/foo",)
    assert isinstance(kwargs["auth"], httpx.BasicAuth)


def test_get_propagates_transport_errors(db_props, transport, http_client):
    http_client.get.side_effect = httpx.ConnectError("connection refused")

    with pytest.raises(httpx.ConnectError):
        reader.get(db_props, "foo", transport=transport)


def test_get_attachment_does_not_send_rev(db_props, transport, http_client):
    http_client.get.return_value = make_response(200, "attachment body")

    result = reader.get_attachment(db_props, "foo", "file.txt", "1-a", transport=transport)

    assert result.ok
    assert result.body == "attachment body"
    http_client.get.assert_called_once_with(f"{DB}/foo/file.txt")


def test_has_attachment_true_when_found(db_props, transport, http_client):
    http_client.get.return_value = make_response(200, "data")

    assert reader.has_attachment(db_props, "foo", "file.txt", "1-a", transport=transport) is True


def test_has_attachment_false_when_missing(db_props, transport, http_client):
    http_client.get.return_value = make_response(404, '{"error":"not_found"}')

    assert reader.has_attachment(db_props, "foo", "nope.txt", "1-a", transport=transport) is False


def test_fetch_uuid_is_unauthenticated(db_props, transport, http_client):
    http_client.get.return_value = make_response(200, '{"uuids":["1a013a4ce3"]}\n')

    result = reader.fetch_uuid(db_props, transport=transport)

    assert result.json_body() == {"uuids": ["1a013a4ce3"]}
    http_client.get.assert_called_once_with(f"{BASE}/_uuids?count=1")


def test_fetch_uuid_with_count(db_props, transport, http_client):
    http_client.get.return_value = make_response(200, '{"uuids":["a","b","c"]}')

    reader.fetch_uuid(db_props, 3, transport=transport)

    http_client.get.assert_called_once_with(f"{BASE}/_uuids?count=3")


def test_operations_fall_back_to_default_transport(db_props, http_client, monkeypatch):
    from couchdb_connector import transport as transport_module

    monkeypatch.setattr(transport_module.httpx, "Client", lambda timeout=30.0: http_client)
    http_client.get.return_value = make_response(200, "{}")

    reader.get(db_props, "foo")
    reader.get(db_props, "bar")

    assert http_client.get.call_count == 2
