from __future__ import annotations

"""Helpers shared by the connector tests."""

import httpx

BASE = "http://localhost:5984"
DB = f"{BASE}/couchdb_connector_test"


def make_response(
    status_code: int = 200,
    body: str = "{}",
    headers: list[tuple[str, str]] | None = None,
) -> httpx.Response:
    """Build a canned CouchDB reply."""

    return httpx.Response(status_code, headers=headers or [], text=body)


def header_value(headers: list[tuple[str, str]], key: str) -> str | None:
    return dict(headers).get(key)


def retry_on_error(fn, attempts: int = 3):
    """Re-run ``fn`` when the connection drops; flaky CI networking only."""

    for _ in range(attempts - 1):
        try:
            return fn()
        except httpx.TransportError:
            continue
    return fn()
