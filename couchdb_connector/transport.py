from __future__ import annotations

"""HTTP transport shared by the reader, writer and admin modules."""

from functools import lru_cache
import logging

import httpx

from .config import get_settings
from .models import BasicAuth

logger = logging.getLogger(__name__)

JSON_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


class Transport:
    """Thin wrapper around a pooled ``httpx.Client`` for CouchDB requests.

    Transport faults (refused connections, timeouts, DNS failures) are raised
    as ``httpx.TransportError`` and never turned into results here.
    """

    def __init__(self, timeout: float = 30.0, client: httpx.Client | None = None) -> None:
        """Initialize a persistent HTTP client unless one is supplied."""

        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""

        self._client.close()

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get(self, url: str, auth: BasicAuth | None = None) -> httpx.Response:
        response = self._client.get(url, **_auth_kwargs(auth))
        _log_exchange("GET", url, response)
        return response

    def put(
        self,
        url: str,
        body: str,
        headers: dict[str, str] | None = None,
        auth: BasicAuth | None = None,
    ) -> httpx.Response:
        response = self._client.put(
            url,
            content=body.encode("utf-8"),
            headers=JSON_HEADERS if headers is None else headers,
            **_auth_kwargs(auth),
        )
        _log_exchange("PUT", url, response)
        return response

    def delete(self, url: str, auth: BasicAuth | None = None) -> httpx.Response:
        response = self._client.delete(url, **_auth_kwargs(auth))
        _log_exchange("DELETE", url, response)
        return response


def _auth_kwargs(auth: BasicAuth | None) -> dict[str, httpx.BasicAuth]:
    """Translate optional credentials into ``httpx`` request kwargs."""

    if auth is None:
        return {}
    user, password = auth.as_tuple()
    return {"auth": httpx.BasicAuth(user, password)}


def _log_exchange(method: str, url: str, response: httpx.Response) -> None:
    # URLs are credential-free, so they are safe to log as-is.
    logger.debug("%s %s -> %s", method, url, response.status_code)


@lru_cache(maxsize=1)
def default_transport() -> Transport:
    """Return the process-wide transport, sized from settings."""

    return Transport(timeout=get_settings().couchdb_timeout_seconds)


def resolve(transport: Transport | None) -> Transport:
    """Use the caller's transport when given, else the shared default."""

    return transport if transport is not None else default_transport()
