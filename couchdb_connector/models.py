from __future__ import annotations

"""Request and result value types shared by every connector module.

- ``DatabaseProperties`` addresses one database on one CouchDB server
- ``BasicAuth`` carries credentials applied as an HTTP basic auth header
- ``Result`` is the tagged outcome of a single request
"""

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr

Stale = Literal["ok", "update_after"]

Headers = list[tuple[str, str]]


class DatabaseProperties(BaseModel):
    """Connection descriptor for a database hosted on a CouchDB server."""

    model_config = ConfigDict(frozen=True)

    protocol: str = "http"
    hostname: str = "localhost"
    port: int = 5984
    database: str


class BasicAuth(BaseModel):
    """Username/password pair sent in the ``Authorization`` header."""

    model_config = ConfigDict(frozen=True)

    user: str
    password: SecretStr

    def as_tuple(self) -> tuple[str, str]:
        """Return the ``(user, password)`` pair expected by ``httpx``."""

        return self.user, self.password.get_secret_value()


class ViewKey(BaseModel):
    """Design document, view and key addressing a single view query."""

    model_config = ConfigDict(frozen=True)

    design: str
    view: str
    key: str


class Result(BaseModel):
    """Outcome of one request: success or error, with the raw response body.

    ``headers`` is only populated by operations that classify with headers
    (create/update); it then holds the response headers exactly as received.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    body: str
    status_code: int
    headers: Headers | None = Field(default=None)

    def json_body(self) -> Any:
        """Decode the response body."""

        return json.loads(self.body)

    @property
    def error(self) -> str | None:
        """CouchDB's ``error`` token for failed requests (``not_found``, ``conflict``...)."""

        if self.ok:
            return None
        try:
            payload = self.json_body()
        except ValueError:
            return None
        if isinstance(payload, dict):
            value = payload.get("error")
            return str(value) if value is not None else None
        return None
