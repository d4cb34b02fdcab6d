from __future__ import annotations

"""URL composition for CouchDB server, database and document resources.

Every function here is pure string composition. Nothing is validated or
escaped except the view query key, so ids, names and usernames must already
be URL-safe. Credentials never appear in these URLs; operations pass them to
the transport, which sends them as a basic auth header.
"""

from typing import get_args
from urllib.parse import quote_plus

from .models import DatabaseProperties, Stale


def server_url(db_props: DatabaseProperties) -> str:
    """URL of the CouchDB server itself."""

    return f"{db_props.protocol}://{db_props.hostname}:{db_props.port}"


def database_url(db_props: DatabaseProperties) -> str:
    return f"{server_url(db_props)}/{db_props.database}"


def document_url(db_props: DatabaseProperties, doc_id: str) -> str:
    return f"{database_url(db_props)}/{doc_id}"


def attachment_url(
    db_props: DatabaseProperties,
    doc_id: str,
    name: str,
    rev: str | None = None,
) -> str:
    """URL of a document attachment, pinned to ``rev`` when one is given.

    Writes must name the document revision they apply to; reads must not.
    """

    url = f"{document_url(db_props, doc_id)}/{name}"
    if rev is None:
        return url
    return f"{url}?rev={rev}"


def attachment_fetch_url(db_props: DatabaseProperties, doc_id: str, name: str) -> str:
    return attachment_url(db_props, doc_id, name)


def attachment_insert_url(
    db_props: DatabaseProperties, doc_id: str, name: str, rev: str
) -> str:
    return attachment_url(db_props, doc_id, name, rev)


def uuid_url(db_props: DatabaseProperties, count: int = 1) -> str:
    """URL returning ``count`` server-generated uuids."""

    return f"{server_url(db_props)}/_uuids?count={count}"


def design_url(db_props: DatabaseProperties, design: str) -> str:
    return f"{database_url(db_props)}/_design/{design}"


def view_url(db_props: DatabaseProperties, design: str, view: str) -> str:
    return f"{design_url(db_props, design)}/_view/{view}"


def query_path(view_base_url: str, key: str, stale: Stale) -> str:
    """Append a JSON string ``key`` and a staleness option to a view URL.

    The key is wrapped in double quotes and form-encoded as a whole, so
    ``café`` becomes ``key=%22caf%C3%A9%22``.
    """

    if stale not in get_args(Stale):
        raise ValueError(f"Unsupported stale option: {stale!r}")
    encoded_key = quote_plus('"' + key + '"')
    return f"{view_base_url}?key={encoded_key}&stale={stale}"


def user_url(db_props: DatabaseProperties, username: str) -> str:
    return f"{server_url(db_props)}/_users/org.couchdb.user:{username}"


def admin_url(db_props: DatabaseProperties, username: str) -> str:
    return f"{server_url(db_props)}/_config/admins/{username}"


def security_url(db_props: DatabaseProperties) -> str:
    """URL of the database's security object (admin credentials required)."""

    return f"{database_url(db_props)}/_security"
