from __future__ import annotations

"""Read documents, attachments and generated uuids from CouchDB.

Example::

    db_props = DatabaseProperties(database="couchdb_connector_test")

    reader.get(db_props, "_not_there_")
    # Result(ok=False, body='{"error":"not_found","reason":"missing"}\\n', ...)

    reader.fetch_uuid(db_props)
    # Result(ok=True, body='{"uuids":["1a013a4ce3..."]}\\n', ...)
"""

from . import response_handler, url_helper
from .models import BasicAuth, DatabaseProperties, Result
from .transport import Transport, resolve


def get(
    db_props: DatabaseProperties,
    doc_id: str,
    auth: BasicAuth | None = None,
    *,
    transport: Transport | None = None,
) -> Result:
    """Retrieve the document stored under ``doc_id``."""

    url = url_helper.document_url(db_props, doc_id)
    return response_handler.handle_get(resolve(transport).get(url, auth))


def get_attachment(
    db_props: DatabaseProperties,
    doc_id: str,
    name: str,
    rev: str | None = None,
    auth: BasicAuth | None = None,
    *,
    transport: Transport | None = None,
) -> Result:
    """Retrieve attachment ``name`` of document ``doc_id``.

    ``rev`` is accepted so callers can pass the revision they hold, but CouchDB
    serves the attachment of the current revision and the URL never carries it.
    """

    url = url_helper.attachment_fetch_url(db_props, doc_id, name)
    return response_handler.handle_get(resolve(transport).get(url, auth))


def has_attachment(
    db_props: DatabaseProperties,
    doc_id: str,
    name: str,
    rev: str | None = None,
    auth: BasicAuth | None = None,
    *,
    transport: Transport | None = None,
) -> bool:
    result = get_attachment(db_props, doc_id, name, rev, auth, transport=transport)
    return response_handler.attachment_exists(result)


def fetch_uuid(
    db_props: DatabaseProperties,
    count: int = 1,
    *,
    transport: Transport | None = None,
) -> Result:
    """Fetch server-generated uuids. CouchDB serves these without authentication."""

    url = url_helper.uuid_url(db_props, count)
    return response_handler.handle_get(resolve(transport).get(url))
