from __future__ import annotations

"""Create, update and delete CouchDB documents and attachments.

Create and update return results carrying the response headers, so callers
can read the new revision from ``ETag`` or the document ``Location``.
"""

import json
from typing import Any
import warnings

from . import reader, response_handler, url_helper
from .errors import MissingDocumentIdError, UuidFetchError
from .models import BasicAuth, DatabaseProperties, Result
from .transport import Transport, resolve


def couchdb_safe(json_text: str) -> str:
    """Drop a top-level ``_id`` so it cannot contradict the id in the URL.

    Applying it to an already stripped document returns equivalent JSON.
    """

    doc = json.loads(json_text)
    if isinstance(doc, dict):
        doc.pop("_id", None)
    return json.dumps(doc)


def _parse_and_extract_id(json_text: str) -> tuple[Any, str]:
    doc = json.loads(json_text)
    doc_id = doc.get("_id") if isinstance(doc, dict) else None
    if not isinstance(doc_id, str) or not doc_id:
        raise MissingDocumentIdError()
    return doc, doc_id


def _put(
    url: str,
    body: str,
    auth: BasicAuth | None,
    transport: Transport | None,
) -> Result:
    response = resolve(transport).put(url, body, auth=auth)
    return response_handler.handle_put(response, include_headers=True)


def create(
    db_props: DatabaseProperties,
    json_text: str,
    doc_id: str | None = None,
    auth: BasicAuth | None = None,
    *,
    transport: Transport | None = None,
) -> Result:
    """Create a new document from ``json_text`` under ``doc_id``.

    Callers must make sure the id is not taken; use ``create_generate`` when
    uniqueness cannot be guaranteed. Omitting ``doc_id`` is deprecated and
    behaves like ``create_generate``.
    """

    if doc_id is None:
        warnings.warn(
            "create() without a document id is deprecated, use create_generate() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return create_generate(db_props, json_text, auth, transport=transport)

    url = url_helper.document_url(db_props, doc_id)
    return _put(url, couchdb_safe(json_text), auth, transport)


def create_generate(
    db_props: DatabaseProperties,
    json_text: str,
    auth: BasicAuth | None = None,
    *,
    transport: Transport | None = None,
) -> Result:
    """Create a new document under an id generated by CouchDB.

    Costs an extra round trip for the uuid compared to supplying an id.
    """

    uuid_result = reader.fetch_uuid(db_props, transport=transport)
    if not uuid_result.ok:
        raise UuidFetchError(
            f"CouchDB refused to generate a uuid (HTTP {uuid_result.status_code})",
            uuid_result,
        )
    try:
        uuid = uuid_result.json_body()["uuids"][0]
    except (ValueError, KeyError, IndexError, TypeError) as exc:
        raise UuidFetchError("Unexpected uuid response from CouchDB", uuid_result) from exc
    return create(db_props, json_text, str(uuid), auth, transport=transport)


def update(
    db_props: DatabaseProperties,
    json_text: str,
    doc_id: str | None = None,
    auth: BasicAuth | None = None,
    *,
    transport: Transport | None = None,
) -> Result:
    """Store a new revision of a document.

    Without ``doc_id`` the document itself must carry a non-empty string
    ``_id``; otherwise ``MissingDocumentIdError`` before any request is made.
    The document should carry the ``_rev`` it replaces.
    """

    if doc_id is None:
        doc, doc_id = _parse_and_extract_id(json_text)
        json_text = json.dumps(doc)

    url = url_helper.document_url(db_props, doc_id)
    return _put(url, json_text, auth, transport)


def update_attachment(
    db_props: DatabaseProperties,
    json_text: str,
    att_name: str,
    rev: str,
    doc_id: str | None = None,
    auth: BasicAuth | None = None,
    *,
    transport: Transport | None = None,
) -> Result:
    """Store ``json_text`` as attachment ``att_name`` of revision ``rev``."""

    if doc_id is None:
        doc, doc_id = _parse_and_extract_id(json_text)
        json_text = json.dumps(doc)

    url = url_helper.attachment_insert_url(db_props, doc_id, att_name, rev)
    return _put(url, json_text, auth, transport)


def destroy(
    db_props: DatabaseProperties,
    doc_id: str,
    rev: str,
    auth: BasicAuth | None = None,
    *,
    transport: Transport | None = None,
) -> Result:
    """Delete revision ``rev`` of a document.

    Errors come back for a missing document or a stale revision.
    """

    url = f"{url_helper.document_url(db_props, doc_id)}?rev={rev}"
    return response_handler.handle_delete(resolve(transport).delete(url, auth))
