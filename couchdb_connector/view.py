from __future__ import annotations

"""Design documents and view queries."""

from . import response_handler, url_helper
from .models import BasicAuth, DatabaseProperties, Result, Stale, ViewKey
from .transport import Transport, resolve


def create_view(
    db_props: DatabaseProperties,
    design: str,
    code: str,
    auth: BasicAuth | None = None,
    *,
    transport: Transport | None = None,
) -> Result:
    """Store design document ``design`` whose JSON source is ``code``."""

    url = url_helper.design_url(db_props, design)
    response = resolve(transport).put(url, code, auth=auth)
    return response_handler.handle_put(response, include_headers=True)


def fetch_all(
    db_props: DatabaseProperties,
    design: str,
    view: str,
    auth: BasicAuth | None = None,
    *,
    transport: Transport | None = None,
) -> Result:
    """Return every row emitted by ``view``."""

    url = url_helper.view_url(db_props, design, view)
    return response_handler.handle_get(resolve(transport).get(url, auth))


def document_by_key(
    db_props: DatabaseProperties,
    view_key: ViewKey,
    stale: Stale = "update_after",
    auth: BasicAuth | None = None,
    *,
    transport: Transport | None = None,
) -> Result:
    """Query a view for the rows emitted under a single key.

    ``stale="ok"`` reads the index as it is; ``"update_after"`` answers from
    the current index and refreshes it afterwards.
    """

    base_url = url_helper.view_url(db_props, view_key.design, view_key.view)
    url = url_helper.query_path(base_url, view_key.key, stale)
    return response_handler.handle_get(resolve(transport).get(url, auth))
