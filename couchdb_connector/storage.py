from __future__ import annotations

"""Create and drop databases."""

from . import response_handler, url_helper
from .models import BasicAuth, DatabaseProperties, Result
from .transport import Transport, resolve


def storage_up(
    db_props: DatabaseProperties,
    auth: BasicAuth | None = None,
    *,
    transport: Transport | None = None,
) -> Result:
    """Create the database named in ``db_props``.

    An existing database yields an error result (``file_exists``, HTTP 412).
    """

    url = url_helper.database_url(db_props)
    response = resolve(transport).put(url, "", auth=auth)
    return response_handler.handle_put(response, include_headers=False)


def storage_down(
    db_props: DatabaseProperties,
    auth: BasicAuth | None = None,
    *,
    transport: Transport | None = None,
) -> Result:
    """Delete the database named in ``db_props`` with all its documents."""

    url = url_helper.database_url(db_props)
    return response_handler.handle_delete(resolve(transport).delete(url, auth))
