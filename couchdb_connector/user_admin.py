from __future__ import annotations

"""Manage CouchDB users (``_users`` database) and server admins.

Users live as documents ``org.couchdb.user:<name>`` in ``_users``; admins are
entries in the server configuration under ``_config/admins``.
"""

from collections.abc import Sequence
import json

from . import response_handler, url_helper
from .errors import MissingRevisionError
from .models import BasicAuth, DatabaseProperties, Result
from .transport import Transport, resolve


def create_user(
    db_props: DatabaseProperties,
    admin_auth: BasicAuth,
    username: str,
    password: str,
    roles: Sequence[str] = (),
    *,
    transport: Transport | None = None,
) -> Result:
    """Create user ``username`` with the given roles."""

    body = json.dumps(
        {"name": username, "password": password, "roles": list(roles), "type": "user"}
    )
    url = url_helper.user_url(db_props, username)
    response = resolve(transport).put(url, body, auth=admin_auth)
    return response_handler.handle_put(response, include_headers=True)


def create_admin(
    db_props: DatabaseProperties,
    admin_name: str,
    password: str,
    auth: BasicAuth | None = None,
    *,
    transport: Transport | None = None,
) -> Result:
    """Register server admin ``admin_name``.

    A server without admins accepts this unauthenticated; once any admin
    exists, ``auth`` must name one.
    """

    url = url_helper.admin_url(db_props, admin_name)
    response = resolve(transport).put(url, json.dumps(password), auth=auth)
    return response_handler.handle_put(response, include_headers=True)


def user_info(
    db_props: DatabaseProperties,
    auth: BasicAuth,
    username: str,
    *,
    transport: Transport | None = None,
) -> Result:
    url = url_helper.user_url(db_props, username)
    return response_handler.handle_get(resolve(transport).get(url, auth))


def destroy_user(
    db_props: DatabaseProperties,
    admin_auth: BasicAuth,
    username: str,
    *,
    transport: Transport | None = None,
) -> Result:
    """Delete user ``username``, looking up its current revision first.

    When the lookup fails (unknown user, bad credentials) its error result is
    returned and no delete is attempted.
    """

    transport = resolve(transport)
    info = user_info(db_props, admin_auth, username, transport=transport)
    if not info.ok:
        return info
    try:
        rev = info.json_body()["_rev"]
    except (ValueError, KeyError, TypeError) as exc:
        raise MissingRevisionError(f"User {username} has no _rev to delete", info) from exc
    url = f"{url_helper.user_url(db_props, username)}?rev={rev}"
    return response_handler.handle_delete(transport.delete(url, admin_auth))


def destroy_admin(
    db_props: DatabaseProperties,
    admin_auth: BasicAuth,
    username: str,
    *,
    transport: Transport | None = None,
) -> Result:
    url = url_helper.admin_url(db_props, username)
    return response_handler.handle_delete(resolve(transport).delete(url, admin_auth))
