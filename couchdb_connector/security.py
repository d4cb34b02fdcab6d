from __future__ import annotations

"""Read and replace a database's security object."""

from pydantic import BaseModel, Field

from . import response_handler, url_helper
from .models import BasicAuth, DatabaseProperties, Result
from .transport import Transport, resolve


class SecurityGroup(BaseModel):
    """Users and roles granted one level of access."""

    names: list[str] = Field(default_factory=list)
    roles: list[str] = Field(default_factory=list)


class SecurityObject(BaseModel):
    """CouchDB ``_security`` document: database admins and members."""

    admins: SecurityGroup = Field(default_factory=SecurityGroup)
    members: SecurityGroup = Field(default_factory=SecurityGroup)


def get_security(
    db_props: DatabaseProperties,
    admin_auth: BasicAuth,
    *,
    transport: Transport | None = None,
) -> Result:
    url = url_helper.security_url(db_props)
    return response_handler.handle_get(resolve(transport).get(url, admin_auth))


def set_security(
    db_props: DatabaseProperties,
    admin_auth: BasicAuth,
    admins: SecurityGroup | None = None,
    members: SecurityGroup | None = None,
    *,
    transport: Transport | None = None,
) -> Result:
    """Replace the security object.

    Groups left as ``None`` are written empty; an empty ``members`` group
    makes the database public.
    """

    security = SecurityObject(
        admins=admins or SecurityGroup(),
        members=members or SecurityGroup(),
    )
    url = url_helper.security_url(db_props)
    response = resolve(transport).put(url, security.model_dump_json(), auth=admin_auth)
    return response_handler.handle_put(response, include_headers=True)
