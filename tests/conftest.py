from __future__ import annotations

from unittest.mock import Mock

import pytest

from couchdb_connector.config import get_settings
from couchdb_connector.models import BasicAuth, DatabaseProperties
from couchdb_connector.transport import Transport, default_transport


@pytest.fixture(autouse=True)
def clear_caches() -> None:
    get_settings.cache_clear()
    default_transport.cache_clear()
    yield
    get_settings.cache_clear()
    default_transport.cache_clear()


@pytest.fixture
def db_props() -> DatabaseProperties:
    return DatabaseProperties(
        protocol="http",
        hostname="localhost",
        port=5984,
        database="couchdb_connector_test",
    )


@pytest.fixture
def test_user() -> BasicAuth:
    return BasicAuth(user="jan", password="relax")


@pytest.fixture
def test_admin() -> BasicAuth:
    return BasicAuth(user="anna", password="secret")


@pytest.fixture
def http_client() -> Mock:
    return Mock()


@pytest.fixture
def transport(http_client) -> Transport:
    return Transport(client=http_client)
