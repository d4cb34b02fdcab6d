"""Connector configuration loaded from environment variables.

The connector core takes its connection descriptor and credentials as call
arguments; these settings only feed the command line tool and the default
transport's timeout.
"""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import BasicAuth, DatabaseProperties


class Settings(BaseSettings):
    """Typed environment-backed configuration for the connector."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    couchdb_protocol: str = Field(default="http", alias="COUCHDB_PROTOCOL")
    couchdb_hostname: str = Field(default="localhost", alias="COUCHDB_HOSTNAME")
    couchdb_port: int = Field(default=5984, alias="COUCHDB_PORT")
    couchdb_database: str = Field(default="couchdb_connector", alias="COUCHDB_DATABASE")
    couchdb_user: str = Field(default="", alias="COUCHDB_USER")
    couchdb_password: SecretStr = Field(default=SecretStr(""), alias="COUCHDB_PASSWORD")
    couchdb_timeout_seconds: float = Field(default=30.0, alias="COUCHDB_TIMEOUT_SECONDS")

    def db_properties(self) -> DatabaseProperties:
        """Build the connection descriptor for the configured database."""

        return DatabaseProperties(
            protocol=self.couchdb_protocol,
            hostname=self.couchdb_hostname,
            port=self.couchdb_port,
            database=self.couchdb_database,
        )

    def basic_auth(self) -> BasicAuth | None:
        """Return configured credentials, or ``None`` when no user is set."""

        if not self.couchdb_user:
            return None
        return BasicAuth(user=self.couchdb_user, password=self.couchdb_password)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance for the current process."""

    return Settings()
