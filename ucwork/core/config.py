"""
Application configuration.

Loads settings from environment variables and .env file.
The runtime flavour is picked from ``GAE_INSTANCE``: App Engine sets it
on deployed instances, so a non-empty value means "deployed" and
Cloud SQL is reached through its unix socket; otherwise the service
talks to a local database over TCP.
"""

from typing import Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 8080
CLOUDSQL_SOCKET_DIR = "/cloudsql"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        port: Listening port; ``None`` (unset or empty ``PORT``) means use
            DEFAULT_PORT.
        gae_instance: Set by App Engine on deployed instances.
        datastore_project_id: GCP project holding the member entities.
        cloudsql_*: Credentials and targets of the orders database.
        orders_database_url: Full SQLAlchemy URL overriding the cloudsql_* values.
        orders_create_schema: Create the orders table at startup when missing.
        rate_limit_enabled: Turn per-client rate limiting on. Off by default.
        rate_limit_default: Per-client limit applied to every resource route.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    project_name: str = "ucwork"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    port: Optional[int] = None

    gae_instance: str = ""

    datastore_project_id: str = "ucwork-ai-000002"

    cloudsql_user: str = "postgres"
    cloudsql_password: str = "postgres"
    cloudsql_instance: str = "ucwork-ai-000002:asia-northeast1:ucwork"
    cloudsql_database: str = "ucwork"
    cloudsql_host: str = "localhost"
    cloudsql_port: int = 5432
    orders_database_url: Optional[str] = None
    orders_create_schema: bool = False

    rate_limit_enabled: bool = False
    rate_limit_default: str = "60/minute"

    @property
    def is_deployed(self) -> bool:
        """True when running on App Engine."""
        return bool(self.gae_instance)

    def get_port(self) -> int:
        return self.port if self.port is not None else DEFAULT_PORT

    def get_orders_database_url(self) -> str:
        """Return the effective SQLAlchemy URL for the orders database.

        Priority:
        1. Explicit ``ORDERS_DATABASE_URL``.
        2. Deployed: Cloud SQL unix socket under ``/cloudsql/<instance>``.
        3. Local: TCP connection to ``cloudsql_host:cloudsql_port``.
        """
        if self.orders_database_url:
            return self.orders_database_url

        credentials = f"{quote_plus(self.cloudsql_user)}:{quote_plus(self.cloudsql_password)}"
        if self.is_deployed:
            return (
                f"postgresql+psycopg2://{credentials}@/{self.cloudsql_database}"
                f"?host={CLOUDSQL_SOCKET_DIR}/{self.cloudsql_instance}"
            )
        return (
            f"postgresql+psycopg2://{credentials}@"
            f"{self.cloudsql_host}:{self.cloudsql_port}/{self.cloudsql_database}"
        )
