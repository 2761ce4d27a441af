"""
Store construction for the members and orders resources.

Builds the two long-lived store handles from settings. Called once by
the application factory; the handles are then injected into the
router and live for the whole process.
"""

import logging

from google.cloud import datastore
from sqlalchemy import create_engine

from ucwork.core.config import Settings
from ucwork.infrastructure.resources.member_datastore import DatastoreMemberStore
from ucwork.infrastructure.resources.order_sql import SqlOrderStore

logger = logging.getLogger(__name__)


def configure_datastore(settings: Settings) -> DatastoreMemberStore:
    """Build the Datastore-backed member store.

    ``DATASTORE_EMULATOR_HOST`` is honoured by the client library, which
    is how local runs avoid real credentials.
    """
    client = datastore.Client(project=settings.datastore_project_id)
    logger.info("Member store: Datastore project %s.", settings.datastore_project_id)
    return DatastoreMemberStore(client)


def configure_cloud_sql(settings: Settings) -> SqlOrderStore:
    """Build the SQL-backed order store.

    Deployed instances reach Cloud SQL over its unix socket, local runs
    over TCP (see ``Settings.get_orders_database_url``).
    """
    engine = create_engine(settings.get_orders_database_url(), pool_pre_ping=True)
    if settings.is_deployed:
        logger.info("Order store: Cloud SQL instance %s.", settings.cloudsql_instance)
    else:
        logger.info(
            "Order store: local database at %s:%d.",
            settings.cloudsql_host,
            settings.cloudsql_port,
        )

    store = SqlOrderStore(engine)
    if settings.orders_create_schema:
        store.ensure_schema()
    return store
