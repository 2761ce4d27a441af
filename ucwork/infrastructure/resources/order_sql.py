"""
Adapter: Order store on Cloud SQL.

Implements OrderStore port through a SQLAlchemy engine. Production
points the engine at Cloud SQL for PostgreSQL; tests use SQLite.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ucwork.domain.resources.entities import Order
from ucwork.domain.resources.errors import StoreError
from ucwork.domain.resources.ports import OrderStore

logger = logging.getLogger(__name__)


class SqlOrderStore(OrderStore):
    """Persists orders in the ``orders`` table.

    Implements the OrderStore port defined in the domain layer.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def ensure_schema(self) -> None:
        """Create the ``orders`` table if it does not exist. Idempotent.

        Raises:
            StoreError: If the DDL cannot be executed.
        """
        if self._engine.dialect.name == "sqlite":
            id_column = "INTEGER PRIMARY KEY AUTOINCREMENT"
        else:
            id_column = "SERIAL PRIMARY KEY"

        ddl = text(
            f"""
            CREATE TABLE IF NOT EXISTS orders (
                id {id_column},
                name VARCHAR(255) NOT NULL
            )
            """
        )
        try:
            with self._engine.begin() as conn:
                conn.execute(ddl)
        except SQLAlchemyError as exc:
            raise StoreError(f"create orders table: {exc}", cause=exc) from exc

        logger.info("Ensured orders table exists.")

    def list_orders(self) -> list[Order]:
        """Return every order ordered by id.

        Raises:
            StoreError: If the query fails.
        """
        query = text("SELECT id, name FROM orders ORDER BY id")
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(query).mappings().all()
        except SQLAlchemyError as exc:
            raise StoreError(f"list orders: {exc}", cause=exc) from exc

        return [Order(name=row["name"], id=row["id"]) for row in rows]

    def add_order(self, order: Order) -> int:
        """Insert an order and return its generated id.

        Args:
            order: Order to persist. Its ``id`` is ignored.

        Returns:
            The id assigned by the database.

        Raises:
            StoreError: If the insert fails.
        """
        query = text("INSERT INTO orders (name) VALUES (:name) RETURNING id")
        try:
            with self._engine.begin() as conn:
                new_id = conn.execute(query, {"name": order.name}).scalar_one()
        except SQLAlchemyError as exc:
            raise StoreError(f"add order: {exc}", cause=exc) from exc

        logger.debug("Inserted order id=%d.", new_id)
        return int(new_id)
