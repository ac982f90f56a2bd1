"""
SQL Database - Infrastructure Layer

Thin wrapper around a SQLAlchemy engine exposing only what the health
probe needs.
"""

import math
from typing import Any, Dict, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url


class SqlDatabase:
    """Relational database client."""

    def __init__(
        self,
        database_url: str,
        connect_timeout: Optional[float] = None,
        pool_size: Optional[int] = None,
    ):
        """
        Initialize the SQLAlchemy engine. No connection is opened here.

        Args:
            database_url: SQLAlchemy URL, e.g. ``postgresql+psycopg://user@host/db``
            connect_timeout: Driver connect timeout in seconds, for drivers
                that accept a ``connect_timeout`` argument. Rounded up to
                whole seconds, at least 1, since libpq reads 0 as no limit.
            pool_size: Connection pool size for pooled dialects.
        """
        url = make_url(database_url)
        engine_kwargs: Dict[str, Any] = {"pool_pre_ping": True}
        if connect_timeout is not None and url.get_backend_name() in (
            "postgresql",
            "mysql",
            "mariadb",
        ):
            engine_kwargs["connect_args"] = {
                "connect_timeout": max(1, math.ceil(connect_timeout))
            }
        if pool_size is not None and url.get_backend_name() != "sqlite":
            engine_kwargs["pool_size"] = pool_size

        self.engine: Engine = create_engine(url, **engine_kwargs)

    @property
    def backend_name(self) -> str:
        return self.engine.url.get_backend_name()

    def verify_connectivity(self) -> None:
        """
        Check out a pooled connection and run ``SELECT 1``.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: if the database is unreachable
                or rejects the statement.
        """
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1")).scalar_one()

    def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        self.engine.dispose()
