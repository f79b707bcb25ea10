# components_api/database.py
"""
Connection provider shared by both repository strategies.

One SQLAlchemy Engine (and therefore one connection pool) per process.
The SQL strategy goes through `query()`, the ORM strategy through `session()`.

Usage:
    from components_api.database import Database
    database = Database.from_settings(get_settings())
    result = database.query("SELECT * FROM components WHERE id = :id", {"id": 1})
    result.rows, result.rowcount
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from components_api.config import Settings
from components_api.core.errors import DataAccessError
from components_api.models.component import Base

logger = logging.getLogger(__name__)


@dataclass
class QueryResult:
    rows: List[Dict[str, Any]] = field(default_factory=list)
    rowcount: int = 0


class Database:
    """Owns the engine/pool. Build once at startup and pass it around."""

    def __init__(self, url: str, pool_size: int = 5, echo: bool = False):
        self.url = make_url(url)
        self.engine: Engine = self._build_engine(pool_size, echo)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, pool_size=settings.DB_POOL_SIZE, echo=settings.DB_ECHO)

    def _build_engine(self, pool_size: int, echo: bool) -> Engine:
        if self.url.get_backend_name() == "sqlite":
            kwargs: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
            if self.url.database in (None, "", ":memory:"):
                # every checkout must see the same in-memory database
                kwargs["poolclass"] = StaticPool
            return create_engine(self.url, echo=echo, **kwargs)
        return create_engine(self.url, echo=echo, pool_size=pool_size, pool_pre_ping=True)

    def describe(self) -> str:
        """Connection target with the password masked, safe for logs."""
        return self.url.render_as_string(hide_password=True)

    # --- raw SQL ---

    def query(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> QueryResult:
        """
        Run one parameterized statement in its own transaction.
        Rows are materialized before the connection goes back to the pool.
        """
        try:
            with self.engine.begin() as cx:
                result = cx.execute(text(sql), dict(params or {}))
                if result.returns_rows:
                    rows = [dict(r._mapping) for r in result]
                    return QueryResult(rows=rows, rowcount=len(rows))
                return QueryResult(rows=[], rowcount=result.rowcount)
        except SQLAlchemyError as e:
            logger.exception("Query failed: %s", sql.split()[0] if sql.strip() else sql)
            raise DataAccessError(str(e.__cause__ or e)) from e

    # --- ORM ---

    def session(self) -> Session:
        return self._session_factory()

    # --- lifecycle ---

    def create_schema(self) -> None:
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            logger.exception("Could not create schema on %s", self.describe())
            raise DataAccessError(str(e.__cause__ or e)) from e

    def dispose(self) -> None:
        self.engine.dispose()
