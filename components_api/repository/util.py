from __future__ import annotations

from typing import Literal

from components_api.database import Database
from components_api.repository.interface import ComponentRepository
from components_api.repository.orm_backend import OrmComponentRepository
from components_api.repository.sql_backend import SqlComponentRepository


def get_repository(kind: Literal["sql", "orm"], database: Database) -> ComponentRepository:
    kind = (kind or "sql").lower()
    if kind == "sql":
        return SqlComponentRepository(database)
    if kind == "orm":
        return OrmComponentRepository(database)
    raise ValueError(f"Unknown data access kind: {kind}")
