# components_api/repository/sql_backend.py
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from components_api.api.schemas.component import Component
from components_api.database import Database
from components_api.models.component import TABLE_NAME
from components_api.repository.interface import ComponentRepository, pick_update_fields, prepare_create_fields

logger = logging.getLogger(__name__)

# Only column names we control are interpolated; values always go as bind params.
COLUMNS = "id, name, type, brand, price, stock, created_at"


class SqlComponentRepository(ComponentRepository):
    """
    Direct parameterized SQL over the shared connection pool.
    Relies on RETURNING (PostgreSQL, SQLite >= 3.35) to read back written rows.
    """

    def __init__(self, database: Database) -> None:
        self.database = database

    def list(self) -> List[Component]:
        result = self.database.query(f"SELECT {COLUMNS} FROM {TABLE_NAME} ORDER BY id ASC")
        return [Component.model_validate(row) for row in result.rows]

    def get_by_id(self, component_id: int) -> Optional[Component]:
        result = self.database.query(
            f"SELECT {COLUMNS} FROM {TABLE_NAME} WHERE id = :id",
            {"id": component_id},
        )
        return Component.model_validate(result.rows[0]) if result.rows else None

    def create(self, fields: Mapping[str, Any]) -> Component:
        data = prepare_create_fields(fields)
        result = self.database.query(
            f"""INSERT INTO {TABLE_NAME} (name, type, brand, price, stock)
                VALUES (:name, :type, :brand, :price, :stock)
                RETURNING {COLUMNS}""",
            data,
        )
        created = Component.model_validate(result.rows[0])
        logger.info("Created component id=%s", created.id)
        return created

    def update(self, component_id: int, fields: Mapping[str, Any]) -> Optional[Component]:
        updates = pick_update_fields(fields)
        if not updates:
            # nothing to write: behave like a read
            return self.get_by_id(component_id)

        assignments = ", ".join(f"{col} = :{col}" for col in updates)
        params = dict(updates)
        params["id"] = component_id
        result = self.database.query(
            f"""UPDATE {TABLE_NAME}
                SET {assignments}
                WHERE id = :id
                RETURNING {COLUMNS}""",
            params,
        )
        return Component.model_validate(result.rows[0]) if result.rows else None

    def remove(self, component_id: int) -> bool:
        result = self.database.query(
            f"DELETE FROM {TABLE_NAME} WHERE id = :id RETURNING id",
            {"id": component_id},
        )
        return result.rowcount > 0
