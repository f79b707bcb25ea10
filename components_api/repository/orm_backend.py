# components_api/repository/orm_backend.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Mapping, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from components_api.api.schemas.component import Component
from components_api.core.errors import DataAccessError
from components_api.database import Database
from components_api.models.component import ComponentRecord
from components_api.repository.interface import ComponentRepository, pick_update_fields, prepare_create_fields

logger = logging.getLogger(__name__)


class OrmComponentRepository(ComponentRepository):
    """
    SQLAlchemy ORM implementation.
    - One short-lived Session per call, checked out of the shared pool.
    - Partial updates only touch the attributes present in `fields`, so the
      emitted UPDATE lists exactly those columns.
    """

    def __init__(self, database: Database) -> None:
        self.database = database

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        session = self.database.session()
        try:
            yield session
        except SQLAlchemyError as e:
            session.rollback()
            logger.exception("ORM %s failed", action)
            raise DataAccessError(str(e.__cause__ or e)) from e
        finally:
            session.close()

    def list(self) -> List[Component]:
        with self._session("list") as session:
            records = session.scalars(
                select(ComponentRecord).order_by(ComponentRecord.id.asc())
            ).all()
            return [Component.model_validate(r) for r in records]

    def get_by_id(self, component_id: int) -> Optional[Component]:
        with self._session("get") as session:
            record = session.get(ComponentRecord, component_id)
            return Component.model_validate(record) if record is not None else None

    def create(self, fields: Mapping[str, Any]) -> Component:
        data = prepare_create_fields(fields)
        with self._session("create") as session:
            record = ComponentRecord(**data)
            session.add(record)
            session.commit()
            # pull id and the server-side created_at
            session.refresh(record)
            created = Component.model_validate(record)
        logger.info("Created component id=%s", created.id)
        return created

    def update(self, component_id: int, fields: Mapping[str, Any]) -> Optional[Component]:
        updates = pick_update_fields(fields)
        if not updates:
            return self.get_by_id(component_id)

        with self._session("update") as session:
            record = session.get(ComponentRecord, component_id)
            if record is None:
                return None
            for key, value in updates.items():
                setattr(record, key, value)
            try:
                session.commit()
            except StaleDataError:
                # row was deleted between the read and the UPDATE
                session.rollback()
                logger.info("Component id=%s vanished during update", component_id)
                return None
            # read back what the store kept (NUMERIC rounding, triggers)
            stored = session.get(ComponentRecord, component_id, populate_existing=True)
            return Component.model_validate(stored) if stored is not None else None

    def remove(self, component_id: int) -> bool:
        with self._session("remove") as session:
            result = session.execute(
                delete(ComponentRecord).where(ComponentRecord.id == component_id)
            )
            session.commit()
            return result.rowcount > 0
