# components_api/repository/interface.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol

from components_api.api.schemas.component import Component
from components_api.core.errors import ValidationError
from components_api.models.component import WRITABLE_FIELDS

REQUIRED_FIELDS = ("name", "type")
CREATE_DEFAULTS: Dict[str, Any] = {"brand": None, "price": 0, "stock": 0}


# ---- Repository protocol ----

class ComponentRepository(Protocol):
    """
    Strategy-agnostic contract for the HTTP layer.

    Both implementations return `Component` models (or None / bool) with the
    same shapes, so the routes never know which one is active.
    """

    def list(self) -> List[Component]:
        """All components ordered by id ascending; empty list when the table is empty."""
        ...

    def get_by_id(self, component_id: int) -> Optional[Component]:
        """The component, or None when no row matches."""
        ...

    def create(self, fields: Mapping[str, Any]) -> Component:
        """Insert a row; name and type are required, brand/price/stock get defaults."""
        ...

    def update(self, component_id: int, fields: Mapping[str, Any]) -> Optional[Component]:
        """Write exactly the keys present in `fields`; None when the id does not exist."""
        ...

    def remove(self, component_id: int) -> bool:
        """True if a row was deleted, False if nothing matched."""
        ...


# ---- helpers shared by both strategies ----

def prepare_create_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Check required fields and fill defaults for omitted optional ones."""
    missing = [f for f in REQUIRED_FIELDS if not _present(fields.get(f))]
    if missing:
        raise ValidationError("Required fields: name and type", fields=missing)
    data = {k: fields[k] for k in WRITABLE_FIELDS if k in fields}
    for key, default in CREATE_DEFAULTS.items():
        data.setdefault(key, default)
    return data


def pick_update_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Presence-based: keep every known key that was supplied, even if None."""
    return {k: fields[k] for k in WRITABLE_FIELDS if k in fields}


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True
