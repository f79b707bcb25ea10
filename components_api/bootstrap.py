# components_api/bootstrap.py
"""
Schema creation and seed data for the `components` table.

Seed rows live in data/components_seed.csv next to this module and ship as
package data, so they can be edited without touching code; pandas handles
the CSV parsing and NaN -> None cleanup.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from components_api.database import Database
from components_api.models.component import TABLE_NAME, WRITABLE_FIELDS

logger = logging.getLogger(__name__)

SEED_FILE = Path(__file__).resolve().parent / "data" / "components_seed.csv"


def load_seed_rows(path: Path = SEED_FILE) -> List[Dict[str, Any]]:
    if not path.exists():
        logger.warning("Seed file not found at %s", path)
        return []
    df = pd.read_csv(path, dtype={"name": str, "type": str, "brand": str})
    missing = [c for c in WRITABLE_FIELDS if c not in df.columns]
    if missing:
        raise ValueError(f"Seed file {path} is missing columns: {', '.join(missing)}")
    df = df[list(WRITABLE_FIELDS)].copy()
    df["price"] = df["price"].fillna(0).astype(float).round(2)
    df["stock"] = df["stock"].fillna(0).astype(int)
    df = df.astype(object).where(pd.notnull(df), None)
    return df.to_dict(orient="records")


def init_db(database: Database, seed: bool = True, seed_file: Optional[Path] = None) -> int:
    """
    Create the table if needed and, when it is empty, insert the seed rows.
    Returns the number of rows inserted.
    """
    database.create_schema()
    if not seed:
        return 0

    count = database.query(f"SELECT COUNT(*) AS n FROM {TABLE_NAME}").rows[0]["n"]
    if count:
        logger.info("Table %s already has %s rows, skipping seed", TABLE_NAME, count)
        return 0

    rows = load_seed_rows(seed_file or SEED_FILE)
    for row in rows:
        database.query(
            f"""INSERT INTO {TABLE_NAME} (name, type, brand, price, stock)
                VALUES (:name, :type, :brand, :price, :stock)""",
            row,
        )
    logger.info("Seeded %s rows into %s", len(rows), TABLE_NAME)
    return len(rows)
