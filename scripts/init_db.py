"""Creates the components table and loads the seed rows."""
import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from components_api.bootstrap import init_db  # noqa: E402
from components_api.config import get_settings  # noqa: E402
from components_api.database import Database  # noqa: E402
from components_api.logging_config import configure_logging  # noqa: E402


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--no-seed", action="store_true", help="only create the table")
    parser.add_argument("--seed-file", type=Path, default=None, help="CSV with name,type,brand,price,stock")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    database = Database.from_settings(settings)
    try:
        inserted = init_db(database, seed=not args.no_seed, seed_file=args.seed_file)
    finally:
        database.dispose()
    print(f"components table ready on {database.describe()} ({inserted} rows seeded)")


if __name__ == "__main__":
    main()
