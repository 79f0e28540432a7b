"""Create the campus tables, optionally loading the demo data.

Usage: python scripts/init_db.py [--seed]
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.campus_system.campus_system.database.bootstrap import apply_schema, apply_seed_sql, list_tables


def main(argv: list[str]) -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    target = f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    print(f"OK: Applied schema.sql -> {target} (tables={len(list_tables(db_config))})")

    if "--seed" in argv:
        apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
        print(f"OK: Seeded database -> {target}")


if __name__ == "__main__":
    main(sys.argv[1:])
