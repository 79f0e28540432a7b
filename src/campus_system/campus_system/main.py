from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .campus.controller import register as register_campus
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        smtp_config = getattr(settings, "SMTP_CONFIG")

        if app.config["DEBUG"]:
            print(
                "[campus-system] settings=", settings_module,
                " db=", f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}",
                " smtp=", f"{smtp_config.get('host')}:{smtp_config.get('port', 25)}",
            )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            if app.config["DEBUG"]:
                print(f"[campus-system] schema ready (tables={len(list_tables(db_config))})")
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            if app.config["DEBUG"]:
                print("[campus-system] demo seed ready")

        container = build_container(db_config=db_config, smtp_config=smtp_config)

    register_campus(app, container)

    return app
