"""Daily job: print today's campus birthday greetings.

Meant for cron, e.g. `0 8 * * * python scripts/send_birthday_emails.py`.
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

from src.campus_system.campus_system.container import build_campus_app


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    campus = build_campus_app(db_config=settings.DB_CONFIG, smtp_config=settings.SMTP_CONFIG)
    campus.send_birthday_emails()


if __name__ == "__main__":
    main()
