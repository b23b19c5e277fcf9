"""
Initialize database: create the settings and secrets tables. Run once
manually before first app launch.

Usage (from backend directory):
  python -m scripts.init_db

Tables Created:
  - settings: plain assistant configuration (provider, model, parameters)
  - secrets: encrypted provider API keys
"""

from roo_code.core.database import get_session_local, init_db
from roo_code.core.logging import get_logger
from roo_code.core.settings_db import ensure_assistant_config

logger = get_logger()


def main():
    logger.info("Initializing database...")
    init_db()
    db = get_session_local()()
    try:
        ensure_assistant_config(db)
    finally:
        db.close()
    logger.info(
        "Database initialization complete. Run the application with: python -m uvicorn main:app --host 127.0.0.1 --port 8091"
    )


if __name__ == "__main__":
    main()
