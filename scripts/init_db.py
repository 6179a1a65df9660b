#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the FastLog tables and drops expired login sessions.
"""

import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_db")


def main() -> int:
    from sqlalchemy import inspect
    from sqlalchemy.exc import SQLAlchemyError

    from domain.models import SessionLocal, engine, init_database
    from repositories import SessionRepository

    try:
        init_database()
        tables = inspect(engine).get_table_names()
        logger.info(f"Tables ready: {', '.join(sorted(tables))}")

        db = SessionLocal()
        try:
            purged = SessionRepository(db).purge_expired()
            logger.info(f"Purged {purged} expired sessions")
        finally:
            db.close()
    except SQLAlchemyError as e:
        logger.error(f"Database initialization failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
