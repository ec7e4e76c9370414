"""
Database initialization script

Run once to create the contact table:
    python scripts/init_db.py

Uses DATABASE_URL, or DB_HOST / DB_USER / DB_PASS / DB_NAME from .env.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import logging

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings
from app.db.database import Database
from app.models.submission import Submission

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


def create_tables():
    """Create the contact table if it does not exist"""
    config = Settings()
    database = Database.from_settings(config)

    try:
        if not database.check_health():
            logger.error("❌ Could not connect to the database")
            return False
        logger.info("✅ Connected successfully\n")

        logger.info(f"📋 Ensuring '{Submission.__tablename__}' table...")
        database.create_tables()

        columns = inspect(database.engine).get_columns(Submission.__tablename__)
        for column in columns:
            logger.info(f"  • {column['name']}: {column['type']}")

        logger.info("\n🎉 Database initialization complete")
        return True

    except SQLAlchemyError as e:
        logger.error(f"❌ Error: {e}")
        return False

    finally:
        database.dispose()


if __name__ == "__main__":
    sys.exit(0 if create_tables() else 1)
