import logging
import sys

from pandas_logistics.core.config import settings
from pandas_logistics.db.base import Database


def create_tables(database: Database) -> None:
    database.create_tables()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    database = Database.from_settings(settings)
    try:
        create_tables(database)
        logging.info("Cargo table created")
    except Exception as e:
        logging.error(f"Failed to create tables: {e}")
        sys.exit(1)
    finally:
        database.dispose()
