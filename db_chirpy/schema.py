from dotenv import load_dotenv
import os
import logging

import psycopg2

load_dotenv()

logger = logging.getLogger(__name__)


users_query = """
CREATE TABLE IF NOT EXISTS users (
    id UUID PRIMARY KEY,
    created_at TIMESTAMPTZ NOT NULL,
    updated_at TIMESTAMPTZ NOT NULL,
    email TEXT NOT NULL UNIQUE
);
"""

# Chirps go away together with their author
chirps_query = """
CREATE TABLE IF NOT EXISTS chirps (
    id UUID PRIMARY KEY,
    created_at TIMESTAMPTZ NOT NULL,
    updated_at TIMESTAMPTZ NOT NULL,
    body TEXT NOT NULL,
    user_id UUID NOT NULL REFERENCES users(id) ON DELETE CASCADE
);
"""

indexes_query = """
CREATE INDEX IF NOT EXISTS idx_chirps_user_id ON chirps(user_id);
CREATE INDEX IF NOT EXISTS idx_chirps_created_at ON chirps(created_at);
"""


def create_schema(dsn=None):
    """Create the users and chirps tables if they don't exist yet"""
    connection = psycopg2.connect(dsn or os.getenv("DB_URL"))
    connection.autocommit = True

    try:
        with connection.cursor() as c:
            logger.info("Creating users table...")
            c.execute(users_query)

            logger.info("Creating chirps table...")
            c.execute(chirps_query)

            logger.info("Creating indexes...")
            c.execute(indexes_query)

        logger.info("Database schema created successfully")
    except Exception as e:
        logger.error(f"Error creating schema: {e}")
        raise
    finally:
        connection.close()


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    create_schema()
