import logging
from typing import Optional

from databases import Database

from conference_central.modules.settings import DATABASE_URL

logger = logging.getLogger("conference_central.database")

# Create the database instance
database = Database(DATABASE_URL)


async def connect_to_db():
    await database.connect()


async def disconnect_from_db():
    await database.disconnect()


def is_postgres(db: Database) -> bool:
    return db.url.dialect in ("postgresql", "postgres")


async def init_db(db: Optional[Database] = None):
    """Create the tables used by the service if they do not exist yet."""
    db = db or database
    if is_postgres(db):
        id_column = "BIGSERIAL PRIMARY KEY"
        json_type = "JSONB"
    else:
        id_column = "INTEGER PRIMARY KEY AUTOINCREMENT"
        json_type = "TEXT"

    query_profiles = f"""
    CREATE TABLE IF NOT EXISTS profiles (
        user_id TEXT PRIMARY KEY,
        display_name TEXT,
        main_email TEXT,
        tee_shirt_size TEXT NOT NULL DEFAULT 'NOT_SPECIFIED',
        conference_keys_to_attend {json_type},
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """
    await db.execute(query=query_profiles)

    # One row per allocated conference id; the row records the parent key
    query_allocations = f"""
    CREATE TABLE IF NOT EXISTS conference_id_allocations (
        id {id_column},
        parent_user_id TEXT NOT NULL,
        allocated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """
    await db.execute(query=query_allocations)

    query_conferences = f"""
    CREATE TABLE IF NOT EXISTS conferences (
        organizer_user_id TEXT NOT NULL,
        id BIGINT NOT NULL,
        name TEXT NOT NULL,
        description TEXT,
        topics {json_type},
        city TEXT,
        start_date TEXT,
        month INTEGER NOT NULL DEFAULT 0,
        end_date TEXT,
        max_attendees INTEGER NOT NULL DEFAULT 0,
        seats_available INTEGER NOT NULL DEFAULT 0,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        PRIMARY KEY (organizer_user_id, id)
    )
    """
    await db.execute(query=query_conferences)

    await db.execute(
        query="CREATE INDEX IF NOT EXISTS idx_conferences_name ON conferences (name)"
    )
    logger.info("Schema ready (%s)", db.url.dialect)
