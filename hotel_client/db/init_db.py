"""Database initialization utilities."""
import logging

from sqlalchemy import inspect

from hotel_client.db.schema import metadata
from hotel_client.db.session import Session

logger = logging.getLogger(__name__)


def init_db(session: Session) -> None:
    """
    Create the hotel booking tables that do not exist yet.

    Note: This is suitable for development/testing only. Production
    databases are provisioned externally.
    """
    with session.transaction() as connection:
        existing_tables = inspect(connection).get_table_names()
        metadata.create_all(bind=connection, checkfirst=True)

    created = len(metadata.tables) - len(set(existing_tables) & set(metadata.tables))
    logger.info(f"Database initialized: {created} table(s) created")


def drop_db(session: Session) -> None:
    """
    Drop all hotel booking tables.

    WARNING: This will delete all data! Only for development/testing purposes.
    """
    with session.transaction() as connection:
        metadata.drop_all(bind=connection)
    logger.warning("All database tables dropped")


def reset_db(session: Session) -> None:
    """Drop and recreate all tables."""
    logger.warning("Resetting database...")
    drop_db(session)
    init_db(session)
    logger.info("Database reset complete")
