"""Database session, statement execution and schema."""

from hotel_client.db.session import Session, open_session, build_url
from hotel_client.db.executor import StatementExecutor
from hotel_client.db.sequences import IdentityResolver, NO_VALUE

__all__ = [
    "Session",
    "open_session",
    "build_url",
    "StatementExecutor",
    "IdentityResolver",
    "NO_VALUE",
]
