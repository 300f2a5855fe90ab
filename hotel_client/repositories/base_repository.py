"""
Base repository for the SQL-backed repositories.

Repositories own the SQL text for one table (or one closely related group
of tables) and run it through the ``StatementExecutor``. Every value is
passed as a bound parameter.
"""

from typing import Optional

from hotel_client.db.executor import StatementExecutor
from hotel_client.db.session import Session


class BaseRepository:
    """Holds the executor shared by all statements of a repository."""

    def __init__(self, executor: StatementExecutor):
        self.executor = executor

    @property
    def session(self) -> Session:
        return self.executor.session

    @staticmethod
    def _first_value(rows) -> Optional[str]:
        """First column of the first row, or ``None``."""
        return rows[0][0] if rows else None
