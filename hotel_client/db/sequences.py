"""
Identity resolution for generated primary keys.

``currval`` is scoped to the database session: it returns the value most
recently produced by the sequence *on this connection*. The resolver must
therefore run on the same ``Session`` as the insert, right after it and
before any other statement that could advance the same sequence.
"""
import logging
from typing import Any, Dict, Tuple

from hotel_client.core.exceptions import ConfigurationError
from hotel_client.db.executor import StatementExecutor

logger = logging.getLogger(__name__)

NO_VALUE = -1

_SEQUENCE_SUFFIX = "_seq"


def table_for_sequence(sequence_name: str) -> str:
    """
    Name of the table owning a ``<table>_<column>_seq`` sequence.

    >>> table_for_sequence("roomrepairs_repairid_seq")
    'roomrepairs'
    """
    name = sequence_name.lower()
    if not name.endswith(_SEQUENCE_SUFFIX) or "_" not in name[:-len(_SEQUENCE_SUFFIX)]:
        raise ConfigurationError(f"Unsupported sequence name '{sequence_name}'")
    return name[:-len(_SEQUENCE_SUFFIX)].rsplit("_", 1)[0]


class IdentityResolver:
    """Fetches the current value of a server-side sequence."""

    def __init__(self, executor: StatementExecutor):
        self.executor = executor

    def current_value(self, sequence_name: str) -> int:
        """
        Current value of ``sequence_name`` for this session.

        Returns:
            The value, or ``-1`` when the query yields no value
        """
        statement, params = self._statement_for(sequence_name)
        rows = self.executor.execute_materialize(statement, params)
        if not rows or rows[0][0] is None:
            logger.warning(f"No current value for sequence {sequence_name}")
            return NO_VALUE
        return int(rows[0][0])

    def _statement_for(self, sequence_name: str) -> Tuple[str, Dict[str, Any]]:
        if self.executor.session.dialect_name == "sqlite":
            # SQLite keeps AUTOINCREMENT counters per table.
            return (
                "SELECT seq FROM sqlite_sequence WHERE name = :table",
                {"table": table_for_sequence(sequence_name)},
            )
        return (
            "SELECT currval(CAST(:sequence AS regclass))",
            {"sequence": sequence_name},
        )
