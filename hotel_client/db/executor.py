"""
Statement execution over a ``Session``.

Three result shapes are offered so each caller picks the cheapest one:

* ``execute_update``      - mutations, returns the affected-row count
* ``execute_count``       - queries used as existence/cardinality checks
* ``execute_materialize`` - queries whose rows the caller needs, fully
  buffered as lists of text values

``execute_and_print`` is the display variant of ``execute_materialize``.
"""
import logging
import sys
from typing import Any, Callable, List, Mapping, Optional, Sequence, TextIO, Tuple, TypeVar

from sqlalchemy import text
from sqlalchemy.engine import CursorResult
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from hotel_client.core.exceptions import ConstraintViolationError, ExecutionError
from hotel_client.db.session import Session

logger = logging.getLogger(__name__)

Row = List[Optional[str]]
T = TypeVar("T")


def _as_text(value: Any) -> Optional[str]:
    """Render a column value as text; SQL NULL stays ``None``."""
    if value is None:
        return None
    return str(value)


class StatementExecutor:
    """Runs SQL statements with bound parameters on one session."""

    def __init__(self, session: Session, out: Optional[TextIO] = None):
        self.session = session
        self.out = out

    # ------------------------------------------------------------------ #
    # Execution modes
    # ------------------------------------------------------------------ #

    def execute_update(self, statement: str, params: Optional[Mapping[str, Any]] = None) -> int:
        """
        Execute a mutating statement (INSERT, UPDATE, DELETE, DDL).

        Returns:
            Number of affected rows (``-1`` when the driver cannot tell)
        """
        return self._run(statement, params, lambda result: result.rowcount)

    def execute_count(self, statement: str, params: Optional[Mapping[str, Any]] = None) -> int:
        """Execute a query and return the number of rows it produced."""
        return self._run(statement, params, lambda result: len(result.fetchall()))

    def execute_materialize(
        self, statement: str, params: Optional[Mapping[str, Any]] = None
    ) -> List[Row]:
        """
        Execute a query and return all rows as lists of text values.

        Rows are fully buffered before the cursor is released, so the
        result stays valid after the call returns.
        """
        _, rows = self.execute_query(statement, params)
        return rows

    def execute_query(
        self, statement: str, params: Optional[Mapping[str, Any]] = None
    ) -> Tuple[List[str], List[Row]]:
        """Like ``execute_materialize`` but also returns the column names."""
        return self._run(statement, params, self._materialize)

    def execute_and_print(
        self, statement: str, params: Optional[Mapping[str, Any]] = None
    ) -> int:
        """
        Execute a query and print its rows tab-separated.

        The header of column names is printed once before the first data
        row; nothing is printed for an empty result.

        Returns:
            Number of rows printed
        """
        columns, rows = self.execute_query(statement, params)
        out = self.out or sys.stdout
        for index, row in enumerate(rows):
            if index == 0:
                print("\t".join(columns), file=out)
            print("\t".join("" if value is None else value for value in row), file=out)
        return len(rows)

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    @staticmethod
    def _materialize(result: CursorResult) -> Tuple[List[str], List[Row]]:
        columns = list(result.keys())
        rows = [[_as_text(value) for value in row] for row in result.fetchall()]
        return columns, rows

    def _run(
        self,
        statement: str,
        params: Optional[Mapping[str, Any]],
        consume: Callable[[CursorResult], T],
    ) -> T:
        connection = self.session.connection
        logger.debug("Executing statement: %s", statement, extra={"statement": statement})
        try:
            result = connection.execute(text(statement), dict(params or {}))
            value = consume(result)
        except IntegrityError as e:
            self._end_failed_statement()
            raise ConstraintViolationError(str(e.orig), statement=statement) from e
        except SQLAlchemyError as e:
            self._end_failed_statement()
            raise ExecutionError(str(getattr(e, "orig", None) or e), statement=statement) from e

        if not self.session.in_transaction_block:
            self.session.commit()
        return value

    def _end_failed_statement(self) -> None:
        # Inside a transaction block the enclosing ``Session.transaction``
        # performs the rollback.
        if not self.session.in_transaction_block:
            self.session.rollback()


def column_values(rows: Sequence[Row], index: int = 0) -> List[Optional[str]]:
    """Pick one column out of materialized rows."""
    return [row[index] for row in rows]
