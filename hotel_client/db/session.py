"""
Database session management.

A ``Session`` owns exactly one live connection to the relational store for
the lifetime of the client. There is no pooling and no reconnection: a
dropped connection surfaces as an ``ExecutionError`` on the next statement.
"""
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, Union

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Connection, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from hotel_client.core.exceptions import DatabaseConnectionError, ExecutionError

logger = logging.getLogger(__name__)

SLOW_QUERY_SECONDS = 0.5


def _before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Log query execution time - start timer"""
    conn.info.setdefault('query_start_time', []).append(time.time())


def _after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Log query execution time - stop timer and log if slow query"""
    total_time = time.time() - conn.info['query_start_time'].pop()

    if total_time > SLOW_QUERY_SECONDS:
        logger.warning(
            f"Slow query detected ({total_time:.4f}s): "
            f"{statement[:100]}... with params {parameters}"
        )


def _handle_error(exception_context):
    """Drop the start time of a statement that failed"""
    conn = exception_context.connection
    if conn is not None and conn.info.get('query_start_time'):
        conn.info['query_start_time'].pop()


class Session:
    """
    Single-connection database session.

    Lifecycle: ``open()`` or fail with ``DatabaseConnectionError``, execute
    statements through a ``StatementExecutor``, ``close()`` (idempotent).

    Statements outside a ``transaction()`` block are committed as soon as
    they finish.
    """

    def __init__(
        self,
        url: Union[str, URL],
        *,
        echo: bool = False,
        connect_args: Optional[Dict[str, Any]] = None,
    ):
        try:
            self.url = make_url(url)
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(f"Invalid database URL: {e}") from e
        self.echo = echo
        self.connect_args = connect_args or {}
        self._engine: Optional[Engine] = None
        self._connection: Optional[Connection] = None
        self._in_transaction_block = False

    def __repr__(self) -> str:
        return f"Session(url='{self.url.render_as_string(hide_password=True)}', open={self.is_open})"

    def __enter__(self) -> "Session":
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def open(self) -> "Session":
        """Open the physical connection."""
        if self._connection is not None:
            return self

        safe_url = self.url.render_as_string(hide_password=True)
        logger.info(f"Connecting to database {safe_url}")
        try:
            engine = create_engine(
                self.url,
                poolclass=NullPool,
                echo=self.echo,
                connect_args=self.connect_args,
            )
            event.listen(engine, "before_cursor_execute", _before_cursor_execute)
            event.listen(engine, "after_cursor_execute", _after_cursor_execute)
            event.listen(engine, "handle_error", _handle_error)
            connection = engine.connect()
        except (SQLAlchemyError, ImportError) as e:
            logger.error(f"Unable to connect to database {safe_url}: {e}")
            raise DatabaseConnectionError(
                f"Unable to connect to database: {e}",
                database=self.url.database,
            ) from e

        self._engine = engine
        self._connection = connection
        logger.info("Database connection established")
        return self

    def close(self) -> None:
        """
        Close the physical connection if it is open.

        Safe to call on a never-opened or already-closed session; never raises.
        """
        connection, engine = self._connection, self._engine
        self._connection = None
        self._engine = None
        self._in_transaction_block = False

        if connection is None:
            return

        try:
            connection.close()
            engine.dispose()
            logger.info("Database connection closed")
        except SQLAlchemyError as e:
            logger.warning(f"Error while closing database connection: {e}")

    # ------------------------------------------------------------------ #
    # Accessors
    # ------------------------------------------------------------------ #

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    @property
    def connection(self) -> Connection:
        """The live connection; raises ``ExecutionError`` when closed."""
        if self._connection is None:
            raise ExecutionError("Session is not open")
        return self._connection

    @property
    def dialect_name(self) -> str:
        return self.url.get_backend_name()

    @property
    def in_transaction_block(self) -> bool:
        return self._in_transaction_block

    # ------------------------------------------------------------------ #
    # Transaction management
    # ------------------------------------------------------------------ #

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """
        Group the statements of the block into one database transaction.

        Commits on success, rolls back on any exception. A nested block
        joins the enclosing transaction.

        Example:
            with session.transaction():
                executor.execute_update(...)
                executor.execute_update(...)
        """
        connection = self.connection
        if self._in_transaction_block:
            yield connection
            return

        if connection.in_transaction():
            connection.commit()

        self._in_transaction_block = True
        try:
            yield connection
            connection.commit()
        except SQLAlchemyError as e:
            self.rollback()
            logger.error(f"Transaction rollback: {e}")
            raise ExecutionError(f"Transaction failed: {e}") from e
        except Exception:
            self.rollback()
            raise
        finally:
            self._in_transaction_block = False

    def commit(self) -> None:
        """Commit the implicit transaction of a single statement."""
        try:
            self.connection.commit()
        except SQLAlchemyError as e:
            self.rollback()
            raise ExecutionError(f"Commit failed: {e}") from e

    def rollback(self) -> None:
        """Roll back the current transaction, logging rollback failures."""
        if self._connection is None:
            return
        try:
            self._connection.rollback()
        except SQLAlchemyError as e:
            logger.warning(f"Rollback failed: {e}")


def build_url(
    host: str,
    port: Union[int, str, None],
    database: str,
    user: str,
    password: Optional[str],
    driver: str = "postgresql+psycopg2",
) -> URL:
    """Build a connection URL from its parts."""
    return URL.create(
        driver,
        username=user,
        password=password or None,
        host=host,
        port=int(port) if port else None,
        database=database,
    )


def open_session(
    host: str,
    port: Union[int, str, None],
    database: str,
    user: str,
    password: Optional[str] = None,
    *,
    driver: str = "postgresql+psycopg2",
    echo: bool = False,
    connect_args: Optional[Dict[str, Any]] = None,
) -> Session:
    """Open a session or fail with ``DatabaseConnectionError``."""
    url = build_url(host, port, database, user, password, driver)
    return Session(url, echo=echo, connect_args=connect_args).open()
