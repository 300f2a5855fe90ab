"""
Command line entry point.

    hotel-client [dbname] [port] [user]

Positional arguments override the database settings from the environment.
"""

import argparse
import sys
from typing import List, Optional

from hotel_client.cli import HotelMenu, InputSource
from hotel_client.config import get_settings, setup_logging
from hotel_client.config.settings import Settings
from hotel_client.core.exceptions import DatabaseConnectionError, DatabaseError
from hotel_client.db import Session, StatementExecutor, open_session
from hotel_client.db.init_db import init_db

GREETING = (
    "\n\n*******************************************************\n"
    "              User Interface                           \n"
    "*******************************************************\n"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hotel-client", description="Hotel booking database client")
    parser.add_argument("dbname", nargs="?", help="database name")
    parser.add_argument("port", nargs="?", type=int, help="database port")
    parser.add_argument("user", nargs="?", help="database user")
    parser.add_argument("--host", help="database host")
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="create missing tables before starting (development databases only)",
    )
    return parser


def connect(args: argparse.Namespace, settings: Settings) -> Session:
    """Open the session described by the arguments and settings."""
    overridden = any(value is not None for value in (args.dbname, args.port, args.user, args.host))
    if settings.DATABASE_URL and not overridden:
        return Session(
            settings.DATABASE_URL,
            echo=settings.DB_ECHO,
            connect_args=settings.DB_CONNECT_ARGS,
        ).open()

    return open_session(
        args.host or settings.DB_HOST,
        args.port or settings.DB_PORT,
        args.dbname or settings.DB_NAME,
        args.user or settings.DB_USER,
        settings.DB_PASSWORD,
        driver=settings.DB_DRIVER,
        echo=settings.DB_ECHO,
        connect_args=settings.DB_CONNECT_ARGS,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logger = setup_logging(settings)

    print(GREETING)
    try:
        session = connect(args, settings)
    except DatabaseConnectionError as e:
        print(e.message, file=sys.stderr)
        return 1

    try:
        if args.init_db:
            init_db(session)
        executor = StatementExecutor(session, out=sys.stdout)
        HotelMenu(executor, InputSource(sys.stdin, sys.stdout), sys.stdout, settings).run()
    except DatabaseError as e:
        logger.error(f"Unrecoverable database error: {e}")
        print(e.message, file=sys.stderr)
        return 1
    finally:
        print("Disconnecting from database...", end="")
        session.close()
        print("Done\n\nBye !")
    return 0


if __name__ == "__main__":
    sys.exit(main())
