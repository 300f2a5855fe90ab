import io

import pytest

from hotel_client import main as main_module
from hotel_client.config.settings import Settings


@pytest.fixture
def use_settings(monkeypatch):
    def install(**overrides):
        values = {"ENVIRONMENT": "testing", "LOG_TO_FILE": False}
        values.update(overrides)
        monkeypatch.setattr(main_module, "get_settings", lambda: Settings(**values))

    return install


def test_parser_positional_arguments():
    args = main_module.build_parser().parse_args(["hotel", "5433", "alice"])
    assert (args.dbname, args.port, args.user) == ("hotel", 5433, "alice")


def test_parser_defaults():
    args = main_module.build_parser().parse_args([])
    assert (args.dbname, args.port, args.user, args.host) == (None, None, None, None)
    assert not args.init_db


def test_connection_failure_exits_with_status_one(use_settings, capsys):
    use_settings(DB_CONNECT_ARGS={"connect_timeout": 2})

    status = main_module.main(["--host", "127.0.0.1", "hotel", "1", "nobody"])

    assert status == 1
    assert "Unable to connect to database" in capsys.readouterr().err


def test_runs_menu_and_disconnects(use_settings, monkeypatch, capsys):
    use_settings(DATABASE_URL="sqlite://")
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n"))

    status = main_module.main(["--init-db"])

    assert status == 0
    out = capsys.readouterr().out
    assert "User Interface" in out
    assert "MAIN MENU" in out
    assert "Disconnecting from database...Done" in out
