"""Tests for the command line entry point."""

import pytest

from fio_client import __main__ as cli
from fio_client.service import create_service, create_service_from_settings

from fakes import TOKEN, FakeSession, make_response, statement_json


@pytest.fixture
def session(monkeypatch):
    monkeypatch.setenv("FIO_TOKEN", TOKEN)
    monkeypatch.setattr(cli, "init_logging", lambda *args, **kwargs: None)
    fake = FakeSession()

    def fake_service(settings):
        return create_service(
            settings.access_token, min_request_interval=0, session=fake
        )

    monkeypatch.setattr(cli, "create_service_from_settings", fake_service)
    return fake


class TestCli:
    def test_last_transactions_summary(self, session, capsys):
        session.responses.append(make_response(200, statement_json()))

        code = cli.main(["last"])

        assert code == 0
        out = capsys.readouterr().out
        assert "2000000000/2010" in out
        assert "100.0" in out
        assert session.calls[0][0].endswith("/transactions.json")

    def test_raw_format(self, session, capsys):
        session.responses.append(make_response(200, "<xml/>"))

        code = cli.main(["by-id", "--statement-id", "1", "--year", "2024", "--format", "xml"])

        assert code == 0
        assert "<xml/>" in capsys.readouterr().out
        assert session.calls[0][0].endswith("/2024/1/transactions.xml")

    def test_range_requires_dates(self, session):
        assert cli.main(["range"]) == 1
        assert session.calls == []

    def test_reversed_range(self, session):
        code = cli.main(["range", "--start", "2024-05-02", "--end", "2024-05-01"])

        assert code == 1
        assert session.calls == []

    def test_failed_result(self, session, capsys):
        session.responses.append(make_response(404, "missing"))

        code = cli.main(["last-statement"])

        assert code == 1
        assert "404" in capsys.readouterr().out

    def test_invalid_movement_id(self, session):
        assert cli.main(["set-last-id", "0"]) == 1

    def test_set_last_date(self, session):
        session.responses.append(make_response(200, ""))

        assert cli.main(["set-last-date", "2024-05-01"]) == 0
        assert session.calls[0][0].endswith("/2024-05-01/")

    def test_bad_settings(self, monkeypatch, capsys):
        monkeypatch.setenv("FIO_TOKEN", "short")

        assert cli.main(["last"]) == 1
        assert "Error occurred while loading settings" in capsys.readouterr().err

    def test_unknown_format(self, session):
        with pytest.raises(SystemExit):
            cli.main(["last", "--format", "pdf"])

    def test_default_settings_build_service(self, monkeypatch):
        monkeypatch.setenv("FIO_TOKEN", TOKEN)
        monkeypatch.delenv("FIO_APP_TZ", raising=False)
        monkeypatch.delenv("FIO_MIN_REQUEST_INTERVAL", raising=False)
        monkeypatch.setattr(cli, "init_logging", lambda *args, **kwargs: None)
        fake = FakeSession([make_response(200, statement_json())])
        monkeypatch.setattr(
            cli,
            "create_service_from_settings",
            lambda settings: create_service_from_settings(settings, fake),
        )

        assert cli.main(["last"]) == 0
        assert len(fake.calls) == 1

    def test_interval_below_bank_limit(self, monkeypatch, capsys):
        monkeypatch.setenv("FIO_TOKEN", TOKEN)
        monkeypatch.setenv("FIO_MIN_REQUEST_INTERVAL", "0")

        assert cli.main(["last"]) == 1
        assert "min_request_interval" in capsys.readouterr().err
