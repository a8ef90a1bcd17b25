"""Tests for the connpane CLI commands."""

from __future__ import annotations

from connpane.cli import build_parser, main
from connpane.domains.connections.app.session import SessionStore


def test_parser_defaults_to_tui() -> None:
    args = build_parser().parse_args([])

    assert args.command is None
    assert args.debug is False


def test_list_filters_by_host(write_session, sample_connections, capsys) -> None:
    path = write_session(sample_connections, [sample_connections[0].id])

    code = main(["--session", str(path), "connections", "list", "--filter", "acme db"])

    out = capsys.readouterr().out
    assert code == 0
    assert "prod-db.acme.com" in out
    assert "dev-db.acme.com" in out
    assert "spark-local" not in out


def test_list_reports_no_matches(write_session, sample_connections, capsys) -> None:
    path = write_session(sample_connections)

    code = main(["--session", str(path), "connections", "list", "-f", "oracle"])

    assert code == 0
    assert "No matching connections." in capsys.readouterr().out


def test_remove_connection(write_session, sample_connections, capsys) -> None:
    path = write_session(sample_connections)

    code = main(["--session", str(path), "connections", "remove", "Spark", "spark-local"])

    assert code == 0
    assert "removed" in capsys.readouterr().out
    assert [c.host for c in SessionStore(path).load()[0]] == ["prod-db.acme.com", "dev-db.acme.com"]


def test_remove_unknown_connection_fails(write_session, sample_connections, capsys) -> None:
    path = write_session(sample_connections)

    code = main(["--session", str(path), "connections", "remove", "Spark", "nowhere"])

    assert code == 1
    assert "not found" in capsys.readouterr().out
