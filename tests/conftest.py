"""Pytest fixtures for connpane tests."""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

_TEST_CONFIG_DIR = Path(tempfile.mkdtemp(prefix="connpane-test-config-"))
os.environ.setdefault("CONNPANE_CONFIG_DIR", str(_TEST_CONFIG_DIR))

from connpane.domains.connections.app.session import SessionInfo  # noqa: E402
from connpane.domains.connections.domain.connection import Connection, ConnectionId  # noqa: E402
from connpane.domains.connections.domain.pane import EnsureHeight, MessageKind  # noqa: E402
from connpane.shared.core.client_state import ClientState  # noqa: E402


def create_test_connection(host: str, conn_type: str = "Spark", **kwargs) -> Connection:
    return Connection(id=ConnectionId(type=conn_type, host=host), **kwargs)


class RecordingDisplay:
    """Connections view that records what the presenter pushes."""

    def __init__(self) -> None:
        self.connections: list[Connection] = []
        self.active: list[ConnectionId] = []
        self.selected: Connection | None = None
        self.explorer: Connection | None = None
        self.heights: list[EnsureHeight] = []
        self.calls: list[str] = []
        self.set_connections_calls = 0

    def set_connections(self, connections: list[Connection]) -> None:
        self.calls.append("set_connections")
        self.set_connections_calls += 1
        self.connections = list(connections)

    def set_active_connections(self, connections: list[ConnectionId]) -> None:
        self.calls.append("set_active_connections")
        self.active = list(connections)

    def get_selected_connection(self) -> Connection | None:
        return self.selected

    def show_connection_explorer(self, connection: Connection) -> None:
        self.calls.append("show_connection_explorer")
        self.explorer = connection

    def show_connections_list(self) -> None:
        self.calls.append("show_connections_list")
        self.explorer = None

    def ensure_height(self, height: EnsureHeight) -> None:
        self.calls.append("ensure_height")
        self.heights.append(height)


class RecordingGlobalDisplay:
    """Global display that records messages and answers questions with ``answer``."""

    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.errors: list[tuple[str, str]] = []
        self.questions: list[tuple[MessageKind, str, str]] = []

    def show_error_message(self, title: str, message: str) -> None:
        self.errors.append((title, message))

    def show_yes_no_message(
        self,
        kind: MessageKind,
        title: str,
        message: str,
        on_yes: Callable[[], None],
        yes_is_default: bool = True,
    ) -> None:
        self.questions.append((kind, title, message))
        if self.answer:
            on_yes()


class RecordingServer:
    """Connections backend that records removal requests without completing them."""

    def __init__(self) -> None:
        self.removed: list[ConnectionId] = []
        self.callbacks: list = []

    def remove_connection(self, connection_id: ConnectionId, callback=None) -> None:
        self.removed.append(connection_id)
        self.callbacks.append(callback)


@pytest.fixture
def make_connection():
    return create_test_connection


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def global_display() -> RecordingGlobalDisplay:
    return RecordingGlobalDisplay()


@pytest.fixture
def server() -> RecordingServer:
    return RecordingServer()


@pytest.fixture
def client_state(tmp_path: Path) -> ClientState:
    return ClientState(tmp_path / "client_state.json")


@pytest.fixture
def sample_connections() -> list[Connection]:
    return [
        create_test_connection("prod-db.acme.com", "Postgres"),
        create_test_connection("dev-db.acme.com", "Postgres"),
        create_test_connection("spark-local", "Spark"),
    ]


@pytest.fixture
def session(sample_connections, client_state) -> SessionInfo:
    return SessionInfo(
        connection_list=list(sample_connections),
        active_connections=[sample_connections[0].id],
        client_state=client_state,
    )


@pytest.fixture
def write_session(tmp_path: Path):
    """Write a session snapshot file and return its path."""

    def _write(connections: list[Connection], active: list[ConnectionId] | None = None) -> Path:
        path = tmp_path / "session.json"
        path.write_text(
            json.dumps(
                {
                    "connections": [conn.to_dict() for conn in connections],
                    "active_connections": [conn_id.to_dict() for conn_id in active or []],
                }
            )
        )
        return path

    return _write
