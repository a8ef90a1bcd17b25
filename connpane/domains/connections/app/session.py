"""Session snapshot and a local backend for the connections pane.

The session file is the backend's view of the world::

    {
      "connections": [{"id": {"type": "Spark", "host": "local"}, ...}, ...],
      "active_connections": [{"type": "Spark", "host": "local"}]
    }
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from connpane.domains.connections.domain.connection import Connection, ConnectionId
from connpane.domains.connections.domain.events import (
    ActiveConnectionsChangedEvent,
    ConnectionListChangedEvent,
)
from connpane.shared.core.client_state import ClientState
from connpane.shared.core.events import EventBus
from connpane.shared.core.exceptions import ConnectionPayloadError
from connpane.shared.core.protocols import ServerCallback
from connpane.shared.core.store import CONFIG_DIR, JSONFileStore

logger = logging.getLogger(__name__)


class SessionStore(JSONFileStore):
    """Store for the session snapshot (``~/.connpane/session.json`` by default)."""

    def __init__(self, file_path: Path | None = None) -> None:
        super().__init__(file_path or CONFIG_DIR / "session.json")

    def load(self) -> tuple[list[Connection], list[ConnectionId]]:
        """Load connections and active ids, skipping malformed entries.

        Returns:
            Tuple of (connections, active connection ids); both empty if the
            file is missing or invalid.
        """
        data = self._read_json()
        if not isinstance(data, dict):
            return [], []
        connections = _decode_all(data.get("connections"), Connection.from_dict, "connection")
        active = _decode_all(data.get("active_connections"), ConnectionId.from_dict, "active connection")
        return connections, active

    def save(self, connections: list[Connection], active: list[ConnectionId]) -> None:
        self._write_json(
            {
                "connections": [conn.to_dict() for conn in connections],
                "active_connections": [conn_id.to_dict() for conn_id in active],
            }
        )


def _decode_all(raw: Any, decode: Callable[[Any], Any], label: str) -> list[Any]:
    if not isinstance(raw, list):
        return []
    items = []
    for entry in raw:
        try:
            items.append(decode(entry))
        except ConnectionPayloadError as exc:
            logger.warning("Skipping %s in session file: %s", label, exc.reason)
    return items


@dataclass
class SessionInfo:
    """What the connections pane reads from the session when it starts."""

    connection_list: list[Connection] = field(default_factory=list)
    active_connections: list[ConnectionId] = field(default_factory=list)
    client_state: ClientState = field(default_factory=ClientState)

    @classmethod
    def load(cls, session_store: SessionStore, client_state: ClientState) -> SessionInfo:
        connections, active = session_store.load()
        client_state.load()
        return cls(connection_list=connections, active_connections=active, client_state=client_state)


def _run_now(callback: Callable[[], Any]) -> None:
    callback()


class LocalConnectionsServer:
    """Connections backend working directly on the session file.

    Requests are handed to ``schedule`` (the app passes ``App.call_later``),
    so they complete after the caller returns. On success the new snapshot
    is published on the event bus.
    """

    def __init__(
        self,
        session_store: SessionStore,
        event_bus: EventBus,
        schedule: Callable[[Callable[[], Any]], Any] | None = None,
    ) -> None:
        self._session_store = session_store
        self._event_bus = event_bus
        self._schedule = schedule or _run_now

    def remove_connection(self, connection_id: ConnectionId, callback: ServerCallback | None = None) -> None:
        self._schedule(lambda: self._remove(connection_id, callback))

    def _remove(self, connection_id: ConnectionId, callback: ServerCallback | None) -> None:
        try:
            connections, active = self._session_store.load()
            remaining = [conn for conn in connections if conn.id != connection_id]
            if len(remaining) == len(connections):
                self._finish(callback, False, f"Connection '{connection_id}' not found")
                return
            remaining_active = [conn_id for conn_id in active if conn_id != connection_id]
            self._session_store.save(remaining, remaining_active)
        except OSError as exc:
            self._finish(callback, False, str(exc))
            return

        self._event_bus.publish(ConnectionListChangedEvent(connection_list=remaining))
        if len(remaining_active) != len(active):
            self._event_bus.publish(ActiveConnectionsChangedEvent(active_connections=remaining_active))
        self._finish(callback, True, None)

    def _finish(self, callback: ServerCallback | None, succeeded: bool, error: str | None) -> None:
        if not succeeded:
            logger.warning("remove_connection failed: %s", error)
        if callback is not None:
            callback(succeeded, error)
