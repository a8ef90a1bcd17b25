"""In-memory store of the session's connections for the connections pane."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from connpane.domains.connections.app.filtering import FilterEngine

if TYPE_CHECKING:
    from connpane.domains.connections.domain.connection import Connection, ConnectionId
    from connpane.shared.core.protocols import (
        ConnectionsDisplayProtocol,
        ConnectionsServerProtocol,
        ServerCallback,
    )

logger = logging.getLogger(__name__)


class ConnectionStore:
    """Holds every known connection plus the ids of the live ones.

    Both collections are replaced wholesale from backend snapshots; nothing
    here mutates them piecemeal. The displayed list is always re-derived from
    the full list and the filter's current query.
    """

    def __init__(
        self,
        display: ConnectionsDisplayProtocol,
        server: ConnectionsServerProtocol,
        filter_engine: FilterEngine | None = None,
    ) -> None:
        self._display = display
        self._server = server
        self._filter = filter_engine or FilterEngine()
        self._all_connections: list[Connection] = []
        self._active_connections: list[ConnectionId] = []

    @property
    def connections(self) -> list[Connection]:
        return list(self._all_connections)

    @property
    def active_connections(self) -> list[ConnectionId]:
        return list(self._active_connections)

    @property
    def filter_engine(self) -> FilterEngine:
        return self._filter

    def find(self, connection_id: ConnectionId) -> Connection | None:
        for conn in self._all_connections:
            if conn.id == connection_id:
                return conn
        return None

    def is_active(self, connection_id: ConnectionId) -> bool:
        return connection_id in self._active_connections

    def filtered(self) -> list[Connection]:
        """Connections matching the current query."""
        return self._filter.apply(self._all_connections)

    def replace_all(self, connections: Iterable[Connection]) -> None:
        """Replace the known connections and push the filtered list to the view.

        Duplicate ids keep their first occurrence.
        """
        seen: set[ConnectionId] = set()
        replacement: list[Connection] = []
        for conn in connections:
            if conn.id in seen:
                logger.debug("Dropping duplicate connection %s", conn.id)
                continue
            seen.add(conn.id)
            replacement.append(conn)
        self._all_connections = replacement
        self._display.set_connections(self.filtered())

    def replace_active(self, connection_ids: Iterable[ConnectionId]) -> None:
        """Replace the live connection ids and push all of them to the view."""
        self._active_connections = list(connection_ids)
        self._display.set_active_connections(list(self._active_connections))

    def apply_query(self, query: str | None) -> None:
        """Change the search query and push the newly filtered list."""
        self._filter.set_query(query)
        self._display.set_connections(self.filtered())

    def remove(self, connection_id: ConnectionId, callback: ServerCallback | None = None) -> None:
        """Ask the backend to remove a connection.

        The local list is left alone; it catches up when the backend sends
        the next connection list.
        """

        def on_done(succeeded: bool, error: str | None) -> None:
            if succeeded:
                logger.debug("Removal of %s acknowledged", connection_id)
            else:
                logger.warning("Removal of %s failed: %s", connection_id, error)
            if callback is not None:
                callback(succeeded, error)

        logger.info("Requesting removal of connection %s", connection_id)
        self._server.remove_connection(connection_id, on_done)
