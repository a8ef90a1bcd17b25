"""Tracking and persisting the connection open in the explorer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from connpane.domains.connections.domain.connection import Connection
from connpane.domains.connections.domain.pane import (
    KEY_EXPLORED_CONNECTION,
    MODULE_CONNECTIONS,
    EnsureHeight,
    PaneState,
)
from connpane.shared.core.client_state import ClientState, ClientStateScope, StateValue
from connpane.shared.core.exceptions import ConnectionPayloadError

if TYPE_CHECKING:
    from connpane.shared.core.protocols import ConnectionsDisplayProtocol

logger = logging.getLogger(__name__)


class ExplorationState:
    """The single connection shown in the explorer, or None for the list view.

    Change tracking is by object identity: the persisted slot is rewritten
    whenever the explored object differs from the one last observed, even if
    both describe the same connection.
    """

    def __init__(self, display: ConnectionsDisplayProtocol) -> None:
        self._display = display
        self._explored: Connection | None = None
        self._last_observed: Connection | None = None

    @property
    def explored(self) -> Connection | None:
        return self._explored

    @property
    def state(self) -> PaneState:
        return PaneState.LIST if self._explored is None else PaneState.EXPLORING

    def explore(self, connection: Connection) -> None:
        """Open ``connection`` in the explorer and maximize the pane."""
        logger.debug("Exploring connection %s", connection.id)
        self._show(connection)
        self._display.ensure_height(EnsureHeight.MAXIMIZED)

    def back(self) -> None:
        """Close the explorer and return to the connections list."""
        logger.debug("Returning to connections list")
        self._explored = None
        self._display.show_connections_list()
        self._display.ensure_height(EnsureHeight.NORMAL)

    def restore(self, connection: Connection | None) -> None:
        """Adopt a persisted value without marking it as changed.

        A restored connection is reopened in the explorer; the layout hint is
        left to the surrounding frame, which restores its own sizes.
        """
        self._explored = connection
        self._last_observed = connection
        if connection is not None:
            logger.debug("Restoring explored connection %s", connection.id)
            self._show(connection)

    def has_changed(self) -> bool:
        """Report whether the explored object changed since last asked.

        Answering marks the current object as observed.
        """
        if self._last_observed is not self._explored:
            self._last_observed = self._explored
            return True
        return False

    def _show(self, connection: Connection) -> None:
        self._explored = connection
        self._display.show_connection_explorer(connection)


class ExploredConnectionStateValue(StateValue):
    """Mirrors :class:`ExplorationState` into the client state slot."""

    def __init__(
        self,
        exploration: ExplorationState,
        client_state: ClientState,
        scope: ClientStateScope = ClientStateScope.PERSISTENT,
    ) -> None:
        self._exploration = exploration
        super().__init__(MODULE_CONNECTIONS, KEY_EXPLORED_CONNECTION, scope, client_state)

    def on_init(self, value: Any) -> None:
        connection: Connection | None = None
        if value is not None:
            try:
                connection = Connection.from_dict(value)
            except ConnectionPayloadError as exc:
                logger.warning("Discarding stored explored connection: %s", exc)
        self._exploration.restore(connection)

    def get_value(self) -> dict[str, Any] | None:
        explored = self._exploration.explored
        return explored.to_dict() if explored is not None else None

    def has_changed(self) -> bool:
        return self._exploration.has_changed()
