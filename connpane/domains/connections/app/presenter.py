"""Presenter for the connections pane.

Routes backend notifications and user actions into the connection store,
the search filter and the exploration state, and pushes the results to the
view. The view and every backend collaborator are injected, see
:mod:`connpane.shared.core.protocols`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from connpane.domains.connections.app.exploration import ExplorationState, ExploredConnectionStateValue
from connpane.domains.connections.domain.events import (
    ActiveConnectionsChangedEvent,
    ConnectionListChangedEvent,
    ConnectionUpdatedEvent,
    ExploreConnectionEvent,
)
from connpane.domains.connections.domain.pane import (
    NO_CONNECTION_SELECTED,
    NOT_YET_IMPLEMENTED,
    REMOVE_CONNECTION_QUESTION,
    REMOVE_CONNECTION_TITLE,
    MessageKind,
    PaneState,
)
from connpane.domains.connections.store.connections import ConnectionStore

if TYPE_CHECKING:
    from connpane.domains.connections.domain.connection import Connection, ConnectionId
    from connpane.shared.core.events import EventBus, HandlerRegistration
    from connpane.shared.core.protocols import (
        ConnectionsDisplayProtocol,
        ConnectionsServerProtocol,
        GlobalDisplayProtocol,
        SessionInfoProtocol,
    )

logger = logging.getLogger(__name__)


class ConnectionsPresenter:
    """Keeps the connections pane in sync with the session."""

    def __init__(
        self,
        display: ConnectionsDisplayProtocol,
        server: ConnectionsServerProtocol,
        global_display: GlobalDisplayProtocol,
        session: SessionInfoProtocol,
        event_bus: EventBus | None = None,
    ) -> None:
        self._display = display
        self._global_display = global_display
        self._store = ConnectionStore(display, server)
        self._exploration = ExplorationState(display)
        self._selected: Connection | None = None
        self._registrations: list[HandlerRegistration] = []

        if event_bus is not None:
            self._registrations = [
                event_bus.subscribe(ConnectionListChangedEvent, self.on_connection_list_changed),
                event_bus.subscribe(ActiveConnectionsChangedEvent, self.on_active_connections_changed),
                event_bus.subscribe(ConnectionUpdatedEvent, self.on_connection_updated),
                event_bus.subscribe(ExploreConnectionEvent, self.on_explore_connection),
            ]

        self._store.replace_all(session.connection_list)
        self._store.replace_active(session.active_connections)

        # Reopens the explorer if a connection was being explored before the reload
        self._explored_state_value = ExploredConnectionStateValue(self._exploration, session.client_state)

    @property
    def store(self) -> ConnectionStore:
        return self._store

    @property
    def exploration(self) -> ExplorationState:
        return self._exploration

    @property
    def state(self) -> PaneState:
        return self._exploration.state

    @property
    def explored_connection(self) -> Connection | None:
        return self._exploration.explored

    @property
    def selected_connection(self) -> Connection | None:
        return self._selected

    @property
    def search_query(self) -> str:
        return self._store.filter_engine.query

    def detach(self) -> None:
        """Stop receiving events and stop persisting the explored connection."""
        for registration in self._registrations:
            registration.remove()
        self._registrations = []
        self._explored_state_value.detach()

    # Backend notifications

    def on_connection_list_changed(self, event: ConnectionListChangedEvent) -> None:
        logger.debug("Connection list changed (%d connections)", len(event.connection_list))
        self._store.replace_all(event.connection_list)

    def on_active_connections_changed(self, event: ActiveConnectionsChangedEvent) -> None:
        logger.debug("Active connections changed (%d active)", len(event.active_connections))
        self._store.replace_active(event.active_connections)

    def on_connection_updated(self, event: ConnectionUpdatedEvent) -> None:
        # Reserved: list refreshes arrive through on_connection_list_changed
        logger.debug("Ignoring update for connection %s", event.connection.id)

    # View notifications

    def on_search_filter_changed(self, query: str) -> None:
        self._store.apply_query(query)

    def on_selection_changed(self, connection: Connection | None) -> None:
        self._selected = connection

    def on_explore_connection(self, event: ExploreConnectionEvent) -> None:
        self._exploration.explore(event.connection)

    def on_back_to_connections(self) -> None:
        self._exploration.back()

    # Commands

    def on_new_connection(self) -> None:
        self._global_display.show_error_message("Error", NOT_YET_IMPLEMENTED)

    def on_remove_connection(self) -> None:
        connection = self._display.get_selected_connection()
        if connection is None:
            self._global_display.show_error_message(REMOVE_CONNECTION_TITLE, NO_CONNECTION_SELECTED)
            return

        connection_id: ConnectionId = connection.id
        self._global_display.show_yes_no_message(
            MessageKind.QUESTION,
            REMOVE_CONNECTION_TITLE,
            REMOVE_CONNECTION_QUESTION,
            lambda: self._store.remove(connection_id),
            True,
        )
