"""Textual application hosting the connections pane."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer

from connpane.domains.connections.app.presenter import ConnectionsPresenter
from connpane.domains.connections.app.session import LocalConnectionsServer, SessionInfo, SessionStore
from connpane.domains.connections.domain.events import ExploreConnectionEvent
from connpane.domains.connections.ui.pane import ConnectionsPane
from connpane.shared.core.client_state import ClientState
from connpane.shared.core.events import EventBus
from connpane.shared.ui.global_display import TextualGlobalDisplay

logger = logging.getLogger(__name__)


class ConnpaneApp(App):
    """Connections pane for a session snapshot."""

    TITLE = "connpane"

    BINDINGS = [
        Binding("n", "new_connection", "New"),
        Binding("d", "remove_connection", "Remove"),
        Binding("escape", "back", "Back"),
        Binding("q", "quit", "Quit"),
    ]

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    def __init__(
        self,
        session_path: Path | None = None,
        state_path: Path | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        super().__init__()
        self.session_store = SessionStore(session_path)
        self.client_state = ClientState(state_path)
        self.event_bus = event_bus or EventBus()
        self.presenter: ConnectionsPresenter | None = None

    @property
    def pane(self) -> ConnectionsPane:
        return self.query_one("#connections-pane", ConnectionsPane)

    def compose(self) -> ComposeResult:
        yield ConnectionsPane(id="connections-pane")
        yield Footer()

    def on_mount(self) -> None:
        session = SessionInfo.load(self.session_store, self.client_state)
        logger.info(
            "Loaded session %s with %d connection(s)",
            self.session_store.file_path,
            len(session.connection_list),
        )
        server = LocalConnectionsServer(self.session_store, self.event_bus, schedule=self.call_later)
        self.presenter = ConnectionsPresenter(
            self.pane,
            server,
            TextualGlobalDisplay(self),
            session,
            self.event_bus,
        )
        self.pane.query_one("#connections-list").focus()

    def on_unmount(self) -> None:
        if self.presenter is None:
            return
        self._save_client_state()
        self.presenter.detach()

    def _save_client_state(self) -> None:
        try:
            self.client_state.save()
        except OSError as exc:
            logger.warning("Could not save client state: %s", exc)

    # Pane messages

    def on_connections_pane_search_changed(self, message: ConnectionsPane.SearchChanged) -> None:
        if self.presenter is not None:
            self.presenter.on_search_filter_changed(message.query)

    def on_connections_pane_selection_changed(self, message: ConnectionsPane.SelectionChanged) -> None:
        if self.presenter is not None:
            self.presenter.on_selection_changed(message.connection)

    def on_connections_pane_explore_requested(self, message: ConnectionsPane.ExploreRequested) -> None:
        self.event_bus.publish(ExploreConnectionEvent(connection=message.connection))
        self._save_client_state()

    def on_connections_pane_back_requested(self, message: ConnectionsPane.BackRequested) -> None:
        if self.presenter is not None:
            self.presenter.on_back_to_connections()
            self._save_client_state()

    # Commands

    def action_new_connection(self) -> None:
        if self.presenter is not None:
            self.presenter.on_new_connection()

    def action_remove_connection(self) -> None:
        if self.presenter is not None:
            self.presenter.on_remove_connection()

    def action_back(self) -> None:
        self.pane.action_back()
