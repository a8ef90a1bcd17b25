"""Protocols for the collaborators of the connections presenter.

These let the presenter be driven by the Textual UI in the app and by
simple recording fakes in tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from connpane.domains.connections.domain.connection import Connection, ConnectionId
    from connpane.domains.connections.domain.pane import EnsureHeight, MessageKind
    from connpane.shared.core.client_state import ClientState


# Completion callback for server requests: (succeeded, error message or None)
ServerCallback = Callable[[bool, "str | None"], None]


@runtime_checkable
class ConnectionsDisplayProtocol(Protocol):
    """The view the connections presenter drives."""

    def set_connections(self, connections: list[Connection]) -> None:
        """Show the (filtered) list of connections."""
        ...

    def set_active_connections(self, connections: list[ConnectionId]) -> None:
        """Mark which connections are live."""
        ...

    def get_selected_connection(self) -> Connection | None:
        """Return the connection under the cursor, if any."""
        ...

    def show_connection_explorer(self, connection: Connection) -> None:
        ...

    def show_connections_list(self) -> None:
        ...

    def ensure_height(self, height: EnsureHeight) -> None:
        """Ask the surrounding layout to grow or restore the pane."""
        ...


@runtime_checkable
class GlobalDisplayProtocol(Protocol):
    """Application-wide message and dialog capability."""

    def show_error_message(self, title: str, message: str) -> None:
        ...

    def show_yes_no_message(
        self,
        kind: MessageKind,
        title: str,
        message: str,
        on_yes: Callable[[], None],
        yes_is_default: bool = True,
    ) -> None:
        """Ask a yes/no question; ``on_yes`` runs only when the user says yes."""
        ...


@runtime_checkable
class ConnectionsServerProtocol(Protocol):
    """Backend operations on the session's connections."""

    def remove_connection(self, connection_id: ConnectionId, callback: ServerCallback | None = None) -> None:
        """Request removal; completes later via ``callback``."""
        ...


@runtime_checkable
class SessionInfoProtocol(Protocol):
    """Snapshot of session state read once when the presenter starts."""

    @property
    def connection_list(self) -> list[Connection]:
        ...

    @property
    def active_connections(self) -> list[ConnectionId]:
        ...

    @property
    def client_state(self) -> ClientState:
        ...
