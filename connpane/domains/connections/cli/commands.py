"""CLI command handlers for session connections."""

from __future__ import annotations

from typing import Any

from connpane.domains.connections.app.filtering import filter_connections
from connpane.domains.connections.app.session import LocalConnectionsServer, SessionStore
from connpane.domains.connections.domain.connection import ConnectionId
from connpane.shared.core.events import EventBus


def cmd_connection_list(args: Any) -> int:
    """List session connections, optionally filtered by host."""
    store = SessionStore(args.session)
    connections, active = store.load()
    query = getattr(args, "filter", None) or ""
    shown = filter_connections(connections, query)
    if not shown:
        print("No matching connections." if query else "No connections in session.")
        return 0

    active_ids = set(active)
    print(f"{'':<2}{'Type':<15} {'Host':<40} {'Finder':<20}")
    print("-" * 78)
    for conn in shown:
        marker = "*" if conn.id in active_ids else " "
        host = conn.host[:38] + ".." if len(conn.host) > 40 else conn.host
        print(f"{marker:<2}{conn.type:<15} {host:<40} {conn.finder:<20}")
    return 0


def cmd_connection_remove(args: Any) -> int:
    """Remove a connection from the session."""
    store = SessionStore(args.session)
    server = LocalConnectionsServer(store, EventBus())
    outcome: dict[str, Any] = {}

    def on_done(succeeded: bool, error: str | None) -> None:
        outcome["succeeded"] = succeeded
        outcome["error"] = error

    connection_id = ConnectionId(type=args.type, host=args.host)
    server.remove_connection(connection_id, on_done)
    if not outcome.get("succeeded"):
        print(f"Error: {outcome.get('error') or 'removal did not complete'}")
        return 1
    print(f"Connection '{connection_id}' removed.")
    return 0
