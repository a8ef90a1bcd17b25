"""Notifications exchanged between the session backend and the connections pane."""

from __future__ import annotations

from dataclasses import dataclass, field

from .connection import Connection, ConnectionId


@dataclass(frozen=True)
class ConnectionListChangedEvent:
    """The backend's full list of known connections was replaced."""

    connection_list: list[Connection] = field(default_factory=list)


@dataclass(frozen=True)
class ActiveConnectionsChangedEvent:
    """The set of live connections changed."""

    active_connections: list[ConnectionId] = field(default_factory=list)


@dataclass(frozen=True)
class ConnectionUpdatedEvent:
    """A single connection changed in place."""

    connection: Connection


@dataclass(frozen=True)
class ExploreConnectionEvent:
    """The user asked to open a connection in the explorer."""

    connection: Connection
