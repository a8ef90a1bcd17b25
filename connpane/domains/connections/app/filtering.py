"""Search filtering for the connections list."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from connpane.domains.connections.domain.connection import Connection


def tokenize(query: str) -> list[str]:
    """Split a search query into lower-cased, whitespace-delimited tokens.

    Args:
        query: Raw user text (e.g., "Prod  DB")

    Returns:
        Tokens in input order; an empty or blank query yields no tokens.
    """
    return query.lower().split()


def matches(connection: Connection, tokens: Iterable[str]) -> bool:
    """Check that every token occurs somewhere in the connection's host."""
    host = connection.host.lower()
    return all(token in host for token in tokens)


def filter_connections(connections: Sequence[Connection], query: str) -> list[Connection]:
    """Return the connections matching ``query``, keeping their order."""
    tokens = tokenize(query)
    if not tokens:
        return list(connections)
    return [conn for conn in connections if matches(conn, tokens)]


class FilterEngine:
    """Remembers the current query so the view can be re-derived after a refresh."""

    def __init__(self, query: str = "") -> None:
        self._query = query

    @property
    def query(self) -> str:
        return self._query

    def set_query(self, query: str | None) -> None:
        self._query = query or ""

    def apply(self, connections: Sequence[Connection]) -> list[Connection]:
        return filter_connections(connections, self._query)
