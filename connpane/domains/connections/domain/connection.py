"""Connection domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from connpane.shared.core.exceptions import ConnectionPayloadError


@dataclass(frozen=True)
class ConnectionId:
    """Compound key identifying a connection: the driver type plus the host."""

    type: str
    host: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ConnectionId:
        if not isinstance(data, Mapping):
            raise ConnectionPayloadError("connection id must be an object", data)
        conn_type = data.get("type")
        host = data.get("host")
        if not isinstance(conn_type, str) or not isinstance(host, str):
            raise ConnectionPayloadError("connection id needs string 'type' and 'host'", data)
        return cls(type=conn_type, host=host)

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "host": self.host}

    def __str__(self) -> str:
        return f"{self.type}:{self.host}"


_KNOWN_KEYS = {"id", "finder", "connect_code", "disconnect_code", "last_used"}


@dataclass(eq=False)
class Connection:
    """A data-source endpoint known to the session.

    Two connections are equal when their ids are equal; everything besides the
    id is descriptive payload carried through to the view.
    """

    id: ConnectionId
    finder: str = ""
    connect_code: str = ""
    disconnect_code: str = ""
    last_used: float = 0.0
    # Keys we do not interpret, kept so a round trip loses nothing
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def host(self) -> str:
        return self.id.host

    @property
    def type(self) -> str:
        return self.id.type

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Connection):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Connection:
        """Create a Connection from a dict, with legacy flat-id support.

        Older payloads carry ``type`` and ``host`` at the top level instead of
        a nested ``id`` object.

        Raises:
            ConnectionPayloadError: If the payload has no usable id.
        """
        if not isinstance(data, Mapping):
            raise ConnectionPayloadError("connection must be an object", data)
        payload = dict(data)

        known = set(_KNOWN_KEYS)
        raw_id = payload.get("id")
        if raw_id is None:
            raw_id = {"type": payload.get("type"), "host": payload.get("host")}
            known.update({"type", "host"})
        conn_id = ConnectionId.from_dict(raw_id)

        last_used = payload.get("last_used", 0.0)
        try:
            last_used = float(last_used or 0.0)
        except (TypeError, ValueError):
            last_used = 0.0

        extra = {key: value for key, value in payload.items() if key not in known}
        return cls(
            id=conn_id,
            finder=str(payload.get("finder") or ""),
            connect_code=str(payload.get("connect_code") or ""),
            disconnect_code=str(payload.get("disconnect_code") or ""),
            last_used=last_used,
            extra=extra,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        data.update(
            {
                "id": self.id.to_dict(),
                "finder": self.finder,
                "connect_code": self.connect_code,
                "disconnect_code": self.disconnect_code,
                "last_used": self.last_used,
            }
        )
        return data

    def get_display_name(self) -> str:
        """Label used for list rows, e.g. ``Spark - local``."""
        return f"{self.type} - {self.host}" if self.type else self.host
