"""connpane - A terminal connections pane for a session snapshot."""

from typing import TYPE_CHECKING, Any

__all__ = [
    "__version__",
    "main",
    "ConnpaneApp",
    "Connection",
    "ConnectionId",
    "ConnectionsPresenter",
]

try:
    from ._version import __version__
except ImportError:
    __version__ = "0.0.0.dev"

if TYPE_CHECKING:
    from .app import ConnpaneApp
    from .cli import main
    from connpane.domains.connections.app.presenter import ConnectionsPresenter
    from connpane.domains.connections.domain.connection import Connection, ConnectionId


def __getattr__(name: str) -> Any:
    """Lazy import for heavy modules to keep package import side-effect free."""
    if name == "main":
        from .cli import main

        return main
    if name == "ConnpaneApp":
        from .app import ConnpaneApp

        return ConnpaneApp
    if name == "ConnectionsPresenter":
        from connpane.domains.connections.app.presenter import ConnectionsPresenter

        return ConnectionsPresenter
    if name in {"Connection", "ConnectionId"}:
        from connpane.domains.connections.domain import connection

        return getattr(connection, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
