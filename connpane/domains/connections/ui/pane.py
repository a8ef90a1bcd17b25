"""Connections pane widget: a searchable list plus a single-connection explorer."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Input, OptionList, Static
from textual.widgets.option_list import Option
from rich.markup import escape

from connpane.domains.connections.domain.connection import Connection, ConnectionId
from connpane.domains.connections.domain.pane import EnsureHeight


class ConnectionsPane(Vertical):
    """View half of the connections pane.

    Holds no state of its own beyond what the presenter last pushed; user
    input is reported back as messages.
    """

    DEFAULT_CSS = """
    ConnectionsPane {
        height: 1fr;
        border: round $primary;
        border-title-color: $primary;
    }

    ConnectionsPane.maximized {
        height: 100%;
    }

    #connections-search {
        margin: 0 0 1 0;
    }

    #connections-list {
        height: 1fr;
        border: none;
    }

    #connection-explorer {
        display: none;
        height: 1fr;
        padding: 0 1;
    }

    ConnectionsPane.exploring #connection-explorer {
        display: block;
    }

    ConnectionsPane.exploring #connections-search,
    ConnectionsPane.exploring #connections-list {
        display: none;
    }

    #explorer-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    class SearchChanged(Message):
        def __init__(self, query: str) -> None:
            super().__init__()
            self.query = query

    class SelectionChanged(Message):
        def __init__(self, connection: Connection | None) -> None:
            super().__init__()
            self.connection = connection

    class ExploreRequested(Message):
        def __init__(self, connection: Connection) -> None:
            super().__init__()
            self.connection = connection

    class BackRequested(Message):
        pass

    def __init__(self, *, id: str | None = None, classes: str | None = None) -> None:
        super().__init__(id=id, classes=classes)
        self.border_title = "Connections"
        self._visible: list[Connection] = []
        # Rows currently in the option list, in option order
        self._rendered: list[Connection] = []
        self._active: set[ConnectionId] = set()
        self._explored: Connection | None = None
        self.height_hint = EnsureHeight.NORMAL

    def compose(self) -> ComposeResult:
        yield Input(placeholder="Filter by host", id="connections-search")
        yield OptionList(id="connections-list")
        with Vertical(id="connection-explorer"):
            yield Static("", id="explorer-title")
            yield Static("", id="explorer-details")
            yield Static("[dim]<esc> back to connections[/]", id="explorer-hint")

    def on_mount(self) -> None:
        self._render_list()
        if self._explored is not None:
            self._render_explorer(self._explored)

    # Display contract

    @property
    def visible_connections(self) -> list[Connection]:
        return list(self._visible)

    @property
    def active_connections(self) -> set[ConnectionId]:
        return set(self._active)

    @property
    def is_exploring(self) -> bool:
        return self.has_class("exploring")

    def set_connections(self, connections: list[Connection]) -> None:
        self._visible = list(connections)
        self._render_list()

    def set_active_connections(self, connections: list[ConnectionId]) -> None:
        self._active = set(connections)
        self._render_list()

    def get_selected_connection(self) -> Connection | None:
        if not self.is_mounted:
            return None
        highlighted = self.query_one("#connections-list", OptionList).highlighted
        if highlighted is None or highlighted >= len(self._rendered):
            return None
        return self._rendered[highlighted]

    def show_connection_explorer(self, connection: Connection) -> None:
        self._explored = connection
        self.add_class("exploring")
        self._render_explorer(connection)

    def show_connections_list(self) -> None:
        self._explored = None
        self.remove_class("exploring")
        if self.is_mounted:
            self.query_one("#connections-list", OptionList).focus()

    def ensure_height(self, height: EnsureHeight) -> None:
        self.height_hint = height
        self.set_class(height is EnsureHeight.MAXIMIZED, "maximized")

    # Rendering

    def _format_row(self, connection: Connection) -> str:
        marker = "[green]●[/]" if connection.id in self._active else " "
        return f"{marker} {escape(connection.get_display_name())}"

    def _render_list(self) -> None:
        if not self.is_mounted:
            return
        option_list = self.query_one("#connections-list", OptionList)
        selected = self.get_selected_connection()
        self._rendered = list(self._visible)
        option_list.clear_options()
        option_list.add_options(
            [Option(self._format_row(conn), id=f"connection-{index}") for index, conn in enumerate(self._visible)]
        )
        if selected is not None and selected in self._visible:
            option_list.highlighted = self._visible.index(selected)

    def _render_explorer(self, connection: Connection) -> None:
        if not self.is_mounted:
            return
        self.query_one("#explorer-title", Static).update(escape(connection.get_display_name()))
        lines = [f"[dim]type[/]    {escape(connection.type)}", f"[dim]host[/]    {escape(connection.host)}"]
        if connection.finder:
            lines.append(f"[dim]finder[/]  {escape(connection.finder)}")
        if connection.connect_code:
            lines.append(f"[dim]connect[/] {escape(connection.connect_code)}")
        status = "connected" if connection.id in self._active else "not connected"
        lines.append(f"[dim]status[/]  {status}")
        self.query_one("#explorer-details", Static).update("\n".join(lines))

    # Input handlers

    @on(Input.Changed, "#connections-search")
    def _handle_search_input(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.SearchChanged(event.value))

    @on(OptionList.OptionHighlighted, "#connections-list")
    def _handle_option_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        event.stop()
        self.post_message(self.SelectionChanged(self.get_selected_connection()))

    @on(OptionList.OptionSelected, "#connections-list")
    def _handle_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        if 0 <= event.option_index < len(self._rendered):
            self.post_message(self.ExploreRequested(self._rendered[event.option_index]))

    def action_back(self) -> None:
        if self.is_exploring:
            self.post_message(self.BackRequested())
