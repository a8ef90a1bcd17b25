"""UI (Pilot) tests for the connections pane app."""

from __future__ import annotations

import json

import pytest
from textual.widgets import Input, OptionList

from connpane.app import ConnpaneApp
from connpane.domains.connections.app.session import SessionStore
from connpane.domains.connections.domain.pane import (
    KEY_EXPLORED_CONNECTION,
    MODULE_CONNECTIONS,
    EnsureHeight,
    PaneState,
)
from connpane.shared.ui.screens.confirm import ConfirmScreen
from connpane.shared.ui.screens.error import ErrorScreen


@pytest.fixture
def state_path(tmp_path):
    return tmp_path / "client_state.json"


def _app(session_path, state_path) -> ConnpaneApp:
    return ConnpaneApp(session_path=session_path, state_path=state_path)


class TestListing:
    @pytest.mark.asyncio
    async def test_shows_session_connections(self, write_session, sample_connections, state_path):
        app = _app(write_session(sample_connections, [sample_connections[0].id]), state_path)

        async with app.run_test(size=(100, 35)) as pilot:
            await pilot.pause()

            assert app.pane.visible_connections == sample_connections
            assert app.pane.active_connections == {sample_connections[0].id}
            assert app.pane.query_one("#connections-list", OptionList).option_count == 3
            assert app.presenter.state is PaneState.LIST

    @pytest.mark.asyncio
    async def test_search_filters_by_host(self, write_session, sample_connections, state_path):
        app = _app(write_session(sample_connections), state_path)

        async with app.run_test(size=(100, 35)) as pilot:
            app.pane.query_one("#connections-search", Input).value = "prod db"
            await pilot.pause()

            assert [c.host for c in app.pane.visible_connections] == ["prod-db.acme.com"]

            app.pane.query_one("#connections-search", Input).value = ""
            await pilot.pause()

            assert app.pane.visible_connections == sample_connections


class TestExplorer:
    @pytest.mark.asyncio
    async def test_enter_explores_and_escape_goes_back(self, write_session, sample_connections, state_path):
        app = _app(write_session(sample_connections), state_path)

        async with app.run_test(size=(100, 35)) as pilot:
            option_list = app.pane.query_one("#connections-list", OptionList)
            option_list.focus()
            option_list.highlighted = 1
            await pilot.pause()

            await pilot.press("enter")
            await pilot.pause()

            assert app.pane.is_exploring
            assert app.pane.height_hint is EnsureHeight.MAXIMIZED
            assert app.presenter.explored_connection == sample_connections[1]
            stored = json.loads(state_path.read_text())["persistent"][MODULE_CONNECTIONS]
            assert stored[KEY_EXPLORED_CONNECTION] == sample_connections[1].to_dict()

            await pilot.press("escape")
            await pilot.pause()

            assert not app.pane.is_exploring
            assert app.pane.height_hint is EnsureHeight.NORMAL
            stored = json.loads(state_path.read_text())["persistent"]
            assert KEY_EXPLORED_CONNECTION not in stored.get(MODULE_CONNECTIONS, {})

    @pytest.mark.asyncio
    async def test_reopens_persisted_explorer(self, write_session, sample_connections, state_path):
        state_path.write_text(
            json.dumps(
                {
                    "persistent": {
                        MODULE_CONNECTIONS: {KEY_EXPLORED_CONNECTION: sample_connections[2].to_dict()}
                    }
                }
            )
        )
        app = _app(write_session(sample_connections), state_path)

        async with app.run_test(size=(100, 35)) as pilot:
            await pilot.pause()

            assert app.pane.is_exploring
            assert app.presenter.explored_connection == sample_connections[2]


class TestCommands:
    @pytest.mark.asyncio
    async def test_new_connection_shows_error(self, write_session, sample_connections, state_path):
        app = _app(write_session(sample_connections), state_path)

        async with app.run_test(size=(100, 35)) as pilot:
            app.pane.query_one("#connections-list", OptionList).focus()
            await pilot.press("n")
            await pilot.pause()

            assert isinstance(app.screen, ErrorScreen)
            assert app.screen.message == "Not Yet Implemented"

    @pytest.mark.asyncio
    async def test_remove_without_connections_shows_error(self, write_session, state_path):
        app = _app(write_session([]), state_path)

        async with app.run_test(size=(100, 35)) as pilot:
            app.pane.query_one("#connections-list", OptionList).focus()
            await pilot.press("d")
            await pilot.pause()

            assert isinstance(app.screen, ErrorScreen)
            assert app.screen.message == "No connection currently selected."

    @pytest.mark.asyncio
    async def test_remove_confirmed_refreshes_from_backend(self, write_session, sample_connections, state_path):
        session_path = write_session(sample_connections)
        app = _app(session_path, state_path)

        async with app.run_test(size=(100, 35)) as pilot:
            option_list = app.pane.query_one("#connections-list", OptionList)
            option_list.focus()
            option_list.highlighted = 0
            await pilot.pause()

            await pilot.press("d")
            await pilot.pause()
            assert isinstance(app.screen, ConfirmScreen)

            await pilot.press("y")
            await pilot.pause()
            await pilot.pause()

            assert [c.host for c in app.pane.visible_connections] == ["dev-db.acme.com", "spark-local"]
            assert len(SessionStore(session_path).load()[0]) == 2

    @pytest.mark.asyncio
    async def test_remove_declined_keeps_everything(self, write_session, sample_connections, state_path):
        session_path = write_session(sample_connections)
        app = _app(session_path, state_path)

        async with app.run_test(size=(100, 35)) as pilot:
            option_list = app.pane.query_one("#connections-list", OptionList)
            option_list.focus()
            option_list.highlighted = 0
            await pilot.pause()

            await pilot.press("d")
            await pilot.pause()
            await pilot.press("n")
            await pilot.pause()

            assert not isinstance(app.screen, ConfirmScreen)
            assert app.pane.visible_connections == sample_connections
            assert len(SessionStore(session_path).load()[0]) == 3
