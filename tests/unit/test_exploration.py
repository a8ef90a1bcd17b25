"""Tests for exploration state and its change tracking."""

from __future__ import annotations

from connpane.domains.connections.app.exploration import ExplorationState, ExploredConnectionStateValue
from connpane.domains.connections.domain.pane import (
    KEY_EXPLORED_CONNECTION,
    MODULE_CONNECTIONS,
    EnsureHeight,
    PaneState,
)


class TestExploreAndBack:
    def test_explore_shows_explorer_and_maximizes(self, display, make_connection):
        state = ExplorationState(display)
        conn = make_connection("local")

        state.explore(conn)

        assert state.state is PaneState.EXPLORING
        assert state.explored is conn
        assert display.explorer is conn
        assert display.heights == [EnsureHeight.MAXIMIZED]

    def test_back_returns_to_list_with_normal_height(self, display, make_connection):
        state = ExplorationState(display)
        state.explore(make_connection("local"))

        state.back()

        assert state.state is PaneState.LIST
        assert state.explored is None
        assert display.calls[-2:] == ["show_connections_list", "ensure_height"]
        assert display.heights[-1] is EnsureHeight.NORMAL

    def test_explore_while_exploring_replaces_target(self, display, make_connection):
        state = ExplorationState(display)
        first = make_connection("one")
        second = make_connection("two")

        state.explore(first)
        state.explore(second)

        assert state.explored is second
        assert "show_connections_list" not in display.calls


class TestHasChanged:
    def test_false_initially(self, display):
        assert ExplorationState(display).has_changed() is False

    def test_true_once_per_transition(self, display, make_connection):
        state = ExplorationState(display)

        state.explore(make_connection("local"))
        assert state.has_changed() is True
        assert state.has_changed() is False

        state.back()
        assert state.has_changed() is True
        assert state.has_changed() is False

    def test_identity_not_equality(self, display, make_connection):
        state = ExplorationState(display)
        state.explore(make_connection("local"))
        state.has_changed()

        state.explore(make_connection("local"))

        assert state.has_changed() is True

    def test_same_object_again_is_not_a_change(self, display, make_connection):
        state = ExplorationState(display)
        conn = make_connection("local")
        state.explore(conn)
        state.has_changed()

        state.explore(conn)

        assert state.has_changed() is False

    def test_explore_back_explore_signals_each_transition(self, display, make_connection):
        state = ExplorationState(display)
        conn = make_connection("local")
        signals = []

        state.explore(conn)
        signals.append(state.has_changed())
        state.back()
        signals.append(state.has_changed())
        state.explore(conn)
        signals.append(state.has_changed())

        assert signals == [True, True, True]

    def test_changes_between_checks_collapse(self, display, make_connection):
        state = ExplorationState(display)
        conn = make_connection("local")

        state.explore(conn)
        state.back()

        assert state.has_changed() is False


class TestRestore:
    def test_restore_opens_explorer_without_dirtying(self, display, make_connection):
        state = ExplorationState(display)
        conn = make_connection("local")

        state.restore(conn)

        assert state.explored is conn
        assert display.explorer is conn
        assert display.heights == []
        assert state.has_changed() is False

    def test_restore_none_stays_in_list(self, display):
        state = ExplorationState(display)

        state.restore(None)

        assert state.state is PaneState.LIST
        assert display.calls == []


class TestExploredConnectionStateValue:
    def test_seeds_from_stored_slot(self, display, client_state, make_connection):
        conn = make_connection("local", finder="spark_finder")
        client_state.set(MODULE_CONNECTIONS, KEY_EXPLORED_CONNECTION, conn.to_dict())
        state = ExplorationState(display)

        ExploredConnectionStateValue(state, client_state)

        assert state.explored == conn
        assert state.explored.finder == "spark_finder"
        assert display.explorer == conn
        assert client_state.save() == 0

    def test_bad_stored_value_is_discarded(self, display, client_state):
        client_state.set(MODULE_CONNECTIONS, KEY_EXPLORED_CONNECTION, {"id": "nonsense"})
        state = ExplorationState(display)

        ExploredConnectionStateValue(state, client_state)

        assert state.state is PaneState.LIST

    def test_save_writes_only_when_changed(self, display, client_state, make_connection):
        state = ExplorationState(display)
        ExploredConnectionStateValue(state, client_state)
        conn = make_connection("local")

        assert client_state.save() == 0
        assert not client_state.exists()

        state.explore(conn)
        assert client_state.save() == 1
        assert client_state.get(MODULE_CONNECTIONS, KEY_EXPLORED_CONNECTION) == conn.to_dict()

        assert client_state.save() == 0

        state.back()
        assert client_state.save() == 1
        assert client_state.get(MODULE_CONNECTIONS, KEY_EXPLORED_CONNECTION) is None
