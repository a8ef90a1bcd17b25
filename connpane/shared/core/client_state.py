"""Client state store for small pieces of UI state that survive reloads.

Values live in slots addressed by ``(module, key)`` inside a scope. UI
components do not write slots directly: they register a :class:`StateValue`
that is seeded from the stored slot once, and is asked during each
:meth:`ClientState.save` cycle whether it changed and what to write.

The file is a JSON object keyed by scope name::

    {
      "persistent": {"connections-pane": {"exploredConnection": {...}}},
      "project_persistent": {}
    }
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any

from .store import CONFIG_DIR, JSONFileStore

logger = logging.getLogger(__name__)


class ClientStateScope(Enum):
    """How long a client state slot lives."""

    TEMPORARY = "temporary"  # Memory only, lost when the process exits
    PERSISTENT = "persistent"
    PROJECT_PERSISTENT = "project_persistent"


_DISK_SCOPES = (ClientStateScope.PERSISTENT, ClientStateScope.PROJECT_PERSISTENT)


class ClientState(JSONFileStore):
    """Scoped key/value slots backed by a JSON file."""

    def __init__(self, file_path: Path | None = None) -> None:
        super().__init__(file_path or CONFIG_DIR / "client_state.json")
        self._slots: dict[ClientStateScope, dict[str, dict[str, Any]]] = {scope: {} for scope in ClientStateScope}
        self._state_values: list[StateValue] = []

    def load(self) -> None:
        """Load persisted scopes from disk, replacing what is in memory."""
        data = self._read_json()
        if not isinstance(data, dict):
            data = {}
        for scope in _DISK_SCOPES:
            section = data.get(scope.value)
            if not isinstance(section, dict):
                section = {}
            self._slots[scope] = {
                module: dict(values) for module, values in section.items() if isinstance(values, dict)
            }
        logger.debug("Loaded client state from %s", self._file_path)

    def get(self, module: str, key: str, scope: ClientStateScope = ClientStateScope.PERSISTENT) -> Any:
        return self._slots[scope].get(module, {}).get(key)

    def set(
        self,
        module: str,
        key: str,
        value: Any,
        scope: ClientStateScope = ClientStateScope.PERSISTENT,
    ) -> None:
        """Set a slot in memory. ``None`` clears it. Call :meth:`save` to write."""
        section = self._slots[scope]
        if value is None:
            values = section.get(module)
            if values is not None:
                values.pop(key, None)
                if not values:
                    del section[module]
            return
        section.setdefault(module, {})[key] = value

    def register(self, state_value: StateValue) -> None:
        """Track a state value and seed it from its stored slot."""
        self._state_values.append(state_value)
        state_value.on_init(self.get(state_value.module, state_value.key, state_value.scope))

    def unregister(self, state_value: StateValue) -> None:
        if state_value in self._state_values:
            self._state_values.remove(state_value)

    def save(self) -> int:
        """Run the save cycle.

        Each registered value is asked ``has_changed()``; changed values are
        copied into their slots, and the file is rewritten when any disk
        scope was touched.

        Returns:
            Number of values that changed.
        """
        changed = 0
        touched_disk = False
        for state_value in list(self._state_values):
            if not state_value.has_changed():
                continue
            self.set(state_value.module, state_value.key, state_value.get_value(), state_value.scope)
            changed += 1
            if state_value.scope in _DISK_SCOPES:
                touched_disk = True
        if touched_disk:
            self._write_json({scope.value: self._slots[scope] for scope in _DISK_SCOPES})
            logger.debug("Wrote %d changed client state value(s) to %s", changed, self._file_path)
        return changed


class StateValue(ABC):
    """A piece of component state mirrored into a client state slot.

    Subclasses implement the three hooks; the value registers itself with
    the client state on construction, which calls :meth:`on_init` right away.
    """

    def __init__(
        self,
        module: str,
        key: str,
        scope: ClientStateScope,
        client_state: ClientState,
    ) -> None:
        self.module = module
        self.key = key
        self.scope = scope
        self._client_state = client_state
        client_state.register(self)

    def detach(self) -> None:
        self._client_state.unregister(self)

    @abstractmethod
    def on_init(self, value: Any) -> None:
        """Receive the stored value (or None) once at registration."""

    @abstractmethod
    def get_value(self) -> Any:
        """Return the JSON-serializable value to store."""

    @abstractmethod
    def has_changed(self) -> bool:
        """Return True if the value changed since it was last observed."""
