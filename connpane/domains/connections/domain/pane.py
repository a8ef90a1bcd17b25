"""Connections pane states and layout hints."""

from __future__ import annotations

from enum import Enum


class PaneState(Enum):
    """Which view the connections pane is showing."""

    LIST = "list"
    EXPLORING = "exploring"


class EnsureHeight(Enum):
    """Layout hint sent to the view when switching between list and explorer."""

    NORMAL = "normal"
    MAXIMIZED = "maximized"


class MessageKind(Enum):
    """Icon shown on a yes/no question."""

    QUESTION = "question"


# Client state slot holding the explored connection
MODULE_CONNECTIONS = "connections-pane"
KEY_EXPLORED_CONNECTION = "exploredConnection"

REMOVE_CONNECTION_TITLE = "Remove Connection"
REMOVE_CONNECTION_QUESTION = "Are you sure you want to remove the selected connection from the list?"
NO_CONNECTION_SELECTED = "No connection currently selected."
NOT_YET_IMPLEMENTED = "Not Yet Implemented"
