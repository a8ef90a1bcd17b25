"""Global message display backed by Textual modal screens."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from connpane.shared.ui.screens.confirm import ConfirmScreen
from connpane.shared.ui.screens.error import ErrorScreen

if TYPE_CHECKING:
    from textual.app import App

    from connpane.domains.connections.domain.pane import MessageKind

logger = logging.getLogger(__name__)


class TextualGlobalDisplay:
    """Shows errors and yes/no questions as modal screens on an app."""

    def __init__(self, app: App) -> None:
        self._app = app

    def show_error_message(self, title: str, message: str) -> None:
        logger.info("%s: %s", title, message)
        self._app.push_screen(ErrorScreen(title, message))

    def show_yes_no_message(
        self,
        kind: MessageKind,
        title: str,
        message: str,
        on_yes: Callable[[], None],
        yes_is_default: bool = True,
    ) -> None:
        logger.debug("Asking %s question %r", kind.value, title)

        def on_answer(confirmed: bool | None) -> None:
            if confirmed:
                on_yes()

        self._app.push_screen(
            ConfirmScreen(title, message, yes_is_default=yes_is_default),
            on_answer,
        )
