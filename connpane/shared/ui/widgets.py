"""Shared widgets for connpane."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from textual.containers import Container

if TYPE_CHECKING:
    from collections.abc import Callable

    from textual.widget import Widget


def flash_widget(
    widget: Widget,
    css_class: str = "flash",
    duration: float = 0.15,
    on_complete: Callable[[], None] | None = None,
) -> None:
    """Flash a widget by temporarily adding a CSS class.

    Args:
        widget: The widget to flash.
        css_class: The CSS class to add (default: "flash").
        duration: How long to show the flash in seconds (default: 0.15).
        on_complete: Optional callback to run after flash completes.
    """
    widget.add_class(css_class)

    def cleanup() -> None:
        widget.remove_class(css_class)
        if on_complete:
            on_complete()

    widget.set_timer(duration, cleanup)


def format_shortcuts(shortcuts: list[tuple[str, str]]) -> str:
    """Format (action, key) pairs as ``action: <key>`` joined by a dot."""

    def format_key(key: str) -> str:
        if key.startswith("<") and key.endswith(">"):
            return key
        return f"<{key}>"

    # Border subtitles collapse regular spaces, so pad the separator with non-breaking ones
    return "\u00a0·\u00a0".join(f"{action}: [bold]{format_key(key)}[/]" for action, key in shortcuts)


class Dialog(Container):
    """A styled modal dialog container with optional border title/subtitle.

    The shortcuts parameter accepts a list of (action, key) tuples that will be
    formatted consistently as "action: [bold]key[/]" in the subtitle.
    """

    DEFAULT_CSS = """
    Dialog {
        border: round $primary;
        background: $surface;
        color: $primary;
        padding: 1;
        height: auto;
        max-height: 85%;
        overflow-x: hidden;
        overflow-y: auto;
        scrollbar-visibility: hidden;

        border-title-align: left;
        border-title-color: $primary;
        border-title-background: $surface;
        border-title-style: bold;

        border-subtitle-align: right;
        border-subtitle-color: $primary;
        border-subtitle-background: $surface;
        border-subtitle-style: none;
    }
    """

    def __init__(
        self,
        title: str | None = None,
        shortcuts: list[tuple[str, str]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        if title is not None:
            self.border_title = title
        if shortcuts:
            self.border_subtitle = format_shortcuts(shortcuts)
