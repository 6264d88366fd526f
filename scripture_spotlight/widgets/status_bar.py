"""Status bar widget."""

from typing import Optional

from rich.text import Text
from textual.widgets import Static

DEFAULT_HINT = "⏎ open  ↑/↓ history  esc quit"


class StatusBar(Static):
    """Status bar showing the last result or keybinding hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._message: Optional[str] = None
        self._is_error = False

    def on_mount(self) -> None:
        self._update()

    @property
    def message(self) -> Optional[str]:
        """Get the message currently shown, if any."""
        return self._message

    def show_message(self, message: str, error: bool = False) -> None:
        """Show a temporary message."""
        self._message = message
        self._is_error = error
        self._update()

    def _update(self) -> None:
        """Update the status bar display."""
        text = Text()
        if self._message:
            text.append(self._message, style="bold red" if self._is_error else "bold")
        else:
            text.append(DEFAULT_HINT, style="dim")
        self.update(text)
