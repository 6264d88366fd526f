"""Reference input box with shell-style history."""

from typing import List

from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input

PLACEHOLDER = "e.g., John 3:16 or wt Sep 2025"
HISTORY_LIMIT = 100


class ReferenceInput(Widget):
    """Single-line input for references, with up/down history."""

    DEFAULT_CSS = """
    ReferenceInput {
        height: auto;
    }

    ReferenceInput > #reference-text {
        width: 1fr;
    }
    """

    class ReferenceSubmitted(Message):
        """Message sent when a reference is submitted."""

        def __init__(self, text: str) -> None:
            self.text = text
            super().__init__()

    class ReferenceCancelled(Message):
        """Message sent when input is cancelled."""

        pass

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._history: List[str] = []
        self._history_index = -1
        self._saved_input = ""

    def compose(self) -> ComposeResult:
        yield Input(placeholder=PLACEHOLDER, id="reference-text")

    @property
    def input_widget(self) -> Input:
        """Get the input widget."""
        return self.query_one("#reference-text", Input)

    def clear(self) -> None:
        """Clear the input and leave history navigation."""
        self.input_widget.value = ""
        self._history_index = -1
        self._saved_input = ""

    def focus(self, scroll_visible: bool = True) -> None:
        """Focus the input widget."""
        self.input_widget.focus(scroll_visible=scroll_visible)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key."""
        event.stop()
        text = self.input_widget.value.strip()
        if not text:
            return

        self._add_to_history(text)
        self._history_index = -1
        self.post_message(self.ReferenceSubmitted(text))

    def on_key(self, event) -> None:
        """Handle special keys."""
        key = event.key

        if key == "escape":
            event.prevent_default()
            event.stop()
            self.post_message(self.ReferenceCancelled())
        elif key == "up":
            event.prevent_default()
            event.stop()
            self._history_previous()
        elif key == "down":
            event.prevent_default()
            event.stop()
            self._history_next()

    def _add_to_history(self, text: str) -> None:
        """Add an entry to history, skipping repeats of the last one."""
        if self._history and self._history[-1] == text:
            return
        self._history.append(text)
        if len(self._history) > HISTORY_LIMIT:
            self._history = self._history[-HISTORY_LIMIT:]

    def _history_previous(self) -> None:
        """Navigate to previous history entry."""
        if not self._history:
            return

        if self._history_index == -1:
            self._saved_input = self.input_widget.value
            self._history_index = len(self._history) - 1
        elif self._history_index > 0:
            self._history_index -= 1

        self.input_widget.value = self._history[self._history_index]

    def _history_next(self) -> None:
        """Navigate to next history entry."""
        if self._history_index == -1:
            return

        if self._history_index < len(self._history) - 1:
            self._history_index += 1
            self.input_widget.value = self._history[self._history_index]
        else:
            self._history_index = -1
            self.input_widget.value = self._saved_input
