"""Textual launcher for scripture-spotlight."""

from typing import Callable, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Static

from scripture_spotlight.commands import Decoder
from scripture_spotlight.config import Config, get_config
from scripture_spotlight.data.topics import TopicIndex, default_sources
from scripture_spotlight.launcher import open_uri
from scripture_spotlight.widgets import ReferenceInput, StatusBar, TipsPanel


class SpotlightApp(App[Optional[str]]):
    """Type a reference, press enter, and the link opens in JW Library.

    The app exits with the opened URI as its return value when
    close_on_open is set.
    """

    TITLE = "Scripture Spotlight"

    CSS = """
    #overlay {
        padding: 1 2;
        height: auto;
    }

    #title {
        text-style: bold;
        margin-bottom: 1;
    }

    #instruction {
        color: $text-muted;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False),
    ]

    def __init__(
        self,
        decoder: Optional[Decoder] = None,
        opener: Optional[Callable[[str], object]] = None,
        config: Optional[Config] = None,
    ) -> None:
        super().__init__()
        self._config = config or get_config()
        self._decoder = decoder or Decoder(
            TopicIndex(default_sources(self._config.topic_index_paths))
        )
        self._opener = opener or (lambda uri: open_uri(uri, self._config.open_command))

    def compose(self) -> ComposeResult:
        with Vertical(id="overlay"):
            yield Static("📖 Scripture Spotlight", id="title")
            yield Static("Press ⏎ to launch JW Library with your reference.", id="instruction")
            yield ReferenceInput(id="reference")
            yield TipsPanel(collapsed=not self._config.show_tips, id="tips")
        yield StatusBar(id="status")

    def on_mount(self) -> None:
        self.query_one(ReferenceInput).focus()

    def on_reference_input_reference_submitted(self, event: ReferenceInput.ReferenceSubmitted) -> None:
        """Decode the reference and hand the link to the opener."""
        status = self.query_one(StatusBar)
        uri = self._decoder.decode(event.text)
        if uri is None:
            status.show_message(f"No match for input: {event.text}", error=True)
            return

        self._opener(uri)
        if self._config.close_on_open:
            self.exit(uri)
            return

        self.query_one(ReferenceInput).clear()
        status.show_message(f"Opened {uri}")

    def on_reference_input_reference_cancelled(self, event: ReferenceInput.ReferenceCancelled) -> None:
        self.exit(None)
