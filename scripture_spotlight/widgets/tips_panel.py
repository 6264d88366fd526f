"""Collapsible tips listing the supported input formats."""

from typing import Sequence, Tuple

from rich.text import Text
from textual.widgets import Collapsible, Static


EXAMPLES: Sequence[Tuple[str, str]] = (
    ("John 3:16", "Opens that verse"),
    ("1 Pet 2:9", "Works with abbreviations"),
    ("wt sep 2025", "Opens the September 2025 Watchtower"),
    ("i respect", "Opens the Insight article on a topic"),
    ("wol grace", "Searches the Online Library"),
    ("dt", "Opens today's daily text"),
    ("help", "Opens the help page"),
)

FOOTNOTE = "JW Library must be installed and properly configured for these links to open."


def tips_text() -> Text:
    """Render the supported formats as rich text."""
    text = Text()
    text.append("Supported formats:\n", style="bold")
    for example, description in EXAMPLES:
        text.append("  • ")
        text.append(example, style="bold cyan")
        text.append(f" → {description}\n")
    text.append("\n")
    text.append(FOOTNOTE, style="dim")
    return text


class TipsPanel(Collapsible):
    """Tips & instructions, expanded by default."""

    DEFAULT_CSS = """
    TipsPanel {
        margin-top: 1;
    }
    """

    def __init__(self, collapsed: bool = False, **kwargs) -> None:
        super().__init__(
            Static(tips_text(), id="tips-text"),
            title="Tips & Instructions",
            collapsed=collapsed,
            **kwargs,
        )
