"""Configuration management for scripture-spotlight."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


CONFIG_DIR = Path.home() / ".config" / "scripture-spotlight"
CONFIG_FILE = CONFIG_DIR / "config.json"

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Application configuration."""

    topic_index_paths: List[str] = field(default_factory=list)
    open_command: Optional[str] = None
    close_on_open: bool = True
    show_tips: bool = True

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load config from file, or return defaults."""
        path = path or CONFIG_FILE
        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = json.load(f)
            return cls(
                topic_index_paths=list(data.get("topic_index_paths", [])),
                open_command=data.get("open_command"),
                close_on_open=bool(data.get("close_on_open", True)),
                show_tips=bool(data.get("show_tips", True)),
            )
        except (json.JSONDecodeError, OSError, AttributeError, TypeError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return cls()

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file."""
        path = path or CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "topic_index_paths": self.topic_index_paths,
            "open_command": self.open_command,
            "close_on_open": self.close_on_open,
            "show_tips": self.show_tips,
        }
        with open(path, "w") as f:
            json.dump(data, f, indent=2)


def get_config() -> Config:
    """Get the application config."""
    return Config.load()
