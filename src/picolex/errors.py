"""Error types with formatted context."""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or holds bad values."""

    def __init__(self, message: str, path: Path | None = None, key: str | None = None) -> None:
        self.message = message
        self.path = path
        self.key = key
        super().__init__(self.format())

    def format(self) -> str:
        lines = [f"error: {self.message}"]
        if self.path is not None:
            lines.append(f"  --> {self.path}")
        if self.key is not None:
            lines.append(f"   |  in key '{self.key}'")
        return "\n".join(lines)
