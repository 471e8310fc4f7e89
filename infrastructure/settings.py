"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class JsonSettings:
    """Lightweight JSON settings reader with dotted-key access."""

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        if not self._path.exists():
            raise FileNotFoundError(f"settings.json not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            self._data = json.load(f)
        if not isinstance(self._data, dict):
            raise ValueError(f"settings root must be a JSON object: {self._path}")

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node

    def resolve_path(self, key: str, default: str | None = None) -> Path | None:
        """Return dotted `key` as a path relative to the settings file's folder."""
        value = self.get(key, default)
        if value is None or value == "":
            return None
        path = Path(str(value))
        return path if path.is_absolute() else self._path.parent / path
