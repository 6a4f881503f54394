"""
Settings store backed by a JSON file.

The rating engine only ever reads from it (the strictness preference);
settings screens and the command line own the writes.  Keys use dot
notation, e.g. ``"ui.theme"``; the strictness preference is the
top-level key ``content_strictness_preference``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .events import CONFIG_CHANGED, EventBus

_DEFAULT_PATH = Path("prompt_rating.json")


class Config:
    """Hierarchical key/value settings persisted as one JSON document."""

    def __init__(
        self,
        event_bus: Optional[EventBus] = None,
        path: Path | str = _DEFAULT_PATH,
    ):
        self._bus = event_bus
        self._path = Path(path)
        self._data: Dict[str, Any] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:
        *parents, leaf = key.split(".")
        node: Any = self._data
        for part in parents:
            node = node.get(part, {})
            if not isinstance(node, dict):
                return default
        return node.get(leaf, default)

    def set(self, key: str, value: Any, *, save: bool = True) -> None:
        *parents, leaf = key.split(".")
        node = self._data
        for part in parents:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        node[leaf] = value

        if save:
            self._save()

        if self._bus is not None:
            self._bus.publish(CONFIG_CHANGED, {"key": key, "value": value})

    def section(self, prefix: str) -> Dict[str, Any]:
        """Return a shallow copy of everything under *prefix*."""
        node: Any = self._data
        for part in prefix.split("."):
            node = node.get(part, {})
            if not isinstance(node, dict):
                return {}
        return dict(node)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            loaded = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError, UnicodeDecodeError):
            loaded = {}
        # A settings file whose root is not an object is treated as empty.
        self._data = loaded if isinstance(loaded, dict) else {}

    def _save(self) -> None:
        try:
            self._path.write_text(
                json.dumps(self._data, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError:
            pass
