"""Key/value save files, one entry per line."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


def _default_base_dir(game_name: str) -> Path:
    if sys.platform == "win32":
        root = os.environ.get("LOCALAPPDATA")
        base = Path(root) if root else Path.home() / "AppData" / "Local"
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Preferences"
    else:
        base = Path.home() / ".config"
    return base / game_name


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


class SaveState:
    """String entries for one save slot of a game, loaded on creation."""

    def __init__(self, game_name: str, state_num: int = 0, base_dir: Optional[PathLike] = None) -> None:
        self.game_name = game_name
        self.state_num = state_num
        self.base_dir = Path(base_dir) if base_dir is not None else _default_base_dir(game_name)
        self._state: Dict[str, str] = {}
        self.load()

    @classmethod
    def open(cls, game_name: str, state_num: int = 0, base_dir: Optional[PathLike] = None) -> SaveState:
        """Create a save state and load its contents from disk."""
        return cls(game_name, state_num, base_dir)

    @property
    def path(self) -> Path:
        return self.base_dir / f"save{self.state_num}.save"

    def has_data(self) -> bool:
        return bool(self._state)

    def clear(self) -> SaveState:
        self._state.clear()
        return self

    def has(self, key: str) -> bool:
        return key in self._state

    def get(self, key: str) -> str:
        """The stored value, or an empty string."""
        return self._state.get(key, "")

    def put(self, key: str, data: str) -> SaveState:
        if not key or any(ch.isspace() for ch in key):
            raise ValueError(f"save keys must be non-empty and without whitespace: {key!r}")
        if "\n" in data:
            raise ValueError("save data must fit on one line")
        self._state[key] = data
        return self

    def stream_put(self, key: str) -> SaveStream:
        """A stream that stores what is written to it under key when closed."""
        return SaveStream(self, key)

    def stream_get(self, key: str) -> List[str]:
        """The whitespace-separated tokens stored under key."""
        return self.get(key).split()

    def save(self) -> None:
        """Write all entries to the save file."""
        path = self.path
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as file:
            for key, data in self._state.items():
                file.write(f"{key} {data}\n")

    def load(self) -> None:
        """Replace all entries with the contents of the save file, if any."""
        self.clear()
        path = self.path
        if not path.exists():
            return
        with path.open("r", encoding="utf-8") as file:
            for line in file:
                body = line.rstrip("\n").lstrip()
                if not body:
                    continue
                key = body.split(None, 1)[0]
                rest = body[len(key):]
                if rest.startswith(" "):
                    rest = rest[1:]
                self._state[key] = rest


class SaveStream:
    """Collects space-separated values and stores them when the block ends."""

    def __init__(self, state: SaveState, key: str) -> None:
        self.state = state
        self.key = key
        self._parts: List[str] = []

    def write(self, value: Any) -> SaveStream:
        self._parts.append(" " + _format_value(value))
        return self

    def __enter__(self) -> SaveStream:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.state.put(self.key, "".join(self._parts))