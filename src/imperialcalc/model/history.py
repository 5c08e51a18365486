from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Snapshot:
    """The (primary, secondary) display lines before a change."""
    primary: str
    secondary: str


class HistoryStack:
    """
    Undo history of display snapshots.

    Args:
        max_depth: Keep at most this many snapshots, dropping the oldest.
            None means unbounded.
    """

    def __init__(self, max_depth: Optional[int] = None) -> None:
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}.")
        self.max_depth = max_depth
        self._entries: list[Snapshot] = []

    def push(self, snapshot: Snapshot) -> None:
        self._entries.append(snapshot)
        if self.max_depth is not None and len(self._entries) > self.max_depth:
            del self._entries[0]

    def pop(self) -> Optional[Snapshot]:
        """Remove and return the newest snapshot, or None if there is nothing to undo."""
        if not self._entries:
            return None
        return self._entries.pop()

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
