from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Literal


Level = Literal["info", "warning", "error"]


@dataclass
class _Entry:
    level: Level
    message: str
    count: int = 1


class FilterLog:
    """
    Bounded severity log for filter design sessions.

    Features:
      - severity levels: info, warning, error
      - coalescing of consecutive identical messages (shows xN)
      - bounded history (drops oldest entries beyond max_entries)
      - plain-text rendering for whatever front-end shows it
    """

    def __init__(self, *, title: str | None = None, max_entries: int = 2000) -> None:
        self._entries: List[_Entry] = []
        self._max_entries = int(max_entries)
        self.title = title

    def clear(self) -> None:
        self._entries.clear()

    def info(self, message: str) -> None:
        self._add("info", message)

    def warning(self, message: str) -> None:
        self._add("warning", message)

    def error(self, message: str) -> None:
        self._add("error", message)

    @property
    def entries(self) -> List[tuple]:
        """``(level, message, count)`` for every entry, oldest first."""
        return [(e.level, e.message, e.count) for e in self._entries]

    def messages(self, level: Optional[Level] = None) -> List[str]:
        return [e.message for e in self._entries if level is None or e.level == level]

    def render_text(self) -> str:
        rows = []
        if self.title:
            rows.append(str(self.title))
        for e in self._entries:
            suffix = f" (x{e.count})" if e.count > 1 else ""
            rows.append(f"[{e.level.upper()}] {e.message}{suffix}")
        return "\n".join(rows)

    # -------------------------
    # Internals
    # -------------------------
    def _add(self, level: Level, message: str) -> None:
        msg = "" if message is None else str(message)

        # Coalesce consecutive duplicates
        if self._entries and self._entries[-1].level == level and self._entries[-1].message == msg:
            self._entries[-1].count += 1
            return

        self._entries.append(_Entry(level=level, message=msg, count=1))
        if len(self._entries) > self._max_entries:
            self._entries = self._entries[-self._max_entries :]

