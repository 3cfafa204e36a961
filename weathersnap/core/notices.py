"""User-facing notice values.

The controller only produces notices; how and when they are shown is up to
whoever receives them.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional


class Severity(str, Enum):
    NORMAL = "normal"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notice:
    title: str
    description: Optional[str] = None
    severity: Severity = Severity.NORMAL

    @property
    def is_destructive(self) -> bool:
        return self.severity is Severity.DESTRUCTIVE


NoticeSink = Callable[[Notice], None]


class NoticeQueue:
    """Fire-and-forget collector usable as a notice sink."""

    def __init__(self) -> None:
        self._items: List[Notice] = []

    def __call__(self, notice: Notice) -> None:
        self._items.append(notice)

    def drain(self) -> List[Notice]:
        items, self._items = self._items, []
        return items


__all__ = ["Severity", "Notice", "NoticeSink", "NoticeQueue"]
