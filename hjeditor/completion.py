"""Keyword completion: edit distance, word lookup and the popup list."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

_MAX_ROWS = 5


class CompleteState(Enum):
    """State of the completion popup as seen by the editor."""

    IGNORE = 0
    SHOWING = 1
    HIDE = 2


def levenshtein(source: str, target: str) -> int:
    """Return the edit distance between two strings."""
    if not target:
        return len(source)
    if not source:
        return len(target)
    previous = list(range(len(target) + 1))
    for i, s_char in enumerate(source, start=1):
        current = [i]
        for j, t_char in enumerate(target, start=1):
            cost = 0 if s_char == t_char else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def _char_at(text: str, position: int) -> str:
    return text[position] if 0 <= position < len(text) else ""


def _is_word_char(ch: str) -> bool:
    return bool(ch) and (ch.isdecimal() or ch.isalpha() or ch in "_#")


def word_before_cursor(text: str, position: int) -> str:
    """Return the word ending at ``position``, or "" if the cursor is mid-word."""
    following = _char_at(text, position)
    if following and (following.isdecimal() or following.isalpha() or following == " "):
        return ""
    pos = position - 1
    if _char_at(text, pos) == " ":
        return ""
    while _is_word_char(_char_at(text, pos)):
        pos -= 1
    return text[pos + 1:position] if pos + 1 < position else ""


def word_start(text: str, position: int) -> int:
    """Return the index where the word ending at ``position`` begins."""
    pos = position
    while pos > 0 and _is_word_char(_char_at(text, pos - 1)):
        pos -= 1
    return pos


def rank_candidates(word: str, candidates: Iterable[str]) -> list[str]:
    """Return candidates containing ``word``, closest by edit distance first."""
    if not word:
        return []
    matches = [item for item in candidates if word in item]
    return sorted(matches, key=lambda item: levenshtein(item, word))


@dataclass
class CompletionPopup:
    """The list of completion items and the selected row."""

    items: list[str] = field(default_factory=list)
    current_row: int = -1
    visible: bool = False

    def __len__(self) -> int:
        return len(self.items)

    def show(self, items: Iterable[str]) -> None:
        """Fill the list and select its first item; stays hidden if empty."""
        self.items = list(items)
        self.current_row = 0 if self.items else -1
        self.visible = bool(self.items)

    def hide(self) -> None:
        self.visible = False

    def move_up(self) -> None:
        if self.current_row > 0:
            self.current_row -= 1

    def move_down(self) -> None:
        if self.current_row < len(self.items) - 1:
            self.current_row += 1

    def current_item(self) -> str | None:
        """Return the selected item, or None when nothing is selected."""
        if 0 <= self.current_row < len(self.items):
            return self.items[self.current_row]
        return None

    @property
    def height_rows(self) -> int:
        """Height of the popup in text rows."""
        if len(self.items) > _MAX_ROWS:
            return _MAX_ROWS + 1
        return len(self.items) + 1