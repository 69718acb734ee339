"""State of an editing session: file name, save state, window title and theme."""

from __future__ import annotations

import os
import re
from enum import Enum

TITLE_PREFIX = "HJ Editor - "
DEFAULT_FILE_NAME = "Untitled.cpp"
DEFAULT_FILE_PATH = "~/Desktop/Untitled.cpp"
READY = "Ready"

_FILE_NAME = re.compile(r"(?<=/)\w+\.cpp|(?<=/)\w+\.c|(?<=/)\w+\.h")


def file_name_from_path(path: str | os.PathLike) -> str:
    """Return the C/C++ file name after the last slash, or "" if there is none."""
    match = _FILE_NAME.search(os.fspath(path))
    return match.group() if match else ""


class Theme(Enum):
    """Colour schemes for the window, the editor and the toolbar."""

    LIGHT = ((255, 255, 255), (0, 0, 0), (255, 255, 255), (0, 0, 0), (240, 240, 240))
    DARK = ((34, 39, 49), (255, 255, 255), (34, 39, 49), (255, 255, 255), (82, 82, 82))

    def __init__(self, window, window_text, base, text, toolbar) -> None:
        self.window = window
        self.window_text = window_text
        self.base = base
        self.text = text
        self.toolbar = toolbar

    @property
    def toolbar_style(self) -> str:
        """Style sheet for the toolbar."""
        r, g, b = self.toolbar
        return f"QToolBar {{ background: rgb({r}, {g}, {b}); border: none; }}"


class EditorSession:
    """Tracks the open file, whether it is saved and the window title."""

    def __init__(self) -> None:
        self.file_name = DEFAULT_FILE_NAME
        self.file_path = DEFAULT_FILE_PATH
        self.file_saved = True
        self.is_running = False
        self.first_load = True
        self.text = ""
        self.title = ""
        self.status = READY
        self.theme = Theme.LIGHT

    def text_changed(self) -> None:
        """Note an edit: the first one after loading only sets the title."""
        if self.first_load and self.file_saved:
            self.title = TITLE_PREFIX + self.file_name
            self.first_load = False
            return
        self.file_saved = False
        self.title = TITLE_PREFIX + self.file_name + "*"

    def save(self, path: str | os.PathLike, text: str) -> None:
        """Write ``text`` to ``path`` and make it the session's file."""
        with open(path, "w", encoding="utf-8", newline="") as out:
            out.write(text)
        self.text = text
        self.file_saved = True
        self.file_name = file_name_from_path(path)
        self.file_path = os.fspath(path)
        self.title = TITLE_PREFIX + self.file_name

    def open(self, path: str | os.PathLike) -> str:
        """Read the file at ``path``, make it the session's file, return its text."""
        with open(path, encoding="utf-8") as src:
            text = src.read()
        self.text = text
        self.text_changed()
        self.file_name = file_name_from_path(path)
        self.title = TITLE_PREFIX + self.file_name
        self.file_path = os.fspath(path)
        self.file_saved = True
        return text

    @property
    def needs_save(self) -> bool:
        """Whether closing or running should first offer to save."""
        return not self.file_saved

    def apply_theme(self, theme: Theme) -> Theme:
        """Switch to ``theme`` and return it."""
        self.theme = theme
        return theme