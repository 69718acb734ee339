"""A plain-text code editor model with auto-pairing, indentation and completion."""

from __future__ import annotations

from typing import NamedTuple

from hjeditor.completion import (
    CompleteState,
    CompletionPopup,
    rank_candidates,
    word_before_cursor,
    word_start,
)

COMPLETE_LIST = (
    "char", "class", "const", "double", "enum", "explicit", "friend", "inline",
    "int", "long", "namespace", "operator", "private", "protected", "public",
    "short", "signals", "signed", "slots", "static", "struct", "template",
    "typedef", "typename", "union", "unsigned", "virtual", "void", "volatile",
    "bool", "using", "constexpr", "sizeof", "if", "for", "foreach", "while",
    "do", "case", "break", "continue", "template", "delete", "new", "default",
    "try", "return", "throw", "catch", "goto", "else", "extren", "this",
    "switch", "#include <>", '#include ""', "#define", "iostream",
)
"""Words offered by the completion popup, in their original order."""

LINE_NUMBER_COLOR = (56, 60, 69)
EDITOR_COLOR = (34, 39, 49)
CURRENT_LINE_COLOR = (255, 153, 153, 255)
MATCH_COLOR = (0, 255, 0, 50)
BRACKET_COLOR = (255, 0, 0, 50)

_CLOSERS = {"(": ")", "{": "}", "[": "]"}
_PAIRS = {"(": ")", '"': '"', "<": ">"}
_INDENT_KEYWORDS = ("for(", "while(", "switch(", "if(")
_MIN_DIGITS = 3
_MARGIN = 3


class _Selection(NamedTuple):
    position: int
    background: tuple[int, int, int, int]
    full_width: bool = False


class CodeEditor:
    """Text buffer and cursor that react to keys the way the editor widget does."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.cursor = 0
        self.line_color = LINE_NUMBER_COLOR
        self.editor_color = EDITOR_COLOR
        self.complete_list = list(COMPLETE_LIST)
        self.popup = CompletionPopup()
        self.popup_anchor = 0
        self.complete_state = CompleteState.HIDE
        self.extra_selections: list[_Selection] = []
        self._highlight_current_line()

    # -- buffer primitives -------------------------------------------------

    def _char_at(self, position: int) -> str:
        return self.text[position] if 0 <= position < len(self.text) else ""

    def _insert(self, chunk: str) -> None:
        self.text = self.text[:self.cursor] + chunk + self.text[self.cursor:]
        self.cursor += len(chunk)

    def _delete_previous(self) -> None:
        if self.cursor > 0:
            self.text = self.text[:self.cursor - 1] + self.text[self.cursor:]
            self.cursor -= 1

    def _delete_next(self) -> None:
        if self.cursor < len(self.text):
            self.text = self.text[:self.cursor] + self.text[self.cursor + 1:]

    def _line_bounds(self, position: int) -> tuple[int, int]:
        start = self.text.rfind("\n", 0, position) + 1
        end = self.text.find("\n", position)
        return start, len(self.text) if end == -1 else end

    def _cursor_changed(self) -> None:
        self._highlight_current_line()
        self.refresh_completion()

    def _highlight_current_line(self) -> None:
        self.extra_selections = [_Selection(self.cursor, CURRENT_LINE_COLOR, True)]

    @property
    def block_count(self) -> int:
        """Number of lines in the buffer."""
        return self.text.count("\n") + 1

    @property
    def current_line(self) -> str:
        """Text of the line holding the cursor."""
        start, end = self._line_bounds(self.cursor)
        return self.text[start:end]

    # -- public actions ----------------------------------------------------

    def set_cursor(self, position: int) -> None:
        """Place the cursor at ``position``."""
        if not 0 <= position <= len(self.text):
            raise ValueError(f"cursor position {position} out of range")
        self.cursor = position
        self._cursor_changed()

    def type_text(self, text: str) -> None:
        """Insert ordinary typed text at the cursor."""
        self._insert(text)
        self._cursor_changed()
        self.highlight_matching_parenthesis()

    def open_paren(self) -> None:
        """Insert a pair of parentheses and place the cursor between them."""
        self._insert("()")
        self.cursor -= 1
        self._cursor_changed()

    def open_quote(self) -> None:
        """Insert a pair of double quotes and place the cursor between them."""
        self._insert('""')
        self.cursor -= 1
        self._cursor_changed()

    def press_return(self) -> None:
        """Accept the selected completion, or break the line with auto-indent."""
        if self.complete_state is CompleteState.SHOWING:
            self._accept_completion()
            return

        line = self.current_line
        self._insert("\n")
        self._cursor_changed()
        if not line:
            return

        for ch in line:
            if not ch.isspace():
                break
            self._insert(ch)

        last = line[-1]
        if last == ")" and any(word in line for word in _INDENT_KEYWORDS):
            self._insert("\t")

        if last == "{":
            self._insert("\t")
            middle = self.cursor
            self._insert("\n")
            self._insert("".join(ch for ch in line if ch.isspace()))
            self._insert("}")
            self.cursor = middle
        self._cursor_changed()

    def _accept_completion(self) -> None:
        chosen = self.popup.current_item() or ""
        word = word_before_cursor(self.text, self.cursor)
        self.complete_state = CompleteState.IGNORE
        for _ in word:
            self._delete_previous()
        self._insert(chosen)
        if "#include" in chosen:
            self.cursor -= 1
        self._cursor_changed()
        self.complete_state = CompleteState.HIDE
        self.popup.hide()

    def press_backspace(self) -> None:
        """Delete the previous character, and its closing partner if it follows."""
        before = self._char_at(self.cursor - 1)
        self._delete_previous()
        closer = _PAIRS.get(before)
        if closer is not None and self._char_at(self.cursor) == closer:
            self._delete_next()
        self._cursor_changed()

    def press_up(self) -> None:
        """Select the previous completion, or move the cursor up one line."""
        if self.complete_state is CompleteState.SHOWING:
            self.popup.move_up()
            return
        self._move_vertically(up=True)

    def press_down(self) -> None:
        """Select the next completion, or move the cursor down one line."""
        if self.complete_state is CompleteState.SHOWING:
            self.popup.move_down()
            return
        self._move_vertically(up=False)

    def _move_vertically(self, *, up: bool) -> None:
        start, end = self._line_bounds(self.cursor)
        column = self.cursor - start
        if up and start > 0:
            target_start, target_end = self._line_bounds(start - 1)
        elif not up and end < len(self.text):
            target_start, target_end = self._line_bounds(end + 1)
        else:
            self.highlight_matching_parenthesis()
            return
        self.cursor = target_start + min(column, target_end - target_start)
        self._cursor_changed()
        self.highlight_matching_parenthesis()

    def refresh_completion(self) -> None:
        """Recompute the completion popup for the word before the cursor."""
        if self.complete_state is CompleteState.IGNORE:
            return
        self.popup.hide()
        self.complete_state = CompleteState.HIDE
        word = word_before_cursor(self.text, self.cursor)
        if not word:
            self.popup.show([])
            return
        items = rank_candidates(word, self.complete_list)
        self.popup.show(items)
        if items:
            self.popup_anchor = word_start(self.text, self.cursor)
            self.complete_state = CompleteState.SHOWING

    def find_matching_bracket(self, position: int, closing_char: str) -> int | None:
        """Return the first ``closing_char`` after ``position`` outside a string."""
        inside_string = False
        for index in range(position + 1, len(self.text)):
            ch = self.text[index]
            if ch == '"':
                inside_string = not inside_string
            if not inside_string and ch == closing_char:
                return index
        return None

    def highlight_matching_parenthesis(self) -> int | None:
        """Highlight the bracket at the cursor and its match; return the match."""
        closer = _CLOSERS.get(self._char_at(self.cursor))
        if closer is None:
            return None
        match = self.find_matching_bracket(self.cursor, closer)
        if match is None:
            return None
        self.extra_selections = [
            _Selection(match, MATCH_COLOR),
            _Selection(self.cursor, BRACKET_COLOR),
        ]
        return match

    def line_number_area_width(self, char_width: int) -> int:
        """Width of the line-number gutter for digits ``char_width`` wide."""
        digits = max(_MIN_DIGITS, len(str(max(1, self.block_count))))
        return _MARGIN + char_width * digits