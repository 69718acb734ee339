"""Regex-driven syntax highlighting for C++, Python and JSON text."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum

IN_COMMENT = 1
"""Block state meaning an unfinished multi-line comment carries on."""

_ROSE = (201, 81, 116)
_SKY = (115, 182, 209)
_PURPLE = (128, 0, 128)
_DARK_MAGENTA = (128, 0, 128)
_GREEN = (0, 255, 0)
_DARK_GREEN = (0, 128, 0)
_BLUE = (0, 0, 255)
_RED = (255, 0, 0)
_GRAY = (160, 160, 164)

_CPP_KEYWORDS = (
    "char", "class", "const", "double", "enum", "explicit", "friend", "inline",
    "int", "long", "namespace", "operator", "private", "protected", "public",
    "short", "signals", "signed", "slots", "static", "struct", "template",
    "typedef", "typename", "union", "unsigned", "virtual", "void", "volatile",
    "bool", "using", "constexpr", "sizeof", "if", "for", "while", "do", "case",
    "break", "continue", "delete", "new", "default", "try", "return", "throw",
    "catch", "goto", "else", "this", "switch",
)

_PYTHON_KEYWORDS = (
    "def", "class", "if", "elif", "else", "for", "while", "return", "import",
    "from", "as", "pass", "break", "continue", "print", "True", "False", "None",
    "try", "except", "raise", "finally", "with", "lambda",
)

_CPP_SUFFIXES = frozenset({"cpp", "c", "h", "cxx", "hpp"})


class LanguageType(Enum):
    """Languages the highlighter knows."""

    CPP = "cpp"
    PYTHON = "python"
    JSON = "json"


@dataclass(frozen=True)
class TextFormat:
    """Character format: an RGB foreground plus weight and slant."""

    foreground: tuple[int, int, int] | None = None
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True)
class HighlightingRule:
    """A pattern and the format given to each of its matches."""

    pattern: re.Pattern
    format: TextFormat


def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.ASCII)


class Highlighter:
    """Computes per-character formats for lines of source text."""

    def __init__(self, language: LanguageType = LanguageType.CPP) -> None:
        self.language = language
        self.rules: list[HighlightingRule] = []
        self.comment_start: re.Pattern | None = None
        self.comment_end: re.Pattern | None = None
        blank = TextFormat()
        self.multi_line_comment_format = blank
        self.keyword_format = blank
        self.class_format = blank
        self.single_line_comment_format = blank
        self.quotation_format = blank
        self.function_format = blank
        self.number_format = blank
        self.json_key_format = blank
        self.json_separator_format = blank

        if language is LanguageType.CPP:
            self._init_cpp_rules()
        elif language is LanguageType.PYTHON:
            self._init_python_rules()
        else:
            self._init_json_rules()

    def _add(self, pattern: str, fmt: TextFormat) -> None:
        self.rules.append(HighlightingRule(_compile(pattern), fmt))

    def _init_cpp_rules(self) -> None:
        self.keyword_format = TextFormat(_ROSE, bold=True)
        for word in _CPP_KEYWORDS:
            self._add(rf"\b{word}\b", self.keyword_format)

        self.class_format = TextFormat(_DARK_MAGENTA, bold=True)
        self._add(r"(?<=class\s)\w+", self.class_format)

        self.single_line_comment_format = TextFormat(_GREEN)
        self._add("//[^\n]*", self.single_line_comment_format)

        self.multi_line_comment_format = TextFormat(_GREEN)
        self.comment_start = _compile(r"/\*")
        self.comment_end = _compile(r"\*/")

        self.quotation_format = TextFormat(_DARK_GREEN)
        self._add(r'"[^"]*"', self.quotation_format)
        self._add(r"<[^>]*>", self.quotation_format)
        self._add(r'#include\s+[<"].*[>"]', self.quotation_format)

        self.function_format = TextFormat(_SKY, italic=True)
        self._add(r"\b[A-Za-z0-9_]+(?=\()", self.function_format)

    def _init_python_rules(self) -> None:
        self.keyword_format = TextFormat(_BLUE, bold=True)
        for word in _PYTHON_KEYWORDS:
            self._add(rf"\b{word}\b", self.keyword_format)

        self.single_line_comment_format = TextFormat(_GREEN)
        self._add("#[^\n]*", self.single_line_comment_format)

        self.quotation_format = TextFormat(_DARK_GREEN)
        self._add(r"'[^']*'", self.quotation_format)
        self._add(r'"[^"]*"', self.quotation_format)

        self.function_format = TextFormat(_DARK_MAGENTA, italic=True)
        self._add(r"(?<=def\s)\w+", self.function_format)

        self.number_format = TextFormat(_RED)
        self._add(r"\b\d+\b", self.number_format)
        self._add(r"\b\d+\.\d+\b", self.number_format)

        self.comment_start = _compile("'''")
        self.comment_end = _compile("'''")
        self.multi_line_comment_format = TextFormat(_GREEN)

    def _init_json_rules(self) -> None:
        self.json_key_format = TextFormat(_BLUE, bold=True)
        self._add(r'"[^"]+":', self.json_key_format)

        self.quotation_format = TextFormat(_DARK_GREEN)
        self._add(r'"[^"]*"', self.quotation_format)

        self.number_format = TextFormat(_RED)
        self._add(r"-?\d+", self.number_format)
        self._add(r"-?\d+\.\d+", self.number_format)
        self._add(r"-?\d+[eE][+-]?\d+", self.number_format)

        self.keyword_format = TextFormat(_PURPLE)
        for word in ("true", "false", "null"):
            self._add(rf"\b{word}\b", self.keyword_format)

        self.json_separator_format = TextFormat(_GRAY)
        self._add(r"[\{\}\[\],:]", self.json_separator_format)
        # JSON has no comments, so no multi-line comment handling.

    def highlight_block(
        self, text: str, previous_state: int = 0
    ) -> tuple[list[TextFormat | None], int]:
        """Format one line; return per-character formats and the new state."""
        formats: list[TextFormat | None] = [None] * len(text)

        def paint(start: int, length: int, fmt: TextFormat) -> None:
            span = formats[start:start + length]
            formats[start:start + length] = [fmt] * len(span)

        for rule in self.rules:
            for match in rule.pattern.finditer(text):
                paint(match.start(), match.end() - match.start(), rule.format)

        state = 0
        if self.comment_start is None or self.comment_end is None:
            return formats, state

        start: int | None
        if previous_state == IN_COMMENT:
            start = 0
        else:
            found = self.comment_start.search(text)
            start = found.start() if found else None

        while start is not None:
            end = self.comment_end.search(text, start)
            if end is None:
                state = IN_COMMENT
                length = len(text) - start
            else:
                length = end.end() - start
            paint(start, length, self.multi_line_comment_format)
            found = self.comment_start.search(text, start + length)
            start = found.start() if found else None

        return formats, state

    def highlight(self, text: str) -> list[list[TextFormat | None]]:
        """Format a whole document, one list of formats per line."""
        result = []
        state = 0
        for line in text.split("\n"):
            formats, state = self.highlight_block(line, state)
            result.append(formats)
        return result


def detect_language(file_name: str, content: str = "") -> LanguageType:
    """Guess the language from the file's suffix, then from its content."""
    if file_name:
        base = os.path.basename(file_name)
        suffix = base.rpartition(".")[2].lower() if "." in base else ""
        if suffix in _CPP_SUFFIXES:
            return LanguageType.CPP
        if suffix == "py":
            return LanguageType.PYTHON
        if suffix == "json":
            return LanguageType.JSON

    if content:
        lower = content.lower()
        has_brace = "{" in lower and "}" in lower
        has_bracket = "[" in lower and "]" in lower
        if (has_brace or has_bracket) and ":" in lower:
            return LanguageType.JSON

        has_python_keyword = any(
            word in lower for word in ("def ", "class ", "import ", "from ")
        )
        has_cpp_feature = "#include" in lower or ";" in lower
        if has_python_keyword and not has_cpp_feature:
            return LanguageType.PYTHON

        if "#include" in lower or ";" in lower or "class " in lower:
            return LanguageType.CPP

    return LanguageType.CPP