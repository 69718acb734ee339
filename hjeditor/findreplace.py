"""Find and replace over plain text, with case, whole-word and regex options."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class SearchOptions:
    """How a search pattern is matched.

    In regex mode the case flag switches the pattern to case-insensitive
    matching; without it a regex matches case-sensitively.
    """

    case_sensitive: bool = False
    whole_words: bool = False
    regex: bool = False


_DEFAULT_OPTIONS = SearchOptions()


def _compile(pattern: str, options: SearchOptions) -> re.Pattern | None:
    if options.regex:
        flags = re.MULTILINE
        if options.case_sensitive:
            flags |= re.IGNORECASE
        try:
            return re.compile(pattern, flags)
        except re.error:
            return None
    # Plain text never spans a line break and an empty pattern finds nothing.
    if not pattern or "\n" in pattern:
        return None
    flags = 0 if options.case_sensitive else re.IGNORECASE
    return re.compile(re.escape(pattern), flags)


def _is_word_char(ch: str) -> bool:
    return ch.isalnum()


def _bounded(text: str, start: int, end: int) -> bool:
    if start > 0 and _is_word_char(text[start - 1]):
        return False
    if end < len(text) and _is_word_char(text[end]):
        return False
    return True


def _search(
    text: str, compiled: re.Pattern, start: int, whole_words: bool
) -> tuple[int, int] | None:
    pos = start
    while pos <= len(text):
        match = compiled.search(text, pos)
        if match is None:
            return None
        begin, end = match.span()
        if begin == end or (whole_words and not _bounded(text, begin, end)):
            pos = begin + 1
            continue
        return begin, end
    return None


def _check_start(text: str, start: int) -> None:
    if not 0 <= start <= len(text):
        raise ValueError(f"start position {start} out of range")


def find(
    text: str,
    pattern: str,
    start: int = 0,
    options: SearchOptions | None = None,
) -> tuple[int, int] | None:
    """Return the span of the first match at or after ``start``, or None."""
    _check_start(text, start)
    options = options or _DEFAULT_OPTIONS
    compiled = _compile(pattern, options)
    if compiled is None:
        return None
    return _search(text, compiled, start, options.whole_words)


def replace_next(
    text: str,
    pattern: str,
    replacement: str,
    start: int = 0,
    options: SearchOptions | None = None,
) -> tuple[str, int]:
    """Replace the next match after ``start``.

    Returns the new text and the cursor position after the inserted
    replacement; with no match the text and ``start`` come back unchanged.
    The replacement is inserted literally, also in regex mode.
    """
    span = find(text, pattern, start, options)
    if span is None:
        return text, start
    begin, end = span
    return text[:begin] + replacement + text[end:], begin + len(replacement)


def replace_all(
    text: str,
    pattern: str,
    replacement: str,
    options: SearchOptions | None = None,
) -> str:
    """Replace every match from the start of the text onwards.

    Searching resumes after each inserted replacement, so it is never
    searched again itself.
    """
    options = options or _DEFAULT_OPTIONS
    compiled = _compile(pattern, options)
    if compiled is None:
        return text
    pos = 0
    while True:
        span = _search(text, compiled, pos, options.whole_words)
        if span is None:
            return text
        begin, end = span
        text = text[:begin] + replacement + text[end:]
        pos = begin + len(replacement)