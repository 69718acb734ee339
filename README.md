# hjeditor

The editing logic of a small code editor, with no GUI attached. Every part works on
plain strings and cursor positions. You can put it behind any front end, or use it in
scripts and tests.

## Modules

### `hjeditor.highlighter`

Rule-based syntax highlighting for C++, Python and JSON.

- `LanguageType` has three members: `CPP`, `PYTHON` and `JSON`.
- `TextFormat` is a frozen dataclass describing a format. It holds an RGB `foreground`, plus `bold` and `italic`.
- `HighlightingRule` pairs a compiled pattern with the `TextFormat` applied to each of its matches.
- `Highlighter(language=LanguageType.CPP)` builds the rule set for one language.
- `highlight_block(text, previous_state=0)` takes one line. It returns a tuple `(formats, state)`:
  - `formats` holds one entry per character, either a `TextFormat` or `None`.
  - `state` is the line's end state. It is `1` (`IN_COMMENT`) when a multi-line comment is still open at the end of the line.
  - C++ multi-line comments are `/* ... */`. Python ones are `''' ... '''`. JSON has none.
- `highlight(text)` runs `highlight_block` over every line of a document and carries the state from line to line. It returns one list of formats per line.
- `detect_language(file_name, content="")` guesses the language in three steps:
  1. From the file suffix: `cpp`, `c`, `h`, `cxx` and `hpp` give C++, `py` gives Python, `json` gives JSON.
  2. Otherwise, from features of the content.
  3. If neither decides, it falls back to `LanguageType.CPP`.

### `hjeditor.completion`

Keyword completion.

- `levenshtein(source, target)` returns the edit distance between two strings.
- `word_before_cursor(text, position)` returns the word that ends at `position`. Word characters are letters, digits, `_` and `#`. It returns `""` in two cases:
  - the cursor is followed by a letter, a digit or a space;
  - the character before the cursor is a space.
- `word_start(text, position)` returns the index where that word begins.
- `rank_candidates(word, candidates)` keeps the candidates that contain `word` and sorts them by edit distance to it.
- `CompleteState` has three members: `IGNORE`, `SHOWING` and `HIDE`.
- `CompletionPopup` models the list of choices:
  - `show(items)` fills the list and selects the first row. The popup stays hidden when `items` is empty.
  - `hide()` hides it.
  - `move_up()` and `move_down()` change the selected row.
  - `current_item()` returns the selected item, or `None` if nothing is selected.
  - `height_rows` gives the popup height in rows: the item count plus one, capped at six.

### `hjeditor.editor`

`CodeEditor(text="")` is a text buffer with a cursor. Its attributes are:

- `text` and `cursor`;
- `popup`, the current `CompletionPopup`;
- `complete_state`;
- `extra_selections`, the highlighted positions.

The completion words are in `COMPLETE_LIST`.

Its methods:

- `set_cursor(position)` moves the cursor. It raises `ValueError` when the position is outside the text. It then refreshes the completion popup.
- `type_text(text)` inserts text at the cursor.
- `open_paren()` inserts `()` and places the cursor between the two. `open_quote()` does the same with `""`.
- `press_return()` has two behaviours:
  - While completions are showing, it replaces the word before the cursor with the selected item. For `#include` items the cursor is placed before the closing character.
  - Otherwise it breaks the line and copies the leading whitespace. It adds a tab after a line that ends in `)` and contains `for(`, `while(`, `switch(` or `if(`. After a line ending in `{`, it indents and adds a closing `}` on its own line.
- `press_backspace()` deletes the previous character. If that character was `(`, `"` or `<` and the next character is its partner (`)`, `"` or `>`), the partner is deleted too.
- `press_up()` and `press_down()` move through the completion list while it is showing. Otherwise they move the cursor one line and keep the column where possible.
- `refresh_completion()` recomputes the popup from the word before the cursor.
- `find_matching_bracket(position, closing_char)` returns the index of the first `closing_char` after `position` that is not inside a `"` string, or `None`.
- `highlight_matching_parenthesis()` looks at the character under the cursor. If it is `(`, `{` or `[`, the method highlights it and its match and returns the match's index.
- `line_number_area_width(char_width)` returns the width of the line-number gutter: `3 + char_width * digits`, with at least three digits.

### `hjeditor.findreplace`

Search and replace over a string.

`SearchOptions(case_sensitive=False, whole_words=False, regex=False)` controls matching:

- In plain mode an empty pattern, or a pattern containing a newline, finds nothing.
- In regex mode `case_sensitive=True` makes the pattern match case-*insensitively*; without it a regex matches case-sensitively.
- An invalid regular expression finds nothing.

The functions:

- `find(text, pattern, start=0, options=None)` returns the `(begin, end)` span of the first match at or after `start`, or `None`. It raises `ValueError` when `start` is outside the text.
- `replace_next(text, pattern, replacement, start=0, options=None)` replaces the next match. It returns `(new_text, cursor)`, where `cursor` is the position just after the replacement. The replacement is inserted literally, in regex mode too.
- `replace_all(text, pattern, replacement, options=None)` replaces every match from the start of the text and returns the new text. Inserted replacements are not searched again.

### `hjeditor.session`

`EditorSession()` tracks the open file. It starts with these defaults:

- `file_name` is `Untitled.cpp`;
- `file_path` is `~/Desktop/Untitled.cpp`;
- `file_saved` is `True`;
- `status` is `Ready`;
- `theme` is `Theme.LIGHT`.

Its methods:

- `text_changed()` records an edit. The first edit after loading only sets `title`. Later edits clear `file_saved` and append `*` to the title.
- `save(path, text)` writes the file as UTF-8 and makes it the session's file.
- `open(path)` reads the file, makes it the session's file and returns its text.
- `needs_save` is true while there are unsaved edits.
- `apply_theme(theme)` switches the theme.

The other names in the module:

- `Theme.LIGHT` and `Theme.DARK` carry RGB colours for the window, window text, base, text and toolbar. `toolbar_style` gives the matching style sheet.
- `file_name_from_path(path)` returns the `name.cpp`, `name.c` or `name.h` that follows a `/` in the path, or `""`.

## What it does not do

- There is no window, widget or command-line program.
- Nothing is drawn: highlighting and gutter sizes are computed, not painted.
- The package never compiles or runs the edited code. `EditorSession.is_running` is only a flag that nothing in the package sets.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from hjeditor.highlighter import Highlighter, detect_language
from hjeditor.completion import rank_candidates
from hjeditor.editor import CodeEditor
from hjeditor.findreplace import SearchOptions, replace_all

language = detect_language("main.cpp")
lines = Highlighter(language).highlight("int main() { return 0; }")

print(rank_candidates("in", ["int", "inline", "double"]))  # ['int', 'inline']

editor = CodeEditor("int main(){")
editor.set_cursor(len("int main(){"))
editor.press_return()
print(repr(editor.text))  # 'int main(){\n\t\n}'

print(replace_all("a a a", "a", "b", SearchOptions()))  # 'b b b'
```