import pytest

from hjeditor.completion import CompleteState, levenshtein
from hjeditor.editor import CodeEditor


def _at_end(text):
    editor = CodeEditor(text)
    editor.set_cursor(len(text))
    return editor


def test_open_paren_pairs_and_centres_cursor():
    editor = CodeEditor()
    editor.open_paren()
    assert editor.text == "()"
    assert editor.cursor == 1


def test_open_quote_pairs_and_centres_cursor():
    editor = CodeEditor()
    editor.open_quote()
    assert editor.text == '""'
    assert editor.cursor == 1


def test_backspace_removes_both_parens():
    editor = CodeEditor()
    editor.open_paren()
    editor.press_backspace()
    assert editor.text == ""
    assert editor.cursor == 0


def test_backspace_removes_angle_pair():
    editor = CodeEditor("<>")
    editor.set_cursor(1)
    editor.press_backspace()
    assert editor.text == ""


def test_backspace_keeps_unmatched_follower():
    editor = CodeEditor("(b")
    editor.set_cursor(1)
    editor.press_backspace()
    assert editor.text == "b"
    assert editor.cursor == 0


def test_return_copies_leading_indent():
    line = "    x = 1;"
    editor = _at_end(line)
    editor.press_return()
    assert editor.text == line + "\n    "
    assert editor.cursor == len(editor.text)


def test_return_on_empty_line_only_breaks():
    editor = CodeEditor()
    editor.press_return()
    assert editor.text == "\n"


def test_return_after_control_statement_indents():
    editor = _at_end("if(a)")
    editor.press_return()
    assert editor.text == "if(a)\n\t"


def test_return_after_brace_closes_block():
    editor = _at_end("main(){")
    editor.press_return()
    assert editor.text == "main(){\n\t\n}"
    assert editor.cursor == len("main(){\n\t")


def test_return_after_indented_brace_closes_block_with_indent():
    editor = _at_end("\tif(x){")
    editor.press_return()
    assert editor.text == "\tif(x){\n\t\t\n\t}"
    assert editor.cursor == len("\tif(x){\n\t\t")


def test_typing_word_shows_completion():
    editor = CodeEditor()
    editor.type_text("whi")
    assert editor.complete_state is CompleteState.SHOWING
    assert editor.popup.items == ["while"]
    assert editor.popup.visible


def test_return_accepts_completion():
    editor = CodeEditor()
    editor.type_text("whi")
    editor.press_return()
    assert editor.text == "while"
    assert editor.cursor == len("while")
    assert editor.complete_state is CompleteState.HIDE
    assert not editor.popup.visible


def test_include_completion_puts_cursor_inside():
    editor = CodeEditor()
    editor.type_text("#inc")
    assert set(editor.popup.items) == {"#include <>", '#include ""'}
    editor.press_return()
    assert editor.text in {"#include <>", '#include ""'}
    assert editor.cursor == len(editor.text) - 1


def test_completion_items_ranked_by_distance():
    editor = CodeEditor()
    editor.type_text("in")
    distances = [levenshtein(item, "in") for item in editor.popup.items]
    assert distances == sorted(distances)
    assert all("in" in item for item in editor.popup.items)


def test_up_down_move_popup_selection_not_cursor():
    editor = CodeEditor()
    editor.type_text("t")
    assert len(editor.popup.items) > 2
    editor.press_down()
    assert editor.popup.current_row == 1
    editor.press_up()
    editor.press_up()
    assert editor.popup.current_row == 0
    assert editor.text == "t"
    assert editor.cursor == 1


def test_up_down_move_cursor_between_lines():
    editor = CodeEditor("123\n45")
    editor.set_cursor(6)
    editor.press_up()
    assert editor.cursor == 2
    editor.press_down()
    assert editor.cursor == 6


def test_find_matching_bracket_skips_strings():
    text = '(a")"b)'
    editor = CodeEditor(text)
    assert editor.find_matching_bracket(0, ")") == text.rindex(")")


def test_find_matching_bracket_missing():
    editor = CodeEditor("(abc")
    assert editor.find_matching_bracket(0, ")") is None


def test_highlight_matching_parenthesis_selects_pair():
    editor = CodeEditor("(x)")
    editor.set_cursor(0)
    assert editor.highlight_matching_parenthesis() == 2
    assert [sel.position for sel in editor.extra_selections] == [2, 0]


def test_current_line_highlighted_on_start():
    editor = CodeEditor("abc")
    assert len(editor.extra_selections) == 1
    assert editor.extra_selections[0].full_width


def test_set_cursor_out_of_range():
    editor = CodeEditor("abc")
    with pytest.raises(ValueError):
        editor.set_cursor(4)


@pytest.mark.parametrize("char_width", [5, 8, 11])
def test_line_number_width_grows_with_digits(char_width):
    small = CodeEditor("x")
    medium = CodeEditor("\n" * 998)
    large = CodeEditor("\n" * 999)
    assert small.line_number_area_width(char_width) == medium.line_number_area_width(char_width)
    assert (
        large.line_number_area_width(char_width) - small.line_number_area_width(char_width)
        == char_width
    )