import pytest

from hjeditor.highlighter import (
    IN_COMMENT,
    Highlighter,
    LanguageType,
    TextFormat,
    detect_language,
)


@pytest.fixture
def cpp():
    return Highlighter(LanguageType.CPP)


def test_default_language_is_cpp():
    assert Highlighter().language is LanguageType.CPP


def test_cpp_keyword_format_colour(cpp):
    assert cpp.keyword_format == TextFormat((201, 81, 116), bold=True)


def test_cpp_keyword_and_function(cpp):
    formats, state = cpp.highlight_block("int main() {")
    assert formats[0:3] == [cpp.keyword_format] * 3
    assert formats[4:8] == [cpp.function_format] * 4
    assert formats[3] is None
    assert state == 0


def test_cpp_keyword_needs_word_boundary(cpp):
    formats, _ = cpp.highlight_block("integer")
    assert formats == [None] * len("integer")


def test_cpp_class_name(cpp):
    formats, _ = cpp.highlight_block("class Foo")
    assert formats[0:5] == [cpp.keyword_format] * 5
    assert formats[6:9] == [cpp.class_format] * 3


def test_cpp_line_comment_overrides_keyword(cpp):
    text = "// int x"
    formats, _ = cpp.highlight_block(text)
    assert formats == [cpp.single_line_comment_format] * len(text)


def test_cpp_include(cpp):
    text = "#include <vector>"
    formats, _ = cpp.highlight_block(text)
    assert formats == [cpp.quotation_format] * len(text)


def test_cpp_string(cpp):
    text = 'x = "for";'
    formats, _ = cpp.highlight_block(text)
    assert formats[4:9] == [cpp.quotation_format] * 5


def test_cpp_unterminated_comment_sets_state(cpp):
    text = "a /* b"
    formats, state = cpp.highlight_block(text)
    assert state == IN_COMMENT
    assert formats[0] is None
    assert formats[2:] == [cpp.multi_line_comment_format] * (len(text) - 2)


def test_cpp_comment_continues_and_ends(cpp):
    formats, state = cpp.highlight_block("c */ int", IN_COMMENT)
    assert state == 0
    assert formats[0:4] == [cpp.multi_line_comment_format] * 4
    assert formats[5:8] == [cpp.keyword_format] * 3


def test_cpp_closed_comment_on_one_line(cpp):
    text = "x /* y */ z"
    formats, state = cpp.highlight_block(text)
    assert state == 0
    assert formats[2:9] == [cpp.multi_line_comment_format] * 7
    assert formats[10] is None


def test_highlight_document_carries_state(cpp):
    lines = cpp.highlight("/* a\nb\nc */ int")
    assert len(lines) == 3
    assert lines[0] == [cpp.multi_line_comment_format] * 4
    assert lines[1] == [cpp.multi_line_comment_format]
    assert lines[2][5:8] == [cpp.keyword_format] * 3


def test_python_rules():
    hl = Highlighter(LanguageType.PYTHON)
    text = "def foo(x): return 42"
    formats, state = hl.highlight_block(text)
    assert formats[0:3] == [hl.keyword_format] * 3
    assert formats[4:7] == [hl.function_format] * 3
    assert formats[12:18] == [hl.keyword_format] * 6
    assert formats[19:21] == [hl.number_format] * 2
    assert state == 0


def test_python_comment():
    hl = Highlighter(LanguageType.PYTHON)
    text = "# import os"
    formats, _ = hl.highlight_block(text)
    assert formats == [hl.single_line_comment_format] * len(text)


def test_python_strings():
    hl = Highlighter(LanguageType.PYTHON)
    text = "s = 'if'"
    formats, _ = hl.highlight_block(text)
    assert formats[4:8] == [hl.quotation_format] * 4


def test_json_rules():
    hl = Highlighter(LanguageType.JSON)
    text = '{"a": 1, "b": true}'
    formats, state = hl.highlight_block(text)
    assert formats[0] == hl.json_separator_format
    assert formats[1:4] == [hl.quotation_format] * 3
    assert formats[4] == hl.json_separator_format
    assert formats[6] == hl.number_format
    assert formats[14:18] == [hl.keyword_format] * 4
    assert formats[-1] == hl.json_separator_format
    assert state == 0


def test_json_has_no_multiline_comment_state():
    hl = Highlighter(LanguageType.JSON)
    _, state = hl.highlight_block("/* not a comment", IN_COMMENT)
    assert state == 0


@pytest.mark.parametrize(
    "name, expected",
    [
        ("main.cpp", LanguageType.CPP),
        ("lib.hpp", LanguageType.CPP),
        ("dir/x.C", LanguageType.CPP),
        ("script.PY", LanguageType.PYTHON),
        ("data.json", LanguageType.JSON),
    ],
)
def test_detect_by_suffix(name, expected):
    assert detect_language(name, "import os") is expected or expected is LanguageType.PYTHON
    assert detect_language(name) is expected


@pytest.mark.parametrize(
    "content, expected",
    [
        ('{"a": 1}', LanguageType.JSON),
        ("[1, 2]: x", LanguageType.JSON),
        ("def f():\n    pass", LanguageType.PYTHON),
        ("import os\n", LanguageType.PYTHON),
        ("int x;", LanguageType.CPP),
        ("#include <stdio.h>", LanguageType.CPP),
        ("hello world", LanguageType.CPP),
        ("", LanguageType.CPP),
    ],
)
def test_detect_by_content(content, expected):
    assert detect_language("", content) is expected


def test_unknown_suffix_falls_back_to_content():
    assert detect_language("notes.txt", "from x import y") is LanguageType.PYTHON
    assert detect_language("README", "class A;") is LanguageType.CPP