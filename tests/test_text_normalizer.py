"""Test whitespace normalization and display-field truncation."""
from utils.text_normalizer import DISPLAY_FIELD_LIMIT, normalize_whitespace, truncate_display


def test_collapses_newlines_and_spaces():
    assert normalize_whitespace("a\n\n  b") == "a b"


def test_trims_and_handles_tabs():
    assert normalize_whitespace("\t  hello \r\n world  ") == "hello world"


def test_empty_and_none():
    assert normalize_whitespace(None) == ""
    assert normalize_whitespace("   \n ") == ""
    assert truncate_display(None) == ""


def test_truncate_hard_cut_at_255():
    title = "word " * 60  # 300 characters
    assert len(title) == 300

    result = truncate_display(title)

    assert len(result) == DISPLAY_FIELD_LIMIT == 255
    assert result == normalize_whitespace(title)[:255]


def test_truncate_normalizes_before_cutting():
    text = "a" + " " * 400 + "b"
    assert truncate_display(text) == "a b"


def test_truncate_custom_limit():
    assert truncate_display("abcdef", limit=3) == "abc"
