import pytest

from GroupSecurity.xss_protection import escape_html, sanitize_text


def test_escape_html_replaces_each_special_character_in_place():
    assert escape_html("a&b<c>d\"e'f") == "a&amp;b&lt;c&gt;d&quot;e&#039;f"


def test_escape_html_leaves_no_raw_markup_characters():
    escaped = escape_html("<script>alert('x' & \"y\")</script>")
    for ch in "<>\"'":
        assert ch not in escaped
    assert escaped.count("&") == escaped.count("&amp;") + escaped.count("&lt;") + escaped.count(
        "&gt;"
    ) + escaped.count("&quot;") + escaped.count("&#039;")


def test_escape_html_is_not_idempotent_for_ampersands():
    assert escape_html(escape_html("&")) == "&amp;amp;"


def test_escape_html_keeps_newlines_and_plain_text():
    assert escape_html("line one\nline two\ttabbed") == "line one\nline two\ttabbed"


@pytest.mark.parametrize("value", [None, 42, 3.5, [], {}, b"<b>", ""])
def test_escape_html_returns_empty_for_non_text(value):
    assert escape_html(value) == ""


@pytest.mark.parametrize("value", ["plain", "a <b> & 'c'\nnext line", None, 7])
def test_sanitize_text_matches_escape_html(value):
    assert sanitize_text(value) == escape_html(value)


def test_sanitize_text_does_not_convert_newlines():
    assert sanitize_text("first\nsecond") == "first\nsecond"
