import html

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tmplescape.utils import (
    Utf8ConversionError,
    buffer_to_string,
    escape_html,
    render_to_string,
)


def _never_called() -> str:
    raise AssertionError("context must not be evaluated on success")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", ""),
        ("a&b", "a&amp;b"),
        ("<a", "&lt;a"),
        (">a", "&gt;a"),
        ('"', "&quot;"),
        ("'", "&#x27;"),
        ("大阪", "大阪"),
    ],
)
def test_escape_html(text, expected):
    assert escape_html(text) == expected


def test_escape_html_forward_slash():
    assert escape_html("/") == "&#x2F;"


def test_escape_html_empty_string():
    empty = ""
    assert escape_html(empty) == empty


@given(st.text())
def test_escape_html_leaves_no_special_characters(text):
    escaped = escape_html(text)
    for char in "<>\"'/":
        assert char not in escaped


@given(st.text())
def test_escape_html_round_trips_through_unescape(text):
    assert html.unescape(escape_html(text)) == text


@given(st.text(alphabet=st.characters(blacklist_characters="&<>\"'/")))
def test_escape_html_keeps_plain_text(text):
    assert escape_html(text) == text


def test_render_to_string():
    result = render_to_string(_never_called, lambda w: w.write(b"test"))
    assert result == "test"


def test_render_to_string_multiple_writes_utf8():
    def render(writer):
        writer.write("大".encode("utf-8"))
        writer.write("阪".encode("utf-8"))

    assert render_to_string(_never_called, render) == "大阪"


def test_render_to_string_propagates_render_errors():
    def render(writer):
        raise KeyError("missing")

    with pytest.raises(KeyError):
        render_to_string(_never_called, render)


def test_render_to_string_invalid_utf8_raises_with_context():
    with pytest.raises(Utf8ConversionError) as info:
        render_to_string(lambda: "page.html", lambda w: w.write(b"\xff\xfe"))
    assert info.value.context == "page.html"
    assert "page.html" in str(info.value)
    assert isinstance(info.value.__cause__, UnicodeDecodeError)


@given(st.text())
def test_buffer_to_string_round_trip(text):
    assert buffer_to_string(_never_called, text.encode("utf-8")) == text


def test_buffer_to_string_accepts_bytearray():
    assert buffer_to_string(_never_called, bytearray(b"hello")) == "hello"


def test_buffer_to_string_invalid_utf8():
    with pytest.raises(Utf8ConversionError) as info:
        buffer_to_string(lambda: "tpl", b"ok\x80")
    assert info.value.context == "tpl"
    assert isinstance(info.value.cause, UnicodeDecodeError)