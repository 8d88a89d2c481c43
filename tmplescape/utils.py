"""HTML escaping and helpers for turning rendered bytes into text."""

from __future__ import annotations

import io
from typing import BinaryIO, Callable, Union

__all__ = [
    "Utf8ConversionError",
    "escape_html",
    "render_to_string",
    "buffer_to_string",
]

BytesLike = Union[bytes, bytearray, memoryview]

# The five characters significant in XML plus the forward slash, which helps
# to end an HTML entity. Hex entities are used where no named one is advised.
_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#x27;",
        "/": "&#x2F;",
    }
)


class Utf8ConversionError(ValueError):
    """Rendered output could not be decoded as UTF-8."""

    def __init__(self, context: str, cause: UnicodeDecodeError) -> None:
        super().__init__(
            f"UTF-8 conversion error occurred while rendering template: {context}"
        )
        self.context = context
        self.cause = cause


def escape_html(text: str) -> str:
    """Escape ``& < > " ' /`` with HTML entities so text cannot change context."""
    return text.translate(_HTML_ESCAPES)


def buffer_to_string(context: Callable[[], str], buffer: BytesLike) -> str:
    """Decode ``buffer`` as UTF-8.

    ``context`` is only called when decoding fails; its result describes what
    was being rendered and ends up in the raised :class:`Utf8ConversionError`.
    """
    try:
        return bytes(buffer).decode("utf-8")
    except UnicodeDecodeError as error:
        raise Utf8ConversionError(context(), error) from error


def render_to_string(
    context: Callable[[], str], render: Callable[[BinaryIO], object]
) -> str:
    """Run ``render`` against a fresh byte buffer and return the decoded text.

    Any exception raised by ``render`` propagates unchanged.
    """
    with io.BytesIO() as buffer:
        render(buffer)
        return buffer_to_string(context, buffer.getvalue())