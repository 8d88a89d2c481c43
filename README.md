# tmplescape

Small helpers for producing safe template output. Everything lives in
the `tmplescape.utils` module.

## HTML escaping

`escape_html(text)` replaces the characters that can switch an HTML
document into another execution context. It escapes the five
XML-significant characters and the forward slash:

| Character | Replacement |
|-----------|-------------|
| `&`       | `&amp;`     |
| `<`       | `&lt;`      |
| `>`       | `&gt;`      |
| `"`       | `&quot;`    |
| `'`       | `&#x27;`    |
| `/`       | `&#x2F;`    |

Every other character, non-ASCII text included, is left as it is.

```python
from tmplescape.utils import escape_html

escape_html("<a href='/x'>Tom & Jerry</a>")
# '&lt;a href=&#x27;&#x2F;x&#x27;&gt;Tom &amp; Jerry&lt;&#x2F;a&gt;'
```

## Rendering into a string

`render_to_string(context, render)` takes two callables. It creates an
in-memory binary stream and passes it to `render`, which writes bytes to
it. It then decodes those bytes as UTF-8 and returns the text. If
`render` raises an exception, that exception is not caught.

```python
from tmplescape.utils import render_to_string

text = render_to_string(lambda: "greeting", lambda out: out.write(b"hello"))
assert text == "hello"
```

`buffer_to_string(context, buffer)` decodes bytes you already have. The
buffer can be `bytes`, `bytearray` or `memoryview`.

Both functions call `context` only when decoding fails. Its return value
describes what was being rendered.

## Errors

Bytes that are not valid UTF-8 raise `Utf8ConversionError`, a subclass of
`ValueError`. Its message reads
`UTF-8 conversion error occurred while rendering template: <context>`.
The error has these attributes:

- `context`: the text returned by the `context` callable.
- `cause`: the underlying `UnicodeDecodeError`.

The `UnicodeDecodeError` is also chained as the exception's `__cause__`.

```python
from tmplescape.utils import Utf8ConversionError, buffer_to_string

try:
    buffer_to_string(lambda: "page.html", b"\xff")
except Utf8ConversionError as error:
    print(error.context)  # page.html
```

## What this package does not do

There is no template language here. The package does not parse or render
templates, manage contexts, or provide filters, inheritance or macros. It
offers only the escaping and decoding steps that a template renderer
would call, and it has no command-line interface.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```