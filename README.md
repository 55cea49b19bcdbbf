# tinyprintf

A small printf-style formatter. It handles a fixed set of conversions and
returns the number of characters it writes, the same way `printf` does.

## Installation

```
pip install tinyprintf
```

## Conversions

| Spec | Argument | Output |
|------|----------|--------|
| `%c` | one-character string, or integer code | a single character; an integer is cut down to its low byte |
| `%s` | string or `None` | the string, or `(null)` for `None` |
| `%p` | integer address or `None` | `0x` plus lower-case hex, wrapped to 64 bits; `(nil)` for `None` or zero |
| `%d`, `%i` | integer | signed decimal, wrapped to a 32-bit int |
| `%u` | integer | unsigned decimal, wrapped to 32 bits |
| `%x`, `%X` | integer | hex in lower or upper case, wrapped to 32 bits |
| `%%` | none | a literal `%` |

There are no flags, widths or precisions. If a `%` is followed by anything
other than one of the characters above, or ends the template, formatting
stops at that point and the rest of the template is dropped.

Arguments are consumed in order. Extra arguments are ignored. An argument of
the wrong kind raises `TypeError` (for example a non-integer to `%d`, or a
non-string to `%s`); a `%c` string that is not exactly one character long
raises `ValueError`.

## Usage

```python
from tinyprintf.printer import format_message, printf

text = format_message("%s has %d items (%x)", "cart", 42, 255)
# 'cart has 42 items (ff)'

format_message("%d %u", -1, -1)
# '-1 4294967295'

count = printf("value: %u%%\n", 7)
# writes "value: 7%" and a newline to standard output, returns 10
```

`printf` also takes a keyword-only `file` argument, so you can write to any
text stream; without it, output goes to standard output:

```python
import io
from tinyprintf.printer import printf

buffer = io.StringIO()
printf("%X", 48879, file=buffer)
assert buffer.getvalue() == "BEEF"
```

If the template asks for more arguments than it was given,
`tinyprintf.printer.FormatArgumentError` (a subclass of `TypeError`) is
raised, and nothing is written.

The conversions are also available one by one in `tinyprintf.conversions`:
`format_char(value)`, `format_string(value)`, `format_pointer(value)`,
`format_decimal(value)`, `format_unsigned(value)` and
`format_hex(value, upper=False)`. Each returns the rendered text.

## Running the tests

```
pip install -e ".[test]"
pytest
```