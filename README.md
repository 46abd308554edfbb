# libft

A small library of character, memory, string, number-conversion, output
and linked-list helpers. They keep the edge cases of the classic C
routines, but take and return Python types: positions are indices,
failed searches give `None`, and bad arguments raise exceptions.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.charclass`

`is_digit`, `is_alpha`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`,
`to_upper`. Each accepts an integer code or a one-character string and
recognises only the ASCII ranges. `to_lower` and `to_upper` return the
same kind (int or str) they were given. A string longer than one
character raises `ValueError`.

### `libft.memory`

Operations on `bytearray` and `memoryview` buffers (reading also works on
`bytes`):

- `memset(buf, value, length)` fills with `value & 0xFF`; `bzero(buf, length)` fills with zero.
- `calloc(count, size)` returns a zero-filled `bytearray`.
- `memcpy(dst, src, n)` copies the first `n` bytes.
- `memmove(buffer, dst_offset, src_offset, n)` copies within one buffer; overlapping regions are handled.
- `memchr(data, c, n)` returns the index of the first matching byte, or `None`.
- `memcmp(a, b, n)` returns the difference of the first differing unsigned bytes, or 0.

A negative length raises `ValueError`; a length larger than a buffer
raises `IndexError`.

### `libft.convert`

- `atoi(s)` skips leading ASCII whitespace, accepts one `+` or `-` only
  when a digit follows it (otherwise returns 0), stops at the first
  non-digit, and wraps the result to a 32-bit signed int.
- `itoa(n)` returns the decimal text of a 32-bit signed int and raises
  `OverflowError` outside that range.

### `libft.cstring`

Strings are read up to their first NUL character.

- `strlen(s)`, `strdup(s)`.
- `strlcpy(src, size)` returns `(copied_text, len(src))`.
- `strlcat(dst, src, size)` returns `(result_text, intended_length)`.
- `strchr(s, c)` and `strrchr(s, c)` return an index or `None`; searching for NUL gives `strlen(s)`.
- `strncmp(s1, s2, n)` returns the difference of the first differing character codes, or 0.
- `strnstr(haystack, needle, length)` returns the index of a needle lying wholly within the first `length` characters, or `None`; an empty needle gives 0.

### `libft.strutil`

- `substr(s, start, length)`, `strjoin(s1, s2)`, `strtrim(s, charset)`.
- `split(s, sep)` splits on a single character and drops empty pieces.
- `strmapi(s, f)` builds a string from `f(index, char)`.
- `striteri(s, f)` calls `f(index, item)` on a mutable sequence and stores any non-`None` result back in place.

### `libft.output`

`putchar_fd(c, fd)`, `putstr_fd(s, fd)`, `putendl_fd(s, fd)` and
`putnbr_fd(n, fd)` write to an open file descriptor with `os.write`.
Strings are written in UTF-8 up to their first NUL; an integer given to
`putchar_fd` is written as one byte.

### `libft.linkedlist`

`Node` holds a `content` and a `next` node; `Node.release(delete)` passes
the content to `delete` (if given) and detaches the node.

`LinkedList(items)` builds a list from an iterable and supports
`push_front(node)`, `push_back(node)`, `last()`, `len()`, iteration over
contents, `clear(delete)`, `iterate(f)` and `map(f, delete)`. If `f`
raises during `map`, the contents built so far are passed to `delete`
and the error propagates.

## Example

```python
from libft.convert import atoi, itoa
from libft.cstring import strlcpy
from libft.strutil import split, strtrim
from libft.linkedlist import LinkedList

atoi("   -42abc")              # -42
itoa(-2147483648)              # "-2147483648"
strlcpy("hello", 3)            # ("he", 5)
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"

items = LinkedList([1, 2, 3])
list(items.map(lambda v: v * 2, None))  # [2, 4, 6]
```

## What it does not do

This is a library only: it installs no command-line tool.