# basekit

A small toolbox of everyday building blocks that follow the semantics of
the classic C character, string and memory routines, written as ordinary
Python.

## Install

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module               | Contents |
|----------------------|----------|
| `basekit.chars`      | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_space`, `to_upper`, `to_lower` |
| `basekit.conv`       | `atoi`, `itoa`, `atof` |
| `basekit.strings`    | `split`, `strchr`, `strrchr`, `strdup`, `striteri`, `strjoin`, `strlcat`, `strlcpy`, `strlen`, `strmapi`, `strncmp`, `strnstr`, `strtrim`, `substr` |
| `basekit.output`     | `Color`, `put_char`, `put_str`, `put_endl`, `put_nbr` |
| `basekit.linkedlist` | `Node`, `LinkedList` |
| `basekit.memory`     | `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove` |
| `basekit.printf`     | `format_string`, `printf` |
| `basekit.reader`     | `LineReader`, `get_next_line` |

## Characters

The tests in `basekit.chars` accept a one-character string or an integer
code point and only recognise ASCII. `to_upper` and `to_lower` return the
same kind they were given:

```python
from basekit.chars import is_alpha, to_upper

is_alpha("é")   # False
to_upper("a")   # "A"
to_upper(97)    # 65
```

## Numbers

Parsing follows the lenient C rules. Leading whitespace and one sign are
accepted, and parsing stops at the first character that does not fit.
`atoi` wraps like a 32-bit signed integer, `itoa` raises `OverflowError`
outside that range, and `atof` does not understand scientific notation:

```python
from basekit.conv import atoi, itoa, atof

atoi("  -42abc")   # -42
itoa(-2147483648)  # "-2147483648"
atof(" 3.25xyz")   # 3.25
```

## Strings

Searches return an index, or `None` when nothing is found:

```python
from basekit.strings import split, strtrim, strchr, strnstr, strlcpy

split("  a b  c ", " ")        # ["a", "b", "c"]
strtrim("xxhixx", "x")         # "hi"
strchr("hello", "l")           # 2
strchr("hello", "\0")          # 5
strnstr("haystack", "st", 4)   # None

dest = list("old")
strlcpy(dest, "abcdef", 4)     # 6; dest is now ["a", "b", "c"]
```

`strlcpy` and `strlcat` work on mutable sequences such as lists and
return the length the result would have had without truncation.

## Linked list

```python
from basekit.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
doubled = items.map(lambda x: x * 2)
list(doubled)         # [0, 2, 4, 6]
len(items)            # 4
items.last().content  # 3
items.clear(print)    # passes every content to print, then empties the list
```

## Byte buffers

`basekit.memory` works on `bytearray` buffers. Counts larger than a buffer
raise `IndexError`; `memmove` copies between offsets of one buffer and
handles overlap; `calloc` returns `None` for a zero count or size:

```python
from basekit.memory import memmove, calloc

buf = bytearray(b"abcdef")
memmove(buf, 2, 0, 4)   # bytearray(b"ababcd")
calloc(2, 3)            # bytearray(6 zero bytes)
```

## printf

The formatter understands `%c %s %p %d %i %u %x %X %%`. An unknown
conversion raises `ValueError` and a missing argument raises `TypeError`.
`printf` writes the result and returns the number of characters written:

```python
import io
from basekit.printf import format_string, printf

format_string("%d items, %x hex, %s", 7, 255, None)
# "7 items, ff hex, (null)"

out = io.StringIO()
printf("%u%%\n", 50, file=out)  # returns 4
```

## Output

The writers default to standard output; `Color` holds ANSI escape
sequences:

```python
import sys
from basekit.output import Color, put_nbr, put_endl

put_endl(Color.GRN.paint("ok"), sys.stdout)
put_nbr(-15, sys.stdout)
```

## Reading lines

`LineReader` pulls data through a fixed-size buffer from any object with a
`read(size)` method. The newline is kept, and the last line may have none:

```python
import io
from basekit.reader import LineReader

reader = LineReader(io.StringIO("first\nsecond"), buffer_size=5)
list(reader)  # ["first\n", "second"]
```

`get_next_line(fd)` does the same for an open file descriptor, returning
`bytes` lines and `None` at the end, and keeps leftover data per
descriptor between calls. Descriptors outside 0–1023 raise `ValueError`.

## What it does not do

basekit is a library only: it installs no command-line tool.