# libft

A small toolbox of low-level helpers with the semantics of the classic C
library routines, expressed with Python types: positions are returned as
indices, "not found" is `None`, and bad arguments raise exceptions.

- `libft.charclass`: ASCII character tests and case conversion
  (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`). Each accepts an integer code or a
  one-character string; the tests return a `bool`, and the conversions
  return the same kind of value they were given.
- `libft.memory`: operations on byte buffers (`memset`, `bzero`,
  `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`). Buffers written to
  must be a `bytearray` or a writable `memoryview`; a length reaching past
  the end of a buffer raises `ValueError`. `memmove` copies within one
  buffer between two offsets, and `calloc` raises `OverflowError` when the
  total size would not fit in 64 bits.
- `libft.strings`: string helpers (`strlcpy`, `strlcat`, `strchr`,
  `strrchr`, `strncmp`, `strnstr`, `atoi`, `strdup`, `substr`, `strjoin`,
  `strtrim`, `split`, `itoa`, `strmapi`, `striteri`). `strlcpy` and
  `strlcat` return the resulting string together with the length they
  tried to create; `atoi` wraps values into the 32-bit signed range;
  `itoa` raises `OverflowError` outside that range; `striteri` updates a
  mutable sequence in place.
- `libft.output`: write characters, strings, lines and integers to a raw
  file descriptor (`putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`).
  Each returns the number of bytes written; a descriptor of `-1` writes
  nothing, and `None` as a string writes nothing.
- `libft.linkedlist`: a singly linked list (`Node`, `LinkedList`) with
  `push_front`, `push_back`, `last`, `pop_front`, `clear`, `for_each`,
  `map`, `len()` and iteration over contents.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from libft.strings import atoi, itoa, split, strlcpy, strtrim
from libft.charclass import is_alpha, to_upper

atoi("   -42abc")              # -42
itoa(-2147483648)              # "-2147483648"
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"
strlcpy("hello", 3)            # ("he", 5)
is_alpha(ord("a"))             # True
to_upper(ord("a"))             # 65, the code of "A"
to_upper("b")                  # "B"
```

```python
from libft.memory import calloc, memchr, memcmp, memset

buf = calloc(4, 2)             # bytearray of 8 zero bytes
memset(buf, ord("a"), 3)
memcmp(buf, b"aaa", 3)         # 0
memchr(buf, 0, 8)              # 3
```

```python
from libft.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
items.push_back(4)
len(items)                               # 5
list(items.map(lambda x: x * 10, None))  # [0, 10, 20, 30, 40]
items.pop_front()                        # 0
```

```python
import sys
from libft.output import putendl_fd, putnbr_fd

putendl_fd("hello", sys.stdout.fileno())   # returns 6
putnbr_fd(-123, sys.stdout.fileno())       # returns 4
```