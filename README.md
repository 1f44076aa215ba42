# cursus

A small collection of classic systems-programming exercises as a Python
package:

- **`cursus.chars`**: ASCII character tests (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`) and case conversion (`to_lower`,
  `to_upper`).
- **`cursus.memory`**: byte-buffer helpers (`memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`).
- **`cursus.strings`**: string searching, comparison and slicing (`strchr`,
  `strrchr`, `strnstr`, `strncmp`, `strtrim`, `substr`, `strjoin`, `strmapi`,
  `striteri`) and bounded copies into NUL-terminated buffers (`strlcpy`,
  `strlcat`).
- **`cursus.conversions`**: `atoi`, `itoa` and `split`.
- **`cursus.linked`**: a singly linked list (`Node`, `LinkedList`).
- **`cursus.nextline`**: `LineReader` and `get_next_line`, which read a file
  descriptor one line at a time through a fixed-size buffer.
- **`cursus.minitalk.protocol`**: bit framing for messages sent one bit at a
  time (`encode_byte`, `encode_message`, `BitDecoder`).
- **`cursus.pushswap`**: a sorter that orders integers using two stacks and a
  fixed set of operations, with the `push-swap` command.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from cursus.chars import is_digit, to_upper
from cursus.conversions import atoi, itoa, split
from cursus.strings import strtrim

is_digit("7")                # True
to_upper("a")                # "A"
atoi("   -42abc")            # -42
itoa(-7)                     # "-7"
split("a,b,,c", ",")         # ["a", "b", "c"]
strtrim("xxhelloxx", "x")    # "hello"
```

Reading a file line by line:

```python
import os
from cursus.nextline import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in LineReader(fd, 1024):
        print(line.decode(), end="")
finally:
    os.close(fd)
```

Lines are `bytes`. Each line that ends in a newline keeps it; the last line
is returned as is. `get_next_line(fd)` does the same with one reader kept per
descriptor and returns `None` at the end of the input.

Framing a message as bits:

```python
from cursus.minitalk.protocol import BitDecoder, encode_message

bits = encode_message("hi")    # 24 bits: "h", "i", then a NUL byte
decoder = BitDecoder()
received = [b for b in map(decoder.feed, bits) if b is not None]
# received == [104, 105, 0]
```

Each byte is sent most significant bit first; 1 is meant to travel as
`SIGUSR1` and 0 as `SIGUSR2`.

## The push-swap command

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The numbers may be given as separate arguments or inside quoted strings. The
command prints the operations that sort stack `a` in ascending order, one per
line (`sa`, `pa`, `pb`, `ra`, `rr`, `rra`, `rrb`, `rrr` and the like). Input
that is already sorted prints nothing. An argument that is only whitespace, a
token that is not a signed number, a value outside the 32-bit integer range, a
repeated value or zero given more than once prints `Error` on standard error
and exits with status 1.

From Python, `cursus.pushswap.sorter.push_swap(values)` returns the list of
operations, and `cursus.pushswap.stacks.Stacks` lets you apply operations by
hand.

## What this package does not do

- It has no messaging server or client: `cursus.minitalk` only encodes and
  decodes the bit stream. Sending signals to a process, acknowledging each
  bit and printing received messages are left to the caller.
- It has no helpers for writing characters, strings or numbers to a stream.