# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a fixed set of operations. It prints the operations it uses, one per
line, so the sequence can be replayed or checked.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb` | swap the top two elements of `a` or `b` |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb` | rotate up: the first element becomes the last |
| `rra`, `rrb` | rotate down: the last element becomes the first |

Two numbers are sorted with one swap. Three numbers, and four or five
numbers, use short fixed sequences. Longer inputs are sorted with a binary
radix sort on each value's rank (the number of values smaller than it).

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments, as one argument with spaces, or as a
mix of both:

```
pushswap 3 2 1
pushswap "4 67 3 87 23"
pushswap 5 "1 4" 2 3
```

The moves are written to standard output, one per line. Already sorted input
produces no output. The command exits with status 1 in every case.

Bad input writes `ERROR` to standard error and no moves. This happens when:

- no arguments are given,
- an argument is empty or starts with a space,
- a character other than a digit, a space, `-` or `+` appears,
- a sign is followed by a space or ends the argument,
- a sign or other character sits where a digit is expected inside a number
  (for example `5-3` or `+-5`),
- a number appears twice.

A number larger than 2147483647 in absolute value writes `Error` instead.

## Library use

```python
from pushswap.cli import solve

operations = solve(["3", "2", "1"])   # ['ra', 'sa']
```

- `pushswap.cli.solve(args)` returns the list of moves, or raises
  `pushswap.parsing.PushSwapError`; its `message` is the text printed and its
  `operations` holds any moves made before the error.
- `pushswap.stacks.Stacks(values, out)` holds the two stacks (tops at index
  0) and performs `swap`, `push` and `rotate`, recording each move in
  `operations` and writing it to `out` when one is given.
- `pushswap.sorting.sort_stacks(stacks)` picks `sort_three`, `sort_small` or
  `radix_sort` for the size of stack `a`; these expect the ranks `0..n-1`.
- `pushswap.parsing` has `validate_arguments`, `parse_number`,
  `parse_numbers`, `check_duplicates` and `index_values`.

The package also carries small helpers:

- `pushswap.chars`: ASCII classification and case conversion,
- `pushswap.strings`: C-style string searches, `strlcpy`/`strlcat` on byte
  buffers, `atoi` and `itoa`,
- `pushswap.text`: word counting, splitting, slicing, joining, trimming and
  mapping,
- `pushswap.memory`: byte-buffer fill, search, copy and compare,
- `pushswap.output`: writing characters, strings and numbers to a stream,
- `pushswap.printf`: `format_printf` and `printf` for `%c %s %d %i %u %x %X %p %%`,
- `pushswap.linked_list`: `Node` and `LinkedList`,
- `pushswap.reader`: `LineReader`, which reads a stream line by line through
  a fixed-size buffer.

## What it does not do

There is no checker command that reads moves and verifies them, and the
combined moves `ss`, `rr` and `rrr` are never used.

## Tests

```
pip install .[test]
pytest
```