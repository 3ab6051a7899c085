# pushswap

`pushswap` sorts a list of distinct integers using two stacks, **a** and **b**,
and a small fixed set of operations. It prints the operations it used, one per
line, in order. The aim is that following them from the start leaves stack
**a** sorted in ascending order and stack **b** empty.

Lists of two to five numbers use fixed move sequences. Longer lists are sorted
by pushing to **b**, on each turn, the number of **a** that is cheapest to put
in its place. The numbers are then pushed back onto **a**.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments:

```
push-swap 3 2 1
```

You can also give them as one quoted, space-separated argument:

```
push-swap "4 67 3 87 23"
```

The first number given is the top of stack **a**. When the input is already
sorted, nothing is printed and the exit status is 0.

The command writes `Error` to standard error and exits with status 1 when any
of these is true:

- an argument holds anything but digits after an optional leading `-`
  (a `+` sign is not accepted, and neither is a lone `-`)
- a number is outside the 32-bit signed range
- the same number appears more than once
- a single argument holds nothing but spaces

If no arguments are given, or the first one is empty, the command exits with
status 1 and prints nothing. When several arguments are given, an empty one
after the first counts as `0`.

If an operation cannot be carried out while sorting, the command prints the
operations made so far. It then writes `Error` to standard error and exits
with status 1.

The command can also be run as `python -m pushswap.cli`.

## Operations

| name  | effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the first two elements of **a**              |
| `sb`  | swap the first two elements of **b**              |
| `ss`  | `sa` and `sb` together                            |
| `pa`  | move the top of **b** to the top of **a**         |
| `pb`  | move the top of **a** to the top of **b**         |
| `ra`  | rotate **a** up: the first element becomes last   |
| `rb`  | rotate **b** up                                   |
| `rr`  | `ra` and `rb` together                            |
| `rra` | rotate **a** down: the last element becomes first |
| `rrb` | rotate **b** down                                 |
| `rrr` | `rra` and `rrb` together                          |

## Library use

```python
from pushswap.cli import solve
from pushswap.stacks import Stacks

moves = solve([3, 2, 1])
print(moves)                # ['ra', 'sa']

stacks = Stacks([5, 1, 4])
stacks.pb()
stacks.ra()
print(stacks.a, stacks.b)   # [4, 1] [5]
print(stacks.moves)         # ['pb', 'ra']
```

- `pushswap.cli`: `solve(numbers)` returns the list of operation names, and
  `main(argv=None)` runs the command and returns its exit status.
- `pushswap.stacks`: `Stacks` holds the lists `a` and `b` (index 0 is the top)
  and records every operation in `moves`. An operation that cannot be carried
  out, such as swapping a stack with fewer than two elements or pushing from
  an empty one, raises `StackError`. The module also has `find_min`,
  `find_max`, `position_of` and `is_sorted`.
- `pushswap.parsing`: `parse_arguments(args)` turns command-line arguments into
  a list of integers. It raises `InputError`, whose message is `Error`, on
  invalid input. `validate_tokens`, `check_limits` and `check_duplicates` are
  the individual checks.
- `pushswap.small_sort`: `sort_two`, `sort_three`, `sort_four`, `sort_five` and
  `min_index`.
- `pushswap.large_sort`: `sort_more` and the steps it is built from:
  `find_target_in_b`, `cheapest_to_move`, `place_on_tops`, `push_all_to_a`
  and `rotate_min_to_top`.
- `pushswap.moves_cost`: the `Info` dataclass (`size`, `rotations`,
  `content`) and `move_cost`, which estimates the moves needed to bring two
  elements to the tops of their stacks and push one.

The package also has some general helpers:

- `pushswap.chars`: ASCII classification and case conversion (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`).
- `pushswap.memory`: byte-buffer helpers (`memset`, `bzero`, `calloc`,
  `memcpy`, `memmove`, `memchr`, `memcmp`).
- `pushswap.strings`: `atoi`, `itoa`, `split`, searching (`strchr`,
  `strrchr`, `strnstr`, `strncmp`), bounded copies (`strlcpy`, `strlcat`),
  `substr`, `strjoin`, `strtrim`, `strmapi` and `striteri`.
- `pushswap.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, and
  `format_printf` / `printf` for the conversions `%d %i %u %x %X %c %s %p %%`.
- `pushswap.linereader`: `LineReader`, which reads a stream line by line in
  chunks of a set size.
- `pushswap.linked_list`: a singly linked list, `LinkedList`, made of `Node`
  objects.

## What it does not do

The package only produces operations. It has no command that reads a list of
operations and checks whether they sort a given input.

## Running the tests

```
pip install ".[test]"
pytest
```