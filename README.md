# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small instruction set. It prints the instructions it used.

The instructions are:

| name | effect |
|------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up by one (top goes to bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down by one (bottom goes to top) |

## Installing

```
pip install .
```

## Command line

```
push_swap 3 1 2
```

The command prints one instruction per line. Applying those instructions
to stack `a` holding `3 1 2` (top first) leaves `a` sorted in ascending
order and `b` empty.

You can give the numbers as separate arguments, in one quoted string, or
both:

```
push_swap "4 67 3" 87 23
```

Each number must be a decimal integer. It may carry one leading `+` or
`-` sign, and a sign on its own reads as zero. Every number must lie
within the 32-bit signed range, and no number may appear twice. If the
input breaks any of these rules, or if no numbers are given, the command
writes `Error` to standard error and exits with status 1. Input that is
already sorted prints nothing.

The strategy depends on how many numbers there are:

- Up to three numbers are sorted directly.
- Up to five numbers are sorted by pushing the smallest values onto `b`,
  sorting the remaining three, and pushing the values back.
- Larger inputs use a cost-based strategy. It first moves each value to
  `b` along the cheapest rotation path. It then brings each value back
  into place in `a`, and finally rotates the smallest value to the top.

## Library

```python
from pushswap.sort import solve
from pushswap.stacks import Stacks

ops = solve([3, 1, 2])
stacks = Stacks([3, 1, 2])
for op in ops:
    stacks.apply(op)
assert stacks.values_a() == [1, 2, 3]
```

- `pushswap.stacks.Operation` is a string enum of the eleven
  instructions.
- `pushswap.stacks.Stacks` holds both stacks:
  - `apply` takes an `Operation` or its name and performs it.
  - Every instruction that takes effect is recorded in `Stacks.operations`.
  - A single-stack instruction on a stack with too few elements does
    nothing and is not recorded.
  - `ss`, `rr` and `rrr` are always recorded.
  - `values_a()` and `values_b()` list the values from top to bottom.
- `pushswap.sort.solve` returns the instruction list for a list of
  distinct integers. It raises `ValueError` on duplicates.
- `pushswap.sort` also exposes the individual strategies:
  - `sort_three`, `sort_five` and `turk_sort` each act on a `Stacks`.
  - `is_sorted`, `find_min` and `find_max` act on sequences of nodes.
- `pushswap.parse.parse_arguments` turns command-line strings into a
  list of integers and raises `pushswap.parse.ParseError` on bad input.
- `pushswap.parse.parse_integer` parses a single token.

## What it does not do

The package only produces instructions. It has no command that reads a
list of instructions and checks whether they sort a given input. To do
that, apply the instructions with `Stacks.apply` and inspect the result.

## Tests

```
pip install .[test]
pytest
```