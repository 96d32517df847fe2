# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations. It prints the operations it performed, one per line.

The operations are:

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the two top elements of `a`                    |
| `sb`  | swap the two top elements of `b`                    |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up (top goes to the bottom)              |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` at once                               |
| `rra` | rotate `a` down (bottom goes to the top)            |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` at once                             |

Once the printed operations have run, `a` holds the numbers in ascending order
with the smallest on top, and `b` is empty.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments, or as one argument separated by spaces:

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

`python -m pushswap.cli` does the same.

The first number given is the top of stack `a`. Input that is already sorted
prints nothing, except for exactly two numbers. For two numbers, the top two
are always swapped and `a` is then rotated back into order, so `push_swap 1 2`
prints `sa` and `ra`.

With no arguments, or a single empty argument, the command prints nothing and
exits with status 1. The command writes `Error` to standard error and exits
with status 1 in these cases:

- a word is not an optional `+` or `-` followed only by digits;
- a value falls outside the 32-bit signed range;
- a value is repeated. `0` and `-0` count as the same value.

## Library use

```python
from pushswap.algorithm import push_swap

ops = push_swap([3, 2, 1])
print([op.value for op in ops])
```

`push_swap` returns the list of `Operation` members that sort the given values.

The lower-level pieces are also available:

- `pushswap.stack`
  - `Node` is one element of a stack.
  - `Stack` is a stack whose top is its first element. It provides `push`,
    `pop`, `swap`, `rotate`, `reverse_rotate`, `min_node`, `max_node`,
    `is_sorted` and `values`.
  - `Operation` is the enum of the ten instructions.
  - `Machine(values, output)` holds stacks `a` and `b`. Its `apply(op)`
    accepts an `Operation` or its name, records it in `machine.operations`,
    and writes the name to `output` if one is given.
- `pushswap.algorithm.sort_stacks(machine)` sorts a machine's `a` stack in
  place. The steps it uses are also public: `sort_three`, `tiny_sort`,
  `move_a_to_b`, `move_b_to_a`, `min_on_top` and the others.
- `pushswap.parsing`
  - `parse_values(words)` turns command-line words into integers and raises
    `InputError` on bad input.
  - `split_words` splits a single argument into words.
  - `parse_long` reads a signed decimal number.

## Tests

```
pip install ".[test]"
pytest
```