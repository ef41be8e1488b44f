# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of eleven instructions. The package ships two commands:

- `push_swap` prints, one per line, a sequence of instructions that sorts
  its arguments into ascending order (top of the stack first).
- `checker` reads instructions from standard input, one per line, runs them
  on its arguments and prints `OK` if stack `a` ends up in ascending order
  with `b` empty, `KO` otherwise.

## Instructions

| Name  | Effect                                       |
|-------|----------------------------------------------|
| `sa`  | swap the first two elements of `a`           |
| `sb`  | swap the first two elements of `b`           |
| `ss`  | `sa` and `sb` together                       |
| `pa`  | move the top of `b` onto `a`                 |
| `pb`  | move the top of `a` onto `b`                 |
| `ra`  | rotate `a` up: the first element goes last   |
| `rb`  | rotate `b` up                                |
| `rr`  | `ra` and `rb` together                       |
| `rra` | rotate `a` down: the last element goes first |
| `rrb` | rotate `b` down                              |
| `rrr` | `rra` and `rrb` together                     |

An instruction that has nothing to act on (swapping a stack with fewer than
two values, pushing from an empty stack) does nothing.

## Installation

```
pip install .
```

## Usage

Numbers can be given as separate arguments or within a single quoted
argument, separated by blanks. Only digits, blanks and a leading `-` are
accepted (no `+` sign); every number must fit in the 32-bit signed range and
appear only once.

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
push_swap 3 2 1 | checker 3 2 1
```

Invalid or missing arguments make both commands print `Error`; `push_swap`
then exits with status 1, `checker` with status 0. The checker also prints
`Error` when it meets a line that is not an instruction. Empty lines are
ignored, and a last line with no newline after it is not read as an
instruction.

The sorting strategy depends on the number of values: direct moves for two
or three, small insertion routines for four to ten, and chunks of the
smallest values pushed to `b` for more than ten.

## Library use

```python
from pushswap.push_swap import sort_operations
from pushswap.checker import run_checker

ops = sort_operations([5, 1, 4, 2, 3])
assert run_checker([5, 1, 4, 2, 3], ops) == "OK"
```

- `pushswap.parsing.parse_stack(args)` validates and parses command-line
  arguments, raising `pushswap.parsing.InputError` on bad input.
- `pushswap.stacks.Stacks` holds the two stacks (`a`, `b`) and the list of
  instructions run so far (`operations`). It has `swap`, `push`, `rotate`
  and `reverse_rotate` methods taking `"a"` or `"b"`, `apply(name)` to run
  an instruction by name (raising `pushswap.stacks.InvalidOperation` for an
  unknown one), `is_solved()` and `format()` to render both stacks as text.
- `pushswap.push_swap.launch_solver(stacks)` sorts a `Stacks` in place,
  recording the instructions it uses.
- `pushswap.checker.read_orders(stream)` yields the instructions read from a
  text stream.
- `pushswap.small` and `pushswap.chunks` hold the individual solvers and
  helpers (`solve_three`, `solve_four_five`, `solve_ten`, `solve_hundred`,
  `get_chunk`, ...).

## Running the tests

```
pip install .[test]
pytest
```