# advent_solutions

Solutions to a set of daily puzzles, numbered 0 to 25, together with a small
runner that reads each day's puzzle input, solves both parts and prints the
answers along with how long parsing and each part took, in microseconds.

Day 0 is a worked example: each line holds two numbers separated by `", "`.
It runs only when you ask for it by number. Running every day skips it.

Days 1 to 5 have worked-out solutions. Days 6 to 25 answer `0` for both parts.

## Installing

```
pip install .
```

Install with the `test` extra to get the test dependencies:

```
pip install .[test]
```

## Puzzle inputs

Each day reads its input from a file named after the day number inside an
`inputs` directory in the current working directory: `inputs/0`, `inputs/1`
and so on up to `inputs/25`. Put your puzzle input for a day into the matching
file before you run that day. A missing file stops the run with
`FileNotFoundError`.

## Running

Solve every day from 1 to 25 and print the answers with timings:

```
advent-solutions
```

Solve one day only:

```
advent-solutions 5
```

Time a day, or every day, instead of solving it:

```
advent-solutions 5 --bench
```

With `-b`/`--bench`, each day is run ten times for each of four cases
(parsing, parsing and part one, parsing and part two, the whole solution),
and the mean time of each case is printed in microseconds.

`advent-solutions --version` prints the version. A day number outside 0–25
stops the command with the error `Day not found`.

## Using it from Python

Every day is a `Solution` (from `advent_solutions.solution`).
`solution_for(day)` in `advent_solutions.registry` returns a solution for a
day number from 0 to 25 and raises `ValueError` for any other. Each solution
has these methods:

- `parse_input(text)` turns the raw input into the form that the day works on.
- `part_one(parsed)` and `part_two(parsed)` return the answers as strings.
  Both parts get the same parsed object, and a part may change it in place.
- `solve_part_one(text)` and `solve_part_two(text)` parse the input and then
  solve one part.
- `solve(text, include_time)` parses the input, solves both parts, prints them
  (with timings when `include_time` is true) and returns the pair of answers.
- `solve_with_time(text)` does the same, always printing timings.

```python
from advent_solutions.day01 import Day01

print(Day01().solve_part_one("3   4\n4   3\n2   5\n1   3\n3   9\n3   3"))
```

The day modules also expose their helpers, for example `check_safe` and
`can_make_safe` in `advent_solutions.day02`, `parse_instructions` in
`advent_solutions.day03`, the `Tracker` word counter in
`advent_solutions.day04`, and `update_is_valid`, `idxs_to_swap` and
`reorder_update` in `advent_solutions.day05`. Malformed input raises
`ValueError`.

`advent_solutions.runner` provides `load_input(day, input_dir)`,
`solve_day(day, include_time, input_dir)` and `bench_day(day)`, which are the
same steps the command uses. `bench_day` returns the mean time of each case in
seconds.

## What it does not do

- It does not fetch puzzle inputs; you supply each `inputs/<day>` file.
- Days 6 to 25 have no solution; they always answer `0`.
- The timing done by `--bench` is a plain repeated run with a mean, not a
  statistical benchmark.