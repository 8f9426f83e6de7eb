# rustlings

A command-line runner for small Rust exercises: it compiles them, runs them
or runs their tests, and can watch the exercise directory and check again
whenever a file changes. The `rustlings.lessons` modules hold worked
solutions to the exercises, written in Python.

## Installation

```
pip install .
```

The runner calls `rustc`, so a Rust toolchain must be on your `PATH`.

## Usage

Every command reads `info.toml` from the current directory. Without it, the
command prints a message saying it must be run from the rustlings directory
and exits with status 1.

While checking an exercise, the runner builds a binary named `temp_<pid>` in
the current directory and removes it afterwards.

```
rustlings
```

With no subcommand, it prints a welcome banner and then the contents of
`default_out.txt` (exit status 1 if that file cannot be read).

```
rustlings verify
rustlings v
```

Checks every exercise listed in `info.toml`, in order. An exercise in
`compile` mode must compile; one in `test` mode is built with `rustc --test`
and its tests must pass. Verification stops at the first failure, shows the
compiler error or the test output, and exits with status 1.

```
rustlings watch
rustlings w
```

Verifies everything once, then watches `./exercises` recursively. When a
`.rs` file is created or modified (changes are gathered until two quiet
seconds have passed), it prints a separator and verifies again, starting from
the exercise whose path that file matches. Stop it with Ctrl-C. If
`./exercises` does not exist, it prints a watch error and exits with status 1.

```
rustlings run exercises/if/if1.rs
rustlings r exercises/if/if1.rs
```

Checks a single exercise: the one whose listed path the given file's real
path ends with. An exercise in `compile` mode is compiled and run, and its
output is shown; one in `test` mode has its tests run. The exit status is 1
when no file name is given, no exercise matches, or the exercise fails to
compile or fails when run.

## The exercise list

`info.toml` lists the exercises in order. Each entry has a path and a mode,
`compile` or `test`:

```toml
[[exercises]]
path = "exercises/variables/variables1.rs"
mode = "compile"

[[exercises]]
path = "exercises/if/if1.rs"
mode = "test"
```

From Python, `rustlings.exercise.load_exercises(text)` parses this file into
a list of `Exercise` objects, each with `compile()`, `run()` and `clean()`.
`rustlings.verify.verify(exercises)` and `rustlings.run.run(exercise)` raise
`ExerciseFailed` when an exercise does not pass.

## Worked solutions

The `rustlings.lessons` modules are grouped by topic: `basics`, `strings`,
`modules_macros`, `move_semantics`, `structs`, `errors`, `iterators` and
`concurrency`. Where an exercise reports a failure, the Python function
raises an exception.

```python
from rustlings.lessons.basics import calculate_price, bigger
from rustlings.lessons.iterators import capitalize_first, divide, factorial

calculate_price(55)        # 55
bigger(32, 42)             # 42
capitalize_first("hello")  # "Hello"
factorial(4)               # 24
divide(81, 6)              # raises NotDivisibleError
```

## What this package does not do

It does not ship the Rust exercise files, `info.toml` or `default_out.txt`.
Run the commands from a directory that already holds them.

## Running the tests

```
pip install ".[test]"
pytest
```