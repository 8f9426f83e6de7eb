"""Running a single exercise and showing what it printed."""

from __future__ import annotations

from .exercise import Exercise, Mode
from .verify import ExerciseFailed, _console, _output, _success, _warning, test


def run(exercise: Exercise) -> None:
    """Run an exercise: its tests in test mode, the program otherwise."""
    if exercise.mode is Mode.TEST:
        test(exercise)
    else:
        compile_and_run(exercise)


def compile_and_run(exercise: Exercise) -> None:
    """Compile an exercise, run it and show its output."""
    console = _console()
    try:
        with console.status(f"Compiling {exercise}...") as status:
            compiled = exercise.compile()
            status.update(f"Running {exercise}...")
            ran = exercise.run() if compiled.returncode == 0 else None
        if ran is None:
            _warning(console, f"Compilation of {exercise} failed! Compiler error message:\n")
            _output(console, compiled.stderr)
            raise ExerciseFailed(exercise)
        _output(console, ran.stdout)
        if ran.returncode == 0:
            _success(console, f"Successfully ran {exercise}")
            return
        _output(console, ran.stderr)
        _warning(console, f"Ran {exercise} with errors")
        raise ExerciseFailed(exercise)
    finally:
        exercise.clean()