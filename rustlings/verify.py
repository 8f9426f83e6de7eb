"""Checking exercises: compiling them, or building and running their tests."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from .exercise import Exercise, Mode


class ExerciseFailed(Exception):
    """Raised when an exercise does not compile or fails when run."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} failed")
        self.exercise = exercise


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True, emoji=False)


def _symbol(console: Console, fancy: str, plain: str) -> str:
    encoding = (console.encoding or "").lower()
    return fancy if encoding.startswith("utf") else plain


def _success(console: Console, message: str) -> None:
    console.print(f"{_symbol(console, '✅', '✓')} {message}", style="green", markup=False)


def _warning(console: Console, message: str) -> None:
    console.print(f"{_symbol(console, '⚠️ ', '!')} {message}", style="red", markup=False)


def _output(console: Console, data: bytes) -> None:
    console.print(Text.from_ansi(data.decode("utf-8", errors="replace")))


def verify(exercises: Iterable[Exercise]) -> None:
    """Check exercises in order, stopping at the first that fails."""
    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            test(exercise)
        else:
            compile_only(exercise)


def compile_only(exercise: Exercise) -> None:
    """Check that an exercise compiles."""
    console = _console()
    try:
        with console.status(f"Compiling {exercise}..."):
            result = exercise.compile()
        if result.returncode == 0:
            _success(console, f"Successfully compiled {exercise}!")
            return
        _warning(console, f"Compilation of {exercise} failed! Compiler error message:\n")
        _output(console, result.stderr)
        raise ExerciseFailed(exercise)
    finally:
        exercise.clean()


def test(exercise: Exercise) -> None:
    """Build an exercise's tests and check that they pass."""
    console = _console()
    try:
        with console.status(f"Testing {exercise}...") as status:
            compiled = exercise.compile()
            ran = None
            if compiled.returncode == 0:
                status.update(f"Running {exercise}...")
                ran = exercise.run()
        if ran is None:
            _warning(
                console,
                f"Compiling of {exercise} failed! Please try again. Here's the output:",
            )
            _output(console, compiled.stderr)
            raise ExerciseFailed(exercise)
        if ran.returncode == 0:
            _success(console, f"Successfully tested {exercise}!")
            return
        _warning(
            console,
            f"Testing of {exercise} failed! Please try again. Here's the output:",
        )
        _output(console, ran.stdout)
        raise ExerciseFailed(exercise)
    finally:
        exercise.clean()