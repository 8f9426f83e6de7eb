"""Exercises listed in ``info.toml``, and building and running them with rustc."""

from __future__ import annotations

import os
import subprocess
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_COLOR_ARGS = ("--color", "always")


def temp_file() -> str:
    """Return the path of the binary built for the current process."""
    return f"./temp_{os.getpid()}"


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"


@dataclass(frozen=True)
class Exercise:
    """One exercise: a source file and the way it is checked."""

    path: Path
    mode: Mode

    def __post_init__(self) -> None:
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))
        if not isinstance(self.mode, Mode):
            object.__setattr__(self, "mode", Mode(self.mode))

    def compile(self) -> subprocess.CompletedProcess[bytes]:
        """Build the exercise into the temporary binary."""
        args = ["rustc"]
        if self.mode is Mode.TEST:
            args.append("--test")
        args += [str(self.path), "-o", temp_file(), *_COLOR_ARGS]
        try:
            return subprocess.run(args, capture_output=True, check=False)
        except OSError as error:
            raise RuntimeError("Failed to run 'compile' command.") from error

    def run(self) -> subprocess.CompletedProcess[bytes]:
        """Run the binary built by :meth:`compile`."""
        try:
            return subprocess.run([temp_file()], capture_output=True, check=False)
        except OSError as error:
            raise RuntimeError("Failed to run 'run' command") from error

    def clean(self) -> None:
        """Remove the temporary binary, if there is one."""
        try:
            os.remove(temp_file())
        except OSError:
            pass

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(text: str) -> list[Exercise]:
    """Parse the contents of ``info.toml`` into a list of exercises."""
    data = tomllib.loads(text)
    try:
        entries = data["exercises"]
        return [Exercise(Path(entry["path"]), Mode(entry["mode"])) for entry in entries]
    except (KeyError, TypeError) as error:
        raise ValueError(f"malformed exercise list: {error}") from error