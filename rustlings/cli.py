"""Command line: verify, watch or run exercises."""

from __future__ import annotations

import argparse
import itertools
import os
import queue
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path, PurePath

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, load_exercises
from .run import run
from .verify import ExerciseFailed, verify

_DEBOUNCE_SECONDS = 2.0

_BANNER = "\n".join(
    [
        "",
        r"       welcome to...                      ",
        r"                 _   _ _                  ",
        r"  _ __ _   _ ___| |_| (_)_ __   __ _ ___  ",
        r" | '__| | | / __| __| | | '_ \ / _` / __| ",
        r" | |  | |_| \__ \ |_| | | | | | (_| \__ \ ",
        r" |_|   \__,_|___/\__|_|_|_| |_|\__, |___/ ",
        r"                               |___/      ",
        "",
    ]
)


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="rustlings",
        description=(
            "Rustlings is a collection of small exercises to get you used to "
            "writing and reading Rust code"
        ),
    )
    parser.set_defaults(selected=None)
    commands = parser.add_subparsers(title="commands")
    commands.add_parser(
        "verify", aliases=["v"], help="Verifies all exercises according to the recommended order"
    ).set_defaults(selected="verify")
    commands.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    ).set_defaults(selected="watch")
    run_parser = commands.add_parser("run", aliases=["r"], help="Runs/Tests a single exercise")
    run_parser.add_argument("file", nargs="?")
    run_parser.add_argument("-t", "--test", action="store_true", help="Run the file as a test")
    run_parser.set_defaults(selected="run")
    return parser


def _ends_with(path: PurePath, suffix: PurePath) -> bool:
    tail = suffix.parts
    return bool(tail) and path.parts[-len(tail):] == tail


def find_exercise(exercises: Iterable[Exercise], filename: str) -> Exercise | None:
    """Return the exercise whose path the given file's real path ends with."""
    try:
        resolved = Path(filename).resolve(strict=True)
    except OSError:
        return None
    return next((e for e in exercises if _ends_with(resolved, e.path)), None)


class _RustFileHandler(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue[Path]) -> None:
        super().__init__()
        self._changes = changes

    def on_created(self, event) -> None:
        self._push(event)

    def on_modified(self, event) -> None:
        self._push(event)

    def _push(self, event) -> None:
        if not event.is_directory:
            self._changes.put(Path(os.fsdecode(event.src_path)))


def _debounced(changes: queue.Queue[Path]) -> Iterator[Path]:
    pending = {changes.get(): None}
    while True:
        try:
            pending[changes.get(timeout=_DEBOUNCE_SECONDS)] = None
        except queue.Empty:
            break
    yield from pending


def _verify_quietly(exercises: Iterable[Exercise]) -> None:
    try:
        verify(exercises)
    except ExerciseFailed:
        pass


def watch(exercises: Iterable[Exercise]) -> None:
    """Verify all exercises, then re-verify from each edited one onward."""
    exercises = list(exercises)
    root = Path("exercises")
    if not root.is_dir():
        raise FileNotFoundError(f"cannot watch {root}: no such directory")
    changes: queue.Queue[Path] = queue.Queue()
    observer = Observer()
    observer.schedule(_RustFileHandler(changes), str(root), recursive=True)
    observer.start()
    try:
        _verify_quietly(exercises)
        while True:
            for path in _debounced(changes):
                if path.suffix != ".rs" or not path.exists():
                    continue
                print("----------**********----------\n")
                resolved = path.resolve()
                _verify_quietly(
                    itertools.dropwhile(lambda e: not _ends_with(resolved, e.path), exercises)
                )
    except KeyboardInterrupt:
        pass
    finally:
        observer.stop()
        observer.join()


def main(argv: list[str] | None = None) -> int:
    """Entry point of the ``rustlings`` command; returns the exit status."""
    try:
        args = _build_parser().parse_args(argv)
    except SystemExit as exc:
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1

    if args.selected is None:
        print(_BANNER)

    info = Path("info.toml")
    if not info.exists():
        print(f"{sys.argv[0]} must be run from the rustlings directory")
        print("Try `cd rustlings/`!")
        return 1

    exercises = load_exercises(info.read_text(encoding="utf-8"))

    match args.selected:
        case "run":
            if args.file is None:
                print("Please supply a file name!")
                return 1
            exercise = find_exercise(exercises, args.file)
            if exercise is None:
                print("No exercise found for your file name!")
                return 1
            try:
                run(exercise)
            except ExerciseFailed:
                return 1
        case "verify":
            try:
                verify(exercises)
            except ExerciseFailed:
                return 1
        case "watch":
            try:
                watch(exercises)
            except OSError as error:
                print(f"watch error: {error}")
                return 1
        case _:
            try:
                text = Path("default_out.txt").read_text(encoding="utf-8")
            except OSError as error:
                print(error)
                return 1
            print(text)
    return 0