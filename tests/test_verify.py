import os
import sys
from pathlib import Path

import pytest

from rustlings import verify
from rustlings.exercise import Exercise, Mode, temp_file

FAKE_RUSTC = """\
import pathlib
import sys

args = sys.argv[1:]
print(" ".join(args))
source = pathlib.Path(next(arg for arg in args if arg.endswith(".rs"))).read_text()
if "COMPILE_ERROR" in source:
    sys.stderr.write("error: expected pattern\\n")
    sys.exit(1)
code = 101 if "RUN_ERROR" in source else 0
output = pathlib.Path(args[args.index("-o") + 1])
output.write_text(
    "#!" + sys.executable + "\\nimport sys\\nprint('program output')\\nsys.exit(" + str(code) + ")\\n"
)
output.chmod(0o755)
"""


@pytest.fixture
def fake_rustc(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    rustc = bin_dir / "rustc"
    rustc.write_text(f"#!{sys.executable}\n{FAKE_RUSTC}")
    rustc.chmod(0o755)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


def make(directory, name, source, mode):
    (directory / name).write_text(source)
    return Exercise(Path(name), mode)


def test_compile_only_success(fake_rustc, capsys):
    exercise = make(fake_rustc, "ok.rs", "fn main() {}\n", Mode.COMPILE)
    verify.compile_only(exercise)
    assert "Successfully compiled ok.rs!" in capsys.readouterr().out
    assert not Path(temp_file()).exists()


def test_compile_only_failure(fake_rustc, capsys):
    exercise = make(fake_rustc, "bad.rs", "// COMPILE_ERROR\n", Mode.COMPILE)
    with pytest.raises(verify.ExerciseFailed) as info:
        verify.compile_only(exercise)
    assert info.value.exercise == exercise
    out = capsys.readouterr().out
    assert "Compilation of bad.rs failed! Compiler error message:" in out
    assert "error: expected pattern" in out


def test_test_success(fake_rustc, capsys):
    exercise = make(fake_rustc, "t.rs", "#[test]\nfn passing() {}\n", Mode.TEST)
    verify.test(exercise)
    assert "Successfully tested t.rs!" in capsys.readouterr().out
    assert not Path(temp_file()).exists()


def test_test_not_passing(fake_rustc, capsys):
    exercise = make(fake_rustc, "t.rs", "// RUN_ERROR\n", Mode.TEST)
    with pytest.raises(verify.ExerciseFailed):
        verify.test(exercise)
    out = capsys.readouterr().out
    assert "Testing of t.rs failed! Please try again. Here's the output:" in out
    assert "program output" in out
    assert not Path(temp_file()).exists()


def test_test_not_compiling(fake_rustc, capsys):
    exercise = make(fake_rustc, "t.rs", "// COMPILE_ERROR\n", Mode.TEST)
    with pytest.raises(verify.ExerciseFailed):
        verify.test(exercise)
    out = capsys.readouterr().out
    assert "Compiling of t.rs failed! Please try again. Here's the output:" in out
    assert "error: expected pattern" in out


def test_verify_all_success(fake_rustc, capsys):
    exercises = [
        make(fake_rustc, "compSuccess.rs", "fn main() {}\n", Mode.COMPILE),
        make(fake_rustc, "testSuccess.rs", "#[test]\nfn passing() {}\n", Mode.TEST),
    ]
    verify.verify(exercises)
    out = capsys.readouterr().out
    assert "Successfully compiled compSuccess.rs!" in out
    assert "Successfully tested testSuccess.rs!" in out


def test_verify_stops_at_first_failure(fake_rustc, capsys):
    exercises = [
        make(fake_rustc, "first.rs", "fn main() {}\n", Mode.COMPILE),
        make(fake_rustc, "broken.rs", "// RUN_ERROR\n", Mode.TEST),
        make(fake_rustc, "last.rs", "fn main() {}\n", Mode.COMPILE),
    ]
    with pytest.raises(verify.ExerciseFailed) as info:
        verify.verify(exercises)
    assert info.value.exercise == exercises[1]
    out = capsys.readouterr().out
    assert "Successfully compiled first.rs!" in out
    assert "last.rs" not in out


def test_verify_accepts_generators(fake_rustc, capsys):
    exercises = (make(fake_rustc, f"e{n}.rs", "fn main() {}\n", Mode.COMPILE) for n in range(2))
    verify.verify(exercises)
    out = capsys.readouterr().out
    assert out.count("Successfully compiled") == 2