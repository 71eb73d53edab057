import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from rustdrill.exercise import (
    CompiledExercise,
    ContextLine,
    Exercise,
    ExerciseFailed,
    Mode,
    State,
    clean,
    load_exercises,
    temp_file,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


def _completed(returncode=0, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess([], returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def pending_path(tmp_path):
    path = tmp_path / "pending_exercise.rs"
    path.write_text(PENDING)
    return path


def test_pending_state(pending_path):
    exercise = Exercise("pending_exercise", pending_path, Mode.COMPILE, "")
    expected = (
        ContextLine("// fake_exercise", 1, False),
        ContextLine("", 2, False),
        ContextLine("// I AM NOT DONE", 3, True),
        ContextLine("", 4, False),
        ContextLine("fn main() {", 5, False),
    )
    assert exercise.state() == State(expected)
    assert exercise.looks_done() is False


def test_finished_exercise(tmp_path):
    path = tmp_path / "finished_exercise.rs"
    path.write_text(FINISHED)
    exercise = Exercise("finished_exercise", path, Mode.COMPILE, "")
    assert exercise.state() == State()
    assert exercise.state().is_done() is True
    assert exercise.looks_done() is True


def test_marker_with_triple_slash(tmp_path):
    path = tmp_path / "doc.rs"
    path.write_text("fn main() {}\n/// I  AM NOT   DONE\n")
    state = Exercise("doc", path, "compile", "").state()
    assert [c.number for c in state.context] == [1, 2]
    assert [c.important for c in state.context] == [False, True]


def test_clean(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path(temp_file()).touch()
    exercise = Exercise("example", tmp_path / "x.rs", Mode.COMPILE, "")
    with patch("rustdrill.exercise.subprocess.run", return_value=_completed()):
        compiled = exercise.compile()
    compiled.close()
    assert not Path(temp_file()).exists()


def test_clean_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    clean()
    assert not Path(temp_file()).exists()


def test_compile_failure_cleans_and_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path(temp_file()).touch()
    exercise = Exercise("broken", tmp_path / "x.rs", Mode.COMPILE, "")
    failed = _completed(1, stdout=b"", stderr=b"error: expected pattern")
    with patch("rustdrill.exercise.subprocess.run", return_value=failed):
        with pytest.raises(ExerciseFailed) as info:
            exercise.compile()
    assert info.value.output.stderr == "error: expected pattern"
    assert not Path(temp_file()).exists()


def test_test_mode_compiles_with_test_flag(tmp_path):
    exercise = Exercise("t", tmp_path / "t.rs", Mode.TEST, "")
    with patch("rustdrill.exercise.subprocess.run", return_value=_completed()) as fake:
        compiled = exercise.compile()
    args = fake.call_args.args[0]
    assert args[:3] == ["rustc", "--test", str(tmp_path / "t.rs")]
    assert isinstance(compiled, CompiledExercise) and compiled.exercise is exercise


def test_exercise_with_output(tmp_path):
    exercise = Exercise("exercise_with_output", tmp_path / "t.rs", Mode.TEST, "")
    compiled = CompiledExercise(exercise)
    done = _completed(0, stdout=b"THIS TEST TOO SHALL PASS\n")
    with patch("rustdrill.exercise.subprocess.run", return_value=done) as fake:
        out = compiled.run()
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert fake.call_args.args[0] == [temp_file(), "--show-output"]


def test_run_failure_raises_with_output(tmp_path):
    exercise = Exercise("c", tmp_path / "c.rs", Mode.COMPILE, "")
    bad = _completed(101, stdout=b"partial", stderr=b"panicked")
    with patch("rustdrill.exercise.subprocess.run", return_value=bad):
        with pytest.raises(ExerciseFailed) as info:
            CompiledExercise(exercise).run()
    assert info.value.output.stdout == "partial"
    assert info.value.output.stderr == "panicked"


def test_str_is_path():
    exercise = Exercise("intro1", "exercises/intro/intro1.rs", "compile", "")
    assert str(exercise) == str(Path("exercises/intro/intro1.rs"))
    assert exercise.mode is Mode.COMPILE


def test_load_exercises(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text(
        '[[exercises]]\nname = "compSuccess"\npath = "compSuccess.rs"\n'
        'mode = "compile"\nhint = ""\n\n'
        '[[exercises]]\nname = "testFailure"\npath = "testFailure.rs"\n'
        'mode = "test"\nhint = "Hello!"\n'
    )
    exercises = load_exercises(info)
    assert [e.name for e in exercises] == ["compSuccess", "testFailure"]
    assert [e.mode for e in exercises] == [Mode.COMPILE, Mode.TEST]
    assert exercises[1].hint == "Hello!"


def test_load_exercises_rejects_unknown_mode(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text('[[exercises]]\nname = "a"\npath = "a.rs"\nmode = "lint"\nhint = ""\n')
    with pytest.raises(ValueError):
        load_exercises(info)