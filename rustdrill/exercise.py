"""Exercises: loading them, compiling and running them, and checking progress."""

from __future__ import annotations

import os
import re
import subprocess
import threading
import tomllib
from contextlib import suppress
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .ui import no_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary executable name unique to this process and thread."""
    return f"./temp_{os.getpid()}_ThreadId{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary executable, ignoring a missing file."""
    with suppress(OSError):
        os.remove(temp_file())


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Progress of an exercise: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    def is_done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or exercise run."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """Compiling or running an exercise did not succeed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(stdout=_decode(result.stdout), stderr=_decode(result.stderr))


def _execute(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True, check=False)


class CompiledExercise:
    """A compiled exercise whose executable is removed on close."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise

    def run(self) -> ExerciseOutput:
        """Run the compiled executable; raise ExerciseFailed on a non-zero exit."""
        args = [temp_file()]
        if self.exercise.mode is Mode.TEST:
            args.append("--show-output")
        result = _execute(args)
        output = _output(result)
        if result.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def close(self) -> None:
        clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise ExerciseFailed with the compiler output."""
        target = temp_file()
        source = str(self.path)
        match self.mode:
            case Mode.COMPILE:
                result = _execute(["rustc", source, "-o", target, *RUSTC_COLOR_ARGS])
            case Mode.TEST:
                result = _execute(
                    ["rustc", "--test", source, "-o", target, *RUSTC_COLOR_ARGS]
                )
            case Mode.CLIPPY:
                result = self._clippy(source, target)
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailed(_output(result))

    def _clippy(self, source: str, target: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as err:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if no_emoji()
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise OSError(message) from err
        # Build an executable too, so clippy exercises can be run afterwards.
        _execute(["rustc", source, "-o", target, *RUSTC_COLOR_ARGS])
        # A clean is needed for clippy to report every lint.
        _execute(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS]
        )
        return _execute(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ]
        )

    def state(self) -> State:
        """Return the state, with context lines around the pending marker."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _lines(source)
        matched = next(
            (index for index, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError(f"pending marker in {self.path} spans several lines")
        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=index + 1, important=index == matched)
                for index, line in enumerate(lines)
                if first <= index <= last
            )
        )

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed from the source."""
        return self.state().is_done()


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return [
        Exercise(
            name=entry["name"],
            path=Path(entry["path"]),
            mode=Mode(entry["mode"]),
            hint=entry["hint"],
        )
        for entry in data["exercises"]
    ]