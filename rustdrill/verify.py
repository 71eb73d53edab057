"""Verifying exercises: compile, run or test them and report progress."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.status import Status
from rich.text import Text

from .exercise import CompiledExercise, Exercise, ExerciseFailed, Mode
from .ui import no_emoji, success, warn

_BAR_WIDTH = 60


class VerificationFailed(Exception):
    """An exercise did not compile, run or pass, or is still pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"verification of {exercise} failed")
        self.exercise = exercise


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True, markup=False, emoji=False)


def _spinner(message: str) -> Status:
    return _console().status(message)


def _draw_progress(position: int, total: int) -> None:
    if total <= 0 or position >= total:
        done, rest = "#" * _BAR_WIDTH, ""
    else:
        filled = position * _BAR_WIDTH // total
        done = "#" * filled
        rest = ">" + "-" * (_BAR_WIDTH - filled - 1)
    _console().print(
        Text.assemble(
            "Progress: [", (done, "green"), (rest, "red"), f"] {position}/{total}"
        )
    )


def _compile(exercise: Exercise, status: Status) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as err:
        status.stop()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise


def _compile_only(exercise: Exercise) -> bool:
    with _spinner(f"Compiling {exercise}...") as status:
        _compile(exercise, status).close()
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _spinner(f"Compiling {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseFailed as err:
                status.stop()
                warn(f"Ran {exercise} with errors")
                print(err.output.stdout)
                print(err.output.stderr)
                raise
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with _spinner(f"Testing {exercise}...") as status:
        with _compile(exercise, status) as compiled:
            try:
                output = compiled.run()
            except ExerciseFailed as err:
                status.stop()
                warn(
                    f"Testing of {exercise} failed! Please try again. "
                    "Here's the output:"
                )
                print(err.output.stdout)
                raise
    if verbose:
        print(output.stdout)
    if interactive:
        return prompt_for_completion(exercise, None)
    return True


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int] | None = None,
    verbose: bool = False,
) -> None:
    """Check each exercise in order; raise VerificationFailed at the first failure."""
    if progress is None:
        exercises = list(exercises)
        progress = (0, len(exercises))
    position, total = progress
    _draw_progress(position, total)
    for exercise in exercises:
        try:
            match exercise.mode:
                case Mode.TEST:
                    passed = _compile_and_test(exercise, True, verbose)
                case Mode.COMPILE:
                    passed = _compile_and_run_interactively(exercise)
                case Mode.CLIPPY:
                    passed = _compile_only(exercise)
        except ExerciseFailed:
            passed = False
        if not passed:
            raise VerificationFailed(exercise)
        position += 1
        _draw_progress(position, total)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the exercise's tests without prompting."""
    try:
        _compile_and_test(exercise, False, verbose)
    except ExerciseFailed as err:
        raise VerificationFailed(exercise) from err


def prompt_for_completion(exercise: Exercise, prompt_output: str | None = None) -> bool:
    """Return True when the exercise is done; otherwise show where the marker is."""
    state = exercise.state()
    if state.is_done():
        return True

    match exercise.mode:
        case Mode.COMPILE:
            success(f"Successfully ran {exercise}!")
        case Mode.TEST:
            success(f"Successfully tested {exercise}!")
        case Mode.CLIPPY:
            success(f"Successfully compiled {exercise}!")

    plain = no_emoji()
    match exercise.mode:
        case Mode.COMPILE:
            message = "The code is compiling!"
        case Mode.TEST:
            message = "The code is compiling, and the tests pass!"
        case Mode.CLIPPY:
            message = (
                "The code is compiling, and Clippy is happy!"
                if plain
                else "The code is compiling, and 📎 Clippy 📎 is happy!"
            )

    console = _console()
    separator = Text("====================", style="bold")
    print()
    print(f"~*~ {message} ~*~" if plain else f"🎉 🎉  {message} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        console.print(separator)
        print(prompt_output)
        console.print(separator)
        print()

    print("You can keep working on this exercise,")
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
    for context_line in state.context:
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                Text(context_line.line, style="bold" if context_line.important else ""),
            )
        )
    return False