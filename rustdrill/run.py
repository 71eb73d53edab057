"""Running a single exercise."""

from __future__ import annotations

from rich.console import Console

from .exercise import Exercise, ExerciseFailed, Mode
from .ui import success, warn
from .verify import VerificationFailed, test


class RunFailed(Exception):
    """The exercise did not compile, run or pass its tests."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"running {exercise} failed")
        self.exercise = exercise


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the exercise, or run its tests in test mode."""
    if exercise.mode is Mode.TEST:
        try:
            test(exercise, verbose)
        except VerificationFailed as err:
            raise RunFailed(exercise) from err
    else:
        _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    console = Console(highlight=False, soft_wrap=True, markup=False, emoji=False)
    with console.status(f"Compiling {exercise}...") as status:
        try:
            compiled = exercise.compile()
        except ExerciseFailed as err:
            status.stop()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(err.output.stderr)
            raise RunFailed(exercise) from err
        with compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseFailed as err:
                status.stop()
                print(err.output.stdout)
                print(err.output.stderr)
                warn(f"Ran {exercise} with errors")
                raise RunFailed(exercise) from err
    print(output.stdout)
    success(f"Successfully ran {exercise}")