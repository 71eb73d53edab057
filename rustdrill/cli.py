"""Command-line interface: list, run, verify and watch exercises."""

from __future__ import annotations

import argparse
import os
import queue
import subprocess
import sys
import threading
import time
from collections.abc import Iterable, Sequence
from itertools import chain
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, load_exercises
from .project import RustAnalyzerProject
from .run import RunFailed, run
from .verify import VerificationFailed, verify

VERSION = "5.0.0"
INFO_FILE = "info.toml"
_DEBOUNCE_SECONDS = 2.0

WELCOME = """       welcome to...
  +--------------------------------------+
  |    r  u  s  t  d  r  i  l  l         |
  +--------------------------------------+"""

DEFAULT_OUT = """Thanks for installing rustdrill!

Is this your first time? Don't worry, rustdrill was made for beginners! We are
going to teach you a lot of things about Rust, but before we can get
started, here's a couple of notes about how rustdrill operates:

1. The central concept behind rustdrill is that you solve exercises. These
   exercises usually have some sort of syntax error in them, which will cause
   them to fail compilation or testing. Sometimes there's a logic error instead
   of a syntax error. No matter what error, it's your job to find it and fix it!
   You'll know when you fixed it because then, the exercise will compile and
   rustdrill will be able to move on to the next exercise.
2. If you run rustdrill in watch mode (which we recommend), it'll automatically
   start with the first exercise. Don't get confused by an error message popping
   up as soon as you run rustdrill! This is part of the exercise that you're
   supposed to solve, so open the exercise file in an editor and start your
   detective work!
3. If you're stuck on an exercise, there is a helpful hint you can view by typing
   'hint' (in watch mode), or running `rustdrill hint exercise_name`.
4. If an exercise doesn't make sense to you, feel free to open an issue in the
   project's tracker. We look at every issue, and sometimes, other learners do
   too so you can help each other out!
5. If you want to use `rust-analyzer` with exercises, which provides features like
   autocompletion, run the command `rustdrill lsp`.

Got all that? Great! To get started, run `rustdrill watch` in order to get the first
exercise. Make sure to have your editor open!"""

FINISH_LINE = """+----------------------------------------------------+
|          You made it to the Fe-nish line!          |
+----------------------------------------------------+

We hope you enjoyed learning about the various aspects of Rust!
If you noticed any issues, please don't hesitate to report them.
You can also contribute your own exercises to help the greater community!"""

_WATCH_HELP = """Commands available to you in watch mode:
  hint  - prints the current exercise's hint
  clear - clears the screen
  quit  - quits watch mode
  help  - displays this help message

Watch mode automatically re-evaluates the current exercise
when you edit a file's contents."""


class ExerciseNotFound(LookupError):
    """No exercise matches the requested name."""


def find_exercise(name: str, exercises: Iterable[Exercise]) -> Exercise:
    """Return the named exercise, or the first pending one for 'next'."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise ExerciseNotFound(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise ExerciseNotFound(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Iterable[Exercise],
    paths: bool = False,
    names: bool = False,
    filter: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> list[str]:
    """Return the lines of the exercise listing, ending with the progress line."""
    exercises = list(exercises)
    lines = []
    if not paths and not names:
        lines.append(f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}")
    patterns = [p for p in (filter or "").lower().split(",") if p.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        done = exercise.looks_done()
        done_count += done
        status = "Done" if done else "Pending"
        wanted = (done and solved) or (not done and unsolved) or not (solved or unsolved)
        matches = filter is None or any(
            p in exercise.name or p in fname for p in patterns
        )
        if wanted and matches:
            if paths:
                lines.append(fname)
            elif names:
                lines.append(exercise.name)
            else:
                lines.append(f"{exercise.name:<17}\t{fname:<46}\t{status:<7}")
    total = len(exercises)
    percentage = done_count / total * 100 if total else float("nan")
    lines.append(
        f"Progress: You completed {done_count} / {total} exercises ({percentage:.2f} %)."
    )
    return lines


def rustc_exists() -> bool:
    """Whether `rustc --version` can be run successfully."""
    try:
        result = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return result.returncode == 0


class _SharedHint:
    """The hint of the exercise that failed last, shared with the shell thread."""

    def __init__(self, text: str) -> None:
        self._lock = threading.Lock()
        self._text = text

    def get(self) -> str:
        with self._lock:
            return self._text

    def set(self, text: str) -> None:
        with self._lock:
            self._text = text


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, changes: queue.Queue[str]) -> None:
        super().__init__()
        self._changes = changes

    def on_created(self, event: FileSystemEvent) -> None:
        self._record(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._record(event)

    def _record(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._changes.put(os.fsdecode(event.src_path))


def _clear_screen() -> None:
    print("\x1bc")


def _watch_shell(hint: _SharedHint, should_quit: threading.Event) -> None:
    while True:
        try:
            command = input().strip()
        except EOFError:
            return
        except OSError as err:
            print(f"error reading command: {err}")
            return
        match command:
            case "hint":
                print(hint.get())
            case "clear":
                print("\x1b[2J\x1b[1;1H")
            case "quit":
                should_quit.set()
                print("Bye!")
            case "help":
                print(_WATCH_HELP)
            case _:
                print(f"unknown command: {command}")


def _spawn_watch_shell(hint: _SharedHint, should_quit: threading.Event) -> None:
    print(
        "Welcome to watch mode! You can type 'help' to get an overview of "
        "the commands you can use here."
    )
    threading.Thread(target=_watch_shell, args=(hint, should_quit), daemon=True).start()


def _ends_with(path: Path, suffix: Path) -> bool:
    parts = suffix.parts
    return 0 < len(parts) <= len(path.parts) and path.parts[-len(parts):] == parts


def _reverify(
    changed: Path, exercises: Sequence[Exercise], verbose: bool, hint: _SharedHint
) -> bool:
    """Re-check after a file change; True when every exercise passes."""
    if changed.suffix != ".rs" or not changed.exists():
        return False
    filepath = changed.resolve()
    edited = next((e for e in exercises if _ends_with(filepath, e.path)), None)
    others = (
        e
        for e in exercises
        if not e.looks_done() and not _ends_with(filepath, e.path)
    )
    pending = chain([edited] if edited is not None else [], others)
    num_done = sum(1 for e in exercises if e.looks_done())
    _clear_screen()
    try:
        verify(pending, (num_done, len(exercises)), verbose)
    except VerificationFailed as err:
        hint.set(err.exercise.hint)
        return False
    return True


def _watch_loop(
    exercises: Sequence[Exercise], verbose: bool, changes: queue.Queue[str]
) -> bool:
    _clear_screen()
    try:
        verify(exercises, (0, len(exercises)), verbose)
        return True
    except VerificationFailed as err:
        hint = _SharedHint(err.exercise.hint)
    should_quit = threading.Event()
    _spawn_watch_shell(hint, should_quit)
    pending: dict[str, float] = {}
    while True:
        try:
            pending[changes.get(timeout=1.0)] = time.monotonic()
        except queue.Empty:
            pass
        now = time.monotonic()
        settled = [p for p, seen in pending.items() if now - seen >= _DEBOUNCE_SECONDS]
        for path in settled:
            del pending[path]
            if _reverify(Path(path), exercises, verbose, hint):
                return True
        if should_quit.is_set():
            return False


def watch(exercises: Iterable[Exercise], verbose: bool = False) -> bool:
    """Verify, then re-verify on every edit; True when all exercises are done."""
    exercises = list(exercises)
    changes: queue.Queue[str] = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(changes), "./exercises", recursive=True)
    observer.start()
    try:
        return _watch_loop(exercises, verbose, changes)
    finally:
        observer.stop()
        observer.join()


def _party_emoji() -> str:
    try:
        "🎉".encode(sys.stdout.encoding or "ascii")
    except (UnicodeEncodeError, LookupError):
        return "★"
    return "🎉"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rustdrill",
        description="Small exercises to get you used to writing and reading Rust code.",
    )
    parser.add_argument(
        "--nocapture", action="store_true", help="show outputs from the test exercises"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="show the executable version"
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser(
        "verify", help="verify all exercises according to the recommended order"
    )
    commands.add_parser("watch", help="rerun `verify` when files were edited")
    run_parser = commands.add_parser("run", help="run or test a single exercise")
    run_parser.add_argument("name", help="the name of the exercise")
    hint_parser = commands.add_parser("hint", help="show a hint for the given exercise")
    hint_parser.add_argument("name", help="the name of the exercise")
    list_parser = commands.add_parser("list", help="list the available exercises")
    list_parser.add_argument(
        "-p", "--paths", action="store_true", help="show only the paths of the exercises"
    )
    list_parser.add_argument(
        "-n", "--names", action="store_true", help="show only the names of the exercises"
    )
    list_parser.add_argument(
        "-f",
        "--filter",
        help="match exercise names; comma separated patterns are acceptable",
    )
    list_parser.add_argument(
        "-u", "--unsolved", action="store_true", help="display only unsolved exercises"
    )
    list_parser.add_argument(
        "-s", "--solved", action="store_true", help="display only solved exercises"
    )
    commands.add_parser("lsp", help="enable rust-analyzer for exercises")
    return parser


def _list(args: argparse.Namespace, exercises: list[Exercise]) -> int:
    lines = list_exercises(
        exercises,
        paths=args.paths,
        names=args.names,
        filter=args.filter,
        unsolved=args.unsolved,
        solved=args.solved,
    )
    try:
        for line in lines:
            sys.stdout.write(line + "\n")
        sys.stdout.flush()
    except BrokenPipeError:
        return 0
    except OSError:
        return 1
    return 0


def _lsp() -> int:
    project = RustAnalyzerProject()
    try:
        project.get_sysroot_src()
    except OSError:
        print("Couldn't find toolchain path, do you have `rustc` installed?")
        return 1
    project.exercises_to_json(".")
    if not project.crates:
        print("Failed find any exercises, make sure you're in the exercises folder")
        return 0
    try:
        project.write_to_disk()
    except OSError:
        print("Failed to write rust-project.json to disk for rust-analyzer")
        return 0
    print("Successfully generated rust-project.json")
    print(
        "rust-analyzer will now parse exercises, restart your language server or editor"
    )
    return 0


def _watch(exercises: list[Exercise], verbose: bool) -> int:
    try:
        finished = watch(exercises, verbose)
    except OSError as err:
        print(f"Error: Could not watch your progress. Error message was {err!r}.")
        print(
            "Most likely you've run out of disk space or your 'inotify limit' "
            "has been reached."
        )
        return 1
    if finished:
        emoji = _party_emoji()
        print(f"{emoji} All exercises completed! {emoji}")
        print(f"\n{FINISH_LINE}\n")
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `rustdrill watch` again"
        )
    return 0


def _dispatch(args: argparse.Namespace, exercises: list[Exercise]) -> int:
    verbose = args.nocapture
    match args.command:
        case "list":
            return _list(args, exercises)
        case "run":
            try:
                run(find_exercise(args.name, exercises), verbose)
            except RunFailed:
                return 1
            return 0
        case "hint":
            print(find_exercise(args.name, exercises).hint)
            return 0
        case "verify":
            try:
                verify(exercises, (0, len(exercises)), verbose)
            except VerificationFailed:
                return 1
            return 0
        case "lsp":
            return _lsp()
        case "watch":
            return _watch(exercises, verbose)
    raise ValueError(f"unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    try:
        args = _build_parser().parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        print(f"\n{WELCOME}\n")

    if not Path(INFO_FILE).exists():
        print(f"{sys.argv[0]} must be run from the exercises directory")
        print("Try `cd rustdrill/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises(INFO_FILE)

    if args.command is None:
        print(f"{DEFAULT_OUT}\n")
        return 0

    try:
        return _dispatch(args, exercises)
    except ExerciseNotFound as err:
        print(err)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())