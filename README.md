# rustdrill

A command-line runner for small programming exercises. It compiles and
tests each exercise, shows what still needs doing and keeps track of your
progress. It also includes a set of worked lesson solutions written in
Python.

## Installation

```
pip install rustdrill
```

The runner calls `rustc` (and `cargo clippy` for the lint exercises), so a
working toolchain must be on your `PATH`. When `rustc --version` cannot be
run, every command except `-v` stops with exit status 1.

## Usage

Run the commands from the directory that holds `info.toml`. This file lists
the exercises in order. Each entry has a `name`, a `path`, a `mode`
(`compile`, `test` or `clippy`) and a `hint`.

```
rustdrill              # show the welcome text
rustdrill -v           # print the version
rustdrill verify       # check every exercise in order, stop at the first one not done
rustdrill watch        # verify, then re-verify when a file under exercises/ changes
rustdrill run NAME     # compile and run (or test) a single exercise
rustdrill run next     # run the first exercise that is not yet done
rustdrill hint NAME    # print the hint for an exercise
rustdrill list         # table of exercises with their status and a progress line
rustdrill lsp          # write rust-project.json so rust-analyzer understands the exercises
```

`list` accepts these options:

- `--paths`/`-p`
- `--names`/`-n`
- `--filter`/`-f PATTERNS` (comma separated, matched against names and paths)
- `--solved`/`-s`
- `--unsolved`/`-u`

Put `--nocapture` before the subcommand to see the output of test exercises.

An exercise counts as pending while its file still has an `// I AM NOT DONE`
comment. When a pending exercise compiles and passes, the runner shows the
lines around that comment. Delete the comment to move on.

Watch mode re-checks an edited `.rs` file once it has stopped changing for
about two seconds. While it runs you can type:

- `hint`: the hint of the exercise that failed last
- `clear`
- `quit`
- `help`

Set `NO_EMOJI` in the environment to replace emoji in the output with plain
characters.

## Library

The command is built from modules you can also use directly:

- `rustdrill.exercise`: `Exercise`, `Mode`, `State`, `ContextLine`, `load_exercises`. Compiling or running raises `ExerciseFailed`.
- `rustdrill.verify`: `verify`, `test`, `prompt_for_completion`. A failure raises `VerificationFailed`.
- `rustdrill.run`: `run`. A failure raises `RunFailed`.
- `rustdrill.project`: `RustAnalyzerProject` and `Crate`, which build `rust-project.json`.
- `rustdrill.cli`: `main`, `find_exercise`, `list_exercises`, `rustc_exists` and `watch`. `find_exercise` raises `ExerciseNotFound`.

```python
from rustdrill.exercise import load_exercises
from rustdrill.verify import verify, VerificationFailed

exercises = load_exercises("info.toml")
try:
    verify(exercises, (0, len(exercises)), verbose=False)
except VerificationFailed as failure:
    print(failure.exercise.hint)
```

The `rustdrill.lessons` package holds worked solutions as plain Python
modules:

- `quizzes`
- `basics`
- `errors`
- `collections`
- `iterators`
- `structs`
- `threads`

## What it does not do

- The package does not ship any exercise files or an `info.toml`. You supply your own exercise directory.
- The lessons do not cover type conversions.

## Tests

```
pip install "rustdrill[test]"
pytest
```