# rustlings

A runner for small Rust exercises. The `rustlings` command compiles and runs
(or tests) each exercise with `rustc`, shows what went wrong, and keeps track
of how many exercises you have finished.

## Requirements

- Python 3.11 or newer
- A Rust toolchain with `rustc` on your `PATH`, and `cargo` for exercises in
  Clippy mode
- `git`, for `rustlings reset`

## Installation

```
pip install .
```

## Setting up an exercise directory

This package holds no exercise files. Run every command from a directory that
contains an `info.toml` and the `.rs` files it refers to, usually under an
`exercises/` folder. `info.toml` lists the exercises in order:

```toml
[[exercises]]
name = "intro1"
path = "exercises/intro/intro1.rs"
mode = "compile"
hint = "No hints this time ;)"
```

`mode` is one of:

- `compile` – build the file with `rustc` and run the binary;
- `test` – build it with `rustc --test` and run the test harness;
- `clippy` – write `exercises/clippy/Cargo.toml` and run `cargo clippy` with
  warnings treated as errors.

An exercise counts as finished once it passes its check and the line
`// I AM NOT DONE` has been removed from its file. If the command is started
outside such a directory, or `rustc` cannot be started, it prints a message
and exits with status 1.

## Usage

```
rustlings                  # welcome text and first steps
rustlings watch            # verify, then re-verify whenever a file below ./exercises changes
rustlings verify           # verify all exercises in order, stopping at the first unfinished one
rustlings run <name>       # compile and run (or test) one exercise
rustlings run next         # run the first exercise that is not done yet
rustlings hint <name>      # print the hint for an exercise
rustlings reset <name>     # run "git stash -- <path>" for an exercise
rustlings list             # show every exercise with its status and overall progress
rustlings lsp              # write rust-project.json for rust-analyzer
rustlings --version        # print the version
```

`next` is accepted wherever an exercise name is expected. Commands exit with
status 1 when an exercise fails or cannot be found.

Options:

- `--nocapture` prints the output of test exercises.
- `watch --success-hints` prints the hint when an exercise passes but still
  has its `I AM NOT DONE` marker.
- `list -p/--paths` and `list -n/--names` print only paths or names;
  `list -f/--filter a,b` keeps exercises whose name or path contains one of
  the comma-separated patterns; `list -s/--solved` and `list -u/--unsolved`
  keep only finished or only pending exercises.

`lsp` takes the standard library location from `RUST_SRC_PATH`, or asks
`rustc --print sysroot`, and adds a crate for every `.rs` file below
`exercises/`.

Environment variables:

- `NO_EMOJI` replaces emoji in messages with plain symbols.
- `CLICOLOR_FORCE` (not `0`) forces coloured output; `CLICOLOR=0` turns it
  off. Otherwise colours are used when standard output is a terminal.

### Watch mode commands

While `rustlings watch` is running, type:

- `hint` – show the hint for the exercise that last failed
- `clear` – clear the screen
- `quit` – leave watch mode
- `!<cmd>` – run a command, such as `!rustc --explain E0381`
- `help` – list these commands

## Library

The runner can be used from Python:

- `rustlings.exercise.load_exercises(path)` reads `info.toml` into `Exercise`
  objects, whose `compile()`, `state()` and `looks_done()` do the checking;
  failures raise `ExerciseFailed`.
- `rustlings.verify.verify(exercises, progress, verbose, success_hints)` raises
  `VerificationFailed` for the first unfinished exercise.
- `rustlings.run.run(exercise, verbose)` and `rustlings.run.reset(exercise)`.
- `rustlings.project.RustAnalyzerProject` builds `rust-project.json`.

Worked solutions to a selection of the exercises are available as plain Python
under `rustlings.exercises`: `basics`, `traits`, `quizzes`, `conversions`,
`people`, `errors`, `enums` and `structs` (for example
`rustlings.exercises.basics.bigger` or
`rustlings.exercises.people.parse_person`).

## What this package does not do

- It ships no Rust exercise files or `info.toml`; you supply the exercise
  directory.
- It does not compile or check Rust code itself; every check is done by
  `rustc` and `cargo`.
- `rustlings.exercises` covers only some of the exercise topics, not all of
  them.

## Tests

```
pip install .[test]
pytest
```