"""Command-line interface: list, run, verify and watch exercises."""

from __future__ import annotations

import argparse
import enum
import os
import queue
import subprocess
import sys
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Sequence

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, ExerciseFailed, load_exercises
from .project import RustAnalyzerProject
from .run import reset, run
from .verify import VerificationFailed, verify

VERSION = "5.5.1"

WELCOME = r"""       welcome to...
                 _   _ _
  _ __ _   _ ___| |_| (_)_ __   __ _ ___
 | '__| | | / __| __| | | '_ \ / _` / __|
 | |  | |_| \__ \ |_| | | | | | (_| \__ \
 |_|   \__,_|___/\__|_|_|_| |_|\__, |___/
                               |___/"""

DEFAULT_OUT = """Thanks for installing Rustlings!

Is this your first time? Don't worry, Rustlings was made for beginners! We are
going to teach you a lot of things about Rust, but before we can get
started, here's a couple of notes about how Rustlings operates:

1. The central concept behind Rustlings is that you solve exercises. These
   exercises usually have some sort of syntax error in them, which will cause
   them to fail compilation or testing. Sometimes there's a logic error instead
   of a syntax error. No matter what error, it's your job to find it and fix it!
   You'll know when you fixed it because then, the exercise will compile and
   Rustlings will be able to move on to the next exercise.
2. If you run Rustlings in watch mode (which we recommend), it'll automatically
   start with the first exercise. Don't get confused by an error message popping
   up as soon as you run Rustlings! This is part of the exercise that you're
   supposed to solve, so open the exercise file in an editor and start your
   detective work!
3. If you're stuck on an exercise, there is a helpful hint you can view by typing
   'hint' (in watch mode), or running `rustlings hint exercise_name`.
4. If an exercise doesn't make sense to you, feel free to open an issue.
   We look at every issue, and sometimes, other learners do too so you can
   help each other out!
5. If you want to use `rust-analyzer` with exercises, which provides features like
   autocompletion, run the command `rustlings lsp`.

Got all that? Great! To get started, run `rustlings watch` in order to get the first
exercise. Make sure to have your editor open!"""

FENISH_LINE = r"""+----------------------------------------------------+
|          You made it to the Fe-nish line!          |
+--------------------------  ------------------------+
                          \\/
     ▒▒          ▒▒▒▒▒▒▒▒      ▒▒▒▒▒▒▒▒          ▒▒
   ▒▒▒▒  ▒▒    ▒▒        ▒▒  ▒▒        ▒▒    ▒▒  ▒▒▒▒
   ▒▒▒▒  ▒▒  ▒▒            ▒▒            ▒▒  ▒▒  ▒▒▒▒
 ░░▒▒▒▒░░▒▒  ▒▒            ▒▒            ▒▒  ▒▒░░▒▒▒▒
   ▓▓▓▓▓▓▓▓  ▓▓      ▓▓██  ▓▓  ▓▓██      ▓▓  ▓▓▓▓▓▓▓▓
     ▒▒▒▒    ▒▒      ████  ▒▒  ████      ▒▒░░  ▒▒▒▒
       ▒▒  ▒▒▒▒▒▒        ▒▒▒▒▒▒        ▒▒▒▒▒▒  ▒▒
         ▒▒▒▒▒▒▒▒▒▒▓▓▓▓▓▓▒▒▒▒▒▒▒▒▓▓▒▒▓▓▒▒▒▒▒▒▒▒
           ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒
             ▒▒▒▒▒▒▒▒▒▒██▒▒▒▒▒▒██▒▒▒▒▒▒▒▒▒▒
           ▒▒  ▒▒▒▒▒▒▒▒▒▒██████▒▒▒▒▒▒▒▒▒▒  ▒▒
         ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒
       ▒▒    ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒    ▒▒
       ▒▒  ▒▒    ▒▒                  ▒▒    ▒▒  ▒▒
           ▒▒  ▒▒                      ▒▒  ▒▒

We hope you enjoyed learning about the various aspects of Rust!
If you noticed any issues, please don't hesitate to report them to our repo.
You can also contribute your own exercises to help the greater community!

Before reporting an issue or contributing, please read our contributing guidelines."""

_SHELL_HELP = """Commands available to you in watch mode:
  hint   - prints the current exercise's hint
  clear  - clears the screen
  quit   - quits watch mode
  !<cmd> - executes a command, like `!rustc --explain E0381`
  help   - displays this help message

Watch mode automatically re-evaluates the current exercise
when you edit a file's contents."""


class WatchStatus(enum.Enum):
    """How watch mode ended."""

    FINISHED = "finished"
    UNFINISHED = "unfinished"


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command line."""
    parser = _Parser(
        prog="rustlings",
        description="Rustlings is a collection of small exercises to get you used "
        "to writing and reading Rust code",
    )
    parser.add_argument("--nocapture", action="store_true",
                        help="show outputs from the test exercises")
    parser.add_argument("-v", "--version", action="store_true",
                        help="show the executable version")
    commands = parser.add_subparsers(dest="command")

    commands.add_parser("verify", help="Verifies all exercises according to the recommended order")

    watch_parser = commands.add_parser("watch", help="Reruns `verify` when files were edited")
    watch_parser.add_argument("--success-hints", action="store_true",
                              help="show hints on success")

    for name, text in (
        ("run", "Runs/Tests a single exercise"),
        ("reset", 'Resets a single exercise using "git stash -- <filename>"'),
        ("hint", "Returns a hint for the given exercise"),
    ):
        sub = commands.add_parser(name, help=text)
        sub.add_argument("name", help="the name of the exercise")

    list_parser = commands.add_parser("list", help="Lists the exercises available in Rustlings")
    list_parser.add_argument("-p", "--paths", action="store_true",
                             help="show only the paths of the exercises")
    list_parser.add_argument("-n", "--names", action="store_true",
                             help="show only the names of the exercises")
    list_parser.add_argument("-f", "--filter",
                             help="provide a string to match exercise names; "
                             "comma separated patterns are acceptable")
    list_parser.add_argument("-u", "--unsolved", action="store_true",
                             help="display only exercises not yet solved")
    list_parser.add_argument("-s", "--solved", action="store_true",
                             help="display only exercises that have been solved")

    commands.add_parser("lsp", help="Enable rust-analyzer for exercises")
    return parser


def find_exercise(name: str, exercises: Sequence[Exercise]) -> Exercise:
    """Find an exercise by name, or the first unfinished one for "next"."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise LookupError(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise LookupError(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Sequence[Exercise],
    paths: bool = False,
    names: bool = False,
    filter: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> Iterator[str]:
    """Yield the lines of the exercise listing, ending with the progress line."""
    if not paths and not names:
        yield f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}"
    filters = [f for f in (filter or "").lower().split(",") if f.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        done = exercise.looks_done()
        if done:
            done_count += 1
        status = "Done" if done else "Pending"
        matches_filter = filter is None or any(
            f in exercise.name or f in fname for f in filters
        )
        matches_state = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if not (matches_state and matches_filter):
            continue
        if paths:
            yield fname
        elif names:
            yield exercise.name
        else:
            yield f"{exercise.name:<17}\t{fname:<46}\t{status:<7}"
    total = len(exercises)
    percentage = done_count / total * 100.0 if total else float("nan")
    yield (
        f"Progress: You completed {done_count} / {total} exercises "
        f"({percentage:.1f} %)."
    )


def rustc_exists() -> bool:
    """Whether a working rustc can be started."""
    try:
        result = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return result.returncode == 0


@dataclass
class _SharedHint:
    value: str | None = None
    lock: threading.Lock = field(default_factory=threading.Lock)

    def set(self, value: str) -> None:
        with self.lock:
            self.value = value

    def get(self) -> str | None:
        with self.lock:
            return self.value


def _handle_shell_command(line: str, hint: _SharedHint, should_quit: threading.Event) -> None:
    command = line.strip()
    if command == "hint":
        current = hint.get()
        if current is not None:
            print(current)
    elif command == "clear":
        print("\x1b[2J\x1b[1;1H")
    elif command == "quit":
        should_quit.set()
        print("Bye!")
    elif command == "help":
        print(_SHELL_HELP)
    elif command.startswith("!"):
        cmd = command[1:]
        parts = cmd.split()
        if not parts:
            print("no command provided")
        else:
            try:
                subprocess.run(parts, check=False)
            except OSError as err:
                print(f"failed to execute command `{cmd}`: {err}")
    else:
        print(f"unknown command: {command}")


def _spawn_watch_shell(hint: _SharedHint, should_quit: threading.Event) -> None:
    print("Welcome to watch mode! You can type 'help' to get an overview "
          "of the commands you can use here.")

    def shell() -> None:
        while True:
            try:
                line = sys.stdin.readline()
            except (OSError, ValueError) as err:
                print(f"error reading command: {err}")
                continue
            if not line:
                return
            _handle_shell_command(line, hint, should_quit)

    threading.Thread(target=shell, daemon=True).start()


class _QueueHandler(FileSystemEventHandler):
    def __init__(self, events: queue.Queue) -> None:
        super().__init__()
        self._events = events

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._events.put(Path(os.fsdecode(event.src_path)))

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._events.put(Path(os.fsdecode(event.src_path)))

    def on_moved(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._events.put(Path(os.fsdecode(event.dest_path)))


def _ends_with(path: Path, suffix: Path) -> bool:
    parts = suffix.parts
    return bool(parts) and path.parts[-len(parts):] == parts


def _clear_screen() -> None:
    print("\x1bc")


def watch(
    exercises: Sequence[Exercise], verbose: bool = False, success_hints: bool = False
) -> WatchStatus:
    """Verify exercises again whenever a file below ./exercises changes."""
    events: queue.Queue[Path] = queue.Queue()
    should_quit = threading.Event()
    observer = Observer()
    observer.schedule(_QueueHandler(events), "./exercises", recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, (0, len(exercises)), verbose, success_hints)
            return WatchStatus.FINISHED
        except VerificationFailed as err:
            hint = _SharedHint(err.exercise.hint)
        _spawn_watch_shell(hint, should_quit)

        while True:
            try:
                changed = events.get(timeout=1)
            except queue.Empty:
                changed = None
            if changed is not None and changed.suffix == ".rs" and changed.exists():
                filepath = changed.resolve()
                current = [e for e in exercises if _ends_with(filepath, e.path)][:1]
                others = [
                    e for e in exercises
                    if not e.looks_done() and not _ends_with(filepath, e.path)
                ]
                num_done = sum(1 for e in exercises if e.looks_done())
                _clear_screen()
                try:
                    verify(current + others, (num_done, len(exercises)),
                           verbose, success_hints)
                    return WatchStatus.FINISHED
                except VerificationFailed as err:
                    hint.set(err.exercise.hint)
            if should_quit.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def _silence_stdout() -> None:
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        pass


def _print_listing(lines: Iterator[str]) -> int:
    try:
        for line in lines:
            sys.stdout.write(line + "\n")
        sys.stdout.flush()
    except BrokenPipeError:
        _silence_stdout()
        return 0
    except OSError:
        return 1
    return 0


def _lsp() -> int:
    project = RustAnalyzerProject()
    try:
        project.get_sysroot_src()
    except OSError:
        print("Couldn't find toolchain path, do you have `rustc` installed?", file=sys.stderr)
        return 1
    project.exercises_to_json()
    if not project.crates:
        print("Failed find any exercises, make sure you're in the `rustlings` folder")
        return 0
    try:
        project.write_to_disk()
    except OSError:
        print("Failed to write rust-project.json to disk for rust-analyzer")
        return 0
    print("Successfully generated rust-project.json")
    print("rust-analyzer will now parse exercises, restart your language server or editor")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = build_parser().parse_args(argv)

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        print(f"\n{WELCOME}\n")

    if not Path("info.toml").exists():
        print(f"{sys.argv[0]} must be run from the rustlings directory")
        print("Try `cd rustlings/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises("info.toml")
    verbose = args.nocapture

    if args.command is None:
        print(f"{DEFAULT_OUT}\n")
        return 0

    if args.command == "list":
        return _print_listing(list_exercises(
            exercises, args.paths, args.names, args.filter, args.unsolved, args.solved
        ))

    if args.command in ("run", "reset", "hint"):
        try:
            exercise = find_exercise(args.name, exercises)
        except LookupError as err:
            print(err)
            return 1
        if args.command == "hint":
            print(exercise.hint)
            return 0
        if args.command == "run":
            try:
                run(exercise, verbose)
            except ExerciseFailed:
                return 1
            return 0
        try:
            reset(exercise)
        except OSError:
            return 1
        return 0

    if args.command == "verify":
        try:
            verify(exercises, (0, len(exercises)), verbose, False)
        except VerificationFailed:
            return 1
        return 0

    if args.command == "lsp":
        return _lsp()

    try:
        status = watch(exercises, verbose, args.success_hints)
    except OSError as err:
        print(f"Error: Could not watch your progress. Error message was {err!r}.")
        print("Most likely you've run out of disk space or your 'inotify limit' has been reached.")
        return 1
    if status is WatchStatus.FINISHED:
        emoji = "★" if os.environ.get("NO_EMOJI") is not None else "🎉"
        print(f"{emoji} All exercises completed! {emoji}")
        print(f"\n{FENISH_LINE}\n")
    else:
        print("We hope you're enjoying learning about Rust!")
        print("If you want to continue working on the exercises at a later point, "
              "you can simply run `rustlings watch` again")
    return 0


if __name__ == "__main__":
    sys.exit(main())