"""Exercises: their description, compilation, running and completion state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
import weakref
from dataclasses import dataclass
from pathlib import Path

from .ui import no_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = Path("./exercises/clippy/Cargo.toml")


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    thread_id = "".join(c for c in f"ThreadId{threading.get_ident()}" if c.isalnum())
    return f"./temp_{os.getpid()}_{thread_id}"


def _remove_quietly(path: str) -> None:
    try:
        os.remove(path)
    except OSError:
        pass


def clean() -> None:
    """Remove this thread's temporary binary, if there is one."""
    _remove_quietly(temp_file())


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class Mode(enum.Enum):
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
    """Completion state; an empty context means the exercise is done."""

    context: tuple[ContextLine, ...] = ()

    @property
    def is_done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or binary run."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """Compiling or running an exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


class CompiledExercise:
    """A successfully compiled exercise; its binary is removed on close."""

    def __init__(self, exercise: Exercise, binary: str) -> None:
        self.exercise = exercise
        self._binary = binary
        self._finalizer = weakref.finalize(self, _remove_quietly, binary)

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseFailed when it exits unsuccessfully."""
        return self.exercise._run(self._binary)

    def close(self) -> None:
        """Remove the compiled binary."""
        self._finalizer()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


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

    def _rustc_command(self, binary: str, *extra: str) -> list[str]:
        return ["rustc", *extra, str(self.path), "-o", binary,
                *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS]

    def _clippy(self, binary: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        message = (
            "Failed to write Clippy Cargo.toml file."
            if no_emoji()
            else "Failed to write 📎 Clippy 📎 Cargo.toml file."
        )
        try:
            CLIPPY_CARGO_TOML_PATH.write_text(cargo_toml, encoding="utf-8")
        except OSError as err:
            raise OSError(message) from err
        # Build a binary too, so clippy exercises can still be run afterwards.
        subprocess.run(self._rustc_command(binary), capture_output=True, check=False)
        manifest = str(CLIPPY_CARGO_TOML_PATH)
        subprocess.run(
            ["cargo", "clean", "--manifest-path", manifest, *RUSTC_COLOR_ARGS],
            capture_output=True,
            check=False,
        )
        return subprocess.run(
            ["cargo", "clippy", "--manifest-path", manifest, *RUSTC_COLOR_ARGS,
             "--", "-D", "warnings", "-D", "clippy::float_cmp"],
            capture_output=True,
            check=False,
        )

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise ExerciseFailed with the compiler output."""
        binary = temp_file()
        if self.mode is Mode.COMPILE:
            result = subprocess.run(self._rustc_command(binary), capture_output=True, check=False)
        elif self.mode is Mode.TEST:
            result = subprocess.run(
                self._rustc_command(binary, "--test"), capture_output=True, check=False
            )
        else:
            result = self._clippy(binary)

        if result.returncode == 0:
            return CompiledExercise(self, binary)
        _remove_quietly(binary)
        raise ExerciseFailed(ExerciseOutput(_decode(result.stdout), _decode(result.stderr)))

    def _run(self, binary: str) -> ExerciseOutput:
        arg = "--show-output" if self.mode is Mode.TEST else ""
        result = subprocess.run([binary, arg], capture_output=True, check=False)
        output = ExerciseOutput(_decode(result.stdout), _decode(result.stderr))
        if result.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def state(self) -> State:
        """Find the pending marker and the lines around it."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()

        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if matched is None:
            raise RuntimeError(f"pending marker in {self.path} is not on a single line")

        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines)
                if first <= i <= last
            )
        )

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed from the file."""
        return self.state().is_done


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the list of exercises from an info.toml file."""
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