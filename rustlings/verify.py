"""Checking exercises in order and reporting the first one that is not finished."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from typing import Iterable

from .exercise import CompiledExercise, Exercise, ExerciseFailed, Mode
from .ui import no_emoji, style, success, warn

BAR_WIDTH = 60
_SPINNER_FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"


class VerificationFailed(Exception):
    """An exercise failed to compile, failed its run, or is still pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} is not finished")
        self.exercise = exercise


def _is_tty(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class _Spinner:
    """A status line that ticks on stderr while a slow step runs."""

    def __init__(self, message: str, stream=None) -> None:
        self.message = message
        self._stream = stream if stream is not None else sys.stderr
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def __enter__(self) -> _Spinner:
        if _is_tty(self._stream):
            self._thread = threading.Thread(target=self._tick, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.finish()

    def _tick(self) -> None:
        frame = 0
        while not self._stop.wait(0.1):
            symbol = _SPINNER_FRAMES[frame % len(_SPINNER_FRAMES)]
            self._stream.write(f"\r\x1b[2K{symbol} {self.message}")
            self._stream.flush()
            frame += 1

    def finish(self) -> None:
        """Stop ticking and clear the status line."""
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        self._stream.write("\r\x1b[2K")
        self._stream.flush()


@dataclass
class ProgressBar:
    """Overall progress through the exercise list."""

    total: int
    position: int = 0
    message: str = ""
    width: int = BAR_WIDTH

    def advance(self) -> None:
        """Move one exercise further."""
        self.position += 1

    def render(self) -> str:
        """Return the progress line as text."""
        if self.total > 0:
            filled = min(self.position * self.width // self.total, self.width)
        else:
            filled = self.width
        head = ">" if self.position > 0 and filled < self.width else ""
        rest = self.width - filled - len(head)
        bar = style("#" * filled + head, "green") + style("-" * rest, "red")
        return f"Progress: [{bar}] {self.position}/{self.total} {self.message}"

    def _draw(self, stream=None) -> None:
        stream = stream if stream is not None else sys.stderr
        if _is_tty(stream):
            stream.write(f"\r\x1b[2K{self.render()}")
            stream.flush()


def _percentage_message(percentage: float) -> str:
    return f"({percentage:.1f} %)"


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
    success_hints: bool = False,
) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first unfinished one."""
    num_done, total = progress
    bar = ProgressBar(total, num_done)
    percentage = num_done / total * 100.0 if total else 0.0
    bar.message = _percentage_message(percentage)
    bar._draw()

    for exercise in exercises:
        try:
            if exercise.mode is Mode.TEST:
                done = _compile_and_test(exercise, True, verbose, success_hints)
            elif exercise.mode is Mode.COMPILE:
                done = _compile_and_run_interactively(exercise, success_hints)
            else:
                done = _compile_only(exercise, success_hints)
        except ExerciseFailed as err:
            raise VerificationFailed(exercise) from err
        if not done:
            raise VerificationFailed(exercise)
        if total:
            percentage += 100.0 / total
        bar.advance()
        bar.message = _percentage_message(percentage)
        bar._draw()


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the exercise's test harness; raise ExerciseFailed on failure."""
    _compile_and_test(exercise, False, verbose, False)


def _compile(exercise: Exercise, spinner: _Spinner) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as err:
        spinner.finish()
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise


def _compile_only(exercise: Exercise, success_hints: bool) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        _compile(exercise, spinner).close()
    return prompt_for_completion(exercise, None, success_hints)


def _compile_and_run_interactively(exercise: Exercise, success_hints: bool) -> bool:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            spinner.message = f"Running {exercise}..."
            try:
                output = compiled.run()
            except ExerciseFailed as err:
                spinner.finish()
                warn(f"Ran {exercise} with errors")
                print(err.output.stdout)
                print(err.output.stderr)
                raise
    return prompt_for_completion(exercise, output.stdout, success_hints)


def _compile_and_test(
    exercise: Exercise, interactive: bool, verbose: bool, success_hints: bool
) -> bool:
    with _Spinner(f"Testing {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            try:
                output = compiled.run()
            except ExerciseFailed as err:
                spinner.finish()
                warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
                print(err.output.stdout)
                raise
    if verbose:
        print(output.stdout)
    if interactive:
        return prompt_for_completion(exercise, None, success_hints)
    return True


def _separator() -> str:
    return style("=" * 20, "bold")


_SUCCESS_TITLES = {
    Mode.COMPILE: "Successfully ran {}!",
    Mode.TEST: "Successfully tested {}!",
    Mode.CLIPPY: "Successfully compiled {}!",
}


def prompt_for_completion(
    exercise: Exercise, prompt_output: str | None = None, success_hints: bool = False
) -> bool:
    """Return True if the exercise is done; otherwise show where its marker is and return False."""
    state = exercise.state()
    if state.is_done:
        return True

    success(_SUCCESS_TITLES[exercise.mode].format(exercise))

    plain = no_emoji()
    if exercise.mode is Mode.COMPILE:
        success_msg = "The code is compiling!"
    elif exercise.mode is Mode.TEST:
        success_msg = "The code is compiling, and the tests pass!"
    elif plain:
        success_msg = "The code is compiling, and Clippy is happy!"
    else:
        success_msg = "The code is compiling, and 📎 Clippy 📎 is happy!"

    print()
    if plain:
        print(f"~*~ {success_msg} ~*~")
    else:
        print(f"🎉 🎉  {success_msg} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(_separator())
        print(prompt_output)
        print(_separator())
        print()
    if success_hints:
        print("Hints:")
        print(_separator())
        print(exercise.hint)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(
        "or jump into the next one by removing the "
        f"{style('`I AM NOT DONE`', 'bold')} comment:"
    )
    print()
    for context_line in state.context:
        line = style(context_line.line, "bold") if context_line.important else context_line.line
        number = style(f"{context_line.number:>2}", "blue", "bold")
        print(f"{number} {style('|', 'blue')}  {line}")

    return False