"""Running a single exercise and resetting it."""

from __future__ import annotations

import subprocess

from .exercise import Exercise, ExerciseFailed, Mode
from .ui import success, warn
from .verify import _Spinner, test


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run (or test) the exercise; raise ExerciseFailed on failure."""
    if exercise.mode is Mode.TEST:
        test(exercise, verbose)
    else:
        _compile_and_run(exercise)


def reset(exercise: Exercise) -> subprocess.Popen:
    """Stash the changes made to the exercise file with git."""
    return subprocess.Popen(["git", "stash", "--", str(exercise.path)])


def _compile_and_run(exercise: Exercise) -> None:
    with _Spinner(f"Compiling {exercise}...") as spinner:
        try:
            compiled = exercise.compile()
        except ExerciseFailed as err:
            spinner.finish()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(err.output.stderr)
            raise

        with compiled:
            spinner.message = f"Running {exercise}..."
            try:
                output = compiled.run()
            except ExerciseFailed as err:
                spinner.finish()
                print(err.output.stdout)
                print(err.output.stderr)
                warn(f"Ran {exercise} with errors")
                raise
            spinner.finish()

    print(output.stdout)
    success(f"Successfully ran {exercise}")