"""Running a single exercise, and resetting it."""

from __future__ import annotations

import subprocess

from drillkit import ui
from drillkit.exercise import CompilationError, ExecutionError, Exercise, Mode
from drillkit.verify import Spinner, VerificationFailed, test


class RunFailed(Exception):
    """An exercise could not be compiled, run, tested or reset."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"running {exercise} failed")
        self.exercise = exercise


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the exercise, or run its tests."""
    if exercise.mode is Mode.TEST:
        try:
            test(exercise, verbose)
        except VerificationFailed as exc:
            raise RunFailed(exercise) from exc
    else:
        compile_and_run(exercise)


def reset(exercise: Exercise) -> None:
    """Reset the exercise by stashing its changes with git."""
    try:
        subprocess.run(["git", "stash", "--", str(exercise.path)])
    except OSError as exc:
        raise RunFailed(exercise) from exc


def compile_and_run(exercise: Exercise) -> None:
    """Compile the exercise and run the binary, showing its output."""
    with Spinner(f"Compiling {exercise}...") as spinner:
        try:
            compiled = exercise.compile()
        except CompilationError as exc:
            spinner.finish_and_clear()
            ui.warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(exc.output.stderr)
            raise RunFailed(exercise) from exc

        with compiled:
            spinner.set_message(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExecutionError as exc:
                spinner.finish_and_clear()
                print(exc.output.stdout)
                print(exc.output.stderr)
                ui.warn(f"Ran {exercise} with errors")
                raise RunFailed(exercise) from exc
            spinner.finish_and_clear()

    print(output.stdout)
    ui.success(f"Successfully ran {exercise}")