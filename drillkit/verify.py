"""Verification of exercises: compile, run or test them and report progress."""

from __future__ import annotations

import enum
import itertools
import sys
import threading
from typing import Iterable, TextIO

from drillkit import ui
from drillkit.exercise import (
    CompilationError,
    CompiledExercise,
    ExecutionError,
    Exercise,
    Mode,
)

_SPINNER_FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"
_BAR_WIDTH = 60
_CLEAR_LINE = "\r\x1b[2K"


def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class RunMode(enum.Enum):
    """Whether a passing exercise should prompt the learner to move on."""

    INTERACTIVE = enum.auto()
    NON_INTERACTIVE = enum.auto()


class VerificationFailed(Exception):
    """An exercise failed to compile, run or pass, or is still pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"verification of {exercise} failed")
        self.exercise = exercise


class Spinner:
    """A one-line activity indicator, drawn only on a terminal."""

    def __init__(
        self, message: str = "", stream: TextIO | None = None, interval: float = 0.1
    ) -> None:
        self.message = message
        self._stream = stream if stream is not None else sys.stderr
        self._interval = interval
        self._enabled = _is_terminal(self._stream)
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        if self._enabled:
            self._thread = threading.Thread(target=self._tick, daemon=True)
            self._thread.start()

    def _tick(self) -> None:
        for frame in itertools.cycle(_SPINNER_FRAMES):
            self._draw(frame)
            if self._stop.wait(self._interval):
                return

    def _draw(self, frame: str) -> None:
        with self._lock:
            if self._stop.is_set():
                return
            self._stream.write(f"{_CLEAR_LINE}{frame} {self.message}")
            self._stream.flush()

    def set_message(self, message: str) -> None:
        """Change the text shown next to the spinner."""
        self.message = message

    def finish_and_clear(self) -> None:
        """Stop the spinner and erase its line."""
        if self._stop.is_set():
            return
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
        if self._enabled:
            with self._lock:
                self._stream.write(_CLEAR_LINE)
                self._stream.flush()

    def __enter__(self) -> "Spinner":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.finish_and_clear()


class ProgressBar:
    """A progress bar of the exercises done so far."""

    def __init__(
        self,
        length: int,
        position: int = 0,
        message: str = "",
        stream: TextIO | None = None,
    ) -> None:
        self.length = length
        self.position = position
        self.message = message
        self._stream = stream if stream is not None else sys.stderr
        self._enabled = _is_terminal(self._stream)
        self._drawn = False

    def render(self) -> str:
        """Return the bar as one line of text."""
        fraction = min(self.position / self.length, 1.0) if self.length else 1.0
        fill = int(fraction * _BAR_WIDTH)
        head = 1 if fraction > 0 and fill < _BAR_WIDTH else 0
        done = "#" * fill + ">" * head
        rest = "-" * (_BAR_WIDTH - fill - head)
        return (
            f"Progress: [{ui.green(done)}{ui.red(rest)}] "
            f"{self.position}/{self.length} {self.message}"
        )

    def inc(self, delta: int = 1) -> None:
        """Advance the bar and redraw it."""
        self.position += delta
        self._draw()

    def _draw(self) -> None:
        if self._enabled:
            self._stream.write(f"{_CLEAR_LINE}{self.render()}")
            self._stream.flush()
            self._drawn = True

    def _close(self) -> None:
        if self._drawn:
            self._stream.write("\n")
            self._stream.flush()
            self._drawn = False


def _percentage_message(percentage: float) -> str:
    return f"({percentage:.1f} %)"


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
    success_hints: bool = False,
) -> None:
    """Check the exercises in order; raise VerificationFailed at the first failure."""
    num_done, total = progress
    percentage = num_done / total * 100.0 if total else 100.0
    bar = ProgressBar(total, position=num_done, message=_percentage_message(percentage))
    bar._draw()
    try:
        for exercise in exercises:
            try:
                match exercise.mode:
                    case Mode.TEST:
                        finished = compile_and_test(
                            exercise, RunMode.INTERACTIVE, verbose, success_hints
                        )
                    case Mode.COMPILE:
                        finished = compile_and_run_interactively(exercise, success_hints)
                    case Mode.CLIPPY:
                        finished = compile_only(exercise, success_hints)
            except VerificationFailed:
                finished = False
            if not finished:
                raise VerificationFailed(exercise)
            if total:
                percentage += 100.0 / total
            bar.message = _percentage_message(percentage)
            bar.inc(1)
    finally:
        bar._close()


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the exercise's tests without prompting."""
    compile_and_test(exercise, RunMode.NON_INTERACTIVE, verbose, False)


def _compile(exercise: Exercise, spinner: Spinner) -> CompiledExercise:
    try:
        return exercise.compile()
    except CompilationError as exc:
        spinner.finish_and_clear()
        ui.warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(exc.output.stderr)
        raise VerificationFailed(exercise) from exc


def compile_only(exercise: Exercise, success_hints: bool = False) -> bool:
    """Compile the exercise without running it."""
    with Spinner(f"Compiling {exercise}...") as spinner:
        with _compile(exercise, spinner):
            pass
        spinner.finish_and_clear()
    return prompt_for_completion(exercise, None, success_hints)


def compile_and_run_interactively(exercise: Exercise, success_hints: bool = False) -> bool:
    """Compile and run the exercise, then prompt the learner."""
    with Spinner(f"Compiling {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            spinner.set_message(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExecutionError as exc:
                spinner.finish_and_clear()
                ui.warn(f"Ran {exercise} with errors")
                print(exc.output.stdout)
                print(exc.output.stderr)
                raise VerificationFailed(exercise) from exc
            spinner.finish_and_clear()
    return prompt_for_completion(exercise, output.stdout, success_hints)


def compile_and_test(
    exercise: Exercise,
    run_mode: RunMode,
    verbose: bool = False,
    success_hints: bool = False,
) -> bool:
    """Compile the exercise as a test harness and run it."""
    with Spinner(f"Testing {exercise}...") as spinner:
        with _compile(exercise, spinner) as compiled:
            try:
                output = compiled.run()
            except ExecutionError as exc:
                spinner.finish_and_clear()
                ui.warn(
                    f"Testing of {exercise} failed! Please try again. Here's the output:"
                )
                print(exc.output.stdout)
                raise VerificationFailed(exercise) from exc
            spinner.finish_and_clear()
    if verbose:
        print(output.stdout)
    if run_mode is RunMode.INTERACTIVE:
        return prompt_for_completion(exercise, None, success_hints)
    return True


def prompt_for_completion(
    exercise: Exercise, prompt_output: str | None = None, success_hints: bool = False
) -> bool:
    """Return True when done; otherwise show the pending marker and return False."""
    state = exercise.state()
    if state is None:
        return True

    match exercise.mode:
        case Mode.COMPILE:
            ui.success(f"Successfully ran {exercise}!")
        case Mode.TEST:
            ui.success(f"Successfully tested {exercise}!")
        case Mode.CLIPPY:
            ui.success(f"Successfully compiled {exercise}!")

    emoji = ui.use_emoji()
    clippy_message = (
        "The code is compiling, and 📎 Clippy 📎 is happy!"
        if emoji
        else "The code is compiling, and Clippy is happy!"
    )
    success_message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    print()
    if emoji:
        print(f"🎉 🎉  {success_message} 🎉 🎉")
    else:
        print(f"~*~ {success_message} ~*~")
    print()

    if prompt_output is not None:
        print("Output:")
        print(separator())
        print(prompt_output)
        print(separator())
        print()
    if success_hints:
        print("Hints:")
        print(separator())
        print(exercise.hint)
        print(separator())
        print()

    print("You can keep working on this exercise,")
    print(
        "or jump into the next one by removing the "
        f"{ui.bold('`I AM NOT DONE`')} comment:"
    )
    print()
    for context_line in state.context:
        text = ui.bold(context_line.line) if context_line.important else context_line.line
        number = ui.bold(ui.blue(f"{context_line.number:>2}"))
        print(f"{number} {ui.blue('|')}  {text}")
    return False


def separator() -> str:
    """Return the bold rule printed around outputs and hints."""
    return ui.bold("====================")