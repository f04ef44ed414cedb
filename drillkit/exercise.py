"""Exercises: loading their list, compiling and running them, reading their state."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

RUSTC_COLOR_ARGS = ["--color", "always"]
RUSTC_EDITION_ARGS = ["--edition", "2021"]
RUSTC_NO_DEBUG_ARGS = ["-C", "strip=debuginfo"]
I_AM_DONE_REGEX = r"^\s*///?\s*I\s+AM\s+NOT\s+DONE"
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/22_clippy/Cargo.toml"

_DONE_MARKER = re.compile(I_AM_DONE_REGEX, re.MULTILINE)


def temp_file() -> str:
    """Return a temporary file name unique to this process and thread."""
    thread_id = "".join(c for c in str(threading.get_ident()) if c.isalnum())
    return f"./temp_{os.getpid()}_{thread_id}"


def clean() -> None:
    """Remove the temporary binary, ignoring any error."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"

    @classmethod
    def parse(cls, value: str) -> "Mode":
        """Parse a lowercase mode name."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown exercise mode: {value!r}") from None


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class Pending:
    """State of an exercise that still carries the pending marker."""

    context: list[ContextLine] = field(default_factory=list)


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished command."""

    stdout: str
    stderr: str


class CompilationError(Exception):
    """Compiling or linting an exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


class ExecutionError(Exception):
    """Running a compiled exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


def _output_of(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


def _lines(source: str) -> list[str]:
    parts = source.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: "Exercise") -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the compiled binary."""
        return self.exercise.run()

    def close(self) -> None:
        """Remove the compiled binary."""
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> "CompiledExercise":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Exercise":
        """Build an exercise from one table of info.toml."""
        missing = [key for key in ("name", "path", "mode", "hint") if key not in data]
        if missing:
            raise ValueError(f"exercise entry is missing {', '.join(missing)}")
        return cls(
            name=str(data["name"]),
            path=Path(data["path"]),
            mode=Mode.parse(data["mode"]),
            hint=str(data["hint"]),
        )

    def __str__(self) -> str:
        return str(self.path)

    def _rustc(self, *extra: str) -> list[str]:
        return [
            "rustc",
            *extra,
            str(self.path),
            "-o",
            temp_file(),
            *RUSTC_COLOR_ARGS,
            *RUSTC_EDITION_ARGS,
            *RUSTC_NO_DEBUG_ARGS,
        ]

    def _write_clippy_manifest(self) -> None:
        manifest = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(manifest, encoding="utf-8")
        except OSError as exc:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if "NO_EMOJI" in os.environ
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise OSError(message) from exc

    def compile(self) -> CompiledExercise:
        """Compile (or lint) the exercise; raise CompilationError on failure."""
        match self.mode:
            case Mode.COMPILE:
                result = subprocess.run(self._rustc(), capture_output=True)
            case Mode.TEST:
                result = subprocess.run(self._rustc("--test"), capture_output=True)
            case Mode.CLIPPY:
                self._write_clippy_manifest()
                # A binary is built as well so clippy exercises can be run.
                subprocess.run(self._rustc(), capture_output=True)
                subprocess.run(
                    ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                     *RUSTC_COLOR_ARGS],
                    capture_output=True,
                )
                result = subprocess.run(
                    ["cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
                     *RUSTC_COLOR_ARGS,
                     "--", "-D", "warnings", "-D", "clippy::float_cmp"],
                    capture_output=True,
                )
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompilationError(_output_of(result))

    def run(self) -> ExerciseOutput:
        """Run the compiled binary; raise ExecutionError if it fails."""
        arg = "--show-output" if self.mode is Mode.TEST else ""
        result = subprocess.run([temp_file(), arg], capture_output=True)
        output = _output_of(result)
        if result.returncode != 0:
            raise ExecutionError(output)
        return output

    def _read_source(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise OSError(
                f"We were unable to read the exercise file {self.path}! {exc}"
            ) from exc

    def state(self) -> Pending | None:
        """Return None when done, or the lines around the pending marker."""
        source = self._read_source()
        if not _DONE_MARKER.search(source):
            return None
        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if _DONE_MARKER.search(line)), None
        )
        if matched is None:
            raise RuntimeError(f"pending marker in {self.path} spans several lines")
        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        return Pending(
            [
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines[low : high + 1], start=low)
            ]
        )

    def looks_done(self) -> bool:
        """Return True once the pending marker has been removed."""
        return self.state() is None


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return [Exercise.from_dict(entry) for entry in data.get("exercises", [])]