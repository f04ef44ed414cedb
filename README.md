# drillkit

drillkit is a Python library for working through a course of small
programming exercises. Each exercise is a source file that does not yet
compile, or whose tests do not yet pass. The library loads the course,
compiles and runs or tests each exercise, tells whether the learner has
finished it, and shows where the work is still pending.

It also holds, in `drillkit.lessons`, worked solutions to the course
topics written as plain Python.

## Requirements

- Python 3.11 or later
- The `rustc` compiler on your `PATH` to compile exercises, and `cargo`
  for the clippy exercises.

## Installing

```
pip install .
```

## The course file

`info.toml` lists the exercises in the recommended order:

```toml
[[exercises]]
name = "intro1"
path = "exercises/00_intro/intro1.rs"
mode = "compile"
hint = "Remove the I AM NOT DONE comment to move on."
```

`mode` is one of:

- `compile`: the file is compiled and the resulting program is run;
- `test`: the file is compiled as a test harness and its tests are run
  with `--show-output`;
- `clippy`: a `Cargo.toml` is written to `exercises/22_clippy/`, the file
  is compiled and `cargo clippy` is run with warnings denied.

An exercise counts as finished once it builds and passes **and** its
`// I AM NOT DONE` marker comment has been removed.

## Using the library

### Loading exercises and reading their state

```python
from drillkit.exercise import load_exercises

exercises = load_exercises("info.toml")
for exercise in exercises:
    state = exercise.state()          # None when the marker is gone
    if state is None:
        print(exercise.name, "done")
    else:
        for line in state.context:    # the marker line and two lines either side
            print(line.number, line.line, "<--" if line.important else "")
```

`Exercise.looks_done()` is a shortcut for `state() is None`.

### Compiling and running one exercise

`Exercise.compile()` returns a `CompiledExercise`, which is a context
manager that removes the temporary binary when it closes. It raises
`CompilationError` if compiling fails; `CompiledExercise.run()` raises
`ExecutionError` if the program or its tests fail. Both errors carry the
captured `output` (`stdout` and `stderr`).

```python
from drillkit.exercise import CompilationError, ExecutionError

try:
    with exercise.compile() as compiled:
        print(compiled.run().stdout)
except (CompilationError, ExecutionError) as exc:
    print(exc.output.stderr)
```

`drillkit.run.run(exercise, verbose=False)` does the same with a
spinner and coloured messages, and raises `RunFailed` on failure.
`drillkit.run.reset(exercise)` runs `git stash -- <path>` for the
exercise's file.

### Verifying the course

```python
from drillkit.verify import VerificationFailed, verify

try:
    verify(exercises, (0, len(exercises)), verbose=False, success_hints=False)
    print("All exercises completed!")
except VerificationFailed as exc:
    print(exc.exercise.hint)
```

`verify` checks the exercises in order, drawing a progress bar on a
terminal, and raises `VerificationFailed` at the first exercise that
fails or still carries its marker. For an exercise that passes but is
still marked, it prints a success message, the program output, the hint
when `success_hints` is true, and the lines around the marker.

### Language server project file

```python
from drillkit.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()      # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json()    # one crate per .rs file under ./exercises
project.write_to_disk()        # writes ./rust-project.json
```

### Worked lessons

```python
from drillkit.lessons.quizzes import calculate_price_of_apples
from drillkit.lessons.basics import animal_habitat
from drillkit.lessons.iterators import divide

calculate_price_of_apples(41)   # 41
animal_habitat("gopher")        # "Burrow"
divide(81, 9)                   # 9; divide(81, 0) raises DivideByZeroError
```

The lesson modules are `basics`, `quizzes`, `sequences`, `options`,
`structs`, `hashmaps`, `testing`, `errors`, `iterators` and `traits`.

## Environment

- `NO_EMOJI`: when set, messages use plain markers instead of emoji.
- `RUST_SRC_PATH`: when set, `RustAnalyzerProject.get_sysroot_src()`
  uses it instead of asking `rustc`.

## What drillkit does not do

- It installs no command: there is no `drillkit` program to run from the
  shell. Everything is reached from Python as shown above.
- It has no watch mode: it does not notice file changes and re-verify by
  itself, nor offer an interactive prompt for hints.
- The lessons do not cover type conversions.

## Running the tests

```
pip install .[test]
pytest
```