import json
import subprocess
from pathlib import Path
from unittest.mock import patch

from drillkit.project import Crate, RustAnalyzerProject


def test_crate_defaults():
    crate = Crate(root_module="exercises/a.rs")
    assert crate.to_dict() == {
        "root_module": "exercises/a.rs",
        "edition": "2021",
        "deps": [],
        "cfg": ["test"],
    }


def test_path_to_json_only_rust_files():
    project = RustAnalyzerProject()
    project.path_to_json(Path("exercises/a.rs"))
    project.path_to_json(Path("exercises/README.md"))
    project.path_to_json(Path("exercises/dir"))
    assert [c.root_module for c in project.crates] == [str(Path("exercises/a.rs"))]


def test_exercises_to_json_walks_tree(tmp_path):
    (tmp_path / "01_x").mkdir()
    (tmp_path / "01_x" / "b.rs").write_text("")
    (tmp_path / "01_x" / "notes.md").write_text("")
    (tmp_path / "a.rs").write_text("")
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    roots = {c.root_module for c in project.crates}
    assert roots == {str(tmp_path / "a.rs"), str(tmp_path / "01_x" / "b.rs")}


def test_exercises_to_json_empty(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path / "nothing")
    assert project.crates == []


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/src", crates=[Crate("x.rs")])
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    text = target.read_text()
    assert json.loads(text) == project.to_dict()
    assert " " not in text


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/library")
    project = RustAnalyzerProject()
    with patch("drillkit.project.subprocess.run") as run:
        project.get_sysroot_src()
    assert project.sysroot_src == "/custom/library"
    run.assert_not_called()


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    completed = subprocess.CompletedProcess([], 0, b"/opt/toolchain\n", b"")
    project = RustAnalyzerProject()
    with patch("drillkit.project.subprocess.run", return_value=completed) as run:
        project.get_sysroot_src()
    assert run.call_args.args[0] == ["rustc", "--print", "sysroot"]
    expected = Path("/opt/toolchain") / "lib" / "rustlib" / "src" / "rust" / "library"
    assert Path(project.sysroot_src) == expected
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out