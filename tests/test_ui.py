import re

from drillkit import ui

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def _plain(text):
    return _ANSI.sub("", text)


def test_styles_keep_the_text():
    for style in (ui.red, ui.green, ui.blue, ui.bold):
        styled = style("hello")
        assert _plain(styled) == "hello"
        assert styled.startswith("\x1b[")
        assert styled != "hello"


def test_styles_differ_from_each_other():
    styled = {ui.red("x"), ui.green("x"), ui.blue("x"), ui.bold("x")}
    assert len(styled) == 4


def test_style_accepts_numbers():
    assert _plain(ui.blue(12)) == "12"


def test_use_emoji_follows_environment(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert ui.use_emoji() is True
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.use_emoji() is False


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("Ran thing with errors")
    out = capsys.readouterr().out
    assert _plain(out) == "! Ran thing with errors\n"


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("careful")
    out = _plain(capsys.readouterr().out)
    assert out.startswith("⚠️ ")
    assert out.rstrip("\n").endswith("careful")


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran it")
    out = capsys.readouterr().out
    assert _plain(out) == "✓ Successfully ran it\n"


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.success("done")
    out = _plain(capsys.readouterr().out)
    assert out.startswith("✅")
    assert "done" in out