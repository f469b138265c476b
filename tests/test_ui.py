import pytest

from rustlings.ui import no_emoji, style, success, warn


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.setenv("CLICOLOR", "0")


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert no_emoji() is False


def test_style_plain_when_colors_disabled(plain):
    assert style("hello", "red", "bold") == "hello"


def test_style_without_styles_returns_text(monkeypatch):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")
    assert style(5) == "5"


def test_style_forced_wraps_text(monkeypatch):
    monkeypatch.setenv("CLICOLOR_FORCE", "1")
    styled = style("hello", "blue", "bold")
    assert styled.startswith("\x1b[")
    assert "hello" in styled
    assert styled.endswith("\x1b[0m")
    assert styled != style("hello", "red")


def test_style_unknown_name_raises():
    with pytest.raises(ValueError):
        style("x", "sparkly")


def test_warn_without_emoji(monkeypatch, capsys, plain):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("Ran exercises/a.rs with errors")
    assert capsys.readouterr().out == "! Ran exercises/a.rs with errors\n"


def test_success_without_emoji(monkeypatch, capsys, plain):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("Successfully ran a.rs")
    assert capsys.readouterr().out == "✓ Successfully ran a.rs\n"


def test_success_with_emoji(monkeypatch, capsys, plain):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    success("done")
    assert capsys.readouterr().out == "✅ done\n"


def test_warn_with_emoji(monkeypatch, capsys, plain):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    warn("oops")
    out = capsys.readouterr().out
    assert out.startswith("⚠️")
    assert out.endswith("oops\n")