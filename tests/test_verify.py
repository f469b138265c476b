import subprocess
from unittest.mock import patch

import pytest

import rustlings.verify as verify_mod
from rustlings.exercise import Exercise, ExerciseFailed, Mode, temp_file
from rustlings.verify import (
    ProgressBar,
    VerificationFailed,
    prompt_for_completion,
    verify,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.delenv("NO_EMOJI", raising=False)


def _exercise(tmp_path, name, content, mode=Mode.COMPILE, hint="some hint"):
    path = tmp_path / f"{name}.rs"
    path.write_text(content, encoding="utf-8")
    return Exercise(name=name, path=path, mode=mode, hint=hint)


def _done(stdout=b"", stderr=b"", returncode=0):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


def test_progress_bar_starts_empty():
    bar = ProgressBar(4)
    text = bar.render()
    assert text.startswith("Progress: [")
    assert "-" * 60 in text
    assert "#" not in text
    assert "0/4" in text


def test_progress_bar_fills_as_it_advances():
    bar = ProgressBar(4)
    previous = 0
    for _ in range(4):
        bar.advance()
        segment = bar.render().split("[", 1)[1].split("]", 1)[0]
        assert len(segment) == 60
        assert segment.count("#") >= previous
        previous = segment.count("#")
    assert "#" * 60 in bar.render()
    assert "4/4" in bar.render()


def test_prompt_for_finished_exercise(tmp_path, capsys):
    exercise = _exercise(tmp_path, "finished_exercise", FINISHED)
    assert prompt_for_completion(exercise, None, False) is True
    assert capsys.readouterr().out == ""


def test_prompt_for_pending_exercise_shows_context(tmp_path, capsys):
    exercise = _exercise(tmp_path, "pending_exercise", PENDING)
    assert prompt_for_completion(exercise, None, False) is False
    out = capsys.readouterr().out
    assert f"Successfully ran {exercise}!" in out
    assert "The code is compiling!" in out
    assert " 3 |  // I AM NOT DONE" in out
    assert " 1 |  // fake_exercise" in out
    assert "You can keep working on this exercise," in out
    assert "fn main() {" in out


def test_prompt_without_emoji(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    exercise = _exercise(tmp_path, "pending_exercise", PENDING)
    prompt_for_completion(exercise, None, False)
    assert "~*~ The code is compiling! ~*~" in capsys.readouterr().out


def test_prompt_for_test_mode(tmp_path, capsys):
    exercise = _exercise(tmp_path, "pending_test", PENDING, mode=Mode.TEST)
    prompt_for_completion(exercise, None, False)
    out = capsys.readouterr().out
    assert f"Successfully tested {exercise}!" in out
    assert "The code is compiling, and the tests pass!" in out


def test_prompt_shows_output_and_hints(tmp_path, capsys):
    exercise = _exercise(tmp_path, "pending_exercise", PENDING, hint="try harder")
    prompt_for_completion(exercise, "program said hi", True)
    out = capsys.readouterr().out
    assert "Output:" in out
    assert "program said hi" in out
    assert "Hints:" in out
    assert "try harder" in out
    assert "=" * 20 in out


def test_verify_all_finished(tmp_path):
    first = _exercise(tmp_path, "one", FINISHED)
    second = _exercise(tmp_path, "two", FINISHED)
    with patch("subprocess.run", return_value=_done()) as run:
        assert verify([first, second], (0, 2)) is None
    programs = [call.args[0][0] for call in run.call_args_list]
    assert programs == ["rustc", temp_file(), "rustc", temp_file()]


def test_verify_stops_at_compile_failure(tmp_path, capsys):
    broken = _exercise(tmp_path, "broken", FINISHED)
    with patch("subprocess.run", return_value=_done(stderr=b"error text", returncode=1)):
        with pytest.raises(VerificationFailed) as info:
            verify([broken], (0, 1))
    assert info.value.exercise is broken
    out = capsys.readouterr().out
    assert f"Compiling of {broken} failed!" in out
    assert "error text" in out


def test_verify_stops_at_pending_exercise(tmp_path):
    pending = _exercise(tmp_path, "pending", PENDING)
    later = _exercise(tmp_path, "later", FINISHED)
    with patch("subprocess.run", return_value=_done(stdout=b"ok")) as run:
        with pytest.raises(VerificationFailed) as info:
            verify([pending, later], (0, 2))
    assert info.value.exercise is pending
    assert all(str(later.path) not in call.args[0] for call in run.call_args_list)


def test_verify_reports_test_failure(tmp_path, capsys):
    exercise = _exercise(tmp_path, "failing", FINISHED, mode=Mode.TEST)
    results = [_done(), _done(stdout=b"assertion failed", returncode=101)]
    with patch("subprocess.run", side_effect=results):
        with pytest.raises(VerificationFailed) as info:
            verify([exercise], (0, 1))
    assert isinstance(info.value.__cause__, ExerciseFailed)
    out = capsys.readouterr().out
    assert f"Testing of {exercise} failed!" in out
    assert "assertion failed" in out


def test_non_interactive_test_does_not_prompt(tmp_path, capsys):
    exercise = _exercise(tmp_path, "pending_test_exercise", PENDING, mode=Mode.TEST)
    results = [_done(), _done(stdout=b"THIS TEST TOO SHALL PASS")]
    with patch("subprocess.run", side_effect=results) as run:
        verify_mod.test(exercise, verbose=True)
    out = capsys.readouterr().out
    assert "THIS TEST TOO SHALL PASS" in out
    assert "I AM NOT DONE" not in out
    assert "--test" in run.call_args_list[0].args[0]
    assert run.call_args_list[1].args[0][1] == "--show-output"


def test_non_interactive_test_failure_raises(tmp_path):
    exercise = _exercise(tmp_path, "testNotPassed", FINISHED, mode=Mode.TEST)
    results = [_done(), _done(stdout=b"not_passing", returncode=101)]
    with patch("subprocess.run", side_effect=results):
        with pytest.raises(ExerciseFailed) as info:
            verify_mod.test(exercise)
    assert info.value.output.stdout == "not_passing"