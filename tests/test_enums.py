import pytest

from rustlings.exercises.enums import ChangeColor, Echo, Move, Point, Quit, State


def test_match_message_call(capsys):
    state = State(color=(0, 0, 0), position=Point(0, 0), has_quit=False)
    state.process(ChangeColor((255, 0, 255)))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.has_quit is True
    assert capsys.readouterr().out == "hello world\n"


def test_defaults_then_quit():
    state = State()
    assert state.has_quit is False
    state.process(Quit())
    assert state.has_quit is True
    assert state.color == (0, 0, 0)


def test_unknown_message_rejected():
    with pytest.raises(TypeError):
        State().process("quit")


def test_point_out_of_range():
    with pytest.raises(ValueError):
        Point(256, 0)


def test_color_out_of_range():
    with pytest.raises(ValueError):
        ChangeColor((0, -1, 0))