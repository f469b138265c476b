"""A small state machine driven by messages."""

from __future__ import annotations

from dataclasses import dataclass, field


def _check_u8(*values: int) -> None:
    for value in values:
        if not 0 <= value <= 255:
            raise ValueError(f"{value} is outside 0..=255")


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8(self.x, self.y)


@dataclass(frozen=True)
class ChangeColor:
    color: tuple[int, int, int]

    def __post_init__(self) -> None:
        _check_u8(*self.color)


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Quit:
    pass


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """Colour, position and whether a quit was requested."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    has_quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.has_quit = True

    def echo(self, s: str) -> None:
        print(s)

    def move_position(self, p: Point) -> None:
        self.position = p

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case Quit():
                self.quit()
            case ChangeColor(color=color):
                self.change_color(color)
            case Move(point=point):
                self.move_position(point)
            case Echo(text=text):
                self.echo(text)
            case _:
                raise TypeError(f"unknown message: {message!r}")