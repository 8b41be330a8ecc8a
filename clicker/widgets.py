"""Clickable rectangular buttons shown on a layer."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from clicker.game_manager import GameManager

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)

TEXT_SIZE = 15


class Canvas(Protocol):
    """What a button needs from the window that owns it."""

    width: int
    height: int

    @property
    def game_manager(self) -> GameManager: ...

    def pop_layer(self) -> None: ...

    def draw_rect(self, x: int, y: int, width: int, height: int) -> object: ...

    def draw_lines(
        self, lines: list[str], x: int, y: int, size: int, color: Color
    ) -> object: ...


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Button:
    """A rectangle that reacts to clicks strictly inside its borders."""

    def __init__(self, x: int, y: int, width: int, height: int, window_manager: Canvas) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self._window_manager = window_manager

    def contains(self, x: int, y: int) -> bool:
        return self.x < x < self.x + self.width and self.y < y < self.y + self.height

    def handle_click(self, x: int, y: int) -> bool:
        """Run the callback if the point is inside; return whether it was."""
        if self.contains(x, y):
            self.callback()
            return True
        return False

    def callback(self) -> None:
        self._window_manager.game_manager.click()

    def display(self) -> None:
        self._window_manager.draw_rect(self.x, self.y, self.width, self.height)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x={self.x}, y={self.y}, "
            f"width={self.width}, height={self.height})"
        )


class CloseLayerButton(Button):
    """An invisible button covering the whole window that closes the top layer."""

    BASE_POS_X = 0
    BASE_POS_Y = 0

    def __init__(self, window_manager: Canvas) -> None:
        super().__init__(
            self.BASE_POS_X,
            self.BASE_POS_Y,
            window_manager.width,
            window_manager.height,
            window_manager,
        )

    def callback(self) -> None:
        self._window_manager.pop_layer()

    def display(self) -> None:
        """Draws nothing."""


class ClickButton(Button):
    """An invisible button covering the whole window that earns money."""

    BASE_POS_X = 0
    BASE_POS_Y = 0

    def __init__(self, window_manager: Canvas) -> None:
        super().__init__(
            self.BASE_POS_X,
            self.BASE_POS_Y,
            window_manager.width,
            window_manager.height,
            window_manager,
        )

    def callback(self) -> None:
        self._window_manager.game_manager.click()

    def display(self) -> None:
        """Draws nothing."""


class BuildingButton(Button):
    """A button in the right-hand column that buys a level of one building."""

    BASE_POS_X = 840
    BASE_POS_Y = 10
    WIDTH = 150
    HEIGHT = 80
    V_SPACING = 10

    def __init__(self, index: int, window_manager: Canvas) -> None:
        super().__init__(
            self.BASE_POS_X,
            self.BASE_POS_Y + index * (self.HEIGHT + self.V_SPACING),
            self.WIDTH,
            self.HEIGHT,
            window_manager,
        )
        self.index = index

    @property
    def _building(self):
        return self._window_manager.game_manager.buildings[self.index]

    def callback(self) -> None:
        self._building.level_up()

    def display(self) -> None:
        super().display()
        building = self._building
        lines = [
            f"Level : {_round_half_away(building.level)}",
            f"Cost : {_round_half_away(building.cost)}",
        ]
        self._window_manager.draw_lines(lines, self.x, self.y, TEXT_SIZE, BLACK)