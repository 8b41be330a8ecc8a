"""Layers: stacks of buttons, the top one receives clicks and is drawn."""

from __future__ import annotations

from clicker.building import N_BUILDINGS
from clicker.widgets import BuildingButton, Button, Canvas, ClickButton, CloseLayerButton


class Layer:
    """A set of buttons; by default a click anywhere closes it."""

    def __init__(self, window_manager: Canvas) -> None:
        self._window_manager = window_manager
        self._buttons: list[Button] = [CloseLayerButton(window_manager)]

    @property
    def buttons(self) -> list[Button]:
        return self._buttons

    def display(self) -> None:
        for button in self._buttons:
            button.display()

    def receive_click(self, x: int, y: int) -> bool:
        """Give the click to the last-added button that contains it."""
        return any(button.handle_click(x, y) for button in reversed(self._buttons))


class MainLayer(Layer):
    """The play screen: click anywhere to earn, buy buildings on the right."""

    def __init__(self, window_manager: Canvas) -> None:
        super().__init__(window_manager)
        self._buttons.append(ClickButton(window_manager))
        self._buttons.extend(BuildingButton(i, window_manager) for i in range(N_BUILDINGS))