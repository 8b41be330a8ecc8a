"""The game window: event loop, layer stack and drawing helpers."""

from __future__ import annotations

import argparse

import pygame

from clicker.game_manager import GameManager
from clicker.layers import Layer, MainLayer
from clicker.widgets import BLACK, WHITE, Color

TITLE = "mygame"
MONEY_TEXT_SIZE = 15
LINE_SPACING = 1.5


class WindowManager:
    """Owns the drawing surface and the stack of layers shown on it."""

    WHITE = WHITE
    BLACK = BLACK

    def __init__(self, width: int, height: int, game_manager: GameManager) -> None:
        self.width = width
        self.height = height
        self._game_manager = game_manager
        pygame.font.init()
        self._fonts: dict[int, pygame.font.Font] = {}
        self._surface = pygame.Surface((width, height))
        self._layers: list[Layer] = [MainLayer(self)]

    @property
    def game_manager(self) -> GameManager:
        return self._game_manager

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        pygame.init()
        try:
            self._surface = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(TITLE)
            self._game_manager.start()
            running = True
            while running and self._layers:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                        self.handle_click(*event.pos)
                if running and self._layers:
                    self.render()
                    pygame.display.flip()
        finally:
            self._game_manager.stop()
            pygame.quit()

    def handle_click(self, x: int, y: int) -> None:
        """Forward a left click to the top layer."""
        if self._layers:
            self._layers[-1].receive_click(x, y)

    def render(self) -> None:
        """Draw the top layer and the money counter onto the surface."""
        self._surface.fill(BLACK)
        if self._layers:
            self._layers[-1].display()
        self.draw_text(
            f"Money {int(self._game_manager.money)}", 0, 0, MONEY_TEXT_SIZE, WHITE
        )

    def pop_layer(self) -> None:
        """Remove the top layer; raises IndexError when there is none."""
        self._layers.pop()

    def draw_rect(self, x: int, y: int, width: int, height: int) -> pygame.Rect:
        return pygame.draw.rect(self._surface, WHITE, pygame.Rect(x, y, width, height))

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color) -> pygame.Rect:
        rendered = self._font(size).render(text, True, color)
        return self._surface.blit(rendered, (x, y))

    def draw_lines(self, lines: list[str], x: int, y: int, size: int, color: Color) -> int:
        """Draw lines one below another; return the y just past the last one."""
        current = y
        for line in lines:
            bounds = self.draw_text(line, x, current, size, color)
            current += int(bounds.height * LINE_SPACING)
        return current


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="clicker", description="A small clicker game.")
    parser.parse_args(argv)
    game_manager = GameManager()
    print("Starting the game")
    WindowManager(1000, 1000, game_manager).run()
    print("Ending the game")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())