import pytest

from clicker.building import N_BUILDINGS
from clicker.game_manager import GameManager
from clicker.layers import Layer, MainLayer
from clicker.widgets import BuildingButton


class FakeWindow:
    def __init__(self, width=1000, height=1000):
        self.width = width
        self.height = height
        self._game_manager = GameManager()
        self.pops = 0
        self.rects = []
        self.texts = []

    @property
    def game_manager(self):
        return self._game_manager

    def pop_layer(self):
        self.pops += 1

    def draw_rect(self, x, y, width, height):
        self.rects.append((x, y, width, height))

    def draw_lines(self, lines, x, y, size, color):
        self.texts.append((list(lines), x, y, size, color))


@pytest.fixture
def window():
    return FakeWindow()


def test_plain_layer_closes_on_click(window):
    layer = Layer(window)
    assert layer.receive_click(5, 5) is True
    assert window.pops == 1


def test_plain_layer_ignores_click_on_border(window):
    layer = Layer(window)
    assert layer.receive_click(0, 0) is False
    assert window.pops == 0


def test_plain_layer_displays_nothing(window):
    Layer(window).display()
    assert window.rects == []


def test_main_layer_click_earns_money_without_closing(window):
    layer = MainLayer(window)
    assert layer.receive_click(500, 500)
    assert window.game_manager.money == 1
    assert window.pops == 0


def test_main_layer_building_click_takes_priority(window):
    window.game_manager.add_money(10)
    layer = MainLayer(window)
    target = next(b for b in layer.buttons if isinstance(b, BuildingButton) and b.index == 0)
    assert layer.receive_click(target.x + 1, target.y + 1)
    assert window.game_manager.buildings[0].level == 1
    assert window.game_manager.money == 0


def test_main_layer_has_one_button_per_building(window):
    layer = MainLayer(window)
    indices = [b.index for b in layer.buttons if isinstance(b, BuildingButton)]
    assert indices == list(range(N_BUILDINGS))


def test_main_layer_display_draws_every_building(window):
    MainLayer(window).display()
    assert len(window.rects) == N_BUILDINGS
    assert len(window.texts) == N_BUILDINGS
    assert all(lines[0] == "Level : 0" for lines, *_ in window.texts)