"""Buildings that can be bought with money and produce income over time."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clicker.game_manager import GameManager

BASE_COSTS: tuple[float, ...] = (
    10,
    125,
    600,
    1800,
    5600,
    38000,
    442000,
    7300000,
    145000000,
    3200000000,
    200000000000,
)

BASE_PRODS: tuple[float, ...] = (
    2,
    6,
    20,
    65,
    200,
    650,
    2000,
    8500,
    100000,
    1200000,
    250000,
)

N_BUILDINGS = len(BASE_COSTS)

COST_GROWTH = 1.15


class Building:
    """A building kind whose level raises its income and its next price."""

    N_BUILDINGS = N_BUILDINGS
    BASE_COSTS = BASE_COSTS
    BASE_PRODS = BASE_PRODS

    def __init__(self, index: int, game_manager: GameManager) -> None:
        if not 0 <= index < N_BUILDINGS:
            raise IndexError(f"building index {index} out of range 0..{N_BUILDINGS - 1}")
        self._index = index
        self._game_manager = game_manager
        self._level = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def level(self) -> int:
        """How many times this building has been bought."""
        return self._level

    @property
    def cost(self) -> float:
        """Price of the next level."""
        return BASE_COSTS[self._index] * COST_GROWTH**self._level

    @property
    def gain(self) -> float:
        """Production per full income period at the current level."""
        return BASE_PRODS[self._index] * self._level

    def level_up(self) -> bool:
        """Buy one level if the player can afford it; return whether it was bought."""
        price = self.cost
        if self._game_manager.money < price:
            return False
        self._game_manager.add_money(-price)
        self._level += 1
        return True

    def __repr__(self) -> str:
        return f"Building(index={self._index}, level={self._level})"