import time

import pytest

from clicker.building import BASE_COSTS, BASE_PRODS, N_BUILDINGS
from clicker.game_manager import GameManager, NegativeBalanceError


def test_starts_with_no_money_and_all_buildings():
    manager = GameManager()
    assert manager.money == 0
    assert len(manager.buildings) == N_BUILDINGS
    assert [b.index for b in manager.buildings] == list(range(N_BUILDINGS))
    assert all(b.level == 0 for b in manager.buildings)


def test_click_adds_one():
    manager = GameManager()
    manager.click()
    manager.click()
    assert manager.money == 2


def test_add_money_accumulates():
    manager = GameManager()
    manager.add_money(7.5)
    manager.add_money(-2.5)
    assert manager.money == pytest.approx(5.0)


def test_negative_balance_is_refused():
    manager = GameManager()
    manager.add_money(3)
    with pytest.raises(NegativeBalanceError):
        manager.add_money(-4)
    assert manager.money == 3


def test_collect_income_without_buildings_pays_nothing():
    manager = GameManager()
    manager.collect_income()
    assert manager.money == 0


def test_collect_income_pays_half_of_gain():
    manager = GameManager()
    manager.add_money(BASE_COSTS[0])
    assert manager.buildings[0].level_up()
    assert manager.money == 0
    manager.collect_income()
    assert manager.money == pytest.approx(BASE_PRODS[0] / 2)


def test_invalid_tick_interval():
    with pytest.raises(ValueError):
        GameManager(tick_interval=0)


def test_background_income_runs_until_stopped():
    manager = GameManager(tick_interval=0.01)
    manager.add_money(BASE_COSTS[0])
    assert manager.buildings[0].level_up()
    manager.start()
    assert manager.running
    deadline = time.monotonic() + 5
    while manager.money == 0 and time.monotonic() < deadline:
        time.sleep(0.01)
    manager.stop()
    assert not manager.running
    earned = manager.money
    assert earned > 0
    time.sleep(0.05)
    assert manager.money == earned


def test_context_manager_starts_and_stops():
    with GameManager(tick_interval=0.01) as manager:
        assert manager.running
    assert not manager.running


def test_stop_without_start_is_harmless():
    manager = GameManager()
    manager.stop()
    assert manager.running is False