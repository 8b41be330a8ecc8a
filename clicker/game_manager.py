"""Game state: the player's money, the buildings and the income loop."""

from __future__ import annotations

import threading

from clicker.building import N_BUILDINGS, Building


class NegativeBalanceError(RuntimeError):
    """Raised when a change would leave the player with negative money."""


class GameManager:
    """Holds the money and buildings and pays building income on a timer."""

    def __init__(self, tick_interval: float = 1.0) -> None:
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        self.tick_interval = tick_interval
        self._money = 0.0
        self._lock = threading.RLock()
        self._buildings = [Building(i, self) for i in range(N_BUILDINGS)]
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def money(self) -> float:
        with self._lock:
            return self._money

    @property
    def buildings(self) -> list[Building]:
        return self._buildings

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def click(self) -> None:
        """Earn one unit of money."""
        self.add_money(1)

    def add_money(self, amount: float) -> None:
        """Change the balance; a change that would make it negative is refused."""
        with self._lock:
            new_balance = self._money + amount
            if new_balance < 0:
                raise NegativeBalanceError(
                    f"balance would become {new_balance} after adding {amount}"
                )
            self._money = new_balance

    def collect_income(self) -> None:
        """Pay half of every building's gain, as one tick of the income loop does."""
        with self._lock:
            for building in self._buildings:
                self.add_money(building.gain / 2)

    def _run(self) -> None:
        while not self._stop_event.is_set():
            self.collect_income()
            self._stop_event.wait(self.tick_interval)

    def start(self) -> None:
        """Start paying building income in the background."""
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="building-income", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the income loop and wait for it to finish."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> GameManager:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()