# clicker

A small incremental game. Click in the window to earn money, then spend it on
buildings that produce income on their own.

## Installing

```
pip install .
```

## Playing

```
clicker
```

A 1000×1000 window opens, titled "mygame". The money counter, rounded down to
a whole number, is shown in the top-left corner.

- Left-click on the play area to earn 1 coin.
- The column of boxes on the right lists the eleven buildings, each with its
  current level and the price of the next level. Clicking a box buys one
  level if you can afford it; otherwise the click does nothing.
- A building's price grows by 15 % with every level bought.
- Once a second, every building pays half of its production (its base
  production times its level).
- A click exactly on the window's top or left edge (x or y equal to 0) falls
  through to the layer beneath, which closes the play screen and ends the
  game.

Close the window to quit. The command prints "Starting the game" and
"Ending the game" around the session.

## Using the game logic

The game state can be driven without a window:

```python
from clicker.game_manager import GameManager

game = GameManager(tick_interval=1.0)
for _ in range(10):
    game.click()

first = game.buildings[0]
first.level_up()          # costs 10, returns True when bought
print(first.level, first.cost, game.money)

game.collect_income()     # one tick: pays half of every building's gain
```

- `GameManager.start()` and `GameManager.stop()` run and halt the background
  income thread, which calls `collect_income()` every `tick_interval`
  seconds. A `GameManager` can also be used as a context manager.
- `GameManager.add_money(amount)` raises `NegativeBalanceError` when the
  change would leave a negative balance.
- `Building` (in `clicker.building`) exposes `index`, `level`, `cost`, `gain`
  and `level_up()`.

The screen is made of `clicker.layers.MainLayer` holding the buttons from
`clicker.widgets` (`ClickButton`, `BuildingButton`, `CloseLayerButton`), all
drawn by `clicker.window.WindowManager`.

## What it does not do

Progress is not saved: money and building levels start from zero every time
the game is launched. There are no menus or other screens besides the play
screen.

## Running the tests

```
pip install .[test]
pytest
```