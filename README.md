# kliker

A small clicker game. Click the big button to earn gold, then spend it:

- **Upgrade** (bottom left) raises how much gold each click is worth.
  It starts at a cost of 10 and the cost doubles with every purchase.
  Each purchase adds one more to the click value than the previous one did
  (+1, then +2, then +3, ...).
- **Auto Click** (bottom right) earns gold on its own in a background thread.
  It starts at level 1 with a cost of 100; every purchase raises the level by
  one and multiplies the cost by 1.5 (rounded down). At level *n* it pays
  `1 + n` gold every `11 - n` seconds. Level 10 is the last; from then on the
  panel shows "Max".

Your gold is saved to `save.txt` in the current directory when you close the
window, and added back in the background the next time you start the game.

## Installing

```
pip install .
```

The game needs a display. If `button.png`, `background.png` or `arial.ttf`
are in the current directory they are used for the click button, the
background and the text; otherwise a yellow ellipse, a black background and
pygame's default font take their place, and a message is printed to stderr.

## Playing

```
kliker
```

The window is 1024×1024 and runs at up to 60 frames per second. Left-click
the button or the panels; close the window to save and quit.

## Using the pieces

The game logic can be driven without a window:

```python
from kliker.gold import Gold
from kliker.button import Button
from kliker.upgrade import Upgrade

gold = Gold()
button = Button(gold, (0, 0, 100, 100))
upgrade = Upgrade(gold, button, (0, 200, 300, 150))

for _ in range(10):
    button.handle_click()
upgrade.handle_upgrade()  # True: spends 10 gold; each click is now worth 2
print(gold.amount, button.click_worth, upgrade.cost)  # 0 2 20
```

- `Gold` holds a thread-safe `amount`; `add(value)` adds to it and
  `subtract(value)` takes gold only if there is enough, returning whether it did.
- `Button`, `Upgrade` and `AutoClick` each take a rectangle and offer
  `is_clicked(pos)` and `draw(surface)`.
- `Upgrade.handle_upgrade()` and `AutoClick.handle_upgrade()` return whether
  the purchase went through.
- `AutoClick.start()` starts paying out and `AutoClick.stop()` stops and waits
  for the thread; an `AutoClick` can also be used as a context manager.
- `SaveSystem(gold, path=None)` writes the gold amount with `save_progress()`.
  `load_progress()` adds the saved amount to the gold and returns it (or
  `None` for an empty file); it raises `FileNotFoundError` when there is no
  save file and `kliker.savesystem.SaveFormatError` when the first line is not
  a non-negative integer that fits in 32 bits. Without a path, `save.txt` in
  the current directory is used.

## Running the tests

```
pip install ".[test]"
pytest
```