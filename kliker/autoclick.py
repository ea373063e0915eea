"""An upgradable generator that adds gold on its own."""

from __future__ import annotations

import threading

import pygame

from .gold import Gold, _load_font
from .upgrade import _draw_panel

MAX_LEVEL = 10


class AutoClick:
    """Adds ``1 + level`` gold every ``11 - level`` ticks in a background thread."""

    name = "Auto Click"
    seconds_per_tick = 1.0

    def __init__(self, gold: Gold, rect) -> None:
        self.gold = gold
        self.rect = pygame.Rect(rect)
        self.level = 1
        self.cost = 100
        self.max_level_reached = False
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None
        self._font: pygame.font.Font | None = None

    @property
    def text(self) -> str:
        return "Max" if self.max_level_reached else f"Cost: {self.cost}"

    @property
    def interval(self) -> float:
        """Seconds between two payouts at the current level."""
        return (MAX_LEVEL + 1 - self.level) * self.seconds_per_tick

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("auto click is already running")
        self._thread = threading.Thread(target=self._run, name="autoclick", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop paying out and wait for the background thread to finish."""
        self._stopped.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def _run(self) -> None:
        while self.level <= MAX_LEVEL and not self._stopped.wait(self.interval):
            self.gold.add(1 + self.level)

    def handle_upgrade(self) -> bool:
        """Buy the next level if affordable; report whether it was bought."""
        if self.max_level_reached or not self.gold.subtract(self.cost):
            return False
        self.level += 1
        if self.level >= MAX_LEVEL:
            self.max_level_reached = True
        self.cost = int(self.cost * 1.5)
        return True

    def is_clicked(self, pos) -> bool:
        return bool(self.rect.collidepoint(pos))

    def draw(self, surface: pygame.Surface) -> None:
        if self._font is None:
            self._font = _load_font()
        _draw_panel(surface, self.rect, self._font, self.name, self.text)

    def __enter__(self) -> AutoClick:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()