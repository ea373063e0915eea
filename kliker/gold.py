"""The player's gold balance."""

from __future__ import annotations

import sys
import threading

import pygame

FONT_FILE = "arial.ttf"
FONT_SIZE = 24
GOLD_COLOR = (255, 255, 0)


def _load_font(size: int = FONT_SIZE) -> pygame.font.Font:
    """Load the game font, falling back to pygame's default font."""
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.Font(FONT_FILE, size)
    except (OSError, pygame.error):
        print("Failed to load font!", file=sys.stderr)
        return pygame.font.Font(None, size)


class Gold:
    """A thread-safe amount of gold with an on-screen label."""

    def __init__(self) -> None:
        self._amount = 0
        self._lock = threading.Lock()
        self._font: pygame.font.Font | None = None

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def text(self) -> str:
        return f"Gold: {self._amount}"

    def add(self, value: int) -> None:
        with self._lock:
            self._amount += value

    def subtract(self, value: int) -> bool:
        """Take ``value`` gold if there is enough; report whether it was taken."""
        with self._lock:
            if self._amount >= value:
                self._amount -= value
                return True
            return False

    def draw(self, surface: pygame.Surface) -> None:
        if self._font is None:
            self._font = _load_font()
        surface.blit(self._font.render(self.text, True, GOLD_COLOR), (0, 0))