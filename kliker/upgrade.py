"""The upgrade that raises how much gold a click earns."""

from __future__ import annotations

import pygame

from .button import Button
from .gold import GOLD_COLOR, Gold, _load_font

PANEL_SIZE = (300, 150)
TEXT_COLOR = (0, 0, 0)


def _draw_panel(surface: pygame.Surface, rect: pygame.Rect, font: pygame.font.Font,
                name: str, cost_text: str) -> None:
    pygame.draw.rect(surface, GOLD_COLOR, rect)
    surface.blit(font.render(name, True, TEXT_COLOR), (rect.x + 10, rect.y + 10))
    surface.blit(font.render(cost_text, True, TEXT_COLOR), (rect.x + 10, rect.y + 100))


class Upgrade:
    """Buys a bigger click worth; each purchase doubles the cost."""

    name = "Upgrade"

    def __init__(self, gold: Gold, button: Button, rect) -> None:
        self.gold = gold
        self.button = button
        self.rect = pygame.Rect(rect)
        self.cost = 10
        self.increase_amount = 1
        self._font: pygame.font.Font | None = None

    @property
    def text(self) -> str:
        return f"Cost: {self.cost}"

    def handle_upgrade(self) -> bool:
        """Buy the upgrade if affordable; report whether it was bought."""
        if not self.gold.subtract(self.cost):
            return False
        self.button.click_worth += self.increase_amount
        self.increase_amount += 1
        self.cost *= 2
        return True

    def is_clicked(self, pos) -> bool:
        return bool(self.rect.collidepoint(pos))

    def draw(self, surface: pygame.Surface) -> None:
        if self._font is None:
            self._font = _load_font()
        _draw_panel(surface, self.rect, self._font, self.name, self.text)