"""The main button that earns gold on every click."""

from __future__ import annotations

import pygame

from .gold import GOLD_COLOR, Gold


class Button:
    """A clickable area that adds ``click_worth`` gold per click."""

    def __init__(self, gold: Gold, rect) -> None:
        self.gold = gold
        self.rect = pygame.Rect(rect)
        self.click_worth = 1
        self.image: pygame.Surface | None = None

    def handle_click(self) -> None:
        self.gold.add(self.click_worth)

    def is_clicked(self, pos) -> bool:
        return bool(self.rect.collidepoint(pos))

    def draw(self, surface: pygame.Surface) -> None:
        if self.image is not None:
            surface.blit(self.image, self.rect.topleft)
        else:
            pygame.draw.ellipse(surface, GOLD_COLOR, self.rect)