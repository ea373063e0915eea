"""The clicker game window and its main loop."""

from __future__ import annotations

import argparse
import sys
from concurrent.futures import ThreadPoolExecutor

import pygame

from .autoclick import AutoClick
from .button import Button
from .gold import Gold
from .savesystem import SaveFormatError, SaveSystem
from .upgrade import PANEL_SIZE, Upgrade

WINDOW_SIZE = (1024, 1024)
TITLE = "Clicker Game"
BACKGROUND_FILE = "background.png"
BUTTON_FILE = "button.png"
DEFAULT_BUTTON_SIZE = (256, 256)
MARGIN = 10
FPS = 60


def _load_image(path: str, what: str) -> pygame.Surface | None:
    try:
        return pygame.image.load(path).convert_alpha()
    except (OSError, pygame.error):
        print(f"Failed to load {what} texture!", file=sys.stderr)
        return None


class Game:
    """Owns the window, the game objects and the event loop."""

    def __init__(self) -> None:
        pygame.init()
        self.window = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        width, height = self.window.get_size()

        background = _load_image(BACKGROUND_FILE, "background")
        self.background = (
            pygame.transform.scale(background, (width, height)) if background is not None else None
        )

        self.gold = Gold()

        image = _load_image(BUTTON_FILE, "button")
        image_w, image_h = image.get_size() if image is not None else DEFAULT_BUTTON_SIZE
        button_rect = pygame.Rect(
            width // 2 - image_w // 2, int(height / 1.6 - image_h // 2), image_w, image_h
        )
        self.button = Button(self.gold, button_rect)
        self.button.image = image

        panel_w, panel_h = PANEL_SIZE
        self.upgrade = Upgrade(
            self.gold, self.button, (MARGIN, height - panel_h - MARGIN, panel_w, panel_h)
        )
        self.autoclick = AutoClick(
            self.gold,
            (width - panel_w - MARGIN, height - panel_h - MARGIN, panel_w, panel_h),
        )
        self.save_system = SaveSystem(self.gold)

        self._clock = pygame.time.Clock()
        self._executor = ThreadPoolExecutor(max_workers=1)
        self._progress = self._executor.submit(self._load_progress)
        self.autoclick.start()

    def _load_progress(self) -> None:
        try:
            self.save_system.load_progress()
        except FileNotFoundError:
            print("Save file not found. Starting new game.", file=sys.stderr)
        except SaveFormatError:
            print("Invalid save file format. Starting new game.", file=sys.stderr)
        except OSError:
            print("Failed to open save file for reading!", file=sys.stderr)

    def _save(self) -> None:
        self._progress.result()
        try:
            self.save_system.save_progress()
        except OSError:
            print("Failed to open save file for writing!", file=sys.stderr)

    def _handle_click(self, pos) -> None:
        if self.button.is_clicked(pos):
            self.button.handle_click()
        if self.upgrade.is_clicked(pos):
            self.upgrade.handle_upgrade()
        if self.autoclick.is_clicked(pos):
            self.autoclick.handle_upgrade()

    def _draw(self) -> None:
        self.window.fill((0, 0, 0))
        if self.background is not None:
            self.window.blit(self.background, (0, 0))
        self.gold.draw(self.window)
        self.button.draw(self.window)
        self.upgrade.draw(self.window)
        self.autoclick.draw(self.window)
        pygame.display.flip()

    def run(self) -> None:
        """Process events until the window is closed, then save and shut down."""
        progress_loaded = False
        try:
            while True:
                closed = False
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self._save()
                        closed = True
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self._handle_click(event.pos)
                if closed:
                    break
                self._draw()
                if not progress_loaded and self._progress.done():
                    print("Game progress loaded!")
                    progress_loaded = True
                self._clock.tick(FPS)
        finally:
            self.autoclick.stop()
            self._executor.shutdown(wait=True)
            pygame.quit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="kliker", description="A simple clicker game.")
    parser.parse_args(argv)
    Game().run()
    return 0