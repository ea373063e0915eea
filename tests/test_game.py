import pygame
import pytest

from kliker.game import Game, main


@pytest.fixture
def game_env(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def quit_game(game):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.run()


def test_layout_places_panels_in_bottom_corners(game_env):
    game = Game()
    try:
        width, height = game.window.get_size()
        assert game.upgrade.rect.left == 10
        assert game.upgrade.rect.bottom == height - 10
        assert game.autoclick.rect.right == width - 10
        assert game.autoclick.rect.bottom == height - 10
        assert game.button.rect.centerx == width // 2
    finally:
        quit_game(game)


def test_close_saves_gold(game_env):
    game = Game()
    quit_game(game)
    assert (game_env / "save.txt").read_text() == str(game.gold.amount)


def test_saved_progress_is_loaded_and_kept(game_env):
    (game_env / "save.txt").write_text("42")
    game = Game()
    quit_game(game)
    assert game.gold.amount >= 42
    assert (game_env / "save.txt").read_text() == str(game.gold.amount)


def test_click_on_button_earns_gold(game_env):
    game = Game()
    centre = game.button.rect.center
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=centre, button=1))
    quit_game(game)
    assert game.gold.amount >= 1
    assert (game_env / "save.txt").read_text() == str(game.gold.amount)


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--no-such-option"])