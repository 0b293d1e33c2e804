"""Command-line entry point: opens the window and switches between screens."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pygame

from castleshadows.entities import X_SCREEN, Y_SCREEN, GameState, PlayerData, init_enemies
from castleshadows.screens import (
    TITLE,
    game_over_menu,
    load_sprites,
    main_menu,
    pause_menu,
    play,
)

FONT_PATH = Path("fonts") / "Cave-Stone.ttf"
BACKGROUND_PATH = Path("assets") / "background.png"
ASSETS_DIR = Path("assets")
TITLE_FONT_SIZE = 64
OPTION_FONT_SIZE = 40


def _run(root: Path) -> int:
    try:
        screen = pygame.display.set_mode((X_SCREEN, Y_SCREEN))
        title_font = pygame.font.Font(str(root / FONT_PATH), TITLE_FONT_SIZE)
        option_font = pygame.font.Font(str(root / FONT_PATH), OPTION_FONT_SIZE)
        background = pygame.image.load(str(root / BACKGROUND_PATH)).convert()
    except (OSError, pygame.error):
        print("Error starting the game or loading resources.")
        return -1

    pygame.display.set_caption(TITLE)
    state = GameState.MENU
    data = PlayerData()
    sprites = None

    while state is not GameState.QUIT:
        if state is GameState.MENU:
            state = main_menu(screen, title_font, option_font, background)
            data.reset()
        elif state is GameState.PLAY:
            if sprites is None:
                try:
                    sprites = load_sprites(root / ASSETS_DIR)
                except (FileNotFoundError, pygame.error) as exc:
                    print(exc)
                    state = GameState.QUIT
                    continue
            state = play(screen, background, data, init_enemies(), sprites)
        elif state is GameState.PAUSE:
            state = pause_menu(screen, title_font, option_font, background)
        elif state is GameState.GAME_OVER:
            state = game_over_menu(screen, title_font, option_font, data)
    return 0


def main(argv=None) -> int:
    """Start the game; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="castleshadows", description=TITLE)
    parser.add_argument(
        "--root", default=".", help="directory holding the fonts/ and assets/ folders"
    )
    args = parser.parse_args(argv)
    pygame.init()
    try:
        return _run(Path(args.root))
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())