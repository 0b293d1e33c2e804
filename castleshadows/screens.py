"""Menu screens and the playing screen."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import pygame

from castleshadows.entities import (
    CHARACTER_SIDE,
    X_SCREEN,
    Y_SCREEN,
    Enemy,
    GameState,
    PlayerData,
)
from castleshadows.helpers import Align, draw_outlined_text
from castleshadows.level import (
    FRAMES_ATTACK,
    FRAMES_BOSS,
    FRAMES_BOSS_SHOT,
    FRAMES_CROUCH,
    FRAMES_ENEMY,
    FRAMES_ENEMY_SHOT,
    FRAMES_JUMP,
    FRAMES_WALK,
    Key,
    Level,
    Pose,
)

FPS = 45
TITLE = "Castle of Shadows"
GAME_OVER_TITLE = "GAME OVER"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
BAR_BACKGROUND = (50, 50, 50)

TITLE_POSITION = (400, 220)
OPTION_X = 400
OPTION_ROWS = (300, 360)
SHOT_SIZE = 32
BAR_RECT = (20, 20, 200, 20)


@dataclass
class Menu:
    """A vertical list of labelled choices with one selected."""

    options: tuple[tuple[str, GameState], ...]
    selected: int = 0

    def __post_init__(self) -> None:
        if not self.options:
            raise ValueError("a menu needs at least one option")
        self.options = tuple(self.options)

    def move_up(self) -> None:
        """Select the previous option, wrapping to the last."""
        self.selected = (self.selected - 1) % len(self.options)

    def move_down(self) -> None:
        """Select the next option, wrapping to the first."""
        self.selected = (self.selected + 1) % len(self.options)

    def choice(self) -> GameState:
        """The state the selected option leads to."""
        return self.options[self.selected][1]


@dataclass
class Sprites:
    """Every image the playing screen draws."""

    player_shot: pygame.Surface
    enemy_shot: list[pygame.Surface]
    walk: list[pygame.Surface]
    jump: list[pygame.Surface]
    crouch: list[pygame.Surface]
    attack: list[pygame.Surface]
    jump_attack: list[pygame.Surface]
    enemy: list[pygame.Surface]
    boss: list[pygame.Surface]
    boss_shot: list[pygame.Surface]


_SPRITE_SETS = {
    "enemy_shot": ("projetil_inimigo/frame{}.png", FRAMES_ENEMY_SHOT),
    "walk": ("andando/frame{}.png", FRAMES_WALK),
    "jump": ("pulando/Jump{}.png", FRAMES_JUMP),
    "crouch": ("agachando/frame{}.png", FRAMES_CROUCH),
    "attack": ("ataque_normal/frame{}.png", FRAMES_ATTACK),
    "jump_attack": ("ataque_pulando/Jump_attack{}.png", FRAMES_JUMP),
    "enemy": ("inimigos/flying-eye-demon{}.png", FRAMES_ENEMY),
    "boss": ("boss/dragao{}.png", FRAMES_BOSS),
    "boss_shot": ("projetil_boss/charged{}.png", FRAMES_BOSS_SHOT),
}


def load_sprites(assets_dir) -> Sprites:
    """Load every animation frame from the assets directory.

    Raises FileNotFoundError naming the first image that is missing.
    """
    root = Path(assets_dir)

    def load(relative: str) -> pygame.Surface:
        path = root / relative
        if not path.is_file():
            raise FileNotFoundError(f"Error loading {path}")
        image = pygame.image.load(str(path))
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    player_shot = load("projetil/hit1.png")
    frames = {
        name: [load(pattern.format(i)) for i in range(1, count + 1)]
        for name, (pattern, count) in _SPRITE_SETS.items()
    }
    return Sprites(player_shot=player_shot, **frames)


def _run_menu(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    option_font: pygame.font.Font,
    title: str,
    title_color: tuple[int, int, int],
    menu: Menu,
    background: pygame.Surface | None,
    close_quits: bool = True,
) -> GameState:
    scaled = pygame.transform.scale(background, (X_SCREEN, Y_SCREEN)) if background else None
    while True:
        screen.fill(BLACK)
        if scaled is not None:
            screen.blit(scaled, (0, 0))
        draw_outlined_text(
            screen, title_font, *TITLE_POSITION, Align.CENTER, title, title_color, BLACK
        )
        for index, ((label, _), row) in enumerate(zip(menu.options, OPTION_ROWS)):
            color = YELLOW if index == menu.selected else WHITE
            draw_outlined_text(screen, option_font, OPTION_X, row, Align.CENTER, label, color, BLACK)
        pygame.display.flip()

        event = pygame.event.wait()
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_w:
                menu.move_up()
            elif event.key == pygame.K_s:
                menu.move_down()
            elif event.key == pygame.K_RETURN:
                return menu.choice()
        elif event.type == pygame.QUIT and close_quits:
            return GameState.QUIT


def main_menu(screen, title_font, option_font, background) -> GameState:
    """Show the title menu; returns PLAY or QUIT."""
    menu = Menu((("Play", GameState.PLAY), ("Quit", GameState.QUIT)))
    return _run_menu(screen, title_font, option_font, TITLE, WHITE, menu, background)


def pause_menu(screen, title_font, option_font, background) -> GameState:
    """Show the pause menu; returns PLAY, MENU or QUIT."""
    menu = Menu((("Return to game", GameState.PLAY), ("Back to menu", GameState.MENU)))
    return _run_menu(screen, title_font, option_font, TITLE, WHITE, menu, background)


def game_over_menu(screen, title_font, option_font, data: PlayerData) -> GameState:
    """Show the game-over menu; playing again resets the player data."""
    menu = Menu((("Play again", GameState.PLAY), ("Quit", GameState.QUIT)))
    state = _run_menu(
        screen, title_font, option_font, GAME_OVER_TITLE, RED, menu, None, close_quits=False
    )
    if state is GameState.PLAY:
        data.reset()
    return state


def _pose_frames(sprites: Sprites, pose: Pose) -> list[pygame.Surface]:
    return {
        Pose.WALK: sprites.walk,
        Pose.JUMP: sprites.jump,
        Pose.JUMP_ATTACK: sprites.jump_attack,
        Pose.CROUCH: sprites.crouch,
        Pose.ATTACK: sprites.attack,
    }[pose]


class _PlayView:
    """Draws a level onto the screen."""

    def __init__(self, screen: pygame.Surface, background: pygame.Surface, sprites: Sprites):
        self.screen = screen
        self.background_width = background.get_width()
        self.background = pygame.transform.scale(background, (self.background_width, Y_SCREEN))
        side = (CHARACTER_SIDE, CHARACTER_SIDE)
        self.player = {
            pose: [pygame.transform.scale(frame, side) for frame in _pose_frames(sprites, pose)]
            for pose in Pose
        }
        self.player_flipped = {
            pose: [pygame.transform.flip(frame, True, False) for frame in frames]
            for pose, frames in self.player.items()
        }
        shot_size = (SHOT_SIZE, SHOT_SIZE)
        self.player_shot = pygame.transform.scale(sprites.player_shot, shot_size)
        self.enemy_shot = [pygame.transform.scale(f, shot_size) for f in sprites.enemy_shot]
        self.enemy = sprites.enemy
        self.boss = sprites.boss
        self.boss_flipped = [pygame.transform.flip(f, True, False) for f in sprites.boss]
        self.boss_shot = sprites.boss_shot

    def draw(self, level: Level) -> None:
        screen = self.screen
        screen.fill(BLACK)
        offset = int(level.background_x)
        width = self.background_width
        screen.blit(self.background, (0, 0), pygame.Rect(offset, 0, width - offset, Y_SCREEN))
        screen.blit(self.background, (width - offset, 0), pygame.Rect(0, 0, offset, Y_SCREEN))

        frames = self.player if level.direction != 0 else self.player_flipped
        half = CHARACTER_SIDE // 2
        screen.blit(
            frames[level.pose][level.sprite_frame], (level.pos_x - half, level.pos_y - half)
        )

        for shot in level.player_shots:
            screen.blit(self.player_shot, (shot.x, shot.y))

        self._draw_life_bar(level.life)
        self._draw_enemies(level)
        for shot in level.enemy_shots:
            screen.blit(self.enemy_shot[shot.frame], (level.to_screen_x(shot.x), shot.y))

        boss = level.boss
        if level.boss_battle and boss.active and not boss.destroyed:
            frames = self.boss_flipped if boss.vel_x < 0 else self.boss
            screen.blit(frames[boss.frame], (boss.x, boss.y))
            for shot in level.boss_shots:
                angle = math.degrees(math.atan2(shot.vel_y, shot.vel_x))
                image = pygame.transform.rotate(self.boss_shot[shot.frame], -angle)
                screen.blit(image, image.get_rect(center=(shot.x, shot.y)))

    def _draw_life_bar(self, life: int) -> None:
        x, y, width, height = BAR_RECT
        proportion = max(life / 100.0, 0.0)
        pygame.draw.rect(self.screen, BAR_BACKGROUND, BAR_RECT)
        pygame.draw.rect(self.screen, RED, (x, y, int(width * proportion), height))
        pygame.draw.rect(self.screen, WHITE, BAR_RECT, 2)

    def _draw_enemies(self, level: Level) -> None:
        for enemy in level.enemies:
            if not enemy.active or enemy.destroyed:
                continue
            image = pygame.transform.scale(
                self.enemy[enemy.frame], (int(enemy.width), int(enemy.height))
            )
            image = pygame.transform.flip(image, True, False)
            self.screen.blit(image, (level.to_screen_x(enemy.x), enemy.y))


_KEYS = {
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_h: Key.H,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def play(
    screen: pygame.Surface,
    background: pygame.Surface,
    data: PlayerData,
    enemies: Sequence[Enemy],
    sprites: Sprites,
) -> GameState:
    """Run the playing screen until the player pauses, dies or closes the window."""
    level = Level(data, enemies, background.get_width(), sprites.boss[0].get_size())
    sizes = {pose: _pose_frames(sprites, pose)[0].get_size() for pose in Pose}
    view = _PlayView(screen, background, sprites)
    clock = pygame.time.Clock()

    while True:
        clock.tick(FPS)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return GameState.QUIT
            if event.type == pygame.KEYDOWN and event.key in _KEYS:
                outcome = level.key_down(_KEYS[event.key])
                if outcome is GameState.PAUSE:
                    level.save()
                    return outcome
                if outcome is not None:
                    return outcome
            elif event.type == pygame.KEYUP and event.key in _KEYS:
                level.key_up(_KEYS[event.key])
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                level.mouse_down(event.button, x, y)

        if level.tick(sizes) is GameState.GAME_OVER:
            return GameState.GAME_OVER
        view.draw(level)
        pygame.display.flip()