"""Game state, player data, characters, enemies and the boss."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Sequence

from castleshadows.joystick import Joystick

MAX_ENEMIES = 10
X_SCREEN = 800
Y_SCREEN = 600
CHARACTER_SIDE = Y_SCREEN // 3
GROUND = Y_SCREEN - (CHARACTER_SIDE // 2) - 60
SPEED = 50

ENEMY_TOP_LIMIT = 300.0
ENEMY_BOTTOM_LIMIT = 400.0
ENEMY_HORIZONTAL_RANGE = 100


class GameState(Enum):
    """Which screen the game is showing."""

    MENU = 0
    PLAY = 1
    QUIT = 2
    PAUSE = 3
    GAME_OVER = 4


@dataclass
class PlayerData:
    """Player state kept between the play screen and the pause screen."""

    pixels_walked: float = 0.0
    pos_x: int = 300
    pos_y: int = GROUND
    frame: int = 0
    direction: int = 1
    life: int = 100
    walking: bool = False
    background_x: float = 0.0
    vel_y: float = 0.0
    on_ground: bool = True
    jumping: bool = False
    crouching: bool = False
    jump_frame_counter: int = 0
    attacking: bool = False
    attack_frame_counter: int = 0

    def reset(self) -> None:
        """Put every field back to its starting value."""
        for f in fields(self):
            setattr(self, f.name, f.default)


@dataclass
class Character:
    """A square character centred on (x, y)."""

    x: int
    y: int
    side: int
    control: Joystick = field(default_factory=Joystick)

    @classmethod
    def create(cls, side: int, x: int, y: int, max_x: int, max_y: int) -> Character:
        """Create a character, refusing a position that leaves the field."""
        half = side // 2
        if x - half < 0 or x + half > max_x or y - half < 0 or y + half > max_y:
            raise ValueError(
                f"character of side {side} at ({x}, {y}) does not fit in {max_x}x{max_y}"
            )
        return cls(x=x, y=y, side=side)


@dataclass
class Boss:
    """The boss fought at the end of the map."""

    life: int = 500
    active: bool = True
    frame: int = 0
    frame_counter: int = 0
    destroyed: bool = False
    x: float = 400.0
    y: float = 100.0
    width: float = 0.0
    height: float = 0.0
    vel_x: float = 2.0
    shot_cooldown: float = 45.0


@dataclass
class Enemy:
    """A flying enemy wandering around its starting point."""

    x: float
    y: float
    vertical_direction: int = 1
    horizontal_direction: int = 1
    active: bool = False
    frame: int = 0
    frame_counter: int = 0
    destroyed: bool = False
    width: float = 80.0
    height: float = 80.0
    shot_cooldown: int = 2


def _random_direction(rng: random.Random) -> int:
    return 1 if rng.randrange(2) else -1


def init_enemies(rng: random.Random | None = None) -> list[Enemy]:
    """Create the level's enemies, spread out along the map."""
    rng = rng if rng is not None else random.Random()
    enemies = []
    for i in range(MAX_ENEMIES):
        y = 300 + rng.randrange(100)
        vertical = _random_direction(rng)
        horizontal = _random_direction(rng)
        enemies.append(
            Enemy(
                x=float(1500 + i * 800),
                y=float(y),
                vertical_direction=vertical,
                horizontal_direction=horizontal,
                width=80.0,
                height=80.0,
                shot_cooldown=2,
            )
        )
    return enemies


def update_enemies(
    enemies: Sequence[Enemy],
    frames_duration: int,
    frames_enemy: int,
    x_initial: Sequence[float],
    rng: random.Random | None = None,
) -> None:
    """Move every active enemy a random step and advance its animation."""
    rng = rng if rng is not None else random.Random()
    for enemy, start_x in zip(enemies, x_initial):
        if not enemy.active:
            continue

        left_limit = start_x - ENEMY_HORIZONTAL_RANGE
        right_limit = start_x + ENEMY_HORIZONTAL_RANGE

        if enemy.vertical_direction == 1:
            enemy.y += rng.randrange(2) + 1
            if enemy.y >= ENEMY_BOTTOM_LIMIT:
                enemy.vertical_direction = -1
        else:
            enemy.y -= rng.randrange(2) + 1
            if enemy.y <= ENEMY_TOP_LIMIT:
                enemy.vertical_direction = 1

        if enemy.horizontal_direction == 1:
            enemy.x += rng.randrange(2) + 1
            if enemy.x >= right_limit:
                enemy.horizontal_direction = -1
        else:
            enemy.x -= rng.randrange(2) + 1
            if enemy.x <= left_limit:
                enemy.horizontal_direction = 1

        enemy.frame_counter += 1
        if enemy.frame_counter >= frames_duration:
            enemy.frame_counter = 0
            enemy.frame = (enemy.frame + 1) % frames_enemy