"""Projectiles fired by the player, the enemies and the boss, and their hit tests."""

from __future__ import annotations

import math
from dataclasses import dataclass

from castleshadows.entities import X_SCREEN, Y_SCREEN, Boss, Enemy

MAX_SHOTS = 10
PLAYER_SHOT_SPEED = 10.0
ENEMY_SHOT_SPEED = 9.0
BOSS_SHOT_VERTICAL_SPEED = 9
BOSS_SHOT_TILT = 90.0


@dataclass
class Shot:
    """A projectile; position and velocity are whole pixels."""

    x: int = 0
    y: int = 0
    vel_x: int = 0
    vel_y: int = 0
    frame: int = 0
    frame_counter: int = 0
    direction: int = 0
    active: bool = True


def _aimed_velocity(dx: float, dy: float, speed: float) -> tuple[int, int]:
    dist = math.sqrt(dx * dx + dy * dy) or 1.0
    return int(dx / dist * speed), int(dy / dist * speed)


def fire_player_shot(
    shots: list[Shot], x: int, y: int, direction: int, mouse_x: float, mouse_y: float
) -> Shot | None:
    """Fire a shot from (x, y) towards the mouse; nothing if the list is full."""
    if len(shots) >= MAX_SHOTS:
        return None
    vel_x, vel_y = _aimed_velocity(mouse_x - x, mouse_y - y, PLAYER_SHOT_SPEED)
    shot = Shot(x=int(x), y=int(y), vel_x=vel_x, vel_y=vel_y, direction=direction, active=True)
    shots.append(shot)
    return shot


def fire_enemy_shot(
    shots: list[Shot], max_shots: int, player_x: float, player_y: float, enemy: Enemy
) -> Shot | None:
    """Fire a shot from an enemy aimed below the player; nothing if full."""
    if len(shots) >= max_shots:
        return None
    dx = player_x - enemy.x
    dy = player_y + 250 - enemy.y
    vel_x, vel_y = _aimed_velocity(dx, dy, ENEMY_SHOT_SPEED)
    shot = Shot(x=int(enemy.x), y=int(enemy.y), vel_x=vel_x, vel_y=vel_y, active=True)
    shots.append(shot)
    return shot


def fire_boss_shot(
    shots: list[Shot], max_shots: int, player_x: float, player_y: float, boss: Boss
) -> Shot | None:
    """Drop a shot from the boss's underside, drifting towards the player."""
    if len(shots) >= max_shots:
        return None
    origin_x = boss.x + boss.width / 2
    origin_y = boss.y + boss.height
    dx = player_x - origin_x
    shot = Shot(
        x=int(origin_x),
        y=int(origin_y),
        vel_x=int(dx / BOSS_SHOT_TILT),
        vel_y=BOSS_SHOT_VERTICAL_SPEED,
        active=True,
    )
    shots.append(shot)
    return shot


def advance_shots(shots: list[Shot]) -> None:
    """Move active shots; drop inactive ones and those that leave the screen.

    A dropped shot is replaced by the last one in the list.
    """
    i = 0
    while i < len(shots):
        shot = shots[i]
        if not shot.active:
            shots[i] = shots[-1]
            shots.pop()
            continue
        shot.x += shot.vel_x
        shot.y += shot.vel_y
        if shot.x < 0 or shot.x > X_SCREEN or shot.y < 0 or shot.y > Y_SCREEN:
            shot.active = False
            continue
        i += 1


def _overlaps(
    a_left: float, a_right: float, a_top: float, a_bottom: float,
    b_left: float, b_right: float, b_top: float, b_bottom: float,
) -> bool:
    return a_right > b_left and a_left < b_right and a_bottom > b_top and a_top < b_bottom


def player_shot_hits_enemy(
    shot: Shot, enemy: Enemy, background_x: float, pixels_walked: float, player_x: float
) -> bool:
    """Whether a player's shot touches an enemy drawn at its screen position."""
    if not shot.active or not enemy.active:
        return False
    enemy_x = enemy.x - (background_x + pixels_walked) + player_x
    enemy_y = enemy.y
    return _overlaps(
        shot.x - 16, shot.x + 16, shot.y - 16, shot.y + 16,
        enemy_x, enemy_x + enemy.width, enemy_y, enemy_y + enemy.height,
    )


def enemy_shot_hits_player(
    shot: Shot,
    player_x: float,
    player_y: float,
    player_width: float,
    player_height: float,
    background_x: float,
    pixels_walked: float,
    crouching: bool,
) -> bool:
    """Whether an enemy's shot touches the player; crouching lowers the hitbox."""
    if not shot.active:
        return False
    if crouching:
        player_y += 30
        player_height -= 30
    shot_x = shot.x - (background_x + pixels_walked) + player_x
    shot_y = shot.y
    return _overlaps(
        shot_x - 16, shot_x + 16, shot_y - 16, shot_y + 16,
        player_x - player_width / 4 - 5,
        player_x + player_width / 4 - 5,
        player_y + 10,
        player_y + player_height,
    )


def boss_shot_hits_player(
    shot: Shot,
    player_x: float,
    player_y: float,
    player_width: float,
    player_height: float,
    crouching: bool,
) -> bool:
    """Whether a boss shot touches the player; crouching lowers the hitbox."""
    if not shot.active:
        return False
    top = player_y
    height = player_height
    if crouching:
        top += 30
        height -= 30
    return _overlaps(
        shot.x - 10, shot.x + 16, shot.y - 16, shot.y + 16,
        player_x, player_x + player_width, top, top + height,
    )


def player_shot_hits_boss(shot: Shot, boss: Boss) -> bool:
    """Whether a player's shot touches the boss's inner hitbox."""
    if not shot.active or not boss.active:
        return False
    return _overlaps(
        shot.x - 12, shot.x + 12, shot.y - 12, shot.y + 12,
        boss.x + 10, boss.x + boss.width - 10, boss.y + 40, boss.y + boss.height - 40,
    )