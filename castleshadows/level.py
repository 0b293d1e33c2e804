"""Rules of the playing screen: movement, jumping, shooting, enemies and the boss."""

from __future__ import annotations

import random
from enum import Enum
from typing import Callable, Mapping, Sequence

from castleshadows.entities import (
    GROUND,
    MAX_ENEMIES,
    X_SCREEN,
    Y_SCREEN,
    Boss,
    Enemy,
    GameState,
    PlayerData,
    update_enemies,
)
from castleshadows.shots import (
    MAX_SHOTS,
    Shot,
    boss_shot_hits_player,
    enemy_shot_hits_player,
    fire_boss_shot,
    fire_enemy_shot,
    fire_player_shot,
    player_shot_hits_boss,
    player_shot_hits_enemy,
)

MAP_LIMIT = X_SCREEN * 12
SCROLL_ANCHOR = 300
BACKGROUND_SPEED = 32.0
GRAVITY = 0.3
JUMP_FORCE = -6.0
FRAME_TIME = 1.0 / 45.0
DAMAGE = 10

FRAMES_BOSS = 9
FRAMES_ENEMY = 8
FRAMES_WALK = 12
FRAMES_JUMP = 4
FRAMES_CROUCH = 2
FRAMES_ATTACK = 2
FRAMES_BOSS_SHOT = 6
FRAMES_ENEMY_SHOT = 2

DURATION_ENEMY = 10
DURATION_WALK = 7
DURATION_JUMP = 21
DURATION_CROUCH = 15
DURATION_ATTACK = 7
DURATION_SHOT = 5
DURATION_BOSS = 5

ENEMY_SHOT_COOLDOWN = 40
BOSS_SHOT_COOLDOWN = 45
ACTIVATION_MARGIN = 500
SHOT_MARGIN = 50
BOSS_LEFT_LIMIT = 50.0
BOSS_RIGHT_LIMIT = X_SCREEN - 50.0


class Key(Enum):
    """Keys the playing screen reacts to."""

    A = "a"
    D = "d"
    W = "w"
    S = "s"
    H = "h"
    ESCAPE = "escape"


class Pose(Enum):
    """Which animation the player is drawn with."""

    WALK = "walk"
    JUMP = "jump"
    JUMP_ATTACK = "jump_attack"
    CROUCH = "crouch"
    ATTACK = "attack"


POSE_FRAMES = {
    Pose.WALK: FRAMES_WALK,
    Pose.JUMP: FRAMES_JUMP,
    Pose.JUMP_ATTACK: FRAMES_JUMP,
    Pose.CROUCH: FRAMES_CROUCH,
    Pose.ATTACK: FRAMES_ATTACK,
}


class Level:
    """One session of the playing screen, advanced one timer tick at a time."""

    def __init__(
        self,
        data: PlayerData,
        enemies: Sequence[Enemy],
        background_width: int,
        boss_size: tuple[float, float],
        rng: random.Random | None = None,
    ) -> None:
        self.data = data
        self.enemies = list(enemies)
        self.background_width = background_width
        self.rng = rng if rng is not None else random.Random()

        self.pixels_walked = data.pixels_walked
        self.pos_x = data.pos_x
        self.pos_y = data.pos_y
        self.frame = data.frame
        self.direction = data.direction
        self.walking = data.walking
        self.background_x = data.background_x
        self.vel_y = data.vel_y
        self.on_ground = data.on_ground
        self.jumping = data.jumping
        self.crouching = False
        self.attacking = False
        self.life = data.life
        self._ground_y = data.pos_y

        self.walk_counter = 0
        self.jump_counter = data.jump_frame_counter
        self.crouch_counter = 0
        self.attack_counter = 0

        width, height = boss_size
        self.boss_battle = False
        self.boss = Boss(width=float(width), height=float(height))

        self.player_shots: list[Shot] = []
        self.enemy_shots: list[Shot] = []
        self.boss_shots: list[Shot] = []

    @property
    def pose(self) -> Pose:
        """The animation matching the player's current state."""
        if self.jumping and self.attacking:
            return Pose.JUMP_ATTACK
        if self.jumping:
            return Pose.JUMP
        if self.crouching:
            return Pose.CROUCH
        if self.attacking:
            return Pose.ATTACK
        return Pose.WALK

    @property
    def sprite_frame(self) -> int:
        """Index of the frame to draw within the current pose."""
        return self.frame % POSE_FRAMES[self.pose]

    def to_screen_x(self, world_x: float) -> float:
        """Horizontal screen position of a point given in map coordinates."""
        return world_x - (self.background_x + self.pixels_walked) + self.pos_x

    def key_down(self, key: Key) -> GameState | None:
        """React to a key press; returns the next state when play stops."""
        if key is Key.D:
            self.walking = True
            self.direction = 1
        elif key is Key.A:
            self.walking = True
            self.direction = 0
        elif key is Key.ESCAPE:
            return GameState.PAUSE
        elif key is Key.W and self.on_ground:
            self.vel_y = JUMP_FORCE
            self.on_ground = False
            self.jumping = True
            self.jump_counter = 0
            self.frame = 0
        elif key is Key.S and self.on_ground:
            self.crouching = True
            self.frame = 0
            self.crouch_counter = 0
        elif key is Key.H:
            self.data.life = max(self.data.life - DAMAGE, 0)
            if self.data.life == 0:
                return GameState.GAME_OVER
        return None

    def key_up(self, key: Key) -> None:
        """React to a key release."""
        if (key is Key.D and self.direction == 1) or (key is Key.A and self.direction == 0):
            self.walking = False
        elif key is Key.S:
            self.crouching = False
            self.frame = 0

    def mouse_down(self, button: int, x: float, y: float) -> None:
        """Attack towards the mouse when clicking in front of the player."""
        in_front = (self.direction == 1 and x >= self.pos_x) or (
            self.direction == 0 and x <= self.pos_x
        )
        if not in_front or button != 1:
            return
        self.attacking = True
        self.frame = 0
        self.attack_counter = 0
        fire_player_shot(self.player_shots, self.pos_x, self.pos_y, self.direction, x, y)

    def tick(
        self, sprite_size: tuple[int, int] | Mapping[Pose, tuple[int, int]]
    ) -> GameState | None:
        """Advance one timer tick; returns GAME_OVER when the session ends.

        ``sprite_size`` is the (width, height) of the player's sprite, either
        one pair for every pose or a mapping from pose to pair.
        """
        self._move()
        self._animate_attack()
        self._apply_gravity()
        self._animate_crouch()

        if isinstance(sprite_size, Mapping):
            width, height = sprite_size[self.pose]
        else:
            width, height = sprite_size

        self._advance_player_shots()
        x_initial = self._update_enemy_activity()
        self._advance_enemy_shots()
        update_enemies(self.enemies, DURATION_ENEMY, FRAMES_ENEMY, x_initial, self.rng)
        self._hit_enemies()

        def hit_by_enemy(shot: Shot) -> bool:
            return enemy_shot_hits_player(
                shot, self.pos_x, self.pos_y, width, height,
                self.background_x, self.pixels_walked, self.crouching,
            )

        if self._take_hits(self.enemy_shots, hit_by_enemy):
            return GameState.GAME_OVER

        if self.boss_battle and self.boss.active and not self.boss.destroyed:
            self._update_boss()
            self._advance_boss_shots()

            def hit_by_boss(shot: Shot) -> bool:
                return boss_shot_hits_player(
                    shot, self.pos_x, self.pos_y, width, height, self.crouching
                )

            if self._take_hits(self.boss_shots, hit_by_boss):
                return GameState.GAME_OVER
            if self._hit_boss():
                return GameState.GAME_OVER
        return None

    def save(self) -> None:
        """Store the state the pause screen must keep into the player data."""
        data = self.data
        data.walking = self.walking
        data.direction = self.direction
        data.frame = self.frame
        data.background_x = self.background_x
        data.pos_x = self.pos_x
        if self.on_ground:
            data.pos_y = self.pos_y
        data.vel_y = self.vel_y
        data.on_ground = self.on_ground
        data.jumping = self.jumping
        data.jump_frame_counter = self.jump_counter
        data.crouching = self.crouching
        data.attacking = self.attacking
        data.attack_frame_counter = self.attack_counter

    def _move(self) -> None:
        if not self.walking:
            if not self.jumping and not self.crouching and not self.attacking:
                self.frame = 0
            return

        speed = BACKGROUND_SPEED / 2.0 if self.crouching else BACKGROUND_SPEED
        if self.boss_battle:
            self._move_in_boss_battle(speed)
        elif self.direction == 1:
            self._move_right(speed)
        elif self.direction == 0:
            self._move_left(speed)

        if not self.attacking:
            self.walk_counter += 1
            if self.walk_counter >= DURATION_WALK:
                self.walk_counter = 0
                self.frame = (self.frame + 1) % FRAMES_WALK

    def _move_right(self, speed: float) -> None:
        if self.pos_x < SCROLL_ANCHOR:
            self.pos_x = min(int(self.pos_x + speed), SCROLL_ANCHOR)
            return
        total = self.pixels_walked + self.background_x
        if total + speed <= MAP_LIMIT:
            self.background_x += speed
            if self.background_x >= self.background_width:
                self.pixels_walked += self.background_width
                self.background_x -= self.background_width
        else:
            self.boss_battle = True
            self.boss.active = True
            self.boss.life = 500
            self.boss.destroyed = False

    def _move_left(self, speed: float) -> None:
        if self.pos_x > SCROLL_ANCHOR:
            self.pos_x = max(int(self.pos_x - speed), SCROLL_ANCHOR)
            return
        total = self.pixels_walked + self.background_x
        if total - speed >= 0:
            self.background_x -= speed
            if self.background_x < 0:
                self.pixels_walked -= self.background_width
                self.background_x += self.background_width
        elif self.pos_x > 20:
            self.pos_x = max(int(self.pos_x - speed), 0)
        else:
            self.walking = False

    def _move_in_boss_battle(self, speed: float) -> None:
        if self.direction == 1:
            if self.pos_x < X_SCREEN - 100:
                self.pos_x = int(self.pos_x + speed)
        elif self.direction == 0:
            if self.pos_x > 100:
                self.pos_x = int(self.pos_x - speed)
        if self.pixels_walked + self.pos_x >= MAP_LIMIT:
            self.background_x = 0.0
            self.pixels_walked = MAP_LIMIT - self.pos_x

    def _animate_attack(self) -> None:
        if not self.attacking:
            return
        self.attack_counter += 1
        if self.attack_counter < DURATION_ATTACK:
            return
        self.attack_counter = 0
        self.frame += 1
        limit = FRAMES_JUMP if self.jumping else FRAMES_ATTACK
        if self.frame >= limit:
            self.attacking = False
            self.frame = 0

    def _apply_gravity(self) -> None:
        if not self.jumping or self.on_ground:
            return
        self.vel_y += GRAVITY
        self.pos_y = int(self.pos_y + self.vel_y)
        self.jump_counter += 1
        if self.jump_counter >= DURATION_JUMP:
            self.jump_counter = 0
            self.frame = (self.frame + 1) % FRAMES_JUMP
        if self.pos_y >= self._ground_y:
            self.pos_y = self._ground_y
            self.vel_y = 0.0
            self.on_ground = True
            self.jumping = False
            self.frame = 0

    def _animate_crouch(self) -> None:
        if not self.crouching:
            return
        self.crouch_counter += 1
        if self.crouch_counter >= DURATION_CROUCH:
            self.crouch_counter = 0
            self.frame = (self.frame + 1) % FRAMES_CROUCH

    def _advance_player_shots(self) -> None:
        kept = []
        for shot in self.player_shots:
            shot.x += shot.vel_x
            shot.y += shot.vel_y
            off_screen = shot.x < 0 or shot.x > X_SCREEN or shot.y < 0 or shot.y > Y_SCREEN
            behind = (self.direction == 1 and shot.x < self.pos_x) or (
                self.direction == 0 and shot.x > self.pos_x
            )
            if not (off_screen or behind):
                kept.append(shot)
        self.player_shots[:] = kept

    def _update_enemy_activity(self) -> list[int]:
        x_initial = [int(enemy.x) for enemy in self.enemies]
        activation = self.pos_x + ACTIVATION_MARGIN
        deactivation = self.pos_x - ACTIVATION_MARGIN
        for enemy, start_x in zip(self.enemies, x_initial):
            if enemy.destroyed:
                continue
            screen_x = self.to_screen_x(start_x)
            if not enemy.active and screen_x > activation:
                enemy.active = True
                enemy.shot_cooldown = ENEMY_SHOT_COOLDOWN
            if enemy.active and screen_x < deactivation:
                enemy.active = False
            if enemy.active:
                enemy.shot_cooldown = int(enemy.shot_cooldown - FRAME_TIME)
                if enemy.shot_cooldown <= 0:
                    fire_enemy_shot(self.enemy_shots, MAX_SHOTS, self.pos_x, self.pos_y, enemy)
                    enemy.shot_cooldown = ENEMY_SHOT_COOLDOWN
        return x_initial

    def _advance_enemy_shots(self) -> None:
        kept = []
        for shot in self.enemy_shots:
            shot.x += shot.vel_x
            shot.y += shot.vel_y
            screen_x = self.to_screen_x(shot.x)
            if (
                screen_x < -SHOT_MARGIN
                or screen_x > X_SCREEN + SHOT_MARGIN
                or shot.y < -SHOT_MARGIN
                or shot.y > GROUND + 100
            ):
                continue
            shot.frame_counter += 1
            if shot.frame_counter >= DURATION_SHOT:
                shot.frame_counter = 0
                shot.frame = (shot.frame + 1) % FRAMES_ENEMY_SHOT
            kept.append(shot)
        self.enemy_shots[:] = kept

    def _hit_enemies(self) -> None:
        for shot in self.player_shots:
            for enemy in self.enemies:
                if not enemy.active or enemy.destroyed:
                    continue
                if player_shot_hits_enemy(
                    shot, enemy, self.background_x, self.pixels_walked, self.pos_x
                ):
                    enemy.active = False
                    enemy.destroyed = True
                    shot.active = False
                    break
        self.player_shots[:] = [shot for shot in self.player_shots if shot.active]

    def _take_hits(self, shots: list[Shot], hits: Callable[[Shot], bool]) -> bool:
        """Apply damage from shots touching the player; True when the player dies."""
        for shot in shots:
            if hits(shot):
                shot.active = False
                self.life -= DAMAGE
                if self.life <= 0:
                    return True
        shots[:] = [shot for shot in shots if shot.active]
        return False

    def _update_boss(self) -> None:
        boss = self.boss
        boss.x -= boss.vel_x
        if boss.x <= BOSS_LEFT_LIMIT or boss.x + boss.width >= BOSS_RIGHT_LIMIT:
            boss.vel_x = -boss.vel_x
        boss.frame_counter += 1
        if boss.frame_counter >= DURATION_BOSS:
            boss.frame += 1
            boss.frame_counter = 0
        if boss.frame >= FRAMES_BOSS:
            boss.frame = 0
        boss.shot_cooldown -= 1
        if boss.shot_cooldown <= 0:
            fire_boss_shot(self.boss_shots, MAX_SHOTS, self.pos_x, self.pos_y, boss)
            boss.shot_cooldown = BOSS_SHOT_COOLDOWN

    def _advance_boss_shots(self) -> None:
        kept = []
        for shot in self.boss_shots:
            shot.x += shot.vel_x
            shot.y += shot.vel_y
            if (
                shot.x < -SHOT_MARGIN
                or shot.x > X_SCREEN + SHOT_MARGIN
                or shot.y < -SHOT_MARGIN
                or shot.y > GROUND + 100
            ):
                continue
            shot.frame_counter += 1
            if shot.frame_counter >= DURATION_SHOT:
                shot.frame_counter = 0
                shot.frame = (shot.frame + 1) % FRAMES_BOSS_SHOT
            kept.append(shot)
        self.boss_shots[:] = kept

    def _hit_boss(self) -> bool:
        """Apply the player's hits to the boss; True when the boss dies."""
        for shot in self.player_shots:
            if player_shot_hits_boss(shot, self.boss):
                shot.active = False
                self.boss.life -= DAMAGE
                if self.boss.life <= 0:
                    return True
        self.player_shots[:] = [shot for shot in self.player_shots if shot.active]
        return False


__all__ = ["Key", "Level", "Pose", "POSE_FRAMES", "MAP_LIMIT", "MAX_ENEMIES"]