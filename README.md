# Castle of Shadows

A side-scrolling action game. Walk through the castle grounds, dodge the
fire of flying eye demons, shoot them down, and face the dragon waiting
at the far end of the map.

## Installing

```
pip install .
```

This installs `pygame`, which the game uses to draw and to read the
keyboard and mouse.

## Running

```
castle-of-shadows
```

The same entry point can be started with `python -m castleshadows.app`.

The game reads its font and artwork from a root directory, which is the
current directory unless you pass `--root`:

```
castle-of-shadows --root path/to/game-data
```

The window is 800 × 600. Under the root directory the game expects:

- `fonts/Cave-Stone.ttf`
- `assets/background.png`
- `assets/andando/`, `assets/pulando/`, `assets/agachando/`,
  `assets/ataque_normal/`, `assets/ataque_pulando/` (player frames)
- `assets/inimigos/`, `assets/boss/` (enemy and boss frames)
- `assets/projetil/`, `assets/projetil_inimigo/`, `assets/projetil_boss/`
  (shot frames)

If the window, the font or the background cannot be loaded, the game
prints an error and exits with a non-zero status. The sprite frames are
loaded the first time you choose to play. If one is missing, the game
prints which file it was and quits.

## Controls

In the menus:

| Key   | Action             |
|-------|--------------------|
| W / S | move the selection |
| Enter | confirm            |

Closing the window from the title or pause menu quits the game.

In the level:

| Input             | Action                                                  |
|-------------------|---------------------------------------------------------|
| A / D             | walk left / right                                       |
| W                 | jump (only while on the ground)                         |
| S                 | crouch (only while on the ground); lowers your hitbox   |
| Left mouse button | shoot toward the cursor, when it is on the side you face |
| Esc               | pause                                                   |
| H                 | take 10 damage straight away                            |

You start with 100 health and each hit costs 10. When your health reaches
0 the game-over screen offers to play again or quit. Demons become active
as you approach them and fire at you about once a second. Near the end of
the map the scrolling stops and the dragon fight begins. The dragon has
500 health. Defeating it also brings up the game-over screen.

When you return from the pause menu, the level starts again from the
player data that was kept. The enemies are placed afresh.

## Using the pieces

The game rules in `entities`, `shots` and `level` do not need a window,
so they can be tested or driven from a script:

- `castleshadows.entities`: `GameState`, `PlayerData` (with `reset()`),
  `Character` (with `Character.create`, which raises `ValueError` for a
  position that does not fit), `Enemy`, `Boss`, `init_enemies`,
  `update_enemies`
- `castleshadows.shots`: `Shot`, `fire_player_shot`, `fire_enemy_shot`,
  `fire_boss_shot`, `advance_shots`, and the hit tests
  `player_shot_hits_enemy`, `enemy_shot_hits_player`,
  `boss_shot_hits_player`, `player_shot_hits_boss`
- `castleshadows.level`: `Level`, a single playthrough. It is driven by
  `key_down`, `key_up`, `mouse_down` and `tick`, and written back to the
  player data with `save`. It uses `Key` for input and `Pose` for the
  animation to draw.
- `castleshadows.joystick`: `Joystick`, four direction buttons with
  `toggle_*` methods

The drawing side uses pygame:

- `castleshadows.helpers`: `collision_2d`, `draw_outlined_text`, `Align`
- `castleshadows.screens`: `Menu`, `Sprites`, `load_sprites`,
  `main_menu`, `pause_menu`, `game_over_menu`, `play`
- `castleshadows.app`: `main`, the command's entry point

```python
import random

from castleshadows.entities import PlayerData, init_enemies
from castleshadows.level import Key, Level

rng = random.Random(1)
level = Level(PlayerData(), init_enemies(rng), 800, (200, 150), rng)
level.key_down(Key.D)
for _ in range(10):
    state = level.tick((64, 64))
print(level.pos_x, level.background_x, level.life)
```

`tick` returns `GameState.GAME_OVER` when the session ends. Otherwise it
returns `None`.

## Not included

The game has no sound or music. It keeps no scores or saved games, so
all progress is lost when the window closes. The keys and the window size
are fixed.

## Running the tests

```
pip install .[test]
pytest
```