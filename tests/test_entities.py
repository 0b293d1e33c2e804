import random

import pytest

from castleshadows.entities import (
    GROUND,
    MAX_ENEMIES,
    Character,
    Enemy,
    PlayerData,
    init_enemies,
    update_enemies,
)


def test_player_data_defaults():
    data = PlayerData()
    assert data.pos_x == 300
    assert data.pos_y == GROUND
    assert data.life == 100
    assert data.on_ground is True


def test_player_data_reset_restores_defaults():
    data = PlayerData()
    data.life = 10
    data.pos_x = 700
    data.jumping = True
    data.background_x = 123.5
    data.reset()
    assert data == PlayerData()


def test_character_create_valid():
    character = Character.create(20, 50, 50, 100, 100)
    assert (character.x, character.y, character.side) == (50, 50, 20)
    assert character.control.right is False


@pytest.mark.parametrize(
    "x, y",
    [(5, 50), (95, 50), (50, 5), (50, 95)],
)
def test_character_create_out_of_bounds(x, y):
    with pytest.raises(ValueError):
        Character.create(20, x, y, 100, 100)


def test_init_enemies_layout():
    enemies = init_enemies(random.Random(7))
    assert len(enemies) == MAX_ENEMIES
    assert [e.x for e in enemies] == [1500 + i * 800 for i in range(MAX_ENEMIES)]
    for enemy in enemies:
        assert 300 <= enemy.y < 400
        assert enemy.vertical_direction in (1, -1)
        assert enemy.horizontal_direction in (1, -1)
        assert not enemy.active and not enemy.destroyed
        assert enemy.width == 80 and enemy.height == 80


def test_init_enemies_deterministic_with_seed():
    first = init_enemies(random.Random(3))
    second = init_enemies(random.Random(3))
    assert len(first) == MAX_ENEMIES
    assert [(e.y, e.vertical_direction, e.horizontal_direction) for e in first] == [
        (e.y, e.vertical_direction, e.horizontal_direction) for e in second
    ]
    assert all(300 <= e.y < 400 for e in first)


def test_update_skips_inactive_enemies():
    enemy = Enemy(x=1000.0, y=350.0, active=False)
    before = Enemy(x=1000.0, y=350.0, active=False)
    update_enemies([enemy], 10, 8, [1000], random.Random(1))
    assert enemy == before


def test_update_moves_active_enemy_by_one_or_two():
    enemy = Enemy(x=1000.0, y=350.0, vertical_direction=1, horizontal_direction=-1, active=True)
    update_enemies([enemy], 10, 8, [1000], random.Random(1))
    assert enemy.y - 350.0 in (1, 2)
    assert 1000.0 - enemy.x in (1, 2)


def test_update_reverses_at_bottom_limit():
    enemy = Enemy(x=1000.0, y=399.0, vertical_direction=1, active=True)
    update_enemies([enemy], 10, 8, [1000], random.Random(2))
    assert enemy.vertical_direction == -1


def test_update_reverses_at_top_limit():
    enemy = Enemy(x=1000.0, y=301.0, vertical_direction=-1, active=True)
    update_enemies([enemy], 10, 8, [1000], random.Random(2))
    assert enemy.vertical_direction == 1


def test_update_reverses_at_right_limit():
    enemy = Enemy(x=1099.0, y=350.0, horizontal_direction=1, active=True)
    update_enemies([enemy], 10, 8, [1000], random.Random(2))
    assert enemy.horizontal_direction == -1


def test_update_animation_advances_and_wraps():
    enemy = Enemy(x=1000.0, y=350.0, active=True, frame=7)
    rng = random.Random(5)
    update_enemies([enemy], 2, 8, [1000], rng)
    assert enemy.frame == 7
    assert enemy.frame_counter == 1
    update_enemies([enemy], 2, 8, [1000], rng)
    assert enemy.frame == 0
    assert enemy.frame_counter == 0