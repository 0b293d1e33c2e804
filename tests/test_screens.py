import pygame
import pytest

from castleshadows.entities import GameState, PlayerData, init_enemies
from castleshadows.level import (
    FRAMES_BOSS,
    FRAMES_BOSS_SHOT,
    FRAMES_ENEMY,
    FRAMES_WALK,
)
from castleshadows.screens import (
    Menu,
    Sprites,
    game_over_menu,
    load_sprites,
    main_menu,
    pause_menu,
    play,
)

ASSET_SETS = [
    ("projetil/hit{}.png", 1),
    ("projetil_inimigo/frame{}.png", 2),
    ("andando/frame{}.png", 12),
    ("pulando/Jump{}.png", 4),
    ("agachando/frame{}.png", 2),
    ("ataque_normal/frame{}.png", 2),
    ("ataque_pulando/Jump_attack{}.png", 4),
    ("inimigos/flying-eye-demon{}.png", 8),
    ("boss/dragao{}.png", 9),
    ("projetil_boss/charged{}.png", 6),
]


@pytest.fixture
def screen(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.init()
    surface = pygame.display.set_mode((800, 600))
    pygame.event.clear()
    yield surface
    pygame.quit()


@pytest.fixture
def fonts(screen):
    return pygame.font.Font(None, 64), pygame.font.Font(None, 40)


def _post_keys(*keys):
    for key in keys:
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))


def _frames(count, size=(10, 10)):
    return [pygame.Surface(size) for _ in range(count)]


def _sprites():
    return Sprites(
        player_shot=pygame.Surface((8, 8)),
        enemy_shot=_frames(2),
        walk=_frames(12),
        jump=_frames(4),
        crouch=_frames(2),
        attack=_frames(2),
        jump_attack=_frames(4),
        enemy=_frames(8),
        boss=_frames(9, (120, 100)),
        boss_shot=_frames(6),
    )


def _write_assets(root):
    surface = pygame.Surface((4, 4))
    for pattern, count in ASSET_SETS:
        for i in range(1, count + 1):
            path = root / pattern.format(i)
            path.parent.mkdir(parents=True, exist_ok=True)
            pygame.image.save(surface, str(path))


def test_menu_move_up_wraps_to_last():
    menu = Menu((("Play", GameState.PLAY), ("Quit", GameState.QUIT)))
    menu.move_up()
    assert menu.selected == 1
    assert menu.choice() is GameState.QUIT


def test_menu_move_down_wraps_to_first():
    menu = Menu((("Play", GameState.PLAY), ("Quit", GameState.QUIT)), selected=1)
    menu.move_down()
    assert menu.selected == 0
    assert menu.choice() is GameState.PLAY


def test_menu_down_then_up_returns_to_start():
    menu = Menu((("Return to game", GameState.PLAY), ("Back to menu", GameState.MENU)))
    menu.move_down()
    menu.move_up()
    assert menu.choice() is GameState.PLAY


def test_menu_without_options_is_rejected():
    with pytest.raises(ValueError):
        Menu(())


def test_load_sprites_reads_every_frame(screen, tmp_path):
    _write_assets(tmp_path)
    sprites = load_sprites(tmp_path)
    assert len(sprites.walk) == FRAMES_WALK
    assert len(sprites.enemy) == FRAMES_ENEMY
    assert len(sprites.boss) == FRAMES_BOSS
    assert len(sprites.boss_shot) == FRAMES_BOSS_SHOT
    assert sprites.player_shot.get_size() == (4, 4)


def test_load_sprites_names_missing_file(screen, tmp_path):
    _write_assets(tmp_path)
    (tmp_path / "boss" / "dragao9.png").unlink()
    with pytest.raises(FileNotFoundError, match="dragao9.png"):
        load_sprites(tmp_path)


def test_main_menu_enter_plays(screen, fonts):
    _post_keys(pygame.K_RETURN)
    assert main_menu(screen, *fonts, pygame.Surface((100, 100))) is GameState.PLAY


def test_main_menu_up_then_enter_quits(screen, fonts):
    _post_keys(pygame.K_w, pygame.K_RETURN)
    assert main_menu(screen, *fonts, pygame.Surface((100, 100))) is GameState.QUIT


def test_main_menu_window_close_quits(screen, fonts):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert main_menu(screen, *fonts, pygame.Surface((100, 100))) is GameState.QUIT


def test_pause_menu_second_option_goes_to_menu(screen, fonts):
    _post_keys(pygame.K_s, pygame.K_RETURN)
    assert pause_menu(screen, *fonts, pygame.Surface((100, 100))) is GameState.MENU


def test_pause_menu_first_option_resumes(screen, fonts):
    _post_keys(pygame.K_s, pygame.K_s, pygame.K_RETURN)
    assert pause_menu(screen, *fonts, pygame.Surface((100, 100))) is GameState.PLAY


def test_game_over_play_again_resets_data(screen, fonts):
    data = PlayerData(life=0, pos_x=500, walking=True)
    _post_keys(pygame.K_RETURN)
    assert game_over_menu(screen, *fonts, data) is GameState.PLAY
    assert data == PlayerData()


def test_game_over_quit_keeps_data(screen, fonts):
    data = PlayerData(life=0)
    _post_keys(pygame.K_s, pygame.K_RETURN)
    assert game_over_menu(screen, *fonts, data) is GameState.QUIT
    assert data.life == 0


def test_play_escape_pauses_and_saves(screen):
    data = PlayerData()
    _post_keys(pygame.K_d, pygame.K_ESCAPE)
    state = play(screen, pygame.Surface((1000, 600)), data, init_enemies(), _sprites())
    assert state is GameState.PAUSE
    assert data.walking is True
    assert data.direction == 1


def test_play_escape_after_left_saves_direction(screen):
    data = PlayerData()
    _post_keys(pygame.K_a, pygame.K_ESCAPE)
    play(screen, pygame.Surface((1000, 600)), data, init_enemies(), _sprites())
    assert data.direction == 0


def test_play_window_close_quits_without_saving(screen):
    data = PlayerData()
    _post_keys(pygame.K_d)
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    state = play(screen, pygame.Surface((1000, 600)), data, init_enemies(), _sprites())
    assert state is GameState.QUIT
    assert data.walking is False


def test_play_self_damage_ends_game(screen):
    data = PlayerData(life=10)
    _post_keys(pygame.K_h)
    state = play(screen, pygame.Surface((1000, 600)), data, init_enemies(), _sprites())
    assert state is GameState.GAME_OVER
    assert data.life == 0