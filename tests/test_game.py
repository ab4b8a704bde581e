import pytest

from gfckit.game import Game, GameMode
from gfckit.vector import Vector


def test_initial_state():
    g = Game()
    assert g.is_menu_mode
    assert not g.is_mode_changing
    assert g.running
    assert not g.paused
    assert g.level == 0


def test_change_mode_is_a_request():
    g = Game()
    g.start_game()
    assert g.requested_mode is GameMode.GAME
    assert g.mode is GameMode.MENU
    assert g.is_mode_changing


@pytest.mark.parametrize(
    "action, expected",
    [
        ("start_game", GameMode.GAME),
        ("game_over", GameMode.GAMEOVER),
        ("new_game", GameMode.MENU),
    ],
)
def test_mode_requests(action, expected):
    g = Game()
    getattr(g, action)()
    assert g.requested_mode is expected


def test_mode_predicates():
    g = Game()
    g.mode = GameMode.GAMEOVER
    assert g.is_game_over_mode and g.is_game_over
    assert not g.is_game_mode and not g.is_menu_mode


def test_change_mode_rejects_unknown():
    with pytest.raises(ValueError):
        Game().change_mode("bogus")


def test_pause_toggle_and_set():
    g = Game()
    g.pause_game()
    assert g.paused
    g.pause_game()
    assert not g.paused
    g.pause_game(True)
    g.pause_game(True)
    assert g.paused


def test_stop():
    g = Game()
    g.stop_game()
    assert not g.running
    h = Game()
    h.stop_app()
    assert not h.running


def test_levels():
    g = Game()
    g.set_level(5)
    assert g.requested_level == 5
    assert g.level == 0
    g.level = 3
    g.new_level()
    assert g.requested_level == g.level + 1


def test_size():
    g = Game()
    g.set_size(800, 600)
    assert (g.width, g.height) == (800, 600)
    assert g.size == Vector(800, 600)


def test_timing():
    g = Game()
    g.reset_time(100)
    assert g.delta_time == 0
    g.set_time(130)
    assert g.delta_time == 30
    g.catch_delta_time()
    assert g.delta_time == 0
    assert g.time_prev == 130


def test_delta_time_wraps_unsigned():
    g = Game()
    g.reset_time(10)
    g.set_time(5)
    assert g.delta_time == 2**32 - 5


def test_time_game_over():
    g = Game()
    g.set_time_game_over(1234)
    assert g.time_game_over == 1234


def test_hooks_can_be_overridden():
    events = []

    class MyGame(Game):
        def on_start_level(self, level):
            events.append(level)

    MyGame().on_start_level(2)
    assert events == [2]
    assert Game().on_draw(None) is None