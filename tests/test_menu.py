import pytest

from taquin.menu import (
    GameAction,
    HomeChoice,
    SetupMenu,
    game_action,
    home_hit,
    image_spec,
)


def test_image_spec_values_from_source():
    spec = image_spec(2)
    assert spec.path == "Taquin2.png"
    assert (spec.width, spec.height) == (960, 540)
    assert image_spec(3).mini_path == "mini_Taquin3.png"


def test_image_spec_unknown():
    with pytest.raises(ValueError):
        image_spec(4)


def test_home_hit():
    assert home_hit(300, 200) is HomeChoice.PLAY
    assert home_hit(300, 350) is HomeChoice.QUIT
    assert home_hit(255, 200) is None
    assert home_hit(0, 0) is None


def test_setup_rejects_bad_values():
    with pytest.raises(ValueError):
        SetupMenu(1, 2, 3)
    with pytest.raises(ValueError):
        SetupMenu(5, 3, 3)


def test_return_on_first_selection_picks_wide_image():
    menu = SetupMenu(1, 3, 3)
    assert menu.handle_key("return") is False
    assert menu.image == 2


def test_right_from_last_row_button_jumps_to_play():
    menu = SetupMenu(1, 3, 3)
    for _ in range(8):
        menu.handle_key("right")
    assert menu.selection == 9
    menu.handle_key("right")
    assert menu.selection == 16
    assert menu.handle_key("return") is True


def test_left_at_first_selection_stays():
    menu = SetupMenu(1, 3, 3)
    menu.handle_key("left")
    assert menu.selection == 1


def test_down_and_up_navigation():
    menu = SetupMenu(1, 3, 3)
    menu.handle_key("right")
    menu.handle_key("down")
    assert menu.selection == 4
    menu.handle_key("down")
    assert menu.selection == 10
    menu.handle_key("down")
    assert menu.selection == 10
    menu.handle_key("up")
    assert menu.selection == 4
    menu.handle_key("up")
    assert menu.selection == 1


def test_choose_rows_and_columns_by_keys():
    menu = SetupMenu(1, 3, 3)
    menu.handle_key("down")
    menu.handle_key("right")
    menu.handle_key("return")
    assert menu.rows == 4
    menu.handle_key("down")
    menu.handle_key("return")
    assert menu.columns == 4


def test_click_row_and_column_buttons():
    menu = SetupMenu(1, 5, 5)
    assert menu.handle_click(170, 370) is False
    assert (menu.rows, menu.selection) == (3, 4)
    menu.handle_click(170, 440)
    assert (menu.columns, menu.selection) == (3, 10)


def test_click_pictures():
    menu = SetupMenu(1, 3, 3)
    menu.handle_click(600, 100)
    assert (menu.image, menu.selection) == (3, 3)
    menu.handle_click(400, 100)
    assert (menu.image, menu.selection) == (1, 2)


def test_click_play():
    menu = SetupMenu(2, 6, 7)
    assert menu.handle_click(600, 400) is True
    assert (menu.image, menu.rows, menu.columns) == (2, 6, 7)


@pytest.mark.parametrize(
    "key,won,expected",
    [
        ("r", False, GameAction.RESHUFFLE),
        ("R", False, GameAction.RESHUFFLE),
        ("r", True, GameAction.CONTINUE),
        ("backspace", True, GameAction.BACK_TO_MENU),
        ("escape", False, GameAction.QUIT),
        ("up", False, GameAction.CONTINUE),
    ],
)
def test_game_action_keys(key, won, expected):
    assert game_action(1, 3, None, None, key, won) is expected


@pytest.mark.parametrize(
    "y,won,expected",
    [
        (320, False, GameAction.RESHUFFLE),
        (320, True, GameAction.CONTINUE),
        (380, False, GameAction.BACK_TO_MENU),
        (440, True, GameAction.QUIT),
    ],
)
def test_game_action_clicks(y, won, expected):
    assert game_action(1, 3, 600, y, None, won) is expected


def test_game_action_unknown_image():
    with pytest.raises(ValueError):
        game_action(9, 3, None, None, "escape", False)