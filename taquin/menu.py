"""Menu layouts: home screen, puzzle setup and in-game buttons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

Rect = tuple[int, int, int, int]  # x0, x1, y0, y1, compared strictly

MIN_SIZE = 3
MAX_SIZE = 8
PLAY_SELECTION = 16

HOME_WINDOW = (720, 525)
HOME_BACKGROUND = "Menu.png"
HOME_ARROW = "Fleche.png"
SETUP_BACKGROUND = "Fond.png"
CHECK_IMAGE = "check.png"
VICTORY_IMAGE = "Victory.png"

ROW_CHECK_Y = 360
COLUMN_CHECK_Y = 426
CHECK_X = {size: (size - MIN_SIZE) * 57 + 168 for size in range(MIN_SIZE, MAX_SIZE + 1)}

# Frame drawn around the chosen picture: x, y, width, height.
IMAGE_FRAMES = {
    2: (19, 87, 250, 139),
    1: (295, 66, 200, 200),
    3: (520, 28, 175, 274),
}

# Where the selection cursor is drawn for each selection index.
SELECTION_CURSORS = {1: (19, 72), 2: (295, 51), 3: (520, 13), PLAY_SELECTION: (525, 340)}
SELECTION_CURSORS.update({4 + i: (i * 57 + 168, 340) for i in range(6)})
SELECTION_CURSORS.update({10 + i: (i * 57 + 168, 411) for i in range(6)})


class HomeChoice(IntEnum):
    PLAY = 0
    QUIT = 1


HOME_ARROWS = {HomeChoice.PLAY: (170, 210), HomeChoice.QUIT: (170, 345)}

_HOME_BUTTONS = {
    HomeChoice.PLAY: (255, 510, 190, 265),
    HomeChoice.QUIT: (255, 510, 325, 395),
}


@dataclass(frozen=True)
class ImageSpec:
    """Everything the game screen needs to know about one picture."""

    number: int
    path: str
    width: int
    height: int
    window_size: tuple[int, int]
    mini_path: str
    mini_size: tuple[int, int]
    panel_x: int
    panel_step: int
    counter_offset: tuple[int, int]
    reshuffle_button: Rect
    back_button: Rect
    quit_button: Rect


_SPECS = {
    1: ImageSpec(
        1, "Taquin.png", 500, 500, (760, 550), "mini_Taquin.png", (200, 482),
        500, 8, (90, 271),
        (5, 191, 299, 338), (7, 191, 361, 397), (6, 190, 422, 456),
    ),
    2: ImageSpec(
        2, "Taquin2.png", 960, 540, (1360, 590), "mini_Taquin2.png", (288, 478),
        960, 10, (136, 270),
        (52, 238, 298, 338), (54, 238, 360, 396), (53, 237, 420, 455),
    ),
    3: ImageSpec(
        3, "Taquin3.png", 408, 638, (708, 688), "mini_Taquin3.png", (197, 567),
        408, 10, (90, 375),
        (6, 192, 403, 442), (8, 192, 465, 501), (7, 191, 526, 560),
    ),
}


def image_spec(number):
    """Specification of picture 1, 2 or 3."""
    try:
        return _SPECS[number]
    except KeyError:
        raise ValueError(f"unknown image {number!r}") from None


def _inside(rect, x, y):
    if x is None or y is None:
        return False
    x0, x1, y0, y1 = rect
    return x0 < x < x1 and y0 < y < y1


def home_hit(x, y):
    """Home-screen button under (x, y), or None."""
    for choice, rect in _HOME_BUTTONS.items():
        if _inside(rect, x, y):
            return choice
    return None


_SELECTION_IMAGES = {1: 2, 2: 1, 3: 3}
_IMAGE_SELECTIONS = {image: selection for selection, image in _SELECTION_IMAGES.items()}
_IMAGE_AREAS = {
    2: (19, 269, 87, 226),
    1: (295, 495, 66, 266),
    3: (520, 695, 28, 302),
}
_PLAY_AREA = (525, 705, 355, 480)


class SetupMenu:
    """Choice of picture, row count and column count, driven by keys or clicks."""

    def __init__(self, image=1, rows=MIN_SIZE, columns=MIN_SIZE):
        image_spec(image)
        for name, value in (("rows", rows), ("columns", columns)):
            if not MIN_SIZE <= value <= MAX_SIZE:
                raise ValueError(f"{name} must lie between {MIN_SIZE} and {MAX_SIZE}")
        self.image = image
        self.rows = rows
        self.columns = columns
        self.selection = 1

    def _apply(self, selection):
        if selection in _SELECTION_IMAGES:
            self.image = _SELECTION_IMAGES[selection]
        elif 4 <= selection <= 9:
            self.rows = selection - 4 + MIN_SIZE
        elif 10 <= selection <= 15:
            self.columns = selection - 10 + MIN_SIZE
        self.selection = selection

    def handle_key(self, key):
        """Apply a key name; True once the play button is confirmed."""
        selection = self.selection
        if key == "return":
            if selection == PLAY_SELECTION:
                return True
            self._apply(selection)
        elif key == "right" and selection != PLAY_SELECTION:
            self.selection = PLAY_SELECTION if selection == 9 else selection + 1
        elif key == "left" and selection != 1:
            self.selection = selection - 1
        elif key == "down" and selection < 10:
            self.selection = 4 if selection < 4 else selection + 6
        elif key == "up" and selection > 3:
            self.selection = 1 if selection < 10 else selection - 6
        return False

    def handle_click(self, x, y):
        """Apply a click; True when the play button was clicked."""
        for image, rect in _IMAGE_AREAS.items():
            if _inside(rect, x, y):
                self._apply(_IMAGE_SELECTIONS[image])
                break
        for i in range(MAX_SIZE - MIN_SIZE + 1):
            left, right = i * 57 + 168, i * 57 + 212
            if _inside((left, right, 355, 400), x, y):
                self._apply(4 + i)
            if _inside((left, right, 422, 466), x, y):
                self._apply(10 + i)
        return _inside(_PLAY_AREA, x, y)


class GameAction(Enum):
    CONTINUE = "continue"
    RESHUFFLE = "reshuffle"
    BACK_TO_MENU = "back"
    QUIT = "quit"


def game_action(image, rows, x, y, key, won):
    """Which in-game button a click at (x, y) or a key name triggers."""
    spec = image_spec(image)
    origin = spec.panel_x + 10 * rows

    def hit(rect):
        if x is None or y is None:
            return False
        x0, x1, y0, y1 = rect
        return _inside((origin + x0, origin + x1, y0, y1), x, y)

    if not won and (hit(spec.reshuffle_button) or key in ("r", "R")):
        return GameAction.RESHUFFLE
    if hit(spec.back_button) or key == "backspace":
        return GameAction.BACK_TO_MENU
    if hit(spec.quit_button) or key == "escape":
        return GameAction.QUIT
    return GameAction.CONTINUE