"""Game session logic and the graphical front end."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from taquin.board import Board, TileGeometry, click_direction, key_direction
from taquin.menu import (
    CHECK_IMAGE,
    CHECK_X,
    COLUMN_CHECK_Y,
    HOME_ARROW,
    HOME_ARROWS,
    HOME_BACKGROUND,
    HOME_WINDOW,
    IMAGE_FRAMES,
    MIN_SIZE,
    ROW_CHECK_Y,
    SELECTION_CURSORS,
    SETUP_BACKGROUND,
    VICTORY_IMAGE,
    GameAction,
    HomeChoice,
    SetupMenu,
    game_action,
    home_hit,
    image_spec,
)

TITLE = "TAQUIN"
BACKGROUND = (60, 60, 60)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
CURSOR_SIZE = 15
FRAME_RATE = 30


class GameSession:
    """One game: a shuffled board, its move counter and its victory state."""

    def __init__(self, image=1, rows=MIN_SIZE, columns=MIN_SIZE, rng=None):
        self.spec = image_spec(image)
        self.image = image
        self.rows = rows
        self.columns = columns
        self.geometry = TileGeometry.from_image(
            self.spec.width, self.spec.height, columns, rows
        )
        self.board = Board(columns, rows)
        self.rng = rng if rng is not None else random.Random()
        self.moves = 0
        self.won = False
        self.board.shuffle(self.rng)

    def handle_key(self, key):
        """Apply a key name and return the triggered action."""
        action = game_action(self.image, self.rows, None, None, key, self.won)
        return self._step(action, key_direction(key))

    def handle_click(self, x, y):
        """Apply a click at (x, y) and return the triggered action."""
        action = game_action(self.image, self.rows, x, y, None, self.won)
        direction = None if self.won else click_direction(self.board, self.geometry, x, y)
        return self._step(action, direction)

    def _step(self, action, direction):
        if action in (GameAction.BACK_TO_MENU, GameAction.QUIT):
            return action
        if action is GameAction.RESHUFFLE:
            self.board.shuffle(self.rng)
        if not self.won:
            if direction is not None and self.board.move(direction):
                self.moves += 1
            self.won = self.board.is_solved()
        return action


class _WindowClosed(Exception):
    """The player closed the window."""


class _Assets:
    def __init__(self, directory):
        self.directory = Path(directory)
        self._cache = {}

    def __getitem__(self, name):
        import pygame

        if name not in self._cache:
            path = self.directory / name
            if not path.is_file():
                raise FileNotFoundError(f"missing image: {path}")
            self._cache[name] = pygame.image.load(str(path))
        return self._cache[name]


def _events():
    import pygame

    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            raise _WindowClosed
        yield event


def _key_name(event):
    import pygame

    if event.unicode in ("r", "R"):
        return event.unicode
    return pygame.key.name(event.key)


def _open_window(size):
    import pygame

    screen = pygame.display.set_mode(size)
    pygame.display.set_caption(TITLE)
    return screen


def _home_screen(assets, clock):
    import pygame

    screen = _open_window(HOME_WINDOW)
    choice = HomeChoice.PLAY
    while True:
        screen.blit(assets[HOME_BACKGROUND], (0, 0))
        screen.blit(assets[HOME_ARROW], HOME_ARROWS[choice])
        pygame.display.flip()
        for event in _events():
            if event.type == pygame.KEYDOWN:
                name = _key_name(event)
                if name == "up":
                    choice = HomeChoice.PLAY
                elif name == "down":
                    choice = HomeChoice.QUIT
                elif name == "return":
                    return choice
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                hit = home_hit(*event.pos)
                if hit is not None:
                    return hit
        clock.tick(FRAME_RATE)


def _draw_setup(screen, assets, menu):
    import pygame

    screen.blit(assets[SETUP_BACKGROUND], (0, 0))
    pygame.draw.rect(screen, WHITE, IMAGE_FRAMES[menu.image], 1)
    check = assets[CHECK_IMAGE]
    screen.blit(check, (CHECK_X[menu.rows], ROW_CHECK_Y))
    screen.blit(check, (CHECK_X[menu.columns], COLUMN_CHECK_Y))
    x, y = SELECTION_CURSORS[menu.selection]
    pygame.draw.ellipse(screen, WHITE, (x, y, CURSOR_SIZE, CURSOR_SIZE))


def _setup_screen(assets, clock, menu):
    import pygame

    screen = pygame.display.get_surface()
    while True:
        _draw_setup(screen, assets, menu)
        pygame.display.flip()
        for event in _events():
            if event.type == pygame.KEYDOWN:
                if menu.handle_key(_key_name(event)):
                    return menu
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if menu.handle_click(*event.pos):
                    return menu
        clock.tick(FRAME_RATE)


def _victory_layout(image, columns):
    """Rectangles hidden on victory and where the victory badge goes."""
    if image == 1:
        panel = 500 + 6 * columns
        masks = [
            (10, 10, 500 + 4 * (columns + 1), 600),
            (panel, 10, 220, 220),
            (panel, 289, 210, 50),
        ]
        return masks, (panel, 10)
    if image == 2:
        panel = 960 + 10 * columns
        masks = [
            (0, 0, 1000 + 4 * (columns + 1), 600),
            (panel, 10, 288, 180),
            (panel, 290, 288, 50),
        ]
        return masks, (1000 + 10 * columns, 10)
    panel = 408 + 10 * columns
    masks = [
        (0, 0, 420 + 4 * (columns + 1), 700),
        (panel, 10, 197, 300),
        (panel, 393, 197, 50),
    ]
    return masks, (panel, 10)


def _draw_game(screen, assets, font, session):
    import pygame

    spec = session.spec
    geometry = session.geometry
    picture = assets[spec.path]
    screen.fill(BACKGROUND)

    for column in range(1, session.columns + 1):
        for row in range(1, session.rows + 1):
            tile = session.board.tile_at(column, row)
            if tile is None:
                continue
            tile_column, tile_row = tile
            area = pygame.Rect(
                (tile_column - 1) * geometry.width,
                (tile_row - 1) * geometry.height,
                geometry.width,
                geometry.height,
            )
            screen.blit(picture, geometry.tile_origin(column, row), area)

    panel_x = spec.panel_x + spec.panel_step * session.columns
    mini = assets[spec.mini_path]
    screen.blit(mini, (panel_x, 10), pygame.Rect(0, 0, *spec.mini_size))
    text = font.render(str(session.moves), True, BLACK)
    text_x = panel_x + spec.counter_offset[0]
    text_y = spec.counter_offset[1] - text.get_height()
    screen.blit(text, (text_x, text_y))

    if session.won:
        masks, badge = _victory_layout(session.image, session.columns)
        for rect in masks:
            pygame.draw.rect(screen, BACKGROUND, rect)
        screen.blit(picture, (10, 10), pygame.Rect(0, 0, spec.width, spec.height))
        screen.blit(assets[VICTORY_IMAGE], badge)


def _game_screen(assets, clock, session):
    import pygame

    screen = _open_window(session.spec.window_size)
    font = pygame.font.Font(None, 28)
    while True:
        _draw_game(screen, assets, font, session)
        pygame.display.flip()
        for event in _events():
            if event.type == pygame.KEYDOWN:
                action = session.handle_key(_key_name(event))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                action = session.handle_click(*event.pos)
            else:
                continue
            if action in (GameAction.BACK_TO_MENU, GameAction.QUIT):
                return action
        clock.tick(FRAME_RATE)


def _play(assets):
    import pygame

    clock = pygame.time.Clock()
    menu = SetupMenu()
    while True:
        if _home_screen(assets, clock) is HomeChoice.QUIT:
            return
        menu = _setup_screen(assets, clock, SetupMenu(menu.image, menu.rows, menu.columns))
        session = GameSession(menu.image, menu.rows, menu.columns)
        if _game_screen(assets, clock, session) is GameAction.QUIT:
            return


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="taquin", description="Sliding picture puzzle.")
    parser.add_argument(
        "--images",
        default="Images",
        help="directory holding the game's pictures (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Run the game; returns the process exit status."""
    args = _parse_args(argv)
    import pygame

    assets = _Assets(args.images)
    pygame.init()
    try:
        _play(assets)
    except _WindowClosed:
        pass
    except (FileNotFoundError, pygame.error) as error:
        print(f"taquin: {error}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())