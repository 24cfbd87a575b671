"""Screens, menu and a text-mode session for the snake game."""

from __future__ import annotations

import argparse
import random
import sys
from enum import IntEnum
from typing import Optional, Sequence

from .buzzer import Buzzer
from .game import (
    APPLE_COLOR,
    APPLE_LIMIT,
    BODY_COLOR,
    CENTER,
    GRID_SIZE,
    HEAD_COLOR,
    OBSTACLE_COLOR,
    ADC_MAX,
    Phase,
    SnakeGame,
    apply_deadzone,
    draw_number,
)
from .neopixel import LedMatrix
from .ssd1306 import SSD1306

BORDER_WIDTH = 40
BORDER_HEIGHT = 40
PANEL_CENTER_X = 108
PANEL_CENTER_Y = 32
SQUARE_SIZE = 8
MENU_DEBOUNCE_US = 200_000

MENU_COLORS = {
    Phase.EASY: (1, 1, 1),
    Phase.MEDIUM: (255, 165, 0),
    Phase.HARD: (1, 0, 0),
}
MENU_BACKGROUND = (0, 0, 0)

_JOYSTICK = {
    ".": (CENTER, CENTER),
    "R": (ADC_MAX, CENTER),
    "L": (0, CENTER),
    "U": (CENTER, ADC_MAX),
    "D": (CENTER, 0),
}

_SYMBOLS = {
    HEAD_COLOR: "O",
    BODY_COLOR: "o",
    APPLE_COLOR: "*",
    OBSTACLE_COLOR: "#",
}


class Screen(IntEnum):
    """What the OLED panel is showing."""

    MENU = 0
    GAME = 1
    GAME_OVER = 2
    RESULT = 3


def _u8(value: int) -> int:
    return int(value) & 0xFF


def draw_square(
    display: SSD1306, center_x: int, center_y: int, size: int, vrx: int, vry: int
) -> tuple[int, int]:
    """Draw a filled square inside the border tracking the joystick; return its top-left."""
    top = _u8(center_y - BORDER_HEIGHT // 2)
    left = _u8(center_x - BORDER_WIDTH // 2)
    usable_width = _u8(BORDER_WIDTH - size)
    usable_height = _u8(BORDER_HEIGHT - size)
    pos_x = int((vrx / ADC_MAX) * usable_width) + left
    pos_y = top + (usable_height - int((vry / ADC_MAX) * usable_height))
    display.rect(pos_y, pos_x, size, size, True, True)
    return pos_x, pos_y


def draw_border(display: SSD1306, center_x: int, center_y: int) -> tuple[int, int]:
    """Draw the square outline the joystick marker moves in; return its top-left."""
    left = _u8(center_x - BORDER_WIDTH // 2)
    top = _u8(center_y - BORDER_HEIGHT // 2)
    display.rect(top, left, BORDER_WIDTH, BORDER_WIDTH, True, False)
    return left, top


def render_screen(
    display: SSD1306, screen: Screen, apples: int, lost: bool, vrx: int, vry: int
) -> None:
    """Redraw the panel for ``screen`` and send it."""
    display.fill(False)
    screen = Screen(screen)
    if screen is Screen.MENU:
        display.draw_string(" APERTE B", 0, 12)
        display.draw_string("   PARA", 0, 25)
        display.draw_string("SELECIONAR", 0, 38)
        draw_square(display, PANEL_CENTER_X, PANEL_CENTER_Y, SQUARE_SIZE, vrx, vry)
        draw_border(display, PANEL_CENTER_X, PANEL_CENTER_Y)
    elif screen is Screen.GAME:
        display.draw_string("APERTE A", 0, 12)
        display.draw_string("PARA SAIR", 0, 25)
        display.draw_string(f"MACA:{apples} de {APPLE_LIMIT}", 0, 40)
        draw_square(display, PANEL_CENTER_X, PANEL_CENTER_Y, SQUARE_SIZE, vrx, vry)
        draw_border(display, PANEL_CENTER_X, PANEL_CENTER_Y)
    elif screen is Screen.GAME_OVER:
        display.draw_string("VOCE PERDEU!!!" if lost else "VOCE GANHOU!!!", 8, 25)
        display.draw_string("AGUARDE...", 24, 38)
    display.send_data()


class Menu:
    """Phase selection driven by the joystick's horizontal axis."""

    def __init__(self, buzzer: Optional[Buzzer] = None) -> None:
        self.buzzer = buzzer
        self.phase = Phase.EASY
        self.selected = False
        self.needs_redraw = True
        self._last_us = 0

    def _beep(self, frequency: int, duration_ms: int) -> None:
        if self.buzzer is not None:
            self.buzzer.start(frequency, duration_ms)

    def move(self, vrx: int, now_us: int) -> Phase:
        """Step to the next or previous phase, at most once every 200 ms."""
        now = int(now_us) & 0xFFFFFFFF
        if vrx > CENTER:
            step = 1
        elif vrx < CENTER:
            step = -1
        else:
            return self.phase
        if (now - self._last_us) & 0xFFFFFFFF <= MENU_DEBOUNCE_US:
            return self.phase
        self.phase = Phase((self.phase + step) % len(Phase))
        self.needs_redraw = True
        self._last_us = now
        self._beep(1000, 100)
        return self.phase

    def select(self) -> Phase:
        """Confirm the current phase and return it."""
        self.selected = True
        self._beep(1200, 100)
        if self.buzzer is not None:
            self.buzzer.stop()
        return self.phase

    def draw(self, matrix: LedMatrix) -> bytes:
        """Show the current phase number on the LED matrix."""
        self.needs_redraw = False
        return draw_number(
            matrix, int(self.phase) + 1, MENU_COLORS[self.phase], MENU_BACKGROUND
        )


def _board(matrix: LedMatrix) -> str:
    return "\n".join(
        "".join(_SYMBOLS.get(matrix.color_at(x, y), ".") for x in range(GRID_SIZE))
        for y in range(GRID_SIZE - 1, -1, -1)
    )


def _parse(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="picosnake", description="Play a round of snake on a 5x5 grid."
    )
    parser.add_argument("--phase", type=int, choices=(1, 2, 3), default=1)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--moves",
        default="",
        help="joystick input per step: R, L, U, D, or . for centred",
    )
    parser.add_argument("--max-steps", type=int, default=100)
    parser.add_argument("--show-display", action="store_true")
    args = parser.parse_args(argv)
    args.moves = args.moves.upper()
    bad = sorted(set(args.moves) - set(_JOYSTICK))
    if bad:
        parser.error(f"unknown move(s): {''.join(bad)}")
    if args.max_steps < 0:
        parser.error("--max-steps must not be negative")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play one scripted round and print the board and result."""
    args = _parse(argv)
    menu = Menu(Buzzer())
    matrix = LedMatrix()
    display = SSD1306()

    for _ in range(args.phase - 1):
        menu.move(ADC_MAX, menu._last_us + MENU_DEBOUNCE_US + 1)
    menu.draw(matrix)
    phase = menu.select()
    print(f"\nEntrando na Fase {int(phase) + 1}")

    game = SnakeGame(phase, random.Random(args.seed))
    render_screen(display, Screen.GAME, 0, False, CENTER, CENTER)
    game.draw(matrix)

    moves = iter(args.moves)
    for _ in range(args.max_steps):
        vrx, vry = _JOYSTICK[next(moves, ".")]
        game.steer(apply_deadzone(vrx), apply_deadzone(vry))
        if game.step():
            print("Maça Coletada")
            print(f"Maca: {game.apples} de {APPLE_LIMIT}")
            render_screen(display, Screen.GAME, game.apples, False, vrx, vry)
        if game.over:
            break
        game.draw(matrix)

    print(_board(matrix))
    if game.over:
        render_screen(display, Screen.GAME_OVER, game.apples, game.lost, CENTER, CENTER)
        if game.lost:
            head = game.retreat_head()
            print(f"\nVocê Perdeu!!! (cabeça em {head.x},{head.y})")
        else:
            print("\nVocê Ganhou!!!")
    if args.show_display:
        print(display.render_text())
    print("\nVoltando para o menu!")
    return 0


if __name__ == "__main__":
    sys.exit(main())