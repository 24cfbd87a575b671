"""Snake game rules on a 5x5 grid: phases, movement, apples and collisions."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .neopixel import LED_COUNT, LedMatrix, get_index

GRID_SIZE = 5
MAX_LENGTH = 10
MIN_LENGTH = 3
APPLE_LIMIT = 5

ADC_MAX = 4095
CENTER = 2047
DEADZONE = 250
STEER_THRESHOLD = 250

OBSTACLE_COLOR = (1, 1, 1)
HEAD_COLOR = (0, 10, 0)
BODY_COLOR = (2, 2, 0)
APPLE_COLOR = (10, 0, 0)

Color = tuple[int, int, int]


class Direction(IntEnum):
    """Directions the snake can travel in."""

    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3


class Phase(IntEnum):
    """Difficulty levels."""

    EASY = 0
    MEDIUM = 1
    HARD = 2


@dataclass(frozen=True)
class Coordinate:
    """A cell on the grid; ``x`` grows to the right and ``y`` grows upwards."""

    x: int
    y: int


@dataclass(frozen=True)
class PhaseConfig:
    """Layout and speed of one phase."""

    interval_ms: int
    obstacles: tuple[Coordinate, ...]
    start: tuple[Coordinate, ...]


def _coords(*pairs: tuple[int, int]) -> tuple[Coordinate, ...]:
    return tuple(Coordinate(x, y) for x, y in pairs)


PHASES: dict[Phase, PhaseConfig] = {
    Phase.EASY: PhaseConfig(
        interval_ms=1000,
        obstacles=(),
        start=_coords((2, 2), (1, 2), (0, 2)),
    ),
    Phase.MEDIUM: PhaseConfig(
        interval_ms=800,
        obstacles=_coords((2, 1), (2, 2), (2, 3)),
        start=_coords((2, 0), (1, 0), (0, 0)),
    ),
    Phase.HARD: PhaseConfig(
        interval_ms=600,
        obstacles=_coords((1, 1), (1, 2), (1, 3), (3, 1), (3, 2), (3, 3)),
        start=_coords((2, 4), (1, 4), (0, 4)),
    ),
}

_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
}


def _move(cell: Coordinate, direction: Direction, sign: int = 1) -> Coordinate:
    dx, dy = _OFFSETS[direction]
    return Coordinate(cell.x + sign * dx, cell.y + sign * dy)


def _on_grid(cell: Coordinate) -> bool:
    return 0 <= cell.x < GRID_SIZE and 0 <= cell.y < GRID_SIZE


def apply_deadzone(value: int) -> int:
    """Snap a joystick reading near the centre to exactly the centre."""
    if CENTER - DEADZONE <= value <= CENTER + DEADZONE:
        return CENTER
    return value


def choose_direction(
    current: Direction, previous: Direction, vrx: int, vry: int
) -> Direction:
    """Return the new heading for a joystick reading; only perpendicular turns are taken."""
    high = CENTER + STEER_THRESHOLD
    low = CENTER - STEER_THRESHOLD
    if previous in (Direction.UP, Direction.DOWN):
        if vrx > high and previous != Direction.LEFT:
            return Direction.RIGHT
        if vrx < low and previous != Direction.RIGHT:
            return Direction.LEFT
    else:
        if vry > high and previous != Direction.DOWN:
            return Direction.UP
        if vry < low and previous != Direction.UP:
            return Direction.DOWN
    return current


_DIGITS: dict[int, tuple[tuple[int, int], ...]] = {
    0: ((1, 4), (2, 4), (3, 4), (1, 3), (3, 3), (1, 2), (3, 2),
        (1, 1), (3, 1), (1, 0), (2, 0), (3, 0)),
    1: ((2, 4), (1, 3), (2, 3), (2, 2), (2, 1), (1, 0), (2, 0), (3, 0)),
    2: ((1, 4), (2, 4), (3, 4), (3, 3), (3, 2), (2, 2), (1, 2),
        (1, 1), (1, 0), (2, 0), (3, 0)),
    3: ((1, 4), (2, 4), (3, 4), (3, 3), (3, 2), (2, 2), (3, 1),
        (1, 0), (2, 0), (3, 0)),
    4: ((1, 4), (3, 4), (1, 3), (3, 3), (1, 2), (2, 2), (3, 2),
        (3, 1), (3, 0)),
    5: ((1, 4), (2, 4), (3, 4), (1, 3), (1, 2), (2, 2), (3, 2),
        (3, 1), (1, 0), (2, 0), (3, 0)),
    6: ((1, 4), (2, 4), (3, 4), (1, 3), (1, 2), (2, 2), (3, 2),
        (1, 1), (3, 1), (1, 0), (2, 0), (3, 0)),
    7: ((1, 4), (2, 4), (3, 4), (3, 3), (3, 2), (3, 1), (3, 0)),
    8: ((1, 4), (2, 4), (3, 4), (1, 3), (3, 3), (1, 2), (2, 2),
        (3, 2), (1, 1), (3, 1), (1, 0), (2, 0), (3, 0)),
    9: ((1, 4), (2, 4), (3, 4), (1, 3), (3, 3), (1, 2), (2, 2),
        (3, 2), (3, 1), (1, 0), (2, 0), (3, 0)),
}


def digit_cells(number: int) -> tuple[Coordinate, ...]:
    """Return the grid cells that draw a single digit; other numbers draw nothing."""
    return _coords(*_DIGITS.get(number, ()))


def draw_number(
    matrix: LedMatrix, number: int, color: Color, background: Color
) -> bytes:
    """Paint a digit over a uniform background and write the matrix."""
    for index in range(LED_COUNT):
        matrix.set_led(index, *background)
    for cell in digit_cells(number):
        matrix.set_led(get_index(cell.x, cell.y), *color)
    return matrix.write()


class SnakeGame:
    """State of one round: the snake, the apple and the outcome."""

    def __init__(
        self, phase: Phase = Phase.HARD, rng: Optional[random.Random] = None
    ) -> None:
        self.phase = Phase(phase)
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    @property
    def config(self) -> PhaseConfig:
        return PHASES[self.phase]

    @property
    def interval_ms(self) -> int:
        return self.config.interval_ms

    @property
    def obstacles(self) -> tuple[Coordinate, ...]:
        return self.config.obstacles

    @property
    def head(self) -> Coordinate:
        return self._body[0]

    @property
    def segments(self) -> tuple[Coordinate, ...]:
        """The cells the snake occupies, head first."""
        return tuple(self._body[: self.size])

    @property
    def won(self) -> bool:
        return self.apples >= APPLE_LIMIT

    @property
    def over(self) -> bool:
        return self.lost or self.won

    def reset(self) -> None:
        """Start the round again from the phase's initial layout."""
        self.direction = Direction.RIGHT
        self.previous = Direction.RIGHT
        self.size = MIN_LENGTH
        self.apples = 0
        self.lost = False
        self._body: list[Coordinate] = list(self.config.start)
        self.apple = Coordinate(0, 0)
        self.place_apple()

    def place_apple(self) -> Coordinate:
        """Put the apple on a random cell free of snake and obstacles."""
        blocked = set(self.segments) | set(self.obstacles)
        if len(blocked) >= GRID_SIZE * GRID_SIZE:
            raise RuntimeError("no free cell for an apple")
        while True:
            x = self.rng.randrange(GRID_SIZE)
            y = self.rng.randrange(GRID_SIZE)
            cell = Coordinate(x, y)
            if cell not in blocked:
                self.apple = cell
                return cell

    def steer(self, vrx: int, vry: int) -> Direction:
        """Update the heading from a joystick reading and return it."""
        self.direction = choose_direction(self.direction, self.previous, vrx, vry)
        return self.direction

    def step(self) -> bool:
        """Advance the snake one cell; return whether it ate the apple."""
        if self.over:
            raise RuntimeError("the round is over")
        self.previous = self.direction
        self._body.insert(0, _move(self._body[0], self.direction))
        if not _on_grid(self.head) or self.collides():
            self.lost = True
            return False
        ate = self.head == self.apple
        if ate:
            if self.size < MAX_LENGTH:
                self.size += 1
            self.apples += 1
        del self._body[self.size :]
        if ate and self.apples < APPLE_LIMIT:
            self.place_apple()
        return ate

    def collides(self) -> bool:
        """Whether the head overlaps the body or an obstacle."""
        head = self.head
        return head in self._body[1 : self.size] or head in self.obstacles

    def draw(self, matrix: LedMatrix) -> Optional[bytes]:
        """Render obstacles, snake and apple; nothing is drawn once the round is over."""
        if self.over:
            return None
        matrix.clear()
        for cell in self.obstacles:
            matrix.set_led(get_index(cell.x, cell.y), *OBSTACLE_COLOR)
        matrix.set_led(get_index(self.head.x, self.head.y), *HEAD_COLOR)
        for cell in self._body[1 : self.size]:
            matrix.set_led(get_index(cell.x, cell.y), *BODY_COLOR)
        matrix.set_led(get_index(self.apple.x, self.apple.y), *APPLE_COLOR)
        return matrix.write()

    def retreat_head(self) -> Coordinate:
        """Move the head back one cell against the heading, undoing a fatal move."""
        self._body[0] = _move(self._body[0], self.direction, -1)
        return self._body[0]