"""A 5x5 serpentine matrix of WS2812-style RGB LEDs."""

from __future__ import annotations

from typing import Callable, Optional

LED_COUNT = 25
LED_PIN = 7
_SIDE = 5


def get_index(x: int, y: int) -> int:
    """Map a grid coordinate to its position on the serpentine LED chain."""
    if y % 2 == 0:
        return y * _SIDE + (_SIDE - 1 - x)
    return y * _SIDE + x


class LedMatrix:
    """Pixel buffer for the matrix; ``write`` emits GRB bytes to ``sink``."""

    def __init__(self, sink: Optional[Callable[[bytes], None]] = None) -> None:
        self.sink = sink
        self._leds: list[tuple[int, int, int]] = [(0, 0, 0)] * LED_COUNT

    @property
    def pixels(self) -> tuple[tuple[int, int, int], ...]:
        """The (r, g, b) colour of every LED in chain order."""
        return tuple(self._leds)

    @staticmethod
    def _check(index: int) -> int:
        if not 0 <= index < LED_COUNT:
            raise IndexError(f"LED index {index} out of range")
        return index

    def set_led(self, index: int, r: int, g: int, b: int) -> None:
        """Set one LED's colour."""
        self._leds[self._check(index)] = (r & 0xFF, g & 0xFF, b & 0xFF)

    def clear(self) -> None:
        """Turn every LED off in the buffer."""
        self._leds = [(0, 0, 0)] * LED_COUNT

    def write(self) -> bytes:
        """Send the buffer, three bytes per LED in G, R, B order, and return it."""
        data = bytes(channel for r, g, b in self._leds for channel in (g, r, b))
        if self.sink is not None:
            self.sink(data)
        return data

    def color_at(self, x: int, y: int) -> tuple[int, int, int]:
        """Return the colour stored for a grid coordinate."""
        return self._leds[self._check(get_index(x, y))]