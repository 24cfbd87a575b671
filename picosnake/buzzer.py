"""Non-blocking PWM buzzer: beeps are started and later stopped by ``update``."""

from __future__ import annotations

import time
from typing import Callable, Optional

DEFAULT_CLOCK_HZ = 125_000_000
_DUTY = 0.7


def _boot_clock() -> Callable[[], int]:
    start = time.monotonic_ns()
    return lambda: (time.monotonic_ns() - start) // 1_000_000


class Buzzer:
    """PWM state for a buzzer; ``clock`` returns milliseconds since start."""

    def __init__(
        self,
        clock: Optional[Callable[[], int]] = None,
        clock_hz: int = DEFAULT_CLOCK_HZ,
    ) -> None:
        self.clock = clock if clock is not None else _boot_clock()
        self.clock_hz = clock_hz
        self.clkdiv = 4.0
        self.wrap = 0
        self.level = 0
        self.frequency = 0
        self.active = False
        self.end_time = 0

    @property
    def sounding(self) -> bool:
        """Whether the PWM output is currently driving the buzzer."""
        return self.level > 0

    def turn_on(self, frequency: int) -> None:
        """Drive the buzzer at ``frequency`` Hz."""
        if frequency <= 0:
            raise ValueError(f"frequency must be positive, got {frequency}")
        self.frequency = frequency
        self.wrap = (self.clock_hz // frequency - 1) & 0xFFFFFFFF
        self.level = int(self.wrap * _DUTY)

    def turn_off(self) -> None:
        """Silence the output."""
        self.level = 0

    def start(self, frequency: int, duration_ms: int) -> None:
        """Begin a beep that ``update`` ends after ``duration_ms``."""
        self.turn_off()
        self.turn_on(frequency)
        self.active = True
        self.end_time = self.clock() + duration_ms

    def stop(self) -> None:
        """End any beep immediately."""
        self.turn_off()
        self.active = False

    def update(self) -> None:
        """Stop the current beep once its time is up."""
        if self.active and self.clock() >= self.end_time:
            self.stop()