"""Frame buffer and command set for an SSD1306 OLED driven over I2C."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Protocol

from .font import glyph

WIDTH = 128
HEIGHT = 64
I2C_ADDRESS = 0x3C

_DATA_PREFIX = 0x40
_COMMAND_PREFIX = 0x80


class Command(IntEnum):
    """SSD1306 command bytes."""

    SET_CONTRAST = 0x81
    SET_ENTIRE_ON = 0xA4
    SET_NORM_INV = 0xA6
    SET_DISP = 0xAE
    SET_MEM_ADDR = 0x20
    SET_COL_ADDR = 0x21
    SET_PAGE_ADDR = 0x22
    SET_DISP_START_LINE = 0x40
    SET_SEG_REMAP = 0xA0
    SET_MUX_RATIO = 0xA8
    SET_COM_OUT_DIR = 0xC0
    SET_DISP_OFFSET = 0xD3
    SET_COM_PIN_CFG = 0xDA
    SET_DISP_CLK_DIV = 0xD5
    SET_PRECHARGE = 0xD9
    SET_VCOM_DESEL = 0xDB
    SET_CHARGE_PUMP = 0x8D


class _Bus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...


def _u8(value: int) -> int:
    return int(value) & 0xFF


class SSD1306:
    """An SSD1306 display: a RAM buffer plus the I2C traffic that updates the panel.

    ``bus`` needs a ``write(address, data)`` method; with ``None`` nothing is sent.
    """

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        external_vcc: bool = False,
        address: int = I2C_ADDRESS,
        bus: Optional[_Bus] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.pages = height // 8
        self.address = address
        self.external_vcc = external_vcc
        self.bus = bus
        self._ram = bytearray(self.pages * width + 1)
        self._ram[0] = _DATA_PREFIX

    @property
    def buffer(self) -> bytes:
        """The RAM buffer as sent to the panel, including its leading data byte."""
        return bytes(self._ram)

    def _send(self, data: bytes) -> None:
        if self.bus is not None:
            self.bus.write(self.address, data)

    def command(self, command: int) -> None:
        """Send one command byte."""
        self._send(bytes([_COMMAND_PREFIX, _u8(command)]))

    def config(self) -> None:
        """Send the power-up configuration sequence."""
        for byte in (
            Command.SET_DISP | 0x00,
            Command.SET_MEM_ADDR, 0x01,
            Command.SET_DISP_START_LINE | 0x00,
            Command.SET_SEG_REMAP | 0x01,
            Command.SET_MUX_RATIO, HEIGHT - 1,
            Command.SET_COM_OUT_DIR | 0x08,
            Command.SET_DISP_OFFSET, 0x00,
            Command.SET_COM_PIN_CFG, 0x12,
            Command.SET_DISP_CLK_DIV, 0x80,
            Command.SET_PRECHARGE, 0xF1,
            Command.SET_VCOM_DESEL, 0x30,
            Command.SET_CONTRAST, 0xFF,
            Command.SET_ENTIRE_ON,
            Command.SET_NORM_INV,
            Command.SET_CHARGE_PUMP, 0x14,
            Command.SET_DISP | 0x01,
        ):
            self.command(byte)

    def send_data(self) -> None:
        """Set the full address window and push the RAM buffer to the panel."""
        for byte in (
            Command.SET_COL_ADDR, 0, self.width - 1,
            Command.SET_PAGE_ADDR, 0, self.pages - 1,
        ):
            self.command(byte)
        self._send(bytes(self._ram))

    @staticmethod
    def _locate(x: int, y: int) -> tuple[int, int]:
        x, y = _u8(x), _u8(y)
        return (y >> 3) + (x << 3) + 1, y & 0b111

    def pixel(self, x: int, y: int, value: bool) -> None:
        """Set or clear one pixel."""
        index, bit = self._locate(x, y)
        if index >= len(self._ram):
            raise IndexError(f"pixel ({x}, {y}) is outside the buffer")
        if value:
            self._ram[index] |= 1 << bit
        else:
            self._ram[index] &= ~(1 << bit) & 0xFF

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether one pixel is lit."""
        index, bit = self._locate(x, y)
        if index >= len(self._ram):
            raise IndexError(f"pixel ({x}, {y}) is outside the buffer")
        return bool(self._ram[index] & (1 << bit))

    def fill(self, value: bool) -> None:
        """Set every pixel to ``value``."""
        for y in range(self.height):
            for x in range(self.width):
                self.pixel(x, y, value)

    def rect(self, top: int, left: int, width: int, height: int, value: bool, fill: bool) -> None:
        """Draw a rectangle outline, optionally filled."""
        for x in range(left, left + width):
            self.pixel(x, top, value)
            self.pixel(x, top + height - 1, value)
        for y in range(top, top + height):
            self.pixel(left, y, value)
            self.pixel(left + width - 1, y, value)
        if fill:
            for x in range(left + 1, left + width - 1):
                for y in range(top + 1, top + height - 1):
                    self.pixel(x, y, value)

    def line(self, x0: int, y0: int, x1: int, y1: int, value: bool) -> None:
        """Draw a line between two points with Bresenham's algorithm."""
        x0, y0, x1, y1 = _u8(x0), _u8(y0), _u8(x1), _u8(y1)
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.pixel(x0, y0, value)
            if x0 == x1 and y0 == y1:
                break
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x0 = _u8(x0 + sx)
            if e2 < dx:
                err += dx
                y0 = _u8(y0 + sy)

    def hline(self, x0: int, x1: int, y: int, value: bool) -> None:
        """Draw a horizontal line from ``x0`` to ``x1`` inclusive."""
        for x in range(x0, x1 + 1):
            self.pixel(x, y, value)

    def vline(self, x: int, y0: int, y1: int, value: bool) -> None:
        """Draw a vertical line from ``y0`` to ``y1`` inclusive."""
        for y in range(y0, y1 + 1):
            self.pixel(x, y, value)

    def draw_char(self, char: str, x: int, y: int) -> None:
        """Draw one 8x8 character with its top-left corner at ``(x, y)``."""
        for i, column in enumerate(glyph(char)):
            for j in range(8):
                self.pixel(x + i, y + j, bool(column & (1 << j)))

    def draw_string(self, text: str, x: int, y: int) -> None:
        """Draw text, wrapping to the next line and stopping at the bottom edge."""
        x, y = _u8(x), _u8(y)
        for char in text:
            self.draw_char(char, x, y)
            x = _u8(x + 8)
            if x + 8 >= self.width:
                x = 0
                y = _u8(y + 8)
            if y + 8 >= self.height:
                break

    def render_text(self) -> str:
        """Return the frame as text: one line per row, ``#`` for lit pixels, ``.`` otherwise."""
        return "\n".join(
            "".join("#" if self.get_pixel(x, y) else "." for x in range(self.width))
            for y in range(self.height)
        )