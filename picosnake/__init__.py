"""Snake on a 5x5 LED grid, with software models of an SSD1306 display, buzzer and LED matrix."""

__version__ = "0.1.0"
__all__ = ["__version__"]