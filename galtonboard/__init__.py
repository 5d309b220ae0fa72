"""Galton board simulation with an 8x8 font and a virtual SSD1306 frame buffer."""

__version__ = "0.1.0"
__all__ = ["board", "font", "ssd1306"]