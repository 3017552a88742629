"""Framebuffer, font, screen layouts, random numbers, flash layout and transaction serialization of a small hardware wallet."""

__version__ = "0.1.0"
__all__ = ["fonts", "util", "rng", "serialno", "oled", "layout", "memory", "transaction"]