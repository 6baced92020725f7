"""Pixel art editing engine: flood fill, color masking and sprite sheet assembly"""

__version__ = "1.0.0"
