"""Audio playback package for polyspeak.

This package provides MP3 playback and file output using pygame.
"""

from .player import AudioPlayer

__all__ = ["AudioPlayer"]
