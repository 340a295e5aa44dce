"""Audio player for cross-platform MP3 playback using pygame."""

# ruff: noqa: E402
import os

# Suppress pygame's annoying welcome message BEFORE any pygame import
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import warnings

# Suppress pygame's pkg_resources deprecation warning spam
warnings.filterwarnings("ignore", category=UserWarning, module="pygame.pkgdata")

import asyncio
import io
import logging
from pathlib import Path

import pygame

from ..tts.errors import TTSPlaybackError

logger = logging.getLogger(__name__)

# Ticks per second while waiting for playback to finish
POLL_RATE = 10


class AudioPlayer:
    """Cross-platform audio player using pygame.

    Provides methods to play audio from bytes or save to file. The mixer is
    only opened on first playback, so saving to a file works on machines
    without an audio device.
    """

    def __init__(self) -> None:
        self._mixer_ready = False

    def _ensure_mixer(self) -> None:
        """Open the pygame mixer if needed.

        Raises:
            TTSPlaybackError: If pygame mixer fails to initialize.
        """
        if self._mixer_ready:
            return
        try:
            pygame.mixer.init()
        except pygame.error as e:
            raise TTSPlaybackError(
                f"Failed to initialize pygame audio mixer: {e}", e
            ) from e
        self._mixer_ready = True

    def play_bytes(self, audio_data: bytes) -> None:
        """Play audio from bytes through system speakers (blocking).

        Args:
            audio_data: Audio data in MP3 format.

        Raises:
            ValueError: If no audio data provided.
            TTSPlaybackError: If audio decoding or playback fails.
        """
        if not audio_data:
            raise ValueError("No audio data provided")

        self._ensure_mixer()

        try:
            # Create in-memory file-like object
            audio_file = io.BytesIO(audio_data)

            # Load and play audio
            pygame.mixer.music.load(audio_file)
            pygame.mixer.music.play()

            # Wait for playback to complete
            clock = pygame.time.Clock()
            while pygame.mixer.music.get_busy():
                clock.tick(POLL_RATE)

        except pygame.error as e:
            raise TTSPlaybackError(f"Failed to play audio: {e}", e) from e

    async def play_bytes_async(self, audio_data: bytes) -> None:
        """Play audio from bytes without blocking the event loop.

        Args:
            audio_data: Audio data in MP3 format.

        Raises:
            ValueError: If no audio data provided.
            TTSPlaybackError: If audio decoding or playback fails.
        """
        await asyncio.to_thread(self.play_bytes, audio_data)

    def save_to_file(self, audio_data: bytes, filepath: str | Path) -> None:
        """Save audio bytes to a file.

        Args:
            audio_data: Audio data to save.
            filepath: Path where the audio file should be saved.

        Raises:
            ValueError: If no audio data provided.
            OSError: If file cannot be written.
        """
        if not audio_data:
            raise ValueError("No audio data provided")

        # Convert to Path object if string
        filepath = Path(filepath)

        try:
            # Create parent directories if they don't exist
            filepath.parent.mkdir(parents=True, exist_ok=True)

            # Write audio data to file
            filepath.write_bytes(audio_data)

        except OSError as e:
            raise OSError(f"Failed to save audio to {filepath}: {e}") from e

        logger.debug(f"Wrote {len(audio_data)} bytes to {filepath}")
